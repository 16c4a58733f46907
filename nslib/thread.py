"""Threads that start on construction and hand back a result, plus message passing."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Hashable
from typing import Any


class ThreadExit(Exception):
    """Raised by :meth:`Thread.exit_with` to leave a worker thread with a value."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(value)
        self.value = value


class Thread:
    """Run ``target(*args, **kwargs)`` in a new thread, started immediately."""

    _messages: dict[Hashable, Any] = {}
    _messages_cond = threading.Condition()

    def __init__(self, target: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        if not callable(target):
            raise TypeError("target must be callable")
        self._target = target
        self._args = args
        self._kwargs = kwargs
        self._result: Any = None
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._result = self._target(*self._args, **self._kwargs)
        except ThreadExit as stop:
            self._result = stop.value
        except BaseException as error:  # handed back to the joining caller
            self._error = error

    def get(self) -> Any:
        """Wait for the thread to finish and return its result.

        The result is what the target returned, or the value given to
        :meth:`exit_with`. An exception raised by the target is raised here.
        """
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result

    def wait(self) -> None:
        """Wait for the thread to finish, discarding its result."""
        self._thread.join()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    @staticmethod
    def exit_with(value: Any) -> Any:
        """Leave the current worker thread with ``value`` as its result.

        Called from the main thread it does nothing but return ``value``, so the
        caller must return it itself.
        """
        if threading.current_thread() is threading.main_thread():
            return value
        raise ThreadExit(value)

    @staticmethod
    def send(message_id: Hashable, value: Any) -> None:
        """Post ``value`` under ``message_id`` for a later :meth:`receive`.

        An id stays taken until its message is received; reusing it before
        then raises ValueError.
        """
        with Thread._messages_cond:
            if message_id in Thread._messages:
                raise ValueError(f"message id {message_id!r} is already pending")
            Thread._messages[message_id] = value
            Thread._messages_cond.notify_all()

    @staticmethod
    def receive(message_id: Hashable, timeout: float | None = None) -> Any:
        """Wait for the message posted under ``message_id``, remove it and return it.

        With a ``timeout`` in seconds, raise TimeoutError if none arrives in time.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with Thread._messages_cond:
            while message_id not in Thread._messages:
                if deadline is None:
                    Thread._messages_cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError(f"no message under {message_id!r}")
                Thread._messages_cond.wait(remaining)
            return Thread._messages.pop(message_id)