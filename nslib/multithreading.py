"""A per-thread registry of named worker threads."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any

from nslib.thread import Thread

_local = threading.local()


def _registry() -> dict[Hashable, Thread]:
    threads = getattr(_local, "threads", None)
    if threads is None:
        threads = {}
        _local.threads = threads
    return threads


def _lookup(name: Hashable) -> Thread:
    try:
        return _registry()[name]
    except KeyError:
        raise KeyError(f"no thread named {name!r}") from None


def create(name: Hashable, target: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Start ``target(*args, **kwargs)`` in a new thread registered under ``name``.

    The registry belongs to the calling thread. A name already in use raises
    ValueError and starts nothing.
    """
    threads = _registry()
    if name in threads:
        raise ValueError(f"a thread named {name!r} already exists")
    threads[name] = Thread(target, *args, **kwargs)


def get_one(name: Hashable) -> Any:
    """Wait for the named thread and return its result; it stays registered."""
    return _lookup(name).get()


def wait_one(name: Hashable) -> None:
    """Wait for the named thread to finish and remove it from the registry."""
    _lookup(name).wait()
    del _registry()[name]


def is_alive(name: Hashable) -> bool:
    """Return True while a thread is registered under ``name``."""
    return name in _registry()


def exists(name: Hashable) -> bool:
    """Return True if a thread is registered under ``name``."""
    return name in _registry()