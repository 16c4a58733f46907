"""A text output stream that can hold back or record what is written to it."""

from __future__ import annotations

import enum
import sys
import threading
from collections.abc import Callable
from numbers import Integral, Real
from typing import Any, TextIO

from nslib.nstring import String


class StreamMode(enum.Enum):
    """How a stream treats text written to it."""

    NORMAL = "normal"
    KEEP = "keep"
    """Store the text without displaying it."""
    SAVE = "save"
    """Display the text and store it too."""


def _format(value: Any) -> str:
    if isinstance(value, (str, String)):
        return str(value)
    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, Real):
        return f"{float(value):.6f}"
    raise TypeError(f"cannot write {type(value).__name__} to a stream")


class Streams:
    """Writes text to ``output`` and reads characters from ``source``.

    Either defaults to the standard stream of the moment it is used.
    """

    def __init__(self, output: TextIO | None = None, source: TextIO | None = None) -> None:
        self._output = output
        self._source = source
        self._text: list[str] = []
        self.mode = StreamMode.NORMAL

    @property
    def output(self) -> TextIO:
        return sys.stdout if self._output is None else self._output

    @property
    def source(self) -> TextIO:
        return sys.stdin if self._source is None else self._source

    def _emit(self, text: str) -> None:
        out = self.output
        out.write(text)
        out.flush()

    def write(self, value: Any) -> Streams:
        """Write a string, String or number according to the current mode."""
        text = _format(value)
        if self.mode is not StreamMode.NORMAL:
            self._text.append(text)
        if self.mode is not StreamMode.KEEP:
            self._emit(text)
        return self

    def __lshift__(self, value: Any) -> Streams:
        """Write ``value``; a StreamMode switches mode, a callable is applied to the stream."""
        if isinstance(value, StreamMode):
            self.mode = value
        elif callable(value) and not isinstance(value, String):
            manipulator: Callable[[Streams], Any] = value
            manipulator(self)
        else:
            self.write(value)
        return self

    def read_char(self) -> str:
        """Read one character from the source; an empty string at end of input."""
        return self.source.read(1)

    def keep_mode(self) -> None:
        """Store what is written afterwards without displaying it."""
        self.mode = StreamMode.KEEP

    def save_mode(self) -> None:
        """Display what is written afterwards and store it as well."""
        self.mode = StreamMode.SAVE

    def reset_mode(self) -> None:
        """Go back to displaying text without storing it."""
        self.mode = StreamMode.NORMAL

    def clear(self) -> None:
        """Forget the stored text."""
        self._text.clear()

    def flush(self) -> None:
        """Display the stored text; in save mode it is then forgotten."""
        text = self.stocked_text()
        if text:
            self._emit(text)
        if self.mode is StreamMode.SAVE:
            self.clear()

    def stocked_text(self) -> str:
        """Return the text stored so far."""
        return "".join(self._text)


_local = threading.local()


def get_stream() -> Streams:
    """Return the calling thread's standard stream."""
    stream = getattr(_local, "stream", None)
    if stream is None:
        stream = Streams()
        _local.stream = stream
    return stream