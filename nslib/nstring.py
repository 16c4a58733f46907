"""A mutable string with comparison, joining and erasing helpers."""

from __future__ import annotations

import random
from functools import total_ordering
from typing import Union

StringLike = Union["String", str]


def _text_of(value: StringLike | None) -> str:
    if value is None:
        return ""
    if isinstance(value, String):
        return value._text
    if isinstance(value, str):
        return value
    raise TypeError(f"expected String or str, got {type(value).__name__}")


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


@total_ordering
class String:
    """Mutable text value.

    A string built with no data, or cleared, holds no text and is empty.
    """

    __slots__ = ("_text",)

    def __init__(self, data: StringLike | None = None) -> None:
        self._text = _text_of(data)

    # Searching and comparing

    def contains(self, other: StringLike) -> bool:
        """Return True if ``other`` occurs anywhere in this string."""
        return _text_of(other) in self._text

    def compare_with(self, other: StringLike) -> int:
        """Return a negative, zero or positive number, like a three-way compare."""
        return _sign(self._text, _text_of(other))

    def compare_n_with(self, other: StringLike, n: int) -> int:
        """Three-way compare of at most the first ``n`` characters."""
        if n < 0:
            raise ValueError("n must not be negative")
        return _sign(self._text[:n], _text_of(other)[:n])

    def is_equal_with(self, other: StringLike) -> bool:
        return self.compare_with(other) == 0

    def is_n_equal_with(self, other: StringLike, n: int) -> bool:
        return self.compare_n_with(other, n) == 0

    # Modifying

    def replace(self, other: StringLike) -> None:
        """Overwrite the content with that of ``other``."""
        self._text = _text_of(other)

    def append(self, other: StringLike) -> None:
        """Join ``other`` onto the end of this string."""
        self._text += _text_of(other)

    def swap(self, other: String) -> None:
        """Exchange contents with another String."""
        if not isinstance(other, String):
            raise TypeError("can only swap with another String")
        self._text, other._text = other._text, self._text

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Randomly permute the characters in place."""
        chars = list(self._text)
        (rng or random).shuffle(chars)
        self._text = "".join(chars)

    def erase(self, index: int) -> None:
        """Remove the character at ``index``; an index past the end does nothing."""
        if index < 0:
            raise IndexError("index must not be negative")
        if index >= len(self._text):
            return
        self._text = self._text[:index] + self._text[index + 1:]

    def clear(self) -> None:
        self._text = ""

    # Access

    def is_empty(self) -> bool:
        return not self._text

    def at(self, index: int) -> str:
        if not 0 <= index < len(self._text):
            raise IndexError("string index out of range")
        return self._text[index]

    def first(self) -> str:
        if not self._text:
            raise IndexError("first() on an empty string")
        return self._text[0]

    def last(self) -> str:
        if not self._text:
            raise IndexError("last() on an empty string")
        return self._text[-1]

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"String({self._text!r})"

    def __getitem__(self, index: int | slice) -> str | String:
        if isinstance(index, slice):
            return String(self._text[index])
        return self._text[index]

    def __iter__(self):
        return iter(self._text)

    # Arithmetic

    def __add__(self, other: StringLike) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return String(self._text + _text_of(other))

    def __radd__(self, other: str) -> String:
        if not isinstance(other, str):
            return NotImplemented
        return String(other + self._text)

    def __mul__(self, count: int) -> String:
        """Repeat the text ``count`` times; a count of zero keeps one copy."""
        if not isinstance(count, int) or isinstance(count, bool):
            return NotImplemented
        if count < 0:
            raise ValueError("count must not be negative")
        return String(self._text * max(count, 1))

    __rmul__ = __mul__

    def __iadd__(self, other: StringLike) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        self.append(other)
        return self

    def __imul__(self, count: int) -> String:
        result = self.__mul__(count)
        if result is NotImplemented:
            return NotImplemented
        self._text = result._text
        return self

    # Ordering

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return self._text == _text_of(other)

    def __lt__(self, other: StringLike) -> bool:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return self._text < _text_of(other)

    def __hash__(self) -> int:
        return hash(self._text)