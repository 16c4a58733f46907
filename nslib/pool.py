"""An ordered pool of heterogeneous objects."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


class Pool:
    """Holds objects of any type in insertion order."""

    __slots__ = ("_objects",)

    def __init__(self, *args: Any) -> None:
        self._objects: deque[Any] = deque()
        for item in args:
            self.add(item)

    def add(self, item: Any) -> None:
        """Put ``item`` at the end of the pool."""
        self._objects.append(item)

    def acquire(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build an object with ``factory(*args, **kwargs)``, add it and return it."""
        obj = factory(*args, **kwargs)
        self.add(obj)
        return obj

    def at(self, index: int) -> Any:
        """Return the object at ``index``."""
        if not 0 <= index < len(self._objects):
            raise IndexError("pool index out of range")
        return self._objects[index]

    def remove_at(self, index: int) -> None:
        """Remove the object at ``index``."""
        if not 0 <= index < len(self._objects):
            raise IndexError("pool index out of range")
        del self._objects[index]

    def release(self) -> None:
        """Drop every object in the pool."""
        self._objects.clear()

    def size(self) -> int:
        return len(self._objects)

    def is_empty(self) -> bool:
        return not self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._objects)