"""A shared owning reference with an explicit use count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

MAX_SHARES = 65535
"""The highest number of owners a value may have."""


@dataclass
class _Control(Generic[T]):
    value: T | None
    count: int


class SmartPtr(Generic[T]):
    """Shares one value between owners; the value is dropped when the last lets go."""

    __slots__ = ("_control",)

    def __init__(self, value: T | None = None) -> None:
        self._control: _Control[T] | None = None if value is None else _Control(value, 1)

    def _live(self) -> _Control[T] | None:
        control = self._control
        if control is None or control.count <= 0:
            return None
        return control

    def share(self) -> SmartPtr[T]:
        """Return a new owner of the same value, raising the use count by one."""
        other: SmartPtr[T] = SmartPtr()
        control = self._live()
        if control is not None:
            if control.count >= MAX_SHARES:
                raise OverflowError("too many owners of one value")
            control.count += 1
            other._control = control
        return other

    def get(self) -> T | None:
        """Return the value, or None if this pointer holds nothing."""
        control = self._live()
        return None if control is None else control.value

    def val(self) -> T:
        """Return the value; raises ValueError if this pointer holds nothing."""
        control = self._live()
        if control is None:
            raise ValueError("SmartPtr holds no value")
        return control.value  # type: ignore[return-value]

    def how_many(self) -> int:
        """Return the number of owners of the value, zero if empty."""
        control = self._live()
        return 0 if control is None else control.count

    def destroy(self) -> None:
        """Give up this pointer's share; the last owner drops the value."""
        control = self._live()
        if control is None:
            self._control = None
            return
        control.count -= 1
        if control.count == 0:
            control.value = None
        self._control = None

    def destroy_force(self) -> None:
        """Drop the value for every owner at once."""
        control = self._control
        if control is not None:
            control.value = None
            control.count = 0
        self._control = None

    def __bool__(self) -> bool:
        return self._live() is not None

    def __repr__(self) -> str:
        control = self._live()
        if control is None:
            return "SmartPtr()"
        return f"SmartPtr({control.value!r}, owners={control.count})"


__all__: list[Any] = ["SmartPtr", "MAX_SHARES"]