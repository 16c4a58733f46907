"""Three-component vectors in double and single precision."""

from __future__ import annotations

import math
import struct
from numbers import Real
from typing import Iterator, Union

Operand = Union["Vector3d", float, int]


class Vector3d:
    """A 3D vector of double-precision components."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = self._coerce(x)
        self.y = self._coerce(y)
        self.z = self._coerce(z)

    @staticmethod
    def _coerce(value: float) -> float:
        return float(value)

    def _make(self, x: float, y: float, z: float) -> Vector3d:
        return type(self)(x, y, z)

    # Geometry

    def cross(self, other: Vector3d) -> Vector3d:
        """Return the cross product ``self x other``."""
        return self._make(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vector3d:
        """Return a unit vector in the same direction; a zero vector is returned unchanged."""
        norm = self.norm()
        if norm > 0:
            return self / norm
        return self._make(self.x, self.y, self.z)

    def norm(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def angle(self, other: Vector3d) -> float:
        """Return the angle to ``other`` in radians."""
        norms = self.norm() * other.norm()
        if norms == 0:
            raise ValueError("angle is undefined for a zero vector")
        cosine = max(-1.0, min(1.0, self.dot(other) / norms))
        return math.acos(cosine)

    def distance(self, other: Vector3d) -> float:
        """Return the Euclidean distance to ``other``."""
        return (other - self).norm()

    def dot(self, other: Vector3d) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scalar(self, other: Vector3d, angle: float = 0.0) -> float:
        """Return ``|self| * |other| * sin(angle)``."""
        return self.norm() * other.norm() * math.sin(angle)

    def same_direction(self, other: Vector3d, angle: float = 0.0) -> bool:
        return self.scalar(other, angle) > 0.0

    def opposite_direction(self, other: Vector3d, angle: float = 0.0) -> bool:
        return self.scalar(other, angle) < 0.0

    def is_orthogonal(self, other: Vector3d, angle: float = 0.0) -> bool:
        return self.scalar(other, angle) == 0.0

    # Arithmetic

    def _components(self, other: Operand) -> tuple[float, float, float] | None:
        if isinstance(other, Vector3d):
            return other.x, other.y, other.z
        if isinstance(other, Real) and not isinstance(other, bool):
            value = float(other)
            return value, value, value
        return None

    def __add__(self, other: Operand) -> Vector3d:
        comps = self._components(other)
        if comps is None:
            return NotImplemented
        return self._make(self.x + comps[0], self.y + comps[1], self.z + comps[2])

    def __radd__(self, other: Operand) -> Vector3d:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> Vector3d:
        comps = self._components(other)
        if comps is None:
            return NotImplemented
        return self._make(self.x - comps[0], self.y - comps[1], self.z - comps[2])

    def __mul__(self, other: Operand) -> Vector3d:
        """Component-wise product with a vector, or scaling by a number."""
        comps = self._components(other)
        if comps is None:
            return NotImplemented
        return self._make(self.x * comps[0], self.y * comps[1], self.z * comps[2])

    def __rmul__(self, other: Operand) -> Vector3d:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> Vector3d:
        """Component-wise quotient with a vector, or division by a number."""
        comps = self._components(other)
        if comps is None:
            return NotImplemented
        return self._make(self.x / comps[0], self.y / comps[1], self.z / comps[2])

    def __neg__(self) -> Vector3d:
        return self._make(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vector3d:
        return self._make(self.x, self.y, self.z)

    # Comparison and access

    def __eq__(self, other: object) -> bool:
        """Equal to a vector with the same components, or to a number all components equal."""
        if isinstance(other, Vector3d):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        if isinstance(other, Real) and not isinstance(other, bool):
            return self.x == other and self.y == other and self.z == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


_FLOAT32 = struct.Struct("<f")


class Vector3f(Vector3d):
    """A 3D vector whose components are kept at single precision."""

    __slots__ = ()

    @staticmethod
    def _coerce(value: float) -> float:
        return _FLOAT32.unpack(_FLOAT32.pack(float(value)))[0]