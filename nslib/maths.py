"""Angle conversion helpers."""

from __future__ import annotations

PI: float = 3.14159265359
"""The value of pi used throughout the library."""


def deg_to_rad(deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return deg * (PI / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert an angle in radians to degrees."""
    return rad * (180.0 / PI)