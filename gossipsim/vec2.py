"""Two-dimensional vectors and the helpers the simulation uses on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Vec2", "dot_product", "magnitude", "angle_of"]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)


def dot_product(first: Vec2, second: Vec2) -> float:
    """Return the dot product of two vectors."""
    return first.x * second.x + first.y * second.y


def magnitude(vec: Vec2) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(vec.x * vec.x + vec.y * vec.y)


def angle_of(vec: Vec2) -> float:
    """Return the angle of a vector from the positive x axis, in radians."""
    return math.atan2(vec.y, vec.x)