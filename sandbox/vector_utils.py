#!/usr/bin/env python3
"""
Immutable 2D vector used for positions, velocities and forces.

Vec2 is a tuple, so it can be handed straight to pygame or unpacked as (x, y).
Arithmetic operators are overridden to mean vector math rather than tuple
concatenation/repetition.
"""
import math
from typing import NamedTuple

from .constants import SET_LENGTH_EPSILON


class Vec2(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other[0], self.y + other[1])

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other[0], self.y - other[1])

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, k: float) -> "Vec2":
        return Vec2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vec2":
        return Vec2(self.x / k, self.y / k)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vec2") -> float:
        return math.hypot(other[0] - self.x, other[1] - self.y)

    def set_length(self, length: float) -> "Vec2":
        """Return the parallel vector of the given length (zero if self has no direction)."""
        current = self.length()
        if current < SET_LENGTH_EPSILON:
            return ZERO
        return self * (length / current)


ZERO = Vec2(0.0, 0.0)
