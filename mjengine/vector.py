"""Two-dimensional vector used for positions, sizes and offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    ONE: ClassVar["Vector2"]

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector2:
        return Vector2(self.x * value, self.y * value)

    def __truediv__(self, value: float) -> Vector2:
        return Vector2(self.x / value, self.y / value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)