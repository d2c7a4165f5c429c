"""Two-dimensional positions and sizes used by the game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2f:
    """A point or direction with floating-point coordinates."""

    x: float = 0.0
    y: float = 0.0

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` pair for the rendering backend."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Size2f:
    """A width and height with floating-point values."""

    width: float = 0.0
    height: float = 0.0

    def to_tuple(self) -> tuple[float, float]:
        """Return the size as a ``(width, height)`` pair for the rendering backend."""
        return (self.width, self.height)


def vector2f(x: float, y: float) -> Vector2f:
    """Build a vector from two coordinates."""
    return Vector2f(float(x), float(y))


def size2f(width: float, height: float) -> Size2f:
    """Build a size from a width and a height."""
    return Size2f(float(width), float(height))


def vector_from_tuple(value: Sequence[float]) -> Vector2f:
    """Build a vector from an ``(x, y)`` pair."""
    x, y = value
    return Vector2f(float(x), float(y))


def size_from_tuple(value: Sequence[float]) -> Size2f:
    """Build a size from a ``(width, height)`` pair."""
    width, height = value
    return Size2f(float(width), float(height))