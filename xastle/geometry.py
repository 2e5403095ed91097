"""Two-dimensional vectors and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle given by its top-left corner and size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def position(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def to_float(self) -> FloatRect:
        return FloatRect(float(self.left), float(self.top), float(self.width), float(self.height))


@dataclass(frozen=True)
class FloatRect:
    """A floating-point rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def position(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def to_int(self) -> IntRect:
        """Convert to an integer rectangle, truncating each component."""
        return IntRect(int(self.left), int(self.top), int(self.width), int(self.height))

    def _span(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            min(self.top, bottom),
            max(self.left, right),
            max(self.top, bottom),
        )

    def intersection(self, other: FloatRect) -> Optional[FloatRect]:
        """Return the overlap with other, or None when they do not overlap."""
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        left = max(ax0, bx0)
        top = max(ay0, by0)
        right = min(ax1, bx1)
        bottom = min(ay1, by1)
        if left < right and top < bottom:
            return FloatRect(left, top, right - left, bottom - top)
        return None