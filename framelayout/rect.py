"""Axis-aligned rectangles defined by a top-left corner and a size."""

from __future__ import annotations

from dataclasses import dataclass

from framelayout.num import NumKind, to_float32


@dataclass
class Rect:
    """A rectangle with top-left corner (x, y), width w and height h."""

    x: float | int
    y: float | int
    w: float | int
    h: float | int

    def to_f32(self) -> Rect:
        """Return a copy with every field rounded to single precision."""
        return Rect(
            to_float32(float(self.x)),
            to_float32(float(self.y)),
            to_float32(float(self.w)),
            to_float32(float(self.h)),
        )

    @classmethod
    def from_f32(cls, rect: Rect, kind: NumKind) -> Rect:
        """Convert a floating-point rectangle to the given number kind."""
        return cls(
            kind.from_f32(rect.x),
            kind.from_f32(rect.y),
            kind.from_f32(rect.w),
            kind.from_f32(rect.h),
        )

    def contains(self, x: float | int, y: float | int) -> bool:
        """Whether the point (x, y) lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """Whether this rectangle and ``other`` share any interior area."""
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )

    def shrink(self, margin: float | int) -> Rect:
        """Move every edge inward by ``margin``; sizes never go below zero."""
        zero = 0.0 if isinstance(self.w, float) or isinstance(margin, float) else 0
        return Rect(
            self.x + margin,
            self.y + margin,
            max(self.w - margin * 2, zero),
            max(self.h - margin * 2, zero),
        )

    def expand(self, margin: float | int) -> Rect:
        """Move every edge outward by ``margin``."""
        return Rect(
            self.x - margin,
            self.y - margin,
            self.w + margin * 2,
            self.h + margin * 2,
        )