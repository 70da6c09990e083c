"""Integer cell-grid geometry shared by the aligner and the preview."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell coordinate."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned cell rectangle.

    ``min`` is inclusive and ``max`` is exclusive, so a rectangle covering a
    single cell at the origin is ``Rectangle(Point(0, 0), Point(1, 1))``.
    """

    min: Point
    max: Point

    @classmethod
    def from_coords(cls, x0: int, y0: int, x1: int, y1: int) -> Rectangle:
        """Build a rectangle from corner coordinates, swapping them if needed."""
        if x0 > x1:
            x0, x1 = x1, x0
        if y0 > y1:
            y0, y1 = y1, y0
        return cls(Point(x0, y0), Point(x1, y1))

    @property
    def width(self) -> int:
        return self.max.x - self.min.x

    @property
    def height(self) -> int:
        return self.max.y - self.min.y

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    @property
    def is_inverted(self) -> bool:
        """True when max lies before min on either axis."""
        return self.width < 0 or self.height < 0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: Rectangle) -> bool:
        """Check if other lies entirely within this rectangle."""
        return (
            other.min.x >= self.min.x
            and other.min.y >= self.min.y
            and other.max.x <= self.max.x
            and other.max.y <= self.max.y
        )

    def translate(self, offset: Point) -> Rectangle:
        """Return the rectangle moved by offset."""
        return Rectangle(self.min + offset, self.max + offset)

    def points(self) -> Iterator[Point]:
        """Yield every cell in the rectangle, row by row."""
        for y in range(self.min.y, self.max.y):
            for x in range(self.min.x, self.max.x):
                yield Point(x, y)
