"""Placement of rectangles and single-line text inside terminal cell regions.

Example usage:

    from cellalign import (
        HorizontalAlignment,
        Rectangle,
        VerticalAlignment,
        align_text,
    )

    bounds = Rectangle.from_coords(0, 0, 20, 3)
    start = align_text(
        bounds, "hello", HorizontalAlignment.CENTER, VerticalAlignment.MIDDLE
    )
"""

from .common.align import (
    AlignmentError,
    AreaOutOfBounds,
    HorizontalAlignment,
    InvalidAlignment,
    InvalidBounds,
    MultilineText,
    VerticalAlignment,
    align_rectangle,
    align_text,
)
from .common.geometry import Point, Rectangle

__all__ = [
    "AlignmentError",
    "AreaOutOfBounds",
    "HorizontalAlignment",
    "InvalidAlignment",
    "InvalidBounds",
    "MultilineText",
    "Point",
    "Rectangle",
    "VerticalAlignment",
    "align_rectangle",
    "align_text",
]
