"""Placement of rectangles and single-line text inside a bounding rectangle.

Every function here is pure: results depend only on the arguments, nothing is
logged and oversized content is never clamped. Callers that need the result
to stay inside ``bounds`` trim their content first.
"""

from __future__ import annotations

from enum import Enum

from .geometry import Point, Rectangle


class AlignmentError(ValueError):
    """Base class for alignment failures."""


class InvalidAlignment(AlignmentError):
    """An alignment value is not one of the known enumerators."""


class InvalidBounds(AlignmentError):
    """The bounding rectangle has a negative width or height."""

    def __init__(self, bounds: Rectangle) -> None:
        super().__init__(f"the bounding rectangle {bounds} has a negative size")
        self.bounds = bounds


class AreaOutOfBounds(AlignmentError):
    """The area to align is not enclosed by the bounding rectangle."""

    def __init__(self, bounds: Rectangle, area: Rectangle) -> None:
        super().__init__(
            f"the requested area {area} falls outside of the provided rectangle {bounds}"
        )
        self.bounds = bounds
        self.area = area


class MultilineText(AlignmentError):
    """Text passed for alignment spans more than one line."""

    def __init__(self, text: str) -> None:
        super().__init__(f"the text cannot contain newline characters, got {text!r}")
        self.text = text


class Anchor(Enum):
    """Where along one axis content is placed."""

    START = "start"
    CENTER = "center"
    END = "end"


class HorizontalAlignment(Enum):
    """Horizontal placement."""

    LEFT = Anchor.START
    CENTER = Anchor.CENTER
    RIGHT = Anchor.END

    @property
    def anchor(self) -> Anchor:
        return self.value

    def __str__(self) -> str:
        return "Horizontal" + self.name.capitalize()


class VerticalAlignment(Enum):
    """Vertical placement."""

    TOP = Anchor.START
    MIDDLE = Anchor.CENTER
    BOTTOM = Anchor.END

    @property
    def anchor(self) -> Anchor:
        return self.value

    def __str__(self) -> str:
        return "Vertical" + self.name.capitalize()


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, which would push oversized centered content one
    cell further past the start edge.
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def align(
    available_start: int, available_length: int, needed_length: int, anchor: Anchor
) -> int:
    """Return the offset at which a span of needed_length should begin.

    The result is not clamped: when needed_length exceeds available_length
    the span extends outside the available one.
    """
    if anchor is Anchor.START:
        return available_start
    elif anchor is Anchor.CENTER:
        return available_start + trunc_div(available_length - needed_length, 2)
    elif anchor is Anchor.END:
        return available_start + available_length - needed_length
    raise InvalidAlignment(f"unsupported anchor {anchor!r}")


def _check_alignments(horizontal: object, vertical: object) -> None:
    if not isinstance(horizontal, HorizontalAlignment):
        raise InvalidAlignment(
            f"unsupported horizontal alignment HorizontalUnknown ({horizontal!r})"
        )
    if not isinstance(vertical, VerticalAlignment):
        raise InvalidAlignment(
            f"unsupported vertical alignment VerticalUnknown ({vertical!r})"
        )


def align_rectangle(
    bounds: Rectangle,
    area: Rectangle,
    horizontal: HorizontalAlignment,
    vertical: VerticalAlignment,
) -> Rectangle:
    """Position a rectangle the size of area inside bounds.

    The position of area only matters for the containment check; the result
    keeps its size and takes its position from the alignments.

    Raises:
        InvalidAlignment: horizontal or vertical is not a known alignment.
        InvalidBounds: bounds has a negative width or height.
        AreaOutOfBounds: area is not enclosed by bounds.
    """
    _check_alignments(horizontal, vertical)
    if bounds.is_inverted:
        raise InvalidBounds(bounds)
    if area.is_inverted or not bounds.contains(area):
        raise AreaOutOfBounds(bounds, area)

    width = area.width
    height = area.height
    x = align(bounds.min.x, bounds.width, width, horizontal.anchor)
    y = align(bounds.min.y, bounds.height, height, vertical.anchor)
    return Rectangle(Point(x, y), Point(x + width, y + height))


def align_text(
    bounds: Rectangle,
    text: str,
    horizontal: HorizontalAlignment,
    vertical: VerticalAlignment,
) -> Point:
    """Return the cell where rendering of a single line of text should start.

    Text longer than bounds is not rejected; callers trim it before drawing.

    Raises:
        MultilineText: text contains a newline.
        InvalidAlignment: horizontal or vertical is not a known alignment.
        InvalidBounds: bounds has a negative width or height.
    """
    if "\n" in text:
        raise MultilineText(text)
    _check_alignments(horizontal, vertical)
    if bounds.is_inverted:
        raise InvalidBounds(bounds)

    x = align(bounds.min.x, bounds.width, len(text), horizontal.anchor)
    y = align(bounds.min.y, bounds.height, 1, vertical.anchor)
    return Point(x, y)


_HORIZONTAL_NAMES = {h.name.lower(): h for h in HorizontalAlignment} | {
    str(h).lower(): h for h in HorizontalAlignment
}
_VERTICAL_NAMES = {v.name.lower(): v for v in VerticalAlignment} | {
    str(v).lower(): v for v in VerticalAlignment
}


def parse_horizontal(name: str) -> HorizontalAlignment:
    """Parse 'left', 'center', 'right' (or 'HorizontalLeft' etc.), any case."""
    try:
        return _HORIZONTAL_NAMES[name.strip().lower()]
    except KeyError:
        raise InvalidAlignment(f"unknown horizontal alignment {name!r}") from None


def parse_vertical(name: str) -> VerticalAlignment:
    """Parse 'top', 'middle', 'bottom' (or 'VerticalTop' etc.), any case."""
    try:
        return _VERTICAL_NAMES[name.strip().lower()]
    except KeyError:
        raise InvalidAlignment(f"unknown vertical alignment {name!r}") from None
