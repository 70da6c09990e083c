"""Terminal preview of aligned content with blessed."""

from __future__ import annotations

import logging

from blessed import Terminal

from ..common.align import (
    HorizontalAlignment,
    VerticalAlignment,
    align_rectangle,
    align_text,
)
from ..common.constants import BORDER_CHAR, EMPTY_CHAR, FILL_CHAR
from ..common.geometry import Point, Rectangle

_logger = logging.getLogger(__name__)


class TerminalUI:
    def __init__(self, terminal: Terminal):
        self.term = terminal

    def preview_lines(
        self,
        bounds: Rectangle,
        text: str,
        horizontal: HorizontalAlignment,
        vertical: VerticalAlignment,
    ) -> list[str]:
        """Draw bounds framed by a border with text placed at its aligned start.

        Characters that fall outside bounds are not drawn.
        """
        start = align_text(bounds, text, horizontal, vertical)
        cells: dict[Point, str] = {}
        dropped = 0
        for i, char in enumerate(text):
            pos = start + Point(i, 0)
            if bounds.contains(Rectangle(pos, pos + Point(1, 1))):
                cells[pos] = self.term.bold_green(char)
            else:
                dropped += 1
        if dropped:
            _logger.debug("Text %r overflows %s by %d cells", text, bounds, dropped)
        return self._draw(bounds, cells)

    def box_lines(
        self,
        bounds: Rectangle,
        area: Rectangle,
        horizontal: HorizontalAlignment,
        vertical: VerticalAlignment,
    ) -> list[str]:
        """Draw bounds framed by a border with area filled at its aligned position."""
        placed = align_rectangle(bounds, area, horizontal, vertical)
        cell = self.term.bold_yellow(FILL_CHAR)
        return self._draw(bounds, {p: cell for p in placed.points()})

    def _draw(self, bounds: Rectangle, cells: dict[Point, str]) -> list[str]:
        """Render rows covering bounds plus a one-cell border."""
        frame = Rectangle(bounds.min + Point(-1, -1), bounds.max + Point(1, 1))
        lines = []
        for y in range(frame.min.y, frame.max.y):
            row = ""
            for x in range(frame.min.x, frame.max.x):
                pos = Point(x, y)
                if pos in cells:
                    row += cells[pos]
                elif x in (frame.min.x, frame.max.x - 1) or y in (
                    frame.min.y,
                    frame.max.y - 1,
                ):
                    row += BORDER_CHAR
                else:
                    row += EMPTY_CHAR
            lines.append(row)
        return lines

    def render(self, lines: list[str]) -> None:
        """Write the preview to the terminal."""
        print(self.term.home + self.term.clear + "\n".join(lines), flush=True)

    def cleanup(self) -> None:
        """Restore terminal state."""
        print(self.term.normal, end="", flush=True)
