"""Tests for the terminal preview."""

from __future__ import annotations

import logging

import pytest
from blessed import Terminal

from cellalign.client.terminal_ui import TerminalUI
from cellalign.common.align import (
    AreaOutOfBounds,
    HorizontalAlignment,
    MultilineText,
    VerticalAlignment,
)
from cellalign.common.geometry import Rectangle


@pytest.fixture
def ui() -> TerminalUI:
    """A preview bound to a terminal without styling."""
    return TerminalUI(Terminal(force_styling=None))


class TestPreviewLines:
    def test_centered_text(self, ui: TerminalUI) -> None:
        lines = ui.preview_lines(
            Rectangle.from_coords(0, 0, 5, 1),
            "abc",
            HorizontalAlignment.CENTER,
            VerticalAlignment.TOP,
        )
        assert lines == ["#######", "#.abc.#", "#######"]

    def test_bottom_right_text(self, ui: TerminalUI) -> None:
        lines = ui.preview_lines(
            Rectangle.from_coords(2, 3, 5, 5),
            "ab",
            HorizontalAlignment.RIGHT,
            VerticalAlignment.BOTTOM,
        )
        assert lines == ["#####", "#...#", "#.ab#", "#####"]

    def test_oversized_text_is_cut_at_bounds(
        self, ui: TerminalUI, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="cellalign.client.terminal_ui"):
            lines = ui.preview_lines(
                Rectangle.from_coords(0, 0, 3, 1),
                "abcde",
                HorizontalAlignment.CENTER,
                VerticalAlignment.TOP,
            )
        assert lines == ["#####", "#bcd#", "#####"]
        assert "overflows" in caplog.text

    def test_multiline_propagates(self, ui: TerminalUI) -> None:
        with pytest.raises(MultilineText):
            ui.preview_lines(
                Rectangle.from_coords(0, 0, 3, 3),
                "a\nb",
                HorizontalAlignment.LEFT,
                VerticalAlignment.TOP,
            )


class TestBoxLines:
    def test_bottom_right_box(self, ui: TerminalUI) -> None:
        lines = ui.box_lines(
            Rectangle.from_coords(0, 0, 4, 3),
            Rectangle.from_coords(0, 0, 2, 1),
            HorizontalAlignment.RIGHT,
            VerticalAlignment.BOTTOM,
        )
        assert lines == ["######", "#....#", "#....#", "#..@@#", "######"]

    def test_centered_box(self, ui: TerminalUI) -> None:
        lines = ui.box_lines(
            Rectangle.from_coords(0, 0, 3, 3),
            Rectangle.from_coords(0, 0, 1, 1),
            HorizontalAlignment.CENTER,
            VerticalAlignment.MIDDLE,
        )
        assert lines == ["#####", "#...#", "#.@.#", "#...#", "#####"]

    def test_box_too_large(self, ui: TerminalUI) -> None:
        with pytest.raises(AreaOutOfBounds):
            ui.box_lines(
                Rectangle.from_coords(0, 0, 2, 2),
                Rectangle.from_coords(0, 0, 3, 1),
                HorizontalAlignment.LEFT,
                VerticalAlignment.TOP,
            )


class TestRender:
    def test_render_writes_lines(
        self, ui: TerminalUI, capsys: pytest.CaptureFixture[str]
    ) -> None:
        ui.render(["###", "#a#", "###"])
        assert capsys.readouterr().out == "###\n#a#\n###\n"
