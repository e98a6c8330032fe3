"""A frame made of a single rectangle set in from the page border."""

from __future__ import annotations

from sheetlayout.page import Drawer, PageLayout, Point, Rect, rect_from_corners
from sheetlayout.pageframe import PageFrame


class PlainFrame(PageFrame):
    """A plain rectangular frame; the indents and line width are in millimetres."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "Plain Frame"
        self.description = (
            'A simple frame only consisting of a line, the indent from the "where" '
            "rectangle/page border"
        )
        self.indent_left = 5.0
        self.indent_right = 5.0
        self.indent_top = 5.0
        self.indent_bottom = 5.0
        self.line_width = 1.0

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the rectangle inside ``where`` and make it the drawing area."""
        self.drawing_area = rect_from_corners(
            where.top_left + Point(self.indent_left, self.indent_top),
            where.bottom_right - Point(self.indent_right, self.indent_bottom),
        )
        into.draw_rect(self.drawing_area, self.line_width)