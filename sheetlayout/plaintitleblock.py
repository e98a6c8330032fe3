"""A title block consisting of one rectangle, mostly for demonstration."""

from __future__ import annotations

from sheetlayout.page import Drawer, PageLayout, Point, Rect, rect_from_corners
from sheetlayout.titleblock import TitleBlock


class PlainTitleBlock(TitleBlock):
    """A rectangle of a given size placed in the bottom-right corner."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "Plain TitleBlock"
        self._height = 50.0
        self._width = 180.0
        self.title_block_area = Rect(0, 0, self._width, self._height)

    @property
    def height(self) -> float:
        """The height in millimetres."""
        return self._height

    @height.setter
    def height(self, height: float) -> None:
        self.title_block_area = Rect(0, 0, self._width, self._height)
        self._height = height

    @property
    def width(self) -> float:
        """The width in millimetres."""
        return self._width

    @width.setter
    def width(self, width: float) -> None:
        self._width = width

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the rectangle in the bottom-right corner of ``where``."""
        corner = where.bottom_right
        self.title_block_area = rect_from_corners(
            corner - Point(self._width, self._height), corner
        )
        into.draw_rect(self.title_block_area, 1)