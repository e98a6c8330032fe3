"""A sheet frame laid out after ISO 5457."""

from __future__ import annotations

import logging
from typing import Sequence, Union

from sheetlayout.page import (
    Drawer,
    PageLayout,
    Point,
    Rect,
    TextHeightAnchor,
    TextWidthAnchor,
    rect_from_corners,
)
from sheetlayout.pageframe import PageFrame

logger = logging.getLogger(__name__)

_GRID_LETTERS = (
    "A", "B", "C", "D", "E", "F", "G", "H", "J", "K", "L", "M",
    "N", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
)
_BASE = len(_GRID_LETTERS)

_THIN = 0.35
_THICK = 0.7
_TEXT_SIZE = 3.5
_GRID_SPACING = 50


def num_to_abc(num: float) -> list[str]:
    """Return the grid letters for the 1-based index ``num``, most significant first.

    The sequence runs A..Z (without I and O), then AA, AB, ... like spreadsheet
    columns. Indices below 1 give ``["A"]``.
    """
    position = int(num) - 1
    if position <= 0:
        return [_GRID_LETTERS[0]]
    length = 1
    block = _BASE
    while position >= block:
        position -= block
        length += 1
        block *= _BASE
    letters = []
    for _ in range(length):
        position, digit = divmod(position, _BASE)
        letters.append(_GRID_LETTERS[digit])
    letters.reverse()
    return letters


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


_TRIMMING_MARK = (
    (0, 0), (10, 0), (10, 5), (5, 5), (5, 10), (0, 10),
)


def _trimming_mark(sign_x: int, sign_y: int) -> list[Point]:
    return [Point(sign_x * x, sign_y * y) for x, y in _TRIMMING_MARK]


class ISO5457Frame(PageFrame):
    """A frame with border, trimming marks, centring marks and a reference grid."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "ISO5457"
        self.top_centering_lines = True
        self.bottom_centering_lines = True
        self.left_centering_lines = True
        self.right_centering_lines = True
        self.show_page_size = True
        self.show_trimming_marks = True

    def _label(
        self, into: Drawer, position: Point, text: Union[str, Sequence[str]]
    ) -> None:
        into.draw_text(
            position,
            text,
            _TEXT_SIZE,
            TextHeightAnchor.MIDDLE,
            TextWidthAnchor.CENTER,
            _THIN,
            self.font,
        )

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the frame into ``where`` and set the drawing area inside it."""
        width, height = where.width, where.height
        self.drawing_area = rect_from_corners(Point(20, 10), Point(width - 10, height - 10))

        into.draw_rect(rect_from_corners(Point(15, 5), Point(width - 5, height - 5)), _THIN)
        into.draw_rect(self.drawing_area, _THICK)

        if self.show_trimming_marks:
            into.draw_poly(Point(0, 0), _trimming_mark(1, 1), 0, True)
            into.draw_poly(Point(width, 0), _trimming_mark(-1, 1), 0, True)
            into.draw_poly(Point(width, height), _trimming_mark(-1, -1), 0, True)
            into.draw_poly(Point(0, height), _trimming_mark(1, -1), 0, True)

        if not self.no_drawing_area_indent:
            self._draw_centering_marks(into, width, height)

        self._draw_horizontal_grid(into, width, height, on_what)
        self._draw_vertical_grid(into, width, height)

    def _draw_centering_marks(self, into: Drawer, width: float, height: float) -> None:
        mid_x, mid_y = width / 2, height / 2
        top_end = 20 if self.top_centering_lines else 10
        into.draw_line(Point(mid_x, 5), Point(mid_x, top_end), _THICK)
        bottom_end = 20 if self.bottom_centering_lines else 10
        into.draw_line(Point(mid_x, height - 5), Point(mid_x, height - bottom_end), _THICK)
        left_end = 30 if self.left_centering_lines else 20
        into.draw_line(Point(15, mid_y), Point(left_end, mid_y), _THICK)
        right_end = 20 if self.right_centering_lines else 10
        into.draw_line(Point(width - 5, mid_y), Point(width - right_end, mid_y), _THICK)

    def _draw_horizontal_grid(
        self, into: Drawer, width: float, height: float, on_what: PageLayout
    ) -> None:
        half = width / 2
        large = height >= 297 and width >= 297
        index = 1
        digits = len(str(_trunc_div(int(width - 30), _GRID_SPACING)))

        space_left = 20 + 3.5
        line_x = half - _GRID_SPACING
        left_positions: list[float] = []
        last_line = line_x
        while line_x > space_left:
            into.draw_line(Point(line_x, 5), Point(line_x, 10), _THIN)
            into.draw_line(Point(line_x, height - 5), Point(line_x, height - 10), _THIN)
            last_line = line_x
            line_x -= _GRID_SPACING
            left_positions.insert(0, line_x + 25)

        for pos in left_positions:
            if pos <= space_left:
                pos = 10 + (last_line - 10) / 2
            self._label(into, Point(pos, 7.5), str(index))
            if large:
                self._label(into, Point(pos, height - 7.5), str(index))
            index += 1

        for pos in (half - 25, half + 25):
            self._label(into, Point(pos, 7.5), str(index))
            if large:
                self._label(into, Point(pos, height - 7.5), str(index))
            index += 1

        page_name = on_what.page_size.name
        space_right = 10 + 3.5 * digits
        space_right_bottom = 10 + 3.5 * len(page_name)
        last_bottom_line = half
        last_top_line = half
        line_x = half + _GRID_SPACING
        while line_x < width:
            near_right = width - space_right - _GRID_SPACING <= line_x <= width - space_right
            if line_x <= width - space_right:
                into.draw_line(Point(line_x, 5), Point(line_x, 10), _THIN)
                last_top_line = line_x

            if near_right:
                self._label(
                    into,
                    Point(last_top_line + ((width - 5) - last_top_line) / 2, 7.5),
                    str(index),
                )
            elif line_x + 25 <= width:
                self._label(into, Point(line_x + 25, 7.5), str(index))

            if self.show_page_size:
                if line_x < width - space_right_bottom:
                    into.draw_line(Point(line_x, height - 5), Point(line_x, height - 10), _THIN)
                    last_bottom_line = line_x

                if line_x >= width - 55:
                    self._label(
                        into,
                        Point(last_bottom_line + (width - last_bottom_line) / 2, height - 7.5),
                        page_name,
                    )
                elif height >= 297 and line_x < width - space_right_bottom - _GRID_SPACING:
                    self._label(into, Point(line_x + 25, height - 7.5), str(index))
            else:
                if line_x <= width - space_right:
                    into.draw_line(Point(line_x, height - 5), Point(line_x, height - 10), _THIN)
                    last_top_line = line_x

                if large and near_right:
                    self._label(
                        into,
                        Point(last_top_line + ((width - 5) - last_top_line) / 2, height - 7.5),
                        str(index),
                    )
                elif large and line_x + 25 <= width:
                    self._label(into, Point(line_x + 25, height - 7.5), str(index))

            line_x += _GRID_SPACING
            index += 1

    def _draw_vertical_grid(self, into: Drawer, width: float, height: float) -> None:
        half = height / 2
        large = width >= 297 and height >= 297
        index = 1
        letter_count = len(num_to_abc((height - 30) / _GRID_SPACING))

        space_top = 10 + 3.5
        line_y = half - _GRID_SPACING
        top_positions: list[float] = []
        last_line = line_y
        while line_y > space_top:
            into.draw_line(Point(15, line_y), Point(20, line_y), _THIN)
            into.draw_line(Point(width - 5, line_y), Point(width - 10, line_y), _THIN)
            last_line = line_y
            line_y -= _GRID_SPACING
            top_positions.insert(0, line_y + 25)

        for pos in top_positions:
            if pos <= space_top:
                pos = 10 + (last_line - 10) / 2
            self._label(into, Point(width - 7.5, pos), num_to_abc(index))
            if large:
                self._label(into, Point(17.5, pos), num_to_abc(index))
            index += 1

        for pos in (half - 25, half + 25):
            self._label(into, Point(width - 7.5, pos), num_to_abc(index))
            if large:
                self._label(into, Point(17.5, pos), num_to_abc(index))
            index += 1

        space_bottom = 10 + 5.5 * letter_count
        line_y = half + _GRID_SPACING
        while line_y < height - space_bottom:
            if line_y > height - 60:
                text_y = line_y + ((height - 10) - line_y) / 2
            else:
                text_y = line_y + 25

            into.draw_line(Point(15, line_y), Point(20, line_y), _THIN)
            if large:
                self._label(into, Point(17.5, text_y), num_to_abc(index))

            into.draw_line(Point(width - 5, line_y), Point(width - 10, line_y), _THIN)
            self._label(into, Point(width - 7.5, text_y), num_to_abc(index))

            line_y += _GRID_SPACING
            index += 1

    def decide_centering_lines(
        self, title_block_width: float, title_block_height: float, where: Rect
    ) -> None:
        """Drop the centring marks that a title block of the given size would cover."""
        logger.debug("title block width: %s", title_block_width)
        self.bottom_centering_lines = True
        self.right_centering_lines = True
        if title_block_width > (where.width - 20.0) / 2:
            self.bottom_centering_lines = False
            if title_block_height > where.height - 30:
                self.top_centering_lines = False
        if title_block_height + 10 > (where.height - 20.0) / 2:
            self.right_centering_lines = False
            if title_block_width > where.width - 40:
                self.left_centering_lines = False