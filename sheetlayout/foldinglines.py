"""Folding-line algorithms that mark where a large sheet is folded."""

from __future__ import annotations

import itertools
import logging

from sheetlayout.page import Drawer, Orientation, PageLayout, PageSize, Point

logger = logging.getLogger(__name__)

_LINE_WIDTH = 0.35


class FoldingLines:
    """Base folding-line algorithm; it draws no lines at all."""

    def __init__(self) -> None:
        self.type = "none"
        self.description = "No Folding Lines at all"
        self.depth = 5.0
        self.to_what = PageLayout(PageSize(210, 297, "A4"), Orientation.PORTRAIT)

    def draw(self, into: Drawer, on_what: PageLayout) -> None:
        """Draw the folding lines for the page ``on_what`` into ``into``."""
        logger.info("FoldingLines none, into: %r", into)
        logger.info("FoldingLines none, on what: %r", on_what)

    def _draw_vertical_fold_line(
        self, into: Drawer, on_what: PageLayout, x: float, depth: float, width: float
    ) -> None:
        """Draw marks at the top and bottom edge at position ``x``."""
        height = on_what.full_rect().height
        into.draw_line(Point(x, 0), Point(x, depth), width)
        into.draw_line(Point(x, height), Point(x, height - depth), width)

    def _draw_horizontal_fold_line(
        self, into: Drawer, on_what: PageLayout, y: float, depth: float, width: float
    ) -> None:
        """Draw marks at the left and right edge at position ``y``."""
        page_width = on_what.full_rect().width
        into.draw_line(Point(0, y), Point(depth, y), width)
        into.draw_line(Point(page_width, y), Point(page_width - depth, y), width)

    def _draw_horizontal_folds(self, into: Drawer, on_what: PageLayout) -> None:
        target_height = self.to_what.full_rect().height
        y = on_what.full_rect().height - target_height
        while y > 0:
            self._draw_horizontal_fold_line(into, on_what, y, self.depth, _LINE_WIDTH)
            y -= target_height


class DIN824ALike(FoldingLines):
    """Folding lines after DIN 824 form A."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "DIN 824 A Like"
        self.description = (
            "This creates folding lines where the algorithm is based on the DIN 824 standard"
        )

    def draw(self, into: Drawer, on_what: PageLayout) -> None:
        page = on_what.full_rect()
        remaining = page.width - self.to_what.full_rect().width
        for count in itertools.count(1):
            length = remaining / count
            if length <= 190 and count % 2 == 0:
                break

        for i in range(1, count + 1):
            self._draw_vertical_fold_line(into, on_what, 20 + length * i, self.depth, _LINE_WIDTH)

        if page.height > 297:
            into.draw_line(Point(105, 0), Point(105, self.depth), _LINE_WIDTH)

        self._draw_horizontal_folds(into, on_what)


class DIN824CLike(FoldingLines):
    """Folding lines after DIN 824 form C."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "DIN 824 C Like"
        self.description = (
            "This creates folding lines where the algorithm is based on the DIN 824 standard"
        )

    def draw(self, into: Drawer, on_what: PageLayout) -> None:
        target_width = self.to_what.full_rect().width
        x = on_what.full_rect().width - target_width
        while x > 0:
            self._draw_vertical_fold_line(into, on_what, x, self.depth, _LINE_WIDTH)
            x -= target_width

        self._draw_horizontal_folds(into, on_what)