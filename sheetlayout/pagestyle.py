"""The page style that ties together page size, frame, title block and folds."""

from __future__ import annotations

from typing import Optional

from sheetlayout.foldinglines import FoldingLines
from sheetlayout.page import Drawer, Orientation, PageLayout, PageSize, page_size_for
from sheetlayout.pageframe import PageFrame
from sheetlayout.titleblock import TitleBlock


class PageStyle:
    """The layout and style of one page."""

    def __init__(
        self,
        layout: Optional[PageLayout] = None,
        frame: Optional[PageFrame] = None,
        title_block: Optional[TitleBlock] = None,
        folding_lines: Optional[FoldingLines] = None,
    ) -> None:
        self.layout = layout if layout is not None else PageLayout()
        self.frame = frame if frame is not None else PageFrame()
        self.title_block = title_block if title_block is not None else TitleBlock()
        self.folding_lines = folding_lines if folding_lines is not None else FoldingLines()
        self.show_editable = False
        self.font = "osifont"

    @property
    def page_size(self) -> PageSize:
        """The page size in portrait definition, without the orientation."""
        return self.layout.page_size

    @property
    def page_height(self) -> float:
        """The page height in millimetres, taking the orientation into account."""
        return self.layout.full_rect().height

    @property
    def page_width(self) -> float:
        """The page width in millimetres, taking the orientation into account."""
        return self.layout.full_rect().width

    def set_page_size(self, page_size: PageSize, orientation: Orientation) -> None:
        """Use ``page_size`` in the given orientation."""
        self.layout = PageLayout(page_size, orientation)

    def set_page_dimensions(
        self,
        height: float,
        width: float,
        orientation: Orientation,
        name: str = "",
    ) -> None:
        """Set the page from its dimensions in millimetres.

        Dimensions of a standard size match it in either order, and ``name``
        is then ignored. Otherwise a custom size called ``name`` is used, its
        dimensions read as portrait.
        """
        self.layout = PageLayout(page_size_for(width, height, name), orientation)

    def draw(self, into: Drawer) -> None:
        """Draw frame, title block and folding lines into ``into``."""
        page = self.layout.full_rect()
        into.show_editable = self.show_editable
        into.height = page.height
        into.width = page.width

        into.start()

        self.frame.font = self.font
        self.frame.draw(into, page, self.layout)

        self.title_block.font = self.font
        self.title_block.draw(into, self.frame.drawing_area, self.layout)

        self.folding_lines.draw(into, self.layout)

        into.end()

    def __str__(self) -> str:
        return f"PageStyle({self.layout}, {self.layout.page_size}, {self.frame})"