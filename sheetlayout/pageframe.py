"""The base class for sheet frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sheetlayout.page import Drawer, PageLayout, Rect

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class PageFrame:
    """A frame that draws nothing; its drawing area is the whole given rectangle."""

    type: str = "none"
    description: str = "No Frame at all"
    drawing_area: Rect = field(default_factory=Rect)
    no_drawing_area_indent: bool = False
    font: str = "osifont"

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the frame into ``where`` and update the drawing area."""
        self.drawing_area = where
        _log.info(
            "frame %s draws nothing into %r on %r at %r", self.type, into, on_what, where
        )

    def __str__(self) -> str:
        return f"PageFrame({self.type})"