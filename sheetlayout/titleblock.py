"""The base class for title blocks and the text entries they show."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sheetlayout.page import Drawer, PageLayout, Rect

logger = logging.getLogger(__name__)


@dataclass
class TitleBlockText:
    """A label together with the text shown under it."""

    label: str = ""
    text: str = ""
    editable: bool = True


class TitleBlock:
    """A title block that draws nothing; the base for all title blocks."""

    def __init__(self) -> None:
        self.type = "none"
        self.description = "No Title-block at all"
        self.title_block_area = Rect(0, 0, 0, 0)
        self.font = "osifont"
        self._language = "none"
        self._languages: list[str] = ["none"]
        self.current_language: dict[str, TitleBlockText] = {}
        self.language_texts: dict[str, dict[str, TitleBlockText]] = {}

    @property
    def language(self) -> str:
        """The selected language, such as ``en_gb`` or ``de_at``."""
        return self._language

    @property
    def languages(self) -> list[str]:
        """The languages this title block offers."""
        return list(self._languages)

    @languages.setter
    def languages(self, languages: list[str]) -> None:
        self._languages = list(languages)

    def set_language(self, language: str) -> None:
        """Select ``language``; a language not offered leaves the selection unchanged."""
        if language in self._languages:
            self._language = language

    def _init_languages(self) -> None:
        """Fill ``language_texts``; the base class has no texts."""

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the title block into ``where``."""
        logger.info("TitleBlock none, into: %r", into)
        logger.info("TitleBlock none, on what: %r", on_what)