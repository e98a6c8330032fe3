"""A title block laid out after ISO 7200, style A."""

from __future__ import annotations

import os
from typing import Optional

from sheetlayout.page import (
    Drawer,
    PageLayout,
    Point,
    Rect,
    TextHeightAnchor,
    TextWidthAnchor,
    rect_from_corners,
)
from sheetlayout.titleblock import TitleBlock, TitleBlockText

_FRAME_WIDTH = 0.7
_GRID_WIDTH = 0.5
_LABEL_SIZE = 1.8

_T = TitleBlockText

_EN_GB = {
    "ResponsibleDepartment": ("Resp. dept.", "AB 131"),
    "TechnicalReference": ("Technical reference.", "Susan Müller"),
    "Creator": ("Created by", "Kristin Brown"),
    "ApprovalPerson": ("Approved by", "John Davis"),
    "ClassificationKeyWords": ("", "42A"),
    "LegalOwner": ("Legal owner", "John Smith Co."),
    "DocumentType": ("Type of document", "Assembly drawing"),
    "DocumentStatus": ("Document status", "released"),
    "Title": ("Title, additional title", "Circular saw shaft"),
    "SupplementaryTitle": ("", "complete with bearing"),
    "IdentificationNumber": ("", "A225-03300-012"),
    "RevisionIndex": ("Rev.", "A"),
    "DateOfIssue": ("Release date", "2014-01-15"),
    "LanguageCode": ("L.", "en"),
    "SheetNumberNumbers": ("Sheet", "1/3"),
}

_DE_AT = {
    "ResponsibleDepartment": ("Verantwortl. Abteilung.", "AB 131"),
    "TechnicalReference": ("Technische Referenz", "Susan Müller"),
    "Creator": ("Erstellt durch", "Christian Schmid"),
    "ApprovalPerson": ("Genehmigt von", "Wolfgang Maier"),
    "ClassificationKeyWords": ("", "42A"),
    "LegalOwner": ("Gesetzlicher Eigentümer", "Schuler AG Bergstadt"),
    "DocumentType": ("Dokumentenart", "Zusammenbauzeichnung"),
    "DocumentStatus": ("Documentenstatus", "freigegeben"),
    "Title": ("Titel, Zusätzlicher Titel", "Kreissägewelle"),
    "SupplementaryTitle": ("", "komplette mit Lagerung"),
    "IdentificationNumber": ("", "A225-03300-012"),
    "RevisionIndex": ("Änd.", "A"),
    "DateOfIssue": ("Ausgabedatum", "2014-01-15"),
    "LanguageCode": ("Spr.", "de"),
    "SheetNumberNumbers": ("Blatt", "1/3"),
}


def _texts(table: dict[str, tuple[str, str]]) -> dict[str, TitleBlockText]:
    return {key: _T(label, text) for key, (label, text) in table.items()}


class ISO7200A(TitleBlock):
    """An ISO 7200 title block of 180 mm by 36 mm in the bottom-right corner."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "ISO7200 Style A"
        self.description = (
            'A ISO7200 conform style from the Book "Mechanical and Metal Trades Handbook" '
            "ISBN: 978-3-8085-1915-8; it is also an example out of the ISO 7200 Standard"
        )
        self.title_block_area = Rect(0, 0, 180, 36)
        self.picture_path = ""
        self.languages = ["en_gb", "de_at"]
        self.set_language("en_gb")
        self._init_languages()

    def set_language(self, language: str) -> None:
        """Select ``language`` if offered and load its texts as the current ones."""
        super().set_language(language)
        self.update_current_language()

    def update_current_language(self) -> None:
        """Reload the current texts from ``language_texts`` for the selected language."""
        self.current_language = dict(self.language_texts.get(self.language, {}))

    def _init_languages(self) -> None:
        self.language_texts.clear()
        self.language_texts["en_gb"] = _texts(_EN_GB)
        self.language_texts["de_at"] = _texts(_DE_AT)

    def _entry(self, key: str) -> TitleBlockText:
        return self.current_language.setdefault(key, TitleBlockText())

    def _draw_label(
        self, into: Drawer, position: Point, key: str, font: Optional[str] = None
    ) -> None:
        args = (
            position,
            self._entry(key).label,
            _LABEL_SIZE,
            TextHeightAnchor.TOP,
            TextWidthAnchor.LEFT,
            _LABEL_SIZE / 10,
        )
        if font is None:
            into.draw_text(*args)
        else:
            into.draw_text(*args, font)

    def _draw_field(
        self,
        into: Drawer,
        position: Point,
        key: str,
        size: float,
        height_anchor: TextHeightAnchor = TextHeightAnchor.BOTTOM,
        width_anchor: TextWidthAnchor = TextWidthAnchor.LEFT,
        lines: int = 1,
    ) -> None:
        entry = self._entry(key)
        text = entry.text if lines == 1 else [entry.text] * lines
        into.draw_text(
            position,
            text,
            size,
            height_anchor,
            width_anchor,
            size / 10,
            self.font,
            key,
            entry.editable,
        )

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the title block into the bottom-right corner of ``where``."""
        corner = where.bottom_right
        area = rect_from_corners(corner - Point(180, 36), corner)
        self.title_block_area = area
        into.draw_rect(area, _FRAME_WIDTH)

        self.update_current_language()

        left, top, right, bottom = area.left, area.top, area.right, area.bottom

        def at(dx: float, dy: float) -> Point:
            return Point(left + dx, top + dy)

        # Horizontal grid lines
        into.draw_line(at(0, 9), Point(right, top + 9), _GRID_WIDTH)
        into.draw_line(at(69, 18), Point(right, top + 18), _GRID_WIDTH)
        into.draw_line(at(129, 27), Point(right, top + 27), _GRID_WIDTH)
        # Vertical grid lines
        into.draw_line(at(26, 0), at(26, 9), _GRID_WIDTH)
        into.draw_line(at(69, 0), Point(left + 69, bottom), _GRID_WIDTH)
        into.draw_line(at(113, 0), at(113, 9), _GRID_WIDTH)
        into.draw_line(at(129, 9), Point(left + 129, bottom), _GRID_WIDTH)
        into.draw_line(at(156, 0), at(156, 9), _GRID_WIDTH)
        into.draw_line(at(136, 27), Point(left + 136, bottom), _GRID_WIDTH)
        into.draw_line(at(161, 27), Point(left + 161, bottom), _GRID_WIDTH)
        into.draw_line(at(171, 27), Point(left + 171, bottom), _GRID_WIDTH)

        font = self.font
        self._draw_label(into, at(2, 1), "ResponsibleDepartment")
        self._draw_field(into, at(2, 7.5), "ResponsibleDepartment", 2.5)

        self._draw_label(into, at(28, 1), "TechnicalReference", font)
        self._draw_field(into, at(28, 7.5), "TechnicalReference", 2.5)

        self._draw_label(into, at(71, 1), "Creator", font)
        self._draw_field(into, at(71, 7.5), "Creator", 2.5)

        self._draw_label(into, at(115, 1), "ApprovalPerson", font)
        self._draw_field(into, at(115, 7.5), "ApprovalPerson", 2.5)

        self._draw_field(into, at(158, 7.5), "ClassificationKeyWords", 2.5)

        self._draw_label(into, at(2, 10), "LegalOwner", font)
        self._draw_field(
            into, at(2, 14), "LegalOwner", 5, TextHeightAnchor.TOP, lines=3
        )

        self._draw_label(into, at(71, 10), "DocumentType", font)
        self._draw_field(into, at(71, 16.5), "DocumentType", 2.5)

        self._draw_label(into, at(131, 10), "DocumentStatus", font)
        self._draw_field(into, at(131, 16.5), "DocumentStatus", 2.5)

        self._draw_label(into, at(71, 19), "Title", font)
        self._draw_field(into, at(71, 26), "Title", 3.5)
        self._draw_field(
            into, at(71, 28), "SupplementaryTitle", 2.5, TextHeightAnchor.TOP, lines=2
        )

        self._draw_label(into, at(131, 19), "IdentificationNumber", font)
        self._draw_field(
            into,
            at(154.5, 25.5),
            "IdentificationNumber",
            3.5,
            width_anchor=TextWidthAnchor.CENTER,
        )

        self._draw_label(into, at(131, 28), "RevisionIndex", font)
        self._draw_field(into, at(131, 34.5), "RevisionIndex", 2.5)

        self._draw_label(into, at(138, 28), "DateOfIssue", font)
        self._draw_field(into, at(138, 34.5), "DateOfIssue", 2.5)

        self._draw_label(into, at(163, 28), "LanguageCode", font)
        self._draw_field(into, at(163, 34.5), "LanguageCode", 2.5)

        self._draw_label(into, at(172, 28), "SheetNumberNumbers", font)
        self._draw_field(into, at(172, 34.5), "SheetNumberNumbers", 2.5)

        if self.picture_path and os.path.exists(self.picture_path):
            into.draw_picture(self.picture_path, Point(left + 67, bottom - 2), 65, 23)