"""A title block laid out after ISO 7200, style B."""

from __future__ import annotations

import os
from typing import NamedTuple, Optional, Tuple

from sheetlayout.iso7200a import ISO7200A
from sheetlayout.page import (
    Drawer,
    PageLayout,
    Point,
    Rect,
    TextHeightAnchor,
    TextWidthAnchor,
    rect_from_corners,
)
from sheetlayout.titleblock import TitleBlockText

_WIDTH = 180
_HEIGHT = 27
_FRAME_WIDTH = 0.7
_GRID_WIDTH = 0.5

# Grid segments as offsets from the top-left corner; the full width or
# height stands for the right or bottom edge.
_GRID = (
    ((0, 9), (_WIDTH, 9)),
    ((30, 18), (69, 18)),
    ((129, 18), (_WIDTH, 18)),
    ((30, 0), (30, _HEIGHT)),
    ((69, 0), (69, _HEIGHT)),
    ((129, 9), (129, _HEIGHT)),
    ((136, 18), (136, _HEIGHT)),
    ((135, 0), (135, 9)),
    ((161, 18), (161, _HEIGHT)),
    ((171, 18), (171, _HEIGHT)),
)

Offset = Tuple[float, float]


class _Field(NamedTuple):
    key: str
    label_at: Optional[Offset]
    text_at: Offset
    size: float = 2.5
    height_anchor: TextHeightAnchor = TextHeightAnchor.BOTTOM
    width_anchor: TextWidthAnchor = TextWidthAnchor.LEFT
    lines: int = 1


_FIELDS = (
    _Field("ResponsibleDepartment", (2, 1), (2, 7.5)),
    _Field("TechnicalReference", (32, 1), (32, 7.5)),
    _Field("DocumentType", (71, 1), (71, 7.5)),
    _Field("DocumentStatus", (137, 1), (137, 7.5)),
    _Field("LegalOwner", (2, 10), (2, 14), height_anchor=TextHeightAnchor.TOP, lines=3),
    _Field("Creator", (32, 10), (32, 16.5)),
    _Field("Title", (71, 10), (71, 17), 3.5),
    _Field("SupplementaryTitle", None, (71, 19), height_anchor=TextHeightAnchor.TOP, lines=2),
    _Field(
        "IdentificationNumber", (131, 10), (154.5, 16.5), 3.5, width_anchor=TextWidthAnchor.CENTER
    ),
    _Field("ApprovalPerson", (32, 19), (32, 25.5)),
    _Field("RevisionIndex", (131, 19), (131, 25.5)),
    _Field("DateOfIssue", (138, 19), (138, 25.5)),
    _Field("LanguageCode", (163, 19), (163, 25.5)),
    _Field("SheetNumberNumbers", (172, 19), (172, 25.5)),
)

# Labels of the German table that differ from the style A table.
_DE_DE_LABELS = {
    "ResponsibleDepartment": "Verantwortl. Abt.",
    "TechnicalReference": "Techn. Referenz",
    "Creator": "Erstellt durch:",
    "ApprovalPerson": "Genehmigt von:",
    "Title": "Titel",
}


class ISO7200B(ISO7200A):
    """An ISO 7200 title block of 180 mm by 27 mm in the bottom-right corner.

    Every field it draws is marked editable, whatever its entry says.
    """

    def __init__(self) -> None:
        super().__init__()
        self.type = "ISO7200 Style B"
        self.description = (
            'A ISO7200 conform style from the Book "Leiterplatten Stromlaufplan, Layout '
            'und Fertigung" ISBN: 978-3-446-47583-0; it is also an example out of the ISO '
            "7200 Standard"
        )
        self.title_block_area = Rect(0, 0, _WIDTH, _HEIGHT)
        self.languages = ["en_gb", "de_de"]
        self.set_language("de_at")
        self._init_languages()

    def _init_languages(self) -> None:
        super()._init_languages()
        english = dict(self.language_texts["en_gb"])
        german = dict(self.language_texts["de_at"])
        english["SheetNumberNumbers"] = TitleBlockText("Sheet", "100/300")
        for key, label in _DE_DE_LABELS.items():
            german[key] = TitleBlockText(label, german[key].text)
        self.language_texts.clear()
        self.language_texts.update(en_gb=english, de_de=german)

    def draw(self, into: Drawer, where: Rect, on_what: PageLayout) -> None:
        """Draw the title block into the bottom-right corner of ``where``."""
        corner = where.bottom_right
        area = rect_from_corners(corner - Point(_WIDTH, _HEIGHT), corner)
        self.title_block_area = area
        into.draw_rect(area, _FRAME_WIDTH)

        self.update_current_language()

        def at(offset: Offset) -> Point:
            dx, dy = offset
            x = area.right if dx == _WIDTH else area.left + dx
            y = area.bottom if dy == _HEIGHT else area.top + dy
            return Point(x, y)

        for start, end in _GRID:
            into.draw_line(at(start), at(end), _GRID_WIDTH)

        for spec in _FIELDS:
            if spec.label_at is not None:
                self._draw_label(into, at(spec.label_at), spec.key, self.font)
            text = self._entry(spec.key).text
            into.draw_text(
                at(spec.text_at),
                text if spec.lines == 1 else [text] * spec.lines,
                spec.size,
                spec.height_anchor,
                spec.width_anchor,
                spec.size / 10,
                self.font,
                spec.key,
                True,
            )

        if self.picture_path and os.path.exists(self.picture_path):
            into.draw_picture(
                self.picture_path, Point(area.left + 28, area.bottom - 2), 26, 14
            )