"""A title block modelled on a FreeCAD drawing template."""

from __future__ import annotations

import os

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

_WIDTH = 140.35
_HEIGHT = 47
_LINE_WIDTH = 0.35

_DISCLAIMER = (
    "This drawing is our property; it can't be reproduced or "
    "communicated without our written consent."
)

_SIDE_FIELDS = {letter: (letter, "_") for letter in "ABCDEFG"}

_EN_GB = {
    "Creator": ("DESIGNED BY:", "Designed by Name"),
    "DateOfIssue": ("DATE:", "Date"),
    "Title": ("", "Title"),
    "SupplementaryTitle": ("", "Subtitle"),
    "Size": ("SIZE:", "A4"),
    "UnnamedA": ("-:", "-"),
    "UnnamedB": ("-:", "-"),
    "Scale": ("SCALE:", "Scale"),
    "Weight": ("WEIGHT (kg):", "Weight"),
    "IdentificationNumber": ("DRAWING NUMBER:", "Drawing number"),
    "SheetNumberNumbers": ("SHEET:", "Sheet"),
    "Disclaimer": ("", _DISCLAIMER),
    **_SIDE_FIELDS,
}

_DE_DE = {
    "Creator": ("ERSTELLT DURCH:", "Designed by Name"),
    "DateOfIssue": ("DATUM:", "Date"),
    "Title": ("", "Title"),
    "SupplementaryTitle": ("", "Subtitle"),
    "Size": ("GRÖẞE:", "A4"),
    "UnnamedA": ("-:", "-"),
    "UnnamedB": ("-:", "-"),
    "Scale": ("MAẞSTAB:", "Scale"),
    "Weight": ("GEWICHT (kg):", "Weight"),
    "IdentificationNumber": ("ZEICHNUNGS NUMMER:", "Drawing number"),
    "SheetNumberNumbers": ("BLATT:", "Sheet"),
    "Disclaimer": ("", _DISCLAIMER),
    **_SIDE_FIELDS,
}

# Vertical centres of the lettered rows on the right-hand side.
_SIDE_ROWS = (
    ("G", 3.325),
    ("F", 9.985),
    ("E", 16.655),
    ("D", 23.32),
    ("C", 29.985),
    ("B", 36.655),
    ("A", 43.495),
)


def _texts(table: dict[str, tuple[str, str]]) -> dict[str, TitleBlockText]:
    return {key: TitleBlockText(label, text) for key, (label, text) in table.items()}


class FreeCADA(ISO7200A):
    """A title block of 140.35 mm by 47 mm in the bottom-right corner."""

    def __init__(self) -> None:
        super().__init__()
        self.type = "FreeCAD Style A"
        self.description = "Based on a FreeCAD template"
        self.title_block_area = Rect(0, 0, _WIDTH, _HEIGHT)
        self.languages = ["en_gb", "de_at"]
        self.set_language("en_gb")
        self._init_languages()

    def _init_languages(self) -> None:
        self.language_texts.clear()
        self.language_texts["en_gb"] = _texts(_EN_GB)
        self.language_texts["de_de"] = _texts(_DE_DE)

    def _label(
        self,
        into: Drawer,
        position: Point,
        key: str,
        size: float = 1.5,
        height_anchor: TextHeightAnchor = TextHeightAnchor.TOP,
        width_anchor: TextWidthAnchor = TextWidthAnchor.LEFT,
    ) -> None:
        into.draw_text(
            position,
            self._entry(key).label,
            size,
            height_anchor,
            width_anchor,
            size / 10,
            self.font,
        )

    def _field(
        self,
        into: Drawer,
        position: Point,
        key: str,
        size: float,
        height_anchor: TextHeightAnchor,
        width_anchor: TextWidthAnchor,
    ) -> None:
        entry = self._entry(key)
        into.draw_text(
            position,
            entry.text,
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
        area = rect_from_corners(corner - Point(_WIDTH, _HEIGHT), corner)
        self.title_block_area = area
        into.draw_rect(area, _LINE_WIDTH)

        self.update_current_language()

        left, top, right, bottom = area.left, area.top, area.right, area.bottom

        def at(dx: float, dy: float) -> Point:
            return Point(left + dx, top + dy)

        # Horizontal grid lines of the main part
        for dy in (16.650, 29.650, 42.650):
            into.draw_line(at(0, dy), at(119, dy), _LINE_WIDTH)
        # Horizontal grid lines of the lettered side
        for dy in (6.65, 13.32, 19.99, 26.65, 33.32, 39.99):
            into.draw_line(at(119, dy), Point(right, top + dy), _LINE_WIDTH)

        # Vertical grid lines
        into.draw_line(at(17.5, 16.825), at(17.5, 42.650), _LINE_WIDTH)
        into.draw_line(at(38, 0), at(38, 42.650), _LINE_WIDTH)
        into.draw_line(at(100, 29.825), at(100, 42.650), _LINE_WIDTH)
        into.draw_line(at(119, 0), Point(left + 119, bottom), _LINE_WIDTH)
        into.draw_line(at(123.92, 0), Point(left + 123.92, bottom), _LINE_WIDTH)

        top_anchor = TextHeightAnchor.TOP
        middle = TextHeightAnchor.MIDDLE
        bottom_anchor = TextHeightAnchor.BOTTOM
        left_anchor = TextWidthAnchor.LEFT
        center = TextWidthAnchor.CENTER

        # Row 1
        self._label(into, at(1.25, 1.5), "Creator")
        self._field(into, at(1.25, 7), "Creator", 3, bottom_anchor, left_anchor)
        self._label(into, at(1.25, 8.5), "DateOfIssue")
        self._field(into, at(1.25, 14), "DateOfIssue", 3, bottom_anchor, left_anchor)
        self._field(into, at(39.25, 1.5), "Title", 5, top_anchor, left_anchor)
        self._field(
            into, at(39.25, 12.5), "SupplementaryTitle", 3.5, bottom_anchor, left_anchor
        )

        # Row 2
        self._label(into, at(1.25, 17.5), "Size")
        self._field(into, at(8.75, 23.15), "Size", 5, middle, center)
        self._label(into, at(18.75, 17.5), "UnnamedA")
        self._field(into, at(27.75, 23.15), "UnnamedA", 3, middle, center)
        self._label(into, at(39.25, 17.5), "UnnamedB")
        self._field(into, at(39.25, 23.15), "UnnamedB", 3, middle, left_anchor)

        # Row 3
        self._label(into, at(1.25, 30.5), "Scale")
        self._field(into, at(8.75, 36.15), "Scale", 3, middle, center)
        self._label(into, at(18.75, 30.5), "Weight")
        self._field(into, at(27.75, 36.15), "Weight", 3, middle, center)
        self._label(into, at(39.25, 30.5), "IdentificationNumber")
        self._field(
            into, at(39.25, 36.15), "IdentificationNumber", 3, middle, left_anchor
        )
        self._label(into, at(101.25, 30.5), "SheetNumberNumbers")
        self._field(into, at(109.5, 36.15), "SheetNumberNumbers", 3, middle, center)

        self._field(into, at(1.25, 44.825), "Disclaimer", 1.5, middle, left_anchor)

        # Lettered side
        for key, dy in _SIDE_ROWS:
            self._label(into, at(121.46, dy), key, 3, middle, center)
            self._field(into, at(132.135, dy), key, 3, middle, center)

        if self.picture_path and os.path.exists(self.picture_path):
            into.draw_picture(self.picture_path, at(117, 27.65), 77, 9)