"""Geometry, page sizes and the drawing interface shared by all page elements."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol, Sequence, Union, runtime_checkable

MM_PER_POINT = 25.4 / 72
_FUZZY_TOLERANCE_MM = 3 * MM_PER_POINT


@dataclass(frozen=True)
class Point:
    """A point in millimetres; y grows downwards."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0


def rect_from_corners(top_left: Point, bottom_right: Point) -> Rect:
    """Build a rectangle spanning two corner points."""
    return Rect(
        top_left.x,
        top_left.y,
        bottom_right.x - top_left.x,
        bottom_right.y - top_left.y,
    )


class Orientation(enum.Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class PageSize:
    """A paper size in millimetres, always given in portrait definition."""

    width: float
    height: float
    name: str = ""


STANDARD_PAGE_SIZES: tuple[PageSize, ...] = (
    PageSize(215.9, 279.4, "Letter"),
    PageSize(215.9, 355.6, "Legal"),
    PageSize(190.5, 254.0, "Executive"),
    PageSize(841, 1189, "A0"),
    PageSize(594, 841, "A1"),
    PageSize(420, 594, "A2"),
    PageSize(297, 420, "A3"),
    PageSize(210, 297, "A4"),
    PageSize(148, 210, "A5"),
    PageSize(105, 148, "A6"),
    PageSize(74, 105, "A7"),
    PageSize(52, 74, "A8"),
    PageSize(37, 52, "A9"),
    PageSize(1000, 1414, "B0"),
    PageSize(707, 1000, "B1"),
    PageSize(500, 707, "B2"),
    PageSize(353, 500, "B3"),
    PageSize(250, 353, "B4"),
    PageSize(176, 250, "B5"),
    PageSize(125, 176, "B6"),
    PageSize(88, 125, "B7"),
    PageSize(62, 88, "B8"),
    PageSize(44, 62, "B9"),
    PageSize(31, 44, "B10"),
    PageSize(163, 229, "C5E"),
    PageSize(105, 241, "Comm10E"),
    PageSize(110, 220, "DLE"),
    PageSize(210, 330, "Folio"),
    PageSize(279.4, 431.8, "Tabloid"),
    PageSize(26, 37, "A10"),
)

A4 = PageSize(210, 297, "A4")


def _close(width: float, height: float, size: PageSize) -> bool:
    return (
        abs(width - size.width) <= _FUZZY_TOLERANCE_MM
        and abs(height - size.height) <= _FUZZY_TOLERANCE_MM
    )


def page_size_for(width: float, height: float, name: str = "") -> PageSize:
    """Return the standard size matching the dimensions in either orientation.

    When no standard size matches, a custom size with the given dimensions is
    returned, named ``name`` or a generated name when ``name`` is empty.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"page dimensions must be positive, got {width} x {height}")
    for size in STANDARD_PAGE_SIZES:
        if _close(width, height, size):
            return size
    for size in STANDARD_PAGE_SIZES:
        if _close(height, width, size):
            return size
    return PageSize(width, height, name or f"Custom ({width:g}mm x {height:g}mm)")


@dataclass
class PageLayout:
    """A page size together with the orientation it is used in."""

    page_size: PageSize = field(default_factory=lambda: A4)
    orientation: Orientation = Orientation.PORTRAIT

    def full_rect(self) -> Rect:
        """The whole page in millimetres, taking the orientation into account."""
        width, height = self.page_size.width, self.page_size.height
        if self.orientation is Orientation.LANDSCAPE:
            width, height = height, width
        return Rect(0, 0, width, height)


class TextHeightAnchor(enum.Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class TextWidthAnchor(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@runtime_checkable
class Drawer(Protocol):
    """The output a page style is drawn into; all coordinates in millimetres."""

    show_editable: bool
    width: float
    height: float

    def start(self) -> None: ...

    def end(self) -> None: ...

    def draw_line(self, start: Point, end: Point, width: float) -> None: ...

    def draw_rect(self, rect: Rect, width: float) -> None: ...

    def draw_poly(
        self, origin: Point, points: Sequence[Point], width: float, fill: bool
    ) -> None: ...

    def draw_text(
        self,
        position: Point,
        text: Union[str, Sequence[str]],
        size: float,
        height_anchor: TextHeightAnchor,
        width_anchor: TextWidthAnchor,
        width: float,
        font: str = "osifont",
        name: str = "",
        editable: bool = False,
    ) -> None: ...

    def draw_picture(
        self, path: str, position: Point, width: float, height: float
    ) -> None: ...