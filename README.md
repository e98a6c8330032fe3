# sheetlayout

`sheetlayout` lays out technical drawing sheets: the page size, a frame, a
title block and folding marks. It works out where every line, polygon, text
and picture goes, in millimetres, and hands each of them to a *drawer*: an
object you supply that follows the `Drawer` protocol in `sheetlayout.page`.
Keeping the layout apart from the output lets one sheet be written to
whatever format your drawer produces.

All lengths are in millimetres. The y axis points down the page, so the
top-left corner is at (0, 0).

## Modules

- `sheetlayout.page`: `Point`, `Rect`, `PageSize`, `PageLayout`,
  `Orientation`, `TextHeightAnchor`, `TextWidthAnchor` and the `Drawer`
  protocol, plus `rect_from_corners` and `page_size_for`. `page_size_for`
  looks up a standard size (A0–A10, B0–B10, Letter, Legal and others) from its
  dimensions in either order, within a small tolerance, and otherwise returns
  a custom size; it raises `ValueError` for dimensions that are not positive.
  `PageLayout.full_rect()` gives the whole page with the orientation applied.
- Frames
  - `sheetlayout.pageframe.PageFrame`: draws nothing; its `drawing_area`
    becomes the whole rectangle it is given.
  - `sheetlayout.plainframe.PlainFrame`: one rectangle set in from the edge
    by `indent_left`, `indent_right`, `indent_top` and `indent_bottom`
    (5 mm each), drawn with `line_width` (1 mm).
  - `sheetlayout.iso5457frame.ISO5457Frame`: border lines, trimming marks,
    centring marks, a numbered and lettered reference grid and the page size
    name. `show_trimming_marks`, `show_page_size` and
    `no_drawing_area_indent` switch parts off, and `decide_centering_lines`
    drops centring marks that a title block of a given size would cover.
    `num_to_abc` gives the grid letters (A–Z without I and O, then AA, AB, …).
- Title blocks
  - `sheetlayout.titleblock.TitleBlock`: draws nothing. Each field is a
    `TitleBlockText` with a `label`, a `text` and an `editable` flag.
    `set_language` only accepts a language listed in `languages`.
  - `sheetlayout.plaintitleblock.PlainTitleBlock`: an empty rectangle of
    `width` × `height` (180 × 50 mm) in the bottom-right corner.
  - `sheetlayout.iso7200a.ISO7200A` (180 × 36 mm), `sheetlayout.iso7200b.ISO7200B`
    (180 × 27 mm) and `sheetlayout.freecada.FreeCADA` (140.35 × 47 mm):
    filled-in title blocks with texts per language in `language_texts`.
    Edit a text there and call `update_current_language()`. If
    `picture_path` names an existing file, the title block also asks the
    drawer to place that picture.
- Folding lines (`sheetlayout.foldinglines`)
  - `FoldingLines`: draws no marks.
  - `DIN824ALike` and `DIN824CLike`: short marks at the sheet edges showing
    how to fold a large sheet down to A4 (`to_what`). Each mark is `depth`
    long (5 mm).
- `sheetlayout.pagestyle.PageStyle`: combines a `layout`, `frame`,
  `title_block` and `folding_lines` and draws them in that order between the
  drawer's `start()` and `end()`. Before drawing, it passes its `font` and
  `show_editable` settings on to the parts.

## Example

```python
from sheetlayout.foldinglines import DIN824CLike
from sheetlayout.iso5457frame import ISO5457Frame
from sheetlayout.iso7200a import ISO7200A
from sheetlayout.page import Orientation
from sheetlayout.pagestyle import PageStyle


class ListDrawer:
    """Collects every drawing call instead of rendering it."""

    def __init__(self):
        self.show_editable = False
        self.width = self.height = 0.0
        self.calls = []

    def start(self): self.calls.append(("start",))
    def end(self): self.calls.append(("end",))
    def draw_line(self, start, end, width): self.calls.append(("line", start, end))
    def draw_rect(self, rect, width): self.calls.append(("rect", rect))
    def draw_poly(self, origin, points, width, fill): self.calls.append(("poly", origin))
    def draw_text(self, position, text, size, height_anchor, width_anchor, width,
                  font="osifont", name="", editable=False):
        self.calls.append(("text", position, text))
    def draw_picture(self, path, position, width, height):
        self.calls.append(("picture", path))


style = PageStyle(frame=ISO5457Frame(), title_block=ISO7200A(),
                  folding_lines=DIN824CLike())
style.set_page_dimensions(420, 297, Orientation.LANDSCAPE)  # A3 landscape
style.title_block.set_language("de_at")

drawer = ListDrawer()
style.draw(drawer)
print(drawer.width, drawer.height)  # 420 297
```

## What it does not do

The package does not render anything itself. No SVG, PDF, PNG, HTML or CAD
worksheet writers are included, so you have to supply the drawer. There is
also no command-line tool and no graphical editor or preview.

## Installing

```
pip install .
```

The package has no dependencies beyond Python 3.10 or later. To run the tests:

```
pip install ".[test]"
pytest
```