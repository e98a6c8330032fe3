import pytest

from sheetlayout.iso7200b import ISO7200B
from sheetlayout.page import PageLayout, Rect
from sheetlayout.titleblock import TitleBlockText


class RecordingDrawer:
    def __init__(self):
        self.show_editable = False
        self.width = 0.0
        self.height = 0.0
        self.lines = []
        self.rects = []
        self.texts = []
        self.pictures = []

    def start(self):
        pass

    def end(self):
        pass

    def draw_line(self, start, end, width):
        self.lines.append((start, end, width))

    def draw_rect(self, rect, width):
        self.rects.append((rect, width))

    def draw_poly(self, origin, points, width, fill):
        pass

    def draw_text(
        self,
        position,
        text,
        size,
        height_anchor,
        width_anchor,
        width,
        font="osifont",
        name="",
        editable=False,
    ):
        self.texts.append(
            dict(position=position, text=text, size=size, width=width,
                 font=font, name=name, editable=editable)
        )

    def draw_picture(self, path, position, width, height):
        self.pictures.append((path, position, width, height))


WHERE = Rect(20, 10, 267, 190)


@pytest.fixture
def drawn():
    block = ISO7200B()
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    return block, drawer


def field(drawer, name):
    return next(t for t in drawer.texts if t["name"] == name)


def test_construction_defaults():
    block = ISO7200B()
    assert block.type == "ISO7200 Style B"
    assert block.languages == ["en_gb", "de_de"]
    # "de_at" is not offered, so the earlier selection stays
    assert block.language == "en_gb"
    assert block.title_block_area.width == 180
    assert block.title_block_area.height == 27
    assert sorted(block.language_texts) == ["de_de", "en_gb"]


def test_area_sits_in_bottom_right_corner(drawn):
    block, drawer = drawn
    area = block.title_block_area
    assert area.bottom_right == WHERE.bottom_right
    assert (area.width, area.height) == (180, 27)
    assert drawer.rects == [(area, 0.7)]


def test_grid_lines_inside_area(drawn):
    block, drawer = drawn
    area = block.title_block_area
    assert len(drawer.lines) == 10
    for start, end, width in drawer.lines:
        assert width == 0.5
        for p in (start, end):
            assert area.left <= p.x <= area.right
            assert area.top <= p.y <= area.bottom


def test_all_fields_are_editable(drawn):
    block, _ = drawn
    block.language_texts["en_gb"]["Creator"] = TitleBlockText("Created by", "x", False)
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    named = [t for t in drawer.texts if t["name"]]
    assert len(named) == 14
    assert all(t["editable"] for t in named)
    assert field(drawer, "Creator")["text"] == "x"


def test_english_texts(drawn):
    _, drawer = drawn
    assert field(drawer, "SheetNumberNumbers")["text"] == "100/300"
    assert field(drawer, "LegalOwner")["text"] == ["John Smith Co."] * 3
    assert field(drawer, "SupplementaryTitle")["text"] == ["complete with bearing"] * 2
    labels = [t["text"] for t in drawer.texts if not t["name"]]
    assert "Resp. dept." in labels
    assert len(labels) == 13


def test_german_texts():
    block = ISO7200B()
    block.set_language("de_de")
    assert block.language == "de_de"
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    assert field(drawer, "SheetNumberNumbers")["text"] == "1/3"
    assert field(drawer, "Title")["text"] == "Kreissägewelle"
    assert block.current_language["Creator"].label == "Erstellt durch:"


def test_text_line_width_follows_size(drawn):
    _, drawer = drawn
    for t in drawer.texts:
        assert t["width"] == pytest.approx(t["size"] / 10)
        assert t["font"] == "osifont"


def test_picture_drawn_only_when_file_exists(tmp_path):
    block = ISO7200B()
    drawer = RecordingDrawer()
    block.picture_path = str(tmp_path / "missing.png")
    block.draw(drawer, WHERE, PageLayout())
    assert drawer.pictures == []

    logo = tmp_path / "logo.png"
    logo.write_bytes(b"\x89PNG")
    block.picture_path = str(logo)
    block.draw(drawer, WHERE, PageLayout())
    assert len(drawer.pictures) == 1
    path, position, width, height = drawer.pictures[0]
    assert path == str(logo)
    assert (width, height) == (26, 14)
    assert position.x == block.title_block_area.left + 28
    assert position.y == block.title_block_area.bottom - 2