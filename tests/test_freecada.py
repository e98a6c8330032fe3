import pytest

from sheetlayout.freecada import FreeCADA
from sheetlayout.page import PageLayout, Point, Rect


class RecordingDrawer:
    def __init__(self):
        self.show_editable = False
        self.width = 0.0
        self.height = 0.0
        self.calls = []

    def start(self):
        self.calls.append(("start", (), {}))

    def end(self):
        self.calls.append(("end", (), {}))

    def draw_line(self, *args, **kwargs):
        self.calls.append(("line", args, kwargs))

    def draw_rect(self, *args, **kwargs):
        self.calls.append(("rect", args, kwargs))

    def draw_poly(self, *args, **kwargs):
        self.calls.append(("poly", args, kwargs))

    def draw_text(self, *args, **kwargs):
        self.calls.append(("text", args, kwargs))

    def draw_picture(self, *args, **kwargs):
        self.calls.append(("picture", args, kwargs))

    def of(self, kind):
        return [args for name, args, _ in self.calls if name == kind]


WHERE = Rect(20, 10, 267, 190)


@pytest.fixture
def drawn():
    block = FreeCADA()
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    return block, drawer


def test_defaults():
    block = FreeCADA()
    assert block.type == "FreeCAD Style A"
    assert block.description == "Based on a FreeCAD template"
    assert block.title_block_area == Rect(0, 0, 140.35, 47)
    assert block.languages == ["en_gb", "de_at"]
    assert block.language == "en_gb"
    assert set(block.language_texts) == {"en_gb", "de_de"}


def test_texts_of_languages():
    block = FreeCADA()
    assert block.current_language["Creator"].label == "DESIGNED BY:"
    assert block.current_language["Creator"].text == "Designed by Name"
    assert block.language_texts["de_de"]["Scale"].label == "MAẞSTAB:"
    assert set(block.language_texts["en_gb"]) == set(block.language_texts["de_de"])


def test_unknown_language_is_ignored():
    block = FreeCADA()
    block.set_language("fr_fr")
    assert block.language == "en_gb"


def test_area_sits_in_bottom_right_corner(drawn):
    block, drawer = drawn
    area = block.title_block_area
    assert area.bottom_right == WHERE.bottom_right
    assert area.width == pytest.approx(140.35)
    assert area.height == pytest.approx(47)
    assert drawer.of("rect")[0] == (area, 0.35)


def test_grid_lines_stay_inside_area(drawn):
    block, drawer = drawn
    area = block.title_block_area
    lines = drawer.of("line")
    assert len(lines) == 14
    for start, end, width in lines:
        assert width == 0.35
        for point in (start, end):
            assert area.left - 1e-9 <= point.x <= area.right + 1e-9
            assert area.top - 1e-9 <= point.y <= area.bottom + 1e-9


def test_every_field_is_drawn_with_its_name(drawn):
    block, drawer = drawn
    names = {args[7] for args in drawer.of("text") if len(args) > 7}
    assert names == set(block.language_texts["en_gb"])


def test_title_field_text(drawn):
    _, drawer = drawn
    title = [args for args in drawer.of("text") if len(args) > 7 and args[7] == "Title"]
    assert len(title) == 1
    assert title[0][1] == "Title"
    assert title[0][8] is True


def test_font_is_passed_to_every_text():
    block = FreeCADA()
    block.font = "myfont"
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    texts = drawer.of("text")
    assert texts
    assert all(args[6] == "myfont" for args in texts)


def test_language_without_texts_draws_empty_fields():
    block = FreeCADA()
    block.set_language("de_at")
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    assert all(args[1] == "" for args in drawer.of("text"))


def test_picture_drawn_when_file_exists(tmp_path):
    picture = tmp_path / "logo.png"
    picture.write_bytes(b"image")
    block = FreeCADA()
    block.picture_path = str(picture)
    drawer = RecordingDrawer()
    block.draw(drawer, WHERE, PageLayout())
    area = block.title_block_area
    pictures = drawer.of("picture")
    assert len(pictures) == 1
    path, position, width, height = pictures[0]
    assert path == str(picture)
    assert position.x == pytest.approx(area.left + 117)
    assert position.y == pytest.approx(area.top + 27.65)
    assert (width, height) == (77, 9)


def test_no_picture_for_missing_file(drawn, tmp_path):
    _, drawer = drawn
    assert drawer.of("picture") == []
    block = FreeCADA()
    block.picture_path = str(tmp_path / "missing.png")
    other = RecordingDrawer()
    block.draw(other, WHERE, PageLayout())
    assert other.of("picture") == []


def test_side_letters_are_labels(drawn):
    block, drawer = drawn
    area = block.title_block_area
    side_labels = [
        args[1]
        for args in drawer.of("text")
        if len(args) == 7 and args[0].x == pytest.approx(area.left + 121.46)
    ]
    assert side_labels == ["G", "F", "E", "D", "C", "B", "A"]
    assert Point(0, 0) == Point()