from unittest.mock import Mock

import pytest

from sheetlayout.iso7200a import ISO7200A
from sheetlayout.page import PageLayout, Point, Rect, TextHeightAnchor, TextWidthAnchor
from sheetlayout.titleblock import TitleBlockText

WHERE = Rect(20, 10, 400, 277)

_TEXT_PARAMS = (
    "position",
    "text",
    "size",
    "height_anchor",
    "width_anchor",
    "width",
    "font",
    "name",
    "editable",
)
_TEXT_DEFAULTS = {"font": "osifont", "name": "", "editable": False}


def drawn(block):
    drawer = Mock()
    block.draw(drawer, WHERE, PageLayout())
    return drawer


def texts(drawer):
    """Every draw_text call as a dict of its arguments, defaults filled in."""
    result = []
    for made in drawer.draw_text.call_args_list:
        values = dict(_TEXT_DEFAULTS)
        values.update(zip(_TEXT_PARAMS, made.args))
        values.update(made.kwargs)
        result.append(values)
    return result


def named(drawer, name):
    return [t for t in texts(drawer) if t["name"] == name]


def test_construction_defaults():
    block = ISO7200A()
    assert block.type == "ISO7200 Style A"
    assert block.title_block_area == Rect(0, 0, 180, 36)
    assert block.languages == ["en_gb", "de_at"]
    assert block.language == "en_gb"
    assert set(block.language_texts) == {"en_gb", "de_at"}
    assert block.picture_path == ""


def test_language_texts_hold_source_values():
    block = ISO7200A()
    en = block.language_texts["en_gb"]
    de = block.language_texts["de_at"]
    assert en["Title"] == TitleBlockText("Title, additional title", "Circular saw shaft")
    assert de["Title"].text == "Kreissägewelle"
    assert en["IdentificationNumber"].text == de["IdentificationNumber"].text
    assert set(en) == set(de)


def test_set_language_loads_current_texts():
    block = ISO7200A()
    block.set_language("de_at")
    assert block.language == "de_at"
    assert block.current_language["Creator"].text == "Christian Schmid"
    assert block.current_language == block.language_texts["de_at"]


def test_set_unknown_language_keeps_selection():
    block = ISO7200A()
    block.set_language("fr_fr")
    assert block.language == "en_gb"
    assert block.current_language == block.language_texts["en_gb"]


def test_update_current_language_picks_up_edits():
    block = ISO7200A()
    block.language_texts["en_gb"]["Creator"] = TitleBlockText("Made by", "Somebody")
    block.update_current_language()
    assert block.current_language["Creator"].text == "Somebody"


def test_draw_places_area_in_bottom_right():
    block = ISO7200A()
    drawer = drawn(block)
    area = block.title_block_area
    assert area.bottom_right == WHERE.bottom_right
    assert (area.width, area.height) == (180, 36)
    assert [made.args for made in drawer.draw_rect.call_args_list] == [(area, 0.7)]


def test_draw_texts_use_current_language():
    block = ISO7200A()
    block.set_language("de_at")
    drawer = drawn(block)
    (title,) = named(drawer, "Title")
    assert (title["text"], title["size"], title["editable"]) == ("Kreissägewelle", 3.5, True)
    (owner,) = named(drawer, "LegalOwner")
    assert owner["text"] == ["Schuler AG Bergstadt"] * 3
    assert owner["height_anchor"] is TextHeightAnchor.TOP
    (ident,) = named(drawer, "IdentificationNumber")
    assert ident["width_anchor"] is TextWidthAnchor.CENTER
    (supp,) = named(drawer, "SupplementaryTitle")
    assert supp["text"] == ["komplette mit Lagerung"] * 2


def test_draw_uses_font_except_first_label():
    block = ISO7200A()
    block.font = "customfont"
    first, *rest = texts(drawn(block))
    assert (first["text"], first["font"]) == ("Resp. dept.", "osifont")
    assert all(t["font"] == "customfont" for t in rest)


def test_draw_reloads_texts_from_language_texts():
    block = ISO7200A()
    block.language_texts["en_gb"]["Title"] = TitleBlockText("T", "Gear box", False)
    (title,) = named(drawn(block), "Title")
    assert (title["text"], title["editable"]) == ("Gear box", False)


def test_picture_drawn_only_when_file_exists(tmp_path):
    block = ISO7200A()
    block.picture_path = str(tmp_path / "missing.png")
    assert drawn(block).draw_picture.call_args_list == []

    logo = tmp_path / "logo.svg"
    logo.write_text("<svg/>")
    block.picture_path = str(logo)
    pictures = [made.args for made in drawn(block).draw_picture.call_args_list]
    area = block.title_block_area
    assert pictures == [(str(logo), Point(area.left + 67, area.bottom - 2), 65, 23)]


@pytest.mark.parametrize("language", ["en_gb", "de_at"])
def test_every_field_is_drawn(language):
    block = ISO7200A()
    block.set_language(language)
    names = {t["name"] for t in texts(drawn(block)) if t["name"]}
    assert names == set(block.language_texts[language])