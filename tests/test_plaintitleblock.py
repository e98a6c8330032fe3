from unittest.mock import Mock, call

from sheetlayout.page import A4, Orientation, PageLayout, Rect
from sheetlayout.plaintitleblock import PlainTitleBlock


def test_new_block_is_180_by_50_at_origin():
    block = PlainTitleBlock()
    assert block.type == "Plain TitleBlock"
    assert (block.width, block.height) == (180, 50)
    assert block.title_block_area == Rect(0, 0, 180, 50)


def test_draw_places_block_in_bottom_right():
    block = PlainTitleBlock()
    block.width = 120
    block.height = 30
    drawer = Mock()
    where = Rect(20, 10, 267, 190)
    block.draw(drawer, where, PageLayout(A4, Orientation.LANDSCAPE))
    area = block.title_block_area
    assert area.bottom_right == where.bottom_right
    assert (area.width, area.height) == (120, 30)
    assert drawer.mock_calls == [call.draw_rect(area, 1)]


def test_setting_height_resets_area_with_previous_size():
    block = PlainTitleBlock()
    block.width = 100
    block.height = 40
    assert block.height == 40
    assert block.title_block_area == Rect(0, 0, 100, 50)


def test_languages_inherited():
    block = PlainTitleBlock()
    block.set_language("en_gb")
    assert (block.language, block.languages) == ("none", ["none"])