"""Tests for the headless picker key replay."""

import pytest

from hp_core.session import Selected
from hp_ui.headless import HeadlessPicker
from hp_ui.settings import PickerSettings


pytestmark = pytest.mark.unit_ui


def test_typed_tag_selects_item(letters_producer) -> None:
    picker = HeadlessPicker(settings=PickerSettings(alphabet="ab"))

    selected = picker.pick(letters_producer(3), ["b", "a"], capacity=5)

    assert selected == Selected(meta="meta-2", index=2)
    assert [row.tag for row in picker.renderer.shown[0].rows] == ["aa", "ab", "ba"]
    assert picker.renderer.hidden == 1


def test_paging_then_selecting(letters_producer) -> None:
    picker = HeadlessPicker(settings=PickerSettings(alphabet="ab"))

    selected = picker.pick(letters_producer(5), ["J", "J", "a"], capacity=2)

    assert selected == Selected(meta="meta-4", index=4)
    assert [shown.page.index for shown in picker.renderer.shown] == [1, 2, 3]


def test_cursor_selection(letters_producer) -> None:
    picker = HeadlessPicker()

    selected = picker.pick(letters_producer(4), ["down", "down", "up", "enter"])

    assert selected == Selected(meta="meta-1", index=1)


def test_cancel_and_exhausted_keys_return_none(letters_producer) -> None:
    picker = HeadlessPicker()
    assert picker.pick(letters_producer(3), ["escape"]) is None
    assert picker.pick(letters_producer(3), ["x", "J"]) is None
    assert picker.ignored_keys == ["x"]
    assert picker.renderer.hidden == 2


def test_empty_producer_returns_none(letters_producer) -> None:
    picker = HeadlessPicker()
    assert picker.pick(letters_producer(0), ["s"]) is None
    assert picker.renderer.shown == []
