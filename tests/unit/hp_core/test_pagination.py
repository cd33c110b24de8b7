import pytest

from hp_common.errors import InvalidCapacityError, InvalidCountError
from hp_core.pagination import paginate


pytestmark = pytest.mark.unit_core


def test_five_items_capacity_two() -> None:
    items = list("abcde")
    pages = [paginate(len(items), 2, index) for index in (1, 2, 3)]

    assert [p.page_count for p in pages] == [3, 3, 3]
    assert [list(p.slice(items)) for p in pages] == [["a", "b"], ["c", "d"], ["e"]]
    assert pages[2].length == 1
    assert pages[2].offset == 4
    assert pages[0].is_first and pages[2].is_last


def test_exact_multiple_leaves_full_last_page() -> None:
    page = paginate(6, 3, 2)
    assert page.page_count == 2
    assert page.length == 3
    assert page.is_last


@pytest.mark.parametrize(("requested", "expected"), [(0, 1), (-3, 1), (8, 3), (3, 3)])
def test_requested_page_is_clamped(requested: int, expected: int) -> None:
    assert paginate(5, 2, requested).index == expected


def test_empty_list_is_single_empty_page() -> None:
    page = paginate(0, 4, 3)
    assert (page.index, page.page_count, page.length, page.offset) == (1, 1, 0, 0)
    assert list(page.rows) == []


@pytest.mark.parametrize("capacity", [0, -1])
def test_capacity_below_one_is_rejected(capacity: int) -> None:
    with pytest.raises(InvalidCapacityError):
        paginate(5, capacity, 1)


def test_negative_item_count_is_rejected() -> None:
    with pytest.raises(InvalidCountError):
        paginate(-1, 3, 1)


@pytest.mark.parametrize(("count", "capacity"), [(1, 1), (7, 3), (9, 3), (10, 4), (3, 10)])
def test_pages_cover_every_item_once(count: int, capacity: int) -> None:
    items = list(range(count))
    first = paginate(count, capacity, 1)
    covered: list[int] = []
    for index in range(1, first.page_count + 1):
        covered.extend(paginate(count, capacity, index).slice(items))
    assert covered == items


def test_absolute_index_uses_page_offset() -> None:
    page = paginate(10, 4, 2)
    assert [page.absolute_index(row) for row in page.rows] == [4, 5, 6, 7]
