"""Split an ordered item list into capacity-sized pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from hp_common.errors import InvalidCapacityError, InvalidCountError

T = TypeVar("T")


@dataclass(frozen=True)
class Page:
    index: int
    capacity: int
    offset: int
    length: int
    page_count: int
    item_count: int

    @property
    def is_first(self) -> bool:
        return self.index == 1

    @property
    def is_last(self) -> bool:
        return self.index == self.page_count

    @property
    def rows(self) -> range:
        """1-based row numbers visible on this page."""
        return range(1, self.length + 1)

    def absolute_index(self, row: int) -> int:
        return self.offset + row - 1

    def slice(self, items: Sequence[T]) -> Sequence[T]:
        return items[self.offset : self.offset + self.length]


def page_count(item_count: int, capacity: int) -> int:
    return max(1, -(-item_count // capacity))


def paginate(item_count: int, capacity: int, requested_page: int) -> Page:
    """Compute the page shown for ``requested_page``, clamped to valid pages."""
    if capacity < 1:
        raise InvalidCapacityError(
            "Page capacity must be at least one row", context={"capacity": capacity}
        )
    if item_count < 0:
        raise InvalidCountError(
            "Item count must be non-negative", context={"item_count": item_count}
        )

    count = page_count(item_count, capacity)
    index = max(1, min(requested_page, count))
    offset = (index - 1) * capacity
    if index == count:
        # an exact multiple leaves a full last page
        length = item_count - offset
    else:
        length = capacity

    return Page(
        index=index,
        capacity=capacity,
        offset=offset,
        length=length,
        page_count=count,
        item_count=item_count,
    )
