"""Open/close/toggle lifecycle binding a producer and a callback to a session."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, Sequence, Tuple, Union

from hp_common.errors import EmptyInputNotice
from hp_core.session import PageShown, SelectionSession, entries_from_producer
from hp_core.tags import TagGenerator

logger = logging.getLogger(__name__)

Producer = Callable[[], Tuple[Sequence[Any], Sequence[str]]]
Callback = Callable[[Any, int], None]
CapacityQuery = Union[int, Callable[[], int]]


class Renderer(Protocol):
    def show(self, shown: PageShown) -> None: ...

    def hide(self) -> None: ...


class Menu:
    """A picker menu that re-reads its items every time it is opened."""

    def __init__(
        self,
        producer: Producer,
        callback: Callback,
        *,
        generator: TagGenerator,
        renderer: Renderer,
        capacity: CapacityQuery,
    ) -> None:
        self._producer = producer
        self._callback = callback
        self._renderer = renderer
        self._capacity = capacity
        self.session = SelectionSession(
            generator,
            on_render=renderer.show,
            on_select=callback,
            on_dismiss=renderer.hide,
        )

    def capacity(self) -> int:
        if callable(self._capacity):
            return self._capacity()
        return self._capacity

    def open(self) -> bool:
        """Show the menu, or re-render it on the current page if already open.

        Returns False when the producer has nothing to show.
        """
        metas, labels = self._producer()
        entries = entries_from_producer(metas, labels)
        capacity = self.capacity()
        try:
            if self.session.is_open():
                self.session.refresh(entries, capacity)
            else:
                self.session.start(entries, capacity)
        except EmptyInputNotice:
            logger.warning("No items to pick from")
            return False
        return True

    def close(self) -> None:
        self.session.close()

    def is_open(self) -> bool:
        return self.session.is_open()

    def toggle(self) -> bool:
        """Close the menu if open, otherwise open it. Returns the new open state."""
        if self.is_open():
            self.close()
            return False
        return self.open()
