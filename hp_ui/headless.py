"""Headless picker driven by a scripted key sequence (tests, CI, pipes)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from hp_core.keys import KeyDispatcher
from hp_core.menu import Menu, Producer, Renderer
from hp_core.session import PageShown, Selected
from hp_ui.settings import PickerSettings

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20


@dataclass
class RecordingRenderer:
    shown: list[PageShown] = field(default_factory=list)
    hidden: int = 0
    forward_to: Renderer | None = None

    @property
    def current(self) -> PageShown | None:
        return self.shown[-1] if self.shown else None

    def show(self, shown: PageShown) -> None:
        self.shown.append(shown)
        if self.forward_to is not None:
            self.forward_to.show(shown)

    def hide(self) -> None:
        self.hidden += 1
        if self.forward_to is not None:
            self.forward_to.hide()


@dataclass
class HeadlessPicker:
    settings: PickerSettings = field(default_factory=PickerSettings)
    renderer: RecordingRenderer = field(default_factory=RecordingRenderer)
    ignored_keys: list[str] = field(default_factory=list)

    def pick(
        self,
        producer: Producer,
        keys: Iterable[str],
        *,
        capacity: int = DEFAULT_CAPACITY,
    ) -> Selected | None:
        """Replay ``keys`` against a fresh menu.

        Returns the selection, or None when the input is empty, the keys cancel
        the picker, or they run out before anything is selected.
        """
        results: list[Selected] = []
        menu = Menu(
            producer,
            lambda meta, index: results.append(Selected(meta=meta, index=index)),
            generator=self.settings.generator(),
            renderer=self.renderer,
            capacity=capacity,
        )
        if not menu.open():
            return None

        dispatcher = KeyDispatcher(menu.session, self.settings.keymap())
        for key in keys:
            if key in ("up", "down"):
                dispatcher.move_cursor(-1 if key == "up" else 1)
            elif not dispatcher.press(key):
                self.ignored_keys.append(key)
            if not menu.is_open():
                break

        if menu.is_open():
            logger.info("Key script ended without a selection")
            menu.close()
        return results[0] if results else None
