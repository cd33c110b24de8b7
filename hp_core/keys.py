"""Translate host keystrokes into selection session operations."""

from __future__ import annotations

from dataclasses import dataclass

from hp_core.session import PageShown, Selected, SelectionSession


@dataclass(frozen=True)
class KeyMap:
    """Navigation keys; alphabet symbols are taken from the session's generator."""

    next_page: str = "J"
    prev_page: str = "K"
    under_cursor: str = "enter"
    cancel: str = "escape"


class KeyDispatcher:
    """Feeds single keystrokes into a ``SelectionSession``.

    Alphabet symbols are buffered until they form a full-width tag. Every tag on
    a page has the same width, so a partial tag never resolves early. When the
    session is re-rendered by someone else (a refresh after a resize), typed
    symbols are dropped and the cursor is clamped to the new page.
    """

    def __init__(self, session: SelectionSession, keymap: KeyMap | None = None) -> None:
        self._session = session
        self._keymap = keymap or KeyMap()
        self._pending = ""
        self._cursor = 1
        self._seen = session.state

    @property
    def keymap(self) -> KeyMap:
        return self._keymap

    @property
    def pending(self) -> str:
        """Symbols typed so far for the current tag."""
        return self._pending

    @property
    def cursor_row(self) -> int:
        return self._cursor

    def reset(self) -> None:
        self._pending = ""
        self._cursor = 1
        self._seen = self._session.state

    def sync(self) -> None:
        """Drop typed symbols if the session changed since the last key."""
        state = self._session.state
        if state is self._seen:
            return
        self._seen = state
        self._pending = ""
        page = state.page
        self._cursor = max(1, min(self._cursor, page.length)) if page is not None else 1

    def move_cursor(self, delta: int) -> int:
        self.sync()
        page = self._session.page
        if page is None or page.length == 0:
            return self._cursor
        self._cursor = max(1, min(self._cursor + delta, page.length))
        return self._cursor

    def press(self, key: str) -> bool:
        """Handle one key. Returns False when the key is not bound."""
        self.sync()
        if not self._session.is_open():
            return False

        keymap = self._keymap
        try:
            if key == keymap.cancel:
                self.reset()
                self._session.close()
                return True
            if key == keymap.next_page:
                self._navigate(self._session.next_page())
                return True
            if key == keymap.prev_page:
                self._navigate(self._session.prev_page())
                return True
            if key == keymap.under_cursor:
                self._pending = ""
                self._session.resolve_by_row(self.move_cursor(0))
                return True
            if key in self._session.generator.alphabet:
                self._type_symbol(key)
                return True
            return False
        finally:
            self._seen = self._session.state

    def _navigate(self, shown: PageShown | None) -> None:
        self._pending = ""
        if shown is not None:
            self._cursor = 1

    def _type_symbol(self, symbol: str) -> Selected | None:
        self._pending += symbol
        if len(self._pending) < self._session.tag_width:
            return None
        tag, self._pending = self._pending, ""
        return self._session.resolve_by_tag(tag)
