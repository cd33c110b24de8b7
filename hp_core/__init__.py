"""Hint tag generation, pagination and the selection state machine."""

from hp_core.alphabet import TagAlphabet
from hp_core.keys import KeyDispatcher, KeyMap
from hp_core.menu import Menu, Renderer
from hp_core.pagination import Page, paginate
from hp_core.session import (
    PageShown,
    PickEntry,
    RenderedRow,
    Selected,
    SelectionSession,
    entries_from_producer,
)
from hp_core.tags import TagGenerator

__all__ = [
    "KeyDispatcher",
    "KeyMap",
    "Menu",
    "Page",
    "PageShown",
    "PickEntry",
    "RenderedRow",
    "Renderer",
    "Selected",
    "SelectionSession",
    "TagAlphabet",
    "TagGenerator",
    "entries_from_producer",
    "paginate",
]
