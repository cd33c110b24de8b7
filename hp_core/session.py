"""Selection session state machine.

The session is either closed or showing one page of entries whose rows are
bound to hint tags. ``transition`` is a pure function from a state and an
event to the next state plus the effects a host must perform (redraw a page,
deliver a selection, hide the picker). ``SelectionSession`` keeps the current
state and forwards effects to optional host hooks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar, Union

from hp_common.errors import (
    EmptyInputNotice,
    OutOfRangeRowError,
    ProducerMismatchError,
    SessionClosedError,
)
from hp_core.pagination import Page, paginate
from hp_core.tags import TagGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PickEntry(Generic[T]):
    meta: T
    label: str


def entries_from_producer(metas: Sequence[T], labels: Sequence[str]) -> tuple[PickEntry[T], ...]:
    """Zip producer output into entries, rejecting mismatched lengths."""
    if len(metas) != len(labels):
        raise ProducerMismatchError(
            "Metadata length from producer does not match the number of items",
            context={"meta_count": len(metas), "label_count": len(labels)},
        )
    return tuple(PickEntry(meta, label) for meta, label in zip(metas, labels))


# Events


@dataclass(frozen=True)
class Start:
    entries: Sequence[PickEntry[Any]]
    capacity: int


@dataclass(frozen=True)
class Refresh:
    entries: Sequence[PickEntry[Any]]
    capacity: int


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PrevPage:
    pass


@dataclass(frozen=True)
class ResolveTag:
    tag: str


@dataclass(frozen=True)
class ResolveRow:
    row: int


@dataclass(frozen=True)
class Close:
    pass


Event = Union[Start, Refresh, NextPage, PrevPage, ResolveTag, ResolveRow, Close]


# Effects


@dataclass(frozen=True)
class RenderedRow:
    tag: str
    index: int
    label: str


@dataclass(frozen=True)
class PageShown:
    rows: tuple[RenderedRow, ...]
    tag_width: int
    page: Page


@dataclass(frozen=True)
class Selected:
    meta: Any
    index: int


@dataclass(frozen=True)
class Dismissed:
    pass


Effect = Union[PageShown, Selected, Dismissed]


@dataclass(frozen=True)
class SessionState:
    entries: tuple[PickEntry[Any], ...] = ()
    capacity: int = 0
    page: Page | None = None
    tags: tuple[str, ...] = ()
    bindings: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_open(self) -> bool:
        return self.page is not None

    def row_for_tag(self, tag: str) -> int | None:
        return self.bindings.get(tag)


CLOSED = SessionState()


def _open_page(
    entries: Sequence[PickEntry[Any]],
    capacity: int,
    requested_page: int,
    generator: TagGenerator,
) -> tuple[SessionState, PageShown]:
    entries = tuple(entries)
    if not entries:
        raise EmptyInputNotice("No items")
    page = paginate(len(entries), capacity, requested_page)
    tags = tuple(generator.generate(page.length))
    bindings = MappingProxyType({tag: row for row, tag in zip(page.rows, tags)})
    state = SessionState(
        entries=entries,
        capacity=capacity,
        page=page,
        tags=tags,
        bindings=bindings,
    )
    rows = tuple(
        RenderedRow(tag=tag, index=index, label=entries[index].label)
        for tag, index in zip(tags, (page.absolute_index(row) for row in page.rows))
    )
    return state, PageShown(rows=rows, tag_width=generator.tag_width(page.length), page=page)


def _require_open(state: SessionState, event: Event) -> Page:
    if state.page is None:
        raise SessionClosedError(
            "Selection session is not open", context={"event": type(event).__name__}
        )
    return state.page


def _select(state: SessionState, page: Page, row: int) -> tuple[SessionState, tuple[Effect, ...]]:
    index = page.absolute_index(row)
    return CLOSED, (Dismissed(), Selected(meta=state.entries[index].meta, index=index))


def transition(
    state: SessionState,
    event: Event,
    generator: TagGenerator,
) -> tuple[SessionState, tuple[Effect, ...]]:
    """Apply ``event`` to ``state``.

    Raises on contract violations; the input state is never modified.
    """
    if isinstance(event, Start):
        new_state, shown = _open_page(event.entries, event.capacity, 1, generator)
        return new_state, (shown,)

    if isinstance(event, Close):
        if not state.is_open:
            return CLOSED, ()
        return CLOSED, (Dismissed(),)

    page = _require_open(state, event)

    if isinstance(event, Refresh):
        new_state, shown = _open_page(event.entries, event.capacity, page.index, generator)
        return new_state, (shown,)

    if isinstance(event, (NextPage, PrevPage)):
        forward = isinstance(event, NextPage)
        at_edge = page.is_last if forward else page.is_first
        if at_edge:
            return state, ()
        target = page.index + (1 if forward else -1)
        new_state, shown = _open_page(state.entries, state.capacity, target, generator)
        return new_state, (shown,)

    if isinstance(event, ResolveTag):
        row = state.row_for_tag(event.tag)
        if row is None:
            return state, ()
        return _select(state, page, row)

    if isinstance(event, ResolveRow):
        if event.row < 1 or event.row > page.length:
            raise OutOfRangeRowError(
                "Row is outside the visible page",
                context={"row": event.row, "page_length": page.length},
            )
        return _select(state, page, event.row)

    raise TypeError(f"Unsupported session event: {event!r}")


RenderHook = Callable[[PageShown], None]
SelectHook = Callable[[Any, int], None]
DismissHook = Callable[[], None]


class SelectionSession:
    """Stateful wrapper around ``transition`` that dispatches effects to hooks."""

    def __init__(
        self,
        generator: TagGenerator,
        *,
        on_render: RenderHook | None = None,
        on_select: SelectHook | None = None,
        on_dismiss: DismissHook | None = None,
    ) -> None:
        self._generator = generator
        self._state = CLOSED
        self.on_render = on_render
        self.on_select = on_select
        self.on_dismiss = on_dismiss

    @property
    def generator(self) -> TagGenerator:
        return self._generator

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def page(self) -> Page | None:
        return self._state.page

    @property
    def bindings(self) -> Mapping[str, int]:
        return self._state.bindings

    @property
    def tag_width(self) -> int:
        page = self._state.page
        return self._generator.tag_width(page.length if page else 0)

    def is_open(self) -> bool:
        return self._state.is_open

    def start(self, entries: Sequence[PickEntry[Any]], capacity: int) -> PageShown:
        effects = self.dispatch(Start(tuple(entries), capacity))
        return _first(effects, PageShown)

    def refresh(self, entries: Sequence[PickEntry[Any]], capacity: int) -> PageShown:
        effects = self.dispatch(Refresh(tuple(entries), capacity))
        return _first(effects, PageShown)

    def next_page(self) -> PageShown | None:
        return _first(self.dispatch(NextPage()), PageShown)

    def prev_page(self) -> PageShown | None:
        return _first(self.dispatch(PrevPage()), PageShown)

    def resolve_by_tag(self, tag: str) -> Selected | None:
        return _first(self.dispatch(ResolveTag(tag)), Selected)

    def resolve_by_row(self, row: int) -> Selected:
        return _first(self.dispatch(ResolveRow(row)), Selected)

    def close(self) -> None:
        self.dispatch(Close())

    def dispatch(self, event: Event) -> tuple[Effect, ...]:
        new_state, effects = transition(self._state, event, self._generator)
        if new_state is not self._state:
            logger.debug(
                "Session %s: page %s -> %s",
                type(event).__name__,
                self._state.page.index if self._state.page else None,
                new_state.page.index if new_state.page else None,
            )
        self._state = new_state
        for effect in effects:
            self._emit(effect)
        return effects

    def _emit(self, effect: Effect) -> None:
        if isinstance(effect, PageShown):
            if self.on_render is not None:
                self.on_render(effect)
        elif isinstance(effect, Selected):
            if self.on_select is not None:
                self.on_select(effect.meta, effect.index)
        elif isinstance(effect, Dismissed):
            if self.on_dismiss is not None:
                self.on_dismiss()


E = TypeVar("E")


def _first(effects: Sequence[Effect], kind: type[E]) -> Any:
    for effect in effects:
        if isinstance(effect, kind):
            return effect
    return None
