"""Full-screen prompt_toolkit host for the hint picker."""

from __future__ import annotations

import logging
from typing import Any, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from hp_core.keys import KeyDispatcher
from hp_core.menu import Menu, Producer
from hp_core.session import PageShown, Selected
from hp_ui import theme
from hp_ui.render import Fragment, format_rows, window_width
from hp_ui.settings import PickerSettings

logger = logging.getLogger(__name__)

# frame border top/bottom plus the page footer
_CHROME_ROWS = 3

_NAMED_KEYS: dict[str, str] = {
    Keys.ControlM: "enter",
    Keys.Escape: "escape",
    Keys.ControlI: "tab",
    Keys.ControlH: "backspace",
}


def key_name(key_press: KeyPress) -> str:
    """Name a key press the way picker settings spell it."""
    key = key_press.key
    if isinstance(key, Keys):
        return _NAMED_KEYS.get(key, key.value)
    return key


class _PageView:
    """Renderer holding the page currently on screen."""

    def __init__(self) -> None:
        self.shown: PageShown | None = None
        self.app: Application | None = None

    def show(self, shown: PageShown) -> None:
        self.shown = shown
        if self.app is not None:
            self.app.invalidate()

    def hide(self) -> None:
        self.shown = None


class HintPicker:
    """Pick one item by typing its hint tag."""

    def __init__(self, settings: PickerSettings | None = None) -> None:
        self._settings = settings or PickerSettings()

    @property
    def settings(self) -> PickerSettings:
        return self._settings

    def pick(
        self,
        producer: Producer,
        *,
        title: str | None = None,
        capacity: int | Callable[[], int] | None = None,
    ) -> Selected | None:
        view = _PageView()
        results: list[Selected] = []
        menu = Menu(
            producer,
            lambda meta, index: results.append(Selected(meta=meta, index=index)),
            generator=self._settings.generator(),
            renderer=view,
            capacity=capacity if capacity is not None else lambda: self._terminal_capacity(view),
        )
        if not menu.open():
            return None

        dispatcher = KeyDispatcher(menu.session, self._settings.keymap())
        app = self._build_app(menu, dispatcher, view, title or self._settings.title, results)
        view.app = app
        return app.run()

    @staticmethod
    def _terminal_capacity(view: _PageView) -> int:
        if view.app is None:
            from prompt_toolkit.output.defaults import create_output

            rows = create_output().get_size().rows
        else:
            rows = view.app.output.get_size().rows
        return max(1, rows - _CHROME_ROWS)

    def _build_app(
        self,
        menu: Menu,
        dispatcher: KeyDispatcher,
        view: _PageView,
        title: str,
        results: list[Selected],
    ) -> Application:
        max_width = self._settings.max_width

        def fragments() -> list[Fragment]:
            if view.shown is None:
                return []
            return format_rows(
                view.shown,
                cursor_row=dispatcher.cursor_row,
                pending=dispatcher.pending,
                max_width=max_width,
            )

        def width() -> Dimension:
            if view.shown is None:
                return Dimension()
            return Dimension(preferred=window_width(view.shown, max_width))

        def height() -> Dimension:
            if view.shown is None:
                return Dimension()
            extra = 1 if view.shown.page.page_count > 1 else 0
            return Dimension(preferred=len(view.shown.rows) + extra)

        body = Window(FormattedTextControl(fragments, focusable=True), width=width, height=height)
        kb = KeyBindings()

        def finish(event: KeyPressEvent) -> None:
            if menu.is_open():
                event.app.invalidate()
                return
            self._exit(event.app, results[0] if results else None)

        @kb.add("up")
        def _(event: KeyPressEvent) -> None:
            dispatcher.move_cursor(-1)
            event.app.invalidate()

        @kb.add("down")
        def _(event: KeyPressEvent) -> None:
            dispatcher.move_cursor(1)
            event.app.invalidate()

        @kb.add("c-c")
        def _(event: KeyPressEvent) -> None:
            menu.close()
            finish(event)

        @kb.add(Keys.Any)
        @kb.add("enter")
        @kb.add("escape", eager=True)
        def _(event: KeyPressEvent) -> None:
            name = key_name(event.key_sequence[0])
            if not dispatcher.press(name):
                logger.debug("Ignoring unbound key %r", name)
            finish(event)

        def on_before_render(app: Application) -> None:
            shown = view.shown
            if shown is None or capacity_unchanged(shown):
                return
            menu.open()
            dispatcher.sync()

        def capacity_unchanged(shown: PageShown) -> bool:
            return shown.page.capacity == menu.capacity()

        app: Application = Application(
            layout=Layout(HSplit([Frame(body, title=title), Window()]), focused_element=body),
            key_bindings=kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_picker_style())),
            full_screen=True,
            before_render=on_before_render,
        )
        return app

    @staticmethod
    def _exit(app: Application, result: Any) -> None:
        try:
            app.exit(result=result)
        except Exception as exc:  # pragma: no cover - defensive
            if "Return value already set" not in str(exc):
                raise
