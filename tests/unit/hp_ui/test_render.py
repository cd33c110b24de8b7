import pytest
from rich.console import Console

from hp_core.session import SelectionSession, entries_from_producer
from hp_core.tags import TagGenerator
from hp_ui.console import ConsoleRenderer
from hp_ui.render import format_rows, plain_lines, window_width


pytestmark = pytest.mark.unit_ui


def _shown(labels: list[str], capacity: int):
    session = SelectionSession(TagGenerator("ab"))
    return session.start(entries_from_producer(list(labels), labels), capacity)


def test_plain_lines_prefix_tags() -> None:
    shown = _shown(["alpha", "beta", "gamma"], 3)
    assert plain_lines(shown) == ["aa alpha", "ab beta", "ba gamma"]


def test_window_width_dynamic_and_fixed() -> None:
    shown = _shown(["alpha", "beta", "gamma"], 3)
    assert window_width(shown) == len("aa alpha")
    assert window_width(shown, 4) == 4


def test_format_rows_highlights_hint_and_cursor() -> None:
    shown = _shown(["alpha", "beta"], 2)
    fragments = format_rows(shown, cursor_row=2)

    assert fragments == [
        ("class:hint", "a"),
        ("class:label", " alpha"),
        ("", "\n"),
        ("class:cursor.hint", "b"),
        ("class:cursor.label", " beta"),
        ("", "\n"),
    ]


def test_format_rows_marks_pending_prefix_and_footer() -> None:
    shown = _shown(["alpha", "beta", "gamma", "delta", "eps"], 4)
    fragments = format_rows(shown, pending="b")

    assert ("class:pending", "b") in fragments
    assert ("class:hint", "a") in fragments
    assert fragments[-1] == ("class:footer", "page 1/2")


def test_format_rows_clips_to_max_width() -> None:
    shown = _shown(["a long label"], 1)
    fragments = format_rows(shown, max_width=5)
    assert "".join(text for _, text in fragments) == "a a l\n"


def test_console_renderer_prints_panel() -> None:
    console = Console(record=True, width=60, color_system=None)
    renderer = ConsoleRenderer(console, title="Files")
    shown = _shown(["alpha", "beta", "gamma"], 2)

    renderer.show(shown)
    output = console.export_text()

    assert "Files" in output
    assert "a alpha" in output
    assert "page 1/2" in output


def test_console_renderer_fixed_width_includes_panel_chrome() -> None:
    console = Console(record=True, width=60, color_system=None)
    renderer = ConsoleRenderer(console, max_width=10)
    shown = _shown(["a label much longer than ten", "beta", "gamma"], 2)

    renderer.show(shown)
    lines = [line for line in console.export_text().splitlines() if line]

    assert {len(line) for line in lines} == {14}
