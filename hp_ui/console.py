"""Rich console renderer for printing pages outside a full-screen app."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from hp_core.session import PageShown
from hp_ui import theme
from hp_ui.render import DYNAMIC_WIDTH, plain_lines

# panel border plus horizontal padding on both sides
_PANEL_CHROME_COLUMNS = 4


class ConsoleRenderer:
    def __init__(
        self,
        console: Console | None = None,
        *,
        title: str = "Pick",
        max_width: int = DYNAMIC_WIDTH,
    ) -> None:
        self._console = console or Console(stderr=True)
        self._title = title
        self._max_width = max_width

    def render(self, shown: PageShown) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        for plain in plain_lines(shown):
            line = Text(plain)
            line.stylize(theme.RICH_HINT_STYLE, 0, shown.tag_width)
            text.append_text(line)
            text.append("\n")
        page = shown.page
        if page.page_count > 1:
            text.append(theme.page_footer(page.index, page.page_count), style=theme.RICH_PAGE_STYLE)
        else:
            text.rstrip()
        return text

    def show(self, shown: PageShown) -> None:
        width = None if self._max_width == DYNAMIC_WIDTH else self._max_width + _PANEL_CHROME_COLUMNS
        self._console.print(
            Panel(
                self.render(shown),
                title=theme.panel_title(self._title),
                border_style=theme.RICH_ACCENT,
                expand=False,
                width=width,
            )
        )

    def hide(self) -> None:
        return None
