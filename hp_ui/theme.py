from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_HINT_STYLE = "bold yellow"
RICH_PAGE_STYLE = "dim"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def page_footer(index: int, count: int) -> str:
    return f"page {index}/{count}"


def prompt_toolkit_picker_style() -> Mapping[str, str]:
    return {
        "hint": "fg:#ffaf00 bold",
        "label": "",
        "cursor": "bg:#0000aa fg:white bold",
        "cursor.hint": "bg:#0000aa fg:#ffaf00 bold",
        "pending": "fg:#00ff00 bold",
        "footer": "fg:#888888",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
    }
