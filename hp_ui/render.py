"""Turn a shown page into styled text fragments for a host window."""

from __future__ import annotations

from typing import TypeAlias

from hp_core.session import PageShown
from hp_ui import theme

Fragment: TypeAlias = tuple[str, str]

DYNAMIC_WIDTH = -1


def row_text(tag: str, label: str) -> str:
    return f"{tag} {label}"


def window_width(shown: PageShown, max_width: int = DYNAMIC_WIDTH) -> int:
    """Fixed width when configured, otherwise the widest row."""
    if max_width != DYNAMIC_WIDTH:
        return max_width
    return max((len(row_text(row.tag, row.label)) for row in shown.rows), default=1)


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[:width]


def format_rows(
    shown: PageShown,
    *,
    cursor_row: int | None = None,
    pending: str = "",
    max_width: int = DYNAMIC_WIDTH,
) -> list[Fragment]:
    """Style fragments for every visible row plus a footer on multi-page lists.

    The first ``tag_width`` characters of each row are the hint; symbols already
    typed for a matching tag are styled separately.
    """
    width = window_width(shown, max_width)
    fragments: list[Fragment] = []
    for row_number, row in enumerate(shown.rows, start=1):
        prefix = "class:cursor." if row_number == cursor_row else "class:"
        typed = pending if pending and row.tag.startswith(pending) else ""
        line = _clip(row_text(row.tag, row.label), width)
        hint = line[: shown.tag_width]
        if typed:
            fragments.append((f"{prefix}pending", hint[: len(typed)]))
            hint = hint[len(typed) :]
        fragments.append((f"{prefix}hint", hint))
        fragments.append((f"{prefix}label", line[shown.tag_width :]))
        fragments.append(("", "\n"))

    page = shown.page
    if page.page_count > 1:
        fragments.append(("class:footer", theme.page_footer(page.index, page.page_count)))
    return fragments


def plain_lines(shown: PageShown) -> list[str]:
    return [row_text(row.tag, row.label) for row in shown.rows]
