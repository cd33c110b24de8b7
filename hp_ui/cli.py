"""
Command-line interface for hintpick.

Reads labels (one per line) from a file or stdin and lets the user pick one by
typing its hint tag. The selection is printed as ``index<TAB>label``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from hp_common.errors import ConfigurationError, HPError, ProducerMismatchError, error_to_payload
from hp_common.logging import configure_logging
from hp_core.menu import Producer
from hp_ui import theme
from hp_ui.console import ConsoleRenderer
from hp_ui.headless import DEFAULT_CAPACITY, HeadlessPicker, RecordingRenderer
from hp_ui.settings import PickerSettings, load_settings

EXIT_CANCELLED = 1
EXIT_USAGE = 2

app = typer.Typer(help="Pick an item by typing its short hint tag.", no_args_is_help=True)
_err = Console(stderr=True)


def _report(level: str, message: str) -> None:
    _err.print(theme.presenter_message(level, message))


def _describe_error(exc: HPError) -> str:
    payload = error_to_payload(exc)
    details = ", ".join(f"{key}={value}" for key, value in payload["error_context"].items())
    return f"{payload['error']} ({details})" if details else payload["error"]


def _read_labels(source: Optional[Path]) -> list[str]:
    if source is None:
        lines = sys.stdin.read().splitlines()
    else:
        try:
            lines = source.read_text().splitlines()
        except OSError as exc:
            raise ConfigurationError(
                "Cannot read items file", context={"path": source}, cause=exc
            ) from exc
    return [line for line in lines if line.strip()]


def _line_producer(labels: list[str]) -> Producer:
    def produce() -> tuple[list[int], list[str]]:
        return list(range(len(labels))), labels

    return produce


def _settings(config: Optional[Path], **overrides: object) -> PickerSettings:
    try:
        return load_settings(config, **overrides)
    except ConfigurationError as exc:
        _report("error", escape(_describe_error(exc)))
        raise typer.Exit(EXIT_USAGE) from exc


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options."""
    configure_logging(debug=debug, force=True)


@app.command("pick")
def pick(
    source: Optional[Path] = typer.Argument(
        None, help="File with one item per line (defaults to stdin)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", help="Hint characters."),
    title: Optional[str] = typer.Option(None, "--title", help="Window title."),
    headless: bool = typer.Option(
        False, "--headless", help="Replay --keys instead of opening the TUI."
    ),
    keys: str = typer.Option(
        "", "--keys", help="Whitespace separated keystrokes for --headless."
    ),
    capacity: Optional[int] = typer.Option(
        None, "--capacity", min=1, help="Rows per page (defaults to terminal height)."
    ),
) -> None:
    """Show items with hint tags and print the chosen one."""
    settings = _settings(config, alphabet=alphabet, title=title)
    try:
        labels = _read_labels(source)
    except HPError as exc:
        _report("error", escape(_describe_error(exc)))
        raise typer.Exit(EXIT_USAGE) from exc
    producer = _line_producer(labels)

    if not labels:
        _report("warning", "No items")
        raise typer.Exit(EXIT_CANCELLED)

    try:
        if headless:
            picker = HeadlessPicker(
                settings=settings,
                renderer=RecordingRenderer(
                    forward_to=ConsoleRenderer(title=settings.title, max_width=settings.max_width)
                ),
            )
            selected = picker.pick(
                producer, _split_keys(keys), capacity=capacity or DEFAULT_CAPACITY
            )
        else:
            if not sys.stdout.isatty() or (source is None and not sys.stdin.isatty()):
                _report("error", "Interactive picking needs a terminal; use --headless.")
                raise typer.Exit(EXIT_USAGE)
            from hp_ui.picker import HintPicker

            selected = HintPicker(settings).pick(producer, capacity=capacity)
    except ProducerMismatchError as exc:
        _report("error", escape(_describe_error(exc)))
        raise typer.Exit(EXIT_USAGE) from exc

    if selected is None:
        raise typer.Exit(EXIT_CANCELLED)
    typer.echo(f"{selected.index}\t{labels[selected.index]}")


@app.command("tags")
def tags(
    count: int = typer.Argument(..., min=0, help="Number of tags to generate."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", help="Hint characters."),
) -> None:
    """Print the hint tags assigned to COUNT rows."""
    settings = _settings(config, alphabet=alphabet)
    for tag in settings.generator().generate(count):
        typer.echo(tag)


def _split_keys(keys: str) -> list[str]:
    return keys.split()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
