"""User-facing hosts for the hint picker: TUI, headless and CLI."""

from hp_ui.headless import HeadlessPicker, RecordingRenderer
from hp_ui.settings import PickerSettings, load_settings

__all__ = ["HeadlessPicker", "PickerSettings", "RecordingRenderer", "load_settings"]
