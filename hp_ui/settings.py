"""Picker settings loaded from YAML, environment and explicit overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from hp_common.config.env import parse_int_env, parse_str_env
from hp_common.errors import ConfigurationError
from hp_core.alphabet import TagAlphabet
from hp_core.keys import KeyMap
from hp_core.tags import TagGenerator

DEFAULT_ALPHABET = "sadfjklewcmpgh"

_ENV_KEYS: dict[str, str] = {
    "alphabet": "HP_ALPHABET",
    "next_page": "HP_NEXT_PAGE",
    "prev_page": "HP_PREV_PAGE",
    "under_cursor": "HP_UNDER_CURSOR",
    "cancel": "HP_CANCEL",
}


class PickerSettings(BaseModel):
    """User-facing picker configuration."""

    # Hint characters; must not collide with the navigation keys.
    alphabet: str = Field(default=DEFAULT_ALPHABET)
    next_page: str = Field(default="J")
    prev_page: str = Field(default="K")
    under_cursor: str = Field(default="enter")
    cancel: str = Field(default="escape")
    max_width: int = Field(default=-1, description="-1 sizes the window to its widest row")
    title: str = Field(default="Pick")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("alphabet")
    @classmethod
    def _validate_alphabet(cls, value: str) -> str:
        try:
            TagAlphabet(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("max_width")
    @classmethod
    def _validate_max_width(cls, value: int) -> int:
        if value != -1 and value < 1:
            raise ValueError("max_width must be -1 or a positive width")
        return value

    @model_validator(mode="after")
    def _validate_keys(self) -> "PickerSettings":
        keys = {
            "next_page": self.next_page,
            "prev_page": self.prev_page,
            "under_cursor": self.under_cursor,
            "cancel": self.cancel,
        }
        if len(set(keys.values())) != len(keys):
            raise ValueError(f"Navigation keys must be distinct: {keys}")
        alphabet = set(self.alphabet)
        clashes = {name: key for name, key in keys.items() if key in alphabet}
        if clashes:
            raise ValueError(f"Navigation keys collide with hint alphabet: {clashes}")
        return self

    def tag_alphabet(self) -> TagAlphabet:
        return TagAlphabet(self.alphabet)

    def generator(self) -> TagGenerator:
        return TagGenerator(self.tag_alphabet())

    def keymap(self) -> KeyMap:
        return KeyMap(
            next_page=self.next_page,
            prev_page=self.prev_page,
            under_cursor=self.under_cursor,
            cancel=self.cancel,
        )


def _load_file_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError("Settings file not found", context={"path": path})
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            "Settings file is not valid YAML", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Settings file must contain a mapping at the top level.",
            context={"path": path},
        )
    section = data.get("picker", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Settings section 'picker' must be a mapping.", context={"path": path}
        )
    return dict(section)


def _env_overrides() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field_name, env_key in _ENV_KEYS.items():
        value = parse_str_env(os.environ.get(env_key))
        if value is not None:
            values[field_name] = value
    max_width = parse_int_env(os.environ.get("HP_MAX_WIDTH"))
    if max_width is not None:
        values["max_width"] = max_width
    return values


def load_settings(path: Path | str | None = None, **overrides: Any) -> PickerSettings:
    """Build settings with priority: overrides > environment > file > defaults."""
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_load_file_data(Path(path)))
    data.update(_env_overrides())
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return PickerSettings(**data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid picker settings",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
