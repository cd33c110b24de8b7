"""Shared error taxonomy for hintpick."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class HPError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(HPError):
    """Invalid alphabet, key bindings or settings file."""


class ProducerMismatchError(HPError):
    """Producer returned metadata and labels of different lengths."""


class EmptyInputNotice(HPError):
    """Producer returned no items; nothing to show."""


class InvalidCapacityError(HPError):
    """A page capacity below one row was requested."""


class InvalidCountError(HPError):
    """A negative item or tag count was supplied."""


class OutOfRangeRowError(HPError):
    """A row outside the visible page was resolved."""


class SessionClosedError(HPError):
    """Operation requires an open selection session."""


def error_to_payload(error: HPError) -> dict[str, Any]:
    """Convert an HPError to a CLI/JSON payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
