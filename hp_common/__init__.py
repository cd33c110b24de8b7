"""Shared helpers for hintpick."""

from hp_common.errors import (
    ConfigurationError,
    EmptyInputNotice,
    HPError,
    InvalidCapacityError,
    InvalidCountError,
    OutOfRangeRowError,
    ProducerMismatchError,
    SessionClosedError,
    error_to_payload,
)
from hp_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "error_to_payload",
    "HPError",
    "ConfigurationError",
    "EmptyInputNotice",
    "InvalidCapacityError",
    "InvalidCountError",
    "OutOfRangeRowError",
    "ProducerMismatchError",
    "SessionClosedError",
]
