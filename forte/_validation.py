"""Argument checks for the resource methods.

Each check raises InvalidArgumentError before anything is sent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidArgumentError

LOG_LEVELS = ("trace", "debug", "info", "warn", "error", "fatal")


def require_id(value: Any, name: str = "id") -> str:
    if not isinstance(value, str) or value.strip() == "":
        raise InvalidArgumentError(f"{name} must be a non-empty string")
    return value


def require_filter(value: Any, name: str = "filter") -> Mapping[str, Any]:
    if not isinstance(value, Mapping) or not value:
        raise InvalidArgumentError(f"{name} must be a non-empty mapping")
    return value


def require_payload(value: Any, name: str = "data") -> Mapping[str, Any]:
    """Payloads may be empty but must be mappings."""
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"{name} must be a mapping")
    return value


def check_log_entry(level: Any, message: Any, meta: Any) -> None:
    if level not in LOG_LEVELS:
        raise InvalidArgumentError(f'Log level "{level}" is invalid. Use one of: {", ".join(LOG_LEVELS)}')
    if not isinstance(message, str) or message.strip() == "":
        raise InvalidArgumentError(f'Message "{message}" is invalid.')
    if meta is not None and not isinstance(meta, Mapping):
        raise InvalidArgumentError(f'Meta "{meta}" is invalid.')
