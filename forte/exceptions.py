"""Custom exceptions raised by the Forte SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ._http import NormalizedResponse


class ForteSDKError(Exception):
    """Base exception for all SDK specific failures."""


class InvalidArgumentError(ForteSDKError, ValueError):
    """Raised when a method is called with arguments it cannot use.

    Always raised before any request is sent.
    """


class InvalidCredentialsError(InvalidArgumentError):
    """Raised when credentials match no supported scheme or mix several."""


class InvalidScopeError(InvalidArgumentError):
    """Raised when a scope is missing or has an empty hostname, trunk or branch."""


class APIError(ForteSDKError):
    """Raised when a request fails, whether on the network or with a non-2xx status.

    ``response`` is always the normalized response, so callers inspect the same
    shape for every kind of failure. Network errors have ``status_code == 0``.
    """

    def __init__(self, message: str, status_code: int, response: Optional[NormalizedResponse] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:  # pragma: no cover - repr helper
        return f"{self.status_code}: {self.message}"
