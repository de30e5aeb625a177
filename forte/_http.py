"""Shared HTTP request utilities for sync and async clients."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import httpx

from .exceptions import APIError, InvalidArgumentError

logger = logging.getLogger(__name__)

AUTH_EVENT = "auth"

AuthCallback = Callable[[Optional[APIError], Optional[str]], Any]

# httpx.InvalidURL is not an HTTPError subclass.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)
TransportError = Union[httpx.HTTPError, httpx.InvalidURL]


@dataclass(frozen=True)
class NormalizedResponse:
    """Transport-independent view of a finished request.

    ``headers`` keys are lowercase. ``status`` is 0 and ``headers`` is None when
    the request never got a response.
    """

    status: int
    status_text: str
    headers: Optional[dict[str, str]]
    data: Any
    malformed: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and not self.malformed


def build_url(base_url: str, path: str) -> str:
    """Join base URL and path with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _read_body(response: httpx.Response) -> tuple[Any, bool]:
    if not response.content:
        return None, False
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json(), False
        except ValueError:
            return response.text, True
    return response.text, False


def normalize(outcome: httpx.Response | TransportError) -> NormalizedResponse:
    """Turn a response or a transport error into a NormalizedResponse."""
    if isinstance(outcome, TRANSPORT_ERRORS):
        return NormalizedResponse(
            status=0,
            status_text=str(outcome) or type(outcome).__name__,
            headers=None,
            data=None,
        )

    data, malformed = _read_body(outcome)
    return NormalizedResponse(
        status=outcome.status_code,
        status_text=outcome.reason_phrase,
        headers=dict(outcome.headers),
        data=data,
        malformed=malformed,
    )


def to_api_error(response: NormalizedResponse) -> APIError:
    if response.malformed:
        message = f"Malformed response body ({response.status_text})"
    elif isinstance(response.data, str) and response.data:
        message = response.data
    else:
        message = response.status_text or "Forte API call failed"
    return APIError(message=message, status_code=response.status, response=response)


class AuthEventRelay:
    """Publishes the auth token seen on each finished request.

    Subscribers are kept in an append-only list and called in registration
    order with ``(error, token)``.
    """

    def __init__(self, fallback_token: str | None = None) -> None:
        self._callbacks: list[AuthCallback] = []
        self._fallback_token = fallback_token

    def subscribe(self, event: str, callback: AuthCallback) -> None:
        if event != AUTH_EVENT:
            raise InvalidArgumentError(f'"{event}" is not a supported event.')
        if not callable(callback):
            raise InvalidArgumentError("callback must be a function.")
        self._callbacks.append(callback)

    def extract_token(self, error: APIError | None, response: NormalizedResponse) -> str | None:
        if error is not None:
            return None
        echoed = (response.headers or {}).get("authorization")
        return echoed or self._fallback_token

    def notify(self, error: APIError | None, response: NormalizedResponse) -> str | None:
        """Call every subscriber once and return the token they received."""
        token = self.extract_token(error, response)
        for callback in list(self._callbacks):
            callback(error, token)
        return token
