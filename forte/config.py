"""Configuration helpers for the Forte SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import InvalidArgumentError

DEFAULT_BASE_URL = os.environ.get("FORTE_API_URL", "https://api.powerchord.io")
DEFAULT_TIMEOUT_SECONDS = 30.0


def sanitize_base_url(url: str) -> str:
    """Ensure the base URL never ends with a trailing slash."""

    return url.rstrip("/")


@dataclass(frozen=True)
class ClientOptions:
    """Options recognized when a client is created.

    ``fingerprinting_enabled`` is carried for the server side and is not
    interpreted by the client.
    """

    base_url: str = DEFAULT_BASE_URL
    fingerprinting_enabled: bool = True
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise InvalidArgumentError("options.base_url must be a non-empty string")
        if not isinstance(self.fingerprinting_enabled, bool):
            raise InvalidArgumentError("options.fingerprinting_enabled must be a boolean")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise InvalidArgumentError("options.timeout must be a positive number")
        object.__setattr__(self, "base_url", sanitize_base_url(self.base_url))
