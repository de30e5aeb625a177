"""Synchronous HTTP client for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ._base_client import BaseForteClient
from ._dispatch import Dispatcher
from .auth.credentials import Credentials
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .scope import Scope


class ForteClient(BaseForteClient):
    """Synchronous client for the Forte API.

    Example:
        >>> from forte import ForteClient
        >>> client = ForteClient(
        ...     {"bearer_token": "Bearer ..."},
        ...     {"hostname": "dealer.example.com", "trunk": "acme", "branch": "north"},
        ... )
        >>> client.on("auth", lambda error, token: print(error, token))
        >>> print(client.locations.get_one("loc-1").data)

    The client provides namespaced access to different API areas:
        - client.organizations: Organization lookups
        - client.locations: Locations of the scoped branch
        - client.content: Typed content and form documents
        - client.composite / client.metrics: Composite queries, metrics events
        - client.carts: Carts with items, contacts, addresses and checkout
        - client.search / client.locator: Search and location finder
        - client.experience: Session check and bootstrap data

    Every call returns a NormalizedResponse or raises APIError carrying one.
    """

    def __init__(
        self,
        credentials: Credentials | Mapping[str, Any] | None = None,
        scope: Scope | Mapping[str, Any] | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        fingerprinting_enabled: bool = True,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the Forte client.

        Args:
            credentials: ``{"bearer_token": ...}``, ``{"private_key": ..., "public_key": ...}``
                or ``{"email": ..., "password": ...}``, or a credentials object. If not
                provided, read from FORTE_* environment variables or the CLI login token.
            scope: ``{"hostname": ..., "trunk": ..., "branch": ...}`` or a Scope.
            base_url: API base URL (default: https://api.powerchord.io).
            fingerprinting_enabled: Forwarded option, not interpreted by the client.
            timeout: Request timeout in seconds (default: 30).

        Raises:
            InvalidCredentialsError: If credentials are missing, mixed or malformed.
            InvalidScopeError: If scope is missing or has empty fields.
        """
        super().__init__(
            credentials,
            scope,
            base_url=base_url,
            fingerprinting_enabled=fingerprinting_enabled,
            timeout=timeout,
        )
        self._client = httpx.Client(timeout=self._options.timeout, follow_redirects=True)
        self._init_namespaces(
            Dispatcher(self._client, self._options.base_url, self._scope.hostname, self._credentials, self._relay)
        )

    def close(self) -> None:
        """Release the underlying HTTP client resources."""
        self._client.close()

    def __enter__(self) -> ForteClient:
        return self

    def __exit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        self.close()
