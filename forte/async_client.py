"""Asynchronous HTTP client for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ._base_client import BaseForteClient
from ._dispatch import AsyncDispatcher
from .auth.credentials import Credentials
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .scope import Scope


class AsyncForteClient(BaseForteClient):
    """Asynchronous client for the Forte API.

    Example:
        >>> import asyncio
        >>> from forte import AsyncForteClient
        >>>
        >>> async def main():
        ...     creds = {"private_key": "...", "public_key": "..."}
        ...     scope = {"hostname": "dealer.example.com", "trunk": "acme", "branch": "north"}
        ...     async with AsyncForteClient(creds, scope) as client:
        ...         response = await client.content.get_many("products", {"limit": 10})
        ...         print(response.data)
        >>>
        >>> asyncio.run(main())

    Argument errors are raised when a method is called. Request failures are
    raised as APIError when the returned awaitable is awaited.
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
        """Initialize the async Forte client.

        Takes the same arguments as ForteClient.

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
        self._client = httpx.AsyncClient(timeout=self._options.timeout, follow_redirects=True)
        self._init_namespaces(
            AsyncDispatcher(self._client, self._options.base_url, self._scope.hostname, self._credentials, self._relay)
        )

    async def close(self) -> None:
        """Release the underlying HTTP client resources."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncForteClient:
        return self

    async def __aexit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        await self.close()
