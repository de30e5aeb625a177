"""Request dispatch: sign, send, normalize and report one API call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ._http import (
    TRANSPORT_ERRORS,
    AuthEventRelay,
    NormalizedResponse,
    TransportError,
    build_url,
    normalize,
    to_api_error,
)
from .auth.constants import AUTHORIZATION_HEADER
from .auth.credentials import Credentials, SessionCredentials
from .auth.signing import build_authorization
from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class _BaseDispatcher:
    """Request preparation and completion shared by both dispatchers."""

    def __init__(
        self,
        base_url: str,
        hostname: str,
        credentials: Credentials,
        relay: AuthEventRelay,
    ) -> None:
        self._base_url = base_url
        self._hostname = hostname
        self._credentials = credentials
        self._relay = relay
        self._session_token: str | None = None

    def _prepare(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None,
        data: Any,
        headers: Mapping[str, str] | None,
        sign: bool,
    ) -> tuple[str, str, dict[str, Any]]:
        method = method.upper()
        if method not in METHODS:
            raise InvalidArgumentError(f"Unsupported HTTP method: {method}")

        request_headers: dict[str, str] = {"Accept": "application/json"}
        for name, value in (headers or {}).items():
            if name.lower() == AUTHORIZATION_HEADER.lower():
                logger.warning("Ignoring caller-supplied %s header for %s %s", name, method, path)
                continue
            request_headers[name] = value

        if sign:
            authorization = build_authorization(self._credentials, self._hostname, self._session_token)
            if authorization is not None:
                request_headers[AUTHORIZATION_HEADER] = authorization

        kwargs: dict[str, Any] = {"headers": request_headers}
        if params:
            kwargs["params"] = dict(params)
        if data is not None:
            if method in BODY_METHODS:
                kwargs["json"] = data
            else:
                logger.debug("Dropping request body for %s %s", method, path)

        return method, build_url(self._base_url, path), kwargs

    def _complete(self, method: str, url: str, outcome: httpx.Response | httpx.HTTPError) -> NormalizedResponse:
        response = normalize(outcome)
        error = None if response.ok else to_api_error(response)
        logger.debug("%s %s -> %d %s", method, url, response.status, response.status_text)

        token = self._relay.notify(error, response)
        if token and isinstance(self._credentials, SessionCredentials):
            self._session_token = token

        if error is not None:
            raise error
        return response


class Dispatcher(_BaseDispatcher):
    """Issues signed requests through an ``httpx.Client``."""

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        hostname: str,
        credentials: Credentials,
        relay: AuthEventRelay,
    ) -> None:
        super().__init__(base_url, hostname, credentials, relay)
        self._client = client

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        sign: bool = True,
    ) -> NormalizedResponse:
        """Send one request and return its normalized response.

        Raises:
            APIError: On network failure, non-2xx status or malformed JSON body.
                Auth subscribers have already been notified when it is raised.
        """
        method, url, kwargs = self._prepare(method, path, params, data, headers, sign)
        try:
            outcome: httpx.Response | TransportError = self._client.request(method, url, **kwargs)
        except TRANSPORT_ERRORS as exc:
            outcome = exc
        return self._complete(method, url, outcome)

    def get(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return self.request("DELETE", path, **kwargs)


class AsyncDispatcher(_BaseDispatcher):
    """Issues signed requests through an ``httpx.AsyncClient``.

    An unsupported HTTP method is reported when the returned coroutine is
    awaited, as are network failures, non-2xx statuses and malformed bodies.
    Resource arguments are checked by the namespaces before it is created.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        hostname: str,
        credentials: Credentials,
        relay: AuthEventRelay,
    ) -> None:
        super().__init__(base_url, hostname, credentials, relay)
        self._client = client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        sign: bool = True,
    ) -> NormalizedResponse:
        method, url, kwargs = self._prepare(method, path, params, data, headers, sign)
        try:
            outcome: httpx.Response | TransportError = await self._client.request(method, url, **kwargs)
        except TRANSPORT_ERRORS as exc:
            outcome = exc
        return self._complete(method, url, outcome)

    async def get(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> NormalizedResponse:
        return await self.request("DELETE", path, **kwargs)
