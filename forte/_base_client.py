"""Construction and surface shared by ForteClient and AsyncForteClient."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from . import _paths
from ._http import AuthCallback, AuthEventRelay
from ._validation import check_log_entry
from .auth.credentials import BearerCredentials, Credentials, SessionCredentials, resolve_credentials
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ClientOptions
from .exceptions import InvalidCredentialsError, InvalidScopeError
from .resources import (
    CartsNamespace,
    CompositeNamespace,
    ContentNamespace,
    ExperienceNamespace,
    LocationsNamespace,
    LocatorNamespace,
    MetricsNamespace,
    OrganizationsNamespace,
    SearchNamespace,
)
from .resources._base import Result
from .scope import Scope, parse_scope

if TYPE_CHECKING:
    from ._dispatch import AsyncDispatcher, Dispatcher


class BaseForteClient:
    def __init__(
        self,
        credentials: Credentials | Mapping[str, Any] | None = None,
        scope: Scope | Mapping[str, Any] | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        fingerprinting_enabled: bool = True,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._credentials = resolve_credentials(credentials)
        if scope is None:
            raise InvalidScopeError("scope is required")
        self._scope = parse_scope(scope)
        self._options = ClientOptions(
            base_url=base_url,
            fingerprinting_enabled=fingerprinting_enabled,
            timeout=timeout,
        )

        fallback_token = (
            self._credentials.bearer_token if isinstance(self._credentials, BearerCredentials) else None
        )
        self._relay = AuthEventRelay(fallback_token=fallback_token)

    def _init_namespaces(self, dispatcher: Dispatcher | AsyncDispatcher) -> None:
        self._dispatcher = dispatcher
        self.experience = ExperienceNamespace(dispatcher, self._scope)
        self.organizations = OrganizationsNamespace(dispatcher, self._scope)
        self.locations = LocationsNamespace(dispatcher, self._scope)
        self.content = ContentNamespace(dispatcher, self._scope)
        self.composite = CompositeNamespace(dispatcher, self._scope)
        self.metrics = MetricsNamespace(dispatcher, self._scope)
        self.carts = CartsNamespace(dispatcher, self._scope)
        self.search = SearchNamespace(dispatcher, self._scope)
        self.locator = LocatorNamespace(dispatcher, self._scope)

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def options(self) -> ClientOptions:
        return self._options

    def with_branch(self, branch_id: str):
        """Return a new client of the same kind narrowed to ``branch_id``.

        Credentials and options are shared; auth subscribers are not.
        """
        return type(self)(
            self._credentials,
            self._scope.with_branch(branch_id),
            base_url=self._options.base_url,
            fingerprinting_enabled=self._options.fingerprinting_enabled,
            timeout=self._options.timeout,
        )

    def on(self, event: str, callback: AuthCallback) -> None:
        """Subscribe to ``"auth"`` events.

        ``callback(error, token)`` runs after every request, before its result
        reaches the caller: ``(None, token)`` on success and ``(error, None)``
        on failure.
        """
        self._relay.subscribe(event, callback)

    def log(self, level: str, message: str, meta: Mapping[str, Any] | None = None) -> Result:
        """Send an entry to the developer log.

        Args:
            level: One of trace, debug, info, warn, error, fatal.
            message: Non-empty log message.
            meta: Optional structured context.
        """
        check_log_entry(level, message, meta)
        payload = {"level": level, "message": message, "meta": dict(meta) if meta is not None else None}
        return self._dispatcher.post(_paths.LOG, data=payload)

    def authenticate(self) -> Result:
        """Exchange email/password credentials for a bearer token.

        The token is published to ``"auth"`` subscribers and attached to the
        client's later requests.

        Raises:
            InvalidCredentialsError: If the client was not built with email and password.
        """
        if not isinstance(self._credentials, SessionCredentials):
            raise InvalidCredentialsError("authenticate() requires email and password credentials")
        payload = {"email": self._credentials.email, "password": self._credentials.password}
        return self._dispatcher.post(_paths.AUTHENTICATE, data=payload, sign=False)
