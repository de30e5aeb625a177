"""Base class for resource namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Union

from .._http import NormalizedResponse

if TYPE_CHECKING:
    from .._dispatch import AsyncDispatcher, Dispatcher
    from ..scope import Scope

# NormalizedResponse from ForteClient, an awaitable of it from AsyncForteClient
Result = Union[NormalizedResponse, Awaitable[NormalizedResponse]]


class Namespace:
    """Binds a dispatcher and a scope.

    Methods validate their arguments eagerly and hand back whatever the
    dispatcher returns, so one implementation serves both clients.
    """

    def __init__(self, dispatcher: Dispatcher | AsyncDispatcher, scope: Scope) -> None:
        self._dispatcher = dispatcher
        self._scope = scope
