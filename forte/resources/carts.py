"""Carts namespace for the Forte SDK.

A cart lives under the client's branch and owns nested resources:

    client.carts.items.add(cart_id, {...})
    client.carts.contacts.update(cart_id, contact_id, {...})
    client.carts.bill_to.set(cart_id, {...})
    client.carts.checkout(cart_id)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .. import _paths
from .._validation import require_id, require_payload
from ._base import Namespace, Result

if TYPE_CHECKING:
    from .._dispatch import AsyncDispatcher, Dispatcher
    from ..scope import Scope


class CartItemsNamespace(Namespace):
    """Line items of a cart."""

    def add(self, cart_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_payload(data)
        return self._dispatcher.post(_paths.cart_items(self._scope, cart_id), data=dict(data))

    def update(self, cart_id: str, item_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_id(item_id, "item_id")
        require_payload(data)
        return self._dispatcher.put(_paths.cart_item(self._scope, cart_id, item_id), data=dict(data))

    def remove(self, cart_id: str, item_id: str) -> Result:
        require_id(cart_id, "cart_id")
        require_id(item_id, "item_id")
        return self._dispatcher.delete(_paths.cart_item(self._scope, cart_id, item_id))


class CartContactsNamespace(Namespace):
    """Contacts attached to a cart."""

    def add(self, cart_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_payload(data)
        return self._dispatcher.post(_paths.cart_contacts(self._scope, cart_id), data=dict(data))

    def update(self, cart_id: str, contact_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_id(contact_id, "contact_id")
        require_payload(data)
        return self._dispatcher.put(_paths.cart_contact(self._scope, cart_id, contact_id), data=dict(data))

    def remove(self, cart_id: str, contact_id: str) -> Result:
        require_id(cart_id, "cart_id")
        require_id(contact_id, "contact_id")
        return self._dispatcher.delete(_paths.cart_contact(self._scope, cart_id, contact_id))


class CartAddressNamespace(Namespace):
    """A single address slot of a cart (bill-to or ship-to)."""

    def __init__(self, dispatcher: Dispatcher | AsyncDispatcher, scope: Scope, kind: str) -> None:
        super().__init__(dispatcher, scope)
        self._path = _paths.cart_bill_to if kind == "billto" else _paths.cart_ship_to

    def get(self, cart_id: str) -> Result:
        require_id(cart_id, "cart_id")
        return self._dispatcher.get(self._path(self._scope, cart_id))

    def set(self, cart_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_payload(data)
        return self._dispatcher.put(self._path(self._scope, cart_id), data=dict(data))


class CartsNamespace(Namespace):
    """Shopping carts of the client's branch."""

    def __init__(self, dispatcher: Dispatcher | AsyncDispatcher, scope: Scope) -> None:
        super().__init__(dispatcher, scope)
        self.items = CartItemsNamespace(dispatcher, scope)
        self.contacts = CartContactsNamespace(dispatcher, scope)
        self.bill_to = CartAddressNamespace(dispatcher, scope, "billto")
        self.ship_to = CartAddressNamespace(dispatcher, scope, "shipto")

    def create(self, data: Mapping[str, Any] | None = None) -> Result:
        """Create a cart, optionally seeded with ``data``."""
        payload = dict(require_payload(data)) if data is not None else {}
        return self._dispatcher.post(_paths.carts(self._scope), data=payload)

    def get(self, cart_id: str) -> Result:
        require_id(cart_id, "cart_id")
        return self._dispatcher.get(_paths.cart(self._scope, cart_id))

    def update(self, cart_id: str, data: Mapping[str, Any]) -> Result:
        require_id(cart_id, "cart_id")
        require_payload(data)
        return self._dispatcher.patch(_paths.cart(self._scope, cart_id), data=dict(data))

    def delete(self, cart_id: str) -> Result:
        require_id(cart_id, "cart_id")
        return self._dispatcher.delete(_paths.cart(self._scope, cart_id))

    def checkout(self, cart_id: str, data: Mapping[str, Any] | None = None) -> Result:
        """Submit the cart for checkout."""
        require_id(cart_id, "cart_id")
        payload = dict(require_payload(data)) if data is not None else {}
        return self._dispatcher.post(_paths.cart_checkout(self._scope, cart_id), data=payload)

    def confirmation(self, cart_id: str) -> Result:
        """Fetch the order confirmation of a checked-out cart."""
        require_id(cart_id, "cart_id")
        return self._dispatcher.get(_paths.cart_confirmation(self._scope, cart_id))
