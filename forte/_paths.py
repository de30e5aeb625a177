"""Resource path builders for the Forte API.

Routes:

    Organizations   /organizations/[{id}]
    By hostname     /organizations?hostname={hostname}
    Locations       /forte/organizations/{trunk}/{branch}/locations/[{id}]
    Content         /forte/{trunk}/{branch}/content/{type}/[{id}]
    Composite       /forte/composite/{trunk}/{branch}/
    Metrics         /forte/metrics/{trunk}/{branch}/
    Carts           /forte/{trunk}/{branch}/carts/[{cart_id}/...]
    Search          /forte/{trunk}/{branch}/search/
    Locator         /forte/{trunk}/{branch}/locator/

Every substituted value is percent-encoded as a single path segment, so an id
such as ``a/b`` or ``x?y=1`` cannot change the route.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from .scope import Scope

LOG = "/developer/log"
AUTHENTICATE = "/forte/authenticate"


def segment(value: str) -> str:
    return quote(value, safe="")


def _trunk(scope: Scope) -> str:
    return segment(scope.trunk)


def _branch(scope: Scope) -> str:
    return segment(scope.require_branch())


def _branch_root(scope: Scope) -> str:
    return f"/forte/{_trunk(scope)}/{_branch(scope)}"


def experience_session() -> str:
    return "/session/check"


def experience_bootstrap(experience_id: str) -> str:
    return f"/forte/bootstrap/{segment(experience_id)}"


def organizations() -> str:
    return "/organizations/"


def organizations_by_hostname() -> str:
    return "/organizations"


def organization(organization_id: str) -> str:
    return f"/organizations/{segment(organization_id)}"


def locations(scope: Scope) -> str:
    return f"/forte/organizations/{_trunk(scope)}/{_branch(scope)}/locations/"


def location(scope: Scope, location_id: str) -> str:
    return f"{locations(scope)}{segment(location_id)}"


def content(scope: Scope, content_type: str) -> str:
    return f"{_branch_root(scope)}/content/{segment(content_type)}/"


def content_item(scope: Scope, content_type: str, content_id: str) -> str:
    return f"{content(scope, content_type)}{segment(content_id)}"


def form_documents(scope: Scope) -> str:
    return f"/forte/organizations/{_trunk(scope)}/content/forms/documents"


def composite(scope: Scope) -> str:
    return f"/forte/composite/{_trunk(scope)}/{_branch(scope)}/"


def metrics(scope: Scope) -> str:
    return f"/forte/metrics/{_trunk(scope)}/{_branch(scope)}/"


def carts(scope: Scope) -> str:
    return f"{_branch_root(scope)}/carts/"


def cart(scope: Scope, cart_id: str) -> str:
    return f"{carts(scope)}{segment(cart_id)}"


def cart_items(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/items/"


def cart_item(scope: Scope, cart_id: str, item_id: str) -> str:
    return f"{cart_items(scope, cart_id)}{segment(item_id)}"


def cart_contacts(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/contacts/"


def cart_contact(scope: Scope, cart_id: str, contact_id: str) -> str:
    return f"{cart_contacts(scope, cart_id)}{segment(contact_id)}"


def cart_bill_to(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/billto"


def cart_ship_to(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/shipto"


def cart_checkout(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/checkout"


def cart_confirmation(scope: Scope, cart_id: str) -> str:
    return f"{cart(scope, cart_id)}/confirmation"


def search(scope: Scope) -> str:
    return f"{_branch_root(scope)}/search/"


def locator(scope: Scope) -> str:
    return f"{_branch_root(scope)}/locator/"
