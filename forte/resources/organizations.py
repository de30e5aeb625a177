"""Organizations namespace for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import _paths
from .._validation import require_filter, require_id
from ._base import Namespace, Result


class OrganizationsNamespace(Namespace):
    """Namespace for organization lookups. Not scoped to the client's trunk."""

    def get_many(self, filter: Mapping[str, Any]) -> Result:
        """List organizations matching ``filter``.

        Args:
            filter: Query parameters, e.g. ``{"status": "active"}``.
        """
        require_filter(filter)
        return self._dispatcher.get(_paths.organizations(), params=filter)

    def get_one(self, organization_id: str) -> Result:
        require_id(organization_id)
        return self._dispatcher.get(_paths.organization(organization_id))

    def get_one_by_hostname(self, hostname: str) -> Result:
        """Find the organization serving ``hostname``."""
        require_id(hostname, "hostname")
        return self._dispatcher.get(_paths.organizations_by_hostname(), params={"hostname": hostname})
