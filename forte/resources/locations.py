"""Locations namespace for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import _paths
from .._validation import require_filter, require_id
from ._base import Namespace, Result


class LocationsNamespace(Namespace):
    """Locations of the client's trunk and branch."""

    def get_many(self, filter: Mapping[str, Any]) -> Result:
        require_filter(filter)
        return self._dispatcher.get(_paths.locations(self._scope), params=filter)

    def get_one(self, location_id: str) -> Result:
        require_id(location_id)
        return self._dispatcher.get(_paths.location(self._scope, location_id))
