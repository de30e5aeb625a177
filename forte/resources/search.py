"""Search and locator namespaces for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import _paths
from .._validation import require_filter
from ._base import Namespace, Result


class SearchNamespace(Namespace):
    def query(self, filter: Mapping[str, Any]) -> Result:
        """Full-text search across the branch's content.

        Args:
            filter: Query parameters, at least the search term (e.g. ``{"q": "boots"}``).
        """
        require_filter(filter)
        return self._dispatcher.get(_paths.search(self._scope), params=filter)


class LocatorNamespace(Namespace):
    def find(self, filter: Mapping[str, Any]) -> Result:
        """Find locations near a point or postal code."""
        require_filter(filter)
        return self._dispatcher.get(_paths.locator(self._scope), params=filter)
