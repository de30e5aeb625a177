"""Composite query and metrics namespaces for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import _paths
from .._validation import require_filter
from ._base import Namespace, Result


class CompositeNamespace(Namespace):
    def query(self, query: Mapping[str, Any]) -> Result:
        """Run several resource queries in one request."""
        require_filter(query, "query")
        return self._dispatcher.post(_paths.composite(self._scope), data=dict(query))


class MetricsNamespace(Namespace):
    def record(self, data: Mapping[str, Any]) -> Result:
        """Record a metrics event for the client's branch."""
        require_filter(data, "data")
        return self._dispatcher.post(_paths.metrics(self._scope), data=dict(data))
