"""Content namespace for the Forte SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import _paths
from .._validation import require_filter, require_id
from ._base import Namespace, Result


class ContentNamespace(Namespace):
    """Typed content (products, pages, forms...) of the client's branch."""

    def get_many(self, type: str, filter: Mapping[str, Any]) -> Result:
        """List content items of one type.

        Args:
            type: Content type, e.g. "products".
            filter: Query parameters narrowing the result.
        """
        require_id(type, "type")
        require_filter(filter)
        return self._dispatcher.get(_paths.content(self._scope, type), params=filter)

    def get_one(self, type: str, content_id: str) -> Result:
        require_id(type, "type")
        require_id(content_id)
        return self._dispatcher.get(_paths.content_item(self._scope, type, content_id))

    def put_form_document(self, data: Mapping[str, Any]) -> Result:
        """Store a submitted form document at the trunk level."""
        require_filter(data, "data")
        return self._dispatcher.put(_paths.form_documents(self._scope), data=dict(data))
