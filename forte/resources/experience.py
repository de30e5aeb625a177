"""Experience namespace for the Forte SDK."""

from __future__ import annotations

from .. import _paths
from .._validation import require_id
from ._base import Namespace, Result


class ExperienceNamespace(Namespace):
    """Session checks and experience bootstrap data."""

    def session(self) -> Result:
        """Check the current session."""
        return self._dispatcher.get(_paths.experience_session())

    def bootstrap(self, experience_id: str) -> Result:
        """Fetch the bootstrap payload for an experience."""
        require_id(experience_id)
        return self._dispatcher.get(_paths.experience_bootstrap(experience_id))
