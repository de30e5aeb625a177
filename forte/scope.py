"""Organization scope (hostname, trunk, branch) for the Forte SDK."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidScopeError


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


@dataclass(frozen=True)
class Scope:
    """Where requests are addressed: a hostname, a trunk and an optional branch."""

    hostname: str
    trunk: str
    branch: str | None = None

    def __post_init__(self) -> None:
        if not _is_filled(self.hostname):
            raise InvalidScopeError("scope.hostname must be a non-empty string")
        if not _is_filled(self.trunk):
            raise InvalidScopeError("scope.trunk must be a non-empty string")
        if self.branch is not None and not _is_filled(self.branch):
            raise InvalidScopeError("scope.branch must be a non-empty string when given")

    def with_branch(self, branch: str) -> Scope:
        """Return a copy of this scope narrowed to ``branch``."""
        if branch is None:
            raise InvalidScopeError("branch id is required")
        return dataclasses.replace(self, branch=branch)

    def require_branch(self) -> str:
        if self.branch is None:
            raise InvalidScopeError(f"Trunk {self.trunk!r} has no branch; use with_branch() first")
        return self.branch

    def to_dict(self) -> dict[str, str]:
        data = {"hostname": self.hostname, "trunk": self.trunk}
        if self.branch is not None:
            data["branch"] = self.branch
        return data


def parse_scope(value: Any) -> Scope:
    """Build a Scope from a Scope or a mapping with hostname, trunk and branch keys."""
    if isinstance(value, Scope):
        return value
    if not isinstance(value, Mapping) or not value:
        raise InvalidScopeError("scope must be a non-empty mapping or a Scope")
    return Scope(
        hostname=value.get("hostname"),
        trunk=value.get("trunk"),
        branch=value.get("branch"),
    )
