"""Login storage for the Forte CLI.

``forte auth login`` exchanges email and password for a bearer token. The
token is kept together with the scope it was issued for in
~/.forte/config.json, so later commands can run without repeating
``--hostname``/``--trunk``::

    {
      "bearer_token": "Bearer ...",
      "email": "dev@example.com",
      "scope": {"hostname": "dealer.client.us", "trunk": "acme"}
    }
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..exceptions import InvalidScopeError
from ..scope import Scope, parse_scope
from .constants import CONFIG_DIR, CONFIG_FILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredLogin:
    """A bearer token issued by ``authenticate()`` and the scope it belongs to."""

    bearer_token: str
    scope: Optional[Scope] = None
    email: Optional[str] = None

    def __repr__(self) -> str:
        return f"StoredLogin(bearer_token='***', scope={self.scope!r}, email={self.email!r})"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"bearer_token": self.bearer_token}
        if self.email:
            data["email"] = self.email
        if self.scope is not None:
            data["scope"] = self.scope.to_dict()
        return data


def get_config_path() -> Path:
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def _read_json(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def load_login() -> StoredLogin | None:
    """Load the saved login.

    Returns None when nothing usable is stored. A stored scope that no longer
    validates is dropped and the token is still returned.
    """
    data = _read_json(get_config_path())
    if not data:
        return None
    token = data.get("bearer_token")
    if not isinstance(token, str) or not token:
        return None

    scope = None
    if data.get("scope") is not None:
        try:
            scope = parse_scope(data["scope"])
        except InvalidScopeError as e:
            logger.debug("Ignoring stored scope: %s", e)

    email = data.get("email")
    return StoredLogin(token, scope, email if isinstance(email, str) else None)


def save_login(login: StoredLogin) -> None:
    """Write ``login`` atomically; the directory is 0700 and the file 0600."""
    config_path = get_config_path()
    config_dir = config_path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    os.chmod(config_dir, 0o700)

    fd, tmp_path = tempfile.mkstemp(dir=config_dir, prefix=".login_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(login.to_dict(), f, indent=2)
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, config_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def clear_login() -> bool:
    """Delete the saved login. Returns False if there was nothing to delete."""
    config_path = get_config_path()
    if not config_path.exists():
        return False
    config_path.unlink()
    return True
