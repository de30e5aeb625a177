"""Request signing for the Forte API."""

from __future__ import annotations

import hashlib
import logging
import time

from ..exceptions import InvalidCredentialsError
from .constants import CHECKSUM_SCHEME
from .credentials import BearerCredentials, ChecksumCredentials, Credentials, SessionCredentials

logger = logging.getLogger(__name__)


def sign_checksum(
    private_key: str,
    public_key: str,
    hostname: str,
    timestamp: int | None = None,
) -> tuple[str, int]:
    """Build a ``Checksum`` Authorization value.

    The digest is the lowercase hex SHA-256 of
    ``private_key:public_key:timestamp:hostname``. The server recomputes it, so
    field order and separator must not change.

    Args:
        private_key: Shared secret, never sent over the wire.
        public_key: Identifies the key pair to the server.
        hostname: Fully qualified hostname of the scope being accessed.
        timestamp: Unix time in whole seconds. Defaults to now.

    Returns:
        The header value and the timestamp used.
    """
    if timestamp is None:
        timestamp = int(time.time())

    checksum_data = ":".join([private_key, public_key, str(timestamp), hostname])
    digest = hashlib.sha256(checksum_data.encode("utf-8")).hexdigest()
    logger.debug("checksum signed at %d for %s: %s", timestamp, hostname, digest)

    header = f"{CHECKSUM_SCHEME} {':'.join([public_key, str(timestamp), digest, hostname])}"
    return header, timestamp


def build_authorization(
    credentials: Credentials,
    hostname: str,
    session_token: str | None = None,
) -> str | None:
    """Return the Authorization value for one request, or None to send none.

    Session credentials only carry a header once ``authenticate()`` has
    produced a token.
    """
    if isinstance(credentials, BearerCredentials):
        return credentials.bearer_token
    if isinstance(credentials, ChecksumCredentials):
        header, _ = sign_checksum(credentials.private_key, credentials.public_key, hostname)
        return header
    if isinstance(credentials, SessionCredentials):
        return session_token
    raise InvalidCredentialsError(f"Unsupported credentials: {type(credentials).__name__}")
