"""Authentication utilities for the Forte SDK."""

from .credentials import (
    BearerCredentials,
    ChecksumCredentials,
    Credentials,
    SessionCredentials,
    parse_credentials,
    resolve_credentials,
)
from .signing import build_authorization, sign_checksum
from .storage import StoredLogin, clear_login, load_login, save_login

__all__ = [
    "BearerCredentials",
    "ChecksumCredentials",
    "Credentials",
    "SessionCredentials",
    "StoredLogin",
    "build_authorization",
    "clear_login",
    "load_login",
    "parse_credentials",
    "resolve_credentials",
    "save_login",
    "sign_checksum",
]
