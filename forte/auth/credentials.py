"""Credential variants accepted by the Forte API.

A client is built with exactly one of three schemes:

- ``BearerCredentials``: a pre-issued token, sent verbatim.
- ``ChecksumCredentials``: a key pair used to sign every request.
- ``SessionCredentials``: email and password, exchanged for a bearer token
  through ``authenticate()``.

``parse_credentials`` classifies raw input once, at construction time.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidCredentialsError
from .constants import ENV_BEARER_TOKEN, ENV_EMAIL, ENV_PASSWORD, ENV_PRIVATE_KEY, ENV_PUBLIC_KEY
from .storage import load_login


@dataclass(frozen=True)
class BearerCredentials:
    bearer_token: str

    def __repr__(self) -> str:
        return "BearerCredentials(bearer_token='***')"


@dataclass(frozen=True)
class ChecksumCredentials:
    private_key: str
    public_key: str

    def __repr__(self) -> str:
        return f"ChecksumCredentials(private_key='***', public_key={self.public_key!r})"


@dataclass(frozen=True)
class SessionCredentials:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"SessionCredentials(email={self.email!r}, password='***')"


Credentials = Union[BearerCredentials, ChecksumCredentials, SessionCredentials]

_VARIANT_FIELDS: dict[type, tuple[str, ...]] = {
    BearerCredentials: ("bearer_token",),
    ChecksumCredentials: ("private_key", "public_key"),
    SessionCredentials: ("email", "password"),
}


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _check_fields(variant: type, values: Mapping[str, Any]) -> None:
    for field in _VARIANT_FIELDS[variant]:
        if not _is_filled(values.get(field)):
            raise InvalidCredentialsError(f"credentials.{field} must be a non-empty string")


def parse_credentials(value: Any) -> Credentials:
    """Classify ``value`` into one credential variant.

    Accepts a variant instance or a mapping with snake_case keys. A mapping
    that names fields of more than one variant is rejected, as is a variant
    with missing or non-string fields.

    Raises:
        InvalidCredentialsError: If the input matches no variant or several.
    """
    if isinstance(value, tuple(_VARIANT_FIELDS)):
        _check_fields(type(value), vars(value))
        return value

    if not isinstance(value, Mapping) or not value:
        raise InvalidCredentialsError("credentials must be a non-empty mapping or a credentials object")

    present = [
        variant
        for variant, fields in _VARIANT_FIELDS.items()
        if any(field in value for field in fields)
    ]
    if not present:
        raise InvalidCredentialsError(
            "credentials must provide bearer_token, private_key and public_key, or email and password"
        )
    if len(present) > 1:
        names = ", ".join(variant.__name__ for variant in present)
        raise InvalidCredentialsError(f"credentials mix several schemes: {names}")

    variant = present[0]
    _check_fields(variant, value)
    return variant(**{field: value[field] for field in _VARIANT_FIELDS[variant]})


def credentials_from_env() -> Credentials | None:
    """Read credentials from FORTE_* environment variables, if any are set."""
    bearer_token = os.environ.get(ENV_BEARER_TOKEN)
    if _is_filled(bearer_token):
        return BearerCredentials(bearer_token)

    private_key = os.environ.get(ENV_PRIVATE_KEY)
    public_key = os.environ.get(ENV_PUBLIC_KEY)
    if _is_filled(private_key) and _is_filled(public_key):
        return ChecksumCredentials(private_key, public_key)

    email = os.environ.get(ENV_EMAIL)
    password = os.environ.get(ENV_PASSWORD)
    if _is_filled(email) and _is_filled(password):
        return SessionCredentials(email, password)

    return None


def resolve_credentials(credentials: Any = None) -> Credentials:
    """Resolve credentials using the standard precedence chain.

    Order: explicit argument > FORTE_* environment variables > token saved by
    ``forte auth login``.

    Raises:
        InvalidCredentialsError: If explicit credentials are invalid or nothing is found.
    """
    if credentials is not None:
        return parse_credentials(credentials)

    from_env = credentials_from_env()
    if from_env is not None:
        return from_env

    login = load_login()
    if login is not None:
        return BearerCredentials(login.bearer_token)

    raise InvalidCredentialsError(
        "No credentials provided. Pass credentials, set FORTE_BEARER_TOKEN "
        "(or FORTE_PRIVATE_KEY and FORTE_PUBLIC_KEY), or run 'forte auth login'."
    )
