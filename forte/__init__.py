"""Forte Python SDK - client for the Forte platform API."""

from importlib.metadata import PackageNotFoundError, version

from ._http import NormalizedResponse
from .async_client import AsyncForteClient
from .auth import BearerCredentials, ChecksumCredentials, SessionCredentials, sign_checksum
from .client import ForteClient
from .config import ClientOptions
from .exceptions import (
    APIError,
    ForteSDKError,
    InvalidArgumentError,
    InvalidCredentialsError,
    InvalidScopeError,
)
from .scope import Scope

__all__ = [
    "ForteClient",
    "AsyncForteClient",
    "BearerCredentials",
    "ChecksumCredentials",
    "SessionCredentials",
    "Scope",
    "ClientOptions",
    "NormalizedResponse",
    "sign_checksum",
    "ForteSDKError",
    "InvalidArgumentError",
    "InvalidCredentialsError",
    "InvalidScopeError",
    "APIError",
]

try:
    __version__ = version("forte-api")
except PackageNotFoundError:
    __version__ = "0.1.0"
