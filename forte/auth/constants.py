"""Constants for Forte authentication and credential storage."""

from __future__ import annotations

# Environment variables, checked in this order when no credentials are passed
ENV_BEARER_TOKEN = "FORTE_BEARER_TOKEN"
ENV_PRIVATE_KEY = "FORTE_PRIVATE_KEY"
ENV_PUBLIC_KEY = "FORTE_PUBLIC_KEY"
ENV_EMAIL = "FORTE_EMAIL"
ENV_PASSWORD = "FORTE_PASSWORD"

# Credential storage
CONFIG_DIR = ".forte"
CONFIG_FILE = "config.json"

CHECKSUM_SCHEME = "Checksum"
AUTHORIZATION_HEADER = "Authorization"
