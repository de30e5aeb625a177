"""Tests for the forte.auth module."""

from __future__ import annotations

import hashlib
import json
import os
import re
import stat
from unittest.mock import patch

import pytest

from forte.auth.credentials import (
    BearerCredentials,
    ChecksumCredentials,
    SessionCredentials,
    parse_credentials,
    resolve_credentials,
)
from forte.auth.signing import build_authorization, sign_checksum
from forte.auth.storage import StoredLogin, clear_login, get_config_path, load_login, save_login
from forte.exceptions import InvalidArgumentError, InvalidCredentialsError
from forte.scope import Scope

CHECKSUM_PATTERN = re.compile(r"^Checksum K:(\d+):([0-9a-f]{64}):h$")


# ---------------------------------------------------------------------------
# Checksum signing
# ---------------------------------------------------------------------------

class TestSignChecksum:
    def test_header_format(self):
        header, timestamp = sign_checksum("P", "K", "h")
        match = CHECKSUM_PATTERN.match(header)
        assert match is not None
        assert int(match.group(1)) == timestamp

    def test_digest_covers_fields_in_order(self):
        header, _ = sign_checksum("P", "K", "h", timestamp=1700000000)
        expected = hashlib.sha256(b"P:K:1700000000:h").hexdigest()
        assert header == f"Checksum K:1700000000:{expected}:h"

    def test_same_second_same_header(self):
        first, _ = sign_checksum("P", "K", "h", timestamp=1700000000)
        second, _ = sign_checksum("P", "K", "h", timestamp=1700000000)
        assert first == second

    def test_different_seconds_change_only_timestamp_and_digest(self):
        first, _ = sign_checksum("P", "K", "h", timestamp=1700000000)
        second, _ = sign_checksum("P", "K", "h", timestamp=1700000001)
        first_parts = first.split(":")
        second_parts = second.split(":")
        assert first_parts[0] == second_parts[0] == "Checksum K"
        assert first_parts[3] == second_parts[3] == "h"
        assert first_parts[1] != second_parts[1]
        assert first_parts[2] != second_parts[2]

    def test_timestamp_is_whole_seconds(self):
        with patch("forte.auth.signing.time") as mock_time:
            mock_time.time.return_value = 1700000000.987
            header, timestamp = sign_checksum("P", "K", "h")
        assert timestamp == 1700000000
        assert ":1700000000:" in header

    def test_private_key_is_never_in_header(self):
        header, _ = sign_checksum("super-secret", "K", "h")
        assert "super-secret" not in header


class TestBuildAuthorization:
    @pytest.mark.parametrize("hostname", ["h", "dealer.client.us", "other.example.com"])
    def test_bearer_token_is_verbatim(self, hostname):
        assert build_authorization(BearerCredentials("Bearer ABC"), hostname) == "Bearer ABC"

    def test_checksum_uses_hostname(self):
        header = build_authorization(ChecksumCredentials("P", "K"), "h")
        assert CHECKSUM_PATTERN.match(header)

    def test_session_without_token_sends_nothing(self):
        assert build_authorization(SessionCredentials("a@b.c", "pw"), "h") is None

    def test_session_with_token_sends_token(self):
        creds = SessionCredentials("a@b.c", "pw")
        assert build_authorization(creds, "h", session_token="Bearer XYZ") == "Bearer XYZ"

    def test_unknown_credentials_raise(self):
        with pytest.raises(InvalidCredentialsError):
            build_authorization({"bearer_token": "x"}, "h")


# ---------------------------------------------------------------------------
# Credential classification
# ---------------------------------------------------------------------------

class TestParseCredentials:
    @pytest.mark.parametrize(
        "value",
        [
            None,
            {},
            {"bearer_token": None},
            {"bearer_token": 0},
            {"bearer_token": ""},
            {"private_key": None, "public_key": None},
            {"private_key": 0, "public_key": 0},
            {"private_key": "valid", "public_key": 0},
            {"private_key": 0, "public_key": "valid"},
            {"private_key": "valid"},
            {"email": "a@b.c"},
            {"email": "a@b.c", "private_key": "valid", "public_key": "valid"},
            {"bearer_token": "valid", "private_key": "valid", "public_key": "valid"},
            {"unrelated": "value"},
            "Bearer valid",
        ],
    )
    def test_invalid_credentials_raise(self, value):
        with pytest.raises(InvalidCredentialsError):
            parse_credentials(value)

    def test_invalid_credentials_are_argument_errors(self):
        with pytest.raises(InvalidArgumentError):
            parse_credentials({})

    def test_bearer_mapping(self):
        assert parse_credentials({"bearer_token": "valid"}) == BearerCredentials("valid")

    def test_key_pair_mapping(self):
        creds = parse_credentials({"private_key": "p", "public_key": "k"})
        assert creds == ChecksumCredentials("p", "k")

    def test_session_mapping(self):
        creds = parse_credentials({"email": "a@b.c", "password": "pw"})
        assert creds == SessionCredentials("a@b.c", "pw")

    def test_instance_passes_through(self):
        creds = ChecksumCredentials("p", "k")
        assert parse_credentials(creds) is creds

    def test_instance_with_empty_field_raises(self):
        with pytest.raises(InvalidCredentialsError):
            parse_credentials(BearerCredentials(""))

    def test_repr_hides_secrets(self):
        assert "secret" not in repr(ChecksumCredentials("secret", "k"))
        assert "secret" not in repr(SessionCredentials("a@b.c", "secret"))
        assert "secret" not in repr(BearerCredentials("secret"))


class TestResolveCredentials:
    def test_explicit_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("FORTE_BEARER_TOKEN", "from-env")
        assert resolve_credentials({"bearer_token": "explicit"}) == BearerCredentials("explicit")

    def test_env_bearer(self, monkeypatch):
        monkeypatch.setenv("FORTE_BEARER_TOKEN", "from-env")
        assert resolve_credentials() == BearerCredentials("from-env")

    def test_env_key_pair(self, monkeypatch):
        monkeypatch.setenv("FORTE_PRIVATE_KEY", "p")
        monkeypatch.setenv("FORTE_PUBLIC_KEY", "k")
        assert resolve_credentials() == ChecksumCredentials("p", "k")

    def test_env_partial_key_pair_is_ignored(self, monkeypatch):
        monkeypatch.setenv("FORTE_PRIVATE_KEY", "p")
        with pytest.raises(InvalidCredentialsError):
            resolve_credentials()

    def test_env_session(self, monkeypatch):
        monkeypatch.setenv("FORTE_EMAIL", "a@b.c")
        monkeypatch.setenv("FORTE_PASSWORD", "pw")
        assert resolve_credentials() == SessionCredentials("a@b.c", "pw")

    def test_config_file_token(self):
        save_login(StoredLogin("Bearer stored"))
        assert resolve_credentials() == BearerCredentials("Bearer stored")

    def test_env_wins_over_config_file(self, monkeypatch):
        save_login(StoredLogin("Bearer stored"))
        monkeypatch.setenv("FORTE_BEARER_TOKEN", "from-env")
        assert resolve_credentials() == BearerCredentials("from-env")

    def test_nothing_found_raises(self):
        with pytest.raises(InvalidCredentialsError, match="No credentials provided"):
            resolve_credentials()


# ---------------------------------------------------------------------------
# Token storage
# ---------------------------------------------------------------------------

class TestStorage:
    def test_config_path_under_home(self, isolated_environment):
        assert get_config_path() == isolated_environment / ".forte" / "config.json"

    def test_load_missing_returns_none(self):
        assert load_login() is None

    def test_save_and_load_with_scope(self):
        save_login(StoredLogin("Bearer stored", Scope("dealer.client.us", "acme"), "a@b.c"))
        assert load_login() == StoredLogin("Bearer stored", Scope("dealer.client.us", "acme"), "a@b.c")
        assert json.loads(get_config_path().read_text()) == {
            "bearer_token": "Bearer stored",
            "email": "a@b.c",
            "scope": {"hostname": "dealer.client.us", "trunk": "acme"},
        }

    def test_save_sets_restrictive_permissions(self):
        save_login(StoredLogin("Bearer stored"))
        path = get_config_path()
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
        assert stat.S_IMODE(os.stat(path.parent).st_mode) == 0o700

    def test_repr_masks_token(self):
        assert "stored" not in repr(StoredLogin("Bearer stored"))

    def test_invalid_stored_scope_keeps_token(self):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"bearer_token": "Bearer stored", "scope": {"hostname": "h", "trunk": ""}}))
        assert load_login() == StoredLogin("Bearer stored")

    @pytest.mark.parametrize(
        "content",
        ["{not json", json.dumps(["a"]), json.dumps({"email": "a@b.c"}), json.dumps({"bearer_token": ""})],
    )
    def test_unusable_file_returns_none(self, content):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text(content)
        assert load_login() is None

    def test_clear(self):
        save_login(StoredLogin("Bearer stored"))
        assert clear_login() is True
        assert load_login() is None
        assert clear_login() is False
