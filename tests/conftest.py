"""Test configuration for Forte SDK tests."""

import pytest

from forte import ForteClient

SCOPE = {"hostname": "dealer.client.us", "trunk": "acme", "branch": "north"}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from real FORTE_* variables and ~/.forte."""
    for name in (
        "FORTE_BEARER_TOKEN",
        "FORTE_PRIVATE_KEY",
        "FORTE_PUBLIC_KEY",
        "FORTE_EMAIL",
        "FORTE_PASSWORD",
        "FORTE_HOSTNAME",
        "FORTE_TRUNK",
        "FORTE_BRANCH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def scope():
    return dict(SCOPE)


@pytest.fixture
def client(scope):
    """Shared bearer-token ForteClient fixture for sync tests."""
    client = ForteClient({"bearer_token": "Bearer valid"}, scope)
    yield client
    client.close()
