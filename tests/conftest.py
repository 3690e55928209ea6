"""
Test configuration and fixtures for drivelink tests.

This module provides:
- A fake Drive client and client factory, so no test builds a real client
- A component wired to the fake factory
- An isolated config file location
"""

import pytest
from unittest.mock import MagicMock

from drivelink.sdk import DriveComponent, DriveConfiguration
from drivelink.sdk.client_factory import DriveClientFactory


class FakeClientFactory(DriveClientFactory):
    """Client factory that records its calls and returns a MagicMock client."""

    def __init__(self, client=None):
        self.client = client if client is not None else MagicMock(name="drive_client")
        self.calls = []

    def make_client(self, client_id, client_secret, scopes, application_name=None,
                    refresh_token=None, access_token=None):
        self.calls.append({
            "client_id": client_id,
            "client_secret": client_secret,
            "scopes": list(scopes),
            "application_name": application_name,
            "refresh_token": refresh_token,
            "access_token": access_token,
        })
        return self.client


@pytest.fixture
def fake_client():
    """
    A MagicMock standing in for the discovery-built Drive client.

    Resource accessors return the same child mock on every call, so tests
    can configure e.g. fake_client.files().get().execute.return_value.
    """
    return MagicMock(name="drive_client")


@pytest.fixture
def client_factory(fake_client):
    return FakeClientFactory(fake_client)


@pytest.fixture
def configuration():
    return DriveConfiguration(
        client_id="test_client_id",
        client_secret="test_client_secret",
        refresh_token="test_refresh_token",
        application_name="drivelink-tests",
    )


@pytest.fixture
def component(configuration, client_factory):
    """A component whose endpoints use the fake client factory."""
    return DriveComponent(configuration=configuration, client_factory=client_factory)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    Redirect the drivelink config file into a temporary directory.

    Returns the path of the (not yet created) config file.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_file = config_dir / "config.yaml"
    monkeypatch.setenv("DRIVELINK_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("DRIVELINK_CONFIG_FILE", str(config_file))
    return config_file
