"""
Unit test configuration.

Unit tests never reach Google: credential discovery is replaced so that an
accidental real client build fails fast instead of reading local ADC.
"""

import pytest


@pytest.fixture(autouse=True)
def no_default_credentials(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("Unit tests must not load Application Default Credentials")

    monkeypatch.setattr("google.auth.default", _fail)
    yield
