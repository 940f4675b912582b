"""Shared fixtures for integration tests."""

import os

import pytest

from cirrus.rm.models import AccessToken

# Skip all integration tests unless RUN_CIRRUS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CIRRUS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_CIRRUS_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def access_token() -> AccessToken:
    token = os.environ.get("CIRRUS_ACCESS_TOKEN")
    if not token:
        pytest.skip("CIRRUS_ACCESS_TOKEN is not set")
    return AccessToken(token=token)
