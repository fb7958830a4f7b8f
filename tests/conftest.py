"""Pytest configuration and shared fixtures for billing-client-core tests."""

import httpx
import pytest

from billing_client_core import BillingClient, DefaultCredentialProvider
from billing_client_core.testing import FakeBillingAPI

DEFAULT_SECRET = "sk_test_default"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear billing-related environment variables before each test.

    This prevents test pollution when testing credential and settings resolution.
    """
    import os

    test_prefixes = ("STRIPE_", "BILLING_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def provider():
    """Default credential provider with a fixed secret and no .env lookup."""
    return DefaultCredentialProvider(api_key=DEFAULT_SECRET, load_dotenv=False)


@pytest.fixture
def fake_api():
    return FakeBillingAPI()


@pytest.fixture
def client(fake_api, provider):
    """BillingClient wired to the in-memory fake API."""
    with BillingClient(credential_provider=provider, transport=httpx.MockTransport(fake_api.handler)) as billing:
        yield billing
