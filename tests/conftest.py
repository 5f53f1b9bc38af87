"""Test configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest
import stripe
from fastapi.testclient import TestClient

from core.settings import Settings
from payments import OrderService, Paginate, PriceService, ServiceOptions, TransferService


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "STRIPE_API_KEY": "sk_test_dummy",
            "APP_NAME": "Test Stripe Services",
            "ENVIRONMENT": "test",
            "METRICS_ENABLED": "false",
            "DISABLE_TRACING": "true",
        }
    )

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def stripe_client():
    """Stand-in for ``stripe.StripeClient``; every service attribute is a mock."""
    return MagicMock(name="StripeClient")


@pytest.fixture
def options(stripe_client):
    return ServiceOptions(stripe=stripe_client, paginate=Paginate(default=10, max=100))


@pytest.fixture
def transfers(options):
    return TransferService(options)


@pytest.fixture
def prices(options):
    return PriceService(options)


@pytest.fixture
def orders(options):
    return OrderService(options)


@pytest.fixture
def mock_settings():
    return Settings(
        STRIPE_API_KEY="sk_test_mock",
        APP_NAME="Test Stripe Services",
        ENVIRONMENT="test",
        METRICS_ENABLED=False,
        DISABLE_TRACING=True,
    )


@pytest.fixture
def client(mock_settings, stripe_client):
    """Test client for the FastAPI app backed by the mocked Stripe client."""
    from main import create_app

    app = create_app(mock_settings, stripe_client=stripe_client)
    return TestClient(app)


class FakeListObject(dict):
    """A Stripe list page that can walk every page."""

    def __init__(self, data, all_records=None):
        super().__init__(object="list", data=data, has_more=all_records is not None)
        self._all_records = all_records if all_records is not None else data

    def auto_paging_iter(self):
        return iter(self._all_records)


@pytest.fixture
def list_page():
    return FakeListObject


SDK_API_KEY = "sk_test_SECRET"


@pytest.fixture
def sdk_transfer():
    """Build a real ``stripe.Transfer`` as the SDK returns it, no network needed."""

    def build(**values):
        values = {"id": "tr_1", "object": "transfer", "amount": 400, **values}
        return stripe.Transfer.construct_from(values, SDK_API_KEY)

    return build


@pytest.fixture
def sdk_list():
    """Build a real single-page ``stripe.ListObject``."""

    def build(records, url="/v1/transfers"):
        return stripe.ListObject.construct_from(
            {"object": "list", "url": url, "has_more": False, "data": records},
            SDK_API_KEY,
        )

    return build
