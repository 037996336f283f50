import json

import pytest

from plaid_client.config import PlaidConfig
from plaid_client.transport import TransportResponse


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network access")


ITEM = {
    "item_id": "item-1",
    "institution_id": "ins_109508",
    "webhook": None,
    "error": None,
    "available_products": ["balance", "identity"],
    "billed_products": ["auth", "transactions"],
    "consent_expiration_time": None,
    "update_type": "background",
}

ACCOUNT = {
    "account_id": "acc-1",
    "balances": {
        "available": 100,
        "current": 110.5,
        "limit": None,
        "iso_currency_code": "USD",
        "unofficial_currency_code": None,
    },
    "mask": "0000",
    "name": "Plaid Checking",
    "official_name": "Plaid Gold Standard 0% Interest Checking",
    "type": "depository",
    "subtype": "checking",
}

TRANSACTION = {
    "transaction_id": "txn-1",
    "account_id": "acc-1",
    "amount": 12.5,
    "iso_currency_code": "USD",
    "unofficial_currency_code": None,
    "pending": False,
    "payment_channel": "in store",
    "name": "Coffee Shop",
    "date": "2024-01-15",
    "category_id": "13005043",
}

ERROR_BODY = {
    "error_type": "ITEM_ERROR",
    "error_code": "ITEM_LOGIN_REQUIRED",
    "error_message": "the login details of this item have changed",
    "display_message": "Please update your login.",
    "request_id": "req-err",
}


def as_body(payload):
    return json.dumps(payload).encode("utf-8")


class FakeTransport:
    """Records calls and replies with queued (status, payload) pairs."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.closed = False

    def execute(self, method, url, json_body, headers=None):
        self.calls.append({"method": method, "url": url, "body": json_body, "headers": headers})
        status, payload = self.replies.pop(0)
        body = payload if isinstance(payload, bytes) else as_body(payload)
        return TransportResponse(status_code=status, body=body)

    def close(self):
        self.closed = True


class FakeAsyncTransport(FakeTransport):
    async def execute(self, method, url, json_body, headers=None):
        return FakeTransport.execute(self, method, url, json_body, headers)

    async def aclose(self):
        self.closed = True


@pytest.fixture
def plaid_config():
    return PlaidConfig.create("client-123", "secret-xyz", "sandbox")


@pytest.fixture
def item_payload():
    return dict(ITEM)


@pytest.fixture
def account_payload():
    return json.loads(json.dumps(ACCOUNT))


@pytest.fixture
def transaction_payload():
    return dict(TRANSACTION)


@pytest.fixture
def error_payload():
    return dict(ERROR_BODY)


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def make_async_transport():
    return FakeAsyncTransport
