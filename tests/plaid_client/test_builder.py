import json
from datetime import date

import pytest

from plaid_client import endpoints as ep
from plaid_client.builder import DEFAULT_HEADERS, build_request, to_wire
from plaid_client.schema import (
    CreateLinkTokenOptions,
    GetAccountsOptions,
    GetTransactionsOptions,
    LinkTokenUser,
    SyncTransactionsOptions,
    VerificationStatus,
)


@pytest.mark.unit
def test_credentials_are_always_injected(plaid_config):
    request = build_request(ep.CATEGORIES_GET, plaid_config.credentials)

    assert request.body == {"client_id": "client-123", "secret": "secret-xyz"}
    assert request.method == "POST"
    assert request.path == "categories/get"


@pytest.mark.unit
def test_no_options_sends_only_required_fields(plaid_config):
    request = build_request(ep.ACCOUNTS_GET, plaid_config.credentials, {"access_token": "access-1"})

    assert request.body == {
        "client_id": "client-123",
        "secret": "secret-xyz",
        "access_token": "access-1",
    }


@pytest.mark.unit
def test_empty_options_add_no_key(plaid_config):
    request = build_request(
        ep.ACCOUNTS_GET,
        plaid_config.credentials,
        {"access_token": "access-1"},
        GetAccountsOptions(),
    )

    assert "options" not in request.body


@pytest.mark.unit
def test_set_options_are_nested_and_unset_ones_omitted(plaid_config):
    request = build_request(
        ep.TRANSACTIONS_GET,
        plaid_config.credentials,
        {"access_token": "access-1", "start_date": date(2024, 1, 1), "end_date": date(2024, 1, 31)},
        GetTransactionsOptions(count=100, offset=200),
    )

    assert request.body["start_date"] == "2024-01-01"
    assert request.body["end_date"] == "2024-01-31"
    assert request.body["options"] == {"count": 100, "offset": 200}
    assert "null" not in request.to_json()


@pytest.mark.unit
def test_sync_options_are_merged_at_top_level(plaid_config):
    request = build_request(
        ep.TRANSACTIONS_SYNC,
        plaid_config.credentials,
        {"access_token": "access-1"},
        SyncTransactionsOptions(cursor="cursor-abc", count=50),
    )

    assert request.body["cursor"] == "cursor-abc"
    assert request.body["count"] == 50
    assert "options" not in request.body


@pytest.mark.unit
def test_sync_without_cursor_omits_cursor_key(plaid_config):
    request = build_request(
        ep.TRANSACTIONS_SYNC,
        plaid_config.credentials,
        {"access_token": "access-1"},
        SyncTransactionsOptions(count=10),
    )

    assert "cursor" not in request.body


@pytest.mark.unit
def test_link_token_user_and_options(plaid_config):
    request = build_request(
        ep.LINK_TOKEN_CREATE,
        plaid_config.credentials,
        {
            "client_name": "Budget App",
            "language": "en",
            "country_codes": ["US"],
            "user": LinkTokenUser(client_user_id="user-42"),
        },
        CreateLinkTokenOptions(
            products=["transactions"],
            account_filters={"depository": {"account_subtypes": ["checking"]}},
        ),
    )

    assert request.body["user"] == {"client_user_id": "user-42"}
    assert request.body["products"] == ["transactions"]
    assert request.body["account_filters"] == {"depository": {"account_subtypes": ["checking"]}}
    assert "webhook" not in request.body


@pytest.mark.unit
def test_none_params_are_dropped(plaid_config):
    request = build_request(
        ep.ITEM_WEBHOOK_UPDATE,
        plaid_config.credentials,
        {"access_token": "access-1", "webhook": None},
    )

    assert "webhook" not in request.body


@pytest.mark.unit
def test_to_wire_converts_enums_and_collections():
    assert to_wire(VerificationStatus.AUTOMATICALLY_VERIFIED) == "automatically_verified"
    assert to_wire(("US", "CA")) == ["US", "CA"]
    assert to_wire({"a": 1, "b": None}) == {"a": 1}


@pytest.mark.unit
def test_request_url_and_json(plaid_config):
    request = build_request(ep.ITEM_GET, plaid_config.credentials, {"access_token": "access-1"})

    assert request.url("https://sandbox.plaid.com/") == "https://sandbox.plaid.com/item/get"
    assert json.loads(request.to_json())["access_token"] == "access-1"


@pytest.mark.unit
def test_default_headers_are_json():
    assert DEFAULT_HEADERS["Content-Type"] == "application/json"
    assert "plaid-typed-client" in DEFAULT_HEADERS["User-Agent"]


@pytest.mark.unit
def test_every_endpoint_is_registered_once():
    paths = [endpoint.path for endpoint in ep.ENDPOINTS.values()]

    assert len(paths) == 34
    assert len(set(paths)) == len(paths)
    assert all(endpoint.method == "POST" for endpoint in ep.ENDPOINTS.values())
