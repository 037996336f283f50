from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import Field

from .accounts import Account
from .base import Money, OpenStrEnum, PlaidModel
from .item import Item


class PaymentChannel(OpenStrEnum):
    ONLINE = "online"
    IN_STORE = "in store"
    OTHER = "other"


class PaymentMeta(PlaidModel):
    reference_number: Optional[str] = None
    ppd_id: Optional[str] = None
    payee: Optional[str] = None
    by_order_of: Optional[str] = None
    payer: Optional[str] = None
    payment_method: Optional[str] = None
    payment_processor: Optional[str] = None
    reason: Optional[str] = None


class Location(PlaidModel):
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    store_number: Optional[str] = None


class Transaction(PlaidModel):
    """
    A single account transaction.

    ``amount`` is positive when money moves out of the account and negative
    when it moves in.
    """

    money_fields = ("amount",)

    transaction_id: str
    account_id: str
    amount: Money
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None
    account_owner: Optional[str] = None
    pending: bool
    pending_transaction_id: Optional[str] = None
    payment_channel: PaymentChannel
    payment_meta: Optional[PaymentMeta] = None
    name: str
    merchant_name: Optional[str] = None
    original_description: Optional[str] = None
    location: Optional[Location] = None
    date: dt.date
    datetime: Optional[dt.datetime] = None
    authorized_date: Optional[dt.date] = None
    authorized_datetime: Optional[dt.datetime] = None
    category_id: Optional[str] = None
    category: Optional[List[str]] = None
    transaction_code: Optional[str] = None


class RemovedTransaction(PlaidModel):
    transaction_id: str


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class GetTransactionsOptions(PlaidModel):
    account_ids: Optional[List[str]] = None
    count: Optional[int] = Field(None, description="Number of transactions to fetch (1-500)")
    offset: Optional[int] = Field(None, description="Number of transactions to skip")
    include_original_description: Optional[bool] = None


class SyncTransactionsOptions(PlaidModel):
    """
    transactions/sync paging. Plaid expects these at the top level of the body,
    and an omitted cursor (not a null one) requests the full history.
    """

    cursor: Optional[str] = None
    count: Optional[int] = Field(None, description="Number of updates to fetch (1-500)")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class GetTransactionsResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    transactions: List[Transaction]
    total_transactions: int
    item: Item


class SyncTransactionsResponse(PlaidModel):
    request_id: str
    added: List[Transaction]
    modified: Optional[List[Transaction]] = None
    removed: Optional[List[RemovedTransaction]] = None
    next_cursor: str
    has_more: bool


class RefreshTransactionsResponse(PlaidModel):
    request_id: str
