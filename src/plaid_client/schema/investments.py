from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import Field

from .accounts import Account
from .base import Money, OpenStrEnum, PlaidModel
from .item import Item


class SecurityType(OpenStrEnum):
    CASH = "cash"
    CRYPTOCURRENCY = "cryptocurrency"
    DERIVATIVE = "derivative"
    EQUITY = "equity"
    ETF = "etf"
    FIXED_INCOME = "fixed income"
    LOAN = "loan"
    MUTUAL_FUND = "mutual fund"
    OTHER = "other"


class Security(PlaidModel):
    """A security referenced by holdings and investment transactions."""

    money_fields = ("close_price",)

    security_id: str
    isin: Optional[str] = Field(None, description="12-character ISIN")
    cusip: Optional[str] = Field(None, description="9-character CUSIP")
    sedol: Optional[str] = Field(None, description="7-character SEDOL")
    institution_security_id: Optional[str] = None
    institution_id: Optional[str] = None
    proxy_security_id: Optional[str] = None
    name: Optional[str] = None
    ticker_symbol: Optional[str] = None
    is_cash_equivalent: Optional[bool] = None
    type: Optional[SecurityType] = None
    close_price: Optional[Money] = Field(None, description="Previous close; null for non-public securities")
    close_price_as_of: Optional[dt.date] = None
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None


class Holding(PlaidModel):
    money_fields = ("institution_price", "institution_value", "cost_basis")

    account_id: str
    security_id: str
    institution_price: Money
    institution_price_as_of: Optional[dt.date] = None
    institution_value: Money
    cost_basis: Optional[Money] = None
    quantity: float
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None


class InvestmentTransaction(PlaidModel):
    money_fields = ("amount", "price", "fees")

    investment_transaction_id: str
    cancel_transaction_id: Optional[str] = None
    account_id: str
    security_id: Optional[str] = None
    date: dt.date
    name: str
    quantity: float
    amount: Money
    price: Money
    fees: Optional[Money] = None
    # buy, sell, cancel, cash, fee, transfer
    type: str
    subtype: str
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class GetHoldingsOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")


class GetInvestmentTransactionsOptions(PlaidModel):
    account_ids: Optional[List[str]] = None
    count: Optional[int] = Field(None, description="Number of transactions to fetch (1-500)")
    offset: Optional[int] = Field(None, description="Number of transactions to skip")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class GetHoldingsResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    holdings: List[Holding]
    securities: List[Security]
    item: Item


class GetInvestmentTransactionsResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    securities: List[Security]
    investment_transactions: List[InvestmentTransaction]
    total_investment_transactions: int
    item: Item


class RefreshInvestmentsResponse(PlaidModel):
    request_id: str
