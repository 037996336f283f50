from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import Money, OpenStrEnum, PlaidModel
from .item import Item


class AccountType(OpenStrEnum):
    INVESTMENT = "investment"
    CREDIT = "credit"
    DEPOSITORY = "depository"
    LOAN = "loan"
    BROKERAGE = "brokerage"
    OTHER = "other"


class VerificationStatus(OpenStrEnum):
    """Micro-deposit verification state of an Auth account."""

    PENDING_AUTOMATIC_VERIFICATION = "pending_automatic_verification"
    PENDING_MANUAL_VERIFICATION = "pending_manual_verification"
    MANUALLY_VERIFIED = "manually_verified"
    AUTOMATICALLY_VERIFIED = "automatically_verified"
    VERIFICATION_EXPIRED = "verification_expired"
    VERIFICATION_FAILED = "verification_failed"


class AccountBalances(PlaidModel):
    """Balances of an account, each reported with its currency."""

    money_fields = ("available", "current", "limit")

    available: Optional[Money] = Field(
        None, description="Funds available to be withdrawn, as determined by the institution"
    )
    current: Optional[Money] = Field(None, description="Total funds in or owed by the account")
    limit: Optional[Money] = Field(
        None, description="Credit limit, or the overdraft limit for depository accounts"
    )
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None
    last_updated_datetime: Optional[datetime] = None


class Account(PlaidModel):
    account_id: str
    balances: AccountBalances
    mask: Optional[str] = Field(None, description="Last 2-4 characters of the account number")
    name: str
    official_name: Optional[str] = None
    type: AccountType
    # e.g. checking, savings, 401k, credit card, mortgage
    subtype: Optional[str] = None
    verification_status: Optional[VerificationStatus] = None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class GetAccountsOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")


class GetBalancesOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")
    min_last_updated_datetime: Optional[datetime] = Field(
        None, description="Oldest acceptable balance (required by some institutions)"
    )


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class GetAccountsResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    item: Item


class GetBalancesResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    item: Optional[Item] = None
