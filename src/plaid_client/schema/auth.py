from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .accounts import Account
from .base import PlaidModel
from .item import Item


class ACHNumber(PlaidModel):
    account_id: str
    account: str
    routing: str
    wire_routing: Optional[str] = None


class EFTNumber(PlaidModel):
    account_id: str
    account: str
    institution: str
    branch: str


class IBANNumber(PlaidModel):
    account_id: str
    iban: str
    bic: str


class BACSNumber(PlaidModel):
    account_id: str
    account: str
    sort_code: str


class AccountNumberCollection(PlaidModel):
    """Identifying numbers used for electronic transfers, grouped by scheme."""

    ach: List[ACHNumber]
    eft: List[EFTNumber]
    international: List[IBANNumber]
    bacs: List[BACSNumber]


class GetAuthOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")


class GetAuthResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    numbers: AccountNumberCollection
    item: Item
