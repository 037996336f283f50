from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .accounts import Account
from .base import OpenStrEnum, PlaidModel
from .item import Item


class EmailType(OpenStrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OTHER = "other"


class PhoneNumberType(OpenStrEnum):
    HOME = "home"
    WORK = "work"
    OFFICE = "office"
    MOBILE = "mobile"
    MOBILE1 = "mobile1"
    OTHER = "other"


class AddressData(PlaidModel):
    city: Optional[str] = None
    region: Optional[str] = None
    street: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Address(PlaidModel):
    data: AddressData
    primary: Optional[bool] = None


class Email(PlaidModel):
    data: str
    primary: bool
    type: EmailType


class PhoneNumber(PlaidModel):
    data: str
    primary: Optional[bool] = None
    type: Optional[PhoneNumberType] = None


class Owner(PlaidModel):
    """Identity information the institution holds for an account owner."""

    names: List[str]
    phone_numbers: List[PhoneNumber]
    emails: List[Email]
    addresses: List[Address]


class AccountWithOwners(Account):
    owners: List[Owner]


class GetIdentityOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")


class GetIdentityResponse(PlaidModel):
    request_id: str
    accounts: List[AccountWithOwners]
    item: Item
