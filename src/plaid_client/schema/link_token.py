from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from .base import PlaidModel

# e.g. {"depository": {"account_subtypes": ["checking", "savings"]}}
AccountFilters = Dict[str, Dict[str, List[str]]]


class LinkTokenUser(PlaidModel):
    """End user a Link token is created for. Unset fields are not sent."""

    client_user_id: str = Field(..., description="Your stable identifier for the end user")
    legal_name: Optional[str] = None
    phone_number: Optional[str] = None
    phone_number_verified_time: Optional[datetime] = None
    email_address: Optional[str] = None
    email_address_verified_time: Optional[datetime] = None
    ssn: Optional[str] = None
    date_of_birth: Optional[str] = None


class CreateLinkTokenOptions(PlaidModel):
    """Optional link/token/create parameters; Plaid expects them at the top level."""

    products: Optional[List[str]] = None
    webhook: Optional[str] = None
    access_token: Optional[str] = Field(None, description="Set to launch Link in update mode")
    link_customization_name: Optional[str] = None
    account_filters: Optional[AccountFilters] = None
    redirect_uri: Optional[str] = None
    android_package_name: Optional[str] = None


class CreateLinkTokenResponse(PlaidModel):
    request_id: str
    link_token: str
    expiration: datetime


class LinkTokenMetadata(PlaidModel):
    initial_products: List[str]
    webhook: Optional[str] = None
    country_codes: List[str]
    language: Optional[str] = None
    account_filters: Optional[AccountFilters] = None
    redirect_uri: Optional[str] = None
    client_name: Optional[str] = None


class GetLinkTokenResponse(PlaidModel):
    request_id: str
    link_token: str
    created_at: Optional[datetime] = None
    expiration: Optional[datetime] = None
    metadata: LinkTokenMetadata
