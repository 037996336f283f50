from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import PlaidModel
from .item import Product


class Institution(PlaidModel):
    institution_id: str
    name: str
    products: List[Product]
    country_codes: List[str]
    # The fields below are only populated with include_optional_metadata.
    url: Optional[str] = None
    primary_color: Optional[str] = None
    logo: Optional[str] = Field(None, description="Base64 encoded PNG logo")
    routing_numbers: Optional[List[str]] = None
    oauth: bool
    # Only populated with include_status; kept raw, its layout varies by product.
    status: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class GetInstitutionsOptions(PlaidModel):
    products: Optional[List[str]] = Field(None, description="Only institutions supporting all of these")
    routing_numbers: Optional[List[str]] = None
    oauth: Optional[bool] = None
    include_optional_metadata: Optional[bool] = None


class GetInstitutionByIdOptions(PlaidModel):
    include_optional_metadata: Optional[bool] = None
    include_status: Optional[bool] = None


class SearchInstitutionsOptions(PlaidModel):
    include_optional_metadata: Optional[bool] = None
    oauth: Optional[bool] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class GetInstitutionsResponse(PlaidModel):
    request_id: str
    institutions: List[Institution]
    total: int


class GetInstitutionByIdResponse(PlaidModel):
    request_id: str
    institution: Institution


class SearchInstitutionsResponse(PlaidModel):
    request_id: str
    institutions: List[Institution]
