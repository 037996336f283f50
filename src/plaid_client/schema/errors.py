from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import OpenStrEnum, PlaidModel


class ErrorType(OpenStrEnum):
    """Broad categorization of a Plaid error. Safe for programmatic use."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_RESULT = "INVALID_RESULT"
    INVALID_INPUT = "INVALID_INPUT"
    INSTITUTION_ERROR = "INSTITUTION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    API_ERROR = "API_ERROR"
    ITEM_ERROR = "ITEM_ERROR"
    ASSET_REPORT_ERROR = "ASSET_REPORT_ERROR"
    RECAPTCHA_ERROR = "RECAPTCHA_ERROR"
    OAUTH_ERROR = "OAUTH_ERROR"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    BANK_TRANSFER_ERROR = "BANK_TRANSFER_ERROR"


class ErrorResponse(PlaidModel):
    """
    Plaid's structured error payload.

    Returned as the body of failed calls and embedded in ``Item.error``.
    """

    error_type: ErrorType = Field(..., description="Broad categorization of the error")
    error_code: str = Field(..., description="The particular error code, e.g. ITEM_LOGIN_REQUIRED")
    error_message: Optional[str] = Field(
        None, description="Developer-friendly message; may change over time"
    )
    display_message: Optional[str] = Field(
        None, description="User-friendly message; null if not related to user action"
    )
    request_id: Optional[str] = Field(
        None, description="Request identifier; omitted in errors delivered by webhooks"
    )
    status: Optional[int] = Field(None, description="HTTP status code echoed by Plaid")
    documentation_url: Optional[str] = None
    suggested_action: Optional[str] = None
