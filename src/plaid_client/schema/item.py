from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import OpenStrEnum, PlaidModel
from .errors import ErrorResponse


class Product(OpenStrEnum):
    ASSETS = "assets"
    AUTH = "auth"
    BALANCE = "balance"
    DEPOSIT_SWITCH = "deposit_switch"
    IDENTITY = "identity"
    INCOME = "income"
    INVESTMENTS = "investments"
    LIABILITIES = "liabilities"
    PAYMENT_INITIATION = "payment_initiation"
    TRANSACTIONS = "transactions"
    TRANSFER = "transfer"


class ItemUpdateType(OpenStrEnum):
    BACKGROUND = "background"
    USER_PRESENT_REQUIRED = "user_present_required"


class WebhookCode(OpenStrEnum):
    """Webhook codes Plaid reports as the last webhook sent for an Item."""

    INITIAL_UPDATE = "INITIAL_UPDATE"
    HISTORICAL_UPDATE = "HISTORICAL_UPDATE"
    DEFAULT_UPDATE = "DEFAULT_UPDATE"
    TRANSACTIONS_REMOVED = "TRANSACTIONS_REMOVED"
    SYNC_UPDATES_AVAILABLE = "SYNC_UPDATES_AVAILABLE"
    ERROR = "ERROR"
    NEW_ACCOUNTS_AVAILABLE = "NEW_ACCOUNTS_AVAILABLE"
    PENDING_EXPIRATION = "PENDING_EXPIRATION"
    USER_PERMISSION_REVOKED = "USER_PERMISSION_REVOKED"
    WEBHOOK_UPDATE_ACKNOWLEDGED = "WEBHOOK_UPDATE_ACKNOWLEDGED"


class Item(PlaidModel):
    """Metadata about a linked institution connection."""

    item_id: str
    institution_id: Optional[str] = None
    webhook: Optional[str] = None
    error: Optional[ErrorResponse] = Field(None, description="Set when the Item is in an error state")
    available_products: List[Product]
    billed_products: List[Product]
    consent_expiration_time: Optional[datetime] = None
    update_type: ItemUpdateType


class ProductStatus(PlaidModel):
    last_successful_update: Optional[datetime] = None
    last_failed_update: Optional[datetime] = None


class WebhookStatus(PlaidModel):
    sent_at: Optional[datetime] = None
    code_sent: Optional[WebhookCode] = None


class ItemStatus(PlaidModel):
    """Update status for the Item's products and its last webhook."""

    investments: Optional[ProductStatus] = None
    transactions: Optional[ProductStatus] = None
    last_webhook: Optional[WebhookStatus] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class GetItemResponse(PlaidModel):
    request_id: str
    item: Item
    status: Optional[ItemStatus] = None
    access_token: Optional[str] = None


class RemoveItemResponse(PlaidModel):
    request_id: str


class UpdateItemWebhookResponse(PlaidModel):
    request_id: str
    item: Item


class InvalidateAccessTokenResponse(PlaidModel):
    request_id: str
    new_access_token: str


class CreatePublicTokenResponse(PlaidModel):
    request_id: str
    public_token: str


class ExchangePublicTokenResponse(PlaidModel):
    request_id: str
    access_token: str
    item_id: str
