from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import PlaidModel


class WebhookVerificationKey(PlaidModel):
    """JWK used to verify the signature of a Plaid webhook."""

    alg: str
    crv: str
    kid: str
    kty: str
    use: str
    x: str
    y: str
    created_at: int = Field(..., description="Unix timestamp the key was created")
    expired_at: Optional[int] = None


class GetWebhookVerificationKeyResponse(PlaidModel):
    request_id: str
    key: WebhookVerificationKey
