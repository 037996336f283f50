from __future__ import annotations

from .base import PlaidModel


class CreateProcessorTokenResponse(PlaidModel):
    request_id: str
    processor_token: str


class CreateStripeBankAccountTokenResponse(PlaidModel):
    request_id: str
    stripe_bank_account_token: str
