from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import PlaidModel


class SandboxPublicTokenOptions(PlaidModel):
    webhook: Optional[str] = None
    override_username: Optional[str] = Field(None, description="Sandbox test username, e.g. user_good")
    override_password: Optional[str] = None


class SandboxProcessorTokenOptions(PlaidModel):
    override_username: Optional[str] = None
    override_password: Optional[str] = None


class CreateSandboxPublicTokenResponse(PlaidModel):
    request_id: str
    public_token: str


class ResetSandboxItemResponse(PlaidModel):
    request_id: str
    reset_login: bool


class SetSandboxVerificationStatusResponse(PlaidModel):
    request_id: str


class FireSandboxWebhookResponse(PlaidModel):
    request_id: str
    webhook_fired: bool


class CreateSandboxProcessorTokenResponse(PlaidModel):
    request_id: str
    processor_token: str
