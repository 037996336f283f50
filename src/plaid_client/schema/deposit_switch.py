from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from .base import OpenStrEnum, PlaidModel


class DepositSwitchState(OpenStrEnum):
    INITIALIZED = "initialized"
    COMPLETED = "completed"
    ERROR = "error"


class GetDepositSwitchResponse(PlaidModel):
    """
    How the user configured their payroll allocation, and the switch state.

    The allocation fields are always null until the switch has completed.
    """

    request_id: str
    deposit_switch_id: str
    target_account_id: Optional[str] = None
    target_item_id: Optional[str] = None
    state: DepositSwitchState
    account_has_multiple_allocations: Optional[bool] = None
    is_allocated_remainder: Optional[bool] = None
    percent_allocated: Optional[float] = Field(
        None, description="Percent of the deposit allocated to the target account"
    )
    amount_allocated: Optional[float] = Field(
        None, description="Dollar amount of the deposit allocated to the target account"
    )
    date_created: date
    date_completed: Optional[date] = None


class CreateDepositSwitchResponse(PlaidModel):
    request_id: str
    deposit_switch_id: str


class CreateDepositSwitchTokenResponse(PlaidModel):
    request_id: str
    deposit_switch_token: str
    deposit_switch_token_expiration_time: datetime
