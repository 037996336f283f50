"""
Liability records: credit cards, mortgages and student loans.

Plaid does not report a currency next to liability amounts, so they stay
plain floats rather than Money.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from .accounts import Account
from .base import OpenStrEnum, PlaidModel
from .item import Item


class AprType(OpenStrEnum):
    BALANCE_TRANSFER_APR = "balance_transfer_apr"
    CASH_APR = "cash_apr"
    PURCHASE_APR = "purchase_apr"
    SPECIAL = "special"


class InterestRateType(OpenStrEnum):
    FIXED = "fixed"
    VARIABLE = "variable"


class StudentLoanStatusType(OpenStrEnum):
    CANCELLED = "cancelled"
    CHARGED_OFF = "charged off"
    CLAIM = "claim"
    CONSOLIDATED = "consolidated"
    DEFERMENT = "deferment"
    DELINQUENT = "delinquent"
    DISCHARGED = "discharged"
    EXTENSION = "extension"
    FORBEARANCE = "forbearance"
    IN_GRACE = "in grace"
    IN_MILITARY = "in military"
    IN_SCHOOL = "in school"
    NOT_FULLY_DISBURSED = "not fully disbursed"
    OTHER = "other"
    PAID_IN_FULL = "paid in full"
    REFUNDED = "refunded"
    REPAYMENT = "repayment"
    TRANSFERRED = "transferred"


class RepaymentPlanType(OpenStrEnum):
    EXTENDED_GRADUATED = "extended graduated"
    EXTENDED_STANDARD = "extended standard"
    GRADUATED = "graduated"
    INCOME_CONTINGENT_REPAYMENT = "income-contingent repayment"
    INCOME_BASED_REPAYMENT = "income-based repayment"
    INTEREST_ONLY = "interest-only"
    OTHER = "other"
    PAY_AS_YOU_EARN = "pay as you earn"
    REVISED_PAY_AS_YOU_EARN = "revised pay as you earn"
    STANDARD = "standard"


class APR(PlaidModel):
    apr_percentage: float
    apr_type: AprType
    balance_subject_to_apr: Optional[float] = None
    interest_charge_amount: Optional[float] = None


class CreditLiability(PlaidModel):
    account_id: Optional[str] = None
    aprs: List[APR]
    is_overdue: Optional[bool] = None
    last_payment_amount: Optional[float] = None
    last_payment_date: Optional[date] = None
    last_statement_balance: Optional[float] = None
    last_statement_issue_date: Optional[date] = None
    minimum_payment_amount: Optional[float] = None
    next_payment_due_date: Optional[date] = None


class MortgageInterestRate(PlaidModel):
    percentage: Optional[float] = None
    type: Optional[InterestRateType] = None


class MortgagePropertyAddress(PlaidModel):
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    region: Optional[str] = None
    street: Optional[str] = None


class MortgageLiability(PlaidModel):
    account_id: Optional[str] = None
    account_number: Optional[str] = None
    current_late_fee: Optional[float] = None
    escrow_balance: Optional[float] = None
    has_pmi: Optional[bool] = None
    has_prepayment_penalty: Optional[bool] = None
    interest_rate: MortgageInterestRate
    last_payment_amount: Optional[float] = None
    last_payment_date: Optional[date] = None
    loan_type_description: Optional[str] = None
    loan_term: Optional[str] = None
    maturity_date: Optional[date] = None
    next_monthly_payment: Optional[float] = None
    next_payment_due_date: Optional[date] = None
    origination_date: Optional[date] = None
    origination_principal_amount: Optional[float] = None
    past_due_amount: Optional[float] = None
    property_address: MortgagePropertyAddress
    ytd_interest_paid: Optional[float] = None
    ytd_principal_paid: Optional[float] = None


class StudentLoanStatus(PlaidModel):
    end_date: Optional[date] = None
    type: Optional[StudentLoanStatusType] = None


class PSLFStatus(PlaidModel):
    """Public Service Loan Forgiveness progress."""

    estimated_eligibility_date: Optional[date] = None
    payments_made: Optional[int] = None
    payments_remaining: Optional[int] = None


class StudentLoanRepaymentPlan(PlaidModel):
    description: Optional[str] = None
    type: Optional[RepaymentPlanType] = None


class StudentLoanServicerAddress(PlaidModel):
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    street: Optional[str] = None


class StudentLoanLiability(PlaidModel):
    account_id: Optional[str] = None
    account_number: Optional[str] = None
    disbursement_dates: Optional[List[date]] = None
    expected_payoff_date: Optional[date] = None
    guarantor: Optional[str] = None
    interest_rate_percentage: float
    is_overdue: Optional[bool] = None
    last_payment_amount: Optional[float] = None
    last_payment_date: Optional[date] = None
    last_statement_balance: Optional[float] = None
    last_statement_issue_date: Optional[date] = None
    loan_name: Optional[str] = None
    loan_status: StudentLoanStatus
    minimum_payment_amount: Optional[float] = None
    next_payment_due_date: Optional[date] = None
    origination_date: Optional[date] = None
    origination_principal_amount: Optional[float] = None
    outstanding_interest_amount: Optional[float] = None
    payment_reference_number: Optional[str] = None
    pslf_status: PSLFStatus
    repayment_plan: StudentLoanRepaymentPlan
    sequence_number: Optional[str] = None
    servicer_address: StudentLoanServicerAddress
    ytd_interest_paid: Optional[float] = None
    ytd_principal_paid: Optional[float] = None


class Liabilities(PlaidModel):
    """Liabilities grouped by kind; a kind is null when no account of it was requested."""

    credit: Optional[List[CreditLiability]] = None
    mortgage: Optional[List[MortgageLiability]] = None
    student: Optional[List[StudentLoanLiability]] = None


class GetLiabilitiesOptions(PlaidModel):
    account_ids: Optional[List[str]] = Field(None, description="Only return these accounts")


class GetLiabilitiesResponse(PlaidModel):
    request_id: str
    accounts: List[Account]
    item: Item
    liabilities: Liabilities
