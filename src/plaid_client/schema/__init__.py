"""
Typed request options and response models for the Plaid API.

Every model ignores JSON keys it does not declare, so new upstream fields
never break decoding. Enumerated string fields use open enums that keep
unrecognized values instead of rejecting them.
"""

# -----------------------------------------------------------------------------
# Building blocks
# -----------------------------------------------------------------------------
from .base import Money, OpenStrEnum, PlaidModel
from .errors import ErrorResponse, ErrorType

# -----------------------------------------------------------------------------
# Resources, options and responses
# -----------------------------------------------------------------------------
from .accounts import (
    Account,
    AccountBalances,
    AccountType,
    GetAccountsOptions,
    GetAccountsResponse,
    GetBalancesOptions,
    GetBalancesResponse,
    VerificationStatus,
)
from .auth import (
    ACHNumber,
    AccountNumberCollection,
    BACSNumber,
    EFTNumber,
    GetAuthOptions,
    GetAuthResponse,
    IBANNumber,
)
from .categories import Category, GetCategoriesResponse
from .deposit_switch import (
    CreateDepositSwitchResponse,
    CreateDepositSwitchTokenResponse,
    DepositSwitchState,
    GetDepositSwitchResponse,
)
from .identity import (
    AccountWithOwners,
    Address,
    AddressData,
    Email,
    EmailType,
    GetIdentityOptions,
    GetIdentityResponse,
    Owner,
    PhoneNumber,
    PhoneNumberType,
)
from .institutions import (
    GetInstitutionByIdOptions,
    GetInstitutionByIdResponse,
    GetInstitutionsOptions,
    GetInstitutionsResponse,
    Institution,
    SearchInstitutionsOptions,
    SearchInstitutionsResponse,
)
from .investments import (
    GetHoldingsOptions,
    GetHoldingsResponse,
    GetInvestmentTransactionsOptions,
    GetInvestmentTransactionsResponse,
    Holding,
    InvestmentTransaction,
    RefreshInvestmentsResponse,
    Security,
    SecurityType,
)
from .item import (
    CreatePublicTokenResponse,
    ExchangePublicTokenResponse,
    GetItemResponse,
    InvalidateAccessTokenResponse,
    Item,
    ItemStatus,
    ItemUpdateType,
    Product,
    ProductStatus,
    RemoveItemResponse,
    UpdateItemWebhookResponse,
    WebhookCode,
    WebhookStatus,
)
from .liabilities import (
    APR,
    AprType,
    CreditLiability,
    GetLiabilitiesOptions,
    GetLiabilitiesResponse,
    InterestRateType,
    Liabilities,
    MortgageInterestRate,
    MortgageLiability,
    MortgagePropertyAddress,
    PSLFStatus,
    RepaymentPlanType,
    StudentLoanLiability,
    StudentLoanRepaymentPlan,
    StudentLoanServicerAddress,
    StudentLoanStatus,
    StudentLoanStatusType,
)
from .link_token import (
    AccountFilters,
    CreateLinkTokenOptions,
    CreateLinkTokenResponse,
    GetLinkTokenResponse,
    LinkTokenMetadata,
    LinkTokenUser,
)
from .processor import CreateProcessorTokenResponse, CreateStripeBankAccountTokenResponse
from .sandbox import (
    CreateSandboxProcessorTokenResponse,
    CreateSandboxPublicTokenResponse,
    FireSandboxWebhookResponse,
    ResetSandboxItemResponse,
    SandboxProcessorTokenOptions,
    SandboxPublicTokenOptions,
    SetSandboxVerificationStatusResponse,
)
from .transactions import (
    GetTransactionsOptions,
    GetTransactionsResponse,
    Location,
    PaymentChannel,
    PaymentMeta,
    RefreshTransactionsResponse,
    RemovedTransaction,
    SyncTransactionsOptions,
    SyncTransactionsResponse,
    Transaction,
)
from .webhooks import GetWebhookVerificationKeyResponse, WebhookVerificationKey


__all__ = [
    # Building blocks
    "Money",
    "OpenStrEnum",
    "PlaidModel",
    "ErrorResponse",
    "ErrorType",
    # Accounts / auth
    "Account",
    "AccountBalances",
    "AccountType",
    "GetAccountsOptions",
    "GetAccountsResponse",
    "GetBalancesOptions",
    "GetBalancesResponse",
    "VerificationStatus",
    "ACHNumber",
    "AccountNumberCollection",
    "BACSNumber",
    "EFTNumber",
    "GetAuthOptions",
    "GetAuthResponse",
    "IBANNumber",
    # Categories / deposit switch
    "Category",
    "GetCategoriesResponse",
    "CreateDepositSwitchResponse",
    "CreateDepositSwitchTokenResponse",
    "DepositSwitchState",
    "GetDepositSwitchResponse",
    # Identity
    "AccountWithOwners",
    "Address",
    "AddressData",
    "Email",
    "EmailType",
    "GetIdentityOptions",
    "GetIdentityResponse",
    "Owner",
    "PhoneNumber",
    "PhoneNumberType",
    # Institutions
    "GetInstitutionByIdOptions",
    "GetInstitutionByIdResponse",
    "GetInstitutionsOptions",
    "GetInstitutionsResponse",
    "Institution",
    "SearchInstitutionsOptions",
    "SearchInstitutionsResponse",
    # Investments
    "GetHoldingsOptions",
    "GetHoldingsResponse",
    "GetInvestmentTransactionsOptions",
    "GetInvestmentTransactionsResponse",
    "Holding",
    "InvestmentTransaction",
    "RefreshInvestmentsResponse",
    "Security",
    "SecurityType",
    # Item
    "CreatePublicTokenResponse",
    "ExchangePublicTokenResponse",
    "GetItemResponse",
    "InvalidateAccessTokenResponse",
    "Item",
    "ItemStatus",
    "ItemUpdateType",
    "Product",
    "ProductStatus",
    "RemoveItemResponse",
    "UpdateItemWebhookResponse",
    "WebhookCode",
    "WebhookStatus",
    # Liabilities
    "APR",
    "AprType",
    "CreditLiability",
    "GetLiabilitiesOptions",
    "GetLiabilitiesResponse",
    "InterestRateType",
    "Liabilities",
    "MortgageInterestRate",
    "MortgageLiability",
    "MortgagePropertyAddress",
    "PSLFStatus",
    "RepaymentPlanType",
    "StudentLoanLiability",
    "StudentLoanRepaymentPlan",
    "StudentLoanServicerAddress",
    "StudentLoanStatus",
    "StudentLoanStatusType",
    # Link
    "AccountFilters",
    "CreateLinkTokenOptions",
    "CreateLinkTokenResponse",
    "GetLinkTokenResponse",
    "LinkTokenMetadata",
    "LinkTokenUser",
    # Processor / sandbox
    "CreateProcessorTokenResponse",
    "CreateStripeBankAccountTokenResponse",
    "CreateSandboxProcessorTokenResponse",
    "CreateSandboxPublicTokenResponse",
    "FireSandboxWebhookResponse",
    "ResetSandboxItemResponse",
    "SandboxProcessorTokenOptions",
    "SandboxPublicTokenOptions",
    "SetSandboxVerificationStatusResponse",
    # Transactions
    "GetTransactionsOptions",
    "GetTransactionsResponse",
    "Location",
    "PaymentChannel",
    "PaymentMeta",
    "RefreshTransactionsResponse",
    "RemovedTransaction",
    "SyncTransactionsOptions",
    "SyncTransactionsResponse",
    "Transaction",
    # Webhooks
    "GetWebhookVerificationKeyResponse",
    "WebhookVerificationKey",
]
