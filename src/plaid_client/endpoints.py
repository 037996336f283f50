"""
Catalog of supported Plaid endpoints.

Each entry names the path, the response model it decodes into, and where the
endpoint's optional parameters go in the request body: nested under
``options`` (Plaid's usual layout) or merged into the top level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Type

from .schema import (
    CreateDepositSwitchResponse,
    CreateDepositSwitchTokenResponse,
    CreateLinkTokenResponse,
    CreateProcessorTokenResponse,
    CreatePublicTokenResponse,
    CreateSandboxProcessorTokenResponse,
    CreateSandboxPublicTokenResponse,
    CreateStripeBankAccountTokenResponse,
    ExchangePublicTokenResponse,
    FireSandboxWebhookResponse,
    GetAccountsResponse,
    GetAuthResponse,
    GetBalancesResponse,
    GetCategoriesResponse,
    GetDepositSwitchResponse,
    GetHoldingsResponse,
    GetIdentityResponse,
    GetInstitutionByIdResponse,
    GetInstitutionsResponse,
    GetInvestmentTransactionsResponse,
    GetItemResponse,
    GetLiabilitiesResponse,
    GetLinkTokenResponse,
    GetTransactionsResponse,
    GetWebhookVerificationKeyResponse,
    InvalidateAccessTokenResponse,
    PlaidModel,
    RefreshInvestmentsResponse,
    RefreshTransactionsResponse,
    RemoveItemResponse,
    ResetSandboxItemResponse,
    SearchInstitutionsResponse,
    SetSandboxVerificationStatusResponse,
    SyncTransactionsResponse,
    UpdateItemWebhookResponse,
)

OPTIONS_KEY = "options"


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    response_model: Type[PlaidModel]
    # None merges options into the top level of the body.
    options_key: Optional[str] = OPTIONS_KEY
    method: str = "POST"


ENDPOINTS: Dict[str, Endpoint] = {}


def _endpoint(name: str, path: str, response_model: Type[PlaidModel], **kwargs) -> Endpoint:
    endpoint = Endpoint(name=name, path=path, response_model=response_model, **kwargs)
    ENDPOINTS[name] = endpoint
    return endpoint


# Accounts / auth / identity
ACCOUNTS_GET = _endpoint("accounts_get", "accounts/get", GetAccountsResponse)
ACCOUNTS_BALANCE_GET = _endpoint("accounts_balance_get", "accounts/balance/get", GetBalancesResponse)
AUTH_GET = _endpoint("auth_get", "auth/get", GetAuthResponse)
IDENTITY_GET = _endpoint("identity_get", "identity/get", GetIdentityResponse)
CATEGORIES_GET = _endpoint("categories_get", "categories/get", GetCategoriesResponse)

# Deposit switch
DEPOSIT_SWITCH_GET = _endpoint("deposit_switch_get", "deposit_switch/get", GetDepositSwitchResponse)
DEPOSIT_SWITCH_CREATE = _endpoint(
    "deposit_switch_create", "deposit_switch/create", CreateDepositSwitchResponse
)
DEPOSIT_SWITCH_TOKEN_CREATE = _endpoint(
    "deposit_switch_token_create", "deposit_switch/token/create", CreateDepositSwitchTokenResponse
)

# Institutions
INSTITUTIONS_GET = _endpoint("institutions_get", "institutions/get", GetInstitutionsResponse)
INSTITUTIONS_GET_BY_ID = _endpoint(
    "institutions_get_by_id", "institutions/get_by_id", GetInstitutionByIdResponse
)
INSTITUTIONS_SEARCH = _endpoint("institutions_search", "institutions/search", SearchInstitutionsResponse)

# Investments
INVESTMENTS_HOLDINGS_GET = _endpoint(
    "investments_holdings_get", "investments/holdings/get", GetHoldingsResponse
)
INVESTMENTS_TRANSACTIONS_GET = _endpoint(
    "investments_transactions_get", "investments/transactions/get", GetInvestmentTransactionsResponse
)
INVESTMENTS_REFRESH = _endpoint("investments_refresh", "investments/refresh", RefreshInvestmentsResponse)

# Item
ITEM_GET = _endpoint("item_get", "item/get", GetItemResponse)
ITEM_REMOVE = _endpoint("item_remove", "item/remove", RemoveItemResponse)
ITEM_WEBHOOK_UPDATE = _endpoint("item_webhook_update", "item/webhook/update", UpdateItemWebhookResponse)
ITEM_ACCESS_TOKEN_INVALIDATE = _endpoint(
    "item_access_token_invalidate", "item/access_token/invalidate", InvalidateAccessTokenResponse
)
ITEM_PUBLIC_TOKEN_CREATE = _endpoint(
    "item_public_token_create", "item/public_token/create", CreatePublicTokenResponse
)
ITEM_PUBLIC_TOKEN_EXCHANGE = _endpoint(
    "item_public_token_exchange", "item/public_token/exchange", ExchangePublicTokenResponse
)

# Liabilities
LIABILITIES_GET = _endpoint("liabilities_get", "liabilities/get", GetLiabilitiesResponse)

# Link
LINK_TOKEN_CREATE = _endpoint(
    "link_token_create", "link/token/create", CreateLinkTokenResponse, options_key=None
)
LINK_TOKEN_GET = _endpoint("link_token_get", "link/token/get", GetLinkTokenResponse)

# Processors
PROCESSOR_TOKEN_CREATE = _endpoint(
    "processor_token_create", "processor/token/create", CreateProcessorTokenResponse
)
PROCESSOR_STRIPE_BANK_ACCOUNT_TOKEN_CREATE = _endpoint(
    "processor_stripe_bank_account_token_create",
    "processor/stripe/bank_account_token/create",
    CreateStripeBankAccountTokenResponse,
)

# Sandbox
SANDBOX_PUBLIC_TOKEN_CREATE = _endpoint(
    "sandbox_public_token_create", "sandbox/public_token/create", CreateSandboxPublicTokenResponse
)
SANDBOX_ITEM_RESET_LOGIN = _endpoint(
    "sandbox_item_reset_login", "sandbox/item/reset_login", ResetSandboxItemResponse
)
SANDBOX_ITEM_SET_VERIFICATION_STATUS = _endpoint(
    "sandbox_item_set_verification_status",
    "sandbox/item/set_verification_status",
    SetSandboxVerificationStatusResponse,
)
SANDBOX_ITEM_FIRE_WEBHOOK = _endpoint(
    "sandbox_item_fire_webhook", "sandbox/item/fire_webhook", FireSandboxWebhookResponse
)
SANDBOX_PROCESSOR_TOKEN_CREATE = _endpoint(
    "sandbox_processor_token_create", "sandbox/processor_token/create", CreateSandboxProcessorTokenResponse
)

# Transactions
TRANSACTIONS_GET = _endpoint("transactions_get", "transactions/get", GetTransactionsResponse)
TRANSACTIONS_SYNC = _endpoint(
    "transactions_sync", "transactions/sync", SyncTransactionsResponse, options_key=None
)
TRANSACTIONS_REFRESH = _endpoint("transactions_refresh", "transactions/refresh", RefreshTransactionsResponse)

# Webhooks
WEBHOOK_VERIFICATION_KEY_GET = _endpoint(
    "webhook_verification_key_get", "webhook_verification_key/get", GetWebhookVerificationKeyResponse
)
