"""
Plaid client façade: one method per Plaid endpoint.

Two clients share the same endpoint methods:

    PlaidClient       - blocking, on a requests.Session
    AsyncPlaidClient  - asyncio, on an httpx.AsyncClient; every endpoint
                        method returns a coroutine

Each method builds the request body (credentials injected), sends it through
the transport and decodes the reply. Successful calls return the typed
response model; failures raise PlaidApiError, PlaidDecodeError or
PlaidTransportError. Nothing is retried and nothing is paginated
automatically: continuation values (next_cursor, has_more, offsets) are
returned to the caller untouched.

Usage:
------
    client = PlaidClient.from_env()
    token = client.create_sandbox_public_token("ins_109508", ["transactions"])
    access = client.exchange_public_token(token.public_token)
    accounts = client.get_accounts(access.access_token)

    async with AsyncPlaidClient.from_env() as client:
        item, auth = await asyncio.gather(
            client.get_item(access_token), client.get_auth(access_token)
        )
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Awaitable, Dict, Optional, Sequence, TypeVar, Union

from . import endpoints as ep
from .builder import DEFAULT_HEADERS, build_request
from .config import Environment, PlaidConfig
from .decoder import decode_response
from .errors import PlaidConfigError
from .schema import (
    CreateDepositSwitchResponse,
    CreateDepositSwitchTokenResponse,
    CreateLinkTokenOptions,
    CreateLinkTokenResponse,
    CreateProcessorTokenResponse,
    CreatePublicTokenResponse,
    CreateSandboxProcessorTokenResponse,
    CreateSandboxPublicTokenResponse,
    CreateStripeBankAccountTokenResponse,
    ExchangePublicTokenResponse,
    FireSandboxWebhookResponse,
    GetAccountsOptions,
    GetAccountsResponse,
    GetAuthOptions,
    GetAuthResponse,
    GetBalancesOptions,
    GetBalancesResponse,
    GetCategoriesResponse,
    GetDepositSwitchResponse,
    GetHoldingsOptions,
    GetHoldingsResponse,
    GetIdentityOptions,
    GetIdentityResponse,
    GetInstitutionByIdOptions,
    GetInstitutionByIdResponse,
    GetInstitutionsOptions,
    GetInstitutionsResponse,
    GetInvestmentTransactionsOptions,
    GetInvestmentTransactionsResponse,
    GetItemResponse,
    GetLiabilitiesOptions,
    GetLiabilitiesResponse,
    GetLinkTokenResponse,
    GetTransactionsOptions,
    GetTransactionsResponse,
    GetWebhookVerificationKeyResponse,
    InvalidateAccessTokenResponse,
    LinkTokenUser,
    PlaidModel,
    RefreshInvestmentsResponse,
    RefreshTransactionsResponse,
    RemoveItemResponse,
    ResetSandboxItemResponse,
    SandboxProcessorTokenOptions,
    SandboxPublicTokenOptions,
    SearchInstitutionsOptions,
    SearchInstitutionsResponse,
    SetSandboxVerificationStatusResponse,
    SyncTransactionsOptions,
    SyncTransactionsResponse,
    UpdateItemWebhookResponse,
    VerificationStatus,
)
from .transport import HttpxTransport, RequestsTransport


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=PlaidModel)

# PlaidClient methods return the model, AsyncPlaidClient methods an awaitable of it.
Reply = Union[T, Awaitable[T]]


def _resolve_config(
    client_id: Optional[str],
    secret: Optional[str],
    environment: Union[str, Environment, None],
    timeout: Optional[float],
    config: Optional[PlaidConfig],
) -> PlaidConfig:
    if config is not None:
        return config
    if not client_id or not secret or environment is None:
        raise PlaidConfigError(
            "client_id, secret and environment are required "
            "(or build the client with from_env())."
        )
    return PlaidConfig.create(client_id, secret, environment, timeout=timeout)


class PlaidEndpointsMixin:
    """
    The Plaid endpoint surface, shared by the blocking and async clients.

    Every method returns whatever the concrete client's ``_call`` returns: the
    response model for :class:`PlaidClient`, a coroutine resolving to it for
    :class:`AsyncPlaidClient`.
    """

    def _call(
        self,
        endpoint: ep.Endpoint,
        params: Dict[str, Any],
        options: Optional[PlaidModel] = None,
    ) -> Any:
        raise NotImplementedError

    # =========================================================================
    # Accounts, auth, identity
    # =========================================================================

    def get_accounts(
        self,
        access_token: str,
        options: Optional[GetAccountsOptions] = None,
    ) -> Reply[GetAccountsResponse]:
        """Retrieve the accounts of an Item. Returns GetAccountsResponse."""
        return self._call(ep.ACCOUNTS_GET, {"access_token": access_token}, options)

    def get_balances(
        self,
        access_token: str,
        options: Optional[GetBalancesOptions] = None,
    ) -> Reply[GetBalancesResponse]:
        """
        Retrieve real-time balances. Returns GetBalancesResponse.

        Unlike other endpoints returning balances, this one forces the
        institution to refresh them instead of serving cached values.
        """
        return self._call(ep.ACCOUNTS_BALANCE_GET, {"access_token": access_token}, options)

    def get_auth(
        self,
        access_token: str,
        options: Optional[GetAuthOptions] = None,
    ) -> Reply[GetAuthResponse]:
        """Retrieve account and routing numbers. Returns GetAuthResponse."""
        return self._call(ep.AUTH_GET, {"access_token": access_token}, options)

    def get_identity(
        self,
        access_token: str,
        options: Optional[GetIdentityOptions] = None,
    ) -> Reply[GetIdentityResponse]:
        """Retrieve owner identity data for each account. Returns GetIdentityResponse."""
        return self._call(ep.IDENTITY_GET, {"access_token": access_token}, options)

    def get_categories(self) -> Reply[GetCategoriesResponse]:
        """Returns GetCategoriesResponse with every transaction category."""
        return self._call(ep.CATEGORIES_GET, {})

    # =========================================================================
    # Deposit switch
    # =========================================================================

    def get_deposit_switch(self, deposit_switch_id: str) -> Reply[GetDepositSwitchResponse]:
        """Returns GetDepositSwitchResponse."""
        return self._call(ep.DEPOSIT_SWITCH_GET, {"deposit_switch_id": deposit_switch_id})

    def create_deposit_switch(
        self,
        target_account_id: str,
        target_access_token: str,
    ) -> Reply[CreateDepositSwitchResponse]:
        """
        Create a deposit switch targeting an account. Returns CreateDepositSwitchResponse.

        Args:
            target_account_id: Account that becomes the recipient of the direct deposit
            target_access_token: Access token of the Item owning that account
        """
        return self._call(
            ep.DEPOSIT_SWITCH_CREATE,
            {
                "target_account_id": target_account_id,
                "target_access_token": target_access_token,
            },
        )

    def create_deposit_switch_token(
        self,
        deposit_switch_id: str,
    ) -> Reply[CreateDepositSwitchTokenResponse]:
        """Returns CreateDepositSwitchTokenResponse, used to open Link for the switch."""
        return self._call(ep.DEPOSIT_SWITCH_TOKEN_CREATE, {"deposit_switch_id": deposit_switch_id})

    # =========================================================================
    # Institutions
    # =========================================================================

    def get_institutions(
        self,
        count: int,
        offset: int,
        country_codes: Sequence[str],
        options: Optional[GetInstitutionsOptions] = None,
    ) -> Reply[GetInstitutionsResponse]:
        """
        List supported institutions, one page at a time. Returns GetInstitutionsResponse.

        ``total`` in the response tells the caller when to stop advancing ``offset``.
        """
        return self._call(
            ep.INSTITUTIONS_GET,
            {"count": count, "offset": offset, "country_codes": list(country_codes)},
            options,
        )

    def get_institution_by_id(
        self,
        institution_id: str,
        country_codes: Sequence[str],
        options: Optional[GetInstitutionByIdOptions] = None,
    ) -> Reply[GetInstitutionByIdResponse]:
        """Returns GetInstitutionByIdResponse."""
        return self._call(
            ep.INSTITUTIONS_GET_BY_ID,
            {"institution_id": institution_id, "country_codes": list(country_codes)},
            options,
        )

    def search_institutions(
        self,
        query: str,
        products: Sequence[str],
        country_codes: Sequence[str],
        options: Optional[SearchInstitutionsOptions] = None,
    ) -> Reply[SearchInstitutionsResponse]:
        """Search institutions by name. Returns SearchInstitutionsResponse."""
        return self._call(
            ep.INSTITUTIONS_SEARCH,
            {
                "query": query,
                "products": list(products),
                "country_codes": list(country_codes),
            },
            options,
        )

    # =========================================================================
    # Investments
    # =========================================================================

    def get_holdings(
        self,
        access_token: str,
        options: Optional[GetHoldingsOptions] = None,
    ) -> Reply[GetHoldingsResponse]:
        """Returns GetHoldingsResponse with holdings and the securities they reference."""
        return self._call(ep.INVESTMENTS_HOLDINGS_GET, {"access_token": access_token}, options)

    def get_investment_transactions(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        options: Optional[GetInvestmentTransactionsOptions] = None,
    ) -> Reply[GetInvestmentTransactionsResponse]:
        """Returns GetInvestmentTransactionsResponse for the date range (inclusive)."""
        return self._call(
            ep.INVESTMENTS_TRANSACTIONS_GET,
            {"access_token": access_token, "start_date": start_date, "end_date": end_date},
            options,
        )

    def refresh_investments(self, access_token: str) -> Reply[RefreshInvestmentsResponse]:
        """Returns RefreshInvestmentsResponse."""
        return self._call(ep.INVESTMENTS_REFRESH, {"access_token": access_token})

    # =========================================================================
    # Item
    # =========================================================================

    def get_item(self, access_token: str) -> Reply[GetItemResponse]:
        """Returns GetItemResponse."""
        return self._call(ep.ITEM_GET, {"access_token": access_token})

    def remove_item(self, access_token: str) -> Reply[RemoveItemResponse]:
        """Remove an Item; its access token stops working. Returns RemoveItemResponse."""
        return self._call(ep.ITEM_REMOVE, {"access_token": access_token})

    def update_item_webhook(
        self,
        access_token: str,
        webhook: str,
    ) -> Reply[UpdateItemWebhookResponse]:
        """Returns UpdateItemWebhookResponse."""
        return self._call(ep.ITEM_WEBHOOK_UPDATE, {"access_token": access_token, "webhook": webhook})

    def invalidate_access_token(self, access_token: str) -> Reply[InvalidateAccessTokenResponse]:
        """Rotate an access token. Returns InvalidateAccessTokenResponse."""
        return self._call(ep.ITEM_ACCESS_TOKEN_INVALIDATE, {"access_token": access_token})

    def create_public_token(self, access_token: str) -> Reply[CreatePublicTokenResponse]:
        """Returns CreatePublicTokenResponse."""
        return self._call(ep.ITEM_PUBLIC_TOKEN_CREATE, {"access_token": access_token})

    def exchange_public_token(self, public_token: str) -> Reply[ExchangePublicTokenResponse]:
        """Exchange a Link public token for an access token. Returns ExchangePublicTokenResponse."""
        return self._call(ep.ITEM_PUBLIC_TOKEN_EXCHANGE, {"public_token": public_token})

    # =========================================================================
    # Liabilities
    # =========================================================================

    def get_liabilities(
        self,
        access_token: str,
        options: Optional[GetLiabilitiesOptions] = None,
    ) -> Reply[GetLiabilitiesResponse]:
        """Returns GetLiabilitiesResponse."""
        return self._call(ep.LIABILITIES_GET, {"access_token": access_token}, options)

    # =========================================================================
    # Link
    # =========================================================================

    def create_link_token(
        self,
        user: LinkTokenUser,
        client_name: str,
        country_codes: Sequence[str] = ("US",),
        language: str = "en",
        options: Optional[CreateLinkTokenOptions] = None,
    ) -> Reply[CreateLinkTokenResponse]:
        """
        Create a Link token. Returns CreateLinkTokenResponse.

        Args:
            user: End user the token is created for
            client_name: Application name shown in Link
            country_codes: Countries whose institutions are shown
            language: Language Link is displayed in
            options: products, webhook, account_filters, redirect_uri, ...
                     (sent at the top level of the body)
        """
        return self._call(
            ep.LINK_TOKEN_CREATE,
            {
                "client_name": client_name,
                "language": language,
                "country_codes": list(country_codes),
                "user": user,
            },
            options,
        )

    def get_link_token(self, link_token: str) -> Reply[GetLinkTokenResponse]:
        """Returns GetLinkTokenResponse."""
        return self._call(ep.LINK_TOKEN_GET, {"link_token": link_token})

    # =========================================================================
    # Processors
    # =========================================================================

    def create_processor_token(
        self,
        access_token: str,
        account_id: str,
        processor: str,
    ) -> Reply[CreateProcessorTokenResponse]:
        """Returns CreateProcessorTokenResponse for a partner processor (e.g. "dwolla")."""
        return self._call(
            ep.PROCESSOR_TOKEN_CREATE,
            {"access_token": access_token, "account_id": account_id, "processor": processor},
        )

    def create_stripe_bank_account_token(
        self,
        access_token: str,
        account_id: str,
    ) -> Reply[CreateStripeBankAccountTokenResponse]:
        """Returns CreateStripeBankAccountTokenResponse."""
        return self._call(
            ep.PROCESSOR_STRIPE_BANK_ACCOUNT_TOKEN_CREATE,
            {"access_token": access_token, "account_id": account_id},
        )

    # =========================================================================
    # Sandbox
    # =========================================================================

    def create_sandbox_public_token(
        self,
        institution_id: str,
        initial_products: Sequence[str],
        options: Optional[SandboxPublicTokenOptions] = None,
    ) -> Reply[CreateSandboxPublicTokenResponse]:
        """Create a public token without going through Link. Returns CreateSandboxPublicTokenResponse."""
        return self._call(
            ep.SANDBOX_PUBLIC_TOKEN_CREATE,
            {"institution_id": institution_id, "initial_products": list(initial_products)},
            options,
        )

    def reset_sandbox_item(self, access_token: str) -> Reply[ResetSandboxItemResponse]:
        """Force a Sandbox Item into ITEM_LOGIN_REQUIRED. Returns ResetSandboxItemResponse."""
        return self._call(ep.SANDBOX_ITEM_RESET_LOGIN, {"access_token": access_token})

    def set_sandbox_verification_status(
        self,
        access_token: str,
        account_id: str,
        verification_status: Union[str, VerificationStatus],
    ) -> Reply[SetSandboxVerificationStatusResponse]:
        """Returns SetSandboxVerificationStatusResponse."""
        return self._call(
            ep.SANDBOX_ITEM_SET_VERIFICATION_STATUS,
            {
                "access_token": access_token,
                "account_id": account_id,
                "verification_status": verification_status,
            },
        )

    def fire_sandbox_webhook(
        self,
        access_token: str,
        webhook_code: str,
    ) -> Reply[FireSandboxWebhookResponse]:
        """Returns FireSandboxWebhookResponse."""
        return self._call(
            ep.SANDBOX_ITEM_FIRE_WEBHOOK,
            {"access_token": access_token, "webhook_code": webhook_code},
        )

    def create_sandbox_processor_token(
        self,
        institution_id: str,
        options: Optional[SandboxProcessorTokenOptions] = None,
    ) -> Reply[CreateSandboxProcessorTokenResponse]:
        """Returns CreateSandboxProcessorTokenResponse."""
        return self._call(
            ep.SANDBOX_PROCESSOR_TOKEN_CREATE, {"institution_id": institution_id}, options
        )

    # =========================================================================
    # Transactions
    # =========================================================================

    def get_transactions(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        options: Optional[GetTransactionsOptions] = None,
    ) -> Reply[GetTransactionsResponse]:
        """
        Returns GetTransactionsResponse for the date range (inclusive).

        Paginate by advancing ``options.offset`` until it reaches
        ``total_transactions``.
        """
        return self._call(
            ep.TRANSACTIONS_GET,
            {"access_token": access_token, "start_date": start_date, "end_date": end_date},
            options,
        )

    def sync_transactions(
        self,
        access_token: str,
        options: Optional[SyncTransactionsOptions] = None,
    ) -> Reply[SyncTransactionsResponse]:
        """
        Returns SyncTransactionsResponse: updates since ``options.cursor``.

        Call again with ``next_cursor`` while ``has_more`` is true. Leaving the
        cursor unset fetches the whole history.
        """
        return self._call(ep.TRANSACTIONS_SYNC, {"access_token": access_token}, options)

    def refresh_transactions(self, access_token: str) -> Reply[RefreshTransactionsResponse]:
        """Returns RefreshTransactionsResponse."""
        return self._call(ep.TRANSACTIONS_REFRESH, {"access_token": access_token})

    # =========================================================================
    # Webhooks
    # =========================================================================

    def get_webhook_verification_key(self, key_id: str) -> Reply[GetWebhookVerificationKeyResponse]:
        """Returns GetWebhookVerificationKeyResponse with the JWK for ``key_id``."""
        return self._call(ep.WEBHOOK_VERIFICATION_KEY_GET, {"key_id": key_id})


class PlaidClient(PlaidEndpointsMixin):
    """
    Blocking Plaid client.

    Safe to share between threads: it only holds read-only configuration and
    the transport.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        secret: Optional[str] = None,
        environment: Union[str, Environment, None] = None,
        timeout: Optional[float] = None,
        config: Optional[PlaidConfig] = None,
        transport: Optional[Any] = None,
    ) -> None:
        """
        Args:
            client_id: Plaid API client_id
            secret: Plaid API secret
            environment: sandbox, development or production
            timeout: Request timeout in seconds
            config: Prebuilt configuration, replaces the four arguments above
            transport: Object with ``execute(method, url, json_body, headers)``;
                       defaults to a RequestsTransport
        """
        self.config = _resolve_config(client_id, secret, environment, timeout, config)
        self.transport = transport or RequestsTransport(timeout=self.config.timeout)
        logger.info(f"PlaidClient initialized for {self.config.environment} environment.")

    @classmethod
    def from_env(cls, transport: Optional[Any] = None) -> "PlaidClient":
        """Build a client from PLAID_CLIENT_ID, PLAID_SECRET and PLAID_ENVIRONMENT."""
        return cls(config=PlaidConfig.from_env(), transport=transport)

    @property
    def environment(self) -> Environment:
        return self.config.environment

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _call(
        self,
        endpoint: ep.Endpoint,
        params: Dict[str, Any],
        options: Optional[PlaidModel] = None,
    ) -> Any:
        request = build_request(endpoint, self.config.credentials, params, options)
        logger.debug(f"{request.method} {request.path}")
        response = self.transport.execute(
            request.method, request.url(self.base_url), request.body, DEFAULT_HEADERS
        )
        logger.debug(f"{request.method} {request.path} -> HTTP {response.status_code}")
        return decode_response(endpoint.response_model, response.status_code, response.body)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "PlaidClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PlaidClient(environment='{self.config.environment}')"


class AsyncPlaidClient(PlaidEndpointsMixin):
    """
    asyncio Plaid client; every endpoint method is awaitable.

    One instance can serve any number of concurrent calls: calls share only
    read-only configuration and the pooled httpx client, so no locking is
    needed. Cancelling a call (task cancel, ``asyncio.wait_for``) leaves the
    client usable.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        secret: Optional[str] = None,
        environment: Union[str, Environment, None] = None,
        timeout: Optional[float] = None,
        config: Optional[PlaidConfig] = None,
        transport: Optional[Any] = None,
    ) -> None:
        self.config = _resolve_config(client_id, secret, environment, timeout, config)
        self.transport = transport or HttpxTransport(timeout=self.config.timeout)
        logger.info(f"AsyncPlaidClient initialized for {self.config.environment} environment.")

    @classmethod
    def from_env(cls, transport: Optional[Any] = None) -> "AsyncPlaidClient":
        """Build a client from PLAID_CLIENT_ID, PLAID_SECRET and PLAID_ENVIRONMENT."""
        return cls(config=PlaidConfig.from_env(), transport=transport)

    @property
    def environment(self) -> Environment:
        return self.config.environment

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def _call(
        self,
        endpoint: ep.Endpoint,
        params: Dict[str, Any],
        options: Optional[PlaidModel] = None,
    ) -> Any:
        request = build_request(endpoint, self.config.credentials, params, options)
        logger.debug(f"{request.method} {request.path}")
        response = await self.transport.execute(
            request.method, request.url(self.base_url), request.body, DEFAULT_HEADERS
        )
        logger.debug(f"{request.method} {request.path} -> HTTP {response.status_code}")
        return decode_response(endpoint.response_model, response.status_code, response.body)

    async def aclose(self) -> None:
        aclose = getattr(self.transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "AsyncPlaidClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AsyncPlaidClient(environment='{self.config.environment}')"
