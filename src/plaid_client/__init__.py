"""
Plaid Client - typed Python client for the Plaid financial-data API

Covers accounts, balances, auth, identity, institutions, investments,
liabilities, transactions, items, Link tokens, processors, deposit switch,
webhook verification keys and the Sandbox helpers.

Usage:
------
    from plaid_client import PlaidClient, PlaidApiError

    client = PlaidClient(client_id="...", secret="...", environment="sandbox")
    try:
        accounts = client.get_accounts(access_token)
    except PlaidApiError as e:
        print(e.error_type, e.error_code)

    # Non-blocking variant
    from plaid_client import AsyncPlaidClient

    async with AsyncPlaidClient.from_env() as client:
        item = await client.get_item(access_token)

Configuration:
--------------
    PLAID_CLIENT_ID    - Plaid API client_id
    PLAID_SECRET       - Plaid API secret
    PLAID_ENVIRONMENT  - sandbox, development or production
    PLAID_TIMEOUT_SEC  - Request timeout (default: 30)

Response and option models live in :mod:`plaid_client.schema`.
"""

__version__ = "0.1.0"

# -----------------------------------------------------------------------------
# Clients
# -----------------------------------------------------------------------------
from .client import AsyncPlaidClient, PlaidClient, PlaidEndpointsMixin

# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------
from .config import Credentials, Environment, PlaidConfig

# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
from .errors import (
    PlaidApiError,
    PlaidConfigError,
    PlaidDecodeError,
    PlaidError,
    PlaidTimeoutError,
    PlaidTransportError,
)

# -----------------------------------------------------------------------------
# Request building, decoding and transports (for custom wiring)
# -----------------------------------------------------------------------------
from .builder import PlaidRequest, build_request
from .decoder import decode_response
from .endpoints import ENDPOINTS, Endpoint
from .transport import HttpxTransport, RequestsTransport, TransportResponse


__all__ = [
    "__version__",
    # Clients
    "AsyncPlaidClient",
    "PlaidClient",
    "PlaidEndpointsMixin",
    # Configuration
    "Credentials",
    "Environment",
    "PlaidConfig",
    # Errors
    "PlaidApiError",
    "PlaidConfigError",
    "PlaidDecodeError",
    "PlaidError",
    "PlaidTimeoutError",
    "PlaidTransportError",
    # Plumbing
    "PlaidRequest",
    "build_request",
    "decode_response",
    "ENDPOINTS",
    "Endpoint",
    "HttpxTransport",
    "RequestsTransport",
    "TransportResponse",
]
