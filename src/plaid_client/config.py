"""
Configuration for the Plaid client.

Values come either from explicit constructor arguments or from the
environment:

    PLAID_CLIENT_ID    - Plaid API client_id (required)
    PLAID_SECRET       - Plaid API secret (required)
    PLAID_ENVIRONMENT  - sandbox, development or production (required, any case)
    PLAID_TIMEOUT_SEC  - Request timeout in seconds (default: 30)

Bad or missing values raise PlaidConfigError when the configuration is built,
never later during a call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import PlaidConfigError


DEFAULT_TIMEOUT_SEC = 30.0

ENV_CLIENT_ID = "PLAID_CLIENT_ID"
ENV_SECRET = "PLAID_SECRET"
ENV_ENVIRONMENT = "PLAID_ENVIRONMENT"
ENV_TIMEOUT = "PLAID_TIMEOUT_SEC"


class Environment(str, Enum):
    """Plaid deployment target."""

    SANDBOX = "sandbox"
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        return f"https://{self.value}.plaid.com"

    @classmethod
    def parse(cls, raw: Union[str, "Environment"]) -> "Environment":
        """Parse an environment tag case-insensitively."""
        if isinstance(raw, Environment):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError as e:
            allowed = ", ".join(env.value.upper() for env in cls)
            raise PlaidConfigError(
                f"Plaid environment must be one of {allowed}, got '{raw}'."
            ) from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Credentials:
    client_id: str
    # Never shown in repr / logs.
    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.client_id:
            raise PlaidConfigError("Plaid client_id must not be empty.")
        if not self.secret:
            raise PlaidConfigError("Plaid secret must not be empty.")


@dataclass(frozen=True)
class PlaidConfig:
    """Everything a client needs: credentials, environment and transport timeout."""

    credentials: Credentials
    environment: Environment
    timeout: float = DEFAULT_TIMEOUT_SEC

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise PlaidConfigError(f"Plaid timeout must be positive, got {self.timeout}.")

    @property
    def base_url(self) -> str:
        return self.environment.base_url

    @classmethod
    def create(
        cls,
        client_id: str,
        secret: str,
        environment: Union[str, Environment],
        timeout: Optional[float] = None,
    ) -> "PlaidConfig":
        return cls(
            credentials=Credentials(client_id=client_id, secret=secret),
            environment=Environment.parse(environment),
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT_SEC,
        )

    @classmethod
    def from_env(cls) -> "PlaidConfig":
        """
        Build the configuration from PLAID_* environment variables.

        Raises:
            PlaidConfigError: a required variable is unset or a value cannot be parsed.
        """
        client_id = _require_env(ENV_CLIENT_ID)
        secret = _require_env(ENV_SECRET)
        environment_raw = _require_env(ENV_ENVIRONMENT)
        try:
            environment = Environment.parse(environment_raw)
        except PlaidConfigError as e:
            raise PlaidConfigError(f"{ENV_ENVIRONMENT} is invalid: {e.message}") from e

        timeout_raw = os.getenv(ENV_TIMEOUT, str(DEFAULT_TIMEOUT_SEC)).strip()
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise PlaidConfigError(
                f"{ENV_TIMEOUT} must be a number, got '{timeout_raw}'."
            ) from e
        if timeout <= 0:
            raise PlaidConfigError(f"{ENV_TIMEOUT} must be positive, got '{timeout_raw}'.")

        return cls(
            credentials=Credentials(client_id=client_id, secret=secret),
            environment=environment,
            timeout=timeout,
        )


def _require_env(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise PlaidConfigError(f"Missing environment variable: {name}.")
    return value
