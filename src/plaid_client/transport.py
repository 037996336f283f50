from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx
import requests

from .errors import PlaidTimeoutError, PlaidTransportError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: bytes


class RequestsTransport:
    """
    Blocking HTTP transport on a persistent ``requests.Session``.

    Features:
    - Persistent session (connection reuse)
    - Default headers
    - Configurable timeout

    HTTP status codes are returned as-is, never raised; deciding between a
    success and an error payload is the decoder's job. Requests are never
    retried.
    """

    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(
        self,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = self.DEFAULT_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()
        if default_headers:
            self.session.headers.update(default_headers)

    def execute(
        self,
        method: str,
        url: str,
        json_body: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        try:
            response = self.session.request(
                method,
                url,
                json=json_body,
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.warning(f"Timeout after {self.timeout}s calling {url}")
            raise PlaidTimeoutError(
                f"Request timed out after {self.timeout}s calling {url}"
            ) from e
        except requests.RequestException as e:
            logger.warning(f"Request failed calling {url}: {e}")
            raise PlaidTransportError(f"Request failed calling {url}: {e}") from e

        return TransportResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self.session.close()


class HttpxTransport:
    """
    Non-blocking HTTP transport on a shared ``httpx.AsyncClient``.

    The client is safe to share between concurrent tasks; callers close it
    through :meth:`aclose` (or the owning client's ``async with``).
    """

    DEFAULT_TIMEOUT = 30.0  # seconds

    def __init__(
        self,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = self.DEFAULT_TIMEOUT if timeout is None else timeout
        self._http = client or httpx.AsyncClient(timeout=self.timeout)
        if default_headers:
            self._http.headers.update(default_headers)

    async def execute(
        self,
        method: str,
        url: str,
        json_body: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        try:
            response = await self._http.request(
                method,
                url,
                json=dict(json_body),
                headers=dict(headers) if headers else None,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout after {self.timeout}s calling {url}")
            raise PlaidTimeoutError(
                f"Request timed out after {self.timeout}s calling {url}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Request failed calling {url}: {e}")
            raise PlaidTransportError(f"Request failed calling {url}: {e}") from e

        return TransportResponse(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        await self._http.aclose()
