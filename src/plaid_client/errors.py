from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .schema.errors import ErrorResponse


class PlaidError(RuntimeError):
    """Base error for every failure surfaced by the client."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Structured form, suitable for logging."""
        result: Dict[str, Any] = {"error": self.message, "kind": type(self).__name__}
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result


class PlaidConfigError(PlaidError):
    """Raised when client configuration is missing or invalid."""


class PlaidTransportError(PlaidError):
    """Raised when the HTTP request could not be completed (DNS, TLS, connection)."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class PlaidTimeoutError(PlaidTransportError):
    """Raised when the request times out."""


class PlaidApiError(PlaidError):
    """
    Plaid returned a well-formed error payload.

    The fields of the payload are exposed as attributes so callers can match
    on ``error_type`` / ``error_code`` without parsing the message.
    """

    def __init__(self, error: "ErrorResponse", status_code: Optional[int] = None) -> None:
        self.error = error
        self.error_type = error.error_type
        self.error_code = error.error_code
        self.error_message = error.error_message
        self.display_message = error.display_message
        self.request_id = error.request_id
        super().__init__(
            f"Plaid API error - request ID: {error.request_id}, "
            f"http status: {status_code}, type: {error.error_type}, "
            f"code: {error.error_code}, message: {error.error_message}",
            status_code=status_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["details"] = self.error.model_dump(mode="json", exclude_none=True)
        return result


class PlaidDecodeError(PlaidError):
    """Response body could not be decoded into the expected shape."""

    def __init__(
        self,
        detail: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(f"Could not decode Plaid response: {detail}", status_code=status_code)
        self.detail = detail
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["detail"] = self.detail
        return result
