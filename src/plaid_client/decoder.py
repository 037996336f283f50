"""
Turns a raw Plaid response into a typed model or a typed error.

The payload shape decides the outcome, not the HTTP status: Plaid has been
seen returning error bodies with 2xx codes and vice versa. The success schema
is always tried first; a body that carries Plaid's error discriminators
(``error_type`` and ``error_code``) is an API error even if it happens to fit
a small success schema such as ``{"request_id": ...}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from .errors import PlaidApiError, PlaidDecodeError
from .schema import ErrorResponse, PlaidModel


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=PlaidModel)

_ERROR_DISCRIMINATORS = ("error_type", "error_code")


def parse_json(raw_body: Union[bytes, str], status_code: Optional[int] = None) -> Any:
    """Parse a raw body, raising PlaidDecodeError for anything that is not JSON."""
    text = raw_body.decode("utf-8", errors="replace") if isinstance(raw_body, bytes) else raw_body
    try:
        return json.loads(text)
    except ValueError as e:
        raise PlaidDecodeError(
            f"Invalid JSON body: {e}", status_code=status_code, body=text
        ) from e


def _is_error_shaped(data: Any) -> bool:
    return isinstance(data, dict) and all(data.get(key) is not None for key in _ERROR_DISCRIMINATORS)


def decode_response(
    model: Type[T],
    status_code: Optional[int],
    raw_body: Union[bytes, str],
) -> T:
    """
    Decode ``raw_body`` into ``model``.

    Returns:
        The validated success model.

    Raises:
        PlaidApiError: the body is a Plaid error payload.
        PlaidDecodeError: the body is not JSON, or fits neither the success
            schema nor the error schema. Carries the success-schema failure.
    """
    text = raw_body.decode("utf-8", errors="replace") if isinstance(raw_body, bytes) else raw_body
    data = parse_json(text, status_code=status_code)

    success_failure: Optional[ValidationError] = None
    try:
        result = model.model_validate(data)
    except ValidationError as e:
        success_failure = e
    else:
        if not _is_error_shaped(data):
            return result

    try:
        error = ErrorResponse.model_validate(data)
    except ValidationError as e:
        failure = success_failure or e
        logger.error(
            f"Could not decode {model.__name__} (HTTP {status_code}): "
            f"{failure.error_count()} validation error(s)"
        )
        raise PlaidDecodeError(_describe(failure), status_code=status_code, body=text) from failure

    logger.warning(
        f"Plaid API error (HTTP {status_code}): type={error.error_type} "
        f"code={error.error_code} request_id={error.request_id}"
    )
    raise PlaidApiError(error, status_code=status_code)


def _describe(failure: ValidationError) -> str:
    first = failure.errors()[0] if failure.error_count() else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{failure.title}: {first.get('msg', 'invalid payload')} at '{location}'"
