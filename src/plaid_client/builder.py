from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from .config import Credentials
from .endpoints import Endpoint


DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": "plaid-typed-client/0.1",
}


@dataclass(frozen=True)
class PlaidRequest:
    """A fully built call: method, relative path and JSON body."""

    method: str
    path: str
    body: Dict[str, Any]

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"

    def to_json(self) -> str:
        return json.dumps(self.body)


def to_wire(value: Any) -> Any:
    """
    Convert a parameter to its JSON form.

    Models are dumped without their unset (None) fields, dates become ISO-8601
    strings, and None entries inside mappings are dropped.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_wire(v) for v in value]
    return value


def build_request(
    endpoint: Endpoint,
    credentials: Credentials,
    params: Optional[Mapping[str, Any]] = None,
    options: Optional[BaseModel] = None,
) -> PlaidRequest:
    """
    Build the request body for ``endpoint``.

    The body always carries ``client_id`` and ``secret``. Required params are
    copied in by name. Options that are set are placed under the endpoint's
    options key, or merged into the top level when it has none; an options
    object with nothing set adds no key at all. Nothing is ever sent as null.
    """
    body: Dict[str, Any] = {
        "client_id": credentials.client_id,
        "secret": credentials.secret,
    }

    for name, value in (params or {}).items():
        if value is None:
            continue
        body[name] = to_wire(value)

    if options is not None:
        option_values = options.model_dump(mode="json", exclude_none=True)
        if option_values:
            if endpoint.options_key is None:
                body.update(option_values)
            else:
                body[endpoint.options_key] = option_values

    return PlaidRequest(method=endpoint.method, path=endpoint.path, body=body)
