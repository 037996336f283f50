from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


class PlaidModel(BaseModel):
    """
    Base for every Plaid request/response model.

    Plaid adds fields to its responses over time, so unknown keys are ignored
    rather than rejected. Optional fields default to None: a missing value is
    reported as absent, never coerced to "" or 0.

    Models that carry amounts list them in ``money_fields``. On decode each bare
    number is lifted into a :class:`Money` together with the sibling
    ``iso_currency_code`` / ``unofficial_currency_code``; on serialization it is
    flattened back so a dump keeps the wire shape.

    A :class:`Money` passed in directly is reconciled with the record's currency
    codes. When only one side names a currency, the other adopts it. Two
    different currencies are rejected.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    money_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _lift_money_fields(cls, data: Any) -> Any:
        if not cls.money_fields or not isinstance(data, dict):
            return data

        lifted = dict(data)
        iso = data.get("iso_currency_code")
        unofficial = data.get("unofficial_currency_code")
        for name in cls.money_fields:
            value = lifted.get(name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                lifted[name] = {
                    "value": value,
                    "iso_currency_code": iso,
                    "unofficial_currency_code": unofficial,
                }
            elif isinstance(value, Money):
                # A record has one currency, written once on the wire.
                if value.currency is None:
                    lifted[name] = value.model_copy(
                        update={"iso_currency_code": iso, "unofficial_currency_code": unofficial}
                    )
                elif iso is None and unofficial is None:
                    iso = value.iso_currency_code
                    unofficial = value.unofficial_currency_code
                    lifted["iso_currency_code"] = iso
                    lifted["unofficial_currency_code"] = unofficial
                elif (value.iso_currency_code, value.unofficial_currency_code) != (iso, unofficial):
                    raise ValueError(
                        f"{name} is in {value.currency} but the record is in {iso or unofficial}"
                    )
        return lifted

    @model_serializer(mode="wrap")
    def _flatten_money_fields(self, handler: Any) -> Any:
        data = handler(self)
        if not self.money_fields or not isinstance(data, dict):
            return data
        for name in self.money_fields:
            value = data.get(name)
            if isinstance(value, dict) and "value" in value:
                data[name] = value["value"]
        return data


class Money(BaseModel):
    """An amount together with the currency Plaid reported it in."""

    model_config = ConfigDict(frozen=True)

    value: float
    iso_currency_code: Optional[str] = Field(
        None, description="ISO-4217 code. Always null if unofficial_currency_code is set."
    )
    unofficial_currency_code: Optional[str] = Field(
        None, description="Unofficial code (e.g. cryptocurrencies). Always null if iso_currency_code is set."
    )

    @property
    def currency(self) -> Optional[str]:
        return self.iso_currency_code or self.unofficial_currency_code

    def __float__(self) -> float:
        return self.value


class OpenStrEnum(str, Enum):
    """
    String enum that accepts values it does not know about.

    Plaid extends its enumerations without notice. A value outside the declared
    members decodes to an ``UNKNOWN`` pseudo-member whose ``value`` is the raw
    string, so decoding never fails and re-serializing returns the original.
    """

    @classmethod
    def _missing_(cls, value: object) -> Optional["OpenStrEnum"]:
        if not isinstance(value, str):
            return None
        pseudo_member = str.__new__(cls, value)
        pseudo_member._name_ = "UNKNOWN"
        pseudo_member._value_ = value
        return pseudo_member

    @property
    def is_unknown(self) -> bool:
        return self.value not in type(self)._value2member_map_

    def __str__(self) -> str:
        return self.value
