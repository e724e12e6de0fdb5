"""Pydantic field types for `Currency`.

Usage:
    >>> from pydantic import BaseModel
    >>> class Payment(BaseModel):
    ...     currency: CurrencyField
    >>> Payment(currency="eur").model_dump()
    {'currency': 'EUR'}
"""

from __future__ import annotations

from typing import Annotated, Any

import pydantic

from iso_currency.domain.monetary.currency import Currency
from iso_currency.serialization.transport import from_transport


def parse_currency(value: Any) -> Currency:
    """Validate $value leniently, so unknown codes become `XXX`.

    Unsupported types are reported as `ValueError`, which pydantic turns into a `ValidationError`.
    """
    try:
        return from_transport(value)
    except TypeError as e:
        raise ValueError(f"Cannot parse currency from $value ({value!r}): {e}") from e


def dump_alpha_code(currency: Currency) -> str:
    return currency.to_alpha()


def dump_numeric_code(currency: Currency) -> int:
    return currency.to_numeric()


# JSON schemas describe the transport form, not the numeric Enum values
ALPHA_CODE_JSON_SCHEMA = {"type": "string", "enum": [currency.alpha_code for currency in Currency]}
NUMERIC_CODE_JSON_SCHEMA = {"type": "integer", "enum": [currency.numeric_code for currency in Currency]}

# Serialized as the alpha code, e.g. "USD"
CurrencyField = Annotated[
    Currency,
    pydantic.BeforeValidator(parse_currency),
    pydantic.PlainSerializer(dump_alpha_code, return_type=str),
    pydantic.WithJsonSchema(ALPHA_CODE_JSON_SCHEMA),
]

# Serialized as the numeric code, e.g. 840
NumericCurrencyField = Annotated[
    Currency,
    pydantic.BeforeValidator(parse_currency),
    pydantic.PlainSerializer(dump_numeric_code, return_type=int),
    pydantic.WithJsonSchema(NUMERIC_CODE_JSON_SCHEMA),
]
