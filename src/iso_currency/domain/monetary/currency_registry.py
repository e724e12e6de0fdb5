"""Read-only lookup tables and function-style access to `Currency`.

Every function here is a thin, pure wrapper over the `Currency` enum; the tables are built once at
import and cannot be modified.
"""

from __future__ import annotations

from iso_currency.domain.monetary.currency import (
    CURRENCIES_BY_ALPHA_CODE,
    CURRENCIES_BY_NUMERIC_CODE,
    ByteSequenceLike,
    Currency,
)
from iso_currency.domain.monetary.currency_category import CurrencyCategory

# Sentinel for "no currency" and for any unparsable input
SENTINEL = Currency.XXX


def default_currency() -> Currency:
    """Return the "no currency" sentinel `XXX`."""
    return SENTINEL


def currency_name(currency: Currency) -> str:
    """Return the English display name of $currency."""
    return currency.display_name


def to_alpha(currency: Currency) -> str:
    return currency.to_alpha()


def to_numeric(currency: Currency) -> int:
    return currency.to_numeric()


def to_fixed_bytes(currency: Currency) -> bytes:
    return currency.to_fixed_bytes()


def display(currency: Currency) -> str:
    return currency.display()


def from_alpha(value: str) -> Currency:
    """Parse $value leniently; see `Currency.from_alpha`."""
    return Currency.from_alpha(value)


def from_bytes(value: ByteSequenceLike) -> Currency:
    """Parse $value leniently; see `Currency.from_bytes`."""
    return Currency.from_bytes(value)


def from_numeric(value: int) -> Currency:
    """Look up $value leniently; see `Currency.from_numeric`."""
    return Currency.from_numeric(value)


def all_currencies() -> tuple[Currency, ...]:
    """Return every currency, ordered by alpha code."""
    return tuple(sorted(Currency, key=lambda currency: currency.alpha_code))


def currencies_in_category(category: CurrencyCategory) -> tuple[Currency, ...]:
    """Return the currencies of $category, ordered by alpha code.

    Raises:
        TypeError: If $category is not a CurrencyCategory instance.
    """
    # Raise: $category must be a CurrencyCategory
    if not isinstance(category, CurrencyCategory):
        raise TypeError(f"$category must be a CurrencyCategory instance, but provided value is: {category!r}")

    return tuple(currency for currency in all_currencies() if currency.category is category)
