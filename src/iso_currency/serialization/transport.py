from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from iso_currency.domain.monetary.currency import Currency

# Accepted input for `from_transport`
TransportValue: TypeAlias = Currency | str | int | bytes | bytearray | memoryview | Sequence[int]


def to_transport(currency: Currency, numeric: bool = False) -> str | int:
    """Convert $currency into its transport representation.

    Args:
        currency (Currency): Currency to convert.
        numeric (bool): If True, return the ISO numeric code instead of the alpha code.

    Returns:
        str | int: Alpha code (e.g. "USD") or numeric code (e.g. 840).

    Raises:
        TypeError: If $currency is not a Currency instance.
    """
    # Raise: $currency must be a Currency
    if not isinstance(currency, Currency):
        raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

    return currency.to_numeric() if numeric else currency.to_alpha()


def from_transport(value: TransportValue) -> Currency:
    """Convert a transport representation back into a `Currency`.

    Dispatches on the type of $value: alpha codes go through `Currency.from_alpha`, numeric codes
    through `Currency.from_numeric` and byte sequences through `Currency.from_bytes`. Unknown or
    malformed values fall back to `XXX`, exactly like those parsers.

    Raises:
        TypeError: If $value is a bool or of an unsupported type.
    """
    if isinstance(value, Currency):
        return value

    # Raise: bool is an int subclass but never a numeric code
    if isinstance(value, bool):
        raise TypeError(f"$value must not be a bool, but provided value is: {value!r}")

    if isinstance(value, str):
        return Currency.from_alpha(value)
    if isinstance(value, int):
        return Currency.from_numeric(value)
    if isinstance(value, Sequence):
        return Currency.from_bytes(value)

    raise TypeError(f"$value must be a Currency, str, int or byte sequence, but provided value is: {value!r}")
