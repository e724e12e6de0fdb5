from __future__ import annotations

import pytest

from iso_currency.domain.monetary.currency import Currency
from iso_currency.serialization.transport import from_transport, to_transport


def test_to_transport() -> None:
    assert to_transport(Currency.USD) == "USD"
    assert to_transport(Currency.USD, numeric=True) == 840
    with pytest.raises(TypeError):
        to_transport("USD")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value, expected",
    [
        (Currency.GBP, Currency.GBP),
        ("gbp", Currency.GBP),
        (826, Currency.GBP),
        (b"GBP\x00", Currency.GBP),
        ([71, 66, 80], Currency.GBP),
        ("??", Currency.XXX),
        (12345, Currency.XXX),
        (b"\xff\xff\xff", Currency.XXX),
    ],
)
def test_from_transport(value, expected: Currency) -> None:
    assert from_transport(value) is expected


def test_transport_round_trip_for_every_currency() -> None:
    for currency in Currency:
        assert from_transport(to_transport(currency)) is currency
        assert from_transport(to_transport(currency, numeric=True)) is currency


@pytest.mark.parametrize("value", [True, None, 840.0, {"code": "USD"}])
def test_from_transport_rejects_unsupported_types(value) -> None:
    with pytest.raises(TypeError):
        from_transport(value)
