from __future__ import annotations

import logging

import pytest

from iso_currency.domain.monetary import currency as currency_module
from iso_currency.domain.monetary import currency_registry
from iso_currency.domain.monetary.currency import Currency
from iso_currency.domain.monetary.currency_category import CurrencyCategory


def test_functional_api_matches_enum_methods() -> None:
    assert currency_registry.default_currency() is Currency.XXX
    assert currency_registry.currency_name(Currency.EUR) == "Euro"
    assert currency_registry.to_alpha(Currency.EUR) == "EUR"
    assert currency_registry.to_numeric(Currency.EUR) == 978
    assert currency_registry.to_fixed_bytes(Currency.EUR) == b"EUR\x00"
    assert currency_registry.display(Currency.EUR) == '"EUR"'
    assert currency_registry.from_alpha("eur") is Currency.EUR
    assert currency_registry.from_bytes(b"EUR") is Currency.EUR
    assert currency_registry.from_numeric(978) is Currency.EUR


def test_lookup_tables_cover_every_currency() -> None:
    assert len(currency_registry.CURRENCIES_BY_ALPHA_CODE) == len(Currency)
    assert len(currency_registry.CURRENCIES_BY_NUMERIC_CODE) == len(Currency)
    assert currency_registry.CURRENCIES_BY_ALPHA_CODE["USD"] is Currency.USD
    assert currency_registry.CURRENCIES_BY_NUMERIC_CODE[840] is Currency.USD


def test_lookup_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        currency_registry.CURRENCIES_BY_ALPHA_CODE["ZZZ"] = Currency.XXX  # type: ignore[index]
    with pytest.raises(TypeError):
        del currency_registry.CURRENCIES_BY_NUMERIC_CODE[840]  # type: ignore[attr-defined]


def test_lookup_tables_are_shared_with_currency_module() -> None:
    assert currency_registry.CURRENCIES_BY_ALPHA_CODE is currency_module.CURRENCIES_BY_ALPHA_CODE
    assert currency_registry.CURRENCIES_BY_NUMERIC_CODE is currency_module.CURRENCIES_BY_NUMERIC_CODE


def test_all_currencies_is_sorted_by_alpha_code() -> None:
    currencies = currency_registry.all_currencies()
    alpha_codes = [currency.alpha_code for currency in currencies]
    assert alpha_codes == sorted(alpha_codes)
    assert set(currencies) == set(Currency)
    # CNY is declared among the R entries, but sorting puts it with the C codes
    assert alpha_codes.index("CNY") < alpha_codes.index("COP")


def test_currencies_in_category() -> None:
    metals = currency_registry.currencies_in_category(CurrencyCategory.PRECIOUS_METAL)
    assert metals == (Currency.XAG, Currency.XAU, Currency.XPD, Currency.XPT)

    funds = currency_registry.currencies_in_category(CurrencyCategory.FUNDS)
    assert Currency.BOV in funds
    assert Currency.CLF in funds
    assert Currency.USD not in funds

    with pytest.raises(TypeError):
        currency_registry.currencies_in_category("FUNDS")  # type: ignore[arg-type]


def test_fallback_is_logged_at_debug_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="iso_currency.domain.monetary.currency"):
        assert currency_registry.from_alpha("ZZZ") is Currency.XXX

    assert any("ZZZ" in record.getMessage() and record.levelno == logging.DEBUG for record in caplog.records)


def test_successful_parse_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="iso_currency.domain.monetary.currency"):
        assert currency_registry.from_alpha("USD") is Currency.USD

    assert caplog.records == []
