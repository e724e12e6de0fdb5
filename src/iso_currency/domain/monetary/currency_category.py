from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class CurrencyCategory(Enum):
    """Kind of unit an ISO 4217 entry represents.

    Members:
        CURRENCY: Circulating national or regional currency.
        FUNDS: Funds code, a valuation unit rather than a circulating currency (e.g. BOV, CLF).
        PRECIOUS_METAL: One troy ounce of a precious metal (e.g. XAU).
        BOND_MARKET_UNIT: European bond market unit of account (XBA..XBD).
        SPECIAL: Supranational units, testing and "no currency" codes (e.g. XDR, XTS, XXX).
    """

    CURRENCY = "CURRENCY"
    FUNDS = "FUNDS"
    PRECIOUS_METAL = "PRECIOUS_METAL"
    BOND_MARKET_UNIT = "BOND_MARKET_UNIT"
    SPECIAL = "SPECIAL"


# Keyed by alpha code; every code missing here is a CURRENCY
_CATEGORY_BY_ALPHA_CODE = MappingProxyType(
    {
        # Funds codes
        "BOV": CurrencyCategory.FUNDS,
        "CHE": CurrencyCategory.FUNDS,
        "CHW": CurrencyCategory.FUNDS,
        "CLF": CurrencyCategory.FUNDS,
        "COU": CurrencyCategory.FUNDS,
        "MXV": CurrencyCategory.FUNDS,
        "USN": CurrencyCategory.FUNDS,
        "UYI": CurrencyCategory.FUNDS,
        # Precious metals
        "XAG": CurrencyCategory.PRECIOUS_METAL,
        "XAU": CurrencyCategory.PRECIOUS_METAL,
        "XPD": CurrencyCategory.PRECIOUS_METAL,
        "XPT": CurrencyCategory.PRECIOUS_METAL,
        # Bond market units
        "XBA": CurrencyCategory.BOND_MARKET_UNIT,
        "XBB": CurrencyCategory.BOND_MARKET_UNIT,
        "XBC": CurrencyCategory.BOND_MARKET_UNIT,
        "XBD": CurrencyCategory.BOND_MARKET_UNIT,
        # Special codes
        "XDR": CurrencyCategory.SPECIAL,
        "XSU": CurrencyCategory.SPECIAL,
        "XTS": CurrencyCategory.SPECIAL,
        "XUA": CurrencyCategory.SPECIAL,
        "XXX": CurrencyCategory.SPECIAL,
    },
)


def category_for_alpha_code(alpha_code: str) -> CurrencyCategory:
    """Return the category of the entry with $alpha_code.

    Args:
        alpha_code (str): Uppercase 3-letter ISO 4217 code.

    Returns:
        CurrencyCategory: The category; CURRENCY for every code without a special classification.
    """
    return _CATEGORY_BY_ALPHA_CODE.get(alpha_code, CurrencyCategory.CURRENCY)
