__version__ = "0.1.0"

from iso_currency.domain.monetary.currency import Currency
from iso_currency.domain.monetary.currency_category import CurrencyCategory
from iso_currency.domain.monetary import currency_registry

__all__ = ["Currency", "CurrencyCategory", "currency_registry"]
