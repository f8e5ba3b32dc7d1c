"""
Currency Support Module

ISO 4217 currency codes, Decimal coercion and the currency conversion
interface used for cross-currency transfers. NEVER uses float for monetary values.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Tuple, Union
from enum import Enum
import logging

from .exceptions import ExchangeRateNotFoundError

logger = logging.getLogger("mybank.currency")

# High precision for financial calculations
getcontext().prec = 28

Numeric = Union[Decimal, int, str, float]


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    RON = ("RON", 2)  # Romanian Leu
    EUR = ("EUR", 2)  # Euro
    USD = ("USD", 2)  # US Dollar
    GBP = ("GBP", 2)  # British Pound

    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its ISO code (case-insensitive)"""
        for currency in cls:
            if currency.code == code.strip().upper():
                return currency
        raise ValueError(f"Unsupported currency code: {code!r}")

    def quantize(self, value: Decimal) -> Decimal:
        """Round a value to this currency's minor units"""
        return value.quantize(Decimal('0.1') ** self.precision, rounding=ROUND_HALF_UP)


def to_decimal(value: Numeric) -> Decimal:
    """
    Coerce a numeric value to Decimal

    Floats go through str() so 0.1 becomes Decimal('0.1') rather than its
    binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from None
    if not result.is_finite():
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    return result


@dataclass
class ExchangeRate:
    """Exchange rate for one direction of a currency pair"""
    from_currency: Currency
    to_currency: Currency
    rate: Decimal
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        self.rate = to_decimal(self.rate)
        if self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate}")


class CurrencyConverter(ABC):
    """Converts amounts between currencies"""

    @abstractmethod
    def convert(self, amount: Decimal, from_currency: Currency, to_currency: Currency) -> Decimal:
        """Return `amount` expressed in `to_currency`"""
        pass


class RateTableConverter(CurrencyConverter):
    """Converter backed by a table of explicitly registered rates"""

    def __init__(self):
        self._rates: Dict[Tuple[Currency, Currency], ExchangeRate] = {}

    def set_rate(self, rate: ExchangeRate) -> None:
        """Set exchange rate for currency pair, along with its inverse"""
        self._rates[(rate.from_currency, rate.to_currency)] = rate
        self._rates[(rate.to_currency, rate.from_currency)] = ExchangeRate(
            from_currency=rate.to_currency,
            to_currency=rate.from_currency,
            rate=Decimal('1') / rate.rate,
            timestamp=rate.timestamp
        )

    def get_rate(self, from_currency: Currency, to_currency: Currency) -> ExchangeRate:
        """
        Get exchange rate for currency pair

        Raises:
            ExchangeRateNotFoundError: If no rate is registered for the pair
        """
        if from_currency == to_currency:
            return ExchangeRate(from_currency, to_currency, Decimal('1'))

        rate = self._rates.get((from_currency, to_currency))
        if rate is None:
            raise ExchangeRateNotFoundError(
                f"No exchange rate available for {from_currency.code} -> {to_currency.code}"
            )
        return rate

    def convert(self, amount: Decimal, from_currency: Currency, to_currency: Currency) -> Decimal:
        amount = to_decimal(amount)
        if from_currency == to_currency:
            return amount

        rate = self.get_rate(from_currency, to_currency)
        converted = to_currency.quantize(amount * rate.rate)
        logger.debug(
            f"Converted {amount} {from_currency.code} to {converted} {to_currency.code} at {rate.rate}"
        )
        return converted

    def get_all_rates(self) -> Dict[Tuple[Currency, Currency], ExchangeRate]:
        """Get all current exchange rates"""
        return self._rates.copy()
