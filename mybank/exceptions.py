"""
Banking Errors

All errors raised by the account model derive from BankingError. Argument
errors also derive from ValueError so callers catching the builtin still work.
"""

from decimal import Decimal
from typing import Optional


class BankingError(Exception):
    """Base class for account model errors"""


class InvalidArgumentError(BankingError, ValueError):
    """An argument failed validation; `param_name` names the offender"""

    def __init__(self, message: str, param_name: str):
        super().__init__(f"{message} (parameter '{param_name}')")
        self.param_name = param_name


class MissingArgumentError(InvalidArgumentError):
    """A required argument was None"""

    def __init__(self, param_name: str, message: Optional[str] = None):
        super().__init__(message or "Value cannot be None", param_name)


class InsufficientFundsError(BankingError):
    """Debit amount exceeds the available balance"""

    def __init__(self, balance: Decimal, requested: Decimal):
        super().__init__(f"Insufficient funds: balance {balance}, requested {requested}")
        self.balance = balance
        self.requested = requested


class ExchangeRateNotFoundError(BankingError, LookupError):
    """No exchange rate registered for a currency pair"""


class NotificationDeliveryError(BankingError):
    """A notification could not be delivered"""
