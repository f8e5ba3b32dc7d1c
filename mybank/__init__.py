"""
MyBank

An in-memory bank account model with Decimal balances, transaction history,
currency conversion and large-transaction alerts.
"""

from .accounts import Account, LARGE_TRANSACTION_THRESHOLD
from .currency import Currency, CurrencyConverter, ExchangeRate, RateTableConverter
from .exceptions import (
    BankingError,
    InvalidArgumentError,
    MissingArgumentError,
    InsufficientFundsError,
    ExchangeRateNotFoundError,
    NotificationDeliveryError,
)
from .notifications import (
    NotificationService,
    LogNotificationService,
    InMemoryNotificationService,
    WebhookNotificationService,
    create_notification_service,
)
from .storage import TransactionRepository, InMemoryTransactionRepository
from .transactions import Transaction

__version__ = "1.0.0"
