"""
Account Module

The Account domain object: balance tracking, deposits, withdrawals and
transfers with optional currency conversion. Storage, rate lookup and
large-transaction alerts are delegated to injected collaborators.

An Account is not thread-safe; callers must serialize access to it.
"""

from decimal import Decimal
from typing import List, Optional
import logging
import uuid

from .currency import Currency, CurrencyConverter, Numeric, to_decimal
from .exceptions import InvalidArgumentError, MissingArgumentError, InsufficientFundsError
from .logging_config import log_action
from .notifications import NotificationService
from .storage import TransactionRepository
from .transactions import Transaction

logger = logging.getLogger("mybank.accounts")

# Inclusive: an amount equal to the threshold triggers an alert
LARGE_TRANSACTION_THRESHOLD = Decimal("10000")


class Account:
    """
    Bank account holding a single-currency Decimal balance

    Every successful operation records exactly one Transaction per affected
    account. Validation runs before any mutation, so a rejected call leaves
    balance, history and notifications untouched.
    """

    def __init__(
        self,
        repository: TransactionRepository,
        currency_converter: CurrencyConverter,
        notification_service: NotificationService,
        currency: Currency = Currency.RON,
        initial_balance: Numeric = Decimal("0")
    ):
        """
        Create an account

        Args:
            repository: Transaction store
            currency_converter: Used only for cross-currency transfers
            notification_service: Receives large-transaction alerts
            currency: Account currency
            initial_balance: Opening balance, must not be negative

        Raises:
            InvalidArgumentError: If initial_balance is negative
        """
        try:
            initial_balance = to_decimal(initial_balance)
        except ValueError:
            raise InvalidArgumentError(f"Invalid initial balance {initial_balance!r}", "initial_balance") from None
        if initial_balance < 0:
            raise InvalidArgumentError("Initial balance cannot be negative", "initial_balance")

        self._account_id = str(uuid.uuid4())
        self._currency = currency
        self._balance = initial_balance

        self._repository = repository
        self._currency_converter = currency_converter
        self._notification_service = notification_service

        if initial_balance > 0:
            self._record(initial_balance, f"Initial deposit to account {self._account_id}")

        log_action(
            logger, "info", f"Opened account {self._account_id} with {initial_balance} {currency.code}",
            account_id=self._account_id, action="open", resource="account",
            extra={"currency": currency.code, "initial_balance": str(initial_balance)}
        )

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def currency(self) -> Currency:
        return self._currency

    def get_balance(self) -> Decimal:
        """Current balance in the account currency"""
        return self._balance

    def deposit(self, amount: Numeric) -> None:
        """
        Credit the account

        Raises:
            InvalidArgumentError: If amount is not positive
        """
        amount = self._validate_amount(amount, "Deposit amount must be positive")

        self._balance += amount
        self._record(amount, f"Deposit to account {self._account_id}")
        self._log_operation("deposit", amount)

        if amount >= LARGE_TRANSACTION_THRESHOLD:
            self._alert(f"Large deposit of {amount} {self._currency.code} received")

    def withdraw(self, amount: Numeric) -> None:
        """
        Debit the account

        Raises:
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        amount = self._validate_amount(amount, "Withdrawal amount must be positive")
        self._ensure_funds(amount)

        self._balance -= amount
        self._record(amount, f"Withdrawal from account {self._account_id}")
        self._log_operation("withdraw", amount)

        if amount >= LARGE_TRANSACTION_THRESHOLD:
            self._alert(f"Large withdrawal of {amount} {self._currency.code} processed")

    def transfer_to(self, target: Optional['Account'], amount: Numeric) -> None:
        """
        Move funds to another account, converting when currencies differ

        The sender is debited, recorded and alerted before the target is
        credited. The sender's alert uses the pre-conversion amount, the
        receiver's alert uses the converted amount.

        Raises:
            MissingArgumentError: If target is None
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        if target is None:
            raise MissingArgumentError("target", "Transfer target account is required")

        amount = self._validate_amount(amount, "Transfer amount must be positive")
        self._ensure_funds(amount)

        # Convert before debiting so a converter error leaves both balances intact
        converted_amount = amount
        if self._currency != target.currency:
            converted_amount = to_decimal(
                self._currency_converter.convert(amount, self._currency, target.currency)
            )

        self._balance -= amount

        self._record(
            amount,
            f"Transfer out from account {self._account_id} to account {target.account_id}"
        )
        self._log_operation(
            "transfer_out", amount,
            target_account_id=target.account_id,
            converted_amount=str(converted_amount),
            target_currency=target.currency.code
        )

        if amount >= LARGE_TRANSACTION_THRESHOLD:
            self._alert(
                f"Large transfer of {amount} {self._currency.code} sent to account {target.account_id}"
            )

        target._receive_transfer(converted_amount, self._account_id)

    def _receive_transfer(self, amount: Decimal, from_account_id: str) -> None:
        self._balance += amount
        self._record(
            amount,
            f"Transfer in to account {self._account_id} from account {from_account_id}"
        )
        self._log_operation("transfer_in", amount, source_account_id=from_account_id)

        if amount >= LARGE_TRANSACTION_THRESHOLD:
            self._alert(
                f"Large transfer of {amount} {self._currency.code} received from account {from_account_id}"
            )

    def get_transaction_history(self) -> List[Transaction]:
        """Transactions as returned by the repository, unmodified"""
        return self._repository.get_transaction_history()

    def _validate_amount(self, amount: Numeric, message: str) -> Decimal:
        try:
            amount = to_decimal(amount)
        except ValueError:
            raise InvalidArgumentError(f"Invalid amount {amount!r}", "amount") from None

        if amount <= 0:
            log_action(
                logger, "warning", f"Rejected non-positive amount {amount}",
                account_id=self._account_id, action="validate", resource="account"
            )
            raise InvalidArgumentError(message, "amount")
        return amount

    def _ensure_funds(self, amount: Decimal) -> None:
        if amount > self._balance:
            log_action(
                logger, "warning",
                f"Insufficient funds: balance {self._balance}, requested {amount}",
                account_id=self._account_id, action="validate", resource="account"
            )
            raise InsufficientFundsError(self._balance, amount)

    def _record(self, amount: Decimal, description: str) -> None:
        self._repository.save_transaction(Transaction(amount, self._currency, description))

    def _alert(self, message: str) -> None:
        log_action(
            logger, "info", message,
            account_id=self._account_id, action="large_transaction_alert", resource="account"
        )
        self._notification_service.send_notification(self._account_id, message)

    def _log_operation(self, action: str, amount: Decimal, **extra) -> None:
        log_action(
            logger, "info", f"{action} of {amount} {self._currency.code}",
            account_id=self._account_id, action=action, resource="account",
            extra={"amount": str(amount), "balance": str(self._balance), **extra}
        )

    def __repr__(self) -> str:
        return f"Account(account_id={self._account_id!r}, balance={self._balance}, currency={self._currency.code})"
