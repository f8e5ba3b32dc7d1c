#!/usr/bin/env python3
"""
Example: Deposits, withdrawals and a cross-currency transfer

Wires an Account to the in-memory repository, a rate-table converter and the
notifier selected by MYBANK_* configuration.
"""

from decimal import Decimal

from mybank.accounts import Account
from mybank.config import get_config
from mybank.currency import Currency, ExchangeRate, RateTableConverter
from mybank.logging_config import setup_logging_from_config
from mybank.notifications import create_notification_service
from mybank.storage import InMemoryTransactionRepository


def main():
    config = get_config()
    setup_logging_from_config(config)

    converter = RateTableConverter()
    converter.set_rate(ExchangeRate(Currency.EUR, Currency.RON, Decimal("4.97")))
    notifier = create_notification_service(config)

    ron_repository = InMemoryTransactionRepository()
    eur_repository = InMemoryTransactionRepository()

    ron_account = Account(ron_repository, converter, notifier, config.currency, Decimal("1000"))
    eur_account = Account(eur_repository, converter, notifier, Currency.EUR, Decimal("500"))

    ron_account.deposit(Decimal("500"))
    ron_account.withdraw(Decimal("200"))
    ron_account.deposit(Decimal("100"))
    print(f"RON balance after deposits/withdrawal: {ron_account.get_balance()}")

    eur_account.deposit(Decimal("12000"))  # large deposit alert
    eur_account.transfer_to(ron_account, Decimal("100"))

    for account in (ron_account, eur_account):
        print(f"\n{account.currency} account {account.account_id}: {account.get_balance()}")
        for transaction in account.get_transaction_history():
            print(f"  {transaction.timestamp:%Y-%m-%d %H:%M:%S}  {transaction.amount:>10} "
                  f"{transaction.currency}  {transaction.description}")


if __name__ == "__main__":
    main()
