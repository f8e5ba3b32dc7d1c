"""
Tests for transaction records
"""

import dataclasses
import pytest
from decimal import Decimal
from datetime import timezone

from mybank.currency import Currency
from mybank.transactions import Transaction


class TestTransaction:
    """Test Transaction value type"""

    def test_generated_fields(self):
        """Test id and UTC timestamp are generated"""
        transaction = Transaction(Decimal("100.50"), Currency.RON, "Deposit to account abc")

        assert transaction.amount == Decimal("100.50")
        assert transaction.currency == Currency.RON
        assert transaction.description == "Deposit to account abc"
        assert transaction.id
        assert transaction.timestamp.tzinfo == timezone.utc

    def test_ids_are_unique(self):
        ids = {Transaction(Decimal("1"), Currency.EUR, "x").id for _ in range(50)}
        assert len(ids) == 50

    def test_immutable(self):
        transaction = Transaction(Decimal("1"), Currency.EUR, "x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            transaction.amount = Decimal("2")

    def test_amount_coerced_to_decimal(self):
        assert Transaction("12.30", Currency.USD, "x").amount == Decimal("12.30")
        assert Transaction(7, Currency.USD, "x").amount == Decimal("7")

    def test_to_dict(self):
        transaction = Transaction(Decimal("99.99"), Currency.GBP, "Withdrawal from account a1")

        data = transaction.to_dict()

        assert data == {
            "id": transaction.id,
            "timestamp": transaction.timestamp.isoformat(),
            "amount": "99.99",
            "currency": "GBP",
            "description": "Withdrawal from account a1",
        }
