"""
Transaction Records

Immutable record of a single balance movement. Amounts are always positive;
the description carries the direction and the account ids involved.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
import uuid

from .currency import Currency, to_decimal


@dataclass(frozen=True)
class Transaction:
    """A recorded deposit, withdrawal or transfer leg"""
    amount: Decimal
    currency: Currency
    description: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', to_decimal(self.amount))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "amount": str(self.amount),
            "currency": self.currency.code,
            "description": self.description,
        }
