"""
Transaction Storage Module

Abstract transaction repository and the in-memory implementation used for
testing and embedding.
"""

from abc import ABC, abstractmethod
from typing import List
import threading

from .transactions import Transaction


class TransactionRepository(ABC):
    """Abstract interface for transaction stores"""

    @abstractmethod
    def save_transaction(self, transaction: Transaction) -> None:
        """Persist a transaction"""
        pass

    @abstractmethod
    def get_transaction_history(self) -> List[Transaction]:
        """Return stored transactions in insertion order"""
        pass


class InMemoryTransactionRepository(TransactionRepository):
    """In-memory transaction store"""

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._lock = threading.RLock()

    def save_transaction(self, transaction: Transaction) -> None:
        with self._lock:
            self._transactions.append(transaction)

    def get_transaction_history(self) -> List[Transaction]:
        # Copy so callers can't mutate the stored history
        with self._lock:
            return list(self._transactions)

    def clear(self) -> None:
        """Remove all stored transactions"""
        with self._lock:
            self._transactions = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
