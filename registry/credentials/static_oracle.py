"""In-memory credential oracle backed by a holdings table."""

import threading
from collections.abc import Mapping

from registry.credentials.interfaces import CredentialOracle
from registry.domain import Address


class StaticCredentialOracle(CredentialOracle):
    """Oracle answering from a local `(collection, principal) -> balance` table."""

    def __init__(self, holdings: Mapping[tuple[Address, Address], int] | None = None) -> None:
        self._lock = threading.Lock()
        self._holdings: dict[tuple[Address, Address], int] = {}
        for (collection, principal), balance in (holdings or {}).items():
            self.set_balance(collection, principal, balance)

    def balance_of(self, collection: Address, principal: Address) -> int:
        with self._lock:
            return self._holdings.get((collection, principal), 0)

    def set_balance(self, collection: Address, principal: Address, balance: int) -> None:
        if balance < 0:
            raise ValueError("Balance cannot be negative")
        with self._lock:
            self._holdings[(collection, principal)] = balance

    def mint(self, collection: Address, principal: Address, amount: int = 1) -> None:
        if amount < 1:
            raise ValueError("Mint amount must be positive")
        with self._lock:
            self._holdings[(collection, principal)] = self._holdings.get((collection, principal), 0) + amount
