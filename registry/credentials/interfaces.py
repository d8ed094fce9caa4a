"""Credential oracle interface.

The registry never verifies ownership itself; it asks an oracle.
"""

from abc import ABC, abstractmethod

from registry.domain import Address


class CredentialOracleUnavailableError(Exception):
    """Raised when the oracle cannot answer. Distinct from an ineligible caller."""


class CredentialOracle(ABC):
    """Interface for credential ownership lookups."""

    @abstractmethod
    def balance_of(self, collection: Address, principal: Address) -> int:
        """Return how many tokens of `collection` `principal` holds.

        Raises:
            CredentialOracleUnavailableError: If the lookup could not be completed.
        """
        ...
