"""
Abstract Key-Value Storage Interface

DESIGN DECISION: The engine never talks to a concrete backend.
It receives a string-keyed get/set capability. This allows us to:
1. Run the whole engine in tests with a plain dict
2. Back the ledger with a JSON file, browser storage bridge, etc.
3. Keep the ledger logic decoupled from storage implementation

The interface is intentionally tiny - whole values are read and
overwritten, never patched.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract string-keyed store.

    Any storage backend must implement these two methods.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under key.

        Args:
            key: Storage key

        Returns:
            The stored text, or None if the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Overwrite the value stored under key.

        Args:
            key: Storage key
            value: Full serialized value

        Raises:
            Exception: Any backend failure; the persistence adapter
                       wraps it in PersistenceWriteError
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceReadError(StorageError):
    """
    Stored state is corrupt or unreadable.

    Recovered by falling back to empty defaults; never propagated
    out of the persistence adapter.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Could not read '{key}': {reason}")


class PersistenceWriteError(StorageError):
    """
    Store unavailable while writing.

    Non-fatal: the in-memory ledger stays valid, only durability is lost.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Could not write '{key}': {reason}")


class PersistenceWarning(UserWarning):
    """Warning category emitted when a mutation could not be persisted."""
    pass
