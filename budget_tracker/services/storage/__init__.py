"""
Storage Services Package

Provides the abstract key-value capability, concrete stores and the
persistence adapter that maps ledger state onto them.
"""

from budget_tracker.services.storage.interface import (
    KeyValueStore,
    PersistenceReadError,
    PersistenceWarning,
    PersistenceWriteError,
    StorageError,
)
from budget_tracker.services.storage.json_file import JsonFileKeyValueStore
from budget_tracker.services.storage.memory import InMemoryKeyValueStore
from budget_tracker.services.storage.persistence import PersistenceAdapter

__all__ = [
    # Interfaces
    "KeyValueStore",
    # Exceptions
    "PersistenceReadError",
    "PersistenceWarning",
    "PersistenceWriteError",
    "StorageError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "PersistenceAdapter",
]
