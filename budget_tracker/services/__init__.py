"""Services package."""

from budget_tracker.services.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    PersistenceAdapter,
    PersistenceReadError,
    PersistenceWarning,
    PersistenceWriteError,
    StorageError,
)

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "PersistenceAdapter",
    "PersistenceReadError",
    "PersistenceWarning",
    "PersistenceWriteError",
    "StorageError",
]
