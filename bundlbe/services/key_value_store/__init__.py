"""Key-value store used to persist activation state between app launches."""

from bundlbe.services.key_value_store.store_factory import create_store
from bundlbe.services.key_value_store.store_backend import StoreBackend
from bundlbe.services.key_value_store.base import BaseKeyValueStore
from bundlbe.services.key_value_store.memory_store import InMemoryStore
from bundlbe.services.key_value_store.json_file_store import JsonFileStore
from bundlbe.services.key_value_store.exceptions import (
    InvalidStoreBackendError,
    MissingStorePathError
)

__all__ = [
    "create_store",
    "StoreBackend",
    "BaseKeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    "InvalidStoreBackendError",
    "MissingStorePathError",
]
