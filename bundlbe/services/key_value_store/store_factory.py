"""Factory for creating key-value store instances based on backend."""

from typing import Optional, Union
from bundlbe.services.key_value_store.store_backend import StoreBackend
from bundlbe.services.key_value_store.memory_store import InMemoryStore
from bundlbe.services.key_value_store.json_file_store import JsonFileStore
from bundlbe.services.key_value_store.base import BaseKeyValueStore
from bundlbe.services.key_value_store.exceptions import (
    InvalidStoreBackendError,
    MissingStorePathError
)


def create_store(
    backend: Union[StoreBackend, str],
    path: Optional[str] = None
) -> BaseKeyValueStore:
    """
    Create a store instance for the specified backend.
    
    Args:
        backend: The backend to use (MEMORY or JSON_FILE)
        path: File path, required for JSON_FILE
        
    Returns:
        A store implementing the BaseKeyValueStore interface
        
    Raises:
        InvalidStoreBackendError: If the backend is not supported
        MissingStorePathError: If JSON_FILE is requested without a path
    """
    # Normalize backend
    if isinstance(backend, str) and not isinstance(backend, StoreBackend):
        try:
            backend = StoreBackend(backend.upper())
        except ValueError:
            raise InvalidStoreBackendError(backend)
    
    if backend == StoreBackend.MEMORY:
        return InMemoryStore()
    elif backend == StoreBackend.JSON_FILE:
        if not path:
            raise MissingStorePathError(backend.value)
        return JsonFileStore(path)
    else:
        raise InvalidStoreBackendError(str(backend))
