"""Base interface for key-value store implementations."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import threading


class BaseKeyValueStore(ABC):
    """Abstract base class for key-value stores."""
    
    def __init__(self):
        self._lock = threading.RLock()
    
    @abstractmethod
    def get_key(self, key: str) -> Optional[Any]:
        """
        Get a value from the store by key.
        
        Args:
            key: The key to look up
            
        Returns:
            The value associated with the key, or None if not found
        """
        pass
    
    @abstractmethod
    def set_key(self, key: str, val: Any) -> None:
        """
        Set a key-value pair in the store.
        
        Args:
            key: The key to store
            val: The value to store (must be JSON-serializable for file backends)
        """
        pass
    
    @abstractmethod
    def invalidate_key(self, key: str) -> None:
        """
        Remove a key from the store. Missing keys are ignored.
        
        Args:
            key: The key to remove
        """
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """Remove all entries from the store."""
        pass
    
    @abstractmethod
    def size(self) -> int:
        """
        Get the current number of keys in the store.
        
        Returns:
            The number of keys currently in the store
        """
        pass
