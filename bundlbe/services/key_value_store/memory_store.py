"""In-memory key-value store."""

from typing import Any, Dict, Optional
from bundlbe.services.key_value_store.base import BaseKeyValueStore


class InMemoryStore(BaseKeyValueStore):
    """Thread-safe dict-backed store. Contents are lost when the process exits."""
    
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._data: Dict[str, Any] = dict(initial or {})
    
    def get_key(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)
    
    def set_key(self, key: str, val: Any) -> None:
        with self._lock:
            self._data[key] = val
    
    def invalidate_key(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)
    
    def clear(self) -> None:
        with self._lock:
            self._data.clear()
    
    def size(self) -> int:
        with self._lock:
            return len(self._data)
