"""JSON file backed key-value store."""

import json
import os
import tempfile
from typing import Any, Dict, Optional
import structlog

from bundlbe.services.key_value_store.base import BaseKeyValueStore

logger = structlog.get_logger()


class JsonFileStore(BaseKeyValueStore):
    """
    Key-value store persisted as a single JSON object on disk.
    
    The file is loaded once on construction and rewritten on every mutation
    through a temporary file and ``os.replace``, so a crash mid-write leaves
    the previous contents intact. A missing file is an empty store; a file
    that cannot be read or parsed is logged and treated as empty.
    """
    
    def __init__(self, path: str):
        """
        Initialize the store.
        
        Args:
            path: Location of the JSON file
        """
        super().__init__()
        self._path = path
        self._data: Dict[str, Any] = self._load()
    
    @property
    def path(self) -> str:
        """Get the backing file path."""
        return self._path
    
    def get_key(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)
    
    def set_key(self, key: str, val: Any) -> None:
        with self._lock:
            self._data[key] = val
            self._flush()
    
    def invalidate_key(self, key: str) -> None:
        with self._lock:
            if key not in self._data:
                return
            del self._data[key]
            self._flush()
    
    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._flush()
    
    def size(self) -> int:
        with self._lock:
            return len(self._data)
    
    def _load(self) -> Dict[str, Any]:
        """Read the backing file, returning an empty dict when absent or unreadable."""
        if not os.path.exists(self._path):
            return {}
        
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(
                "Failed to read key-value store file, starting empty",
                path=self._path,
                error=str(e)
            )
            return {}
        
        if not isinstance(data, dict):
            logger.warning(
                "Key-value store file does not hold a JSON object, starting empty",
                path=self._path,
                type=type(data).__name__
            )
            return {}
        
        return data
    
    def _flush(self) -> None:
        """Atomically write the current contents to disk."""
        directory = os.path.dirname(os.path.abspath(self._path))
        os.makedirs(directory, exist_ok=True)
        
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".bundlbe-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
