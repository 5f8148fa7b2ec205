"""Backend definitions for the key-value store."""

from enum import Enum


class StoreBackend(str, Enum):
    """Enumeration of supported store backends."""
    
    MEMORY = "MEMORY"  # Process lifetime only
    JSON_FILE = "JSON_FILE"  # Survives restarts
