"""Custom exceptions for key-value store operations."""


class InvalidStoreBackendError(Exception):
    """Raised when an invalid store backend is provided."""
    
    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Invalid store backend: {backend}. Supported backends: MEMORY, JSON_FILE")


class MissingStorePathError(Exception):
    """Raised when a file-backed store is requested without a path."""
    
    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Store backend {backend} requires a file path")
