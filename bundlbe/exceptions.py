"""Exceptions raised by the BundlBe client."""

from typing import Any, Dict, Optional


class BundlBeException(Exception):
    """Base exception carrying an error code and a human-readable message."""
    
    def __init__(self, error_code: str, error_message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.error_message = error_message
        self.details = details or {}
        super().__init__(error_message)


class ConfigurationError(BundlBeException):
    """Raised when the backend endpoint URL is malformed."""
    
    def __init__(self, url: str):
        self.url = url
        super().__init__(
            error_code="BUNDLBE_001",
            error_message=f"Invalid URL: {url}",
            details={"url": url}
        )


class NetworkError(BundlBeException):
    """Raised when the request could not be delivered (DNS, connect, timeout)."""
    
    def __init__(self, error_message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            error_code="BUNDLBE_002",
            error_message=f"Network error: {error_message}",
            details=details
        )


class ResponseError(BundlBeException):
    """Raised when the server response is missing or malformed at the HTTP level."""
    
    def __init__(self, error_message: str = "Invalid response from server", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            error_code="BUNDLBE_003",
            error_message=error_message,
            details=details
        )


class ServerError(BundlBeException):
    """
    Raised when the backend answers with a status code outside 200-299.
    
    When the error body is the structured ``{paywall_suppress, error}`` payload,
    ``paywall_suppress`` and ``message`` come from it. Otherwise
    ``paywall_suppress`` is None and ``message`` holds the raw body text.
    """
    
    def __init__(self, status_code: int, message: Optional[str] = None, paywall_suppress: Optional[bool] = None):
        self.status_code = status_code
        self.message = message
        self.paywall_suppress = paywall_suppress
        super().__init__(
            error_code="BUNDLBE_004",
            error_message=f"Status code: {status_code}, message: {message or 'Unknown error'}",
            details={"status_code": status_code, "paywall_suppress": paywall_suppress}
        )


class DecodeError(BundlBeException):
    """Raised when a 2xx body does not match the expected schema."""
    
    def __init__(self, error_message: str, raw: str = ""):
        self.raw = raw
        super().__init__(
            error_code="BUNDLBE_005",
            error_message=f"Decoding failed: {error_message}",
            details={"raw": raw}
        )
