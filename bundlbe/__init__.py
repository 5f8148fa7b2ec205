"""BundlBe: subscription activation and paywall suppression for client apps."""

from bundlbe.logging_config import configure_logging
from bundlbe.exceptions import (
    BundlBeException,
    ConfigurationError,
    DecodeError,
    NetworkError,
    ResponseError,
    ServerError,
)
from bundlbe.models import ActivationRecord, ActivationResponse, DuplicateResponse
from bundlbe.services.activation_gate import ActivationGate
from bundlbe.services.api_client import BundlBeAPIClient
from bundlbe.services.key_value_store import (
    BaseKeyValueStore,
    InMemoryStore,
    JsonFileStore,
    StoreBackend,
    create_store,
)
from bundlbe.services.purchase_signal import (
    PurchaseSignal,
    StaticPurchaseSignal,
    TransactionHistorySignal,
    TransactionState,
)

__version__ = "1.0.0"

__all__ = [
    "ActivationGate",
    "ActivationRecord",
    "ActivationResponse",
    "BaseKeyValueStore",
    "BundlBeAPIClient",
    "BundlBeException",
    "ConfigurationError",
    "DecodeError",
    "DuplicateResponse",
    "InMemoryStore",
    "JsonFileStore",
    "NetworkError",
    "PurchaseSignal",
    "ResponseError",
    "ServerError",
    "StaticPurchaseSignal",
    "StoreBackend",
    "TransactionHistorySignal",
    "TransactionState",
    "configure_logging",
    "create_store",
]
