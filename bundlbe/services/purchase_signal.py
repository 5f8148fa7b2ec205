"""Sources for the "user already holds a platform subscription" signal."""

from enum import Enum
from typing import Any, Callable, Iterable, Protocol, runtime_checkable


class TransactionState(str, Enum):
    """States of a platform in-app purchase transaction."""

    PURCHASING = "PURCHASING"
    PURCHASED = "PURCHASED"
    FAILED = "FAILED"
    RESTORED = "RESTORED"
    DEFERRED = "DEFERRED"


ACTIVE_TRANSACTION_STATES = {TransactionState.PURCHASED, TransactionState.RESTORED}


@runtime_checkable
class PurchaseSignal(Protocol):
    """Anything that can tell whether the user has an active or restored purchase."""

    def has_active_purchase(self) -> bool:
        ...


class StaticPurchaseSignal:
    """Fixed answer, for hosts that already know the subscription state."""

    def __init__(self, value: bool):
        self.value = value

    def has_active_purchase(self) -> bool:
        return self.value


class TransactionHistorySignal:
    """
    Derive the signal from the platform's transaction history.

    ``transactions_provider`` is called on every read, so the answer always
    reflects the current queue. Each transaction must expose a ``state``
    attribute holding a ``TransactionState`` or its string value.
    """

    def __init__(self, transactions_provider: Callable[[], Iterable[Any]]):
        self._transactions_provider = transactions_provider

    def has_active_purchase(self) -> bool:
        for transaction in self._transactions_provider():
            state = getattr(transaction, "state", None)
            try:
                state = TransactionState(state)
            except ValueError:
                continue
            if state in ACTIVE_TRANSACTION_STATES:
                return True
        return False
