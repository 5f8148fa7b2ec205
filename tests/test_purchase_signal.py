"""Tests for purchase signal sources."""
from types import SimpleNamespace

from bundlbe.services.purchase_signal import (
    PurchaseSignal,
    StaticPurchaseSignal,
    TransactionHistorySignal,
    TransactionState,
)


def _tx(state):
    return SimpleNamespace(state=state)


def test_static_signal():
    assert StaticPurchaseSignal(True).has_active_purchase() is True
    assert StaticPurchaseSignal(False).has_active_purchase() is False
    assert isinstance(StaticPurchaseSignal(True), PurchaseSignal)


def test_purchased_or_restored_is_active():
    assert TransactionHistorySignal(lambda: [_tx(TransactionState.PURCHASED)]).has_active_purchase() is True
    assert TransactionHistorySignal(lambda: [_tx("RESTORED")]).has_active_purchase() is True


def test_other_states_are_inactive():
    history = [_tx(TransactionState.FAILED), _tx(TransactionState.PURCHASING), _tx("DEFERRED"), _tx("bogus"), object()]
    assert TransactionHistorySignal(lambda: history).has_active_purchase() is False


def test_empty_history():
    assert TransactionHistorySignal(list).has_active_purchase() is False


def test_history_is_read_on_every_call():
    queue = []
    signal = TransactionHistorySignal(lambda: queue)

    assert signal.has_active_purchase() is False
    queue.append(_tx(TransactionState.RESTORED))
    assert signal.has_active_purchase() is True
