"""Tests for reading and writing the persisted activation record."""
from datetime import datetime, timedelta, timezone

from bundlbe.models import ActivationRecord
from bundlbe.services.activation_record import (
    is_record_fresh,
    load_activation_record,
    reset_activation,
    save_logged_out,
    save_verified_activation,
)

from tests.conftest import NOW


def test_empty_store_is_never_verified(store, settings):
    record = load_activation_record(store, settings)
    assert record == ActivationRecord(last_verified_at=None, paywall_suppressed=False)


def test_save_then_load(store, settings):
    save_verified_activation(store, settings, NOW, True)

    record = load_activation_record(store, settings)

    assert record.last_verified_at == NOW
    assert record.paywall_suppressed is True
    assert store.get_key("BundlBe_LastVerified") == "2026-03-01T12:00:00+00:00"


def test_unreadable_timestamp_counts_as_absent(store, settings):
    store.set_key(settings.last_verified_key, "yesterday-ish")
    store.set_key(settings.paywall_suppress_key, True)

    record = load_activation_record(store, settings)

    assert record.last_verified_at is None
    assert record.paywall_suppressed is True


def test_naive_timestamp_is_read_as_utc(store, settings):
    store.set_key(settings.last_verified_key, "2026-03-01T11:00:00")

    record = load_activation_record(store, settings)

    assert record.last_verified_at == datetime(2026, 3, 1, 11, 0, tzinfo=timezone.utc)


def test_reset_clears_timestamp_and_flag(store, settings):
    save_verified_activation(store, settings, NOW, True)

    reset_activation(store, settings)

    record = load_activation_record(store, settings)
    assert record.last_verified_at is None
    assert record.paywall_suppressed is False


def test_logged_out_keeps_flag_without_timestamp(store, settings):
    save_verified_activation(store, settings, NOW, False)

    save_logged_out(store, settings, True)

    record = load_activation_record(store, settings)
    assert record.last_verified_at is None
    assert record.paywall_suppressed is True


class TestFreshness:
    def test_absent_is_stale(self):
        assert is_record_fresh(ActivationRecord(None, True), NOW, 24) is False

    def test_recent_is_fresh(self):
        record = ActivationRecord(NOW - timedelta(hours=23, minutes=59, seconds=59), True)
        assert is_record_fresh(record, NOW, 24) is True

    def test_boundary_is_stale(self):
        assert is_record_fresh(ActivationRecord(NOW - timedelta(hours=24), True), NOW, 24) is False

    def test_custom_ttl(self):
        assert is_record_fresh(ActivationRecord(NOW - timedelta(hours=2), True), NOW, 1) is False
