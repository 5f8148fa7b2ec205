"""Persistence helpers for the locally cached activation state."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import structlog

from bundlbe.config import Settings
from bundlbe.models import ActivationRecord
from bundlbe.services.key_value_store import BaseKeyValueStore

logger = structlog.get_logger()


def _parse_timestamp(raw: Any) -> Optional[datetime]:
    """Decode a stored timestamp; anything unreadable counts as never verified."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        parsed = raw
    else:
        try:
            parsed = datetime.fromisoformat(str(raw))
        except ValueError:
            logger.warning(
                "Ignoring unreadable last verified timestamp",
                function="_parse_timestamp",
                raw=str(raw)
            )
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_utc(value: datetime) -> datetime:
    """
    Convert a clock reading to aware UTC.

    Naive values are taken as local time, which is what ``datetime.now()`` returns.
    """
    return value.astimezone(timezone.utc)


def load_activation_record(store: BaseKeyValueStore, settings: Settings) -> ActivationRecord:
    """
    Read the activation record from the store.

    Absent keys yield ``last_verified_at=None`` and ``paywall_suppressed=False``.
    """
    return ActivationRecord(
        last_verified_at=_parse_timestamp(store.get_key(settings.last_verified_key)),
        paywall_suppressed=bool(store.get_key(settings.paywall_suppress_key))
    )


def is_record_fresh(record: ActivationRecord, now: datetime, ttl_hours: int) -> bool:
    """
    Check whether the record can be trusted without asking the backend.

    Args:
        record: The persisted activation record
        now: Current time; naive values are read as local time
        ttl_hours: How long a verification stays valid

    Returns:
        True if ``last_verified_at`` is set and less than ``ttl_hours`` old
    """
    if record.last_verified_at is None:
        return False
    return to_utc(now) - record.last_verified_at < timedelta(hours=ttl_hours)


def save_verified_activation(
    store: BaseKeyValueStore,
    settings: Settings,
    verified_at: datetime,
    paywall_suppressed: bool
) -> None:
    """Persist a successful /login result."""
    verified_at = to_utc(verified_at)
    store.set_key(settings.last_verified_key, verified_at.isoformat())
    store.set_key(settings.paywall_suppress_key, paywall_suppressed)

    logger.info(
        "Saved verified activation",
        verified_at=verified_at.isoformat(),
        paywall_suppressed=paywall_suppressed
    )


def reset_activation(store: BaseKeyValueStore, settings: Settings) -> None:
    """
    Drop cached trust after a failed /login.

    The next login call will always reach the backend.
    """
    store.invalidate_key(settings.last_verified_key)
    store.set_key(settings.paywall_suppress_key, False)

    logger.info("Reset activation record")


def save_logged_out(store: BaseKeyValueStore, settings: Settings, paywall_suppressed: bool) -> None:
    """
    Persist a successful /logout result.

    The backend's suppress value is stored as-is while the timestamp is
    cleared, so the stored flag is no longer backed by a verification.
    """
    store.set_key(settings.paywall_suppress_key, paywall_suppressed)
    store.invalidate_key(settings.last_verified_key)

    logger.info("Saved logged out state", paywall_suppressed=paywall_suppressed)
