"""Paywall gate backed by the activation backend with a 24 hour local cache."""

import asyncio
from datetime import datetime, timezone
from typing import Callable, Optional, Set
import structlog

from bundlbe.config import Settings, settings as default_settings
from bundlbe.models import ActivationResponse, DuplicateResponse
from bundlbe.services.activation_record import (
    is_record_fresh,
    load_activation_record,
    reset_activation,
    save_logged_out,
    save_verified_activation,
    to_utc,
)
from bundlbe.services.api_client import BundlBeAPIClient
from bundlbe.services.key_value_store import BaseKeyValueStore, create_store
from bundlbe.services.purchase_signal import PurchaseSignal

logger = structlog.get_logger()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ActivationGate:
    """
    Decides whether the paywall should be suppressed for this device.

    A successful ``/login`` is trusted for ``settings.verification_ttl_hours``;
    within that window ``login`` answers from the store without touching the
    network. After every successful ``/login`` the backend is told, in the
    background, whether the user also holds a platform subscription.

    Overlapping calls are not serialized: the stored record is last-writer-wins.
    """

    def __init__(
        self,
        store: BaseKeyValueStore,
        purchase_signal: PurchaseSignal,
        api_client: Optional[BundlBeAPIClient] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utc_now
    ):
        """
        Initialize the gate.

        Args:
            store: Where the activation record is persisted
            purchase_signal: Source of the "has active or restored purchase" flag
            api_client: Backend client, built from settings when omitted
            settings: Client settings, defaults to the global settings
            clock: Returns the current time; naive readings are taken as local time
        """
        self.settings = settings or default_settings
        self.store = store
        self.purchase_signal = purchase_signal
        self.api_client = api_client or BundlBeAPIClient(self.settings)
        self._clock = clock
        self._pending_notifications: Set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, purchase_signal: PurchaseSignal, settings: Optional[Settings] = None) -> "ActivationGate":
        """Build a gate whose store is chosen by ``settings.store_backend``."""
        settings = settings or default_settings
        store = create_store(settings.store_backend, settings.store_path)

        logger.info(
            "Created activation gate",
            store_backend=settings.store_backend,
            store_path=settings.store_path,
            api_base_url=settings.api_base_url
        )
        return cls(store=store, purchase_signal=purchase_signal, settings=settings)

    async def login(self, code: str, app_id: str, device_id: str) -> ActivationResponse:
        """
        Log in with a subscription activation code.

        - If the last verification is missing or at least 24h old, sends
          ``/login`` to the backend.
        - Otherwise returns the cached suppression flag immediately.

        On success the verification time and suppression flag are saved and a
        duplicate notification is scheduled as a background task. On failure
        the record is reset (no timestamp, suppression off) and the error is
        re-raised.

        The notification outlives this call. Callers that close the event loop
        right after login (e.g. ``asyncio.run(gate.login(...))``) must
        ``await gate.wait_for_pending_notifications()`` first, otherwise the
        notification is cancelled.

        Args:
            code: User activation code
            app_id: Application identifier
            device_id: Device identifier

        Returns:
            The backend response, or the cached flag with no error

        Raises:
            BundlBeException: Any request error from the backend client
        """
        now = to_utc(self._clock())
        record = load_activation_record(self.store, self.settings)

        if is_record_fresh(record, now, self.settings.verification_ttl_hours):
            logger.debug(
                "Using cached activation",
                function="login",
                last_verified_at=record.last_verified_at.isoformat(),
                paywall_suppressed=record.paywall_suppressed
            )
            return ActivationResponse(paywall_suppress=record.paywall_suppressed, error=None)

        logger.info("Verifying activation with backend", function="login", app_id=app_id, device_id=device_id)

        try:
            response = await self.api_client.login(code, app_id, device_id)
        except Exception as e:
            logger.warning("Activation failed", function="login", app_id=app_id, error=str(e))
            reset_activation(self.store, self.settings)
            raise

        save_verified_activation(self.store, self.settings, now, response.paywall_suppress)
        self._schedule_duplicate_notification(code, app_id)

        return response

    async def logout(self, code: str, app_id: str, device_id: str) -> ActivationResponse:
        """
        Log out and force the paywall back on.

        Always calls ``/logout``. On success the backend's suppression flag is
        stored and the verification timestamp cleared, but the returned
        response always carries ``paywall_suppress=False`` (the backend's
        ``error`` is kept). On failure the record is left untouched.

        Returns:
            The backend response with suppression forced off
        """
        logger.info("Logging out", function="logout", app_id=app_id, device_id=device_id)

        response = await self.api_client.logout(code, app_id, device_id)
        save_logged_out(self.store, self.settings, response.paywall_suppress)

        return ActivationResponse(paywall_suppress=False, error=response.error)

    def is_paywall_suppressed(self) -> bool:
        """
        Current suppression flag from the store.

        Freshness is not checked; call ``login`` first when it matters.

        Returns:
            True if the paywall should be hidden, False otherwise
        """
        return load_activation_record(self.store, self.settings).paywall_suppressed

    async def wait_for_pending_notifications(self) -> None:
        """Wait until every scheduled duplicate notification has finished."""
        while self._pending_notifications:
            tasks = list(self._pending_notifications)
            await asyncio.gather(*tasks, return_exceptions=True)
            self._pending_notifications.difference_update(tasks)

    async def notify_duplicate(self, code: str, app_id: str, present: bool) -> DuplicateResponse:
        """
        Report the platform subscription state to ``/subscription-duplicate``.

        Args:
            code: User activation code
            app_id: Application identifier
            present: Whether the user holds an active or restored platform purchase

        Returns:
            The backend response (POST when present, DELETE otherwise)

        Raises:
            BundlBeException: Any request error from the backend client
        """
        if present:
            return await self.api_client.post_duplicate(code, app_id)
        return await self.api_client.delete_duplicate(code, app_id)

    def _schedule_duplicate_notification(self, code: str, app_id: str) -> None:
        task = asyncio.create_task(self._report_duplicate(code, app_id))
        self._pending_notifications.add(task)
        task.add_done_callback(self._pending_notifications.discard)

    async def _report_duplicate(self, code: str, app_id: str) -> None:
        """Background body of the duplicate notification. Errors are logged and swallowed, cancellation is logged and re-raised."""
        action = "PostDuplicate"
        try:
            present = self.purchase_signal.has_active_purchase()
            if not present:
                action = "DeleteDuplicate"
            response = await self.notify_duplicate(code, app_id, present)
        except asyncio.CancelledError:
            logger.warning(f"{action} cancelled", function="_report_duplicate", app_id=app_id)
            raise
        except Exception as e:
            logger.warning(f"{action} error", function="_report_duplicate", app_id=app_id, error=str(e))
            return

        logger.info(
            f"{action} success",
            function="_report_duplicate",
            app_id=app_id,
            success=response.success or False,
            error=response.error
        )
