# ABOUTME: Debounce state machine deciding what connection status to display
# ABOUTME: Hides short disconnection blips while surfacing recovery immediately

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Final

from loguru import logger

from cloud_status.interfaces.status import RefreshTrigger
from cloud_status.interfaces.timer import AbstractTimerScheduler
from cloud_status.models.connection.display import StatusDisplay, build_status_display
from cloud_status.models.connection.enum import ConnectionStatus
from cloud_status.models.connection.state import DebouncerState

DISCONNECTION_DELAY_MS: Final[int] = 5000

# Statuses whose arrival triggers a refresh of the dependent resource list.
REFRESH_STATUSES: Final[tuple[ConnectionStatus, ...]] = (ConnectionStatus.CONNECTED, ConnectionStatus.DISCONNECTED)


class StatusDebouncer:
    """
    Decides whether, and as what, the cloud connection indicator is shown.

    Leaving CONNECTED is only revealed once the connection has stayed away
    from CONNECTED for DISCONNECTION_DELAY_MS, measured from the first
    status that left it. Returning to CONNECTED hides the indicator at once
    and cancels any pending reveal. When the reveal timer fires it re-reads
    the live status instead of trusting the one captured when it was armed,
    so a recovery that happened in between is never overridden.

    All calls must come from the thread or event loop that runs the
    scheduler's callbacks.
    """

    def __init__(
        self,
        initial_status: ConnectionStatus,
        *,
        latest_status: Callable[[], ConnectionStatus],
        scheduler: AbstractTimerScheduler,
        refresh: RefreshTrigger,
        locale: str | None = None,
    ) -> None:
        """
        Initialize the debouncer at mount time.

        Args:
            initial_status: Raw status observed at mount
            latest_status: Accessor for the freshest raw status
            scheduler: Clock and timer facility
            refresh: Trigger for the dependent resource refresh
            locale: Locale for the display label
        """
        self._latest_status = latest_status
        self._scheduler = scheduler
        self._refresh = refresh
        self._locale = locale
        self._closed = False
        self._state = DebouncerState(displayed_status=initial_status)

        # Mounting while already disconnected starts the clock now; it is not a transition.
        if initial_status != ConnectionStatus.CONNECTED:
            self._state.disconnected_since = self._scheduler.now_ms()
            self._arm_reveal(DISCONNECTION_DELAY_MS)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def on_status_changed(self, new_status: ConnectionStatus) -> None:
        """
        Apply a newly observed raw status.

        Args:
            new_status: The status just reported by the source
        """
        if self._closed:
            logger.warning(f"Ignoring status {new_status} delivered to a closed debouncer")
            return

        logger.debug(f"Cloud connection status: {new_status}")
        self._cancel_pending()

        if new_status == ConnectionStatus.CONNECTED:
            self._state.disconnected_since = None
            self._state.displayed_status = ConnectionStatus.CONNECTED
            self._state.is_hidden = True
        else:
            now = self._scheduler.now_ms()
            if self._state.disconnected_since is None:
                self._state.disconnected_since = now

            elapsed = now - self._state.disconnected_since
            if elapsed >= DISCONNECTION_DELAY_MS:
                self._reveal(new_status)
            else:
                self._arm_reveal(DISCONNECTION_DELAY_MS - elapsed)

        if new_status in REFRESH_STATUSES:
            self._refresh()

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    def should_display(self) -> bool:
        return not self._state.is_hidden

    def current_display(self) -> StatusDisplay:
        """Rendering-ready projection of the displayed status."""
        return build_status_display(self._state.displayed_status, self._locale)

    @property
    def state(self) -> DebouncerState:
        """A copy of the internal state; mutating it has no effect."""
        return replace(self._state)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Cancel any pending reveal and stop accepting updates. Idempotent."""
        self._cancel_pending()
        self._closed = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cancel_pending(self) -> None:
        if self._state.pending_timer is not None:
            self._scheduler.cancel(self._state.pending_timer)
            self._state.pending_timer = None

    def _arm_reveal(self, delay_ms: float) -> None:
        self._cancel_pending()
        self._state.pending_timer = self._scheduler.schedule(delay_ms, self._on_reveal_timer)
        logger.debug(f"Reveal of cloud connection status deferred by {delay_ms:.0f}ms")

    def _on_reveal_timer(self) -> None:
        self._state.pending_timer = None
        if self._closed:
            return

        live_status = self._latest_status()
        if live_status == ConnectionStatus.CONNECTED:
            logger.debug("Reveal timer fired after recovery; keeping indicator hidden")
            return
        self._reveal(live_status)

    def _reveal(self, status: ConnectionStatus) -> None:
        self._state.displayed_status = status
        self._state.is_hidden = False
        logger.info(f"Showing cloud connection status: {status}")

    def __repr__(self) -> str:
        return (
            f"StatusDebouncer(displayed_status={self._state.displayed_status}, "
            f"is_hidden={self._state.is_hidden}, closed={self._closed})"
        )
