# ABOUTME: Cloud connection indicator lifecycle wiring
# ABOUTME: Mounts a StatusDebouncer on a status source and tears it down cleanly

from __future__ import annotations

from typing import Optional

from loguru import logger

from cloud_status.components.connection.debouncer import StatusDebouncer
from cloud_status.config.settings import get_settings
from cloud_status.exceptions import LifecycleException
from cloud_status.interfaces.status import AbstractStatusSource, RefreshTrigger
from cloud_status.interfaces.timer import AbstractTimerScheduler
from cloud_status.models.connection.display import StatusDisplay


class CloudConnectionIndicator:
    """
    Embeddable cloud connection indicator.

    `mount()` reads the source's current status, creates the debouncer and
    subscribes it to further changes. `unmount()` unsubscribes and cancels
    any pending reveal. The instance can be mounted again after unmounting,
    which starts from fresh state.

    Example:
        with CloudConnectionIndicator(store, scheduler, refresh_applets) as indicator:
            if indicator.should_display():
                render(indicator.current_display())
    """

    def __init__(
        self,
        source: AbstractStatusSource,
        scheduler: AbstractTimerScheduler,
        refresh: RefreshTrigger,
        *,
        locale: str | None = None,
    ):
        """
        Initialize the indicator without mounting it.

        Args:
            source: Subscribable raw status source
            scheduler: Timer facility shared with the source's delivery thread
            refresh: Trigger for the dependent resource refresh
            locale: Label locale; defaults to the configured LOCALE setting
        """
        self._source = source
        self._scheduler = scheduler
        self._refresh = refresh
        self._locale = locale if locale is not None else get_settings().LOCALE
        self._debouncer: Optional[StatusDebouncer] = None
        self._subscription_id: Optional[str] = None

    @property
    def mounted(self) -> bool:
        return self._debouncer is not None

    @property
    def debouncer(self) -> StatusDebouncer:
        """The mounted debouncer."""
        if self._debouncer is None:
            raise LifecycleException("Indicator is not mounted", code="NOT_MOUNTED")
        return self._debouncer

    def mount(self) -> None:
        if self._debouncer is not None:
            raise LifecycleException("Indicator is already mounted", code="ALREADY_MOUNTED")

        initial_status = self._source.latest_status()
        self._debouncer = StatusDebouncer(
            initial_status,
            latest_status=self._source.latest_status,
            scheduler=self._scheduler,
            refresh=self._refresh,
            locale=self._locale,
        )
        self._subscription_id = self._source.subscribe(self._debouncer.on_status_changed)
        logger.debug(f"Cloud connection indicator mounted with status {initial_status}")

    def unmount(self) -> None:
        """Unsubscribe and cancel any pending reveal. No-op when not mounted."""
        if self._debouncer is None:
            return

        if self._subscription_id is not None:
            self._source.unsubscribe(self._subscription_id)
            self._subscription_id = None
        self._debouncer.close()
        self._debouncer = None
        logger.debug("Cloud connection indicator unmounted")

    def should_display(self) -> bool:
        return self.debouncer.should_display()

    def current_display(self) -> StatusDisplay:
        return self.debouncer.current_display()

    def __enter__(self) -> CloudConnectionIndicator:
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()
