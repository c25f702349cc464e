# ABOUTME: asyncio event-loop implementation of AbstractTimerScheduler
# ABOUTME: Arms timers with loop.call_later and reads the loop's monotonic clock

import asyncio
from typing import Optional, Set

from loguru import logger

from cloud_status.exceptions import ValidationException
from cloud_status.interfaces.timer import AbstractTimerScheduler, TimerCallback, TimerHandle


class AsyncioTimerScheduler(AbstractTimerScheduler):
    """
    Timer scheduler backed by an asyncio event loop.

    Callbacks run on the loop thread, interleaved with whatever else the loop
    dispatches (status changes included), so no locking is required as long
    as every caller stays on that loop.

    The scheduler remembers the handles it issued so `close()` can cancel
    anything still outstanding at shutdown.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Initialize the scheduler.

        Args:
            loop: Event loop to use. Defaults to the running loop at call time.
        """
        self._loop = loop
        self._handles: Set[asyncio.TimerHandle] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop if self._loop is not None else asyncio.get_running_loop()

    def now_ms(self) -> float:
        return self.loop.time() * 1000.0

    def schedule(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        if delay_ms < 0:
            raise ValidationException(
                "Timer delay must be non-negative",
                code="NEGATIVE_DELAY",
                details={"delay_ms": delay_ms},
            )

        handle: asyncio.TimerHandle

        def _fire() -> None:
            self._handles.discard(handle)
            callback()

        handle = self.loop.call_later(delay_ms / 1000.0, _fire)
        self._handles.add(handle)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        if handle is None:
            return
        handle.cancel()
        self._handles.discard(handle)

    @property
    def pending_count(self) -> int:
        """Number of timers issued by this scheduler that have not fired or been cancelled."""
        return len(self._handles)

    def close(self) -> None:
        """Cancel every outstanding timer issued by this scheduler."""
        if self._handles:
            logger.debug(f"Cancelling {len(self._handles)} outstanding timer(s)")
        for handle in list(self._handles):
            handle.cancel()
        self._handles.clear()
