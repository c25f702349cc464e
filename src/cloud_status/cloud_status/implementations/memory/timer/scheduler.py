# ABOUTME: Virtual-clock implementation of AbstractTimerScheduler
# ABOUTME: Fires timers deterministically when the owner advances time

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Tuple

from loguru import logger

from cloud_status.exceptions import ValidationException
from cloud_status.interfaces.timer import AbstractTimerScheduler, TimerCallback, TimerHandle


@dataclass(eq=False)
class ManualTimer:
    """Timer handle issued by ManualTimerScheduler."""

    timer_id: int
    due_ms: float
    callback: TimerCallback
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualTimerScheduler(AbstractTimerScheduler):
    """
    In-memory scheduler driven by an explicit virtual clock.

    Time only moves when `advance` or `advance_to` is called. Due timers
    fire in deadline order (ties in scheduling order) and the clock reads
    each timer's deadline while its callback runs, so callbacks observe the
    same time a real event loop would give them. Callbacks may schedule or
    cancel further timers; anything that becomes due within the advanced
    window fires in the same call.

    Useful for tests, simulations, and hosts that pump their own event queue.
    """

    def __init__(self, start_ms: float = 0.0):
        """
        Initialize the scheduler.

        Args:
            start_ms: Initial clock reading in milliseconds
        """
        self._now_ms = float(start_ms)
        self._queue: List[Tuple[float, int, ManualTimer]] = []
        self._ids = itertools.count(1)

    def now_ms(self) -> float:
        return self._now_ms

    def schedule(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        if delay_ms < 0:
            raise ValidationException(
                "Timer delay must be non-negative",
                code="NEGATIVE_DELAY",
                details={"delay_ms": delay_ms},
            )

        timer = ManualTimer(timer_id=next(self._ids), due_ms=self._now_ms + delay_ms, callback=callback)
        heapq.heappush(self._queue, (timer.due_ms, timer.timer_id, timer))
        logger.trace(f"Scheduled manual timer {timer.timer_id} due at {timer.due_ms}ms")
        return timer

    def cancel(self, handle: TimerHandle) -> None:
        if isinstance(handle, ManualTimer) and handle.active:
            handle.cancelled = True
            logger.trace(f"Cancelled manual timer {handle.timer_id}")

    @property
    def pending_count(self) -> int:
        """Number of timers that are armed and have neither fired nor been cancelled."""
        return sum(1 for _, _, timer in self._queue if timer.active)

    def advance(self, delta_ms: float) -> int:
        """
        Move the clock forward and fire every timer that becomes due.

        Args:
            delta_ms: Milliseconds to advance; must be non-negative

        Returns:
            The number of callbacks fired.
        """
        if delta_ms < 0:
            raise ValidationException(
                "Cannot move the clock backwards",
                code="NEGATIVE_ADVANCE",
                details={"delta_ms": delta_ms},
            )
        return self.advance_to(self._now_ms + delta_ms)

    def advance_to(self, target_ms: float) -> int:
        """
        Move the clock to an absolute reading, firing due timers on the way.

        Returns:
            The number of callbacks fired.
        """
        if target_ms < self._now_ms:
            raise ValidationException(
                "Cannot move the clock backwards",
                code="NEGATIVE_ADVANCE",
                details={"now_ms": self._now_ms, "target_ms": target_ms},
            )

        fired = 0
        while self._queue and self._queue[0][0] <= target_ms:
            _, _, timer = heapq.heappop(self._queue)
            if not timer.active:
                continue
            self._now_ms = timer.due_ms
            timer.fired = True
            fired += 1
            timer.callback()

        self._now_ms = target_ms
        return fired

    def run_all(self) -> int:
        """
        Fire every pending timer, advancing the clock to the last deadline.

        Returns:
            The number of callbacks fired.
        """
        fired = 0
        while self.pending_count:
            next_due = min(timer.due_ms for _, _, timer in self._queue if timer.active)
            fired += self.advance_to(next_due)
        return fired
