# ABOUTME: Abstract timer scheduler interface for cancellable delayed callbacks
# ABOUTME: Defines the clock and arm/cancel primitives a host environment provides

from abc import ABC, abstractmethod
from typing import Any, Callable

TimerCallback = Callable[[], None]  # Type alias for a zero-argument timer callback.
TimerHandle = Any  # Opaque token returned by schedule(); only meaningful to the issuing scheduler.


class AbstractTimerScheduler(ABC):
    """
    [L0] Abstract interface for a single-threaded timer facility.

    A scheduler owns a clock and can arm callbacks to run after a delay on
    the same event queue that delivers status changes. Callbacks never run
    concurrently with each other or with the code that scheduled them.

    Architecture note: This is a [L0] interface with no dependencies on other
    cloud_status modules; implementations may wrap an asyncio loop, a GUI
    toolkit's timers, or a virtual clock.
    """

    @abstractmethod
    def now_ms(self) -> float:
        """
        Return the current reading of the scheduler's clock in milliseconds.

        The clock is monotonic and shares its timebase with `schedule`
        delays; its origin is implementation-defined.
        """
        pass

    @abstractmethod
    def schedule(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        """
        Arm a callback to run once after `delay_ms` milliseconds.

        Args:
            delay_ms: Delay before the callback fires. Zero fires on the next turn.
            callback: Zero-argument callable invoked when the timer expires.

        Returns:
            TimerHandle: Token to pass to `cancel`.

        Raises:
            ValidationException: If `delay_ms` is negative.
        """
        pass

    @abstractmethod
    def cancel(self, handle: TimerHandle) -> None:
        """
        Cancel a previously scheduled timer.

        Idempotent: cancelling a timer that already fired or was already
        cancelled does nothing. After this returns the callback will not run.
        """
        pass
