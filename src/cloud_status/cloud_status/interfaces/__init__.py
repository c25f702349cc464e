# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract contracts for timers and the status source

# Status interfaces
from .status import AbstractStatusSource, RefreshTrigger, StatusHandler

# Timer interfaces
from .timer import AbstractTimerScheduler, TimerCallback, TimerHandle

__all__ = [
    # Status
    "AbstractStatusSource",
    "RefreshTrigger",
    "StatusHandler",
    # Timer
    "AbstractTimerScheduler",
    "TimerCallback",
    "TimerHandle",
]
