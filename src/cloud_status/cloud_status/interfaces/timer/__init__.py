# ABOUTME: Timer interfaces package
# ABOUTME: Exports the scheduler contract and its type aliases

from .scheduler import AbstractTimerScheduler, TimerCallback, TimerHandle

__all__ = [
    "AbstractTimerScheduler",
    "TimerCallback",
    "TimerHandle",
]
