# ABOUTME: In-memory timer implementations
# ABOUTME: Exports the virtual-clock scheduler

from .scheduler import ManualTimer, ManualTimerScheduler

__all__ = [
    "ManualTimer",
    "ManualTimerScheduler",
]
