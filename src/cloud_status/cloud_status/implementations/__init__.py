# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the scheduler and status source interfaces

"""
Implementations

Concrete implementations of the cloud_status interfaces.
"""

from .aio import AsyncioTimerScheduler
from .memory import InMemoryStatusStore, ManualTimer, ManualTimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
    "InMemoryStatusStore",
    "ManualTimer",
    "ManualTimerScheduler",
]
