# ABOUTME: asyncio timer implementations
# ABOUTME: Exports the event-loop backed scheduler

from .scheduler import AsyncioTimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
]
