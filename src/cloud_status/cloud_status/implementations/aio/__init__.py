# ABOUTME: asyncio implementations package
# ABOUTME: Contains implementations that run on an asyncio event loop

from .timer.scheduler import AsyncioTimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
]
