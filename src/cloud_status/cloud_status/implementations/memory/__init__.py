# ABOUTME: In-memory implementations package
# ABOUTME: Zero-infrastructure implementations for tests and self-driven hosts

from .status.source import InMemoryStatusStore
from .timer.scheduler import ManualTimer, ManualTimerScheduler

__all__ = [
    "InMemoryStatusStore",
    "ManualTimer",
    "ManualTimerScheduler",
]
