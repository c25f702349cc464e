# ABOUTME: Connection models package
# ABOUTME: Exports the status enum, display projection and debouncer state

from .enum import ConnectionStatus
from .display import StatusDisplay, build_status_display, coerce_status
from .state import DebouncerState

__all__ = [
    "ConnectionStatus",
    "StatusDisplay",
    "build_status_display",
    "coerce_status",
    "DebouncerState",
]
