# ABOUTME: Models package initialization
# ABOUTME: Exports all data models and related classes

from .connection import (
    ConnectionStatus,
    StatusDisplay,
    build_status_display,
    coerce_status,
    DebouncerState,
)

__all__ = [
    "ConnectionStatus",
    "StatusDisplay",
    "build_status_display",
    "coerce_status",
    "DebouncerState",
]
