# ABOUTME: Components package exports
# ABOUTME: Stateful building blocks assembled from models and interfaces

from .connection import CloudConnectionIndicator, DISCONNECTION_DELAY_MS, StatusDebouncer

__all__ = [
    "CloudConnectionIndicator",
    "DISCONNECTION_DELAY_MS",
    "StatusDebouncer",
]
