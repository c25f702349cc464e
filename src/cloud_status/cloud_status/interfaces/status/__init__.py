# ABOUTME: Status interfaces package
# ABOUTME: Exports the status source contract and collaborator callables

from .source import AbstractStatusSource, RefreshTrigger, StatusHandler

__all__ = [
    "AbstractStatusSource",
    "RefreshTrigger",
    "StatusHandler",
]
