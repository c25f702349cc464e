# ABOUTME: In-memory status source implementations
# ABOUTME: Exports the subscribable connection status store

from .source import InMemoryStatusStore

__all__ = [
    "InMemoryStatusStore",
]
