# ABOUTME: In-memory implementation of AbstractStatusSource
# ABOUTME: Holds the raw connection status and notifies subscribers on change

import uuid
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Dict

from loguru import logger

from cloud_status.interfaces.status import AbstractStatusSource, StatusHandler
from cloud_status.models.connection.enum import ConnectionStatus


@dataclass
class Subscription:
    """Internal subscription data structure."""

    id: str
    handler: StatusHandler


class InMemoryStatusStore(AbstractStatusSource):
    """
    In-memory connection status store.

    Stands in for the application-wide store the WebSocket manager writes
    to. Subscribers are notified synchronously, in subscription order, and
    only when the value actually changes; writing the current value again
    is a no-op.

    Handler exceptions propagate to the `set_status` caller. Subscribers
    that come after the failing one are not notified for that change.
    """

    def __init__(self, initial_status: ConnectionStatus = ConnectionStatus.DISCONNECTED):
        self._status = initial_status
        self._updated_at = datetime.now(UTC)
        self._subscriptions: Dict[str, Subscription] = {}

    @property
    def updated_at(self) -> datetime:
        """When the status last changed (or the store was created), in UTC."""
        return self._updated_at

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def latest_status(self) -> ConnectionStatus:
        return self._status

    def set_status(self, status: ConnectionStatus) -> bool:
        """
        Record a new raw status.

        Args:
            status: The status reported by the connection layer

        Returns:
            True if the value changed and subscribers were notified.
        """
        if status == self._status:
            return False

        previous = self._status
        self._status = status
        self._updated_at = datetime.now(UTC)
        logger.debug(f"Connection status changed: {previous} -> {status}")

        # Snapshot so handlers may (un)subscribe while being notified
        for subscription in list(self._subscriptions.values()):
            subscription.handler(status)
        return True

    def subscribe(self, handler: StatusHandler) -> str:
        if not callable(handler):
            raise ValueError("handler must be callable")

        subscription_id = str(uuid.uuid4())
        self._subscriptions[subscription_id] = Subscription(id=subscription_id, handler=handler)
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        return self._subscriptions.pop(subscription_id, None) is not None
