# ABOUTME: Abstract interface for the subscribable connection status source
# ABOUTME: Defines the live accessor, change subscription and refresh trigger types

from abc import ABC, abstractmethod
from typing import Callable

from cloud_status.models.connection.enum import ConnectionStatus

StatusHandler = Callable[[ConnectionStatus], None]  # Receives each newly observed raw status.
RefreshTrigger = Callable[[], None]  # Side effect fired on transitions into CONNECTED or DISCONNECTED.


class AbstractStatusSource(ABC):
    """
    [L0] Abstract interface for the upstream connection status store.

    The source is the single source of truth for the raw connection status.
    Consumers read the freshest value synchronously and subscribe to be
    told about changes, in the order they happen.
    """

    @abstractmethod
    def latest_status(self) -> ConnectionStatus:
        """
        Return the freshest known raw status.

        Must be cheap and side-effect free; timer callbacks call it to
        re-check whether a pending reveal is still warranted.
        """
        pass

    @abstractmethod
    def subscribe(self, handler: StatusHandler) -> str:
        """
        Register a handler for status changes.

        Args:
            handler: Called synchronously with each new status.

        Returns:
            str: A unique identifier for the subscription.
        """
        pass

    @abstractmethod
    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Remove a subscription.

        Returns:
            bool: True if the subscription existed and was removed.
        """
        pass
