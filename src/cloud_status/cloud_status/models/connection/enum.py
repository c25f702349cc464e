# ABOUTME: Connection status enumeration consumed by the indicator
# ABOUTME: Mirrors the four states reported by the upstream status source

from enum import Enum


class ConnectionStatus(str, Enum):
    """
    Enumeration of cloud connection status states.

    These states are reported by the upstream status source. Only
    ``CONNECTED`` is treated as healthy; every other state counts as
    being away from the connected state.

    Attributes:
        CONNECTED (str): The connection is active and ready for use.
        CONNECTING (str): The connection is currently being established.
        ERROR (str): The connection failed and the source is retrying.
        DISCONNECTED (str): The connection has been lost or closed.
    """

    CONNECTED = "connected"
    CONNECTING = "connecting"
    ERROR = "error"
    DISCONNECTED = "disconnected"
