# ABOUTME: Mutable state record owned by a single status debouncer
# ABOUTME: Holds the displayed status, visibility, first-disconnect time and pending timer

from dataclasses import dataclass
from typing import Optional

from cloud_status.interfaces.timer import TimerHandle
from cloud_status.models.connection.enum import ConnectionStatus


@dataclass
class DebouncerState:
    """
    Internal state of a StatusDebouncer.

    Attributes:
        displayed_status: The status currently authorized for display.
        is_hidden: Whether the indicator should be suppressed entirely.
        disconnected_since: Scheduler clock reading (ms) when the raw status
            last left CONNECTED; None while connected.
        pending_timer: Handle of the single outstanding reveal timer, if any.
    """

    displayed_status: ConnectionStatus
    is_hidden: bool = True
    disconnected_since: Optional[float] = None
    pending_timer: Optional[TimerHandle] = None
