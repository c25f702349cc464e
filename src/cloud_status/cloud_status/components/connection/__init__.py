# ABOUTME: Connection components package
# ABOUTME: Exports the status debouncer and the indicator lifecycle wrapper

from .debouncer import DISCONNECTION_DELAY_MS, REFRESH_STATUSES, StatusDebouncer
from .indicator import CloudConnectionIndicator

__all__ = [
    "DISCONNECTION_DELAY_MS",
    "REFRESH_STATUSES",
    "StatusDebouncer",
    "CloudConnectionIndicator",
]
