# ABOUTME: Exceptions package exports
# ABOUTME: Exports the cloud status exception hierarchy

from cloud_status.exceptions.base import (
    CloudStatusException,
    ValidationException,
    ConfigurationException,
    LifecycleException,
)

__all__ = [
    "CloudStatusException",
    "ValidationException",
    "ConfigurationException",
    "LifecycleException",
]
