# ABOUTME: Core exception classes for the cloud status package
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CloudStatusException(Exception):
    """Base exception class for the cloud status package.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package should inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize CloudStatusException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(CloudStatusException):
    """Exception raised for invalid arguments.

    Used when a caller hands a supporting component a value it cannot
    work with, such as a negative timer delay.
    """

    pass


class ConfigurationException(CloudStatusException):
    """Exception raised for configuration errors.

    Used when system configuration is invalid or missing, such as:
    - Unsupported locale
    - Invalid logging configuration
    - Environment setup issues
    """

    pass


class LifecycleException(CloudStatusException):
    """Exception raised when a component is used outside its lifecycle.

    Used for mount/unmount misuse, such as reading the indicator before it
    was mounted or mounting it twice.
    """

    pass
