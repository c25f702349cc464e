# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the cloud status package

from cloud_status.config.settings import CoreSettings, get_settings
from cloud_status.config.logging import (
    LoggerConfig,
    logger_config_from_settings,
    setup_logging,
    get_logger,
    configure_for_testing,
)

__all__ = [
    "CoreSettings",
    "get_settings",
    "LoggerConfig",
    "logger_config_from_settings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
]
