# ABOUTME: Loguru configuration for the cloud status package
# ABOUTME: Derives console, file and structured handlers from the package settings

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import BaseModel

from cloud_status.config._base import BaseCoreSettings
from cloud_status.config.settings import get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    app_name: str = "CloudStatus"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "{extra[app]} | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/cloud-status.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    file_compression: str = "gz"

    # Structured (JSON lines) output
    structured_enabled: bool = False
    structured_level: str = "DEBUG"
    structured_path: Union[str, Path] = "logs/cloud-status-structured.jsonl"

    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


def logger_config_from_settings(settings: BaseCoreSettings) -> LoggerConfig:
    """
    Translate application settings into a logger configuration.

    ``DEBUG`` forces the DEBUG level and enables variable diagnosis,
    ``ENV=production`` turns off colors and extended backtraces, and
    ``LOG_FORMAT=json`` adds the structured JSON lines handler.

    Args:
        settings: Loaded application settings

    Returns:
        The matching LoggerConfig
    """
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    production = settings.ENV == "production"
    return LoggerConfig(
        app_name=settings.APP_NAME,
        console_level=level,
        console_colorize=not production,
        console_backtrace=not production,
        console_diagnose=settings.DEBUG,
        file_level=level,
        structured_enabled=settings.LOG_FORMAT == "json",
        structured_level=level,
    )


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Args:
        config: Logger configuration. If None, it is derived from get_settings().
    """
    if config is None:
        config = logger_config_from_settings(get_settings())

    # Remove default handler
    logger.remove()
    logger.configure(extra={"app": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.structured_enabled:
        structured_path = Path(config.structured_path)
        structured_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.structured_path,
            level=config.structured_level,
            format="{message}",
            serialize=True,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(extra={"app": "CloudStatus"})
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )
