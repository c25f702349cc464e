# ABOUTME: Main configuration composition for the application.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from pydantic import ValidationError

from cloud_status.exceptions import ConfigurationException

from ._base import BaseCoreSettings


class CoreSettings(BaseCoreSettings):
    """Represents the complete, composed configuration for the application.

    This class acts as the final aggregator for all configuration settings.
    It inherits from `BaseCoreSettings` and is the place to mix in further
    settings classes should the indicator grow new configurable concerns.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> CoreSettings:
    """Provides a singleton instance of the application settings.

    The `lru_cache` guarantees environment variables and `.env` are read
    once, so every caller sees the same configuration.

    Returns:
        A single, cached instance of the Settings class.

    Raises:
        ConfigurationException: If the environment holds invalid values.
    """
    try:
        return CoreSettings()
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        summary = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
        raise ConfigurationException(
            f"Invalid settings: {summary}",
            code="INVALID_SETTINGS",
            details={"errors": errors},
        ) from e
