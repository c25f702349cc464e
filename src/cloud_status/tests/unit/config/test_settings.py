# ABOUTME: Unit tests for CoreSettings composition and the settings singleton
# ABOUTME: Tests inheritance and lru_cache-backed instance sharing

import pytest
from pydantic import ValidationError

from cloud_status.config._base import BaseCoreSettings
from cloud_status.config.settings import CoreSettings, get_settings
from cloud_status.exceptions import ConfigurationException


class TestCoreSettings:
    """Test suite for CoreSettings class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_coresettings_is_instance_of_basecoresettings(self):
        settings = CoreSettings()
        assert isinstance(settings, BaseCoreSettings)

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_returns_singleton(self):
        assert get_settings() is get_settings()

    @pytest.mark.unit
    @pytest.mark.config
    def test_cache_clear_picks_up_environment(self, monkeypatch):
        monkeypatch.setenv("LOCALE", "en")
        first = get_settings()

        monkeypatch.setenv("LOCALE", "zh")
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().LOCALE == "zh"

    @pytest.mark.unit
    @pytest.mark.config
    def test_invalid_environment_raises_configuration_exception(self, monkeypatch):
        monkeypatch.setenv("LOCALE", "xx")

        with pytest.raises(ConfigurationException) as exc_info:
            get_settings()

        assert exc_info.value.code == "INVALID_SETTINGS"
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.details["errors"][0]["field"] == "LOCALE"
        assert "Unsupported locale 'xx'" in exc_info.value.details["errors"][0]["message"]
