# ABOUTME: Unit tests for loguru logging configuration
# ABOUTME: Tests handler setup from config objects and from the application settings

import json

import pytest
from loguru import logger

from cloud_status.config._base import BaseCoreSettings
from cloud_status.config.logging import (
    LoggerConfig,
    configure_for_testing,
    get_logger,
    logger_config_from_settings,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    configure_for_testing()


class TestLoggerConfigFromSettings:
    """Test suite for deriving LoggerConfig from settings."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_defaults_write_no_files(self):
        config = logger_config_from_settings(BaseCoreSettings(_env_file=None, LOG_LEVEL="INFO", LOG_FORMAT="txt"))

        assert config.console_enabled is True
        assert config.console_level == "INFO"
        assert config.file_enabled is False
        assert config.structured_enabled is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_log_level_drives_every_handler(self):
        config = logger_config_from_settings(BaseCoreSettings(LOG_LEVEL="warning", DEBUG=False))

        assert config.console_level == "WARNING"
        assert config.file_level == "WARNING"
        assert config.structured_level == "WARNING"

    @pytest.mark.unit
    @pytest.mark.config
    def test_json_format_enables_structured_handler(self):
        config = logger_config_from_settings(BaseCoreSettings(LOG_FORMAT="structured"))
        assert config.structured_enabled is True

    @pytest.mark.unit
    @pytest.mark.config
    def test_debug_forces_debug_level(self):
        config = logger_config_from_settings(BaseCoreSettings(LOG_LEVEL="ERROR", DEBUG=True))

        assert config.console_level == "DEBUG"
        assert config.console_diagnose is True

    @pytest.mark.unit
    @pytest.mark.config
    def test_production_disables_colors(self):
        config = logger_config_from_settings(BaseCoreSettings(ENV="prod", DEBUG=False))

        assert config.console_colorize is False
        assert config.console_backtrace is False
        assert config.console_diagnose is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_app_name_is_carried(self):
        config = logger_config_from_settings(BaseCoreSettings(APP_NAME="Dashboard"))
        assert config.app_name == "Dashboard"


class TestSetupLogging:
    """Test suite for handler installation."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "cloud-status.log"
        structured_file = tmp_path / "logs" / "cloud-status.jsonl"
        setup_logging(
            LoggerConfig(
                console_enabled=False,
                file_enabled=True,
                file_path=log_file,
                structured_enabled=True,
                structured_path=structured_file,
            )
        )

        logger.info("indicator shown")
        logger.remove()

        assert "indicator shown" in log_file.read_text(encoding="utf-8")
        assert '"text": "indicator shown' in structured_file.read_text(encoding="utf-8")

    @pytest.mark.unit
    @pytest.mark.config
    def test_setup_logging_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APP_NAME", "Dashboard")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("DEBUG", "false")

        setup_logging()
        logger.info("filtered out")
        logger.warning("reconnect stalled")
        logger.remove()

        lines = (tmp_path / "logs" / "cloud-status-structured.jsonl").read_text(encoding="utf-8").splitlines()
        records = [json.loads(line)["record"] for line in lines]
        assert [record["message"] for record in records] == ["reconnect stalled"]
        assert records[0]["extra"]["app"] == "Dashboard"

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_logger_binds_name(self):
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            get_logger("cloud_status.test").debug("bound")
        finally:
            logger.remove(handler_id)

        assert records[-1]["extra"]["name"] == "cloud_status.test"
