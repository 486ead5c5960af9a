"""
Unit tests for logging configuration.
"""

import logging

import pytest

from trigger.utils.logging_config import LoggingConfig, mask_value


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Test suite for LoggingConfig."""

    def test_configures_root_level(self, restore_root_logger):
        config = LoggingConfig()

        config.configure_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_second_call_ignored_without_force(self, restore_root_logger):
        config = LoggingConfig()
        config.configure_logging(level="debug")

        config.configure_logging(level="error")

        assert logging.getLogger().level == logging.DEBUG

    def test_force_reconfigures(self, restore_root_logger):
        config = LoggingConfig()
        config.configure_logging(level="debug")

        config.configure_logging(level="error", force=True)

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert sum(1 for handler in root.handlers if handler is config._console_handler) == 1

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        LoggingConfig().configure_logging(level="loud")

        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "trigger.log"
        config = LoggingConfig()
        config.configure_logging(level="info", log_file=str(log_file))

        logging.getLogger("trigger.test").info("written to file")
        config._log_file_handler.flush()

        assert "written to file" in log_file.read_text()
        config._log_file_handler.close()


class TestMaskValue:
    """Test suite for mask_value."""

    def test_masks_url_password(self):
        assert mask_value("url", "postgresql://moodle:secret@db/moodle") == "postgresql://moodle:***@db/moodle"

    def test_url_without_password_unchanged(self):
        assert mask_value("url", "sqlite:///trigger.db") == "sqlite:///trigger.db"

    def test_masks_sensitive_keys(self):
        assert mask_value("db_password", "secret") == "***MASKED***"

    def test_none_unchanged(self):
        assert mask_value("password", None) is None
