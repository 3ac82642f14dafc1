"""Unit tests for configuration loading and the logger."""

import logging

import pytest

from xpath_assert.config import AssertionConfig, get_config, reset_config
from xpath_assert.utils.logger import setup_logger


class TestAssertionConfig:
    """Tests for AssertionConfig validation."""

    def test_defaults(self):
        config = AssertionConfig()
        assert config.repr_max_length == 200
        assert config.normalize_whitespace is False
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.logging_level == logging.WARNING

    @pytest.mark.parametrize("length", [0, -5])
    def test_invalid_repr_length(self, length):
        with pytest.raises(ValueError, match="repr_max_length"):
            AssertionConfig(repr_max_length=length)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log level"):
            AssertionConfig(log_level="LOUD")

    def test_log_level_case_insensitive(self):
        assert AssertionConfig(log_level="debug").logging_level == logging.DEBUG

    def test_immutable(self):
        config = AssertionConfig()
        with pytest.raises(AttributeError):
            config.repr_max_length = 10


class TestFromEnvironment:
    """Tests for environment loading."""

    def test_reads_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XPATH_ASSERT_REPR_LENGTH", "50")
        monkeypatch.setenv("XPATH_ASSERT_NORMALIZE_WHITESPACE", "TRUE")
        monkeypatch.setenv("XPATH_ASSERT_LOG_LEVEL", "info")
        monkeypatch.setenv("XPATH_ASSERT_LOG_FILE", str(tmp_path / "xpath.log"))

        config = AssertionConfig.from_environment()

        assert config.repr_max_length == 50
        assert config.normalize_whitespace is True
        assert config.logging_level == logging.INFO
        assert config.log_file == tmp_path / "xpath.log"

    def test_invalid_length(self, monkeypatch):
        monkeypatch.setenv("XPATH_ASSERT_REPR_LENGTH", "short")
        with pytest.raises(ValueError):
            AssertionConfig.from_environment()


class TestSingleton:
    """Tests for get_config()/reset_config()."""

    def test_same_instance(self):
        assert get_config() is get_config()

    def test_reset_reloads(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("XPATH_ASSERT_REPR_LENGTH", "42")
        reset_config()
        second = get_config()
        assert second is not first
        assert second.repr_max_length == 42


class TestLogger:
    """Tests for setup_logger()."""

    def test_console_handler_format(self):
        logger = setup_logger("xpath_assert.test_console")
        try:
            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
            assert "%(levelname)-8s" in logger.handlers[0].formatter._fmt
        finally:
            logger.handlers.clear()

    def test_configured_once(self):
        logger = setup_logger("xpath_assert.test_once")
        try:
            assert setup_logger("xpath_assert.test_once") is logger
            assert len(logger.handlers) == 1
        finally:
            logger.handlers.clear()

    def test_file_handler(self, monkeypatch, tmp_path):
        log_file = tmp_path / "xpath.log"
        monkeypatch.setenv("XPATH_ASSERT_LOG_FILE", str(log_file))
        reset_config()

        logger = setup_logger("xpath_assert.test_file")
        try:
            assert len(logger.handlers) == 2
            logger.warning("written")
            for handler in logger.handlers:
                handler.flush()
            assert "written" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()


class TestLoggerFollowsConfig:
    """The package logger picks up configuration changes after import."""

    def test_import_does_not_read_config(self, monkeypatch):
        import importlib

        import xpath_assert.utils.logger as logger_module

        monkeypatch.setenv("XPATH_ASSERT_LOG_LEVEL", "verbose")
        reset_config()
        importlib.reload(logger_module)

    def test_failed_check_logged_at_info(self, monkeypatch, caplog, xml_document):
        from xpath_assert.core.checks import check_match

        monkeypatch.setenv("XPATH_ASSERT_LOG_LEVEL", "INFO")
        reset_config()

        check_match("//non-existing", xml_document)

        records = [r for r in caplog.records if r.name == "xpath_assert"]
        assert [r.levelno for r in records] == [logging.INFO]
        assert "[match] //non-existing" in records[0].getMessage()

    def test_failed_check_silent_by_default(self, caplog, xml_document):
        from xpath_assert.core.checks import check_match

        check_match("//non-existing", xml_document)

        assert [r for r in caplog.records if r.name == "xpath_assert"] == []

    def test_level_reapplied_after_reset(self, monkeypatch):
        from xpath_assert.utils.logger import get_logger

        monkeypatch.setenv("XPATH_ASSERT_LOG_LEVEL", "DEBUG")
        reset_config()
        assert get_logger().level == logging.DEBUG

        monkeypatch.setenv("XPATH_ASSERT_LOG_LEVEL", "ERROR")
        reset_config()
        assert get_logger().level == logging.ERROR
