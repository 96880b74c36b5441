"""
Logging configuration tests.

Tests for firesplit._logging module.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def restore_logger():
    """Put the firesplit logger back the way the test found it."""
    from firesplit._logging import logger

    handlers = logger.handlers[:]
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_accessible(self):
        """setup_logging is accessible from the package root."""
        import firesplit
        from firesplit._logging import setup_logging

        assert firesplit.setup_logging is setup_logging

    def test_setup_logging_default_level(self, monkeypatch):
        """setup_logging() defaults to WARN, like the import-time handler."""
        from firesplit._logging import logger, setup_logging

        monkeypatch.delenv("FIRESPLIT_LOG_LEVEL", raising=False)

        setup_logging()

        assert logger.level == logging.WARNING

    def test_setup_logging_default_follows_env(self, monkeypatch):
        """Without a level argument, FIRESPLIT_LOG_LEVEL is used."""
        from firesplit._logging import logger, setup_logging

        monkeypatch.setenv("FIRESPLIT_LOG_LEVEL", "debug")

        setup_logging()

        assert logger.level == logging.DEBUG

    def test_setup_logging_unknown_name_is_warn(self):
        """An unrecognised level name falls back to WARN."""
        from firesplit._logging import logger, setup_logging

        setup_logging("chatty")

        assert logger.level == logging.WARNING

    def test_setup_logging_accepts_string_level(self):
        """setup_logging() accepts string level names."""
        from firesplit._logging import logger, setup_logging

        setup_logging("DEBUG")

        assert logger.level == logging.DEBUG

    def test_setup_logging_accepts_int_level(self):
        """setup_logging() accepts integer level constants."""
        from firesplit._logging import logger, setup_logging

        setup_logging(logging.WARNING)

        assert logger.level == logging.WARNING

    def test_setup_logging_off(self):
        """'off' silences everything, including FATAL."""
        from firesplit._logging import logger, setup_logging

        setup_logging("off")

        assert logger.level > logging.CRITICAL

    def test_setup_logging_replaces_handlers(self):
        """setup_logging() replaces existing handlers."""
        from firesplit._logging import logger, setup_logging

        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging("INFO")

        assert len(logger.handlers) == 1

    def test_setup_logging_sets_format_env(self, monkeypatch):
        """An explicit format is exported for child processes."""
        from firesplit._logging import JsonFormatter, logger, setup_logging

        monkeypatch.setenv("FIRESPLIT_LOG_FORMAT", "human")

        setup_logging("INFO", format="json")

        assert os.environ["FIRESPLIT_LOG_FORMAT"] == "json"
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)


class TestEnvironment:
    """Environment-driven defaults."""

    def test_level_from_env(self, monkeypatch):
        """FIRESPLIT_LOG_LEVEL selects the default level."""
        from firesplit._logging import _get_log_level

        monkeypatch.setenv("FIRESPLIT_LOG_LEVEL", "debug")
        assert _get_log_level() == logging.DEBUG

    def test_default_level_is_warn(self, monkeypatch):
        """Without FIRESPLIT_LOG_LEVEL the library stays quiet."""
        from firesplit._logging import _get_log_level

        monkeypatch.delenv("FIRESPLIT_LOG_LEVEL", raising=False)
        assert _get_log_level() == logging.WARNING

    def test_unknown_level_falls_back_to_warn(self, monkeypatch):
        """An unrecognised level name falls back to WARNING."""
        from firesplit._logging import _get_log_level

        monkeypatch.setenv("FIRESPLIT_LOG_LEVEL", "chatty")
        assert _get_log_level() == logging.WARNING

    def test_format_from_env(self, monkeypatch):
        """FIRESPLIT_LOG_FORMAT overrides TTY detection."""
        from firesplit._logging import _get_log_format

        monkeypatch.setenv("FIRESPLIT_LOG_FORMAT", "HUMAN")
        assert _get_log_format() == "human"


class TestLoggerHierarchy:
    """Tests for logger hierarchy."""

    def test_logger_name_is_firesplit(self):
        """Root firesplit logger has correct name."""
        from firesplit._logging import logger

        assert logger.name == "firesplit"

    def test_module_loggers_are_children(self):
        """Module-specific loggers are children of the firesplit logger."""
        proto_log = logging.getLogger("firesplit.protocol")

        assert proto_log.parent.name == "firesplit"

    def test_child_inherits_level(self):
        """Child loggers inherit level from parent."""
        from firesplit._logging import setup_logging

        setup_logging("DEBUG")

        child = logging.getLogger("firesplit.child")

        assert child.getEffectiveLevel() == logging.DEBUG
