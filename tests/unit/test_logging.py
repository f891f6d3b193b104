"""Unit tests for tessera.logging."""

import logging

from rich.logging import RichHandler

from tessera.logging import ThirdPartyPrefixFilter, config_console_handler, log_startup

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a bare log record for logger ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


class TestThirdPartyPrefixFilter:
    """Tests for ThirdPartyPrefixFilter."""

    @staticmethod
    def test_project_records_have_no_prefix() -> None:
        """Records from tessera loggers get an empty prefix."""
        record = make_record("tessera.value_graph")
        assert ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == ""

    @staticmethod
    def test_third_party_records_get_top_level_name() -> None:
        """Other loggers are tagged with their top-level package."""
        record = make_record("urllib3.connectionpool")
        assert ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == "[urllib3]"


class TestConsoleHandler:
    """Tests for config_console_handler."""

    @staticmethod
    def test_normal_mode() -> None:
        """The requested level is kept and the prefix filter is attached."""
        handler = config_console_handler(level=logging.WARNING)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING
        assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    @staticmethod
    def test_debug_mode_forces_debug_level() -> None:
        """Debug mode lowers the level and drops the prefix filter."""
        handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
        assert handler.level == logging.DEBUG
        assert not handler.filters


def test_log_startup(caplog) -> None:
    """Startup logging emits a summary line and DEBUG diagnostics."""
    logger = logging.getLogger("tessera.test")
    with caplog.at_level(logging.DEBUG, logger="tessera.test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[logging.NullHandler()],
            logger_levels={"rich": logging.ERROR},
        )
    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "TESSERA 9.9.9, console=INFO"
    assert "Handlers: ['NullHandler']" in messages
    assert "Per-logger overrides: {'rich': 'ERROR'}" in messages


def test_log_startup_without_overrides(caplog) -> None:
    """An empty override mapping is reported explicitly."""
    logger = logging.getLogger("tessera.test")
    with caplog.at_level(logging.DEBUG, logger="tessera.test"):
        log_startup(logger, app_version="1", level=logging.WARNING, handlers=[], logger_levels={})
    assert "Per-logger overrides: <none>" in [r.getMessage() for r in caplog.records]
