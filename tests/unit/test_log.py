"""Unit tests for lspvehicles logging helpers."""

import logging

import pytest

from lspvehicles.log import (
    ColoredFormatter,
    LogComponent,
    LogLevel,
    configure_logging,
    get_logger,
    is_configured,
    set_level,
)


def _record(name, level, msg="hello"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestLogLevel:

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("debug", LogLevel.DEBUG),
            ("INFO", LogLevel.INFO),
            ("warn", LogLevel.WARNING),
            ("Warning", LogLevel.WARNING),
            ("error", LogLevel.ERROR),
        ],
    )
    def test_from_string(self, text, expected):
        assert LogLevel.from_string(text) is expected

    def test_unknown_raises(self):
        with pytest.raises(KeyError):
            LogLevel.from_string("loud")


class TestColoredFormatter:

    def test_short_name(self):
        assert ColoredFormatter.short_name("lspvehicles.complying") == "complying"
        assert ColoredFormatter.short_name("lspvehicles") == "lspvehicles"
        assert ColoredFormatter.short_name("other.module") == "other.module"

    def test_info_format(self):
        fmt = ColoredFormatter(use_colors=False)
        out = fmt.format(_record("lspvehicles.demo", logging.INFO))
        assert out == "[demo] hello"

    def test_warning_has_level_letter(self):
        fmt = ColoredFormatter(use_colors=False)
        out = fmt.format(_record("lspvehicles.demo", logging.WARNING))
        assert out == "[demo W] hello"

    def test_debug_has_timestamp(self):
        fmt = ColoredFormatter(use_colors=False)
        out = fmt.format(_record("lspvehicles.complying", logging.DEBUG))
        assert out.startswith("[complying] ")
        assert out.endswith(" hello")


class TestConfigureLogging:

    def test_installs_single_console_handler(self):
        configure_logging(level="debug")
        configure_logging(level=LogLevel.INFO)
        root = logging.getLogger("lspvehicles")
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert root.propagate is False
        assert is_configured()

    def test_console_output(self, stdout_lines):
        configure_logging(use_colors=False)
        get_logger(LogComponent.DEMO).info("ready")
        assert stdout_lines() == ["[demo] ready"]

    def test_log_file(self, tmp_path):
        path = tmp_path / "demo.log"
        configure_logging(log_file=str(path))
        get_logger(LogComponent.NONCOMPLYING).warning("no motor")
        for handler in logging.getLogger("lspvehicles").handlers:
            handler.flush()
        assert "no motor" in path.read_text()
        for handler in logging.getLogger("lspvehicles").handlers:
            handler.close()


class TestLoggers:

    def test_get_logger_by_component(self):
        assert get_logger(LogComponent.COMPLYING).name == "lspvehicles.complying"

    def test_get_logger_by_string(self):
        assert get_logger("lspvehicles.custom").name == "lspvehicles.custom"

    def test_set_level_component(self):
        set_level("error", LogComponent.DEMO)
        try:
            assert get_logger(LogComponent.DEMO).level == logging.ERROR
        finally:
            set_level(logging.NOTSET, LogComponent.DEMO)

    def test_set_level_root(self):
        set_level(LogLevel.DEBUG)
        assert logging.getLogger("lspvehicles").level == logging.DEBUG
