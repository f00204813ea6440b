"""Tests for logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tvremote.config.settings import LoggingConfig
from tvremote.utils.logging import MANAGED_LOGGERS, setup_logging


def _installed(name: str) -> list[logging.Handler]:
    return [h for h in logging.getLogger(name).handlers if getattr(h, "_tvremote_handler", False)]


@pytest.fixture(autouse=True)
def restore_loggers():
    """Put the managed loggers back the way each test found them."""
    saved = {name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
             for name in MANAGED_LOGGERS}
    yield
    for name, (level, handlers) in saved.items():
        target = logging.getLogger(name)
        for handler in target.handlers:
            if handler not in handlers:
                handler.close()
        target.handlers = handlers
        target.setLevel(level)


class TestSetupLogging:
    def test_defaults_to_info_on_stderr(self) -> None:
        setup_logging()
        handlers = _installed("tvremote")
        assert logging.getLogger("tvremote").level == logging.INFO
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        setup_logging(LoggingConfig(level="INFO"))
        setup_logging(LoggingConfig(level="DEBUG"))
        assert len(_installed("tvremote")) == 1
        assert len(_installed("uvicorn")) == 1
        assert logging.getLogger("tvremote").level == logging.DEBUG

    def test_uvicorn_shares_level_and_format(self) -> None:
        setup_logging(LoggingConfig(level="WARNING", format="%(levelname)s|%(message)s"))
        uvicorn_logger = logging.getLogger("uvicorn")
        assert uvicorn_logger.level == logging.WARNING
        formatter = _installed("uvicorn")[0].formatter
        assert formatter is not None
        assert formatter._fmt == "%(levelname)s|%(message)s"

    def test_file_handler_writes_log_lines(self, tmp_path: Path) -> None:
        log_file = tmp_path / "tvremote.log"
        setup_logging(LoggingConfig(level="INFO", format="%(message)s", file=str(log_file)))
        logging.getLogger("tvremote.test").info("relay up")
        logging.getLogger("uvicorn.error").info("Started server process")
        for handler in _installed("tvremote"):
            handler.flush()

        lines = log_file.read_text().splitlines()
        assert "relay up" in lines
        assert "Started server process" in lines

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(LoggingConfig(level="chatty"))
        assert logging.getLogger("tvremote").level == logging.INFO
