"""Logging setup for the tvremote CLI and relay server."""

from __future__ import annotations

import logging
import sys

from tvremote.config.settings import LoggingConfig

# The relay's access and error logs come from uvicorn's own loggers.
MANAGED_LOGGERS = ("tvremote", "uvicorn")

_HANDLER_MARK = "_tvremote_handler"


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Route tvremote and uvicorn logging to stderr and an optional file.

    Safe to call again with a new config: handlers installed by an
    earlier call are replaced, never stacked.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)

    for name in MANAGED_LOGGERS:
        target = logging.getLogger(name)
        target.setLevel(level)
        for old in [h for h in target.handlers if getattr(h, _HANDLER_MARK, False)]:
            target.removeHandler(old)
            old.close()
        for handler in handlers:
            target.addHandler(handler)

    logging.getLogger("tvremote").debug(
        "Logging initialized at %s level%s",
        config.level,
        f" (also writing {config.file})" if config.file else "",
    )

