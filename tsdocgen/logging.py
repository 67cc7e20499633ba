"""Logging setup for tsdocgen.

Modules log through children of the `tsdocgen` logger; the CLI calls
`configure_logging` once per invocation.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "tsdocgen"
CONSOLE_FORMAT = "[tsdocgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `tsdocgen.<name>`, or the root tsdocgen logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    return logger.getChild(name) if name else logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: Path) -> logging.Handler:
    # The file sink keeps the full trace regardless of --verbose.
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Replace the tsdocgen handlers with a console handler and an optional file sink."""
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [_console_handler(logging.DEBUG if verbose else logging.INFO)]
    if log_file is not None:
        handlers.append(_file_handler(log_file))
    for handler in handlers:
        logger.addHandler(handler)

    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    return logger


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "ROOT_LOGGER", "configure_logging", "get_logger"]
