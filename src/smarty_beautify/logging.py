"""
Opt-in log output for hosts embedding the beautifier.

The library itself only emits DEBUG records under the `smarty_beautify`
logger (split compound lines, protected script/style tokens, unclosed blocks).
Editor integrations and scripts call `configure_logging()` to see them.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

LOGGER_NAME = "smarty_beautify"


@dataclass
class LogConfig:
    level: int = logging.DEBUG
    stream_level: int = logging.WARNING
    log_file: Path | str | None = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _BeautifyHandler:
    """Marks handlers installed here so reconfiguring leaves foreign ones alone."""


class _StreamHandler(logging.StreamHandler, _BeautifyHandler):
    pass


class _FileHandler(logging.FileHandler, _BeautifyHandler):
    pass


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    """
    Attach a stderr handler, and a file handler when `log_file` is set, to the
    package logger. Calling it again replaces the handlers from the last call.
    """
    if config is None:
        config = LogConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level)

    for handler in [h for h in logger.handlers if isinstance(h, _BeautifyHandler)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    stream = _StreamHandler(sys.stderr)
    stream.setLevel(config.stream_level)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if config.log_file is not None:
        file_handler = _FileHandler(config.log_file)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
