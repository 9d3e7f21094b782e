"""Logging setup for botspec test runs.

Library modules only create loggers; this opt-in helper installs handlers.
The Telegram API hash never reaches a log line.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from botspec.core.config import LoggingConfig
from botspec.settings import load_logging_config

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"
REDACTED_ENV_VARS = ("API_HASH",)


class RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: List[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values() -> List[str]:
    values = [os.getenv(name) for name in REDACTED_ENV_VARS]
    return sorted({value for value in values if value}, key=len, reverse=True)


def build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    """Build console and file handlers described by ``config``."""

    level = getattr(logging, config.level, logging.WARNING)
    formatter = RedactingFormatter(_collect_redaction_values(), fmt=FORMAT, datefmt=DATEFMT)

    handlers: List[logging.Handler] = []
    if config.console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.file_path:
        directory = os.path.dirname(config.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Attach handlers to the ``botspec`` logger."""

    config = config or load_logging_config()
    handlers = build_handlers(config)
    if not handlers:
        return

    logger = logging.getLogger("botspec")
    logger.setLevel(getattr(logging, config.level, logging.WARNING))
    for handler in handlers:
        logger.addHandler(handler)
