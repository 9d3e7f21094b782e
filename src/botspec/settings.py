"""Environment-driven configuration for botspec.

Everything is read from environment variables, with a local ``.env`` file
loaded through python-dotenv so credentials stay out of test code.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from botspec.core.config import LoggingConfig, TelegramConfig

DEFAULT_SESSION_NAME = "botspec"
DEFAULT_REPLY_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.5


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_telegram_config() -> TelegramConfig:
    """Read Telegram credentials and conversation timing.

    Missing credentials are allowed here; ``build_client`` fails fast when it
    actually needs them.
    """

    load_dotenv()
    return TelegramConfig(
        api_id=_optional_int("API_ID"),
        api_hash=os.getenv("API_HASH") or None,
        session_name=os.getenv("SESSION_NAME", DEFAULT_SESSION_NAME),
        bot=os.getenv("BOTSPEC_BOT") or None,
        reply_timeout=_float("BOTSPEC_REPLY_TIMEOUT", DEFAULT_REPLY_TIMEOUT),
        poll_interval=_float("BOTSPEC_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
    )


def load_logging_config() -> LoggingConfig:
    """Read logging switches (level, console, optional rotating file)."""

    load_dotenv()
    return LoggingConfig(
        level=os.getenv("BOTSPEC_LOG_LEVEL", "WARNING").upper(),
        console=_flag("BOTSPEC_LOG_CONSOLE", True),
        file_path=os.getenv("BOTSPEC_LOG_FILE") or None,
        max_bytes=_optional_int("BOTSPEC_LOG_MAX_BYTES") or 5 * 1024 * 1024,
        backup_count=_optional_int("BOTSPEC_LOG_BACKUP_COUNT") or 5,
    )
