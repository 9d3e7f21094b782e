"""Core configuration dataclasses.

We keep environment parsing in ``botspec.settings``, but these dataclasses
define the shape the adapters and logging setup expect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TelegramConfig:
    """Credentials and conversation settings for live Telegram bot tests."""

    api_id: Optional[int]
    api_hash: Optional[str]
    session_name: str
    bot: Optional[str]
    reply_timeout: float
    poll_interval: float


@dataclass(frozen=True)
class LoggingConfig:
    """Logging switches consumed by ``botspec.log.configure_logging``."""

    level: str
    console: bool
    file_path: Optional[str]
    max_bytes: int
    backup_count: int
