"""Telegram client factory for live bot conversations.

The caller owns the client's lifecycle (``start``/``disconnect``), which keeps
it obvious when a session is opened inside a test run.
"""

from __future__ import annotations

import logging
from typing import Optional

from telethon import TelegramClient

from botspec.core.config import TelegramConfig
from botspec.settings import load_telegram_config


def build_client(config: Optional[TelegramConfig] = None) -> TelegramClient:
    """Create a Telethon client from a TelegramConfig (or the environment)."""

    config = config or load_telegram_config()

    # Fail fast on missing credentials to avoid an ambiguous login prompt.
    if not config.api_id or not config.api_hash:
        raise RuntimeError("Missing API_ID or API_HASH in environment")

    logging.getLogger(__name__).info("Initializing Telegram client (%s)", config.session_name)

    return TelegramClient(config.session_name, config.api_id, config.api_hash)
