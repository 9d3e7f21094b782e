"""Telegram adapters: message mapping and live bot conversations (requires Telethon)."""
