"""Core domain package for botspec.

Core contains the matching engine, the error taxonomy, the message and card
models, and attachment extraction, without any Telegram-specific code.
"""
