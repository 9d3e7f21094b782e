"""Telegram-to-core message mapping adapter.

This keeps Telethon-specific details out of the core models. Inline and reply
keyboards are exposed as a hero card whose buttons are card actions, so the
same card assertions work for Telegram bots.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from telethon.tl.custom import Message as TelethonMessage
from telethon.tl.types import (
    KeyboardButtonCallback,
    KeyboardButtonUrl,
    ReplyInlineMarkup,
    ReplyKeyboardMarkup,
)

from botspec.core.attachments import HERO_CARD_CONTENT_TYPE
from botspec.core.models import Attachment, CardAction, HeroCard, Message

LOGGER = logging.getLogger(__name__)

OPEN_URL = "openUrl"
POST_BACK = "postBack"
IM_BACK = "imBack"


def _decode_callback_data(data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None
    return data.decode("utf-8", errors="replace")


def button_to_action(button) -> CardAction:
    """Map one keyboard button to a CardAction."""

    title = getattr(button, "text", None)
    if isinstance(button, KeyboardButtonUrl):
        return CardAction(type=OPEN_URL, title=title, value=button.url)
    if isinstance(button, KeyboardButtonCallback):
        return CardAction(type=POST_BACK, title=title, value=_decode_callback_data(button.data))
    # Plain reply keyboard buttons send their own label back to the bot.
    return CardAction(type=IM_BACK, title=title, value=title)


def _keyboard_actions(reply_markup) -> List[CardAction]:
    if not isinstance(reply_markup, (ReplyInlineMarkup, ReplyKeyboardMarkup)):
        return []
    actions: List[CardAction] = []
    for row in reply_markup.rows:
        actions.extend(button_to_action(button) for button in row.buttons)
    return actions


def sender_name(message: TelethonMessage) -> Optional[str]:
    """Return ``@username`` for the sender, when it has one."""

    sender = getattr(message, "sender", None)
    username = getattr(sender, "username", None)
    if isinstance(username, str) and username:
        return f"@{username}"
    return None


def to_message(message: TelethonMessage) -> Message:
    """Build a core Message from a Telethon Message."""

    attachments = []
    actions = _keyboard_actions(getattr(message, "reply_markup", None))
    if actions:
        card = HeroCard(buttons=tuple(actions))
        attachments.append(Attachment(content_type=HERO_CARD_CONTENT_TYPE, content=card))

    sender_id = getattr(message, "sender_id", None)
    chat_id = getattr(message, "chat_id", None)
    return Message(
        text=message.raw_text,
        from_id=str(sender_id) if sender_id is not None else None,
        from_name=sender_name(message),
        attachments=tuple(attachments),
        id=str(message.id),
        conversation_id=str(chat_id) if chat_id is not None else None,
        created=getattr(message, "date", None),
    )


def to_messages(messages: Iterable[TelethonMessage]) -> List[Message]:
    mapped = [to_message(message) for message in messages if message is not None]
    LOGGER.debug("Mapped %d Telegram messages", len(mapped))
    return mapped
