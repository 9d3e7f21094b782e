"""Fluent assertions for bot conversation messages and rich cards.

    expect(reply).text_matching("hello").has_attachment().of_type_hero_card()
    groups = expect(replies).text_matching_groups(".*", r"order (\\d+)")

The Telegram adapters in ``botspec.adapters`` are optional and imported
explicitly, so plain assertion use never pulls in Telethon.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from botspec.assertions import (
    CardActionAssertions,
    CardActionSetAssertions,
    CardImageAssertions,
    CardImageSetAssertions,
    FactAssertions,
    FactSetAssertions,
    HeroCardAssertions,
    HeroCardSetAssertions,
    MessageAssertions,
    MessageSetAssertions,
    ReceiptCardAssertions,
    ReceiptCardSetAssertions,
    ReceiptItemAssertions,
    ReceiptItemSetAssertions,
    SigninCardAssertions,
    SigninCardSetAssertions,
    ThumbnailCardAssertions,
    ThumbnailCardSetAssertions,
)
from botspec.core.errors import (
    AssertionFailedError,
    CardAssertionFailedError,
    CardComponentAssertionFailedError,
    InvalidArgumentError,
    MessageAssertionFailedError,
)
from botspec.core.models import (
    Attachment,
    CardAction,
    CardImage,
    Fact,
    HeroCard,
    Message,
    ReceiptCard,
    ReceiptItem,
    SigninCard,
    ThumbnailCard,
)

_SINGLE: Dict[Type[Any], Type[Any]] = {
    Message: MessageAssertions,
    HeroCard: HeroCardAssertions,
    ThumbnailCard: ThumbnailCardAssertions,
    SigninCard: SigninCardAssertions,
    ReceiptCard: ReceiptCardAssertions,
    CardAction: CardActionAssertions,
    CardImage: CardImageAssertions,
    Fact: FactAssertions,
    ReceiptItem: ReceiptItemAssertions,
}

_SET: Dict[Type[Any], Type[Any]] = {
    Message: MessageSetAssertions,
    HeroCard: HeroCardSetAssertions,
    ThumbnailCard: ThumbnailCardSetAssertions,
    SigninCard: SigninCardSetAssertions,
    ReceiptCard: ReceiptCardSetAssertions,
    CardAction: CardActionSetAssertions,
    CardImage: CardImageSetAssertions,
    Fact: FactSetAssertions,
    ReceiptItem: ReceiptItemSetAssertions,
}


def expect(subject: Any):
    """Return the assertions object for a message, card, component, or a list of them.

    Lists are typed by their first non-None element, so an empty list cannot
    be dispatched; construct the set assertions class directly instead.
    """

    if subject is None:
        raise InvalidArgumentError("subject")
    if type(subject) in _SINGLE:
        return _SINGLE[type(subject)](subject)

    items = [item for item in subject if item is not None]
    if not items:
        raise ValueError("Cannot infer assertions for an empty collection")
    set_type = _SET.get(type(items[0]))
    if set_type is None:
        raise TypeError(f"No assertions available for {type(items[0]).__name__}")
    return set_type(items)


__all__ = [
    "AssertionFailedError",
    "Attachment",
    "CardAction",
    "CardAssertionFailedError",
    "CardComponentAssertionFailedError",
    "CardImage",
    "Fact",
    "HeroCard",
    "InvalidArgumentError",
    "Message",
    "MessageAssertionFailedError",
    "ReceiptCard",
    "ReceiptItem",
    "SigninCard",
    "ThumbnailCard",
    "expect",
]
