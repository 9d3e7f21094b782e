"""Attachment extraction: turn message attachments into typed cards.

Bot Framework sends rich cards as attachments with a card-specific content
type and a camelCase JSON body. Assertions only ever see the typed cards
built here.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar, Union

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

LOGGER = logging.getLogger(__name__)

HERO_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.hero"
THUMBNAIL_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.thumbnail"
SIGNIN_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.signin"
RECEIPT_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.receipt"

CardT = TypeVar("CardT", HeroCard, ThumbnailCard, SigninCard, ReceiptCard)

MessageSource = Union[Message, Iterable[Message]]


def _text(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Objects, lists, numbers and booleans keep their JSON spelling.
    return json.dumps(value, default=str)


def parse_card_action(raw: Optional[Dict[str, Any]]) -> Optional[CardAction]:
    if raw is None:
        return None
    if isinstance(raw, CardAction):
        return raw
    return CardAction(
        type=_text(raw, "type"),
        title=_text(raw, "title"),
        image=_text(raw, "image"),
        value=_text(raw, "value"),
    )


def parse_card_image(raw: Optional[Dict[str, Any]]) -> Optional[CardImage]:
    if raw is None:
        return None
    if isinstance(raw, CardImage):
        return raw
    return CardImage(url=_text(raw, "url"), alt=_text(raw, "alt"), tap=parse_card_action(raw.get("tap")))


def _parse_fact(raw: Dict[str, Any]) -> Fact:
    if isinstance(raw, Fact):
        return raw
    return Fact(key=_text(raw, "key"), value=_text(raw, "value"))


def _parse_receipt_item(raw: Dict[str, Any]) -> ReceiptItem:
    if isinstance(raw, ReceiptItem):
        return raw
    return ReceiptItem(
        title=_text(raw, "title"),
        subtitle=_text(raw, "subtitle"),
        text=_text(raw, "text"),
        image=parse_card_image(raw.get("image")),
        price=_text(raw, "price"),
        quantity=_text(raw, "quantity"),
        tap=parse_card_action(raw.get("tap")),
    )


def _many(raw_items: Optional[Iterable[Any]], parse: Callable[[Any], Any]) -> Tuple[Any, ...]:
    """Parse a JSON list, dropping null entries."""

    if not raw_items:
        return ()
    return tuple(parse(item) for item in raw_items if item is not None)


def _parse_hero(raw: Dict[str, Any]) -> HeroCard:
    return HeroCard(
        title=_text(raw, "title"),
        subtitle=_text(raw, "subtitle"),
        text=_text(raw, "text"),
        images=_many(raw.get("images"), parse_card_image),
        buttons=_many(raw.get("buttons"), parse_card_action),
        tap=parse_card_action(raw.get("tap")),
    )


def _parse_thumbnail(raw: Dict[str, Any]) -> ThumbnailCard:
    return ThumbnailCard(
        title=_text(raw, "title"),
        subtitle=_text(raw, "subtitle"),
        text=_text(raw, "text"),
        images=_many(raw.get("images"), parse_card_image),
        buttons=_many(raw.get("buttons"), parse_card_action),
        tap=parse_card_action(raw.get("tap")),
    )


def _parse_signin(raw: Dict[str, Any]) -> SigninCard:
    return SigninCard(text=_text(raw, "text"), buttons=_many(raw.get("buttons"), parse_card_action))


def _parse_receipt(raw: Dict[str, Any]) -> ReceiptCard:
    return ReceiptCard(
        title=_text(raw, "title"),
        items=_many(raw.get("items"), _parse_receipt_item),
        facts=_many(raw.get("facts"), _parse_fact),
        tap=parse_card_action(raw.get("tap")),
        total=_text(raw, "total"),
        tax=_text(raw, "tax"),
        vat=_text(raw, "vat"),
        buttons=_many(raw.get("buttons"), parse_card_action),
    )


CONTENT_TYPES: Dict[Type[Any], str] = {
    HeroCard: HERO_CARD_CONTENT_TYPE,
    ThumbnailCard: THUMBNAIL_CARD_CONTENT_TYPE,
    SigninCard: SIGNIN_CARD_CONTENT_TYPE,
    ReceiptCard: RECEIPT_CARD_CONTENT_TYPE,
}

_PARSERS: Dict[Type[Any], Callable[[Dict[str, Any]], Any]] = {
    HeroCard: _parse_hero,
    ThumbnailCard: _parse_thumbnail,
    SigninCard: _parse_signin,
    ReceiptCard: _parse_receipt,
}


def card_from_content(card_type: Type[CardT], content: Any) -> CardT:
    """Build a typed card from an attachment body.

    Content that is already an instance of ``card_type`` is returned as is,
    which lets tests build messages from typed cards directly.
    """

    if isinstance(content, card_type):
        return content
    if card_type not in _PARSERS:
        raise ValueError(f"Unsupported card type: {card_type.__name__}")
    if not isinstance(content, dict):
        raise ValueError(f"Cannot build {card_type.__name__} from {type(content).__name__}")
    return _PARSERS[card_type](content)


def _is_card_attachment(attachment: Attachment, card_type: Type[Any]) -> bool:
    if isinstance(attachment.content, card_type):
        return True
    return attachment.content_type == CONTENT_TYPES[card_type]


def _iter_messages(source: MessageSource) -> Iterable[Message]:
    if isinstance(source, Message):
        return [source]
    return [message for message in source if message is not None]


def extract_cards(source: MessageSource, card_type: Type[CardT]) -> List[CardT]:
    """Return every card of ``card_type`` attached to ``source``.

    ``source`` is a single message or an iterable of messages. Cards keep
    message order, then attachment order. Returns an empty list when no
    attachment of that kind is present. Attachments that only link their
    card through ``content_url`` are skipped.
    """

    if card_type not in CONTENT_TYPES:
        raise ValueError(f"Unsupported card type: {card_type.__name__}")

    cards: List[CardT] = []
    for message in _iter_messages(source):
        for attachment in message.attachments:
            if attachment is None:
                continue
            if not _is_card_attachment(attachment, card_type):
                LOGGER.debug(
                    "Skipping %s attachment while extracting %s",
                    attachment.content_type,
                    card_type.__name__,
                )
                continue
            if not isinstance(attachment.content, (dict, card_type)):
                LOGGER.debug(
                    "Skipping %s attachment without inline content while extracting %s",
                    attachment.content_type,
                    card_type.__name__,
                )
                continue
            cards.append(card_from_content(card_type, attachment.content))
    return cards
