"""Core domain models.

These dataclasses mirror the Bot Framework activity and card payloads that
assertions read from. They hold data only; parsing from raw payloads lives in
``core.attachments`` and in the adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Attachment:
    """A raw message attachment (card JSON, file, image...)."""

    content_type: str
    content: Any = None
    content_url: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Message:
    """A single message exchanged with a bot."""

    text: Optional[str] = None
    from_id: Optional[str] = None
    from_name: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()
    id: Optional[str] = None
    conversation_id: Optional[str] = None
    created: Optional[datetime] = None

    @property
    def sender(self) -> Optional[str]:
        """Sender used for "from" assertions: the name when known, else the id."""

        return self.from_name if self.from_name is not None else self.from_id


@dataclass(frozen=True)
class CardAction:
    """A clickable action (button or tap target) on a card."""

    type: Optional[str] = None
    title: Optional[str] = None
    image: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class CardImage:
    url: Optional[str] = None
    alt: Optional[str] = None
    tap: Optional[CardAction] = None


@dataclass(frozen=True)
class Fact:
    key: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class ReceiptItem:
    """One line on a receipt card."""

    title: Optional[str] = None
    subtitle: Optional[str] = None
    text: Optional[str] = None
    image: Optional[CardImage] = None
    price: Optional[str] = None
    quantity: Optional[str] = None
    tap: Optional[CardAction] = None


@dataclass(frozen=True)
class HeroCard:
    """A card with a single large image."""

    title: Optional[str] = None
    subtitle: Optional[str] = None
    text: Optional[str] = None
    images: Tuple[CardImage, ...] = field(default_factory=tuple)
    buttons: Tuple[CardAction, ...] = field(default_factory=tuple)
    tap: Optional[CardAction] = None


@dataclass(frozen=True)
class ThumbnailCard:
    """A card with a single small image."""

    title: Optional[str] = None
    subtitle: Optional[str] = None
    text: Optional[str] = None
    images: Tuple[CardImage, ...] = field(default_factory=tuple)
    buttons: Tuple[CardAction, ...] = field(default_factory=tuple)
    tap: Optional[CardAction] = None


@dataclass(frozen=True)
class SigninCard:
    """A card prompting the user to sign in."""

    text: Optional[str] = None
    buttons: Tuple[CardAction, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReceiptCard:
    title: Optional[str] = None
    items: Tuple[ReceiptItem, ...] = field(default_factory=tuple)
    facts: Tuple[Fact, ...] = field(default_factory=tuple)
    tap: Optional[CardAction] = None
    total: Optional[str] = None
    tax: Optional[str] = None
    vat: Optional[str] = None
    buttons: Tuple[CardAction, ...] = field(default_factory=tuple)
