"""Fluent assertion classes, one single/set pair per message, card and component type."""

from botspec.assertions.cards import (
    HeroCardAssertions,
    HeroCardSetAssertions,
    ReceiptCardAssertions,
    ReceiptCardSetAssertions,
    SigninCardAssertions,
    SigninCardSetAssertions,
    ThumbnailCardAssertions,
    ThumbnailCardSetAssertions,
)
from botspec.assertions.components import (
    CardActionAssertions,
    CardActionSetAssertions,
    CardImageAssertions,
    CardImageSetAssertions,
    FactAssertions,
    FactSetAssertions,
    ReceiptItemAssertions,
    ReceiptItemSetAssertions,
)
from botspec.assertions.messages import (
    MessageAssertions,
    MessageAttachmentAssertions,
    MessageSetAssertions,
)

__all__ = [
    "CardActionAssertions",
    "CardActionSetAssertions",
    "CardImageAssertions",
    "CardImageSetAssertions",
    "FactAssertions",
    "FactSetAssertions",
    "HeroCardAssertions",
    "HeroCardSetAssertions",
    "MessageAssertions",
    "MessageAttachmentAssertions",
    "MessageSetAssertions",
    "ReceiptCardAssertions",
    "ReceiptCardSetAssertions",
    "ReceiptItemAssertions",
    "ReceiptItemSetAssertions",
    "SigninCardAssertions",
    "SigninCardSetAssertions",
    "ThumbnailCardAssertions",
    "ThumbnailCardSetAssertions",
]
