"""Assertions for card components: actions, images, facts and receipt items."""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Iterable, List, Optional

from botspec.assertions.base import ObjectAssertions, SetAssertions, tap_actions
from botspec.core.errors import (
    CardActionAssertionFailedError,
    CardImageAssertionFailedError,
    FactAssertionFailedError,
    ReceiptItemAssertionFailedError,
)
from botspec.core.models import CardAction, CardImage, Fact, ReceiptItem


class CardActionAssertions(ObjectAssertions):
    error_type = CardActionAssertionFailedError

    def __init__(self, card_action: CardAction) -> None:
        super().__init__(card_action, "card_action")

    def type_matching(self, regex: str) -> "CardActionAssertions":
        return self._matching("type", self._subject.type, regex)

    def type_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("type", self._subject.type, regex, group_regex)

    def title_matching(self, regex: str) -> "CardActionAssertions":
        return self._matching("title", self._subject.title, regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", self._subject.title, regex, group_regex)

    def image_matching(self, regex: str) -> "CardActionAssertions":
        return self._matching("image", self._subject.image, regex)

    def image_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("image", self._subject.image, regex, group_regex)

    def value_matching(self, regex: str) -> "CardActionAssertions":
        return self._matching("value", self._subject.value, regex)

    def value_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("value", self._subject.value, regex, group_regex)


class CardActionSetAssertions(SetAssertions):
    """At least one action in the set must match."""

    error_type = CardActionAssertionFailedError

    def __init__(self, card_actions: Iterable[CardAction]) -> None:
        super().__init__(card_actions, "card_actions")

    def type_matching(self, regex: str) -> "CardActionSetAssertions":
        return self._matching("type", attrgetter("type"), regex)

    def type_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("type", attrgetter("type"), regex, group_regex)

    def title_matching(self, regex: str) -> "CardActionSetAssertions":
        return self._matching("title", attrgetter("title"), regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", attrgetter("title"), regex, group_regex)

    def image_matching(self, regex: str) -> "CardActionSetAssertions":
        return self._matching("image", attrgetter("image"), regex)

    def image_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("image", attrgetter("image"), regex, group_regex)

    def value_matching(self, regex: str) -> "CardActionSetAssertions":
        return self._matching("value", attrgetter("value"), regex)

    def value_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("value", attrgetter("value"), regex, group_regex)


class CardImageAssertions(ObjectAssertions):
    error_type = CardImageAssertionFailedError

    def __init__(self, card_image: CardImage) -> None:
        super().__init__(card_image, "card_image")

    def url_matching(self, regex: str) -> "CardImageAssertions":
        return self._matching("url", self._subject.url, regex)

    def url_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("url", self._subject.url, regex, group_regex)

    def alt_matching(self, regex: str) -> "CardImageAssertions":
        return self._matching("alt", self._subject.alt, regex)

    def alt_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("alt", self._subject.alt, regex, group_regex)

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions([self._subject]))


class CardImageSetAssertions(SetAssertions):
    """At least one image in the set must match."""

    error_type = CardImageAssertionFailedError

    def __init__(self, card_images: Iterable[CardImage]) -> None:
        super().__init__(card_images, "card_images")

    def url_matching(self, regex: str) -> "CardImageSetAssertions":
        return self._matching("url", attrgetter("url"), regex)

    def url_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("url", attrgetter("url"), regex, group_regex)

    def alt_matching(self, regex: str) -> "CardImageSetAssertions":
        return self._matching("alt", attrgetter("alt"), regex)

    def alt_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("alt", attrgetter("alt"), regex, group_regex)

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions(self._items))


class FactAssertions(ObjectAssertions):
    error_type = FactAssertionFailedError

    def __init__(self, fact: Fact) -> None:
        super().__init__(fact, "fact")

    def key_matching(self, regex: str) -> "FactAssertions":
        return self._matching("key", self._subject.key, regex)

    def key_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("key", self._subject.key, regex, group_regex)

    def value_matching(self, regex: str) -> "FactAssertions":
        return self._matching("value", self._subject.value, regex)

    def value_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("value", self._subject.value, regex, group_regex)


class FactSetAssertions(SetAssertions):
    """At least one fact in the set must match."""

    error_type = FactAssertionFailedError

    def __init__(self, facts: Iterable[Fact]) -> None:
        super().__init__(facts, "facts")

    def key_matching(self, regex: str) -> "FactSetAssertions":
        return self._matching("key", attrgetter("key"), regex)

    def key_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("key", attrgetter("key"), regex, group_regex)

    def value_matching(self, regex: str) -> "FactSetAssertions":
        return self._matching("value", attrgetter("value"), regex)

    def value_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("value", attrgetter("value"), regex, group_regex)


def _item_images(items: Iterable[Any]) -> List[CardImage]:
    return [item.image for item in items if item.image is not None]


class ReceiptItemAssertions(ObjectAssertions):
    error_type = ReceiptItemAssertionFailedError

    def __init__(self, receipt_item: ReceiptItem) -> None:
        super().__init__(receipt_item, "receipt_item")

    def title_matching(self, regex: str) -> "ReceiptItemAssertions":
        return self._matching("title", self._subject.title, regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", self._subject.title, regex, group_regex)

    def subtitle_matching(self, regex: str) -> "ReceiptItemAssertions":
        return self._matching("subtitle", self._subject.subtitle, regex)

    def subtitle_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("subtitle", self._subject.subtitle, regex, group_regex)

    def text_matching(self, regex: str) -> "ReceiptItemAssertions":
        return self._matching("text", self._subject.text, regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", self._subject.text, regex, group_regex)

    def price_matching(self, regex: str) -> "ReceiptItemAssertions":
        return self._matching("price", self._subject.price, regex)

    def price_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("price", self._subject.price, regex, group_regex)

    def quantity_matching(self, regex: str) -> "ReceiptItemAssertions":
        return self._matching("quantity", self._subject.quantity, regex)

    def quantity_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("quantity", self._subject.quantity, regex, group_regex)

    def with_image(self) -> CardImageSetAssertions:
        return CardImageSetAssertions(_item_images([self._subject]))

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions([self._subject]))


class ReceiptItemSetAssertions(SetAssertions):
    """At least one receipt item in the set must match."""

    error_type = ReceiptItemAssertionFailedError

    def __init__(self, receipt_items: Iterable[ReceiptItem]) -> None:
        super().__init__(receipt_items, "receipt_items")

    def title_matching(self, regex: str) -> "ReceiptItemSetAssertions":
        return self._matching("title", attrgetter("title"), regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", attrgetter("title"), regex, group_regex)

    def subtitle_matching(self, regex: str) -> "ReceiptItemSetAssertions":
        return self._matching("subtitle", attrgetter("subtitle"), regex)

    def subtitle_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("subtitle", attrgetter("subtitle"), regex, group_regex)

    def text_matching(self, regex: str) -> "ReceiptItemSetAssertions":
        return self._matching("text", attrgetter("text"), regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", attrgetter("text"), regex, group_regex)

    def price_matching(self, regex: str) -> "ReceiptItemSetAssertions":
        return self._matching("price", attrgetter("price"), regex)

    def price_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("price", attrgetter("price"), regex, group_regex)

    def quantity_matching(self, regex: str) -> "ReceiptItemSetAssertions":
        return self._matching("quantity", attrgetter("quantity"), regex)

    def quantity_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("quantity", attrgetter("quantity"), regex, group_regex)

    def with_image(self) -> CardImageSetAssertions:
        return CardImageSetAssertions(_item_images(self._items))

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions(self._items))
