"""Assertions for rich cards (hero, thumbnail, signin, receipt).

Set assertions accept either typed cards or the messages that carry them;
messages are run through attachment extraction first.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Iterable, List, Optional, Type, Union

from botspec.assertions.base import ObjectAssertions, SetAssertions, flatten, tap_actions
from botspec.assertions.components import (
    CardActionSetAssertions,
    CardImageSetAssertions,
    FactSetAssertions,
    ReceiptItemSetAssertions,
)
from botspec.core.attachments import extract_cards
from botspec.core.errors import (
    HeroCardAssertionFailedError,
    InvalidArgumentError,
    ReceiptCardAssertionFailedError,
    SigninCardAssertionFailedError,
    ThumbnailCardAssertionFailedError,
)
from botspec.core.models import HeroCard, Message, ReceiptCard, SigninCard, ThumbnailCard

CardSource = Union[Message, Iterable[Any]]


def _cards_from(source: Optional[CardSource], card_type: Type[Any], argument_name: str) -> List[Any]:
    """Return typed cards from cards, a message, or a mix of both.

    Messages contribute their attached cards in place. Anything else that is
    not a ``card_type`` raises TypeError.
    """

    if source is None:
        raise InvalidArgumentError(argument_name)
    if isinstance(source, Message):
        return extract_cards(source, card_type)

    cards: List[Any] = []
    for item in source:
        if item is None:
            continue
        if isinstance(item, Message):
            cards.extend(extract_cards(item, card_type))
        elif isinstance(item, card_type):
            cards.append(item)
        else:
            raise TypeError(f"Expected {card_type.__name__} or Message, got {type(item).__name__}")
    return cards


class _TitledCardAssertions(ObjectAssertions):
    """Hero and thumbnail cards share the same properties."""

    def title_matching(self, regex: str):
        return self._matching("title", self._subject.title, regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", self._subject.title, regex, group_regex)

    def subtitle_matching(self, regex: str):
        return self._matching("subtitle", self._subject.subtitle, regex)

    def subtitle_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("subtitle", self._subject.subtitle, regex, group_regex)

    def text_matching(self, regex: str):
        return self._matching("text", self._subject.text, regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", self._subject.text, regex, group_regex)

    def with_card_image(self) -> CardImageSetAssertions:
        return CardImageSetAssertions(self._subject.images)

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(self._subject.buttons)

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions([self._subject]))


class _TitledCardSetAssertions(SetAssertions):
    card_type: Type[Any] = HeroCard

    def __init__(self, cards: CardSource) -> None:
        super().__init__(_cards_from(cards, self.card_type, "cards"), "cards")

    def title_matching(self, regex: str):
        return self._matching("title", attrgetter("title"), regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", attrgetter("title"), regex, group_regex)

    def subtitle_matching(self, regex: str):
        return self._matching("subtitle", attrgetter("subtitle"), regex)

    def subtitle_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("subtitle", attrgetter("subtitle"), regex, group_regex)

    def text_matching(self, regex: str):
        return self._matching("text", attrgetter("text"), regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", attrgetter("text"), regex, group_regex)

    def with_card_image(self) -> CardImageSetAssertions:
        return CardImageSetAssertions(flatten(self._items, "images"))

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(flatten(self._items, "buttons"))

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions(self._items))


class HeroCardAssertions(_TitledCardAssertions):
    error_type = HeroCardAssertionFailedError

    def __init__(self, hero_card: HeroCard) -> None:
        super().__init__(hero_card, "hero_card")


class HeroCardSetAssertions(_TitledCardSetAssertions):
    error_type = HeroCardAssertionFailedError
    card_type = HeroCard


class ThumbnailCardAssertions(_TitledCardAssertions):
    error_type = ThumbnailCardAssertionFailedError

    def __init__(self, thumbnail_card: ThumbnailCard) -> None:
        super().__init__(thumbnail_card, "thumbnail_card")


class ThumbnailCardSetAssertions(_TitledCardSetAssertions):
    error_type = ThumbnailCardAssertionFailedError
    card_type = ThumbnailCard


class SigninCardAssertions(ObjectAssertions):
    error_type = SigninCardAssertionFailedError

    def __init__(self, signin_card: SigninCard) -> None:
        super().__init__(signin_card, "signin_card")

    def text_matching(self, regex: str) -> "SigninCardAssertions":
        return self._matching("text", self._subject.text, regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", self._subject.text, regex, group_regex)

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(self._subject.buttons)


class SigninCardSetAssertions(SetAssertions):
    error_type = SigninCardAssertionFailedError

    def __init__(self, cards: CardSource) -> None:
        super().__init__(_cards_from(cards, SigninCard, "cards"), "cards")

    def text_matching(self, regex: str) -> "SigninCardSetAssertions":
        return self._matching("text", attrgetter("text"), regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", attrgetter("text"), regex, group_regex)

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(flatten(self._items, "buttons"))


class ReceiptCardAssertions(ObjectAssertions):
    error_type = ReceiptCardAssertionFailedError

    def __init__(self, receipt_card: ReceiptCard) -> None:
        super().__init__(receipt_card, "receipt_card")

    def title_matching(self, regex: str) -> "ReceiptCardAssertions":
        return self._matching("title", self._subject.title, regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", self._subject.title, regex, group_regex)

    def total_matching(self, regex: str) -> "ReceiptCardAssertions":
        return self._matching("total", self._subject.total, regex)

    def total_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("total", self._subject.total, regex, group_regex)

    def tax_matching(self, regex: str) -> "ReceiptCardAssertions":
        return self._matching("tax", self._subject.tax, regex)

    def tax_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("tax", self._subject.tax, regex, group_regex)

    def vat_matching(self, regex: str) -> "ReceiptCardAssertions":
        return self._matching("vat", self._subject.vat, regex)

    def vat_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("vat", self._subject.vat, regex, group_regex)

    def with_facts(self) -> FactSetAssertions:
        return FactSetAssertions(self._subject.facts)

    def with_items(self) -> ReceiptItemSetAssertions:
        return ReceiptItemSetAssertions(self._subject.items)

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(self._subject.buttons)

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions([self._subject]))


class ReceiptCardSetAssertions(SetAssertions):
    """At least one receipt card in the set must match."""

    error_type = ReceiptCardAssertionFailedError

    def __init__(self, cards: CardSource) -> None:
        super().__init__(_cards_from(cards, ReceiptCard, "cards"), "cards")

    def title_matching(self, regex: str) -> "ReceiptCardSetAssertions":
        return self._matching("title", attrgetter("title"), regex)

    def title_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("title", attrgetter("title"), regex, group_regex)

    def total_matching(self, regex: str) -> "ReceiptCardSetAssertions":
        return self._matching("total", attrgetter("total"), regex)

    def total_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("total", attrgetter("total"), regex, group_regex)

    def tax_matching(self, regex: str) -> "ReceiptCardSetAssertions":
        return self._matching("tax", attrgetter("tax"), regex)

    def tax_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("tax", attrgetter("tax"), regex, group_regex)

    def vat_matching(self, regex: str) -> "ReceiptCardSetAssertions":
        return self._matching("vat", attrgetter("vat"), regex)

    def vat_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("vat", attrgetter("vat"), regex, group_regex)

    def with_facts(self) -> FactSetAssertions:
        return FactSetAssertions(flatten(self._items, "facts"))

    def with_items(self) -> ReceiptItemSetAssertions:
        return ReceiptItemSetAssertions(flatten(self._items, "items"))

    def with_buttons(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(flatten(self._items, "buttons"))

    def with_tap_action(self) -> CardActionSetAssertions:
        return CardActionSetAssertions(tap_actions(self._items))
