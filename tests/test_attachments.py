from __future__ import annotations

import pytest

from botspec import expect
from botspec.core.attachments import (
    HERO_CARD_CONTENT_TYPE,
    RECEIPT_CARD_CONTENT_TYPE,
    SIGNIN_CARD_CONTENT_TYPE,
    THUMBNAIL_CARD_CONTENT_TYPE,
    card_from_content,
    extract_cards,
)
from botspec.core.models import (
    Attachment,
    CardAction,
    CardImage,
    Fact,
    HeroCard,
    Message,
    ReceiptCard,
    SigninCard,
    ThumbnailCard,
)

HERO_JSON = {
    "title": "Pizza",
    "subtitle": "Margherita",
    "text": "Tomato and mozzarella",
    "images": [{"url": "https://example.com/pizza.png", "alt": "pizza"}, None],
    "buttons": [{"type": "imBack", "title": "Order", "value": "order pizza"}],
    "tap": {"type": "openUrl", "value": "https://example.com"},
}

RECEIPT_JSON = {
    "title": "Your order",
    "facts": [{"key": "Order", "value": "1234"}],
    "items": [
        {
            "title": "Pizza",
            "price": "$10.00",
            "quantity": 2,
            "image": {"url": "https://example.com/pizza.png"},
        }
    ],
    "total": "$20.00",
    "tax": "$1.00",
}


def test_card_from_content_parses_hero_json() -> None:
    card = card_from_content(HeroCard, HERO_JSON)
    assert card.title == "Pizza"
    assert card.images == (CardImage(url="https://example.com/pizza.png", alt="pizza"),)
    assert card.buttons == (CardAction(type="imBack", title="Order", value="order pizza"),)
    assert card.tap == CardAction(type="openUrl", value="https://example.com")


def test_card_from_content_parses_receipt_json() -> None:
    card = card_from_content(ReceiptCard, RECEIPT_JSON)
    assert card.facts == (Fact(key="Order", value="1234"),)
    assert card.items[0].quantity == "2"
    assert card.items[0].image == CardImage(url="https://example.com/pizza.png")
    assert card.vat is None


def test_card_from_content_passes_typed_cards_through() -> None:
    card = SigninCard(text="Please sign in")
    assert card_from_content(SigninCard, card) is card


def test_card_from_content_rejects_unknown_content() -> None:
    with pytest.raises(ValueError):
        card_from_content(HeroCard, "not a card")


def test_extract_cards_keeps_message_then_attachment_order() -> None:
    first = Message(
        attachments=(
            Attachment(HERO_CARD_CONTENT_TYPE, {"title": "one"}),
            Attachment(THUMBNAIL_CARD_CONTENT_TYPE, {"title": "thumb"}),
            Attachment(HERO_CARD_CONTENT_TYPE, {"title": "two"}),
        )
    )
    second = Message(attachments=(Attachment(HERO_CARD_CONTENT_TYPE, HeroCard(title="three")),))

    cards = extract_cards([first, None, second], HeroCard)

    assert [card.title for card in cards] == ["one", "two", "three"]


def test_extract_cards_from_single_message() -> None:
    message = Message(
        attachments=(
            Attachment(SIGNIN_CARD_CONTENT_TYPE, {"text": "sign in"}),
            Attachment(RECEIPT_CARD_CONTENT_TYPE, RECEIPT_JSON),
        )
    )
    assert extract_cards(message, ReceiptCard)[0].title == "Your order"
    assert extract_cards(message, SigninCard) == [SigninCard(text="sign in")]


def test_extract_cards_returns_empty_list_when_kind_missing() -> None:
    message = Message(attachments=(Attachment("image/png", content_url="https://example.com/a.png"),))
    assert extract_cards(message, ThumbnailCard) == []
    assert extract_cards([], HeroCard) == []


def test_extract_cards_rejects_unknown_card_type() -> None:
    with pytest.raises(ValueError):
        extract_cards(Message(), CardAction)


def test_card_from_content_keeps_json_spelling_of_object_values() -> None:
    card = card_from_content(
        HeroCard,
        {"buttons": [{"type": "postBack", "value": {"action": "buy", "ok": True}}, {"value": ["a", 1]}]},
    )
    assert card.buttons[0].value == '{"action": "buy", "ok": true}'
    assert card.buttons[1].value == '["a", 1]'
    expect(card).with_buttons().value_matching('"action": "buy"')


def test_extract_cards_skips_attachments_without_inline_content() -> None:
    message = Message(
        attachments=(
            Attachment(HERO_CARD_CONTENT_TYPE, content_url="https://example.com/card.json"),
            Attachment(HERO_CARD_CONTENT_TYPE, {"title": "inline"}),
        )
    )
    assert extract_cards(message, HeroCard) == [HeroCard(title="inline")]

    linked_only = Message(attachments=(Attachment(HERO_CARD_CONTENT_TYPE, content_url="https://example.com/card.json"),))
    assert len(expect(linked_only).has_attachment().of_type_hero_card()) == 0
