from __future__ import annotations

from typing import List, Optional

import pytest

from botspec import expect
from botspec.assertions import (
    HeroCardSetAssertions,
    MessageAssertions,
    MessageAttachmentAssertions,
    MessageSetAssertions,
    ReceiptCardSetAssertions,
    SigninCardSetAssertions,
    ThumbnailCardSetAssertions,
)
from botspec.core.attachments import HERO_CARD_CONTENT_TYPE, THUMBNAIL_CARD_CONTENT_TYPE
from botspec.core.errors import (
    HeroCardAssertionFailedError,
    InvalidArgumentError,
    MessageAssertionFailedError,
)
from botspec.core.models import Attachment, Message


def _random_messages() -> List[Message]:
    return [
        Message(text="weather is sunny", from_name="weather-bot"),
        Message(text="42 degrees", from_id="user-1"),
        Message(text="goodbye", from_name="weather-bot"),
    ]


def _set_with_one(text: Optional[str] = None, from_name: Optional[str] = None) -> List[Message]:
    messages = _random_messages()
    messages.insert(1, Message(text=text, from_name=from_name))
    return messages


@pytest.mark.parametrize("text", ["some text", "", "symbols ([*])?"])
def test_text_matching_passes_for_exact_text(text: str) -> None:
    MessageAssertions(Message(text=text)).text_matching(text)
    MessageSetAssertions(_set_with_one(text=text)).text_matching(text)


@pytest.mark.parametrize("pattern", ["some text!", "^[j-z ]*$", "s{12}"])
def test_text_matching_raises_when_no_message_matches(pattern: str) -> None:
    with pytest.raises(MessageAssertionFailedError):
        MessageAssertions(Message(text="some text")).text_matching(pattern)
    with pytest.raises(MessageAssertionFailedError):
        MessageSetAssertions(_random_messages()).text_matching(pattern)


def test_text_matching_raises_when_text_missing() -> None:
    with pytest.raises(MessageAssertionFailedError):
        MessageAssertions(Message()).text_matching("anything")
    with pytest.raises(MessageAssertionFailedError):
        MessageAssertions(Message()).text_matching_groups("anything", "(.*)")


def test_set_raises_when_every_text_is_missing() -> None:
    messages = [Message() for _ in range(5)]
    with pytest.raises(MessageAssertionFailedError):
        MessageSetAssertions(messages).text_matching(".*")
    with pytest.raises(MessageAssertionFailedError):
        MessageSetAssertions(messages).text_matching_groups(".*", "(.*)")


def test_from_matching_uses_name_then_id() -> None:
    MessageAssertions(Message(from_name="Weather Bot", from_id="b-1")).from_matching("weather bot")
    MessageAssertions(Message(from_id="b-1")).from_matching("^b-1$")
    MessageSetAssertions(_random_messages()).from_matching("USER-1")


def test_from_matching_failure_reports_property() -> None:
    with pytest.raises(MessageAssertionFailedError) as excinfo:
        MessageSetAssertions(_random_messages()).from_matching("nobody")
    assert excinfo.value.property_name == "from"
    assert excinfo.value.pattern == "nobody"


def test_text_matching_groups_single_message() -> None:
    groups = MessageAssertions(Message(text="some text")).text_matching_groups("some text", "(some) (text)")
    assert groups == ["some", "text"]


def test_text_matching_groups_across_messages() -> None:
    messages = _random_messages() + [Message(text="some text"), Message(text="same text")]
    groups = MessageSetAssertions(messages).text_matching_groups(".*", r"(s[oa]me) (text)")
    assert groups == ["some", "text", "same", "text"]


def test_text_matching_groups_returns_none_when_group_regex_misses() -> None:
    assert MessageSetAssertions(_random_messages()).text_matching_groups(".*", "(non matching)") is None
    assert MessageAssertions(Message(text="some text")).text_matching_groups("some text", "(non matching)") is None


def test_from_matching_groups() -> None:
    groups = MessageSetAssertions(_random_messages()).from_matching_groups("bot", r"(\w+)-bot")
    assert groups == ["weather", "weather"]


@pytest.mark.parametrize("regex, group_regex", [(None, "(.*)"), ("(.*)", None)])
def test_missing_patterns_raise_invalid_argument(regex, group_regex) -> None:
    with pytest.raises(InvalidArgumentError):
        MessageSetAssertions(_random_messages()).text_matching_groups(regex, group_regex)
    with pytest.raises(InvalidArgumentError):
        MessageAssertions(Message(text="x")).from_matching_groups(regex, group_regex)


def test_missing_regex_raises_even_for_empty_set() -> None:
    with pytest.raises(InvalidArgumentError):
        MessageSetAssertions([]).text_matching(None)


def test_constructors_reject_none() -> None:
    with pytest.raises(InvalidArgumentError):
        MessageAssertions(None)
    with pytest.raises(InvalidArgumentError):
        MessageSetAssertions(None)


def test_assertions_chain() -> None:
    message = Message(text="Hello there", from_name="greeter")
    assertions = MessageAssertions(message)
    assert assertions.text_matching("hello").from_matching("greet") is assertions


def test_has_attachment_returns_attachment_assertions() -> None:
    attachments = MessageAssertions(Message()).has_attachment()
    assert isinstance(attachments, MessageAttachmentAssertions)
    assert isinstance(attachments.of_type_hero_card(), HeroCardSetAssertions)
    assert isinstance(attachments.of_type_thumbnail_card(), ThumbnailCardSetAssertions)
    assert isinstance(attachments.of_type_signin_card(), SigninCardSetAssertions)
    assert isinstance(attachments.of_type_receipt_card(), ReceiptCardSetAssertions)


def test_attachment_assertions_extract_cards_from_every_message() -> None:
    messages = [
        Message(text="menu", attachments=(Attachment(HERO_CARD_CONTENT_TYPE, {"title": "Pizza"}),)),
        Message(text="more", attachments=(Attachment(THUMBNAIL_CARD_CONTENT_TYPE, {"title": "Pasta"}),)),
        Message(text="drinks", attachments=(Attachment(HERO_CARD_CONTENT_TYPE, {"title": "Cola"}),)),
    ]

    hero_cards = MessageSetAssertions(messages).has_attachment().of_type_hero_card()

    assert len(hero_cards) == 2
    hero_cards.title_matching("cola")
    with pytest.raises(HeroCardAssertionFailedError):
        hero_cards.title_matching("pasta")


def test_expect_dispatches_on_type() -> None:
    assert isinstance(expect(Message()), MessageAssertions)
    assert isinstance(expect(_random_messages()), MessageSetAssertions)
    with pytest.raises(ValueError):
        expect([])
    with pytest.raises(TypeError):
        expect(["plain string"])
