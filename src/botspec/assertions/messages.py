"""Assertions for bot messages and their attachments."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List, Optional, Union

from botspec.assertions.base import ObjectAssertions, SetAssertions
from botspec.assertions.cards import (
    HeroCardSetAssertions,
    ReceiptCardSetAssertions,
    SigninCardSetAssertions,
    ThumbnailCardSetAssertions,
)
from botspec.core.errors import InvalidArgumentError, MessageAssertionFailedError
from botspec.core.models import Message


class MessageAttachmentAssertions:
    """Entry point for card assertions over the attachments of messages."""

    def __init__(self, messages: Union[Message, Iterable[Message]]) -> None:
        if messages is None:
            raise InvalidArgumentError("messages")
        if isinstance(messages, Message):
            messages = [messages]
        self._messages = [message for message in messages if message is not None]

    def of_type_hero_card(self) -> HeroCardSetAssertions:
        return HeroCardSetAssertions(self._messages)

    def of_type_thumbnail_card(self) -> ThumbnailCardSetAssertions:
        return ThumbnailCardSetAssertions(self._messages)

    def of_type_signin_card(self) -> SigninCardSetAssertions:
        return SigninCardSetAssertions(self._messages)

    def of_type_receipt_card(self) -> ReceiptCardSetAssertions:
        return ReceiptCardSetAssertions(self._messages)


class MessageAssertions(ObjectAssertions):
    error_type = MessageAssertionFailedError

    def __init__(self, message: Message) -> None:
        super().__init__(message, "message")

    def text_matching(self, regex: str) -> "MessageAssertions":
        return self._matching("text", self._subject.text, regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", self._subject.text, regex, group_regex)

    def from_matching(self, regex: str) -> "MessageAssertions":
        return self._matching("from", self._subject.sender, regex)

    def from_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("from", self._subject.sender, regex, group_regex)

    def has_attachment(self) -> MessageAttachmentAssertions:
        return MessageAttachmentAssertions(self._subject)


class MessageSetAssertions(SetAssertions):
    """At least one message in the set must match."""

    error_type = MessageAssertionFailedError

    def __init__(self, messages: Iterable[Message]) -> None:
        super().__init__(messages, "messages")

    def text_matching(self, regex: str) -> "MessageSetAssertions":
        return self._matching("text", attrgetter("text"), regex)

    def text_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("text", attrgetter("text"), regex, group_regex)

    def from_matching(self, regex: str) -> "MessageSetAssertions":
        return self._matching("from", attrgetter("sender"), regex)

    def from_matching_groups(self, regex: str, group_regex: str) -> Optional[List[str]]:
        return self._matching_groups("from", attrgetter("sender"), regex, group_regex)

    def has_attachment(self) -> MessageAttachmentAssertions:
        return MessageAttachmentAssertions(self._items)
