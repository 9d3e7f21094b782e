from __future__ import annotations

import asyncio
import logging
import types
from typing import Any, List, Optional

import pytest

from botspec import expect
from botspec.adapters.telegram_conversation import BotConversation
from botspec.assertions import MessageSetAssertions
from botspec.core.errors import MessageAssertionFailedError


def _telegram_message(message_id: int, text: str, out: bool = False) -> Any:
    return types.SimpleNamespace(
        id=message_id,
        raw_text=text,
        out=out,
        sender=types.SimpleNamespace(username="echo_bot"),
        sender_id=42,
        chat_id=42,
        reply_markup=None,
        date=None,
    )


class FakeClient:
    """Minimal client that queues bot replies for each poll."""

    def __init__(self, batches: List[List[Any]]) -> None:
        self.sent: list[tuple[Any, str]] = []
        self.polls: list[int] = []
        self._batches = batches
        self._next_id = 100

    async def send_message(self, entity: Any, message: str) -> Any:
        self.sent.append((entity, message))
        self._next_id += 1
        return types.SimpleNamespace(id=self._next_id)

    async def get_messages(self, entity: Any, limit: Optional[int] = None, min_id: int = 0) -> List[Any]:
        self.polls.append(min_id)
        if not self._batches:
            return []
        return self._batches.pop(0)


def test_send_returns_replies_oldest_first() -> None:
    # Telegram returns newest first.
    client = FakeClient([[_telegram_message(103, "second"), _telegram_message(102, "first")]])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=1, poll_interval=0)

    replies = asyncio.run(conversation.send("hello"))

    assert client.sent == [("@echo_bot", "hello")]
    assert client.polls == [101]
    assert [reply.text for reply in replies] == ["first", "second"]
    expect(replies).text_matching("^first$").from_matching("@echo_bot")


def test_send_polls_until_reply_arrives() -> None:
    client = FakeClient([[], [_telegram_message(102, "hello", out=True)], [_telegram_message(103, "pong")]])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=5, poll_interval=0)

    replies = asyncio.run(conversation.send("ping"))

    assert len(client.polls) == 3
    assert [reply.text for reply in replies] == ["pong"]


def test_send_returns_empty_list_on_timeout() -> None:
    client = FakeClient([])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=0, poll_interval=0)

    replies = asyncio.run(conversation.send("anyone?"))

    assert replies == []
    assert client.polls == [101]
    with pytest.raises(MessageAssertionFailedError):
        MessageSetAssertions(replies).text_matching(".*")


def test_history_accumulates_replies() -> None:
    client = FakeClient([[_telegram_message(102, "one")], [_telegram_message(104, "two")]])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=1, poll_interval=0)

    async def run() -> None:
        await conversation.send("a")
        await conversation.send("b")

    asyncio.run(run())

    history = conversation.history()
    assert [message.text for message in history] == ["one", "two"]
    history.clear()
    assert len(conversation.history()) == 2


def test_send_warns_when_batch_reaches_reply_limit(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeClient([[_telegram_message(103, "b"), _telegram_message(102, "a")]])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=1, poll_interval=0, max_replies=2)

    with caplog.at_level(logging.WARNING, logger="botspec.adapters.telegram_conversation"):
        replies = asyncio.run(conversation.send("hello"))

    assert [reply.text for reply in replies] == ["a", "b"]
    assert "older replies may be missing" in caplog.text


def test_send_does_not_warn_below_reply_limit(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeClient([[_telegram_message(102, "only")]])
    conversation = BotConversation(client, "@echo_bot", reply_timeout=1, poll_interval=0, max_replies=5)

    with caplog.at_level(logging.WARNING, logger="botspec.adapters.telegram_conversation"):
        asyncio.run(conversation.send("hello"))

    assert "older replies may be missing" not in caplog.text
