"""Drive a live conversation with a Telegram bot for end-to-end tests.

The driver sends a message as the test user and polls for the bot's replies,
then hands back core Messages ready for ``botspec.expect``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, List

from botspec.adapters.telegram_mapper import to_messages
from botspec.core.models import Message
from botspec.core.ports import ChatClientPort

LOGGER = logging.getLogger(__name__)


class BotConversation:
    """Send messages to one bot and collect its replies in order."""

    def __init__(
        self,
        client: ChatClientPort,
        bot: Any,
        reply_timeout: float = 10.0,
        poll_interval: float = 0.5,
        max_replies: int = 50,
    ) -> None:
        self._client = client
        self._bot = bot
        self._reply_timeout = reply_timeout
        self._poll_interval = poll_interval
        self._max_replies = max_replies
        self._history: List[Message] = []

    async def send(self, text: str) -> List[Message]:
        """Send ``text`` and return the replies that arrive before the timeout.

        Polling stops at the first non-empty batch; replies are returned oldest
        first. An empty list means the bot stayed silent.

        Only the newest ``max_replies`` replies of that batch are kept, and a
        warning is logged when the batch may have been cut. Replies that arrive
        after the batch was read are not collected by this or any later call.
        """

        sent = await self._client.send_message(self._bot, text)
        LOGGER.info("Sent message %s to %s", sent.id, self._bot)

        deadline = time.monotonic() + self._reply_timeout
        while True:
            # Telegram returns newest first; min_id excludes our own message.
            raw = await self._client.get_messages(self._bot, limit=self._max_replies, min_id=sent.id)
            replies = [message for message in raw if not getattr(message, "out", False)]
            if replies or time.monotonic() >= deadline:
                break
            await asyncio.sleep(self._poll_interval)

        if len(raw) >= self._max_replies:
            LOGGER.warning(
                "Reply batch from %s reached the limit of %d messages; older replies may be missing",
                self._bot,
                self._max_replies,
            )

        mapped = to_messages(sorted(replies, key=lambda message: message.id))
        if not mapped:
            LOGGER.info("No reply from %s within %.1fs", self._bot, self._reply_timeout)
        self._history.extend(mapped)
        return mapped

    def history(self) -> List[Message]:
        """Return every reply collected so far, oldest first."""

        return list(self._history)
