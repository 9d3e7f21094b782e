"""Ports (interfaces) used by the conversation adapter.

The conversation driver only needs to send a message and read newer ones,
so tests can swap the Telethon client for a small fake.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol


class ChatClientPort(Protocol):
    """Telegram client operations required to talk to a bot."""

    async def send_message(self, entity: Any, message: str) -> Any:
        ...

    async def get_messages(
        self, entity: Any, limit: Optional[int] = None, min_id: int = 0
    ) -> List[Any]:
        ...
