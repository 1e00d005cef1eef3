"""
Per-chat conversation state.

A chat is either idle or waiting for a location to resolve a pending
query. The store keeps one record per chat for the life of the process.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, MutableMapping, Optional

from .models import ChatId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversationState:
    """Conversation mode for a single chat."""

    awaiting_location: bool = False
    pending_query: str = ""

    @classmethod
    def idle(cls) -> "ConversationState":
        return cls()

    @classmethod
    def awaiting(cls, query: str) -> "ConversationState":
        return cls(awaiting_location=True, pending_query=query)


class ConversationStore:
    """
    Mapping from chat identifier to conversation state.

    The backing mapping is injectable so a persistent store can replace the
    default in-memory dict. Each chat also gets an asyncio lock which callers
    hold for a whole turn to keep same-chat updates from interleaving.

    Neither states nor locks are ever evicted; both grow by one entry per
    chat seen and live as long as the process.
    """

    def __init__(self, backing: Optional[MutableMapping[ChatId, ConversationState]] = None):
        self._states: MutableMapping[ChatId, ConversationState] = (
            backing if backing is not None else {}
        )
        self._locks: Dict[ChatId, asyncio.Lock] = {}

    def get(self, chat_id: ChatId) -> ConversationState:
        """Current state for the chat, idle if the chat is unknown."""
        return self._states.get(chat_id, ConversationState.idle())

    def set(self, chat_id: ChatId, state: ConversationState) -> None:
        self._states[chat_id] = state
        logger.debug(f"💾 State for chat {chat_id}: {state}")

    def reset(self, chat_id: ChatId) -> None:
        self.set(chat_id, ConversationState.idle())

    def lock(self, chat_id: ChatId) -> asyncio.Lock:
        """Lock serializing turns for one chat."""
        lock = self._locks.get(chat_id)
        if lock is None:
            lock = self._locks[chat_id] = asyncio.Lock()
        return lock

    def __contains__(self, chat_id: object) -> bool:
        return chat_id in self._states

    def __len__(self) -> int:
        return len(self._states)
