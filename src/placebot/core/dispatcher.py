"""
Conversation dispatcher.

Decides, for each inbound message, whether it is the start command, a
location, a location-seeking query or a general question, updates the
chat's state accordingly and sends back a single reply.

Per chat the bot is either idle or waiting for a location to resolve a
pending query:

    /start                      -> idle, greeting
    location, waiting for q     -> look up q, summarize, idle
    location, idle              -> acknowledgment (or default query lookup)
    text with location keyword  -> waiting for location
    other text                  -> answer with the LLM (or ask for a location)
"""

import logging
from typing import TYPE_CHECKING, Literal, Optional

from . import replies
from .models import (
    ChatId,
    InboundMessage,
    LocationMessage,
    StartCommand,
    TextMessage,
)
from .parsing import is_location_seeking
from .state import ConversationState, ConversationStore

if TYPE_CHECKING:
    from ..services.messenger import TelegramClient
    from ..services.places import PlacesClient
    from ..services.summarizer import Summarizer

logger = logging.getLogger(__name__)

FallbackMode = Literal["answer", "prompt"]


class Dispatcher:
    """
    Routes inbound messages through the per-chat state machine.

    Args:
        places: Places lookup collaborator
        summarizer: Language-model collaborator
        messenger: Outbound message collaborator
        store: Conversation state store; a fresh in-memory one if omitted
        default_query: Search term used for a location received while idle.
            When unset, such a location is only acknowledged.
        fallback: ``"answer"`` sends non-location text to the LLM,
            ``"prompt"`` asks the user for a location instead.
    """

    def __init__(
        self,
        places: "PlacesClient",
        summarizer: "Summarizer",
        messenger: "TelegramClient",
        store: Optional[ConversationStore] = None,
        default_query: Optional[str] = None,
        fallback: FallbackMode = "answer",
    ):
        self.places = places
        self.summarizer = summarizer
        self.messenger = messenger
        self.store = store if store is not None else ConversationStore()
        self.default_query = default_query
        self.fallback = fallback

    async def handle(self, message: InboundMessage) -> str:
        """
        Handle one inbound message and send the reply.

        Turns for the same chat are serialized, replies included, so they
        reach the chat in the order the messages arrived. Errors from the
        completion provider propagate after the chat's state has been settled.

        Returns:
            The reply text that was sent
        """
        async with self.store.lock(message.chat_id):
            reply = await self._dispatch(message)
            await self.messenger.send_message(message.chat_id, reply)
        return reply

    async def _dispatch(self, message: InboundMessage) -> str:
        chat_id = message.chat_id
        state = self.store.get(chat_id)
        logger.info(f"📨 Chat {chat_id}: {message.kind} message, state {state}")

        if isinstance(message, StartCommand):
            self.store.reset(chat_id)
            return replies.GREETING

        if isinstance(message, LocationMessage):
            return await self._handle_location(chat_id, state, message)

        if isinstance(message, TextMessage):
            return await self._handle_text(chat_id, message.text)

        raise TypeError(f"Unsupported inbound message: {message!r}")

    async def _handle_location(
        self, chat_id: ChatId, state: ConversationState, message: LocationMessage
    ) -> str:
        if state.awaiting_location:
            query = state.pending_query
        elif self.default_query:
            query = self.default_query
        else:
            logger.info(f"📍 Chat {chat_id}: location received with no pending query")
            return replies.LOCATION_ACKNOWLEDGED

        try:
            return await self._enrich(query, message.latitude, message.longitude)
        finally:
            # The pending query is spent whether or not the lookup worked
            self.store.reset(chat_id)

    async def _handle_text(self, chat_id: ChatId, text: str) -> str:
        if is_location_seeking(text):
            query = text.strip()
            self.store.set(chat_id, ConversationState.awaiting(query))
            logger.info(f"📍 Chat {chat_id}: waiting for a location for '{query}'")
            return replies.ASK_FOR_LOCATION

        if self.fallback == "prompt":
            return replies.SEND_LOCATION_OR_COORDINATES

        return await self.summarizer.summarize(text)

    async def _enrich(self, query: str, latitude: float, longitude: float) -> str:
        """Look up places for the query and have the LLM pick the best ones."""
        result = await self.places.search(latitude, longitude, query)
        if not result.places:
            logger.info(f"🔍 No places for '{query}' ({result.status.value})")
            return replies.NOTHING_FOUND.format(query=query)

        prompt = replies.build_places_prompt(result.names)
        return await self.summarizer.summarize(prompt)
