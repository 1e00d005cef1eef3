"""
Core conversation logic: message classification, per-chat state and the dispatcher.
"""

from .dispatcher import Dispatcher
from .models import (
    InboundMessage,
    LocationMessage,
    Place,
    PlacesResult,
    StartCommand,
    TelegramUpdate,
    TextMessage,
    to_inbound,
)
from .parsing import is_location_seeking, parse_coordinates
from .state import ConversationState, ConversationStore

__all__ = [
    "Dispatcher",
    "InboundMessage",
    "LocationMessage",
    "Place",
    "PlacesResult",
    "StartCommand",
    "TelegramUpdate",
    "TextMessage",
    "to_inbound",
    "is_location_seeking",
    "parse_coordinates",
    "ConversationState",
    "ConversationStore",
]
