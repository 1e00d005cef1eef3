"""
Clients for the external services the bot talks to.
"""

from .messenger import TelegramClient
from .places import PlacesClient
from .summarizer import Summarizer

__all__ = [
    "TelegramClient",
    "PlacesClient",
    "Summarizer",
]
