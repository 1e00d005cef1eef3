"""
Pydantic models for the payloads that cross the bot's boundaries.

Inbound Telegram updates are validated here and turned into one of the
three message kinds the dispatcher understands. Place search results
are modelled here too so the dispatcher never touches raw JSON.
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .parsing import parse_coordinates

ChatId = Union[int, str]

START_COMMAND = "/start"


# =============================================================================
# TELEGRAM PAYLOADS
# =============================================================================


class TelegramChat(BaseModel):
    """The chat a message belongs to."""

    model_config = ConfigDict(extra="ignore")

    id: ChatId


class TelegramLocation(BaseModel):
    """A location shared from the Telegram client."""

    model_config = ConfigDict(extra="ignore")

    latitude: float
    longitude: float


class TelegramMessage(BaseModel):
    """The subset of a Telegram message the bot reads."""

    model_config = ConfigDict(extra="ignore")

    message_id: Optional[int] = None
    chat: TelegramChat
    text: Optional[str] = None
    location: Optional[TelegramLocation] = None


class TelegramUpdate(BaseModel):
    """Webhook envelope; anything other than a new message is ignored."""

    model_config = ConfigDict(extra="ignore")

    update_id: Optional[int] = None
    message: Optional[TelegramMessage] = None


# =============================================================================
# INBOUND MESSAGES
# =============================================================================


class StartCommand(BaseModel):
    """The ``/start`` command."""

    kind: Literal["start"] = "start"
    chat_id: ChatId


class LocationMessage(BaseModel):
    """A location, either shared natively or typed as ``lat,lon``."""

    kind: Literal["location"] = "location"
    chat_id: ChatId
    latitude: float
    longitude: float


class TextMessage(BaseModel):
    """Any other free text."""

    kind: Literal["text"] = "text"
    chat_id: ChatId
    text: str


InboundMessage = Union[StartCommand, LocationMessage, TextMessage]


def to_inbound(message: TelegramMessage) -> Optional[InboundMessage]:
    """
    Classify a Telegram message into one of the inbound message kinds.

    Precedence: exact ``/start`` text, then a native location, then text
    that parses as coordinates, then free text.

    Args:
        message: Validated Telegram message

    Returns:
        The inbound message, or None if the message has neither text nor location
    """
    chat_id = message.chat.id

    if message.text == START_COMMAND:
        return StartCommand(chat_id=chat_id)

    if message.location is not None:
        return LocationMessage(
            chat_id=chat_id,
            latitude=message.location.latitude,
            longitude=message.location.longitude,
        )

    if message.text is None:
        return None

    coordinates = parse_coordinates(message.text)
    if coordinates is not None:
        latitude, longitude = coordinates
        return LocationMessage(chat_id=chat_id, latitude=latitude, longitude=longitude)

    return TextMessage(chat_id=chat_id, text=message.text)


# =============================================================================
# PLACES
# =============================================================================


class Place(BaseModel):
    """A single place returned by the places provider."""

    model_config = ConfigDict(extra="ignore")

    name: str
    fsq_place_id: Optional[str] = None
    distance: Optional[float] = None


class LookupStatus(str, Enum):
    """Outcome of a places lookup."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class PlacesResult(BaseModel):
    """Places found for a query, in provider order."""

    status: LookupStatus
    places: List[Place] = Field(default_factory=list)
    error: Optional[str] = Field(
        default=None, description="Error message if the lookup failed"
    )

    @classmethod
    def found(cls, places: List[Place]) -> "PlacesResult":
        if not places:
            return cls(status=LookupStatus.EMPTY)
        return cls(status=LookupStatus.OK, places=places)

    @classmethod
    def failed(cls, error: str) -> "PlacesResult":
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def names(self) -> List[str]:
        return [place.name for place in self.places]
