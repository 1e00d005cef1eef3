"""
Tests for inbound payload validation and classification.
"""

import pytest
from pydantic import ValidationError

from placebot.core.models import (
    LocationMessage,
    LookupStatus,
    Place,
    PlacesResult,
    StartCommand,
    TelegramUpdate,
    TextMessage,
    to_inbound,
)

from conftest import create_test_update


def _inbound(**kwargs):
    update = TelegramUpdate.model_validate(create_test_update(**kwargs))
    return to_inbound(update.message)


class TestToInbound:
    """Test message classification precedence."""

    def test_start_command(self):
        assert _inbound(text="/start") == StartCommand(chat_id=4242)

    def test_start_must_match_exactly(self):
        message = _inbound(text="/start now")

        assert isinstance(message, TextMessage)
        assert message.text == "/start now"

    def test_native_location(self):
        message = _inbound(location={"latitude": 40.7, "longitude": -74.0})

        assert message == LocationMessage(chat_id=4242, latitude=40.7, longitude=-74.0)

    def test_coordinate_text(self):
        message = _inbound(text="40.7,-74.0")

        assert isinstance(message, LocationMessage)
        assert (message.latitude, message.longitude) == (40.7, -74.0)

    def test_free_text(self):
        message = _inbound(text="pizza nearby")

        assert message == TextMessage(chat_id=4242, text="pizza nearby")

    def test_message_without_text_or_location(self):
        assert _inbound() is None

    def test_string_chat_id(self):
        message = _inbound(text="hi", chat_id="@channel")

        assert message.chat_id == "@channel"


class TestTelegramUpdate:
    """Test boundary validation."""

    def test_update_without_message(self):
        update = TelegramUpdate.model_validate({"update_id": 5, "edited_message": {}})

        assert update.message is None

    def test_message_without_chat_is_rejected(self):
        with pytest.raises(ValidationError):
            TelegramUpdate.model_validate({"message": {"text": "hi"}})


class TestPlacesResult:
    """Test the explicit lookup outcome."""

    def test_found(self):
        result = PlacesResult.found([Place(name="A"), Place(name="B")])

        assert result.status == LookupStatus.OK
        assert result.names == ["A", "B"]

    def test_found_nothing(self):
        assert PlacesResult.found([]).status == LookupStatus.EMPTY

    def test_failed(self):
        result = PlacesResult.failed("boom")

        assert result.status == LookupStatus.FAILED
        assert result.places == []
        assert result.error == "boom"
