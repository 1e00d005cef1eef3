"""
Test configuration and fixtures for the placebot test suite.
"""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from placebot.config import Settings
from placebot.core.dispatcher import Dispatcher
from placebot.core.models import Place, PlacesResult
from placebot.core.state import ConversationStore


@pytest.fixture
def test_settings():
    """Create test settings with safe defaults."""
    with patch.dict(
        os.environ,
        {
            "PLACEBOT_TELEGRAM__TOKEN": "123456:test-token",
            "PLACEBOT_FOURSQUARE__API_KEY": "test_foursquare_key",
            "PLACEBOT_OPENAI__API_KEY": "test_openai_key",
        },
    ):
        return Settings(_env_file=None)


@pytest.fixture
def sample_places():
    """Places in the order the provider returned them."""
    return [
        Place(name="Joe's Pizza"),
        Place(name="Prince Street Pizza"),
        Place(name="L'Industrie"),
    ]


@pytest.fixture
def mock_places(sample_places):
    """Places client that always finds the sample places."""
    places = MagicMock()
    places.search = AsyncMock(return_value=PlacesResult.found(sample_places))
    return places


@pytest.fixture
def mock_summarizer():
    """Summarizer returning a canned reply."""
    summarizer = MagicMock()
    summarizer.summarize = AsyncMock(return_value="Mock AI response")
    return summarizer


@pytest.fixture
def mock_messenger():
    """Messenger that records sent messages."""
    messenger = MagicMock()
    messenger.send_message = AsyncMock(return_value=True)
    return messenger


@pytest.fixture
def store():
    return ConversationStore()


@pytest.fixture
def dispatcher(mock_places, mock_summarizer, mock_messenger, store):
    """Dispatcher with mocked collaborators and default behavior."""
    return Dispatcher(
        places=mock_places,
        summarizer=mock_summarizer,
        messenger=mock_messenger,
        store=store,
    )


# Test data helpers
def create_test_update(text=None, location=None, chat_id=4242, **overrides):
    """Create a Telegram update payload with optional overrides."""
    message = {
        "message_id": 1,
        "chat": {"id": chat_id, "type": "private"},
        "date": 1700000000,
    }
    if text is not None:
        message["text"] = text
    if location is not None:
        message["location"] = location
    base_data = {"update_id": 1000, "message": message}
    base_data.update(overrides)
    return base_data
