"""Fixed reply texts sent by the dispatcher."""

from typing import Sequence

GREETING = (
    "Hello! Ask me anything, or tell me what you are looking for nearby "
    "(for example \"pizza nearby\") and then share your location."
)

LOCATION_ACKNOWLEDGED = (
    "Thank you for sharing your location! Tell me what you would like to find "
    "nearby and I'll look it up."
)

ASK_FOR_LOCATION = (
    "Please share your location, or send coordinates in the format "
    "\"latitude,longitude\"."
)

NOTHING_FOUND = "I couldn't find any nearby {query}. Please try again later."

SYSTEM_INSTRUCTION = "You are a helpful assistant."

PLACES_PROMPT = (
    "Here are some nearby places: {names}. Please suggest the best ones to visit."
)

SEND_LOCATION_OR_COORDINATES = (
    "Please send your location or coordinates in the format "
    "\"latitude,longitude\"."
)


def build_places_prompt(place_names: Sequence[str]) -> str:
    """Prompt asking the model to pick the best of the given places."""
    return PLACES_PROMPT.format(names=", ".join(place_names))
