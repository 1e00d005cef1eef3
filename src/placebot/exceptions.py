"""
Exceptions for the places bot.

This module defines custom exceptions used throughout the application.
"""


class PlacebotError(Exception):
    """Base class for errors raised by the bot."""


class CompletionError(PlacebotError):
    """Raised when the completion provider returns no usable text."""

    def __init__(self, model: str, reason: str):
        self.model = model
        self.reason = reason

        super().__init__(f"Completion from '{model}' unusable: {reason}")
