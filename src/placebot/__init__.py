"""
Places Bot Package

A Telegram webhook bot that finds nearby places and asks a language model
which ones are worth a visit.
"""

__version__ = "0.1.0"

from .config import Settings, get_settings

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
]
