"""
Logging configuration for the places bot.

Colored console output via colorlog, with the chattier third-party
loggers turned down.
"""

import logging
import sys

import colorlog

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Request-level chatter from the HTTP stack and the webhook server
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """
    Send all bot logs to stdout with colored levels.

    Args:
        level: Log level name; unknown names fall back to INFO
    """
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS)
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"🔧 Logging configured - Level: {level}")
