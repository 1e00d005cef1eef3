"""
Main entry point for the places bot.
Wires the clients together, serves the webhook and handles startup and shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
import uvicorn
from fastapi import FastAPI

from .config import Settings
from .core.dispatcher import Dispatcher
from .core.state import ConversationStore
from .services.messenger import TelegramClient
from .services.places import PlacesClient
from .services.summarizer import Summarizer
from .web.app import create_app


class BotApplication:
    """Main application class that manages the bot lifecycle."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = logging.getLogger(__name__)

        self.messenger = TelegramClient(settings.telegram)
        self.places = PlacesClient(settings.foursquare)
        self.summarizer = Summarizer(settings.openai)
        self.dispatcher = Dispatcher(
            places=self.places,
            summarizer=self.summarizer,
            messenger=self.messenger,
            store=ConversationStore(),
            default_query=settings.bot.default_query,
            fallback=settings.bot.fallback,
        )
        self.app: FastAPI = create_app(
            self.dispatcher,
            webhook_token=settings.telegram.token.get_secret_value(),
            lifespan=self.lifespan,
        )

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        await self.startup()
        try:
            yield
        finally:
            await self.cleanup()

    async def startup(self) -> None:
        """Register the webhook if a public URL is configured."""
        self.logger.info("🚀 Starting places bot...")

        webhook_url: Optional[str] = self.settings.webhook_url
        if webhook_url is None:
            self.logger.warning(
                "⚠️ No public URL configured, skipping webhook registration"
            )
        else:
            try:
                await self.messenger.set_webhook(webhook_url)
            except (httpx.HTTPError, ValueError) as e:
                self.logger.error(f"❌ Failed to register webhook: {e}")

        self.logger.info("✅ Bot startup complete!")

    async def cleanup(self) -> None:
        """Clean up resources on shutdown."""
        self.logger.info("🧹 Cleaning up resources...")

        for client in (self.messenger, self.places, self.summarizer):
            try:
                await client.aclose()
            except Exception as e:
                self.logger.error(f"❌ Error closing {type(client).__name__}: {e}")

        self.logger.info("✅ Cleanup complete!")

    def run(self) -> None:
        """Serve the webhook until interrupted."""
        self.logger.info(
            f"🌐 Server is running on {self.settings.server.host}:{self.settings.server.port}"
        )
        uvicorn.run(
            self.app,
            host=self.settings.server.host,
            port=self.settings.server.port,
            log_config=None,
        )
