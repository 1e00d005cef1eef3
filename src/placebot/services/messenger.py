"""
Telegram Bot API client.

Sends replies and registers the webhook. Sending is best effort: a failed
send is logged and reported as False, never raised.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import TelegramSettings
from ..core.models import ChatId

logger = logging.getLogger(__name__)


class TelegramClient:
    """Thin async wrapper around the two Bot API methods the bot uses."""

    def __init__(
        self,
        settings: TelegramSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self._client = http_client or httpx.AsyncClient()

    async def send_message(self, chat_id: ChatId, text: str) -> bool:
        """
        Post a text reply to a chat.

        Args:
            chat_id: Chat to reply in
            text: Reply text

        Returns:
            True if Telegram accepted the message
        """
        logger.info(f"📤 Sending message to chat {chat_id}: {text[:50]}")
        try:
            response = await self._client.post(
                self.settings.method_url("sendMessage"),
                json={"chat_id": chat_id, "text": text},
            )
        except httpx.HTTPError as e:
            logger.error(f"❌ Failed to send message to chat {chat_id}: {e}")
            return False

        if response.is_error:
            logger.error(
                f"❌ Telegram rejected message to chat {chat_id}: "
                f"{response.status_code} {response.text[:200]}"
            )
            return False

        return True

    async def set_webhook(self, url: str) -> Dict[str, Any]:
        """
        Register the webhook URL with Telegram.

        Raises:
            httpx.HTTPError: If the request could not be made
        """
        logger.info("🔗 Setting webhook")
        response = await self._client.post(
            self.settings.method_url("setWebhook"), json={"url": url}
        )
        data = response.json()
        logger.info(f"🔗 Set webhook response: {data}")
        return data

    async def aclose(self) -> None:
        await self._client.aclose()
