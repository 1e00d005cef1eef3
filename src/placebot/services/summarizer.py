"""
Language-model summaries via OpenAI chat completions.

Provider errors are not handled here; they propagate to the dispatcher.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI

from ..config import OpenAISettings
from ..core import replies
from ..exceptions import CompletionError

logger = logging.getLogger(__name__)


class Summarizer:
    """Turns a prompt into a short reply using a chat completion."""

    def __init__(self, settings: OpenAISettings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client or AsyncOpenAI(
            api_key=settings.api_key.get_secret_value(),
            base_url=settings.base_url,
        )

    async def summarize(self, prompt: str) -> str:
        """
        Ask the model to respond to a prompt.

        Args:
            prompt: User message content

        Returns:
            The stripped text of the first choice

        Raises:
            CompletionError: If the response carries no text
            openai.OpenAIError: If the provider call fails
        """
        logger.info(f"🧠 Generating completion with {self.settings.model}")
        response = await self._client.chat.completions.create(
            model=self.settings.model,
            messages=[
                {"role": "system", "content": replies.SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self.settings.max_tokens,
        )

        if not response.choices:
            raise CompletionError(self.settings.model, "no choices returned")

        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise CompletionError(self.settings.model, "empty message content")

        suggestion = content.strip()
        logger.info(f"✅ Completion received ({len(suggestion)} chars)")
        return suggestion

    async def aclose(self) -> None:
        await self._client.close()
