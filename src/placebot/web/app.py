"""
Webhook HTTP endpoint.

Telegram posts every update to ``/webhook/{token}``. The update is
validated, turned into an inbound message and handed to the dispatcher in
a background task; the response is always 200 once the token matches, so
Telegram never retries because of a failure on our side.
"""

import logging
import secrets
from typing import Any, Callable, Dict, Optional

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from pydantic import ValidationError

from ..core.dispatcher import Dispatcher
from ..core.models import InboundMessage, TelegramUpdate, to_inbound

logger = logging.getLogger(__name__)

ACCEPTED: Dict[str, Any] = {"ok": True}


async def run_turn(dispatcher: Dispatcher, message: InboundMessage) -> None:
    """Run one dispatcher turn; a failing chat must not take the process down."""
    try:
        await dispatcher.handle(message)
    except Exception as e:
        logger.exception(f"❌ Error handling message for chat {message.chat_id}: {e}")
        logger.info("🔇 Bot staying silent due to processing error")


def create_app(
    dispatcher: Dispatcher,
    webhook_token: str,
    lifespan: Optional[Callable[[FastAPI], Any]] = None,
) -> FastAPI:
    """
    Build the webhook application.

    Args:
        dispatcher: Dispatcher that handles each inbound message
        webhook_token: Secret path segment the webhook is served under
        lifespan: Optional lifespan context for startup and shutdown work

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(title="placebot", lifespan=lifespan)
    app.state.dispatcher = dispatcher

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/webhook/{token}")
    async def webhook(
        token: str, request: Request, background_tasks: BackgroundTasks
    ) -> Dict[str, Any]:
        if not secrets.compare_digest(token, webhook_token):
            raise HTTPException(status_code=404, detail="Not Found")

        try:
            payload = await request.json()
        except ValueError as e:
            logger.warning(f"⚠️ Webhook body is not JSON: {e}")
            return ACCEPTED

        try:
            update = TelegramUpdate.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"⚠️ Ignoring malformed update: {e.error_count()} errors")
            return ACCEPTED

        logger.debug(f"📥 Webhook received update {update.update_id}")

        if update.message is None:
            logger.debug("Update carries no message, ignoring")
            return ACCEPTED

        message = to_inbound(update.message)
        if message is None:
            logger.debug(
                f"Message in chat {update.message.chat.id} has no text or location, ignoring"
            )
            return ACCEPTED

        background_tasks.add_task(run_turn, dispatcher, message)
        return ACCEPTED

    return app
