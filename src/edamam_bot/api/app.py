"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from edamam_bot.api.telegram_models import TelegramMessage, TelegramUpdate
from edamam_bot.app_logging import configure_logging
from edamam_bot.config import parse_allowed_user_ids
from edamam_bot.containers import AppContainer
from edamam_bot.services.commands import help_text
from edamam_bot.telegram_commands import (
    CHAT_MENU_BUTTON,
    BotCommand,
    split_command,
    telegram_commands,
)

_KNOWN_COMMANDS = {entry.value.command for entry in BotCommand} | {"start"}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    allowed_user_ids = parse_allowed_user_ids(
        container.settings.telegram_allowed_user_ids
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        telegram_client = app.state.container.telegram_client
        try:
            await telegram_client.set_my_commands(telegram_commands())
            await telegram_client.set_chat_menu_button(CHAT_MENU_BUTTON)
        except Exception:
            logger.exception("Failed to sync Telegram bot commands")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/telegram/webhook")
    async def telegram_webhook(
        update: TelegramUpdate, request: Request
    ) -> dict[str, str]:
        """Handle Telegram webhook updates."""
        state_container: AppContainer = request.app.state.container
        message = update.message
        if message is None or not message.text:
            return {"status": "ok"}
        command = split_command(message.text)
        if command is None or command[0] not in _KNOWN_COMMANDS:
            return {"status": "ok"}

        if not _is_user_allowed(message, allowed_user_ids):
            await state_container.telegram_client.send_message(
                chat_id=message.chat.id,
                text="This bot is private.",
            )
            return {"status": "ok"}

        name, arguments = command
        if name == BotCommand.NUTRITION.value.command:
            reply = await state_container.nutrition_command_handler.handle_text(
                arguments
            )
        else:
            reply = help_text()

        await state_container.telegram_client.send_message(
            chat_id=message.chat.id,
            text=reply,
            reply_to_message_id=message.message_id,
        )
        return {"status": "ok"}

    return app


def _is_user_allowed(message: TelegramMessage, allowed: set[int] | None) -> bool:
    """Return true when the sender may use the bot."""
    if allowed is None:
        return True
    return message.from_user is not None and message.from_user.id in allowed
