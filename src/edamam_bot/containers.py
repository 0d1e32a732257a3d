"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from edamam_bot.adapters.edamam_client import HttpxEdamamClient
from edamam_bot.adapters.telegram_client import HttpxTelegramClient, TelegramClient
from edamam_bot.config import Settings
from edamam_bot.services.commands import NutritionCommandHandler
from edamam_bot.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    telegram_client: TelegramClient
    nutrition_service: NutritionService
    nutrition_command_handler: NutritionCommandHandler
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    telegram_client = HttpxTelegramClient.create(resolved_settings.telegram_bot_token)
    edamam_client = HttpxEdamamClient.create(resolved_settings.edamam_credentials())
    nutrition_service = NutritionService(edamam_client)

    async def close_resources() -> None:
        try:
            await telegram_client.close()
        finally:
            await edamam_client.close()

    return AppContainer(
        settings=resolved_settings,
        telegram_client=telegram_client,
        nutrition_service=nutrition_service,
        nutrition_command_handler=NutritionCommandHandler(nutrition_service),
        close_resources=close_resources,
    )
