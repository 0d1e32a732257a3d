"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from edamam_bot.adapters.edamam_client import EdamamClient
from edamam_bot.adapters.telegram_client import TelegramClient
from edamam_bot.config import Settings
from edamam_bot.containers import AppContainer
from edamam_bot.services.commands import NutritionCommandHandler
from edamam_bot.services.nutrition import NutritionService


def apple_payload() -> dict[str, object]:
    """A trimmed nutrition-data response for "1 apple"."""
    return {
        "uri": "http://www.edamam.com/ontologies/edamam.owl#recipe_abc",
        "calories": 95,
        "totalWeight": 182,
        "dietLabels": ["balanced"],
        "healthLabels": ["vegan", "gluten-free"],
        "cautions": [],
        "totalNutrients": {
            "ENERC_KCAL": {"label": "Energy", "quantity": 95.432, "unit": "kcal"},
        },
        "totalDaily": {
            "ENERC_KCAL": {"label": "Energy", "quantity": 4.77, "unit": "%"},
        },
        "ingredients": [
            {
                "text": "1 apple",
                "parsed": [
                    {
                        "quantity": 1,
                        "food": "apple",
                        "foodId": "food_a1gb9ubb72c7snbuxr3weagwv0dd",
                        "weight": 182,
                        "retainedWeight": 182,
                        "nutrients": {},
                    }
                ],
            }
        ],
    }


@dataclass
class FakeEdamamClient(EdamamClient):
    """Fake Edamam client returning a payload or raising an error."""

    payload: dict[str, object] = field(default_factory=apple_payload)
    error: BaseException | None = None
    queries: list[str] = field(default_factory=list)

    async def fetch_nutrition_data(self, ingredient: str) -> dict[str, object]:
        self.queries.append(ingredient)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeTelegramClient(TelegramClient):
    """Fake Telegram client that records messages."""

    messages: list[tuple[int, str]] = field(default_factory=list)
    reply_to: list[int | None] = field(default_factory=list)
    commands: list[dict[str, str]] | None = None
    menu_button: dict[str, object] | None = None
    closed: bool = False

    async def send_message(
        self, chat_id: int, text: str, reply_to_message_id: int | None = None
    ) -> None:
        self.messages.append((chat_id, text))
        self.reply_to.append(reply_to_message_id)

    async def set_my_commands(self, commands: list[dict[str, str]]) -> None:
        self.commands = commands

    async def set_chat_menu_button(
        self, menu_button: dict[str, object] | None = None
    ) -> None:
        self.menu_button = menu_button


@pytest.fixture
def settings() -> Settings:
    return Settings(
        edamam_app_id="app-id",
        edamam_app_key="app-key",
        telegram_bot_token="test-token",
    )


@pytest.fixture
def edamam_client() -> FakeEdamamClient:
    return FakeEdamamClient()


@pytest.fixture
def telegram_client() -> FakeTelegramClient:
    return FakeTelegramClient()


@pytest.fixture
def container(
    settings: Settings,
    edamam_client: FakeEdamamClient,
    telegram_client: FakeTelegramClient,
) -> AppContainer:
    nutrition_service = NutritionService(edamam_client)

    async def close_resources() -> None:
        telegram_client.closed = True

    return AppContainer(
        settings=settings,
        telegram_client=telegram_client,
        nutrition_service=nutrition_service,
        nutrition_command_handler=NutritionCommandHandler(nutrition_service),
        close_resources=close_resources,
    )


@pytest.fixture
def payload() -> dict[str, object]:
    return apple_payload()
