"""Telegram bot command configuration."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TelegramCommand:
    """Declarative bot command definition."""

    command: str
    description: str


class BotCommand(Enum):
    """Commands the bot answers to."""

    NUTRITION = TelegramCommand("nutrition", "查询食物的营养信息")
    HELP = TelegramCommand("help", "使用说明")


def telegram_commands() -> list[dict[str, str]]:
    """Return commands formatted for Telegram API."""
    return [
        {"command": entry.value.command, "description": entry.value.description}
        for entry in BotCommand
    ]


def split_command(text: str) -> tuple[str, str] | None:
    """Split "/cmd@bot args" into ("cmd", "args"); None for plain text."""
    if not text.startswith("/"):
        return None
    head, *rest = text.split(maxsplit=1)
    name = head[1:].split("@", maxsplit=1)[0].lower()
    return name, rest[0].strip() if rest else ""


CHAT_MENU_BUTTON: dict[str, object] = {"type": "commands"}
