"""Command handlers for bot messages."""

from dataclasses import dataclass

from edamam_bot.domain.nutrition import LookupSuccess
from edamam_bot.services.formatter import format_nutrition
from edamam_bot.services.nutrition import NutritionService
from edamam_bot.telegram_commands import BotCommand

MISSING_INGREDIENT_REPLY = "请输入食物名称。"
LOOKUP_FAILED_REPLY = "无法获取该食材的营养信息。"

DETAIL_FLAGS = frozenset({"-d", "--detail"})


@dataclass(frozen=True)
class NutritionArgs:
    """Arguments of the nutrition command."""

    ingredient: str | None
    detail: bool


def parse_nutrition_args(text: str) -> NutritionArgs:
    """Split command text into the ingredient and the detail flag.

    Detail flags are accepted anywhere; everything else is the ingredient.
    """
    tokens = text.split()
    detail = any(token in DETAIL_FLAGS for token in tokens)
    words = [token for token in tokens if token not in DETAIL_FLAGS]
    return NutritionArgs(ingredient=" ".join(words) or None, detail=detail)


@dataclass
class NutritionCommandHandler:
    """Handle the nutrition command."""

    nutrition_service: NutritionService

    async def handle(self, ingredient: str | None, detail: bool = False) -> str:
        """Return the reply text for one nutrition request."""
        if not ingredient or not ingredient.strip():
            return MISSING_INGREDIENT_REPLY
        outcome = await self.nutrition_service.lookup(ingredient)
        if not isinstance(outcome, LookupSuccess):
            return LOOKUP_FAILED_REPLY
        return format_nutrition(ingredient, outcome.result, detail)

    async def handle_text(self, text: str) -> str:
        """Parse raw command arguments and handle them."""
        args = parse_nutrition_args(text)
        return await self.handle(args.ingredient, args.detail)


def help_text() -> str:
    """Usage text listing the bot's commands."""
    nutrition = BotCommand.NUTRITION.value
    return "\n".join(
        [
            f"/{nutrition.command} <食物名称> - {nutrition.description}",
            "-d, --detail  显示详细的营养成分信息",
            f"例如：/{nutrition.command} -d 1 apple",
        ]
    )
