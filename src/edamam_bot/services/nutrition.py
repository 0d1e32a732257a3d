"""Nutrition lookups against Edamam."""

import logging
from dataclasses import dataclass

from edamam_bot.adapters.edamam_client import EdamamClient
from edamam_bot.domain.nutrition import (
    ABSENT,
    LookupOutcome,
    LookupSuccess,
    NutritionResult,
)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Turn Edamam responses into lookup outcomes.

    Every failure (non-200 status, transport error, unparseable body) collapses
    into ``ABSENT``; the distinguishing detail only goes to the log.
    """

    edamam_client: EdamamClient

    async def lookup(self, query: str) -> LookupOutcome:
        """Look up nutrition data for one ingredient description."""
        try:
            payload = await self.edamam_client.fetch_nutrition_data(query)
            result = NutritionResult.model_validate(payload)
        except Exception as exc:
            _logger.warning(
                "Edamam lookup failed: ingredient=%s status=%s error=%s",
                query,
                _status_code_from_exception(exc),
                exc,
            )
            return ABSENT
        _logger.info(
            "Edamam lookup succeeded: ingredient=%s payload=%s", query, payload
        )
        return LookupSuccess(result)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract an HTTP status code from an exception, if it carries one."""
    status_code = getattr(exc, "status_code", None)
    if status_code is None:
        response = getattr(exc, "response", None)
        status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
