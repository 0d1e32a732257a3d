"""Edamam Nutrition Analysis API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from edamam_bot.domain.nutrition import Credentials

NUTRITION_DATA_URL = "https://api.edamam.com/api/nutrition-data"


class EdamamStatusError(Exception):
    """Raised when Edamam answers with anything other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Edamam responded with status {status_code}")
        self.status_code = status_code


class EdamamClient(Protocol):
    """Interface for Edamam nutrition-data lookups."""

    async def fetch_nutrition_data(self, ingredient: str) -> dict[str, object]:
        """Fetch nutrition data for a free-text ingredient and return raw JSON."""


@dataclass
class HttpxEdamamClient(EdamamClient):
    """HTTPX-backed Edamam client."""

    credentials: Credentials
    http_client: httpx.AsyncClient
    url: str = NUTRITION_DATA_URL

    @classmethod
    def create(cls, credentials: Credentials) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session."""
        return cls(credentials=credentials, http_client=httpx.AsyncClient())

    async def fetch_nutrition_data(self, ingredient: str) -> dict[str, object]:
        """GET nutrition-data in cooking mode; only a 200 counts as success."""
        response = await self.http_client.get(
            self.url,
            params={
                "app_id": self.credentials.app_id,
                "app_key": self.credentials.app_key,
                "nutrition_type": "cooking",
                "ingr": ingredient,
            },
        )
        if response.status_code != httpx.codes.OK:
            raise EdamamStatusError(response.status_code)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
