"""Nutrition domain models."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Credentials:
    """Edamam application credentials."""

    app_id: str
    app_key: str = field(repr=False)


class NutrientEntry(BaseModel):
    """One row of an Edamam nutrient table."""

    label: str
    quantity: float
    unit: str


NutrientTable = dict[str, NutrientEntry]


class ParsedIngredient(BaseModel):
    """Parsed food match for an ingredient line."""

    model_config = ConfigDict(extra="allow")

    quantity: float | None = None
    food: str | None = None
    food_id: str | None = Field(default=None, alias="foodId")
    weight: float | None = None
    retained_weight: float | None = Field(default=None, alias="retainedWeight")
    nutrients: NutrientTable = Field(default_factory=dict)


class IngredientLine(BaseModel):
    """Ingredient text as Edamam understood it."""

    model_config = ConfigDict(extra="allow")

    text: str | None = None
    parsed: list[ParsedIngredient] = Field(default_factory=list)


class NutritionResult(BaseModel):
    """Parsed nutrition-data response.

    Calories and weight keep their JSON number type so an integer payload
    renders without a trailing ``.0``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    calories: int | float
    total_weight: int | float = Field(alias="totalWeight")
    diet_labels: list[str] = Field(default_factory=list, alias="dietLabels")
    health_labels: list[str] = Field(default_factory=list, alias="healthLabels")
    total_nutrients: NutrientTable = Field(
        default_factory=dict, alias="totalNutrients"
    )
    uri: str | None = None
    cautions: list[str] = Field(default_factory=list)
    total_daily: NutrientTable = Field(default_factory=dict, alias="totalDaily")
    total_nutrients_kcal: NutrientTable = Field(
        default_factory=dict, alias="totalNutrientsKCal"
    )
    ingredients: list[IngredientLine] = Field(default_factory=list)


@dataclass(frozen=True)
class LookupSuccess:
    """Lookup completed with a usable result."""

    result: NutritionResult


@dataclass(frozen=True)
class LookupAbsent:
    """Lookup produced nothing usable."""


LookupOutcome = LookupSuccess | LookupAbsent

ABSENT = LookupAbsent()
