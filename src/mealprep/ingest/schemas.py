"""Pydantic schemas for validating raw recipe records from the recipe source."""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RawRecord(BaseModel):
    """Base for source records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class RawIngredientRecord(RawRecord):
    """Ingredient line as delivered by the recipe source."""

    name: str = ""
    amount: float = 0.0
    unit: str = ""
    aisle: str = ""

    @field_validator("name", "unit", "aisle", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing text as empty and strip whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Any:
        """Handle missing amounts and decimal commas."""
        if v is None or v == "":
            return 0.0
        if isinstance(v, str):
            return v.replace(",", ".").strip()
        return v


class RawRecipeRecord(RawRecord):
    """Recipe document as stored by the recipe import job."""

    id: str | None = None
    external_id: int
    title: str
    image_url: str | None = None
    ready_in_minutes: int = 0
    servings: int = 1
    calories: int = 0
    protein_grams: int = 0
    carbs_grams: int = 0
    fat_grams: int = 0
    instructions: list[str] = Field(default_factory=list)
    cuisine_type: str = ""
    meal_type: str = ""
    diets: list[str] = Field(default_factory=list)
    dish_types: list[str] = Field(default_factory=list)
    health_score: int = 0
    source_url: str | None = None
    credits_text: str | None = None
    ingredients: list[RawIngredientRecord] = Field(default_factory=list)
    created_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        return str(v)

    @field_validator(
        "ready_in_minutes",
        "servings",
        "calories",
        "protein_grams",
        "carbs_grams",
        "fat_grams",
        "health_score",
        mode="before",
    )
    @classmethod
    def coerce_whole_number(cls, v: Any) -> Any:
        """Round fractional nutrition and time values from the source."""
        if v is None or v == "":
            return 0
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                return v
        if isinstance(v, float) and math.isfinite(v):
            return round(v)
        return v

    @field_validator("cuisine_type", "meal_type", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("instructions", "diets", "dish_types", mode="before")
    @classmethod
    def coerce_string_list(cls, v: Any) -> Any:
        """Accept a null or a bare string where a list is expected."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, v: Any) -> Any:
        if v is None:
            return []
        return v
