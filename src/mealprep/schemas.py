"""Canonical domain model produced by the recipe normalizer."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from mealprep.enums import (
    CuisineType,
    DietaryRestriction,
    GroceryCategory,
    MealType,
    MeasurementSystem,
    MeasurementUnit,
    RecipeComplexity,
)
from mealprep.normalize.tags import matches_diet
from mealprep.normalize.units import convert_quantity, format_quantity

# Spoonacular serves recipe images in these sizes; 636x393 is the largest.
SPOONACULAR_IMAGE_SIZES = ("90x90", "240x150", "312x150", "312x231", "480x360", "556x370")
SPOONACULAR_MAX_IMAGE_SIZE = "636x393"


class CanonicalModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CanonicalIngredient(CanonicalModel):
    """Ingredient line resolved to a canonical unit and grocery category."""

    name: str
    quantity: float
    unit: MeasurementUnit
    category: GroceryCategory

    def display_quantity(self, system: MeasurementSystem | None = None) -> str:
        """Format the quantity, converting to ``system`` first when given."""
        quantity, unit = self.quantity, self.unit
        if system is not None:
            quantity, unit = convert_quantity(quantity, unit, system)
        return format_quantity(quantity, unit)


class CanonicalRecipe(CanonicalModel):
    """Recipe in the shape consumed by the planner, grocery list and UI."""

    id: str | None = None
    external_id: int
    title: str
    image_url: str | None = None
    ready_in_minutes: int
    servings: int
    calories: int
    protein_grams: int
    carbs_grams: int
    fat_grams: int
    instructions: tuple[str, ...] = ()
    cuisine_type: CuisineType | None = None
    meal_type: MealType
    diets: tuple[str, ...] = ()
    dish_types: tuple[str, ...] = ()
    health_score: int
    source_url: str | None = None
    credits_text: str | None = None
    ingredients: tuple[CanonicalIngredient, ...] = ()
    created_at: datetime | None = None
    complexity: RecipeComplexity

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_calories(self) -> int:
        """Calories for the whole recipe; ``calories`` is per serving."""
        return self.calories * max(self.servings, 1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ready_in_formatted(self) -> str:
        """Human-readable total time, e.g. "45 min", "1h", "1h 15m"."""
        if self.ready_in_minutes < 60:
            return f"{self.ready_in_minutes} min"
        hours, minutes = divmod(self.ready_in_minutes, 60)
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def high_res_image_url(self) -> str | None:
        """Image URL upgraded to the largest Spoonacular size."""
        if self.image_url is None:
            return None
        for size in SPOONACULAR_IMAGE_SIZES:
            if size in self.image_url:
                return self.image_url.replace(size, SPOONACULAR_MAX_IMAGE_SIZE)
        return self.image_url

    def matches_diet(self, target: DietaryRestriction) -> bool:
        """Check the recipe's diet tags against a dietary restriction."""
        return matches_diet(self.diets, target)
