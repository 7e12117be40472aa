"""Meal type, cuisine and diet tag matching."""

from collections.abc import Iterable

from mealprep.enums import CuisineType, DietaryRestriction, MealType
from mealprep.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MEAL_TYPE = MealType.DINNER

_MEAL_TYPES: dict[str, MealType] = {meal.value.lower(): meal for meal in MealType}
_CUISINES: dict[str, CuisineType] = {cuisine.value.lower(): cuisine for cuisine in CuisineType}


def meal_type_from_string(raw: str | None) -> MealType:
    """Resolve a meal type case-insensitively, defaulting to dinner."""
    meal_type = _MEAL_TYPES.get((raw or "").lower())
    if meal_type is None:
        logger.debug(f"Unknown meal type '{raw}', using {DEFAULT_MEAL_TYPE.value}")
        return DEFAULT_MEAL_TYPE
    return meal_type


def cuisine_from_string(raw: str | None) -> CuisineType | None:
    """Resolve a cuisine case-insensitively; None when there is no exact match."""
    cuisine = _CUISINES.get((raw or "").lower())
    if cuisine is None and raw:
        logger.debug(f"Unresolved cuisine '{raw}'")
    return cuisine


def matches_diet(tags: Iterable[str], target: DietaryRestriction) -> bool:
    """
    Check whether any diet tag contains the target diet's identifier.

    Containment, not equality: a tag "dairy-free paleo" satisfies PALEO.

    Examples:
        (["Vegetarian", "Gluten Free"], VEGETARIAN) -> True
        (["Vegetarian", "Gluten Free"], VEGAN) -> False
    """
    needle = target.value.lower()
    return any(needle in tag.lower() for tag in tags)
