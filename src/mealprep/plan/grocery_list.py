"""Grocery list generation from normalized recipes."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from mealprep.enums import GroceryCategory, MeasurementSystem, MeasurementUnit, UnitClass
from mealprep.logging_config import get_logger
from mealprep.normalize.units import BASE_FACTORS, convert_and_format
from mealprep.schemas import CanonicalIngredient, CanonicalRecipe

logger = get_logger(__name__)


@dataclass
class GroceryItem:
    """A single line of the grocery list."""

    name: str
    quantity: float
    unit: MeasurementUnit
    category: GroceryCategory
    recipe_sources: list[str] = field(default_factory=list)

    @property
    def normalized_name(self) -> str:
        return self.name.lower().strip()

    def display_quantity(self, system: MeasurementSystem) -> str:
        """Quantity converted to ``system`` and formatted for display."""
        return convert_and_format(self.quantity, self.unit, system)


@dataclass
class GroceryList:
    """Aggregated ingredients for a set of recipes."""

    items: list[GroceryItem] = field(default_factory=list)

    def items_by_category(self) -> dict[GroceryCategory, list[GroceryItem]]:
        """Group items by category, in store-walking order."""
        grouped: dict[GroceryCategory, list[GroceryItem]] = {}
        for item in sorted(self.items, key=lambda i: (i.category.sort_order, i.normalized_name)):
            grouped.setdefault(item.category, []).append(item)
        return grouped

    def display_lines(self, system: MeasurementSystem) -> list[str]:
        """Render every item as "<quantity> <unit> <name>" in category order."""
        return [
            f"{item.display_quantity(system)} {item.name}"
            for items in self.items_by_category().values()
            for item in items
        ]


def _item_key(ingredient: CanonicalIngredient) -> tuple[str, UnitClass, MeasurementUnit | None]:
    # Count units only merge with the identical unit ("2 can" + "1 clove" stay apart).
    unit_class = ingredient.unit.unit_class
    exact_unit = ingredient.unit if unit_class is UnitClass.COUNT else None
    return ingredient.name.lower().strip(), unit_class, exact_unit


def build_grocery_list(recipes: Iterable[CanonicalRecipe]) -> GroceryList:
    """
    Aggregate the ingredients of many recipes into a grocery list.

    Ingredients with the same name and unit class are summed in the unit
    first seen for that ingredient; e.g. 1 cup milk + 250 ml milk becomes
    about 2.06 cup milk.

    Args:
        recipes: Canonical recipes, typically the meals of a plan.

    Returns:
        GroceryList with one item per (name, unit class).
    """
    items: dict[tuple[str, UnitClass, MeasurementUnit | None], GroceryItem] = {}
    recipe_count = 0

    for recipe in recipes:
        recipe_count += 1
        source = str(recipe.external_id)
        for ingredient in recipe.ingredients:
            key = _item_key(ingredient)
            existing = items.get(key)

            if existing is None:
                items[key] = GroceryItem(
                    name=ingredient.name,
                    quantity=ingredient.quantity,
                    unit=ingredient.unit,
                    category=ingredient.category,
                    recipe_sources=[source],
                )
                continue

            if ingredient.unit is existing.unit:
                existing.quantity += ingredient.quantity
            else:
                # Only volume and weight units reach here with differing units
                base = ingredient.quantity * BASE_FACTORS[ingredient.unit]
                existing.quantity += base / BASE_FACTORS[existing.unit]

            if source not in existing.recipe_sources:
                existing.recipe_sources.append(source)

    grocery_list = GroceryList(items=list(items.values()))
    logger.info(f"Built grocery list: {len(grocery_list.items)} items from {recipe_count} recipes")
    return grocery_list
