"""Grocery aisle classification."""

from mealprep.enums import GroceryCategory
from mealprep.logging_config import get_logger
from mealprep.normalize.rules import KeywordRule, first_match, rule

logger = get_logger(__name__)


# Order matters: "Dairy and Produce" is produce, "Baking Oils" is bakery.
AISLE_RULES: tuple[KeywordRule[GroceryCategory], ...] = (
    rule(GroceryCategory.PRODUCE, "produce", "vegetable", "fruit"),
    rule(GroceryCategory.MEAT, "meat", "seafood", "poultry"),
    rule(GroceryCategory.DAIRY, "dairy", "milk", "cheese", "egg"),
    rule(GroceryCategory.BAKERY, "bak", "bread"),
    rule(GroceryCategory.FROZEN, "frozen"),
    rule(GroceryCategory.CANNED, "canned"),
    rule(GroceryCategory.CONDIMENTS, "condiment", "sauce", "oil", "vinegar"),
    rule(GroceryCategory.SPICES, "spice", "season", "herb"),
    rule(GroceryCategory.BEVERAGES, "beverage", "drink"),
    rule(GroceryCategory.SNACKS, "snack"),
    rule(GroceryCategory.PANTRY, "pasta", "rice", "grain", "cereal"),
)


def category_from_aisle(aisle: str | None) -> GroceryCategory:
    """
    Classify a free-text grocery aisle label.

    Total over all inputs: unmatched or empty labels yield ``OTHER``.

    Examples:
        "Dairy and Egg Products" -> DAIRY
        "Pasta and Rice" -> PANTRY
        "Health Foods" -> OTHER
    """
    label = (aisle or "").lower()
    category = first_match(AISLE_RULES, label, GroceryCategory.OTHER)
    if category is GroceryCategory.OTHER:
        logger.debug(f"Unclassified aisle '{aisle}', using {category.value}")
    return category
