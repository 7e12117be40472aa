"""Pytest configuration and shared fixtures."""

import pytest

from mealprep.config import get_settings
from mealprep.logging_config import clear_context

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def _reset_state():
    """Keep cached settings and logging context from leaking between tests."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


# =============================================================================
# Raw Recipe Fixtures
# =============================================================================


@pytest.fixture
def raw_ingredients():
    """Ingredient lines in the recipe source's shape."""
    return [
        {"name": "butter", "amount": 1, "unit": "tbsp", "aisle": "Milk, Eggs, Other Dairy"},
        {"name": "cauliflower florets", "amount": 2, "unit": "cups", "aisle": "Produce"},
        {"name": "garlic", "amount": 5, "unit": "cloves", "aisle": "Produce"},
        {
            "name": "extra virgin olive oil",
            "amount": 2,
            "unit": "Tbsp",
            "aisle": "Oil, Vinegar, Salad Dressing",
        },
        {"name": "pasta", "amount": 6, "unit": "ounces", "aisle": "Pasta and Rice"},
        {
            "name": "red pepper flakes",
            "amount": 2,
            "unit": "pinches",
            "aisle": "Spices and Seasonings",
        },
        {"name": "white wine", "amount": 60, "unit": "ml", "aisle": "Alcoholic Beverages"},
        {
            "name": "whole wheat bread crumbs",
            "amount": 0.25,
            "unit": "cup",
            "aisle": "Pasta and Rice",
        },
    ]


@pytest.fixture
def raw_recipe(raw_ingredients):
    """A complete recipe document as stored by the recipe import job."""
    return {
        "id": "doc-716429",
        "externalId": 716429,
        "title": "Pasta with Garlic, Scallions, Cauliflower & Breadcrumbs",
        "imageUrl": "https://img.spoonacular.com/recipes/716429-312x231.jpg",
        "readyInMinutes": 45,
        "servings": 2,
        "calories": 584,
        "proteinGrams": 19,
        "carbsGrams": 84,
        "fatGrams": 20,
        "instructions": [
            "Cook the pasta until al dente.",
            "Roast the cauliflower.",
            "Saute the garlic in butter and oil.",
            "Toss everything together with the wine.",
            "Top with bread crumbs.",
        ],
        "cuisineType": "italian",
        "mealType": "dinner",
        "diets": ["dairy free", "lacto ovo vegetarian"],
        "dishTypes": ["lunch", "main course"],
        "healthScore": 19,
        "sourceUrl": "https://fullbellysisters.blogspot.com/2012/06/pasta.html",
        "creditsText": "Full Belly Sisters",
        "ingredients": raw_ingredients,
        "createdAt": "2025-01-15T10:30:00Z",
    }


@pytest.fixture
def minimal_recipe():
    """The smallest payload that still validates."""
    return {"externalId": 1, "title": "Toast"}


@pytest.fixture
def make_recipe_payload():
    """Factory building a recipe payload from (name, amount, unit, aisle) tuples."""

    def _make(external_id: int, *ingredients: tuple) -> dict:
        return {
            "externalId": external_id,
            "title": f"Recipe {external_id}",
            "ingredients": [
                {"name": name, "amount": amount, "unit": unit, "aisle": aisle}
                for name, amount, unit, aisle in ingredients
            ],
        }

    return _make
