"""Tests for recipe normalization and raw record validation."""

import pytest
from pydantic import ValidationError

from mealprep.enums import (
    CuisineType,
    DietaryRestriction,
    GroceryCategory,
    MealType,
    MeasurementSystem,
    MeasurementUnit,
    RecipeComplexity,
)
from mealprep.ingest.schemas import RawIngredientRecord, RawRecipeRecord
from mealprep.logging_config import batch_id_ctx
from mealprep.normalize.recipes import normalize_batch, normalize_ingredient, normalize_recipe

# =============================================================================
# Raw Record Tests
# =============================================================================


class TestRawIngredientRecord:
    """Tests for RawIngredientRecord coercion."""

    def test_missing_fields(self):
        """Test that missing text and amounts get empty defaults."""
        record = RawIngredientRecord.model_validate({"name": "salt"})
        assert record.amount == 0.0
        assert record.unit == ""
        assert record.aisle == ""

    def test_null_values(self):
        """Test that nulls are treated as missing."""
        record = RawIngredientRecord.model_validate(
            {"name": " salt ", "amount": None, "unit": None, "aisle": None}
        )
        assert record.name == "salt"
        assert record.amount == 0.0
        assert record.unit == ""

    def test_decimal_comma(self):
        """Test parsing amounts with a decimal comma."""
        assert RawIngredientRecord.model_validate({"amount": "1,5"}).amount == 1.5

    def test_invalid_amount(self):
        """Test that non-numeric amounts are rejected."""
        with pytest.raises(ValidationError):
            RawIngredientRecord.model_validate({"amount": "a handful"})


class TestRawRecipeRecord:
    """Tests for RawRecipeRecord coercion."""

    def test_camel_case_payload(self, raw_recipe):
        """Test validating the source's camelCase shape."""
        record = RawRecipeRecord.model_validate(raw_recipe)
        assert record.external_id == 716429
        assert record.ready_in_minutes == 45
        assert len(record.ingredients) == 8

    def test_snake_case_payload(self):
        """Test that field names are accepted as well as aliases."""
        record = RawRecipeRecord.model_validate({"external_id": 5, "title": "Soup"})
        assert record.external_id == 5

    def test_defaults(self, minimal_recipe):
        """Test defaults for a minimal payload."""
        record = RawRecipeRecord.model_validate(minimal_recipe)
        assert record.servings == 1
        assert record.calories == 0
        assert record.instructions == []
        assert record.ingredients == []

    def test_numeric_strings_and_fractions(self, minimal_recipe):
        """Test that numbers as strings and fractional values are rounded."""
        record = RawRecipeRecord.model_validate(
            {**minimal_recipe, "readyInMinutes": "45", "calories": 584.6, "healthScore": None}
        )
        assert record.ready_in_minutes == 45
        assert record.calories == 585
        assert record.health_score == 0

    def test_bare_string_lists(self, minimal_recipe):
        """Test that a bare string or null is accepted where a list is expected."""
        record = RawRecipeRecord.model_validate(
            {**minimal_recipe, "instructions": "Toast the bread.", "diets": None}
        )
        assert record.instructions == ["Toast the bread."]
        assert record.diets == []

    def test_missing_title(self):
        """Test that a record without a title is rejected."""
        with pytest.raises(ValidationError):
            RawRecipeRecord.model_validate({"externalId": 1})

    def test_invalid_external_id(self):
        """Test that a non-numeric external id is rejected."""
        with pytest.raises(ValidationError):
            RawRecipeRecord.model_validate({"externalId": "abc", "title": "Soup"})

    def test_unknown_fields_ignored(self, minimal_recipe):
        """Test that extra source fields are ignored."""
        record = RawRecipeRecord.model_validate({**minimal_recipe, "spoonacularScore": 99})
        assert not hasattr(record, "spoonacular_score")


# =============================================================================
# Normalizer Tests
# =============================================================================


class TestNormalizeIngredient:
    """Tests for normalize_ingredient function."""

    def test_resolves_unit_and_category(self):
        """Test that unit and aisle are canonicalized."""
        raw = RawIngredientRecord(name="milk", amount=1.5, unit="Cups", aisle="Dairy")
        ingredient = normalize_ingredient(raw)
        assert ingredient.name == "milk"
        assert ingredient.quantity == 1.5
        assert ingredient.unit is MeasurementUnit.CUP
        assert ingredient.category is GroceryCategory.DAIRY

    def test_display_quantity(self):
        """Test display with and without conversion."""
        ingredient = normalize_ingredient(RawIngredientRecord(name="milk", amount=2, unit="cup"))
        assert ingredient.display_quantity() == "2 cup"
        assert ingredient.display_quantity(MeasurementSystem.METRIC) == "473 ml"


class TestNormalizeRecipe:
    """Tests for normalize_recipe function."""

    def test_full_recipe(self, raw_recipe):
        """Test normalizing a complete recipe document."""
        recipe = normalize_recipe(raw_recipe)

        assert recipe.id == "doc-716429"
        assert recipe.external_id == 716429
        assert recipe.title.startswith("Pasta with Garlic")
        assert recipe.cuisine_type is CuisineType.ITALIAN
        assert recipe.meal_type is MealType.DINNER
        assert recipe.complexity is RecipeComplexity.MEDIUM
        assert recipe.diets == ("dairy free", "lacto ovo vegetarian")
        assert len(recipe.instructions) == 5
        assert recipe.created_at is not None

    def test_ingredients(self, raw_recipe):
        """Test ingredient units and categories."""
        recipe = normalize_recipe(raw_recipe)
        resolved = [(i.name, i.unit, i.category) for i in recipe.ingredients]

        assert resolved == [
            ("butter", MeasurementUnit.TABLESPOON, GroceryCategory.DAIRY),
            ("cauliflower florets", MeasurementUnit.CUP, GroceryCategory.PRODUCE),
            ("garlic", MeasurementUnit.CLOVE, GroceryCategory.PRODUCE),
            ("extra virgin olive oil", MeasurementUnit.TABLESPOON, GroceryCategory.CONDIMENTS),
            ("pasta", MeasurementUnit.OUNCE, GroceryCategory.PANTRY),
            ("red pepper flakes", MeasurementUnit.PIECE, GroceryCategory.SPICES),
            ("white wine", MeasurementUnit.MILLILITER, GroceryCategory.BEVERAGES),
            ("whole wheat bread crumbs", MeasurementUnit.CUP, GroceryCategory.PANTRY),
        ]

    def test_quantities_pass_through(self, raw_recipe):
        """Test that amounts are not converted during normalization."""
        recipe = normalize_recipe(raw_recipe)
        assert [i.quantity for i in recipe.ingredients] == [1, 2, 5, 2, 6, 2, 60, 0.25]

    def test_accepts_validated_record(self, raw_recipe):
        """Test normalizing an already validated record."""
        record = RawRecipeRecord.model_validate(raw_recipe)
        assert normalize_recipe(record) == normalize_recipe(raw_recipe)

    def test_unknown_labels(self, minimal_recipe):
        """Test defaults for unknown meal types and cuisines."""
        recipe = normalize_recipe({**minimal_recipe, "mealType": "Brunch", "cuisineType": "Cajun"})
        assert recipe.meal_type is MealType.DINNER
        assert recipe.cuisine_type is None

    def test_minimal_recipe(self, minimal_recipe):
        """Test that a minimal recipe is easy and has no ingredients."""
        recipe = normalize_recipe(minimal_recipe)
        assert recipe.complexity is RecipeComplexity.EASY
        assert recipe.ingredients == ()

    def test_invalid_payload_raises(self):
        """Test that an invalid mapping raises ValidationError."""
        with pytest.raises(ValidationError):
            normalize_recipe({"title": "No id"})

    def test_canonical_recipe_is_frozen(self, raw_recipe):
        """Test that canonical recipes cannot be modified."""
        recipe = normalize_recipe(raw_recipe)
        with pytest.raises(ValidationError):
            recipe.title = "Changed"


class TestCanonicalRecipeDerivedValues:
    """Tests for values derived from a canonical recipe."""

    def test_total_calories(self, raw_recipe):
        """Test that total calories multiply by servings."""
        assert normalize_recipe(raw_recipe).total_calories == 1168

    def test_total_calories_zero_servings(self, minimal_recipe):
        """Test that zero servings count as one."""
        recipe = normalize_recipe({**minimal_recipe, "calories": 300, "servings": 0})
        assert recipe.total_calories == 300

    @pytest.mark.parametrize(
        "minutes,expected", [(45, "45 min"), (60, "1h"), (75, "1h 15m"), (0, "0 min")]
    )
    def test_ready_in_formatted(self, minimal_recipe, minutes, expected):
        """Test human-readable cooking time."""
        recipe = normalize_recipe({**minimal_recipe, "readyInMinutes": minutes})
        assert recipe.ready_in_formatted == expected

    def test_high_res_image_url(self, raw_recipe):
        """Test that Spoonacular images are upgraded to the largest size."""
        recipe = normalize_recipe(raw_recipe)
        assert recipe.high_res_image_url == "https://img.spoonacular.com/recipes/716429-636x393.jpg"

    def test_other_image_url_unchanged(self, minimal_recipe):
        """Test that other image URLs are returned unchanged."""
        recipe = normalize_recipe({**minimal_recipe, "imageUrl": "https://example.com/toast.png"})
        assert recipe.high_res_image_url == "https://example.com/toast.png"
        assert normalize_recipe(minimal_recipe).high_res_image_url is None

    def test_matches_diet(self, raw_recipe):
        """Test diet matching against the recipe's tags."""
        recipe = normalize_recipe(raw_recipe)
        assert recipe.matches_diet(DietaryRestriction.VEGETARIAN)
        assert not recipe.matches_diet(DietaryRestriction.VEGAN)
        assert not recipe.matches_diet(DietaryRestriction.DAIRY_FREE)

    def test_serializes_with_camel_case(self, raw_recipe):
        """Test JSON serialization uses camelCase keys and raw identifiers."""
        data = normalize_recipe(raw_recipe).model_dump(mode="json", by_alias=True)
        assert data["externalId"] == 716429
        assert data["mealType"] == "Dinner"
        assert data["cuisineType"] == "Italian"
        assert data["complexity"] == 2
        assert data["ingredients"][0]["unit"] == "tbsp"
        assert data["ingredients"][0]["category"] == "Dairy & Eggs"


# =============================================================================
# Batch Tests
# =============================================================================


class TestNormalizeBatch:
    """Tests for normalize_batch function."""

    def test_all_valid(self, raw_recipe, minimal_recipe):
        """Test a batch with only valid payloads."""
        result = normalize_batch([raw_recipe, minimal_recipe], batch_id="batch-1")
        assert result.batch_id == "batch-1"
        assert result.total == 2
        assert [r.external_id for r in result.normalized] == [716429, 1]
        assert result.errors == []

    def test_rejects_are_collected(self, raw_recipe):
        """Test that invalid payloads are reported instead of raising."""
        payloads = [raw_recipe, {"title": "No id"}, {"externalId": "abc", "title": "x"}]
        result = normalize_batch(payloads)

        assert len(result.normalized) == 1
        assert len(result.errors) == 2
        assert result.errors[0].startswith("record 1:")
        assert result.errors[1].startswith("record 2 (externalId=abc):")
        assert "validation error" in result.errors[1]

    def test_generates_batch_id(self):
        """Test that a batch id is generated when none is given."""
        result = normalize_batch([])
        assert result.batch_id
        assert result.total == 0

    def test_to_dict(self, raw_recipe):
        """Test serialization of a batch result."""
        data = normalize_batch([raw_recipe, {}], batch_id="b").to_dict()
        assert data["batch_id"] == "b"
        assert data["total"] == 2
        assert data["normalized"][0]["externalId"] == 716429
        assert len(data["errors"]) == 1

    def test_logging_context_restored(self, raw_recipe):
        """Test that the batch id is only set while the batch runs."""
        normalize_batch([raw_recipe], batch_id="scoped")
        assert batch_id_ctx.get() is None
