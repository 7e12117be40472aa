"""Turn raw recipe records into the canonical domain model."""

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from mealprep.ingest.schemas import RawIngredientRecord, RawRecipeRecord
from mealprep.logging_config import LoggingContext, get_logger
from mealprep.normalize.categories import category_from_aisle
from mealprep.normalize.complexity import estimate_complexity
from mealprep.normalize.tags import cuisine_from_string, meal_type_from_string
from mealprep.normalize.units import unit_from_string
from mealprep.schemas import CanonicalIngredient, CanonicalRecipe

logger = get_logger(__name__)


def normalize_ingredient(raw: RawIngredientRecord) -> CanonicalIngredient:
    """Resolve an ingredient's unit and aisle; the amount passes through."""
    return CanonicalIngredient(
        name=raw.name,
        quantity=raw.amount,
        unit=unit_from_string(raw.unit),
        category=category_from_aisle(raw.aisle),
    )


def normalize_recipe(raw: RawRecipeRecord | Mapping[str, Any]) -> CanonicalRecipe:
    """
    Normalize one recipe record.

    Args:
        raw: A validated record, or a mapping in the source's camelCase shape.

    Returns:
        The canonical recipe. Unknown meal types become dinner, unknown
        cuisines are left unset, and every ingredient gets a unit and category.

    Raises:
        pydantic.ValidationError: If a mapping cannot be coerced into a record.
    """
    record = raw if isinstance(raw, RawRecipeRecord) else RawRecipeRecord.model_validate(raw)

    return CanonicalRecipe(
        id=record.id,
        external_id=record.external_id,
        title=record.title,
        image_url=record.image_url,
        ready_in_minutes=record.ready_in_minutes,
        servings=record.servings,
        calories=record.calories,
        protein_grams=record.protein_grams,
        carbs_grams=record.carbs_grams,
        fat_grams=record.fat_grams,
        instructions=tuple(record.instructions),
        cuisine_type=cuisine_from_string(record.cuisine_type),
        meal_type=meal_type_from_string(record.meal_type),
        diets=tuple(record.diets),
        dish_types=tuple(record.dish_types),
        health_score=record.health_score,
        source_url=record.source_url,
        credits_text=record.credits_text,
        ingredients=tuple(normalize_ingredient(i) for i in record.ingredients),
        created_at=record.created_at,
        complexity=estimate_complexity(record.ready_in_minutes, len(record.instructions)),
    )


@dataclass
class NormalizationResult:
    """Outcome of normalizing a batch of raw payloads."""

    batch_id: str
    normalized: list[CanonicalRecipe] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.normalized) + len(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "batch_id": self.batch_id,
            "total": self.total,
            "normalized": [r.model_dump(mode="json", by_alias=True) for r in self.normalized],
            "errors": self.errors,
        }


def _describe(payload: Any, index: int) -> str:
    if isinstance(payload, Mapping):
        for key in ("externalId", "external_id", "id"):
            if payload.get(key) is not None:
                return f"record {index} ({key}={payload[key]})"
    return f"record {index}"


def normalize_batch(
    payloads: Iterable[Mapping[str, Any]],
    batch_id: str | None = None,
) -> NormalizationResult:
    """
    Normalize many raw payloads, collecting rejects instead of raising.

    Args:
        payloads: Raw recipe mappings, e.g. parsed from a JSON export.
        batch_id: Optional identifier used in log context.

    Returns:
        NormalizationResult with the canonical recipes and one error per
        rejected payload, in input order.
    """
    result = NormalizationResult(batch_id=batch_id or uuid.uuid4().hex)

    with LoggingContext(batch_id=result.batch_id):
        for index, payload in enumerate(payloads):
            label = _describe(payload, index)
            try:
                record = RawRecipeRecord.model_validate(payload)
            except ValidationError as e:
                message = f"{label}: {e.error_count()} validation error(s): {e.errors()[0]['msg']}"
                logger.warning(f"Rejected {message}")
                result.errors.append(message)
                continue

            with LoggingContext(recipe_id=str(record.external_id)):
                result.normalized.append(normalize_recipe(record))

        logger.info(
            f"Normalized {len(result.normalized)}/{result.total} recipes "
            f"({len(result.errors)} rejected)"
        )

    return result
