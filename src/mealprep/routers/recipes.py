"""API routes for normalizing raw recipe records."""

from typing import Any

from fastapi import APIRouter

from mealprep.ingest.schemas import RawRecipeRecord
from mealprep.logging_config import LoggingContext, get_logger
from mealprep.normalize.recipes import normalize_batch, normalize_recipe
from mealprep.schemas import CanonicalRecipe

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.post("/normalize", response_model=CanonicalRecipe)
async def normalize(record: RawRecipeRecord) -> CanonicalRecipe:
    """
    Normalize a single raw recipe record.

    Invalid payload shapes are rejected with 422 by request validation.
    """
    with LoggingContext(recipe_id=str(record.external_id)):
        recipe = normalize_recipe(record)
        logger.debug(f"Normalized recipe '{recipe.title}' ({len(recipe.ingredients)} ingredients)")
    return recipe


@router.post("/normalize/batch")
async def normalize_many(payloads: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Normalize a batch of raw payloads.

    Payloads that fail validation are reported in ``errors`` instead of
    failing the whole request.
    """
    return normalize_batch(payloads).to_dict()
