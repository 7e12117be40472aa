"""Schemas for records ingested from the external recipe source."""

from mealprep.ingest.schemas import RawIngredientRecord, RawRecipeRecord

__all__ = [
    "RawIngredientRecord",
    "RawRecipeRecord",
]
