"""Normalize free-text recipe fields and convert quantities between systems.

``normalize_recipe`` and ``normalize_batch`` live in
``mealprep.normalize.recipes``.
"""

from mealprep.normalize.categories import category_from_aisle
from mealprep.normalize.complexity import estimate_complexity
from mealprep.normalize.tags import cuisine_from_string, matches_diet, meal_type_from_string
from mealprep.normalize.units import (
    convert_and_format,
    convert_quantity,
    format_quantity,
    rescale,
    to_base_quantity,
    unit_from_string,
)

__all__ = [
    "category_from_aisle",
    "convert_and_format",
    "convert_quantity",
    "cuisine_from_string",
    "estimate_complexity",
    "format_quantity",
    "matches_diet",
    "meal_type_from_string",
    "rescale",
    "to_base_quantity",
    "unit_from_string",
]
