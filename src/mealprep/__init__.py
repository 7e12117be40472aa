"""Recipe normalization and measurement conversion engine."""

from mealprep.normalize.recipes import normalize_batch, normalize_recipe
from mealprep.normalize.units import convert_and_format

__version__ = "0.1.0"

__all__ = [
    "convert_and_format",
    "normalize_batch",
    "normalize_recipe",
]
