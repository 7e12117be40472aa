"""API routers for the mealprep service."""

from mealprep.routers.measurements import router as measurements_router
from mealprep.routers.recipes import router as recipes_router

__all__ = [
    "measurements_router",
    "recipes_router",
]
