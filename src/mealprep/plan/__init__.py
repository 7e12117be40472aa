"""Grocery planning built on normalized recipes."""

from mealprep.plan.grocery_list import GroceryItem, GroceryList, build_grocery_list

__all__ = [
    "GroceryItem",
    "GroceryList",
    "build_grocery_list",
]
