"""Recipe difficulty estimation."""

from mealprep.enums import RecipeComplexity

EASY_MAX_MINUTES = 20
EASY_MAX_STEPS = 5
HARD_MIN_MINUTES = 60
HARD_MIN_STEPS = 12


def estimate_complexity(ready_in_minutes: int, instruction_count: int) -> RecipeComplexity:
    """Rate a recipe from its total time and number of steps.

    Easy is checked before hard.
    """
    if ready_in_minutes <= EASY_MAX_MINUTES and instruction_count <= EASY_MAX_STEPS:
        return RecipeComplexity.EASY
    if ready_in_minutes >= HARD_MIN_MINUTES or instruction_count >= HARD_MIN_STEPS:
        return RecipeComplexity.HARD
    return RecipeComplexity.MEDIUM
