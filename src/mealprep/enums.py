"""Closed enumerations shared by the normalizer, planner and UI layers.

The ``.value`` of every member is a durable identifier: it is stored by the
persistence layer and sent to other services, so values must never be renamed
without a data migration.
"""

from enum import Enum, IntEnum


class MealType(str, Enum):
    """Slot of the day a recipe is meant for."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class DietaryRestriction(str, Enum):
    """Diet a user follows; matched against free-text recipe diet tags."""

    NONE = "None"
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    PESCATARIAN = "Pescatarian"
    KETO = "Keto"
    PALEO = "Paleo"
    GLUTEN_FREE = "Gluten-Free"
    DAIRY_FREE = "Dairy-Free"
    HALAL = "Halal"
    KOSHER = "Kosher"
    LOW_CARB = "Low Carb"
    LOW_FAT = "Low Fat"


class Allergy(str, Enum):
    NONE = "None"
    PEANUTS = "Peanuts"
    TREE_NUTS = "Tree Nuts"
    MILK = "Milk"
    EGGS = "Eggs"
    WHEAT = "Wheat"
    SOY = "Soy"
    FISH = "Fish"
    SHELLFISH = "Shellfish"
    SESAME = "Sesame"


class CookingSkill(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    CHEF = "Chef"


class CookingTime(str, Enum):
    """Preferred time budget for cooking a meal."""

    QUICK = "Under 15 min"
    MODERATE = "15-30 min"
    STANDARD = "30-60 min"
    LEISURELY = "60+ min"

    @property
    def max_minutes(self) -> int:
        """Upper bound in minutes for this preference."""
        return _COOKING_TIME_MAX_MINUTES[self]


_COOKING_TIME_MAX_MINUTES: dict[CookingTime, int] = {
    CookingTime.QUICK: 15,
    CookingTime.MODERATE: 30,
    CookingTime.STANDARD: 60,
    CookingTime.LEISURELY: 120,
}


class CuisineType(str, Enum):
    AMERICAN = "American"
    MEXICAN = "Mexican"
    ITALIAN = "Italian"
    FRENCH = "French"
    CHINESE = "Chinese"
    JAPANESE = "Japanese"
    INDIAN = "Indian"
    THAI = "Thai"
    MEDITERRANEAN = "Mediterranean"
    GREEK = "Greek"
    MIDDLE_EASTERN = "Middle Eastern"
    KOREAN = "Korean"
    VIETNAMESE = "Vietnamese"
    SPANISH = "Spanish"


class WeightGoal(str, Enum):
    LOSE = "Lose Weight"
    MAINTAIN = "Maintain Weight"
    GAIN = "Gain Weight"
    RECOMP = "Body Recomposition"


class GroceryCategory(str, Enum):
    """Grocery store section an ingredient is bought from."""

    PRODUCE = "Produce"
    MEAT = "Meat & Seafood"
    DAIRY = "Dairy & Eggs"
    BAKERY = "Bakery"
    FROZEN = "Frozen"
    PANTRY = "Pantry"
    CANNED = "Canned Goods"
    CONDIMENTS = "Condiments & Sauces"
    SNACKS = "Snacks"
    BEVERAGES = "Beverages"
    SPICES = "Spices & Seasonings"
    OTHER = "Other"

    @property
    def sort_order(self) -> int:
        """Position of the category when walking a store, produce first."""
        return list(GroceryCategory).index(self)


class MeasurementSystem(str, Enum):
    METRIC = "Metric"
    IMPERIAL = "Imperial"


class UnitClass(str, Enum):
    """Physical dimension of a measurement unit."""

    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"


class MeasurementUnit(str, Enum):
    """Canonical units understood by the grocery list and recipe views."""

    # Volume
    CUP = "cup"
    TABLESPOON = "tbsp"
    TEASPOON = "tsp"
    FLUID_OUNCE = "fl oz"
    MILLILITER = "ml"
    LITER = "L"

    # Weight
    GRAM = "g"
    KILOGRAM = "kg"
    OUNCE = "oz"
    POUND = "lb"

    # Count
    PIECE = "piece"
    SLICE = "slice"
    CLOVE = "clove"
    BUNCH = "bunch"
    CAN = "can"
    PACKAGE = "package"

    @property
    def unit_class(self) -> UnitClass:
        return UNIT_CLASSES[self]

    @property
    def native_system(self) -> MeasurementSystem | None:
        """System the unit belongs to, or None for count units."""
        return NATIVE_SYSTEMS.get(self)

    @property
    def is_volume(self) -> bool:
        return self.unit_class is UnitClass.VOLUME

    @property
    def is_weight(self) -> bool:
        return self.unit_class is UnitClass.WEIGHT

    @property
    def is_count(self) -> bool:
        return self.unit_class is UnitClass.COUNT

    @property
    def is_metric(self) -> bool:
        return self.native_system is MeasurementSystem.METRIC

    @property
    def is_imperial(self) -> bool:
        return self.native_system is MeasurementSystem.IMPERIAL


# Fixed unit tags. A unit's class never changes.
UNIT_CLASSES: dict[MeasurementUnit, UnitClass] = {
    MeasurementUnit.CUP: UnitClass.VOLUME,
    MeasurementUnit.TABLESPOON: UnitClass.VOLUME,
    MeasurementUnit.TEASPOON: UnitClass.VOLUME,
    MeasurementUnit.FLUID_OUNCE: UnitClass.VOLUME,
    MeasurementUnit.MILLILITER: UnitClass.VOLUME,
    MeasurementUnit.LITER: UnitClass.VOLUME,
    MeasurementUnit.GRAM: UnitClass.WEIGHT,
    MeasurementUnit.KILOGRAM: UnitClass.WEIGHT,
    MeasurementUnit.OUNCE: UnitClass.WEIGHT,
    MeasurementUnit.POUND: UnitClass.WEIGHT,
    MeasurementUnit.PIECE: UnitClass.COUNT,
    MeasurementUnit.SLICE: UnitClass.COUNT,
    MeasurementUnit.CLOVE: UnitClass.COUNT,
    MeasurementUnit.BUNCH: UnitClass.COUNT,
    MeasurementUnit.CAN: UnitClass.COUNT,
    MeasurementUnit.PACKAGE: UnitClass.COUNT,
}

# Count units are native to neither system and are absent here.
NATIVE_SYSTEMS: dict[MeasurementUnit, MeasurementSystem] = {
    MeasurementUnit.MILLILITER: MeasurementSystem.METRIC,
    MeasurementUnit.LITER: MeasurementSystem.METRIC,
    MeasurementUnit.GRAM: MeasurementSystem.METRIC,
    MeasurementUnit.KILOGRAM: MeasurementSystem.METRIC,
    MeasurementUnit.CUP: MeasurementSystem.IMPERIAL,
    MeasurementUnit.TABLESPOON: MeasurementSystem.IMPERIAL,
    MeasurementUnit.TEASPOON: MeasurementSystem.IMPERIAL,
    MeasurementUnit.FLUID_OUNCE: MeasurementSystem.IMPERIAL,
    MeasurementUnit.OUNCE: MeasurementSystem.IMPERIAL,
    MeasurementUnit.POUND: MeasurementSystem.IMPERIAL,
}


class RecipeComplexity(IntEnum):
    """Coarse difficulty rating; persisted as the integer value."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class ActivityLevel(str, Enum):
    SEDENTARY = "Sedentary"
    LIGHT = "Lightly Active"
    MODERATE = "Moderately Active"
    ACTIVE = "Very Active"
    EXTREME = "Extremely Active"

    @property
    def multiplier(self) -> float:
        """TDEE multiplier applied to basal metabolic rate."""
        return _ACTIVITY_MULTIPLIERS[self]


_ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.EXTREME: 1.9,
}


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class GoalPace(str, Enum):
    """Target rate of weight change."""

    GRADUAL = "Gradual"
    MODERATE = "Moderate"
    AGGRESSIVE = "Aggressive"

    @property
    def weekly_change_kg(self) -> float:
        return _GOAL_PACE_RATES[self][0]

    @property
    def weekly_change_lbs(self) -> float:
        return _GOAL_PACE_RATES[self][1]

    @property
    def daily_calorie_adjustment(self) -> int:
        """Daily calorie delta, assuming 3500 kcal per pound."""
        return round(self.weekly_change_lbs * 3500 / 7)


# (kg per week, lb per week)
_GOAL_PACE_RATES: dict[GoalPace, tuple[float, float]] = {
    GoalPace.GRADUAL: (0.23, 0.5),
    GoalPace.MODERATE: (0.45, 1.0),
    GoalPace.AGGRESSIVE: (0.68, 1.5),
}
