"""Unit canonicalization, metric/imperial conversion and display formatting."""

from mealprep.enums import MeasurementSystem, MeasurementUnit
from mealprep.logging_config import get_logger
from mealprep.normalize.rules import KeywordRule, first_match, rule

logger = get_logger(__name__)


# =============================================================================
# Canonicalization
# =============================================================================

_UNITS_BY_VALUE: dict[str, MeasurementUnit] = {unit.value: unit for unit in MeasurementUnit}

# Volume first, then weight, then count. The first matching rule wins, so
# "kilograms" resolves to GRAM. "oz" and "lb" only match on their own so
# "dozen" and "bulb" stay count units.
UNIT_RULES: tuple[KeywordRule[MeasurementUnit], ...] = (
    # Volume
    rule(MeasurementUnit.CUP, "cup"),
    rule(MeasurementUnit.TABLESPOON, "tbsp", "tablespoon"),
    rule(MeasurementUnit.TEASPOON, "tsp", "teaspoon"),
    rule(MeasurementUnit.MILLILITER, "milliliter", exact=("ml",)),
    rule(MeasurementUnit.LITER, "liter", exact=("l",)),
    rule(MeasurementUnit.FLUID_OUNCE, "fl oz", "fluid ounce"),
    # Weight
    rule(MeasurementUnit.GRAM, "gram", exact=("g",)),
    rule(MeasurementUnit.KILOGRAM, "kilogram", exact=("kg",)),
    rule(MeasurementUnit.OUNCE, "ounce", exact=("oz",)),
    rule(MeasurementUnit.POUND, "pound", exact=("lb", "lbs")),
    # Count
    rule(MeasurementUnit.SLICE, "slice"),
    rule(MeasurementUnit.CLOVE, "clove"),
    rule(MeasurementUnit.BUNCH, "bunch"),
    rule(MeasurementUnit.CAN, "can"),
    rule(MeasurementUnit.PACKAGE, "package", "pkg"),
)


def unit_from_string(raw: str | None) -> MeasurementUnit:
    """
    Map a free-text unit to a canonical unit.

    The label is lower-cased and trimmed, then matched exactly against the
    canonical identifiers before falling back to ``UNIT_RULES``. Unrecognized
    input yields ``PIECE``; this function never raises.

    Examples:
        "Tbsp" -> TABLESPOON
        "cups" -> CUP
        "handful" -> PIECE
    """
    label = (raw or "").lower().strip()

    exact = _UNITS_BY_VALUE.get(label)
    if exact is not None:
        return exact

    unit = first_match(UNIT_RULES, label, MeasurementUnit.PIECE)
    if unit is MeasurementUnit.PIECE and label:
        logger.debug(f"Unrecognized unit '{raw}', using {unit.value}")
    return unit


# =============================================================================
# Conversion Tables
# =============================================================================

ML_PER_CUP = 236.588
ML_PER_TABLESPOON = 14.787
ML_PER_TEASPOON = 4.929
ML_PER_FLUID_OUNCE = 29.574
CUPS_PER_LITER = 4.227

GRAMS_PER_OUNCE = 28.3495
GRAMS_PER_POUND = 453.592
POUNDS_PER_KILOGRAM = 2.205

# Imperial unit -> (factor, metric unit)
IMPERIAL_TO_METRIC: dict[MeasurementUnit, tuple[float, MeasurementUnit]] = {
    MeasurementUnit.CUP: (ML_PER_CUP, MeasurementUnit.MILLILITER),
    MeasurementUnit.TABLESPOON: (ML_PER_TABLESPOON, MeasurementUnit.MILLILITER),
    MeasurementUnit.TEASPOON: (ML_PER_TEASPOON, MeasurementUnit.MILLILITER),
    MeasurementUnit.FLUID_OUNCE: (ML_PER_FLUID_OUNCE, MeasurementUnit.MILLILITER),
    MeasurementUnit.OUNCE: (GRAMS_PER_OUNCE, MeasurementUnit.GRAM),
    MeasurementUnit.POUND: (GRAMS_PER_POUND, MeasurementUnit.GRAM),
}

# Milliliters -> imperial: (upper bound inclusive, unit, ml per unit).
# Small amounts stay as tsp/tbsp; anything larger, or NaN, becomes fl oz.
MILLILITER_STEPS: tuple[tuple[float, MeasurementUnit, float], ...] = (
    (15.0, MeasurementUnit.TEASPOON, ML_PER_TEASPOON),
    (60.0, MeasurementUnit.TABLESPOON, ML_PER_TABLESPOON),
)

# Factors to the base unit of each class (ml for volume, g for weight).
BASE_FACTORS: dict[MeasurementUnit, float] = {
    MeasurementUnit.MILLILITER: 1.0,
    MeasurementUnit.LITER: 1000.0,
    MeasurementUnit.CUP: ML_PER_CUP,
    MeasurementUnit.TABLESPOON: ML_PER_TABLESPOON,
    MeasurementUnit.TEASPOON: ML_PER_TEASPOON,
    MeasurementUnit.FLUID_OUNCE: ML_PER_FLUID_OUNCE,
    MeasurementUnit.GRAM: 1.0,
    MeasurementUnit.KILOGRAM: 1000.0,
    MeasurementUnit.OUNCE: GRAMS_PER_OUNCE,
    MeasurementUnit.POUND: GRAMS_PER_POUND,
}


# =============================================================================
# Conversion
# =============================================================================


def _milliliters_to_imperial(quantity: float) -> tuple[float, MeasurementUnit]:
    for upper_bound, unit, ml_per_unit in MILLILITER_STEPS:
        if quantity <= upper_bound:
            return quantity / ml_per_unit, unit
    return quantity / ML_PER_FLUID_OUNCE, MeasurementUnit.FLUID_OUNCE


def _grams_to_imperial(quantity: float) -> tuple[float, MeasurementUnit]:
    if quantity >= GRAMS_PER_POUND:
        return quantity / GRAMS_PER_POUND, MeasurementUnit.POUND
    return quantity / GRAMS_PER_OUNCE, MeasurementUnit.OUNCE


def _to_imperial(quantity: float, unit: MeasurementUnit) -> tuple[float, MeasurementUnit]:
    if unit is MeasurementUnit.MILLILITER:
        return _milliliters_to_imperial(quantity)
    if unit is MeasurementUnit.LITER:
        return quantity * CUPS_PER_LITER, MeasurementUnit.CUP
    if unit is MeasurementUnit.GRAM:
        return _grams_to_imperial(quantity)
    if unit is MeasurementUnit.KILOGRAM:
        return quantity * POUNDS_PER_KILOGRAM, MeasurementUnit.POUND
    return quantity, unit


def _to_metric(quantity: float, unit: MeasurementUnit) -> tuple[float, MeasurementUnit]:
    if unit in IMPERIAL_TO_METRIC:
        factor, metric_unit = IMPERIAL_TO_METRIC[unit]
        return quantity * factor, metric_unit
    return quantity, unit


def convert_quantity(
    quantity: float,
    unit: MeasurementUnit,
    system: MeasurementSystem,
) -> tuple[float, MeasurementUnit]:
    """
    Express a quantity in the given measurement system.

    Count units and units already native to ``system`` are returned
    unchanged. Metric volumes and weights pick the most natural imperial unit
    by magnitude. Any pair without a conversion is returned as-is.

    Args:
        quantity: Amount in ``unit``.
        unit: Canonical unit of the amount.
        system: Target measurement system.

    Returns:
        Tuple of (quantity, unit) in the target system.
    """
    if unit.is_count or unit.native_system is system:
        return quantity, unit

    if system is MeasurementSystem.METRIC:
        return _to_metric(quantity, unit)
    return _to_imperial(quantity, unit)


def to_base_quantity(quantity: float, unit: MeasurementUnit) -> float | None:
    """Express a volume in ml or a weight in g; None for count units."""
    factor = BASE_FACTORS.get(unit)
    if factor is None:
        return None
    return quantity * factor


def rescale(
    quantity: float,
    from_unit: MeasurementUnit,
    to_unit: MeasurementUnit,
) -> float | None:
    """Rescale a quantity between two units of the same class.

    Returns None when the units cannot be compared (different classes, or
    two different count units).
    """
    if from_unit is to_unit:
        return quantity
    if from_unit.unit_class is not to_unit.unit_class:
        return None
    base = to_base_quantity(quantity, from_unit)
    if base is None:
        return None
    return base / BASE_FACTORS[to_unit]


# =============================================================================
# Formatting
# =============================================================================


def format_quantity(quantity: float, unit: MeasurementUnit) -> str:
    """
    Render a quantity with precision tiered by magnitude.

    - 100 and above: no decimals ("472 ml")
    - 10 up to 100: one decimal ("29.6 ml")
    - below 10: no decimals when integral ("9 g"), else one ("1.0 tsp")
    """
    if quantity >= 100:
        number = f"{quantity:.0f}"
    elif quantity >= 10:
        number = f"{quantity:.1f}"
    elif float(quantity).is_integer():
        number = f"{quantity:.0f}"
    else:
        number = f"{quantity:.1f}"
    return f"{number} {unit.value}"


def convert_and_format(
    quantity: float,
    unit: MeasurementUnit,
    system: MeasurementSystem,
) -> str:
    """Convert a quantity to ``system`` and render it for display."""
    converted_quantity, converted_unit = convert_quantity(quantity, unit, system)
    return format_quantity(converted_quantity, converted_unit)
