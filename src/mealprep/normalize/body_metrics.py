"""Conversions for profile measurements (body weight, height, portions)."""

from mealprep.enums import MeasurementSystem

LBS_PER_KG = 2.20462
OZ_PER_GRAM = 0.035274
CUPS_PER_LITER = 4.22675
INCHES_PER_CM = 0.393701

# Display labels per system: (weight, small weight, volume, small volume, length)
UNIT_LABELS: dict[MeasurementSystem, dict[str, str]] = {
    MeasurementSystem.METRIC: {
        "weight": "kg",
        "small_weight": "g",
        "volume": "L",
        "small_volume": "ml",
        "length": "cm",
    },
    MeasurementSystem.IMPERIAL: {
        "weight": "lb",
        "small_weight": "oz",
        "volume": "cups",
        "small_volume": "fl oz",
        "length": "in",
    },
}


def _convert(
    value: float,
    source: MeasurementSystem,
    target: MeasurementSystem,
    imperial_per_metric: float,
) -> float:
    if source is target:
        return value
    if target is MeasurementSystem.IMPERIAL:
        return value * imperial_per_metric
    return value / imperial_per_metric


def convert_weight(value: float, source: MeasurementSystem, target: MeasurementSystem) -> float:
    """Convert body weight between kg and lb."""
    return _convert(value, source, target, LBS_PER_KG)


def convert_small_weight(
    value: float, source: MeasurementSystem, target: MeasurementSystem
) -> float:
    """Convert small weights between g and oz."""
    return _convert(value, source, target, OZ_PER_GRAM)


def convert_volume(value: float, source: MeasurementSystem, target: MeasurementSystem) -> float:
    """Convert volumes between L and cups."""
    return _convert(value, source, target, CUPS_PER_LITER)


def convert_length(value: float, source: MeasurementSystem, target: MeasurementSystem) -> float:
    """Convert lengths between cm and in."""
    return _convert(value, source, target, INCHES_PER_CM)


def unit_label(system: MeasurementSystem, kind: str) -> str:
    """
    Get the display label for a measurement kind in a system.

    Args:
        system: Measurement system.
        kind: One of "weight", "small_weight", "volume", "small_volume", "length".

    Raises:
        KeyError: If ``kind`` is not a known measurement kind.
    """
    return UNIT_LABELS[system][kind]
