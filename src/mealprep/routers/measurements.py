"""API routes for converting quantities between measurement systems."""

from fastapi import APIRouter
from pydantic import BaseModel

from mealprep.config import get_settings
from mealprep.enums import MeasurementSystem, MeasurementUnit
from mealprep.normalize.units import convert_quantity, format_quantity, unit_from_string

router = APIRouter(prefix="/api/v1/measurements", tags=["measurements"])


class ConversionRequest(BaseModel):
    """Quantity to convert; ``unit`` may be any free-text unit."""

    quantity: float
    unit: str
    system: MeasurementSystem | None = None


class ConversionResponse(BaseModel):
    """Converted quantity and its display string."""

    quantity: float
    unit: MeasurementUnit
    system: MeasurementSystem
    display: str


@router.post("/convert", response_model=ConversionResponse)
async def convert(request: ConversionRequest) -> ConversionResponse:
    """Convert a quantity, defaulting to the configured measurement system."""
    system = request.system or get_settings().default_measurement_system
    quantity, unit = convert_quantity(request.quantity, unit_from_string(request.unit), system)
    return ConversionResponse(
        quantity=quantity,
        unit=unit,
        system=system,
        display=format_quantity(quantity, unit),
    )
