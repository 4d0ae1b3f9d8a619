"""
Calculation engine.

Pure math, no state. Raw dimension map -> canonical millimetres ->
registered profile calculator -> formatted CalculationResult.

Input: formula id, DimensionSet (raw text + mode/unit flags), quantity, price per kg
Output: CalculationResult (weights to 3 decimals, price to 2)
"""

import logging
import math

from .calculators.base import DIMENSION_KEYS, Dimensions
from .calculators.registry import get_calculator
from .config import settings
from .field_config import calc_mode_for, include_radius_for, get_unit_for_key as default_unit_lookup
from .numeric import to_number
from .schemas import CalculationResult
from .units import length_to_millimeters

logger = logging.getLogger(__name__)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _format(value: float, decimals: int) -> str:
    # Adding 0.0 turns -0.0 into 0.0
    return "%.*f" % (decimals, _finite(value) + 0.0)


def canonicalize(formula: str, dims: dict, get_unit_for_key=None) -> Dimensions:
    """
    Convert a raw dimension map to canonical Dimensions.

    Each short key is parsed with to_number and scaled to millimetres using
    the unit returned by get_unit_for_key (defaults: "<key>_unit" override,
    else the formula's default unit for that key).
    """
    dims = dims or {}
    if get_unit_for_key is None:
        def get_unit_for_key(key):
            return default_unit_lookup(formula, dims, key)

    raw = {key: to_number(dims.get(key)) for key in DIMENSION_KEYS}
    scaled = {key: length_to_millimeters(raw[key], get_unit_for_key(key)) for key in DIMENSION_KEYS}
    return Dimensions(
        raw=raw,
        calc_mode=calc_mode_for(formula, dims),
        include_radius=include_radius_for(dims),
        **scaled,
    )


def resolve_density(value) -> float:
    """Density in g/cm³ from user input, falling back to mild steel."""
    density = to_number(value)
    return density or settings.DEFAULT_DENSITY_G_CM3


def compute(formula: str, dimensions: Dimensions, density_g_cm3: float,
            quantity: int, price_per_kg) -> CalculationResult:
    """
    Weigh and price `quantity` pieces of a profile.

    Zero or missing price gives a zero total price. A zero or non-finite
    density falls back to the default. Never raises for numeric input.
    """
    if not density_g_cm3 or not math.isfinite(density_g_cm3):
        density_g_cm3 = settings.DEFAULT_DENSITY_G_CM3

    calculator = get_calculator(formula)
    piece_weight_kg, unit_weight_kg_per_m = calculator.calculate(dimensions, density_g_cm3)
    piece_weight_kg = _finite(piece_weight_kg)
    unit_weight_kg_per_m = _finite(unit_weight_kg_per_m)

    total_weight_kg = piece_weight_kg * quantity
    price = _finite(price_per_kg) if price_per_kg else 0.0
    total_price = total_weight_kg * price if price else 0.0

    return CalculationResult(
        unit_weight_per_meter=_format(unit_weight_kg_per_m, settings.WEIGHT_DECIMALS),
        piece_weight=_format(piece_weight_kg, settings.WEIGHT_DECIMALS),
        total_weight=_format(total_weight_kg, settings.WEIGHT_DECIMALS),
        total_price=_format(total_price, settings.PRICE_DECIMALS),
    )


def calculate_results(formula: str, dims: dict, quantity: int, price_per_kg=None,
                      get_unit_for_key=None) -> CalculationResult:
    """Run the engine straight from a raw dimension map."""
    dims = dims or {}
    dimensions = canonicalize(formula, dims, get_unit_for_key)
    density = resolve_density(dims.get("density"))
    return compute(formula, dimensions, density, quantity, price_per_kg)
