# Unit conversion tables: length scales to millimetres, densities from kg/m³

import math

# Scale factor to millimetres
LENGTH_SCALES = {
    "mm": 1.0,
    "m": 1000.0,
    "ft": 304.8,
    "in": 25.4,
}

DIM_UNITS = ("mm", "m", "ft", "in")

# Divisors applied to a kg/m³ value; g/m³ multiplies instead
KG_M3_PER_LB_FT3 = 16.018463
KG_M3_PER_LB_YD3 = 0.593276

DENSITY_UNITS = [
    {"label": "kg/m³", "value": "kg_m3"},
    {"label": "lb/ft³", "value": "lb_ft3"},
    {"label": "lb/yd³", "value": "lb_yd3"},
    {"label": "g/cm³", "value": "g_cm3"},
    {"label": "g/m³", "value": "g_m3"},
]

# Display precision per density unit (decimals)
DENSITY_DECIMALS = {
    "g_cm3": 3,
    "lb_ft3": 2,
    "lb_yd3": 2,
}


def is_length_unit(unit) -> bool:
    return unit in LENGTH_SCALES


def length_scale(unit) -> float:
    """Millimetres per unit. Unknown or missing units are treated as millimetres."""
    return LENGTH_SCALES.get(unit, 1.0)


def length_to_millimeters(value: float, unit) -> float:
    """Convert a length in the given unit to millimetres."""
    return value * length_scale(unit)


def length_to_meters(value, unit) -> float:
    """
    Convert a length to metres. Here a missing or unknown unit means metres,
    and a missing or non-finite value is 0.
    """
    if value is None or not math.isfinite(value):
        return 0.0
    if unit not in LENGTH_SCALES:
        return float(value)
    return value * LENGTH_SCALES[unit] / 1000.0


def density_from_canonical_kg_m3(value: float, unit) -> float:
    """Convert a kg/m³ density to the given display unit."""
    if unit == "lb_ft3":
        return value / KG_M3_PER_LB_FT3
    if unit == "lb_yd3":
        return value / KG_M3_PER_LB_YD3
    if unit == "g_cm3":
        return value / 1000.0
    if unit == "g_m3":
        return value * 1000.0
    return value


def density_to_canonical_kg_m3(value: float, unit) -> float:
    """Inverse of density_from_canonical_kg_m3."""
    if unit == "lb_ft3":
        return value * KG_M3_PER_LB_FT3
    if unit == "lb_yd3":
        return value * KG_M3_PER_LB_YD3
    if unit == "g_cm3":
        return value * 1000.0
    if unit == "g_m3":
        return value / 1000.0
    return value


def format_density(value: float, unit) -> str:
    """Format a density already expressed in `unit` with that unit's precision."""
    decimals = DENSITY_DECIMALS.get(unit, 0)
    return "%.*f" % (decimals, value)


def density_unit_label(unit) -> str:
    for option in DENSITY_UNITS:
        if option["value"] == unit:
            return option["label"]
    return "kg/m³"
