"""
Material density catalog.

Densities are stored in kg/m³. The catalog only seeds the density input of a
calculation; the engine treats density as a plain number wherever it came from.

Lookups fall back to the first group / first material so a stale selection
from the UI never leaves the calculator without a density.
"""

import logging

from .units import density_from_canonical_kg_m3, density_unit_label, format_density

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "Steel & Iron"
DEFAULT_MATERIAL = "Carbon Steel"
DEFAULT_DENSITY_KG_M3 = 7850

# group label -> [(material label, density kg/m³)]
DENSITY_GROUPS = {
    "Aluminum & Alloys": [
        ("Aluminum (average)", 2700),
        ("Aluminum 1050", 2710),
        ("Aluminum 1100", 2710),
        ("Aluminum 3003", 2730),
        ("Aluminum 3103", 2730),
        ("Aluminum 5005", 2700),
        ("Aluminum 5052", 2680),
        ("Aluminum 5083", 2660),
        ("Aluminum 5251", 2690),
        ("Aluminum 5454", 2690),
        ("Aluminum 5754", 2670),
        ("Aluminum 6005", 2700),
        ("Aluminum 6061", 2700),
        ("Aluminum 6063", 2690),
        ("Aluminum 6082", 2700),
        ("Aluminum 7075", 2810),
    ],
    "Steel & Iron": [
        ("Carbon Steel", 7850),
        ("Mild Steel", 7850),
        ("Structural Steel", 7850),
        ("Cast Iron", 7200),
        ("Ductile Iron", 7100),
    ],
    "Stainless Steel": [
        ("Stainless Steel 201", 7800),
        ("Stainless Steel 304", 8000),
        ("Stainless Steel 304L", 8000),
        ("Stainless Steel 316", 8000),
        ("Stainless Steel 316L", 8000),
        ("Stainless Steel 430", 7700),
    ],
    "Copper & Copper Alloys": [
        ("Copper", 8960),
        ("Brass (average)", 8500),
        ("Admiralty Brass", 8530),
        ("Naval Brass", 8470),
        ("Bronze (average)", 8800),
        ("Phosphor Bronze", 8900),
        ("Beryllium Copper", 8250),
    ],
    "Titanium & Special Metals": [
        ("Titanium Grade 2", 4510),
        ("Titanium Grade 5 (Ti-6Al-4V)", 4430),
        ("Nickel", 8900),
        ("Inconel 625", 8440),
        ("Inconel 718", 8190),
    ],
    "Other Metals": [
        ("Zinc", 7140),
        ("Lead", 11340),
        ("Tin", 7310),
        ("Magnesium", 1740),
        ("Beryllium", 1850),
        ("Antimony", 6680),
        ("Babbitt", 7400),
    ],
}


def list_groups() -> list[str]:
    return list(DENSITY_GROUPS.keys())


def find_density(group: str = None, material: str = None) -> tuple:
    """
    Look up a catalog entry.

    Returns (group_label, material_label, density_kg_m3). An unknown group
    falls back to the first group, an unknown material to the first item of
    the resolved group.
    """
    group_label = group if group in DENSITY_GROUPS else next(iter(DENSITY_GROUPS))
    items = DENSITY_GROUPS[group_label]
    for label, value in items:
        if label == material:
            return group_label, label, value
    if material is not None:
        logger.debug("Material %r not in group %r, using %r", material, group_label, items[0][0])
    label, value = items[0]
    return group_label, label, value


def density_g_cm3(density_kg_m3: float) -> str:
    """Density text as stored in a DimensionSet (g/cm³)."""
    return str(density_kg_m3 / 1000)


def density_display(group: str = DEFAULT_GROUP, material: str = DEFAULT_MATERIAL,
                    unit: str = "kg_m3") -> dict:
    """Group, material and formatted density ("7.850 g/cm³") for a catalog selection."""
    group_label, material_label, kg_m3 = find_density(group, material)
    value = format_density(density_from_canonical_kg_m3(kg_m3, unit), unit)
    return {
        "group_label": group_label,
        "material_label": material_label,
        "density_text": ("%s %s" % (value, density_unit_label(unit))).strip(),
    }


def catalog_in_unit(unit: str = "kg_m3") -> list[dict]:
    """Whole catalog with each density converted and formatted for `unit`."""
    groups = []
    for group_label, items in DENSITY_GROUPS.items():
        groups.append({
            "label": group_label,
            "items": [
                {
                    "label": label,
                    "density_kg_m3": value,
                    "display": format_density(density_from_canonical_kg_m3(value, unit), unit),
                }
                for label, value in items
            ],
        })
    return groups
