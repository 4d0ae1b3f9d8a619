"""
Per-profile input fields.

Each formula reads a fixed subset of the short dimension keys
(h, tf, tw, t, r, s, u). This module says which keys a formula needs, in
display order, with the engineering symbol and a bilingual title for each.

The field list depends only on the formula and its mode flags
(calcMode, includeRadius), never on the entered values.
"""

import re

from .schemas import FieldSpec
from .units import is_length_unit


def _f(key, label, title):
    return FieldSpec(key=key, label=label, title=title)


_LENGTH = _f("h", "L", "الطول (Length)")

# Fallback for formulas without their own entry
GENERIC_FIELDS = [
    _f("tf", "W", "العرض (Width)"),
    _LENGTH,
    _f("tw", "T", "السماكة (Thickness)"),
]

FIELD_CONFIGS = {
    "flat_bar": [
        _f("tf", "B", "العرض (Width)"),
        _f("tw", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "hex_bar": [
        _f("tf", "AF", "المقاس عبر الأوجه (Across Flats)"),
        _LENGTH,
    ],
    "hex_tube": [
        _f("tf", "AF", "المقاس الخارجي عبر الأوجه (AF_out)"),
        _f("tw", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "square_bar": [
        _f("tf", "S", "ضلع المربع (Side)"),
        _LENGTH,
    ],
    "square_tube": [
        _f("tf", "S", "الضلع الخارجي (Outer Side)"),
        _f("tw", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "solid_sphere": [
        _f("tf", "D", "القطر (Diameter)"),
    ],
    "rect_tube": [
        _f("tf", "W", "العرض الخارجي (Outer Width)"),
        _f("tw", "H", "الارتفاع الخارجي (Outer Height)"),
        _f("t", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "cone_frustum": [
        _f("tf", "D1", "القطر العلوي (Top Diameter)"),
        _f("tw", "D2", "القطر السفلي (Bottom Diameter)"),
        _f("h", "H", "الارتفاع العمودي (Vertical Height)"),
        _f("t", "T", "السماكة (Thickness)"),
    ],
    "t_section": [
        _f("tf", "B", "العرض الكلي للجناح (Flange Width)"),
        _f("r", "TF", "سماكة الجناح (Flange Thickness)"),
        _f("tw", "H", "الارتفاع الكلي (Overall Height)"),
        _f("t", "TW", "سماكة الجسر (Web Thickness)"),
        _LENGTH,
    ],
    "lipped_c_channel": [
        _f("tw", "H", "الارتفاع الكلي (Overall Height)"),
        _f("tf", "B", "عرض الجناح (Flange Width)"),
        _f("r", "L", "طول الحافة (Lip Length)"),
        _f("t", "T", "السماكة (Thickness)"),
        _f("h", "Lₜ", "الطول (Length)"),
    ],
    "flange_ring": [
        _f("tf", "OD", "القطر الخارجي (Outer Diameter)"),
        _f("tw", "ID", "القطر الداخلي (Inner Diameter)"),
        _f("t", "TH", "سماكة الفلنجة (Thickness)"),
        _f("r", "N", "عدد الثقوب (Bolt Count)"),
        _f("s", "d", "قطر الثقب (Hole Diameter)"),
    ],
    "hat_channel": [
        _f("tf", "A", "العرض العلوي (Top Width)"),
        _f("tw", "H", "الارتفاع (Height)"),
        _f("r", "B", "طول القاعدة (Base Flange)"),
        _f("s", "L", "طول الحافة (Lip Length)"),
        _f("t", "T", "السماكة (Thickness)"),
        _f("h", "Lₜ", "الطول (Length)"),
    ],
    "z_channel": [
        _f("tw", "H", "ارتفاع الجسر (Web Height)"),
        _f("tf", "B1", "عرض الجناح العلوي (Top Flange)"),
        _f("r", "B2", "عرض الجناح السفلي (Bottom Flange)"),
        _f("s", "L1", "طول الحافة العلوية (Top Lip)"),
        _f("u", "L2", "طول الحافة السفلية (Bottom Lip)"),
        _f("t", "T", "السماكة (Thickness)"),
        _f("h", "Lₜ", "الطول (Length)"),
    ],
    "u_channel": [
        _f("tf", "H", "الارتفاع الكلي (Overall Height)"),
        _f("tw", "W", "عرض الجناح (Flange Width)"),
        _f("t", "TW", "سماكة الجدار (Web Thickness)"),
        _f("r", "TF", "سماكة الجناح (Flange Thickness)"),
        _f("s", "R", "نصف قطر الانحناء (Radius)"),
        _LENGTH,
    ],
    "round_tube": [
        _f("tf", "OD", "القطر الخارجي (Outer Diameter)"),
        _f("tw", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "rebar": [
        _f("tf", "D", "القطر الاسمي (Nominal Diameter)"),
        _LENGTH,
    ],
    "round_bar": [
        _f("tf", "d", "القطر (Diameter)"),
        _LENGTH,
    ],
    "equal_angle": [
        _f("tf", "B/H", "الضلع (Side)"),
        _f("t", "T", "السماكة (Thickness)"),
        _LENGTH,
    ],
    "plate": [
        _LENGTH,
        _f("tf", "W", "العرض (Width)"),
        _f("tw", "T", "السماكة (Thickness)"),
    ],
}

I_BEAM_FIELDS = [
    _f("tw", "H", "الارتفاع الكلي (Overall Height)"),
    _f("tf", "B", "عرض الجناح (Flange Width)"),
    _f("r", "TF", "سماكة الجناح (Flange Thickness)"),
    _f("t", "TW", "سماكة الويب (Web Thickness)"),
    _f("s", "R", "نصف قطر الانحناء (Radius)"),
    _LENGTH,
]

_AREA_WEIGHT_FIELDS = [
    _LENGTH,
    _f("tf", "W", "العرض (Width)"),
    _f("tw", "kg/m²", "الوزن لكل متر مربع (Weight per m²)"),
]

GRATING_GEOMETRY_FIELDS = [
    _LENGTH,
    _f("tf", "W", "العرض (Width)"),
    _f("tw", "hb", "ارتفاع الشريحة (Bearing Bar Height)"),
    _f("t", "tb", "سماكة الشريحة (Bearing Bar Thickness)"),
    _f("r", "sb", "المسافة بين الشرائح (Spacing)"),
    _f("s", "dc", "قطر الرابط (Cross Bar Diameter)"),
    _f("u", "sc", "المسافة بين الروابط (Cross Spacing)"),
]

MESH_GEOMETRY_FIELDS = [
    _LENGTH,
    _f("tf", "W", "العرض (Width)"),
    _f("tw", "d", "قطر السلك (Wire Diameter)"),
    _f("r", "P1", "المسافة P1 (Spacing P1)"),
    _f("s", "P2", "المسافة P2 (Spacing P2)"),
]

EXPANDED_THICKNESS_FIELDS = [
    _f("tw", "T", "سماكة الصاج (Sheet Thickness)"),
    _f("h", "L", "طول اللوح (Sheet Length)"),
    _f("tf", "W", "عرض اللوح (Sheet Width)"),
]

EXPANDED_WEIGHT_FIELDS = [
    _f("tf", "W/m²", "الوزن لكل متر مربع (Weight per m²)"),
    _f("h", "Area", "المساحة الإجمالية (Total Area)"),
]

# calcMode assumed when the dimension map has none yet
DEFAULT_CALC_MODES = {
    "steel_grating": "weight",
    "wire_mesh": "weight",
    "expanded_metal": "thickness",
}

# Formulas whose "tf" input defaults to metres (sheet/panel widths)
_METRE_WIDTH_FORMULAS = ("steel_grating", "wire_mesh", "expanded_metal")


def calc_mode_for(formula: str, dims: dict) -> str:
    """Active calcMode for a formula, or None when the formula has no modes."""
    default = DEFAULT_CALC_MODES.get(formula)
    if default is None:
        return None
    return (dims or {}).get("calcMode") or default


def include_radius_for(dims: dict) -> bool:
    """The includeRadius flag; "true"/"false" text, otherwise plain truthiness."""
    value = (dims or {}).get("includeRadius")
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def default_modes(formula: str) -> dict:
    """Mode flags seeded into a fresh dimension map when a profile is selected."""
    if formula in DEFAULT_CALC_MODES:
        return {"calcMode": DEFAULT_CALC_MODES[formula]}
    if formula == "i_beam":
        return {"includeRadius": False}
    return {}


def get_field_config(formula: str, dims: dict = None) -> list[FieldSpec]:
    """Ordered input fields for a formula under its current mode flags."""
    dims = dims or {}

    if formula == "i_beam":
        if include_radius_for(dims):
            return list(I_BEAM_FIELDS)
        return [f for f in I_BEAM_FIELDS if f.key != "s"]

    if formula == "steel_grating":
        if calc_mode_for(formula, dims) == "weight":
            return list(_AREA_WEIGHT_FIELDS)
        return list(GRATING_GEOMETRY_FIELDS)

    if formula == "wire_mesh":
        if calc_mode_for(formula, dims) == "weight":
            return list(_AREA_WEIGHT_FIELDS)
        return list(MESH_GEOMETRY_FIELDS)

    if formula == "expanded_metal":
        if calc_mode_for(formula, dims) == "thickness":
            return list(EXPANDED_THICKNESS_FIELDS)
        return list(EXPANDED_WEIGHT_FIELDS)

    return list(FIELD_CONFIGS.get(formula, GENERIC_FIELDS))


def required_keys(formula: str, dims: dict = None) -> list[str]:
    return [f.key for f in get_field_config(formula, dims)]


def should_show_unit_for_key(formula: str, key: str, calc_mode: str = None) -> bool:
    """
    Whether a field gets a length-unit selector.

    Weight-per-area, area and count inputs are not lengths.
    """
    if not formula:
        return True
    if formula == "flange_ring" and key == "r":
        return False
    if formula == "expanded_metal" and calc_mode == "weight" and key in ("tf", "h"):
        return False
    if formula in ("steel_grating", "wire_mesh") and calc_mode == "weight" and key == "tw":
        return False
    return True


def default_unit_for_key(formula: str, key: str) -> str:
    if not formula:
        return "mm"
    if key == "h":
        return "m"
    if key == "tf" and formula in _METRE_WIDTH_FORMULAS:
        return "m"
    return "mm"


def get_unit_for_key(formula: str, dims: dict, key: str) -> str:
    """Length unit for a key: a valid "<key>_unit" override, else the default."""
    unit = (dims or {}).get("%s_unit" % key)
    if is_length_unit(unit):
        return unit
    return default_unit_for_key(formula, key)


_BILINGUAL_TITLE = re.compile(r"^(.*?)\s*\(([^()]*)\)\s*$")


def english_title(title: str) -> str:
    """English part of a bilingual title: "الطول (Length)" -> "Length"."""
    s = str(title or "").strip()
    if not s:
        return ""
    match = _BILINGUAL_TITLE.match(s)
    if not match:
        return s
    return match.group(2).strip() or s
