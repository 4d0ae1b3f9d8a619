"""
Plain-text calculation summary, as shared from the calculator screen.

Lists the material, density, every configured input with its unit, quantity
and price, then the four result values.
"""

from .field_config import calc_mode_for, english_title, get_field_config, get_unit_for_key, \
    should_show_unit_for_key
from .materials import DEFAULT_GROUP, DEFAULT_MATERIAL, density_display
from .numeric import normalize_numeric_input


def _with_currency(text: str, currency_code: str) -> str:
    return "%s %s" % (text, currency_code) if currency_code else text


def build_summary(formula: str, dims: dict, quantity: int, price_per_kg, result,
                  label: str = None, currency_code: str = "") -> str:
    """
    Build the share text for a settled calculation.

    Returns "" when there is no result. Material and density come from the
    densityGroup / densityMaterial / densityUnit entries of the dimension map.
    """
    if result is None:
        return ""
    dims = dims or {}
    lines = []

    if label and label.strip():
        lines.append(label.strip())

    density = density_display(
        str(dims.get("densityGroup") or DEFAULT_GROUP),
        str(dims.get("densityMaterial") or DEFAULT_MATERIAL),
        str(dims.get("densityUnit") or "kg_m3"),
    )
    lines.append("Inputs:")
    lines.append("- Material Group: %s" % density["group_label"])
    lines.append("- Material: %s" % density["material_label"])
    lines.append("- Density: %s" % density["density_text"])

    calc_mode = calc_mode_for(formula, dims)
    for f in get_field_config(formula, dims):
        value = normalize_numeric_input(dims.get(f.key))
        unit_text = ""
        if should_show_unit_for_key(formula, f.key, calc_mode):
            unit_text = " %s" % get_unit_for_key(formula, dims, f.key)
        name = english_title(f.title or f.label or f.key)
        symbol = " (%s)" % f.label.strip() if f.label else ""
        lines.append(("- %s%s: %s%s" % (name, symbol, value, unit_text)).strip())

    lines.append("- Quantity: %s" % quantity)
    price_text = "%.2f" % price_per_kg if isinstance(price_per_kg, (int, float)) else "—"
    lines.append("- Price / Kg: %s" % _with_currency(price_text, currency_code))

    lines.append("")
    lines.append("Results:")
    lines.append("- Weight / Meter: %s kg/m" % result.unit_weight_per_meter)
    lines.append("- Piece Weight: %s kg" % result.piece_weight)
    lines.append("- Total Weight: %s kg" % result.total_weight)
    lines.append("- Total Price: %s" % _with_currency(result.total_price, currency_code))

    return "\n".join(lines)
