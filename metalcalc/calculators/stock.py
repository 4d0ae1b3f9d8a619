"""
Catalog section stock calculator.

Prices sections picked from the catalog, where the weight per metre is
already known: piece = kg/m × cut length, totals × pieces required.

When plate dimensions are given instead (h, w, th and an optional t), the
piece is weighed as a plate h × th × (w + t) at the given density, and the
kg/m figure is 0.

Input: StockDimensions or a catalog kg/m, price per kg, cut length (m), pieces
Output: StockResult (unrounded)
"""

import math

from ..numeric import to_number
from ..schemas import StockDimensions, StockResult
from ..units import length_to_meters


def _non_negative(value) -> float:
    """Negative, missing or non-finite becomes 0."""
    if value is None or not math.isfinite(value):
        return 0.0
    return max(0.0, value)


class SectionStockCalculator:

    def is_dims_mode(self, dims: StockDimensions = None) -> bool:
        return dims is not None and any(v is not None for v in (dims.h, dims.w, dims.th))

    def piece_from_dims(self, dims: StockDimensions) -> float:
        w_m = length_to_meters(dims.w or 0.0, dims.unit)
        th_m = length_to_meters(dims.th or 0.0, dims.unit)
        t_m = length_to_meters(dims.t or 0.0, dims.unit)
        h_m = length_to_meters(dims.h or 0.0, dims.unit)
        effective_width_m = w_m + (t_m if t_m > 0 else 0.0)
        volume_m3 = h_m * th_m * effective_width_m
        # Density text is g/cm³; unparseable means no weight
        rho_kg_m3 = to_number(dims.density) * 1000
        return volume_m3 * rho_kg_m3

    def calculate(self, dims: StockDimensions = None, weight_per_meter: float = None,
                  price_per_kg: float = 0.0, length_m: float = 0.0,
                  required: float = 0.0) -> StockResult:
        dims_mode = self.is_dims_mode(dims)
        if dims_mode:
            kg_per_m = 0.0
            piece_kg = self.piece_from_dims(dims)
        else:
            kg_per_m = _non_negative(weight_per_meter)
            piece_kg = kg_per_m * _non_negative(length_m)

        safe_price = _non_negative(price_per_kg)
        safe_required = _non_negative(required)

        price_of_piece = piece_kg * safe_price
        return StockResult(
            is_dims_mode=dims_mode,
            linear_meter_weight_kg_per_m=kg_per_m,
            weight_of_piece_kg=piece_kg,
            price_of_piece=price_of_piece,
            total_weight_kg=piece_kg * safe_required,
            total_price=price_of_piece * safe_required,
        )
