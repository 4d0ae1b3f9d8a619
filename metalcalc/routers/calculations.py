"""
Calculation API — stateless one-shot calculations.

POST /api/calculations                  — weigh and price one profile
GET  /api/calculations/formulas         — registered formula ids
GET  /api/calculations/fields/{formula} — input fields for a formula and mode
POST /api/calculations/stock            — price catalog section stock
"""

from typing import Optional

from fastapi import APIRouter

from .. import schemas
from ..calculators.registry import list_calculators
from ..calculators.stock import SectionStockCalculator
from ..controller import has_all_required_inputs
from ..engine import calculate_results
from ..field_config import calc_mode_for, default_unit_for_key, get_field_config, \
    should_show_unit_for_key

router = APIRouter(prefix="/calculations", tags=["calculations"])


@router.post("", response_model=schemas.CalculationResponse)
def calculate(request: schemas.CalculationRequest):
    """
    Same gating as the interactive controller: the result is null when the
    quantity is zero or any required field is missing.
    """
    dims = dict(request.dims)
    fields = get_field_config(request.formula, dims)
    result = None
    if request.quantity > 0 and has_all_required_inputs(request.formula, dims):
        result = calculate_results(request.formula, dims, request.quantity, request.price_per_kg)
    return schemas.CalculationResponse(formula=request.formula, fields=fields, result=result)


@router.get("/formulas", response_model=list[str])
def formulas():
    return list_calculators()


@router.get("/fields/{formula}", response_model=schemas.FieldConfigResponse)
def fields(formula: str, calc_mode: Optional[str] = None, include_radius: bool = False):
    dims = {"includeRadius": include_radius}
    if calc_mode:
        dims["calcMode"] = calc_mode
    active_mode = calc_mode_for(formula, dims)
    return schemas.FieldConfigResponse(
        formula=formula,
        calc_mode=active_mode,
        include_radius=include_radius,
        fields=[
            schemas.FieldInfo(
                **f.model_dump(),
                default_unit=default_unit_for_key(formula, f.key),
                show_unit=should_show_unit_for_key(formula, f.key, active_mode),
            )
            for f in get_field_config(formula, dims)
        ],
    )


@router.post("/stock", response_model=schemas.StockResult)
def price_stock(request: schemas.StockRequest):
    """Catalog section by kg/m × length, or a plate by its dimensions."""
    return SectionStockCalculator().calculate(
        dims=request.dims,
        weight_per_meter=request.weight_per_meter,
        price_per_kg=request.price_per_kg,
        length_m=request.length_m,
        required=request.required,
    )
