from fastapi import APIRouter, HTTPException

from .. import schemas
from ..materials import catalog_in_unit
from ..units import DENSITY_UNITS, density_unit_label

router = APIRouter(prefix="/materials", tags=["materials"])

_DENSITY_UNIT_VALUES = [u["value"] for u in DENSITY_UNITS]


@router.get("/densities", response_model=schemas.DensityCatalog)
def list_densities(unit: str = "kg_m3"):
    """Density catalog, converted and formatted for the requested unit."""
    if unit not in _DENSITY_UNIT_VALUES:
        raise HTTPException(
            status_code=400,
            detail="Unknown density unit: %s. Available: %s" % (unit, _DENSITY_UNIT_VALUES),
        )
    return schemas.DensityCatalog(
        unit=unit,
        unit_label=density_unit_label(unit),
        groups=catalog_in_unit(unit),
    )


@router.get("/density-units")
def list_density_units():
    return DENSITY_UNITS
