from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Union


class FieldSpec(BaseModel):
    key: str
    label: str
    title: str


class FieldInfo(FieldSpec):
    default_unit: str
    show_unit: bool


class CalculationResult(BaseModel):
    unit_weight_per_meter: str
    piece_weight: str
    total_weight: str
    total_price: str


class CalculationRequest(BaseModel):
    formula: str
    dims: Dict[str, Union[bool, str, float, None]] = {}
    quantity: int = Field(default=1, ge=0)
    price_per_kg: Optional[float] = None


class CalculationResponse(BaseModel):
    formula: str
    fields: List[FieldSpec]
    result: Optional[CalculationResult] = None


class FieldConfigResponse(BaseModel):
    formula: str
    calc_mode: Optional[str] = None
    include_radius: bool = False
    fields: List[FieldInfo]


class DensityItem(BaseModel):
    label: str
    density_kg_m3: float
    display: str


class DensityGroup(BaseModel):
    label: str
    items: List[DensityItem]


class DensityCatalog(BaseModel):
    unit: str
    unit_label: str
    groups: List[DensityGroup]


class StockDimensions(BaseModel):
    h: Optional[float] = None
    w: Optional[float] = None
    th: Optional[float] = None
    t: Optional[float] = None
    unit: Optional[str] = None
    density: Optional[str] = None


class StockRequest(BaseModel):
    dims: Optional[StockDimensions] = None
    weight_per_meter: Optional[float] = None
    price_per_kg: float = 0.0
    length_m: float = 0.0
    required: float = 0.0


class StockResult(BaseModel):
    is_dims_mode: bool
    linear_meter_weight_kg_per_m: float
    weight_of_piece_kg: float
    price_of_piece: float
    total_weight_kg: float
    total_price: float
