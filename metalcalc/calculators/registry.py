"""
Calculator registry — maps formula ids to calculator classes.

Unknown ids resolve to FallbackCalculator (zero weight) instead of raising,
so a catalog entry with a bad formula degrades to an empty result.
"""

import enum
import logging

from .base import FallbackCalculator, ProfileCalculator
from .bars import (
    FlatBarCalculator, HexBarCalculator, RebarCalculator, RoundBarCalculator,
    SquareBarCalculator, StripCalculator,
)
from .meshes import SteelGratingCalculator, WireMeshCalculator
from .plates import ExpandedMetalCalculator, PlateCalculator
from .sections import (
    EqualAngleCalculator, HatChannelCalculator, IBeamCalculator,
    LippedCChannelCalculator, TSectionCalculator, UChannelCalculator,
    ZChannelCalculator,
)
from .solids import ConeFrustumCalculator, FlangeRingCalculator, SolidSphereCalculator
from .tubes import HexTubeCalculator, RectTubeCalculator, RoundTubeCalculator, SquareTubeCalculator

logger = logging.getLogger(__name__)


class FormulaId(str, enum.Enum):
    STRIP = "strip"
    ROUND_BAR = "round_bar"
    EQUAL_ANGLE = "equal_angle"
    PLATE = "plate"
    U_CHANNEL = "u_channel"
    ROUND_TUBE = "round_tube"
    REBAR = "rebar"
    FLAT_BAR = "flat_bar"
    HEX_BAR = "hex_bar"
    HEX_TUBE = "hex_tube"
    SQUARE_BAR = "square_bar"
    SQUARE_TUBE = "square_tube"
    SOLID_SPHERE = "solid_sphere"
    RECT_TUBE = "rect_tube"
    CONE_FRUSTUM = "cone_frustum"
    T_SECTION = "t_section"
    LIPPED_C_CHANNEL = "lipped_c_channel"
    STEEL_GRATING = "steel_grating"
    HAT_CHANNEL = "hat_channel"
    WIRE_MESH = "wire_mesh"
    Z_CHANNEL = "z_channel"
    FLANGE_RING = "flange_ring"
    I_BEAM = "i_beam"
    EXPANDED_METAL = "expanded_metal"


CALCULATOR_REGISTRY: dict[str, type] = {
    FormulaId.STRIP.value: StripCalculator,
    FormulaId.ROUND_BAR.value: RoundBarCalculator,
    FormulaId.EQUAL_ANGLE.value: EqualAngleCalculator,
    FormulaId.PLATE.value: PlateCalculator,
    FormulaId.U_CHANNEL.value: UChannelCalculator,
    FormulaId.ROUND_TUBE.value: RoundTubeCalculator,
    FormulaId.REBAR.value: RebarCalculator,
    FormulaId.FLAT_BAR.value: FlatBarCalculator,
    FormulaId.HEX_BAR.value: HexBarCalculator,
    FormulaId.HEX_TUBE.value: HexTubeCalculator,
    FormulaId.SQUARE_BAR.value: SquareBarCalculator,
    FormulaId.SQUARE_TUBE.value: SquareTubeCalculator,
    FormulaId.SOLID_SPHERE.value: SolidSphereCalculator,
    FormulaId.RECT_TUBE.value: RectTubeCalculator,
    FormulaId.CONE_FRUSTUM.value: ConeFrustumCalculator,
    FormulaId.T_SECTION.value: TSectionCalculator,
    FormulaId.LIPPED_C_CHANNEL.value: LippedCChannelCalculator,
    FormulaId.STEEL_GRATING.value: SteelGratingCalculator,
    FormulaId.HAT_CHANNEL.value: HatChannelCalculator,
    FormulaId.WIRE_MESH.value: WireMeshCalculator,
    FormulaId.Z_CHANNEL.value: ZChannelCalculator,
    FormulaId.FLANGE_RING.value: FlangeRingCalculator,
    FormulaId.I_BEAM.value: IBeamCalculator,
    FormulaId.EXPANDED_METAL.value: ExpandedMetalCalculator,
}


def get_calculator(formula: str) -> ProfileCalculator:
    """Returns an instance of the calculator for a formula id, or the zero-weight fallback."""
    key = formula.value if isinstance(formula, FormulaId) else formula
    calculator_cls = CALCULATOR_REGISTRY.get(key)
    if calculator_cls is None:
        logger.debug("No calculator registered for formula %r, using zero-weight fallback", formula)
        return FallbackCalculator()
    return calculator_cls()


def has_calculator(formula: str) -> bool:
    """Check if a calculator exists for a formula id."""
    key = formula.value if isinstance(formula, FormulaId) else formula
    return key in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered formula ids."""
    return list(CALCULATOR_REGISTRY.keys())
