"""
Abstract base class for all profile calculators.

Input: Dimensions (canonical millimetres) + density in g/cm³
Output: (piece_weight_kg, unit_weight_kg_per_m)
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

STEEL_DENSITY_G_CM3 = 7.85
# kg per metre of steel bar per mm² of cross-section
STEEL_KG_PER_M_PER_MM2 = 0.00785

DIMENSION_KEYS = ("h", "tf", "tw", "t", "r", "s", "u")


@dataclass(frozen=True)
class Dimensions:
    """
    Canonical inputs for one calculation.

    The seven short keys hold lengths in millimetres. `raw` keeps the same
    keys unscaled, for inputs that are counts, areas or weights-per-area
    rather than lengths.
    """
    h: float = 0.0
    tf: float = 0.0
    tw: float = 0.0
    t: float = 0.0
    r: float = 0.0
    s: float = 0.0
    u: float = 0.0
    raw: dict = field(default_factory=dict)
    calc_mode: str = None
    include_radius: bool = False

    def raw_value(self, key: str) -> float:
        return self.raw.get(key, 0.0)


class ProfileCalculator(ABC):
    """All profile calculators inherit from this."""

    @abstractmethod
    def calculate(self, dims: Dimensions, density_g_cm3: float) -> tuple:
        """Returns (piece_weight_kg, unit_weight_kg_per_m)."""
        pass

    # --- Helper methods for all calculators ---

    def mm_to_m(self, value_mm: float) -> float:
        return value_mm / 1000.0

    def density_kg_m3(self, density_g_cm3: float) -> float:
        return density_g_cm3 * 1000.0

    def kg_per_m_from_area(self, area_mm2: float, density_g_cm3: float) -> float:
        """Linear weight of a bar with the given cross-section, scaled from steel."""
        return area_mm2 * STEEL_KG_PER_M_PER_MM2 * (density_g_cm3 / STEEL_DENSITY_G_CM3)

    def mass_from_volume_mm3(self, volume_mm3: float, density_g_cm3: float) -> float:
        return (volume_mm3 / 1_000_000_000) * self.density_kg_m3(density_g_cm3)

    def circle_area(self, diameter: float) -> float:
        return (math.pi / 4) * diameter ** 2

    def annulus_area(self, outer_diameter: float, inner_diameter: float) -> float:
        return (math.pi / 4) * (outer_diameter ** 2 - inner_diameter ** 2)

    def hexagon_area(self, across_flats: float) -> float:
        return (math.sqrt(3) / 2) * across_flats ** 2

    def member_count(self, span: float, spacing: float) -> int:
        """
        Bars needed across a span at the given spacing, at least one.
        Zero when either the span or the spacing is missing.
        """
        if spacing <= 0 or span <= 0:
            return 0
        return max(1, round_half_up(span / spacing))

    def per_length(self, piece_weight_kg: float, length_m: float) -> float:
        return piece_weight_kg / length_m if length_m > 0 else 0.0


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties towards +infinity (round() would go to even)."""
    return int(math.floor(value + 0.5))


class LinearProfileCalculator(ProfileCalculator):
    """
    Bar and section stock: a constant cross-section run along length `h`.
    Subclasses only provide the cross-section area in mm².
    """

    @abstractmethod
    def section_area(self, dims: Dimensions) -> float:
        pass

    def calculate(self, dims: Dimensions, density_g_cm3: float) -> tuple:
        unit_weight = self.kg_per_m_from_area(self.section_area(dims), density_g_cm3)
        return unit_weight * self.mm_to_m(dims.h), unit_weight


class FallbackCalculator(ProfileCalculator):
    """Formula ids with no geometry report zero weight."""

    def calculate(self, dims: Dimensions, density_g_cm3: float) -> tuple:
        return 0.0, 0.0
