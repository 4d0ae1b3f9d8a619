"""
Solid bar stock: strip, round, flat, square, hex bar and rebar.

Length is `h`, the governing cross-section dimension is `tf`.
"""

from .base import LinearProfileCalculator, ProfileCalculator, STEEL_DENSITY_G_CM3

# kg/m per mm² of diameter for steel round bar (π/4 × 7.85e-3)
ROUND_BAR_CONSTANT = 0.006165
# Rebar unit weight: d² / 162 kg/m
REBAR_DIVISOR = 162


class StripCalculator(ProfileCalculator):
    """Flat strip: width tf, thickness tw, length h."""

    def calculate(self, dims, density_g_cm3):
        piece = (dims.tf * dims.h * dims.tw * density_g_cm3) / 1_000_000
        unit = (dims.tf * 1000 * dims.tw * density_g_cm3) / 1_000_000
        return piece, unit


class RoundBarCalculator(ProfileCalculator):
    """
    Round bar from the steel constant 0.006165 × d².

    Density is not applied here, unlike the other bar formulas; every
    material is weighed as steel.
    """

    def calculate(self, dims, density_g_cm3):
        unit = ROUND_BAR_CONSTANT * dims.tf ** 2
        return unit * self.mm_to_m(dims.h), unit


class FlatBarCalculator(LinearProfileCalculator):

    def section_area(self, dims):
        return dims.tf * dims.tw


class SquareBarCalculator(LinearProfileCalculator):

    def section_area(self, dims):
        return dims.tf ** 2


class HexBarCalculator(LinearProfileCalculator):

    def section_area(self, dims):
        return self.hexagon_area(dims.tf)


class RebarCalculator(ProfileCalculator):
    """Deformed bar, nominal diameter tf."""

    def calculate(self, dims, density_g_cm3):
        unit = (dims.tf ** 2 / REBAR_DIVISOR) * (density_g_cm3 / STEEL_DENSITY_G_CM3)
        return unit * self.mm_to_m(dims.h), unit
