"""
Sheet and plate: solid plate and expanded metal.
"""

from .base import ProfileCalculator


class PlateCalculator(ProfileCalculator):
    """Length h, width tf, thickness tw. Unit weight is per metre of length."""

    def calculate(self, dims, density_g_cm3):
        length_m = self.mm_to_m(dims.h)
        width_m = self.mm_to_m(dims.tf)
        thickness_m = self.mm_to_m(dims.tw)
        rho = self.density_kg_m3(density_g_cm3)
        return length_m * width_m * thickness_m * rho, width_m * thickness_m * rho


class ExpandedMetalCalculator(ProfileCalculator):
    """
    Two input styles:

    - thickness: weighed as a solid sheet (thickness tw, length h, width tf)
    - weight: stated kg/m² (raw tf) × stated total area in m² (raw h)
    """

    def calculate(self, dims, density_g_cm3):
        mode = dims.calc_mode or "thickness"
        if mode == "thickness":
            return PlateCalculator().calculate(dims, density_g_cm3)

        weight_per_m2 = dims.raw_value("tf")
        area_m2 = dims.raw_value("h")
        return weight_per_m2 * area_m2, weight_per_m2
