"""
Discrete 3-D parts: sphere, cone frustum shell, flange ring.

These have no meaningful weight per metre; the unit weight reported is the
piece weight.
"""

import math

from .base import ProfileCalculator


class SolidSphereCalculator(ProfileCalculator):
    """Diameter tf."""

    def calculate(self, dims, density_g_cm3):
        radius_m = self.mm_to_m(dims.tf) / 2
        volume_m3 = (4 / 3) * math.pi * radius_m ** 3
        piece = volume_m3 * self.density_kg_m3(density_g_cm3)
        return piece, piece


class ConeFrustumCalculator(ProfileCalculator):
    """
    Sheet-metal frustum: top diameter tf, bottom diameter tw, vertical
    height h, sheet thickness t. Lateral surface × thickness.
    """

    def calculate(self, dims, density_g_cm3):
        r1 = dims.tf / 2
        r2 = dims.tw / 2
        slant = math.sqrt(dims.h ** 2 + (r1 - r2) ** 2)
        lateral_area = math.pi * (r1 + r2) * slant
        piece = self.mass_from_volume_mm3(lateral_area * dims.t, density_g_cm3)
        return piece, piece


class FlangeRingCalculator(ProfileCalculator):
    """
    Flat ring: OD tf, ID tw, thickness t, bolt hole diameter s.
    The hole count comes from the unscaled `r` input.
    """

    def calculate(self, dims, density_g_cm3):
        hole_count = dims.raw_value("r")
        face_area = (
            self.circle_area(dims.tf)
            - self.circle_area(dims.tw)
            - hole_count * self.circle_area(dims.s)
        )
        piece = self.mass_from_volume_mm3(face_area * dims.t, density_g_cm3)
        return piece, piece
