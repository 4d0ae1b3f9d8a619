"""
Rolled and cold-formed sections.

Channels and beams are built from flange and web rectangles, with optional
fillet corrections at the web/flange roots. Cold-formed shapes (Z, hat,
lipped C, T) use the developed width: sum of straight wall lengths × thickness.
"""

import math

from .base import LinearProfileCalculator, ProfileCalculator


def _fillet_area(radius: float, web_thickness: float, corners: int) -> float:
    # Quarter annulus between the root radius and radius + web thickness, per corner
    inner = radius
    outer = radius + web_thickness
    return corners * (math.pi / 4) * (outer ** 2 - inner ** 2)


class EqualAngleCalculator(ProfileCalculator):
    """Equal-leg angle, leg tf, thickness t. Root fillet ignored."""

    def calculate(self, dims, density_g_cm3):
        side_m = self.mm_to_m(dims.tf)
        t_m = self.mm_to_m(dims.t)
        area_m2 = 2 * side_m * t_m - t_m * t_m
        unit = area_m2 * self.density_kg_m3(density_g_cm3)
        return unit * self.mm_to_m(dims.h), unit


class UChannelCalculator(LinearProfileCalculator):
    """
    Height tf, flange width tw, web thickness t, flange thickness r,
    root radius s. Two fillets are added whenever a radius is given.
    """

    def section_area(self, dims):
        height, flange_w, web_t, flange_t, radius = dims.tf, dims.tw, dims.t, dims.r, dims.s
        area = 2 * (flange_w * flange_t) + (height - 2 * flange_t) * web_t
        if radius > 0:
            area += _fillet_area(radius, web_t, corners=2)
        return area


class IBeamCalculator(LinearProfileCalculator):
    """
    Height tw, flange width tf, flange thickness r, web thickness t,
    root radius s. Four fillets, only when includeRadius is set.
    """

    def section_area(self, dims):
        height, flange_w, flange_t, web_t, radius = dims.tw, dims.tf, dims.r, dims.t, dims.s
        area = 2 * (flange_w * flange_t) + (height - 2 * flange_t) * web_t
        if dims.include_radius and radius > 0:
            area += _fillet_area(radius, web_t, corners=4)
        return area


class TSectionCalculator(LinearProfileCalculator):
    """Flange width tf, flange thickness r, overall height tw, web thickness t."""

    def section_area(self, dims):
        web_height = dims.tw - dims.r
        return dims.tf * dims.r + dims.t * web_height


class LippedCChannelCalculator(LinearProfileCalculator):
    """Height tw, flange tf, lip r, thickness t. Corner overlaps removed (4·t²)."""

    def section_area(self, dims):
        t = dims.t
        return dims.tw * t + 2 * dims.tf * t + 2 * dims.r * t - 4 * t * t


class HatChannelCalculator(LinearProfileCalculator):
    """Top width tf, height tw, base flange r, lip s, thickness t."""

    def section_area(self, dims):
        developed_width = dims.tf + 2 * dims.tw + 2 * dims.r + 2 * dims.s
        return developed_width * dims.t


class ZChannelCalculator(LinearProfileCalculator):
    """Web tw, flanges tf / r, lips s / u, thickness t."""

    def section_area(self, dims):
        developed_width = dims.tw + dims.tf + dims.r + dims.s + dims.u
        return developed_width * dims.t
