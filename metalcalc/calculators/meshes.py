"""
Panel products: steel grating and welded wire mesh.

Both accept either a stated weight per m² ("weight" mode, the default) or the
member geometry. Panel length is h, width tf. Unit weight is per metre of
panel length.
"""

from .base import ProfileCalculator


class SteelGratingCalculator(ProfileCalculator):
    """
    Geometric mode: bearing bars hb (tw) × tb (t) at spacing sb (r) run the
    panel length; round cross bars dc (s) at spacing sc (u) run the width.
    """

    def calculate(self, dims, density_g_cm3):
        mode = dims.calc_mode or "weight"
        length_m = self.mm_to_m(dims.h)
        width_m = self.mm_to_m(dims.tf)

        if mode == "weight":
            piece = length_m * width_m * dims.raw_value("tw")
        else:
            bearing_kg_m = self.kg_per_m_from_area(dims.tw * dims.t, density_g_cm3)
            bearing_count = self.member_count(dims.tf, dims.r)
            bearing_weight = bearing_kg_m * length_m * bearing_count

            cross_kg_m = self.kg_per_m_from_area(self.circle_area(dims.s), density_g_cm3)
            cross_count = self.member_count(dims.h, dims.u)
            cross_weight = cross_kg_m * width_m * cross_count

            piece = bearing_weight + cross_weight

        return piece, self.per_length(piece, length_m)


class WireMeshCalculator(ProfileCalculator):
    """
    Geometric mode: wire diameter d (tw), pitches p1 (r) and p2 (s).
    One square metre holds 1000/p1 + 1000/p2 metres of wire.
    """

    def calculate(self, dims, density_g_cm3):
        mode = dims.calc_mode or "weight"
        length_m = self.mm_to_m(dims.h)
        width_m = self.mm_to_m(dims.tf)

        if mode == "weight":
            weight_per_m2 = dims.raw_value("tw")
        else:
            wire_kg_m = self.kg_per_m_from_area(self.circle_area(dims.tw), density_g_cm3)
            wire_m_per_m2 = self._wires_per_metre(dims.r) + self._wires_per_metre(dims.s)
            weight_per_m2 = wire_kg_m * wire_m_per_m2

        piece = length_m * width_m * weight_per_m2
        return piece, self.per_length(piece, length_m)

    def _wires_per_metre(self, pitch_mm):
        return 1000 / pitch_mm if pitch_mm > 0 else 0.0
