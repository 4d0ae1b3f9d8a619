"""
Hollow sections: outer shape minus the inner shape left after a uniform wall.
"""

from .base import LinearProfileCalculator


class RoundTubeCalculator(LinearProfileCalculator):
    """OD tf, wall tw."""

    def section_area(self, dims):
        inner = dims.tf - 2 * dims.tw
        return self.annulus_area(dims.tf, inner)


class SquareTubeCalculator(LinearProfileCalculator):
    """Outer side tf, wall tw."""

    def section_area(self, dims):
        inner = dims.tf - 2 * dims.tw
        return dims.tf ** 2 - inner ** 2


class RectTubeCalculator(LinearProfileCalculator):
    """Outer width tf, outer height tw, wall t."""

    def section_area(self, dims):
        inner_w = dims.tf - 2 * dims.t
        inner_h = dims.tw - 2 * dims.t
        return dims.tf * dims.tw - inner_w * inner_h


class HexTubeCalculator(LinearProfileCalculator):
    """Outer across-flats tf, wall tw."""

    def section_area(self, dims):
        inner = dims.tf - 2 * dims.tw
        return self.hexagon_area(dims.tf) - self.hexagon_area(inner)
