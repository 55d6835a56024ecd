"""Parametric cubic reference-line geometry."""

import math

from odrkit.bezier import CubicBezier
from odrkit.geometry import GeometryType, RoadGeometry
from odrkit.vecmath import Vec2D


class ParamPoly3(RoadGeometry):
    """Curve ``u(p), v(p)`` given by two cubics in the local frame of the start pose.

    With ``p_range_normalized`` the parameter runs over ``[0, 1]``, otherwise over
    ``[0, length]``; the coefficients are rescaled to the normalised range.
    """

    def __init__(
        self,
        s0: float,
        x0: float,
        y0: float,
        hdg0: float,
        length: float,
        aU: float,
        bU: float,
        cU: float,
        dU: float,
        aV: float,
        bV: float,
        cV: float,
        dV: float,
        p_range_normalized: bool = True,
    ) -> None:
        super().__init__(s0, x0, y0, hdg0, length, GeometryType.PARAM_POLY3)
        self.p_range_normalized = p_range_normalized
        if not p_range_normalized:
            bU, bV = bU * length, bV * length
            cU, cV = cU * length**2, cV * length**2
            dU, dV = dU * length**3, dV * length**3
        self.aU, self.bU, self.cU, self.dU = aU, bU, cU, dU
        self.aV, self.bV, self.cV, self.dV = aV, bV, cV, dV

        coefficients = ((aU, aV), (bU, bV), (cU, cV), (dU, dV))
        self.cubic_bezier = CubicBezier(CubicBezier.get_control_points(coefficients))
        self.cubic_bezier.arclen_t[length] = 1.0
        self.cubic_bezier.valid_length = length

    def _to_world(self, u: float, v: float) -> Vec2D:
        c, s = math.cos(self.hdg0), math.sin(self.hdg0)
        return (c * u - s * v, s * u + c * v)

    def get_xy(self, s: float) -> Vec2D:
        """Point at road coordinate ``s``."""
        p = self.cubic_bezier.get_t(s - self.s0)
        u, v = self.cubic_bezier.get(p)
        x, y = self._to_world(u, v)
        return (x + self.x0, y + self.y0)

    def get_grad(self, s: float) -> Vec2D:
        """Derivative with respect to the curve parameter, rotated into the world frame."""
        p = self.cubic_bezier.get_t(s - self.s0)
        du, dv = self.cubic_bezier.get_grad(p)
        return self._to_world(du, dv)

    def approximate_linear(self, eps: float) -> list[float]:
        """Sorted s values whose polyline follows the curve within ``eps``."""
        return sorted({p * self.length + self.s0 for p in self.cubic_bezier.approximate_linear(eps)})