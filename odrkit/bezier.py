"""Cubic Bezier curves of any dimension with arc-length parametrisation."""

import math
from bisect import bisect_right
from collections.abc import Sequence

from odrkit.utils import approximate_linear_quad_bezier
from odrkit.vecmath import eucl_distance, norm

Point = tuple[float, ...]
ControlPoints = tuple[Point, Point, Point, Point]


def _lerp(a: Point, b: Point, t: float) -> Point:
    return tuple((1.0 - t) * x + t * y for x, y in zip(a, b))


def _as_four_points(points: Sequence[Sequence[float]]) -> ControlPoints:
    pts = tuple(tuple(float(x) for x in p) for p in points)
    if len(pts) != 4:
        raise ValueError("a cubic Bezier needs exactly four points")
    if len({len(p) for p in pts}) != 1:
        raise ValueError("all points must have the same dimension")
    return pts  # type: ignore[return-value]


class CubicBezier:
    """Cubic Bezier curve with a lookup table from arc length to curve parameter."""

    LENGTH_TOLERANCE = 1e-2

    def __init__(self, control_points: Sequence[Sequence[float]]) -> None:
        self.control_points: ControlPoints = _as_four_points(control_points)

        t_vals = self.approximate_linear(self.LENGTH_TOLERANCE)
        if len(t_vals) < 2:
            raise ValueError("expected at least two t values")

        self.arclen_t: dict[float, float] = {0.0: 0.0}
        arclen = 0.0
        for t_prev, t in zip(t_vals, t_vals[1:]):
            arclen += eucl_distance(self.get(t), self.get(t_prev))
            self.arclen_t[arclen] = t

        self.valid_length: float = max(self.arclen_t)

    @staticmethod
    def get_control_points(coefficients: Sequence[Sequence[float]]) -> ControlPoints:
        """Control points of the cubic ``a + b*x + c*x^2 + d*x^3`` given as ``(a, b, c, d)``."""
        a, b, c, d = _as_four_points(coefficients)
        p0 = a
        p1 = tuple(bk / 3 + ak for ak, bk in zip(a, b))
        p2 = tuple(ck / 3 + 2 * p1k - p0k for ck, p1k, p0k in zip(c, p1, p0))
        p3 = tuple(dk + 3 * p2k - 3 * p1k + p0k for dk, p2k, p1k, p0k in zip(d, p2, p1, p0))
        return (p0, p1, p2, p3)

    @staticmethod
    def get_coefficients(control_points: Sequence[Sequence[float]]) -> ControlPoints:
        """Polynomial coefficients ``(a, b, c, d)`` of the curve through ``control_points``."""
        pa, pb, pc, pd = _as_four_points(control_points)
        b = tuple(3 * y - 3 * x for x, y in zip(pa, pb))
        c = tuple(3 * z - 6 * y + 3 * x for x, y, z in zip(pa, pb, pc))
        d = tuple(w - 3 * z + 3 * y - x for x, y, z, w in zip(pa, pb, pc, pd))
        return (pa, b, c, d)

    def get(self, t: float) -> Point:
        """Point on the curve at parameter ``t``."""
        u = 1 - t
        return tuple(
            u * u * u * p0 + 3 * t * u * u * p1 + 3 * t * t * u * p2 + t * t * t * p3
            for p0, p1, p2, p3 in zip(*self.control_points)
        )

    def get_grad(self, t: float) -> Point:
        """Derivative of the curve with respect to ``t``."""
        _, b, c, d = self.get_coefficients(self.control_points)
        return tuple(bk + 2 * ck * t + 3 * dk * t * t for bk, ck, dk in zip(b, c, d))

    def get_t(self, arclen: float) -> float:
        """Curve parameter at arc length ``arclen``, interpolated from the lookup table."""
        if (arclen - self.valid_length) > self.LENGTH_TOLERANCE or arclen < 0:
            raise ValueError(
                "arc length %.3f out of range; valid length: %.3f" % (arclen, self.valid_length)
            )

        arclen_adj = min(arclen, self.valid_length)
        items = sorted(self.arclen_t.items())
        keys = [k for k, _ in items]
        idx = max(bisect_right(keys, arclen_adj) - 1, 0)

        arcl_lower, t_lower = items[idx]
        if arclen_adj == arcl_lower or idx + 1 == len(items):
            return t_lower

        arcl_upper, t_upper = items[idx + 1]
        return t_lower + ((arclen_adj - arcl_lower) / (arcl_upper - arcl_lower)) * (t_upper - t_lower)

    def get_length(self) -> float:
        """Arc length covered by the lookup table."""
        return max(self.arclen_t)

    def get_subcurve(self, t_start: float, t_end: float) -> ControlPoints:
        """Control points of the part of the curve between ``t_start`` and ``t_end``."""
        c0, c1, c2, c3 = self.control_points

        def blossom(t1: float, t2: float, t3: float) -> Point:
            l01, l12, l23 = _lerp(c0, c1, t1), _lerp(c1, c2, t1), _lerp(c2, c3, t1)
            return _lerp(_lerp(l01, l12, t2), _lerp(l12, l23, t2), t3)

        return (
            blossom(t_start, t_start, t_start),
            blossom(t_start, t_start, t_end),
            blossom(t_start, t_end, t_end),
            blossom(t_end, t_end, t_end),
        )

    def approximate_linear(self, eps: float) -> list[float]:
        """Sorted parameter values so that the polyline through them stays within ``eps``."""
        if eps <= 0:
            raise ValueError("eps must be positive")

        coefficients = self.get_coefficients(self.control_points)
        cubic_norm = norm(coefficients[3])
        seg_size = math.inf if cubic_norm == 0 else (0.5 * eps / ((1.0 / 54.0) * cubic_norm)) ** (1.0 / 3.0)

        intervals: list[list[float]] = []
        t = 0.0
        while t < 1:
            intervals.append([t, min(t + seg_size, 1.0)])
            t += seg_size

        if 1.0 - intervals[-1][1] < 1e-6:
            intervals[-1][1] = 1.0
        else:
            intervals.append([intervals[-1][1], 1.0])

        t_vals = [0.0]
        for t0, t1 in intervals:
            sub = self.get_subcurve(t0, t1)
            # split the cubic piece into two quadratic ones
            b_quad_0 = _lerp(sub[0], sub[1], 0.75)
            b_quad_1 = _lerp(sub[3], sub[2], 0.75)
            m_quad = _lerp(b_quad_0, b_quad_1, 0.5)

            for p in approximate_linear_quad_bezier((sub[0], b_quad_0, m_quad), 0.5 * eps):
                t_vals.append(t0 + p * (t1 - t0) * 0.5)
            t_vals.pop()
            for p in approximate_linear_quad_bezier((m_quad, b_quad_1, sub[3]), 0.5 * eps):
                t_vals.append(t0 + (t1 - t0) * 0.5 + p * (t1 - t0) * 0.5)
            t_vals.pop()
        t_vals.append(1.0)

        return sorted(set(t_vals))