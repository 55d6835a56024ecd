"""Cubic polynomials and piecewise cubic splines over the s coordinate."""

import copy
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field

from odrkit.bezier import CubicBezier


def _cmax(a: float, b: float) -> float:
    return b if a < b else a


def _cmin(a: float, b: float) -> float:
    return b if b < a else a


@dataclass(init=False)
class Poly3:
    """Cubic ``a + b*s + c*s^2 + d*s^3`` in absolute s."""

    a: float
    b: float
    c: float
    d: float

    def __init__(self, s0: float = 0.0, a: float = 0.0, b: float = 0.0, c: float = 0.0, d: float = 0.0) -> None:
        """Build from coefficients relative to ``s0``, stored resolved to absolute s."""
        self.a = a - b * s0 + c * s0 * s0 - d * s0 * s0 * s0
        self.b = b - 2 * c * s0 + 3 * d * s0 * s0
        self.c = c - 3 * d * s0
        self.d = d

    def get(self, s: float) -> float:
        """Value at ``s``."""
        return self.a + self.b * s + self.c * s * s + self.d * s * s * s

    def get_grad(self, s: float) -> float:
        """First derivative at ``s``."""
        return self.b + 2 * self.c * s + 3 * self.d * s * s

    def get_max(self, s_start: float, s_end: float) -> float:
        """Largest value at the extremum candidates clamped into ``[s_start, s_end]``."""
        a, b, c, d = self.a, self.b, self.c, self.d
        if d != 0:
            disc = c * c - 3 * b * d
            s_extr = (math.sqrt(disc) - c) / (3 * d) if disc >= 0 else math.nan
            val1 = self.get(_cmin(_cmax(s_extr, s_start), s_end))
            val2 = self.get(_cmin(_cmax(-s_extr, s_start), s_end))
            return _cmax(val1, val2)
        if c != 0:
            s_extr = -b / (2 * c)
            return self.get(_cmin(_cmax(s_extr, s_start), s_end))
        return self.get(s_start)

    def negate(self) -> None:
        """Flip the sign of every coefficient in place."""
        self.a, self.b, self.c, self.d = -self.a, -self.b, -self.c, -self.d

    def is_zero(self) -> bool:
        """True if every coefficient is zero."""
        return self.a == 0 and self.b == 0 and self.c == 0 and self.d == 0

    def set_zero(self) -> None:
        """Set every coefficient to zero."""
        self.a = self.b = self.c = self.d = 0.0

    def isnan(self) -> bool:
        """True if any coefficient is NaN."""
        return any(math.isnan(v) for v in (self.a, self.b, self.c, self.d))

    def approximate_linear(self, eps: float, s_start: float, s_end: float) -> list[float]:
        """Sorted s values whose polyline follows the cubic within ``eps``."""
        if s_start == s_end:
            return []
        a, b, c, d = self.a, self.b, self.c, self.d
        if d == 0 and c == 0:
            return sorted({s_start, s_end})
        if eps <= 0:
            raise ValueError("eps must be positive")

        s_vals: list[float] = []
        if d == 0:
            step = math.sqrt(abs(eps / c))
            s = s_start
            while s < s_end:
                s_vals.append(s)
                s += step
        else:
            s_0, s_1 = s_start, s_end
            d_p = -d * s_0**3 + d * s_1**3 - 3 * d * s_0 * s_1 * s_1 + 3 * d * s_0 * s_0 * s_1
            c_p = (
                3 * d * s_0**3
                + 3 * d * s_0 * s_1 * s_1
                - 6 * d * s_0 * s_0 * s_1
                + c * s_0 * s_0
                + c * s_1 * s_1
                - 2 * c * s_0 * s_1
            )
            b_p = -3 * d * s_0**3 + 3 * d * s_0 * s_0 * s_1 - 2 * c * s_0 * s_0 + 2 * c * s_0 * s_1 - b * s_0 + b * s_1
            a_p = d * s_0**3 + c * s_0 * s_0 + b * s_0 + a

            coefficients = ((a_p,), (b_p,), (c_p,), (d_p,))
            bezier = CubicBezier(CubicBezier.get_control_points(coefficients))
            s_vals.append(s_start)
            s_vals.extend(p * (s_end - s_start) + s_start for p in bezier.approximate_linear(eps))

        if s_vals and (s_end - s_vals[-1]) < 1e-9 and len(s_vals) != 1:
            s_vals[-1] = s_end
        else:
            s_vals.append(s_end)

        return sorted(set(s_vals))


def _nan_poly() -> Poly3:
    return Poly3(math.nan, math.nan, math.nan, math.nan, math.nan)


@dataclass
class CubicSpline:
    """Piecewise cubic keyed by the start s of each piece."""

    s0_to_poly: dict[float, Poly3] = field(default_factory=dict)

    def _keys(self) -> list[float]:
        return sorted(self.s0_to_poly)

    def _piece_range(self, s_start: float, s_end: float) -> tuple[list[float], range]:
        keys = self._keys()
        end_idx = bisect_left(keys, s_end)
        start_idx = max(bisect_right(keys, s_start) - 1, 0)
        return keys, range(start_idx, end_idx)

    def get(self, s: float, default_val: float = 0.0, extend_start: bool = True) -> float:
        """Value at ``s``, or ``default_val`` where no piece applies."""
        poly = self.get_poly(s, extend_start)
        if poly.isnan():
            return default_val
        return poly.get(s)

    def get_grad(self, s: float, default_val: float = 0.0, extend_start: bool = True) -> float:
        """Derivative at ``s``, or ``default_val`` where no piece applies."""
        poly = self.get_poly(s, extend_start)
        if poly.isnan():
            return default_val
        return poly.get_grad(s)

    def get_poly(self, s: float, extend_start: bool = True) -> Poly3:
        """Copy of the piece covering ``s``; an all-NaN polynomial where none applies.

        Below the first piece, the first piece applies only if ``extend_start`` is set.
        """
        if not self.s0_to_poly:
            return _nan_poly()
        keys = self._keys()
        if not extend_start and s < keys[0]:
            return _nan_poly()
        idx = max(bisect_right(keys, s) - 1, 0)
        return copy.copy(self.s0_to_poly[keys[idx]])

    def get_max(self, s_start: float, s_end: float) -> float:
        """Largest piece maximum over ``[s_start, s_end]``; 0 for an empty range or spline."""
        if s_start == s_end or not self.s0_to_poly:
            return 0.0
        keys, indices = self._piece_range(s_start, s_end)
        max_vals = []
        for idx in indices:
            piece_start = _cmax(keys[idx], s_start)
            piece_end = s_end if idx + 1 == indices.stop else _cmin(keys[idx + 1], s_end)
            max_vals.append(self.s0_to_poly[keys[idx]].get_max(piece_start, piece_end))
        return max(max_vals) if max_vals else 0.0

    def is_empty(self) -> bool:
        """True if the spline has no pieces."""
        return not self.s0_to_poly

    def __len__(self) -> int:
        return len(self.s0_to_poly)

    def negate(self) -> "CubicSpline":
        """New spline with every piece negated."""
        negated = CubicSpline({s0: copy.copy(poly) for s0, poly in self.s0_to_poly.items()})
        for poly in negated.s0_to_poly.values():
            poly.negate()
        return negated

    def add(self, other: "CubicSpline") -> "CubicSpline":
        """New spline equal to the sum of this one and ``other``."""
        if not other.s0_to_poly:
            return copy.deepcopy(self)
        if not self.s0_to_poly:
            return copy.deepcopy(other)

        result = CubicSpline()
        for s0 in sorted(set(self.s0_to_poly) | set(other.s0_to_poly)):
            this_poly = self.get_poly(s0, False)
            other_poly = other.get_poly(s0, False)
            if this_poly.isnan() or other_poly.isnan():
                result.s0_to_poly[s0] = other_poly if this_poly.isnan() else this_poly
                continue
            result.s0_to_poly[s0] = Poly3(
                0.0,
                this_poly.a + other_poly.a,
                this_poly.b + other_poly.b,
                this_poly.c + other_poly.c,
                this_poly.d + other_poly.d,
            )
        return result

    def approximate_linear(self, eps: float, s_start: float, s_end: float) -> list[float]:
        """Sorted s values whose polyline follows the spline within ``eps``."""
        if s_start == s_end or not self.s0_to_poly:
            return []
        keys, indices = self._piece_range(s_start, s_end)
        s_vals: set[float] = set()
        for idx in indices:
            piece_start = _cmax(keys[idx], s_start)
            piece_end = s_end if idx + 1 == indices.stop else _cmin(keys[idx + 1], s_end)
            piece_vals = self.s0_to_poly[keys[idx]].approximate_linear(eps, piece_start, piece_end)
            if len(piece_vals) < 2:
                raise ValueError(
                    f"expected at least two sample points, got {len(piece_vals)} "
                    f"for [{piece_start:f} {piece_end:f}]"
                )
            s_vals.update(piece_vals)
        return sorted(s_vals)