"""Lookup, search and approximation helpers shared across the package."""

import math
from bisect import bisect_right
from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

from odrkit.vecmath import norm

V = TypeVar("V")

_INVPHI = (math.sqrt(5) - 1) / 2
_INVPHI2 = (3 - math.sqrt(5)) / 2


def _sorted_keys(mapping: Mapping) -> list:
    if not mapping:
        raise ValueError("map empty")
    return sorted(mapping)


def get_nearest_lower_val(mapping: Mapping[float, V], k: float) -> V:
    """Value at the greatest key not above ``k``, or at the first key if ``k`` is below all keys."""
    keys = _sorted_keys(mapping)
    idx = max(bisect_right(keys, k) - 1, 0)
    return mapping[keys[idx]]


def get_nearest_key(mapping: Mapping[float, object], k: float) -> float:
    """Key closest to ``k``; on a tie the greater key wins."""
    keys = _sorted_keys(mapping)
    idx = bisect_right(keys, k)
    if idx == len(keys):
        return keys[-1]
    if idx == 0:
        return keys[0]
    lower, upper = keys[idx - 1], keys[idx]
    return lower if abs(lower - k) < abs(upper - k) else upper


def get_key_interval(mapping: Mapping[int, object], k: int, end_k: int) -> tuple[int, int]:
    """Return the interval ``(start, end)`` of keys that contains ``k``; the last interval ends at ``end_k``."""
    keys = _sorted_keys(mapping)
    idx = max(bisect_right(keys, k) - 1, 0)
    end = end_k if idx + 1 == len(keys) else keys[idx + 1]
    return int(keys[idx]), int(end)


def golden_section_search(f: Callable[[float], float], a: float, b: float, tol: float) -> float:
    """Locate the minimum of the unimodal function ``f`` on ``[a, b]`` to within ``tol``."""
    h = b - a
    if h <= tol:
        return 0.5 * (a + b)

    n = int(math.ceil(math.log(tol / h) / math.log(_INVPHI)))

    c = a + _INVPHI2 * h
    d = a + _INVPHI * h
    yc = f(c)
    yd = f(d)

    for _ in range(n - 1):
        if yc < yd:
            b, d, yd = d, c, yc
            h *= _INVPHI
            c = a + _INVPHI2 * h
            yc = f(c)
        else:
            a, c, yc = c, d, yd
            h *= _INVPHI
            d = a + _INVPHI * h
            yd = f(d)

    if yc < yd:
        return 0.5 * (a + d)
    return 0.5 * (c + b)


def rdp(
    points: Sequence[Sequence[float]],
    epsilon: float,
    start_idx: int = 0,
    step: int = 1,
    end_idx: int = -1,
) -> list:
    """Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    Only every ``step``-th point from ``start_idx`` up to ``end_idx`` (exclusive,
    the whole sequence if not positive) is considered.
    """
    end = end_idx if end_idx > 0 else len(points)
    last_idx = ((end - start_idx - 1) // step) * step + start_idx
    if last_idx + 1 - start_idx < 2:
        return []

    first, last = points[start_idx], points[last_idx]
    delta = [l - f for f, l in zip(first, last)]
    mag = math.sqrt(sum(x * x for x in delta))
    if mag > 0.0:
        delta = [x / mag for x in delta]

    d_max = 0.0
    d_max_idx = 0
    for idx in range(start_idx + step, last_idx, step):
        pv = [p - f for f, p in zip(first, points[idx])]
        pvdot = sum(dl * p for dl, p in zip(delta, pv))
        d = math.sqrt(sum((p - pvdot * dl) ** 2 for p, dl in zip(pv, delta)))
        if d > d_max:
            d_max = d
            d_max_idx = idx

    if d_max > epsilon:
        head = rdp(points, epsilon, start_idx, step, d_max_idx + 1)
        tail = rdp(points, epsilon, d_max_idx, step, end)
        return head[:-1] + tail
    return [points[start_idx], points[last_idx]]


def approximate_linear_quad_bezier(ctrl_pts: Sequence[Sequence[float]], eps: float) -> list[float]:
    """Parameter values sampling a quadratic Bezier so that chords stay within ``eps``."""
    p0, p1, p2 = ctrl_pts
    param_c = [a - 2 * b + c for a, b, c in zip(p0, p1, p2)]
    c_norm = norm(param_c)
    step_size = 1.0 if c_norm == 0 else min(math.sqrt((4 * eps) / c_norm), 1.0)

    p_vals = []
    p = 0.0
    while p < 1:
        p_vals.append(p)
        p += step_size
    if p_vals[-1] != 1:
        p_vals.append(1.0)
    return p_vals


def get_triangle_strip_outline_indices(num_vertices: int) -> list[int]:
    """Line-segment indices outlining a triangle strip of ``num_vertices`` vertices."""
    if num_vertices < 2:
        raise ValueError("a triangle strip needs at least two vertices")
    out: list[int] = []
    for first in (0, 1):
        for idx in range(first, num_vertices - 2, 2):
            out.extend((idx, idx + 2))
    out.extend((0, 1, num_vertices - 2, num_vertices - 1))
    return out


def next_towards_zero(value: int) -> int:
    """Step an integer one unit towards zero."""
    if value > 0:
        return value - 1
    if value < 0:
        return value + 1
    return 0