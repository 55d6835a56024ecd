"""Clothoid (Euler spiral) geometry based on Fresnel integrals."""

import math
from collections.abc import Sequence

from odrkit.geometry import GeometryType, RoadGeometry
from odrkit.vecmath import Vec2D

# S(x) for small x
_SN = (
    -2.99181919401019853726e3,
    7.08840045257738576863e5,
    -6.29741486205862506537e7,
    2.54890880573376359104e9,
    -4.42979518059697779103e10,
    3.18016297876567817986e11,
)
_SD = (
    2.81376268889994315696e2,
    4.55847810806532581675e4,
    5.17343888770096400730e6,
    4.19320245898111231129e8,
    2.24411795645340920940e10,
    6.07366389490084639049e11,
)

# C(x) for small x
_CN = (
    -4.98843114573573548651e-8,
    9.50428062829859605134e-6,
    -6.45191435683965050962e-4,
    1.88843319396703850064e-2,
    -2.05525900955013891793e-1,
    9.99999999999999998822e-1,
)
_CD = (
    3.99982968972495980367e-12,
    9.15439215774657478799e-10,
    1.25001862479598821474e-7,
    1.22262789024179030997e-5,
    8.68029542941784300606e-4,
    4.12142090722199792936e-2,
    1.00000000000000000118e0,
)

# auxiliary function f(x)
_FN = (
    4.21543555043677546506e-1,
    1.43407919780758885261e-1,
    1.15220955073585758835e-2,
    3.45017939782574027900e-4,
    4.63613749287867322088e-6,
    3.05568983790257605827e-8,
    1.02304514164907233465e-10,
    1.72010743268161828879e-13,
    1.34283276233062758925e-16,
    3.76329711269987889006e-20,
)
_FD = (
    7.51586398353378947175e-1,
    1.16888925859191382142e-1,
    6.44051526508858611005e-3,
    1.55934409164153020873e-4,
    1.84627567348930545870e-6,
    1.12699224763999035261e-8,
    3.60140029589371370404e-11,
    5.88754533621578410010e-14,
    4.52001434074129701496e-17,
    1.25443237090011264384e-20,
)

# auxiliary function g(x)
_GN = (
    5.04442073643383265887e-1,
    1.97102833525523411709e-1,
    1.87648584092575249293e-2,
    6.84079380915393090172e-4,
    1.15138826111884280931e-5,
    9.82852443688422223854e-8,
    4.45344415861750144738e-10,
    1.08268041139020870318e-12,
    1.37555460633261799868e-15,
    8.36354435630677421531e-19,
    1.86958710162783235106e-22,
)
_GD = (
    1.47495759925128324529e0,
    3.37748989120019970451e-1,
    2.53603741420338795122e-2,
    8.14679107184306179049e-4,
    1.27545075667729118702e-5,
    1.04314589657571990585e-7,
    4.60680728146520428211e-10,
    1.10273215066240270757e-12,
    1.38796531259578871258e-15,
    8.39158816283118707363e-19,
    1.86958710162783236342e-22,
)


def _polevl(x: float, coefs: Sequence[float]) -> float:
    ans = coefs[0]
    for c in coefs[1:]:
        ans = ans * x + c
    return ans


def _p1evl(x: float, coefs: Sequence[float]) -> float:
    """Polynomial with an implied leading coefficient of one."""
    ans = 1.0
    for c in coefs:
        ans = ans * x + c
    return ans


def fresnel(x: float) -> tuple[float, float]:
    """Fresnel integrals ``(S(x), C(x))``."""
    ax = abs(x)
    x2 = ax * ax

    if x2 < 2.5625:
        t = x2 * x2
        ss = ax * x2 * _polevl(t, _SN) / _p1evl(t, _SD)
        cc = ax * _polevl(t, _CN) / _polevl(t, _CD)
    elif ax > 36974.0:
        cc = 0.5
        ss = 0.5
    else:
        t = math.pi * x2
        u = 1.0 / (t * t)
        t = 1.0 / t
        f = 1.0 - u * _polevl(u, _FN) / _p1evl(u, _FD)
        g = t * _polevl(u, _GN) / _p1evl(u, _GD)

        t = math.pi * 0.5 * x2
        c = math.cos(t)
        s = math.sin(t)
        t = math.pi * ax
        cc = 0.5 + (f * s - g * c) / t
        ss = 0.5 - (f * c + g * s) / t

    if x < 0.0:
        cc, ss = -cc, -ss
    return ss, cc


def odr_spiral(s: float, c_dot: float) -> tuple[float, float, float]:
    """Point ``(x, y)`` and tangent angle on the standard spiral starting with zero curvature.

    ``s`` is the run length along the spiral and ``c_dot`` the curvature change per metre.
    """
    if c_dot == 0:
        raise ValueError("spiral curvature rate must be non-zero")
    a = math.sqrt(math.pi) / math.sqrt(abs(c_dot))
    y, x = fresnel(s / a)
    x *= a
    y *= a
    if c_dot < 0.0:
        y = -y
    return x, y, s * s * c_dot * 0.5


class Spiral(RoadGeometry):
    """Clothoid whose curvature changes linearly from ``curv_start`` to ``curv_end``."""

    def __init__(
        self,
        s0: float,
        x0: float,
        y0: float,
        hdg0: float,
        length: float,
        curv_start: float,
        curv_end: float,
    ) -> None:
        if length == 0:
            raise ValueError("a spiral needs a non-zero length")
        if curv_start == curv_end:
            raise ValueError("a spiral needs differing start and end curvature")
        super().__init__(s0, x0, y0, hdg0, length, GeometryType.SPIRAL)
        self.curv_start = curv_start
        self.curv_end = curv_end
        self.c_dot = (curv_end - curv_start) / length
        self.s_start = curv_start / self.c_dot
        self.s_end = curv_end / self.c_dot
        self._s0_spiral = curv_start / self.c_dot
        self._x0_spiral, self._y0_spiral, self._a0_spiral = odr_spiral(self._s0_spiral, self.c_dot)

    def get_xy(self, s: float) -> Vec2D:
        """Point at ``s``, the standard spiral moved into this geometry's start pose."""
        xs, ys, _ = odr_spiral(s - self.s0 + self._s0_spiral, self.c_dot)
        hdg = self.hdg0 - self._a0_spiral
        dx = xs - self._x0_spiral
        dy = ys - self._y0_spiral
        xt = math.cos(hdg) * dx - math.sin(hdg) * dy + self.x0
        yt = math.sin(hdg) * dx + math.cos(hdg) * dy + self.y0
        return (xt, yt)

    def get_grad(self, s: float) -> Vec2D:
        """Unit tangent at ``s``."""
        _, _, a_s = odr_spiral(s - self.s0 + self._s0_spiral, self.c_dot)
        hdg = a_s + self.hdg0 - self._a0_spiral
        return (math.cos(hdg), math.sin(hdg))

    def approximate_linear(self, eps: float) -> list[float]:
        """Samples every ``10 * eps`` along the spiral, plus the end point."""
        if eps <= 0:
            raise ValueError("eps must be positive")
        s_end = self.s0 + self.length
        s_vals = set()
        s = self.s0
        while s < s_end:
            s_vals.add(s)
            s += 10 * eps
        s_vals.add(s_end)
        return sorted(s_vals)