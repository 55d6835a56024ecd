"""Small fixed-size vector and matrix helpers built on plain tuples."""

import math
from collections.abc import Sequence
from numbers import Real
from typing import Union

Vec = tuple[float, ...]
Vec1D = tuple[float]
Vec2D = tuple[float, float]
Vec3D = tuple[float, float, float]
Line3D = list[Vec3D]
Mat3D = tuple[Vec3D, Vec3D, Vec3D]

VecLike = Sequence[float]
ScalarOrVec = Union[float, VecLike]


def sign(val: float) -> int:
    """Return -1, 0 or 1 depending on the sign of ``val``."""
    return (0 < val) - (val < 0)


def add(a: ScalarOrVec, b: VecLike) -> Vec:
    """Add two vectors element-wise, or add the scalar ``a`` to each element of ``b``."""
    if isinstance(a, Real):
        return tuple(a + x for x in b)
    return tuple(x + y for x, y in zip(a, b, strict=True))


def sub(a: ScalarOrVec, b: VecLike) -> Vec:
    """Subtract ``b`` from ``a`` element-wise; a scalar ``a`` is subtracted from per element."""
    if isinstance(a, Real):
        return tuple(a - x for x in b)
    return tuple(x - y for x, y in zip(a, b, strict=True))


def mut(scalar: float, a: VecLike) -> Vec:
    """Multiply every element of ``a`` by ``scalar``."""
    return tuple(scalar * x for x in a)


def eucl_distance(a: VecLike, b: VecLike) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(sum((y - x) ** 2 for x, y in zip(a, b, strict=True)))


def squared_norm(v: VecLike) -> float:
    """Sum of the squares of the elements of ``v``."""
    return sum(x * x for x in v)


def norm(v: VecLike) -> float:
    """Euclidean length of ``v``."""
    return math.sqrt(squared_norm(v))


def normalize(v: VecLike) -> Vec:
    """Return ``v`` scaled to unit length."""
    n = norm(v)
    if n == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return tuple(x / n for x in v)


def cross_product(a: VecLike, b: VecLike) -> Vec3D:
    """Cross product of two 3D vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def mat_vec_multiplication(m: Sequence[VecLike], v: VecLike) -> Vec:
    """Multiply the square matrix ``m`` (row-major) by the vector ``v``."""
    return tuple(sum(r * x for r, x in zip(row, v, strict=True)) for row in m)


def euler_angles_to_matrix(r_x: float, r_y: float, r_z: float) -> Mat3D:
    """Build the rotation matrix for the given Euler angles (radians)."""
    su, cu = math.sin(r_x), math.cos(r_x)
    sv, cv = math.sin(r_y), math.cos(r_y)
    sw, cw = math.sin(r_z), math.cos(r_z)
    return (
        (cv * cw, su * sv * cw - cu * sw, su * sw + cu * sv * cw),
        (cv * sw, cu * cw + su * sv * sw, cu * sv * sw - su * cw),
        (-sv, su * cv, cu * cv),
    )