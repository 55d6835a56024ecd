"""Reference-line geometry primitives: the abstract base, straight lines and arcs."""

import copy
import math
from abc import ABC, abstractmethod
from enum import Enum

from odrkit.vecmath import Vec2D


class GeometryType(Enum):
    """Kind of a reference-line geometry record."""

    LINE = 0
    SPIRAL = 1
    ARC = 2
    PARAM_POLY3 = 3


class RoadGeometry(ABC):
    """Piece of a road reference line starting at ``s0`` in pose ``(x0, y0, hdg0)``."""

    def __init__(
        self,
        s0: float,
        x0: float,
        y0: float,
        hdg0: float,
        length: float,
        type: GeometryType,
    ) -> None:
        self.s0 = s0
        self.x0 = x0
        self.y0 = y0
        self.hdg0 = hdg0
        self.length = length
        self.type = type

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(s0={self.s0!r}, x0={self.x0!r}, y0={self.y0!r}, "
            f"hdg0={self.hdg0!r}, length={self.length!r})"
        )

    def clone(self) -> "RoadGeometry":
        """Independent copy of this geometry."""
        return copy.deepcopy(self)

    @abstractmethod
    def get_xy(self, s: float) -> Vec2D:
        """Point on the geometry at road coordinate ``s``."""

    @abstractmethod
    def get_grad(self, s: float) -> Vec2D:
        """Tangent direction at road coordinate ``s``."""

    @abstractmethod
    def approximate_linear(self, eps: float) -> list[float]:
        """Sorted s values whose polyline follows the geometry within ``eps``."""


class Line(RoadGeometry):
    """Straight reference-line segment."""

    def __init__(self, s0: float, x0: float, y0: float, hdg0: float, length: float) -> None:
        super().__init__(s0, x0, y0, hdg0, length, GeometryType.LINE)

    def get_xy(self, s: float) -> Vec2D:
        """Point at ``s`` along the heading."""
        x = math.cos(self.hdg0) * (s - self.s0) + self.x0
        y = math.sin(self.hdg0) * (s - self.s0) + self.y0
        return (x, y)

    def get_grad(self, s: float) -> Vec2D:
        """Unit heading vector, the same everywhere."""
        return (math.cos(self.hdg0), math.sin(self.hdg0))

    def approximate_linear(self, eps: float) -> list[float]:
        """Start and end of the segment."""
        return sorted({self.s0, self.s0 + self.length})


class Arc(RoadGeometry):
    """Circular arc of constant, non-zero curvature."""

    def __init__(
        self,
        s0: float,
        x0: float,
        y0: float,
        hdg0: float,
        length: float,
        curvature: float,
    ) -> None:
        if curvature == 0:
            raise ValueError("an arc needs a non-zero curvature")
        super().__init__(s0, x0, y0, hdg0, length, GeometryType.ARC)
        self.curvature = curvature

    def get_xy(self, s: float) -> Vec2D:
        """Point at ``s`` on the circle."""
        angle_at_s = (s - self.s0) * self.curvature - math.pi / 2
        r = 1 / self.curvature
        xs = r * (math.cos(self.hdg0 + angle_at_s) - math.sin(self.hdg0)) + self.x0
        ys = r * (math.sin(self.hdg0 + angle_at_s) + math.cos(self.hdg0)) + self.y0
        return (xs, ys)

    def get_grad(self, s: float) -> Vec2D:
        """Unit tangent at ``s``."""
        angle = math.pi / 2 - self.curvature * (s - self.s0) - self.hdg0
        return (math.sin(angle), math.cos(angle))

    def approximate_linear(self, eps: float) -> list[float]:
        """Samples roughly every degree of turn, plus the end point."""
        s_step = 0.01 / abs(self.curvature)
        s_end = self.s0 + self.length
        s_vals = set()
        s = self.s0
        while s < s_end:
            s_vals.add(s)
            s += s_step
        s_vals.add(s_end)
        return sorted(s_vals)