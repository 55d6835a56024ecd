"""Lanes, their identifying keys and road mark resolution."""

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable
from dataclasses import InitVar, dataclass, field
from typing import TypeVar

from odrkit.roadmark import (
    ROADMARK_WEIGHT_BOLD_WIDTH,
    ROADMARK_WEIGHT_STANDARD_WIDTH,
    RoadMark,
    RoadMarkGroup,
)
from odrkit.spline import CubicSpline

T = TypeVar("T")


def _sorted_unique(items: Iterable[T], key: Callable[[T], tuple]) -> list[T]:
    """Sort by ``key`` keeping only the first of items with equal keys."""
    seen: dict[tuple, T] = {}
    for item in items:
        seen.setdefault(key(item), item)
    return [seen[k] for k in sorted(seen)]


@dataclass
class HeightOffset:
    """Height of the inner and outer lane border above the road surface."""

    inner: float
    outer: float


@dataclass(frozen=True, order=True)
class LaneKey:
    """Identifies a lane by road, lane section start and lane id."""

    road_id: str
    lanesection_s0: float
    lane_id: int

    def __str__(self) -> str:
        return "%s/%f/%d" % (self.road_id, self.lanesection_s0, self.lane_id)


@dataclass
class Lane:
    """A lane of a lane section with its border geometry and road marks."""

    road_id: InitVar[str]
    lanesection_s0: InitVar[float]
    id: int
    level: bool
    type: str
    key: LaneKey = field(init=False)
    predecessor: int = 0
    successor: int = 0
    lane_width: CubicSpline = field(default_factory=CubicSpline)
    outer_border: CubicSpline = field(default_factory=CubicSpline)
    s_to_height_offset: dict[float, HeightOffset] = field(default_factory=dict)
    roadmark_groups: list[RoadMarkGroup] = field(default_factory=list)

    def __post_init__(self, road_id: str, lanesection_s0: float) -> None:
        self.key = LaneKey(road_id, lanesection_s0, self.id)

    def get_roadmarks(self, s_start: float, s_end: float) -> list[RoadMark]:
        """Resolve the road mark groups into single marks within ``[s_start, s_end]``."""
        if s_start == s_end or not self.roadmark_groups:
            return []

        groups = _sorted_unique(self.roadmark_groups, RoadMarkGroup.sort_key)
        starts = [g.lanesection_s0 + g.s_offset for g in groups]

        start_idx = bisect_right(starts, s_start)
        if start_idx > 0:
            start_idx -= 1
        end_idx = bisect_left(starts, s_end)

        roadmarks: list[RoadMark] = []
        for idx in range(start_idx, end_idx):
            group = groups[idx]
            group_s0 = starts[idx]
            s_start_group = max(group_s0, s_start)
            s_end_group = s_end if idx + 1 == end_idx else min(starts[idx + 1], s_end)

            width = ROADMARK_WEIGHT_BOLD_WIDTH if group.weight == "bold" else ROADMARK_WEIGHT_STANDARD_WIDTH
            if not group.roadmark_lines:
                if group.width > 0:
                    width = group.width
                roadmarks.append(
                    RoadMark(
                        self.key.road_id,
                        self.key.lanesection_s0,
                        self.id,
                        group_s0,
                        s_start_group,
                        s_end_group,
                        0.0,
                        width,
                        group.type,
                    )
                )
                continue

            for line in _sorted_unique(group.roadmark_lines, lambda ln: ln.sort_key()):
                if line.width > 0:
                    width = line.width
                step = line.length + line.space
                if step == 0:
                    continue
                if step < 0:
                    raise ValueError("road mark line length plus space must not be negative")

                s = line.group_s0 + line.s_offset
                while s < s_end_group:
                    roadmarks.append(
                        RoadMark(
                            self.key.road_id,
                            self.key.lanesection_s0,
                            self.id,
                            line.group_s0,
                            s,
                            min(s_end, s + line.length),
                            line.t_offset,
                            width,
                            group.type + line.name,
                        )
                    )
                    s += step

        return roadmarks