"""Road mark records: marking groups, their explicit lines and resolved marks."""

from dataclasses import dataclass, field

ROADMARK_WEIGHT_STANDARD_WIDTH = 0.12
ROADMARK_WEIGHT_BOLD_WIDTH = 0.25


@dataclass
class RoadMarksLine:
    """One explicit line of a road mark group, repeated every ``length + space``."""

    road_id: str
    lanesection_s0: float
    lane_id: int
    group_s0: float
    width: float
    length: float
    space: float
    t_offset: float
    s_offset: float
    name: str
    rule: str

    def sort_key(self) -> tuple:
        """Key that orders lines the way a road mark group keeps them."""
        return (
            self.road_id,
            self.lanesection_s0,
            self.lane_id,
            self.group_s0,
            self.width,
            self.length,
            self.space,
            self.t_offset,
            self.s_offset,
            self.name,
            self.rule,
        )


@dataclass
class RoadMarkGroup:
    """Road marking of a lane border starting at ``lanesection_s0 + s_offset``."""

    road_id: str
    lanesection_s0: float
    lane_id: int
    width: float
    height: float
    s_offset: float
    type: str
    weight: str
    color: str
    material: str
    lane_change: str
    roadmark_lines: list[RoadMarksLine] = field(default_factory=list)

    def sort_key(self) -> tuple:
        """Key that orders groups along the lane, by start offset before width."""
        return (
            self.road_id,
            self.lanesection_s0,
            self.lane_id,
            self.s_offset,
            self.width,
            self.height,
            self.type,
            self.weight,
            self.color,
            self.material,
            self.lane_change,
        )


@dataclass
class RoadMark:
    """A single resolved stretch of marking between ``s_start`` and ``s_end``."""

    road_id: str
    lanesection_s0: float
    lane_id: int
    group_s0: float
    s_start: float
    s_end: float
    t_offset: float
    width: float
    type: str