"""Road objects, road signals and the lane validity records they carry."""

from dataclasses import dataclass, field
from enum import Enum

from odrkit.vecmath import Vec3D


@dataclass
class LaneValidityRecord:
    """Range of lane ids, ``from_lane`` to ``to_lane``, an object or signal applies to."""

    from_lane: int
    to_lane: int


@dataclass
class RoadObjectRepeat:
    """Repetition of a road object along the road, interpolating size and offset."""

    s0: float
    length: float
    distance: float
    t_start: float
    t_end: float
    width_start: float
    width_end: float
    height_start: float
    height_end: float
    z_offset_start: float
    z_offset_end: float


class RoadObjectCornerType(Enum):
    """Coordinate frame of an outline corner."""

    LOCAL_REL_Z = 0  # z relative to the road's reference line
    LOCAL_ABS_Z = 1  # absolute z value
    ROAD = 2


@dataclass
class RoadObjectCorner:
    """Corner point of a road object outline."""

    id: int
    pt: Vec3D
    height: float
    type: RoadObjectCornerType = RoadObjectCornerType.ROAD

    def __post_init__(self) -> None:
        pt = tuple(float(v) for v in self.pt)
        if len(pt) != 3:
            raise ValueError("a corner point needs exactly three coordinates")
        self.pt = pt  # type: ignore[assignment]
        self.type = RoadObjectCornerType(self.type)


@dataclass
class RoadObjectOutline:
    """Polygonal outline of a road object given by its corners."""

    id: int
    fill_type: str
    lane_type: str
    outer: bool = True
    closed: bool = True
    outline: list[RoadObjectCorner] = field(default_factory=list)


@dataclass
class RoadObject:
    """Object placed on or beside a road, positioned in road coordinates."""

    road_id: str
    id: str
    s0: float
    t0: float
    z0: float
    length: float
    valid_length: float
    width: float
    radius: float
    height: float
    hdg: float
    pitch: float
    roll: float
    type: str
    name: str
    orientation: str
    subtype: str
    is_dynamic: bool = False
    repeats: list[RoadObjectRepeat] = field(default_factory=list)
    outlines: list[RoadObjectOutline] = field(default_factory=list)
    lane_validities: list[LaneValidityRecord] = field(default_factory=list)


@dataclass
class RoadSignal:
    """Traffic sign or signal placed along a road."""

    road_id: str
    id: str
    name: str
    s0: float
    t0: float
    is_dynamic: bool
    z_offset: float
    value: float
    height: float
    width: float
    h_offset: float
    pitch: float
    roll: float
    orientation: str
    country: str
    type: str
    subtype: str
    unit: str
    text: str
    lane_validities: list[LaneValidityRecord] = field(default_factory=list)