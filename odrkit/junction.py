"""Junctions and the connections, priorities and controllers they hold."""

from dataclasses import dataclass, field
from enum import Enum

_UINT32_MAX = 2**32 - 1


class ContactPoint(Enum):
    """End of a connecting road that touches the incoming road."""

    NONE = 0
    START = 1
    END = 2


@dataclass(frozen=True, order=True)
class JunctionLaneLink:
    """Link from a lane of the incoming road to a lane of the connecting road."""

    from_lane: int
    to_lane: int


@dataclass
class JunctionConnection:
    """Connection from an incoming road through a connecting road."""

    id: str
    incoming_road: str
    connecting_road: str
    contact_point: ContactPoint = ContactPoint.NONE
    lane_links: set[JunctionLaneLink] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.contact_point = ContactPoint(self.contact_point)


@dataclass(frozen=True, order=True)
class JunctionPriority:
    """Right of way of the road ``high`` over the road ``low``."""

    high: str
    low: str


@dataclass
class JunctionController:
    """Signal controller attached to a junction, run in ``sequence`` order."""

    id: str
    type: str
    sequence: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.sequence <= _UINT32_MAX:
            raise ValueError(f"controller sequence {self.sequence} outside 0..{_UINT32_MAX}")


@dataclass
class Junction:
    """A junction with its connections, controllers and priorities."""

    name: str
    id: str
    id_to_connection: dict[str, JunctionConnection] = field(default_factory=dict)
    id_to_controller: dict[str, JunctionController] = field(default_factory=dict)
    priorities: set[JunctionPriority] = field(default_factory=set)