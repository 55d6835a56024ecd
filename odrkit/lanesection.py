"""Lane sections: the set of lanes valid from a given s on a road."""

from bisect import bisect_left
from dataclasses import dataclass, field

from odrkit.lane import Lane


@dataclass
class LaneSection:
    """Lanes of a road starting at ``s0``, keyed by lane id."""

    road_id: str
    s0: float
    id_to_lane: dict[int, Lane] = field(default_factory=dict)

    def get_lanes(self) -> list[Lane]:
        """Lanes in ascending order of their id."""
        return [self.id_to_lane[k] for k in sorted(self.id_to_lane)]

    def get_lane_id(self, s: float, t: float) -> int:
        """Id of the lane at ``(s, t)``; on a lane boundary the inner lane wins.

        Raises ``KeyError`` if the section has no centre lane 0.
        """
        if self.id_to_lane[0].outer_border.get(s) == t:
            return 0

        border_to_id: dict[float, int] = {}
        for lane_id in sorted(self.id_to_lane):
            border_to_id.setdefault(self.id_to_lane[lane_id].outer_border.get(s), lane_id)

        borders = sorted(border_to_id)
        idx = bisect_left(borders, t)
        if idx == len(borders):
            idx -= 1  # beyond the outermost border: outermost lane
        if border_to_id[borders[idx]] <= 0 and idx != 0 and t != borders[idx]:
            idx -= 1  # on the negative side the border found belongs to the inner neighbour
        return border_to_id[borders[idx]]

    def get_lane(self, lane_id: int) -> Lane:
        """Lane with id ``lane_id``; raises ``KeyError`` if there is none."""
        return self.id_to_lane[lane_id]

    def get_lane_at(self, s: float, t: float) -> Lane:
        """Lane at position ``(s, t)``."""
        return self.id_to_lane[self.get_lane_id(s, t)]