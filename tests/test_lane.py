import pytest

from odrkit.lane import HeightOffset, Lane, LaneKey
from odrkit.roadmark import (
    ROADMARK_WEIGHT_BOLD_WIDTH,
    ROADMARK_WEIGHT_STANDARD_WIDTH,
    RoadMarkGroup,
    RoadMarksLine,
)


def _group(s_offset, width=-1.0, weight="standard", type_="solid", lines=()):
    group = RoadMarkGroup("r1", 0.0, -1, width, 0.0, s_offset, type_, weight, "white", "", "none")
    group.roadmark_lines.extend(lines)
    return group


def _line(length, space, width=-1.0, name="_l", s_offset=0.0):
    return RoadMarksLine("r1", 0.0, -1, 0.0, width, length, space, 0.2, s_offset, name, "none")


def _lane(*groups):
    lane = Lane("r1", 0.0, -1, False, "driving")
    lane.roadmark_groups.extend(groups)
    return lane


def test_lane_key_string_format():
    assert str(LaneKey("r1", 5.0, -1)) == "r1/5.000000/-1"


def test_lane_key_equality_and_hash():
    a = LaneKey("r", 1.0, 2)
    b = LaneKey("r", 1.0, 2)
    assert a == b
    assert len({a, b}) == 1
    assert a != LaneKey("r", 1.0, 3)


def test_lane_key_ordering():
    keys = [LaneKey("b", 0.0, 1), LaneKey("a", 5.0, 1), LaneKey("a", 0.0, 2), LaneKey("a", 0.0, -1)]
    assert sorted(keys) == [keys[3], keys[2], keys[1], keys[0]]


def test_lane_builds_key():
    lane = Lane("road", 12.5, 3, True, "sidewalk")
    assert lane.key == LaneKey("road", 12.5, 3)
    assert lane.level is True
    assert lane.predecessor == 0 and lane.successor == 0


def test_height_offset_fields():
    offset = HeightOffset(0.1, 0.2)
    assert (offset.inner, offset.outer) == (0.1, 0.2)


def test_no_groups_gives_no_marks():
    assert _lane().get_roadmarks(0.0, 10.0) == []


def test_empty_range_gives_no_marks():
    assert _lane(_group(0.0)).get_roadmarks(4.0, 4.0) == []


def test_bold_group_without_lines():
    marks = _lane(_group(0.0, weight="bold")).get_roadmarks(0.0, 10.0)
    assert len(marks) == 1
    mark = marks[0]
    assert (mark.s_start, mark.s_end) == (0.0, 10.0)
    assert mark.width == ROADMARK_WEIGHT_BOLD_WIDTH
    assert mark.type == "solid"
    assert (mark.road_id, mark.lane_id, mark.t_offset) == ("r1", -1, 0.0)


def test_group_width_overrides_weight():
    marks = _lane(_group(0.0, width=0.4)).get_roadmarks(0.0, 10.0)
    assert marks[0].width == 0.4


def test_consecutive_groups_split_range():
    marks = _lane(_group(5.0, type_="broken"), _group(0.0)).get_roadmarks(0.0, 10.0)
    assert [m.type for m in marks] == ["solid", "broken"]
    assert marks[0].s_end == marks[1].s_start == 5.0
    assert marks[1].s_end == 10.0
    assert all(m.width == ROADMARK_WEIGHT_STANDARD_WIDTH for m in marks)


def test_range_starting_in_later_group():
    marks = _lane(_group(0.0), _group(5.0, type_="broken")).get_roadmarks(7.0, 10.0)
    assert len(marks) == 1
    assert marks[0].type == "broken"
    assert marks[0].s_start == 7.0


def test_dashed_lines_are_repeated():
    line = _line(3.0, 2.0, width=0.15)
    marks = _lane(_group(0.0, lines=[line])).get_roadmarks(0.0, 10.0)
    assert len(marks) == 2
    for mark in marks:
        assert mark.s_end - mark.s_start == line.length
        assert mark.width == 0.15
        assert mark.type == "solid" + line.name
        assert mark.t_offset == line.t_offset
    assert marks[1].s_start - marks[0].s_start == line.length + line.space


def test_last_dash_is_clipped_to_range_end():
    line = _line(4.0, 1.0)
    marks = _lane(_group(0.0, lines=[line])).get_roadmarks(0.0, 7.0)
    assert marks[-1].s_end == 7.0
    assert all(m.s_start < 7.0 for m in marks)


def test_zero_step_line_is_skipped():
    marks = _lane(_group(0.0, lines=[_line(0.0, 0.0)])).get_roadmarks(0.0, 10.0)
    assert marks == []


def test_negative_step_line_raises():
    with pytest.raises(ValueError):
        _lane(_group(0.0, lines=[_line(-3.0, 1.0)])).get_roadmarks(0.0, 10.0)