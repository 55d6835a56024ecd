from odrkit.roadmark import RoadMark, RoadMarkGroup, RoadMarksLine


def _group(s_offset, width, type_="solid"):
    return RoadMarkGroup("r", 0.0, 1, width, 0.0, s_offset, type_, "standard", "white", "", "none")


def _line(s_offset, length):
    return RoadMarksLine("r", 0.0, 1, 0.0, 0.1, length, 1.0, 0.0, s_offset, "a", "none")


def test_group_orders_by_offset_before_width():
    wide_early = _group(0.0, 5.0)
    narrow_late = _group(3.0, 1.0)
    ordered = sorted([narrow_late, wide_early], key=RoadMarkGroup.sort_key)
    assert ordered == [wide_early, narrow_late]


def test_group_width_breaks_offset_tie():
    a = _group(2.0, 0.3)
    b = _group(2.0, 0.1)
    assert sorted([a, b], key=RoadMarkGroup.sort_key) == [b, a]


def test_group_starts_with_no_lines():
    assert _group(0.0, 1.0).roadmark_lines == []


def test_line_orders_by_length_before_offset():
    short_late = _line(5.0, 1.0)
    long_early = _line(0.0, 2.0)
    assert sorted([long_early, short_late], key=RoadMarksLine.sort_key) == [short_late, long_early]


def test_equal_lines_have_equal_keys():
    same = {_line(1.0, 2.0).sort_key(), _line(1.0, 2.0).sort_key()}
    assert len(same) == 1
    different = {_line(1.0, 2.0).sort_key(), _line(1.0, 3.0).sort_key()}
    assert len(different) == 2


def test_roadmark_fields():
    mark = RoadMark("r", 1.0, -1, 2.0, 3.0, 4.0, 0.5, 0.12, "broken")
    assert (mark.s_start, mark.s_end, mark.type) == (3.0, 4.0, "broken")