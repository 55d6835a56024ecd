import pytest

from odrkit.objects import (
    LaneValidityRecord,
    RoadObject,
    RoadObjectCorner,
    RoadObjectCornerType,
    RoadObjectOutline,
    RoadObjectRepeat,
    RoadSignal,
)


def _road_object(obj_id="o1"):
    return RoadObject(
        "r1", obj_id, 10.0, 2.0, 0.0, 4.0, 4.0, 1.5, 0.0, 1.0, 0.1, 0.0, 0.0,
        "pole", "post", "+", "", False,
    )


def _road_signal(sig_id="s1"):
    return RoadSignal(
        "r1", sig_id, "stop", 5.0, -3.0, False, 1.8, 50.0, 0.6, 0.6, 0.0, 0.0, 0.0,
        "+", "DE", "206", "", "km/h", "",
    )


def test_corner_type_values():
    assert [t.value for t in RoadObjectCornerType] == [0, 1, 2]
    assert RoadObjectCornerType(2) is RoadObjectCornerType.ROAD


def test_corner_normalises_point_and_type():
    corner = RoadObjectCorner(3, [1, 2, 3], 0.5, 1)
    assert corner.pt == (1.0, 2.0, 3.0)
    assert corner.type is RoadObjectCornerType.LOCAL_ABS_Z


def test_corner_rejects_wrong_point_size():
    with pytest.raises(ValueError):
        RoadObjectCorner(0, (1.0, 2.0), 0.0, RoadObjectCornerType.ROAD)


def test_corner_rejects_unknown_type():
    with pytest.raises(ValueError):
        RoadObjectCorner(0, (0.0, 0.0, 0.0), 0.0, 9)


def test_outline_defaults_and_independent_corners():
    a = RoadObjectOutline(0, "grass", "border")
    b = RoadObjectOutline(1, "grass", "border")
    a.outline.append(RoadObjectCorner(0, (0.0, 0.0, 0.0), 1.0))
    assert a.outer is True and a.closed is True
    assert len(a.outline) == 1
    assert b.outline == []


def test_road_object_collections_are_independent():
    a = _road_object("a")
    b = _road_object("b")
    a.repeats.append(RoadObjectRepeat(0, 10, 2, 1, 1, 0.5, 0.5, 1, 1, 0, 0))
    a.lane_validities.append(LaneValidityRecord(-1, 1))
    assert len(a.repeats) == 1
    assert b.repeats == [] and b.lane_validities == [] and b.outlines == []


def test_road_object_equality_by_value():
    assert _road_object() == _road_object()
    other = _road_object()
    other.hdg = 0.2
    assert _road_object() != other


def test_repeat_keeps_fields():
    rep = RoadObjectRepeat(1.0, 20.0, 5.0, 2.0, 3.0, 0.4, 0.6, 1.0, 1.2, 0.1, 0.2)
    assert (rep.s0, rep.length, rep.distance) == (1.0, 20.0, 5.0)
    assert (rep.z_offset_start, rep.z_offset_end) == (0.1, 0.2)


def test_road_signal_fields_and_validities():
    sig = _road_signal()
    sig.lane_validities.append(LaneValidityRecord(-2, -1))
    assert sig.z_offset == 1.8 and sig.country == "DE"
    assert sig.lane_validities == [LaneValidityRecord(-2, -1)]
    assert _road_signal("s2").lane_validities == []


def test_lane_validity_record_equality():
    assert LaneValidityRecord(-1, 2) == LaneValidityRecord(-1, 2)
    assert LaneValidityRecord(-1, 2) != LaneValidityRecord(2, -1)