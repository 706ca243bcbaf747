import dataclasses

import pytest

from aixm_waypoints.models.waypoint import WaypointRecord


def make_waypoint(designator, lat, lon, id=None):
    return WaypointRecord(id=id or f"id-{designator}", designator=designator, lat=lat, lon=lon)


def test_record_is_immutable():
    wp = make_waypoint('TEST1', 41.8, 12.25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        wp.lat = 0.0


def test_distance_to():
    a = make_waypoint('A', 0, 0)
    b = make_waypoint('B', 0, 1)
    assert a.distance_to(b) == pytest.approx(111194.93, abs=0.5)
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0


def test_formatted_distance_to():
    a = make_waypoint('A', 0, 0)
    b = make_waypoint('B', 0, 1)
    assert a.formatted_distance_to(b) == '111.19'
    assert a.formatted_distance_to(b, 'nm') == '60.04'
    assert a.formatted_distance_to(b, 'ft', with_label=True) == '364813 ft'


def test_to_dms():
    wp = make_waypoint('TEST1', 41.8, -12.25)
    assert wp.to_dms() == ("41°48'0.0000\" N", "12°15'0.0000\" W")


def test_to_csv_row():
    wp = make_waypoint('TEST1', 41.8, 12.25)
    assert wp.to_csv_row() == ['TEST1', 41.8, 12.25, "41°48'0.0000\" N", "12°15'0.0000\" E"]


def test_dict_round_trip():
    wp = make_waypoint('TEST1', 41.8, 12.25, id='abc')
    data = wp.to_dict()
    assert data == {'id': 'abc', 'designator': 'TEST1', 'lat': 41.8, 'lon': 12.25}
    assert WaypointRecord.from_dict(data) == wp


def test_str():
    assert str(make_waypoint('TEST1', 41.8, 12.25)) == 'TEST1 (41.8, 12.25)'
