import math

import pytest

from minkowskiplot.model.geometry_primitives import Point
from minkowskiplot.model.invariants import (
    CoordinateTable, DistanceReport, Interval, IntervalReport, NoPoints, Separation,
    classify, coordinate_table, distance, interval, interval_sq, invariant_table,
)
from minkowskiplot.model.mapping import CoordinateMapper, Mode, Viewport

POINTS = [Point(100, 120), Point(240, 200), Point(400, 90), Point(-5.5, 1e6)]


@pytest.fixture
def mapper() -> CoordinateMapper:
    return CoordinateMapper(Viewport(800, 600), Mode.MINKOWSKI)


@pytest.mark.parametrize("p", POINTS)
@pytest.mark.parametrize("q", POINTS)
def test_distance_is_symmetric(p, q):
    assert distance(p, q) == distance(q, p)


@pytest.mark.parametrize("p", POINTS)
def test_distance_to_self_is_zero(p):
    assert distance(p, p) == 0


def test_distance_scenario():
    assert distance(Point(100, 120), Point(240, 200)) == pytest.approx(161.245, abs=1e-3)


def test_distance_handles_large_coordinates():
    assert math.isfinite(distance(Point(1e200, 0), Point(-1e200, 1e200)))


def test_interval_scenario(mapper):
    iv = interval(Point(400, 200), mapper)
    assert iv == Interval(s2=10000, t=100, x=0)
    assert iv.separation is Separation.TIMELIKE


def test_interval_at_origin_is_zero(mapper):
    assert interval_sq(Point(400, 300), mapper) == 0


@pytest.mark.parametrize("p", POINTS[:3])
def test_interval_matches_mapping(mapper, p):
    e = mapper.to_relative(p)
    assert interval_sq(p, mapper) == e.t * e.t - e.x * e.x


def test_classify():
    assert classify(1.0) is Separation.TIMELIKE
    assert classify(-1.0) is Separation.SPACELIKE
    assert classify(0.0) is Separation.LIGHTLIKE


def test_point_on_light_cone_is_lightlike(mapper):
    # x = 50, t = 50
    assert interval(Point(450, 250), mapper).separation is Separation.LIGHTLIKE


def test_no_points_text():
    assert NoPoints().to_text() == "No points"


def test_distance_report_text():
    report = DistanceReport(index=2, point=Point(240, 200), distance=161.2451)
    assert report.to_text() == "Nearest point #2: (240, 200), distance = 161.25"


def test_interval_report_text_uses_two_decimals_for_s2():
    report = IntervalReport(index=1, interval=Interval(s2=10000.0, t=100.0, x=0.0))
    assert str(report) == "Point #1: s^2 = 10000.00 (t=100.0, x=0.0), timelike"


def test_interval_report_names_the_separation():
    spacelike = IntervalReport(index=2, interval=Interval(s2=-15600.0, t=100.0, x=-160.0))
    lightlike = IntervalReport(index=3, interval=Interval(s2=0.0, t=50.0, x=50.0))
    assert spacelike.to_text() == "Point #2: s^2 = -15600.00 (t=100.0, x=-160.0), spacelike"
    assert lightlike.to_text().endswith(", lightlike")


def test_invariant_table(mapper):
    table = invariant_table(POINTS[:3], mapper)
    assert [i for i, _ in table.rows] == [1, 2, 3]
    assert table.to_text().splitlines() == [
        "Invariant table (s^2 = t^2 - x^2):",
        "#1: s^2=-57600.0 (t=180.0, x=-300.0)",
        "#2: s^2=-15600.0 (t=100.0, x=-160.0)",
        "#3: s^2=44100.0 (t=210.0, x=0.0)",
    ]


def test_coordinate_table():
    table = coordinate_table(POINTS[:2])
    assert isinstance(table, CoordinateTable)
    assert table.to_text().splitlines() == [
        "Points (screen coordinates):",
        "#1: (100, 120)",
        "#2: (240, 200)",
    ]
