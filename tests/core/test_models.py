"""
Tests for routing value objects
"""

import pytest
from pydantic import ValidationError

from octiline.core.directions import Direction
from octiline.core.geometry import Point
from octiline.core.models import Segment, Station, Waypoint, WaypointRole, LineRoute


class TestPoint:
    """Test suite for Point"""

    def test_vector_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
        assert Point(1, -2).scale(1.5) == Point(1.5, -3.0)

    def test_distance_and_midpoint(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == 5
        assert Point(0, 0).midpoint(Point(3, 4)) == Point(1.5, 2)

    def test_points_are_immutable(self):
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5


class TestWaypoint:
    """Test suite for Waypoint validation"""

    def test_station_with_one_direction(self):
        waypoint = Waypoint(point=Point(0, 0), role=WaypointRole.STATION, outgoing=Direction.EAST)
        assert waypoint.incoming is None
        assert not waypoint.is_bend

    def test_bend_requires_direction_change(self):
        """Test that a bend keeping its direction is rejected"""
        with pytest.raises(ValidationError):
            Waypoint(point=Point(1, 1), role=WaypointRole.BEND,
                     incoming=Direction.EAST, outgoing=Direction.EAST)

    def test_bend_requires_both_directions(self):
        with pytest.raises(ValidationError):
            Waypoint(point=Point(1, 1), role=WaypointRole.BEND, incoming=Direction.EAST)

    def test_direction_names_accepted(self):
        waypoint = Waypoint(point=Point(1, 1), role='BEND', incoming='east', outgoing=45)
        assert waypoint.incoming == Direction.EAST
        assert waypoint.outgoing == Direction.SOUTHEAST

    def test_waypoints_are_frozen(self):
        waypoint = Waypoint(point=Point(0, 0), role=WaypointRole.STATION, outgoing=Direction.EAST)
        with pytest.raises(ValidationError):
            waypoint.outgoing = Direction.WEST


class TestSegment:
    """Test suite for Segment validation"""

    def _stations(self):
        return Station(id='A', x=0, y=0), Station(id='B', x=0, y=5)

    def test_valid_segment(self):
        a, b = self._stations()
        segment = Segment(
            from_station=a,
            to_station=b,
            entry_direction='SOUTH',
            exit_direction=Direction.SOUTH,
            waypoints=[
                Waypoint(point=a.point, role=WaypointRole.STATION, outgoing=Direction.SOUTH),
                Waypoint(point=b.point, role=WaypointRole.STATION, incoming=Direction.SOUTH),
            ]
        )
        assert segment.entry_direction == Direction.SOUTH
        assert segment.bends == []

    def test_segment_must_start_at_from_station(self):
        a, b = self._stations()
        with pytest.raises(ValidationError):
            Segment(
                from_station=a,
                to_station=b,
                entry_direction=Direction.SOUTH,
                exit_direction=Direction.SOUTH,
                waypoints=[
                    Waypoint(point=Point(0, 1), role=WaypointRole.STATION, outgoing=Direction.SOUTH),
                    Waypoint(point=b.point, role=WaypointRole.STATION, incoming=Direction.SOUTH),
                ]
            )

    def test_segment_stations_are_one_sided(self):
        """Test that a segment's first station is only left and its last only reached"""
        a, b = self._stations()
        with pytest.raises(ValidationError, match="incoming direction"):
            Segment(
                from_station=a,
                to_station=b,
                entry_direction=Direction.SOUTH,
                exit_direction=Direction.SOUTH,
                waypoints=[
                    Waypoint(point=a.point, role=WaypointRole.STATION,
                             incoming=Direction.EAST, outgoing=Direction.SOUTH),
                    Waypoint(point=b.point, role=WaypointRole.STATION, incoming=Direction.SOUTH),
                ]
            )
        with pytest.raises(ValidationError, match="outgoing direction"):
            Segment(
                from_station=a,
                to_station=b,
                entry_direction=Direction.SOUTH,
                exit_direction=Direction.SOUTH,
                waypoints=[
                    Waypoint(point=a.point, role=WaypointRole.STATION, outgoing=Direction.SOUTH),
                    Waypoint(point=b.point, role=WaypointRole.STATION,
                             incoming=Direction.SOUTH, outgoing=Direction.EAST),
                ]
            )

    def test_segment_interior_must_be_bends(self):
        a, b = self._stations()
        with pytest.raises(ValidationError, match="Only BEND waypoints"):
            Segment(
                from_station=a,
                to_station=b,
                entry_direction=Direction.SOUTH,
                exit_direction=Direction.SOUTH,
                waypoints=[
                    Waypoint(point=a.point, role=WaypointRole.STATION, outgoing=Direction.SOUTH),
                    Waypoint(point=Point(0, 2), role=WaypointRole.STATION,
                             incoming=Direction.SOUTH, outgoing=Direction.SOUTH),
                    Waypoint(point=b.point, role=WaypointRole.STATION, incoming=Direction.SOUTH),
                ]
            )

    def test_segment_needs_two_waypoints(self):
        a, b = self._stations()
        with pytest.raises(ValidationError):
            Segment(
                from_station=a,
                to_station=b,
                entry_direction=Direction.SOUTH,
                exit_direction=Direction.SOUTH,
                waypoints=[Waypoint(point=a.point, role=WaypointRole.STATION)]
            )

    def test_segment_serializes(self):
        """Test that segments dump to plain data for saving"""
        a, b = self._stations()
        segment = Segment(
            from_station=a,
            to_station=b,
            entry_direction=Direction.SOUTH,
            exit_direction=Direction.SOUTH,
            waypoints=[
                Waypoint(point=a.point, role=WaypointRole.STATION, outgoing=Direction.SOUTH),
                Waypoint(point=b.point, role=WaypointRole.STATION, incoming=Direction.SOUTH),
            ]
        )
        data = segment.model_dump(mode='json')
        assert data['exit_direction'] == 90
        assert data['waypoints'][1]['point'] == {'x': 0, 'y': 5}
        assert Segment.model_validate(data) == segment


class TestLineRoute:
    """Test suite for LineRoute"""

    def test_empty_route(self):
        route = LineRoute(name='Empty')
        assert route.length == 0
        assert route.bend_count == 0
