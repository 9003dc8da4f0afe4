"""
Shared pytest fixtures and utilities for testing
"""

import math
import pytest

from octiline.core.directions import Direction
from octiline.core.geometry import Point
from octiline.core.models import Station, Waypoint, WaypointRole


@pytest.fixture
def worked_example_stations():
    """Stations A=(0,10) and B=(14,14): a mostly-horizontal hop"""
    return Station(id='A', x=0, y=10), Station(id='B', x=14, y=14)


@pytest.fixture
def line_stations():
    """Three stations forming a line with one chained turn"""
    return [
        Station(id='harbour', x=0, y=10),
        Station(id='market', x=14, y=14),
        Station(id='stadium', x=22, y=8),
    ]


@pytest.fixture
def right_angle_waypoints():
    """East 10 units then south 10 units"""
    return [
        Waypoint(point=Point(0, 0), role=WaypointRole.STATION, outgoing=Direction.EAST),
        Waypoint(point=Point(10, 0), role=WaypointRole.BEND,
                 incoming=Direction.EAST, outgoing=Direction.SOUTH),
        Waypoint(point=Point(10, 10), role=WaypointRole.STATION, incoming=Direction.SOUTH),
    ]


@pytest.fixture
def sample_network_dict():
    """Valid network configuration as parsed from YAML"""
    return {
        'project': 'Test Metro',
        'stations': [
            {'id': 'harbour', 'x': 0, 'y': 10},
            {'id': 'market', 'x': 14, 'y': 14},
            {'id': 'museum', 'x': 14, 'y': 4},
            {'id': 'park', 'x': 6, 'y': 0},
            {'id': 'stadium', 'x': 22, 'y': 8},
        ],
        'lines': [
            {'name': 'Red', 'color': '#e4002b', 'stations': ['harbour', 'market', 'stadium']},
            {'name': 'Blue', 'color': '#0019a8', 'stations': ['park', 'museum', 'market'],
             'entry_direction': 'EAST'},
        ],
        'routing': {'corner_radius': 0.5, 'corner_style': 'cubic'},
        'output': {'formats': ['json', 'csv', 'svg']},
    }


# Helper functions for tests

def assert_point_close(actual, expected, tolerance=1e-9):
    """Assert that two points coincide within tolerance"""
    assert math.isclose(actual.x, expected.x, abs_tol=tolerance) and \
        math.isclose(actual.y, expected.y, abs_tol=tolerance), \
        f"Expected {expected}, got {actual}"


def assert_parallel(vector, direction, tolerance=1e-9):
    """Assert that vector points along direction (zero vectors pass)"""
    unit = direction.unit
    cross = vector.x * unit.y - vector.y * unit.x
    dot = vector.x * unit.x + vector.y * unit.y
    assert abs(cross) <= tolerance, f"{vector} is not parallel to {direction.name}"
    assert dot >= -tolerance, f"{vector} points against {direction.name}"


def get_bends(segment):
    """Get the BEND waypoints of a segment"""
    return [wp for wp in segment.waypoints if wp.role == WaypointRole.BEND]


def assert_no_bends(segment):
    """Assert that a segment is a straight two-waypoint run"""
    assert len(segment.waypoints) == 2, f"Expected straight segment, got {segment.waypoints}"
    assert get_bends(segment) == []
