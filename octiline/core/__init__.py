"""
Core types, configuration and errors
"""

from .directions import Direction, angle_difference, normalize_angle, direction_from_vector
from .geometry import Point
from .models import (
    ArcGeometry,
    CornerStyle,
    Fillet,
    LineRoute,
    Segment,
    Station,
    Waypoint,
    WaypointRole,
)
from .exceptions import OctilineError, RoutingError, DegenerateInputError
from .config import NetworkConfig

__all__ = [
    'Direction',
    'angle_difference',
    'normalize_angle',
    'direction_from_vector',
    'Point',
    'ArcGeometry',
    'CornerStyle',
    'Fillet',
    'LineRoute',
    'Segment',
    'Station',
    'Waypoint',
    'WaypointRole',
    'OctilineError',
    'RoutingError',
    'DegenerateInputError',
    'NetworkConfig',
]
