"""
Octilinear direction set.

Directions are a closed enumeration of the eight compass headings that are
multiples of 45 degrees. The integer value is the heading in degrees,
measured with the y axis pointing down (screen convention), so SOUTH is 90.
"""

from enum import IntEnum
from typing import Dict, Tuple, Union
import math

from .geometry import Point


class Direction(IntEnum):
    """Canonical heading, valued in degrees"""
    EAST = 0
    SOUTHEAST = 45
    SOUTH = 90
    SOUTHWEST = 135
    WEST = 180
    NORTHWEST = 225
    NORTH = 270
    NORTHEAST = 315

    @classmethod
    def parse(cls, value: Union['Direction', int, str]) -> 'Direction':
        """
        Build a Direction from a degree value or a case-insensitive name

        Args:
            value: Direction, degrees (e.g. 45) or name (e.g. "southeast")

        Returns:
            Matching Direction

        Raises:
            ValueError: If value names no canonical direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip('-').isdigit():
                return cls.parse(int(text))
            key = text.upper().replace('-', '').replace('_', '').replace(' ', '')
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown direction name: {value!r}") from None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Direction must be a name or a multiple of 45 degrees, got {value!r}")
        normalized = normalize_angle(value)
        if normalized % 45 != 0:
            raise ValueError(f"{value} is not a multiple of 45 degrees")
        return cls(int(normalized))

    @property
    def vector(self) -> Tuple[int, int]:
        """Grid step (dx, dy) with components in {-1, 0, 1}"""
        return DIRECTION_VECTORS[self]

    @property
    def unit(self) -> Point:
        """Unit-length vector for this heading"""
        return UNIT_VECTORS[self]

    @property
    def is_diagonal(self) -> bool:
        return self.value % 90 != 0

    def rotate(self, degrees: int) -> 'Direction':
        """Turn by a multiple of 45 degrees (positive is clockwise on screen)."""
        if degrees % 45 != 0:
            raise ValueError(f"Rotation must be a multiple of 45 degrees, got {degrees}")
        return Direction(int(normalize_angle(self.value + degrees)))

    def opposite(self) -> 'Direction':
        return self.rotate(180)


DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTHWEST: (-1, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, -1),
    Direction.NORTH: (0, -1),
    Direction.NORTHEAST: (1, -1),
}

UNIT_VECTORS: Dict[Direction, Point] = {
    direction: Point(dx / math.hypot(dx, dy), dy / math.hypot(dx, dy))
    for direction, (dx, dy) in DIRECTION_VECTORS.items()
}

_DIRECTIONS_BY_VECTOR: Dict[Tuple[int, int], Direction] = {
    vector: direction for direction, vector in DIRECTION_VECTORS.items()
}


def direction_from_vector(dx: int, dy: int) -> Direction:
    """
    Look up the direction of a grid step

    Args:
        dx: Horizontal step in {-1, 0, 1}
        dy: Vertical step in {-1, 0, 1}

    Raises:
        ValueError: If (dx, dy) is not one of the eight grid steps
    """
    try:
        return _DIRECTIONS_BY_VECTOR[(dx, dy)]
    except KeyError:
        raise ValueError(f"({dx}, {dy}) is not an octilinear grid step") from None


def angle_difference(angle1: float, angle2: float) -> float:
    """
    Signed difference angle1 - angle2 wrapped into (-180, 180]

    Examples:
        >>> angle_difference(350, 10)
        -20
        >>> angle_difference(0, 180)
        180
    """
    diff = angle1 - angle2
    while diff > 180:
        diff -= 360
    while diff <= -180:
        diff += 360
    return diff


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    angle = angle % 360
    if angle < 0:
        angle += 360
    return angle
