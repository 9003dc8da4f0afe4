"""
Angle snapping onto the eight octilinear directions
"""

from typing import Optional, Tuple
import math

from ..core.directions import Direction, angle_difference, direction_from_vector
from ..core.exceptions import DegenerateInputError
from ..core.geometry import Point

# Angular distances closer than this are treated as a tie
TIE_TOLERANCE = 1e-9


def raw_angle(start: Point, end: Point) -> float:
    """Angle of (end - start) in degrees, range (-180, 180]"""
    if start == end:
        raise DegenerateInputError(start.x, start.y)
    return math.degrees(math.atan2(end.y - start.y, end.x - start.x))


def snap(start: Point, end: Point) -> Direction:
    """
    Snap the vector from start to end onto the nearest canonical direction

    Candidates are compared by wrapped angular distance. When two
    directions are equally close (22.5 degrees either side) the one with
    the lower degree value wins, so EAST beats both SOUTHEAST and
    NORTHEAST.

    Args:
        start: Origin of the vector
        end: Tip of the vector

    Returns:
        Nearest Direction

    Raises:
        DegenerateInputError: If start and end coincide
    """
    angle = raw_angle(start, end)

    best = None
    best_diff = math.inf
    for direction in sorted(Direction):
        diff = abs(angle_difference(angle, direction.value))
        # Strict improvement only; ties keep the earlier (lower) direction
        if diff < best_diff - TIE_TOLERANCE:
            best = direction
            best_diff = diff

    return best


def is_aligned(start: Point, end: Point) -> bool:
    """Check if two points lie on a common octilinear line"""
    dx = end.x - start.x
    dy = end.y - start.y
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


def octilinear_legs(start: Point, end: Point) -> Tuple[Optional[Direction], Direction]:
    """
    Split a displacement into its diagonal and axis legs

    Any grid displacement can be walked as one diagonal run of
    min(|dx|, |dy|) and one axis run along the dominant delta for the
    remainder.

    Returns:
        Tuple of (diagonal_direction, axis_direction); the diagonal is
        None when the displacement is purely horizontal or vertical
    """
    if start == end:
        raise DegenerateInputError(start.x, start.y)

    dx = end.x - start.x
    dy = end.y - start.y
    sx = _sign(dx)
    sy = _sign(dy)

    diagonal = direction_from_vector(sx, sy) if sx and sy else None
    if abs(dx) >= abs(dy):
        axis = direction_from_vector(sx, 0)
    else:
        axis = direction_from_vector(0, sy)

    return (diagonal, axis)


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
