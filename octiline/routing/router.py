"""
Octilinear segment router.

Routes one station pair at a time as a straight run, a single knee, or a
chain of knees when the required turn is too sharp for one corner. Every
geometric degeneracy falls back to a midpoint knee so that any two distinct
points always produce a path.
"""

from typing import List, Optional, Sequence, Tuple, Union
import logging
import math

from ..core.directions import Direction, angle_difference
from ..core.exceptions import DegenerateInputError
from ..core.geometry import Point
from ..core.models import Segment, Station, Waypoint, WaypointRole
from .snapper import snap, is_aligned, octilinear_legs

logger = logging.getLogger(__name__)

# Rays closer to parallel than this have no usable intersection
PARALLEL_EPSILON = 1e-4

# Knees nearer than this (in grid steps along the entry ray) sit on the station
MIN_KNEE_OFFSET = 0.5

# Largest turn a single knee may take
MAX_TURN_PER_KNEE = 90

DirectionLike = Union[Direction, int, str]
_Bend = Tuple[Point, Direction, Direction]


def default_entry_direction(start: Point, end: Point, direct: Direction) -> Direction:
    """
    Entry direction for a segment with no incoming constraint

    Aligned pairs leave straight along the direct heading. Otherwise the
    path leaves along the leg that is not the direct heading, so that the
    final leg arrives along it: a mostly-horizontal hop starts diagonally
    and finishes straight, a mostly-diagonal hop starts straight and
    finishes diagonally.
    """
    if is_aligned(start, end):
        return direct

    diagonal, axis = octilinear_legs(start, end)
    if direct == axis:
        return diagonal
    if direct == diagonal:
        return axis
    return direct


def knee_count(entry: Direction, direct: Direction) -> int:
    """Number of knees needed to turn from entry onto direct"""
    turn = abs(angle_difference(direct.value, entry.value))
    return math.ceil(turn / MAX_TURN_PER_KNEE)


def solve_ray_intersection(
    origin1: Point,
    step1: Tuple[int, int],
    origin2: Point,
    step2: Tuple[int, int]
) -> Optional[Point]:
    """
    Intersect the ray origin1 + t * step1 with the line origin2 + s * step2

    Args:
        origin1: Start of the forward ray
        step1: Grid step of the forward ray
        origin2: Point on the second line
        step2: Grid step of the second line

    Returns:
        Intersection point, or None if the lines are parallel or the
        intersection lies less than MIN_KNEE_OFFSET steps along the
        forward ray
    """
    dx1, dy1 = step1
    dx2, dy2 = step2

    denominator = dx1 * dy2 - dy1 * dx2
    if abs(denominator) < PARALLEL_EPSILON:
        return None

    t1 = ((origin2.x - origin1.x) * dy2 - (origin2.y - origin1.y) * dx2) / denominator
    if t1 < MIN_KNEE_OFFSET:
        return None

    return Point(origin1.x + t1 * dx1, origin1.y + t1 * dy1)


def bend_position(start: Point, end: Point, entry: Direction, direct: Direction) -> Point:
    """
    Place the knee joining a run along entry with a run along direct

    Uses the intersection of the ray leaving start along entry and the ray
    arriving at end along direct. Falls back to the midpoint of start and
    end when the rays are parallel, the knee would sit on start, or the
    detour through the knee is at least twice the direct distance.
    """
    back_dx, back_dy = direct.vector
    knee = solve_ray_intersection(start, entry.vector, end, (-back_dx, -back_dy))

    if knee is None:
        logger.debug(f"No usable ray intersection {entry.name}->{direct.name}, using midpoint")
        return start.midpoint(end)

    detour = start.distance_to(knee) + knee.distance_to(end)
    if detour >= start.distance_to(end) * 2:
        logger.debug(f"Knee {knee} doubles back (detour {detour:.3f}), using midpoint")
        return start.midpoint(end)

    return knee


def _snap_turn(turn: float) -> int:
    """Round a turn to a multiple of 45 degrees, halves away from zero"""
    steps = math.floor(abs(turn) / 45 + 0.5)
    return int(math.copysign(steps * 45, turn))


def _multi_knee_bends(start: Point, end: Point, entry: Direction, direct: Direction) -> List[_Bend]:
    """
    Spread a sharp turn over several knees

    The total turn is divided evenly across the knees, each rounded onto
    the 45 degree lattice, and each knee is placed an equal share of the
    direct distance along the current heading. The final leg is not
    guaranteed to land on the direct line to end.
    """
    turn = angle_difference(direct.value, entry.value)
    count = knee_count(entry, direct)
    step_length = start.distance_to(end) / (count + 1)

    bends: List[_Bend] = []
    heading = entry
    position = start
    for i in range(1, count + 1):
        if i == count:
            next_heading = direct
        else:
            next_heading = entry.rotate(_snap_turn(turn * i / count))

        position = position + heading.unit.scale(step_length)
        bends.append((position, heading, next_heading))
        heading = next_heading

    logger.debug(
        f"Split {turn:+.0f} degree turn into {count} knees: "
        f"{' -> '.join(b[1].name for b in bends)} -> {direct.name}"
    )
    return bends


def compress_bends(bends: Sequence[_Bend]) -> List[_Bend]:
    """
    Drop knees that do not change direction

    A knee whose incoming and outgoing headings match is just a point on a
    straight run.
    """
    return [bend for bend in bends if bend[1] != bend[2]]


def route_segment(
    from_station: Station,
    to_station: Station,
    entry_direction: Optional[DirectionLike] = None
) -> Segment:
    """
    Route one station pair along octilinear runs

    Args:
        from_station: Station the segment leaves
        to_station: Station the segment arrives at
        entry_direction: Heading the line already has at from_station, or
            None for the first segment of a line

    Returns:
        Segment whose exit_direction is the snapped direct heading, ready
        to be passed as the next segment's entry_direction

    Raises:
        DegenerateInputError: If both stations sit on the same vertex
    """
    start = from_station.point
    end = to_station.point
    if start == end:
        raise DegenerateInputError(start.x, start.y)

    direct = snap(start, end)
    if entry_direction is None:
        entry = default_entry_direction(start, end, direct)
    else:
        entry = Direction.parse(entry_direction)

    count = knee_count(entry, direct)
    if count == 0:
        bends: List[_Bend] = []
    elif count == 1:
        bends = [(bend_position(start, end, entry, direct), entry, direct)]
    else:
        bends = _multi_knee_bends(start, end, entry, direct)

    waypoints = [Waypoint(point=start, role=WaypointRole.STATION, outgoing=entry)]
    for point, incoming, outgoing in compress_bends(bends):
        waypoints.append(Waypoint(
            point=point,
            role=WaypointRole.BEND,
            incoming=incoming,
            outgoing=outgoing
        ))
    waypoints.append(Waypoint(point=end, role=WaypointRole.STATION, incoming=direct))

    return Segment(
        from_station=from_station,
        to_station=to_station,
        entry_direction=entry,
        exit_direction=direct,
        waypoints=waypoints
    )


def route_line(
    stations: Sequence[Station],
    entry_direction: Optional[DirectionLike] = None,
    loop: bool = False
) -> List[Segment]:
    """
    Route a whole line through an ordered list of stations

    Segments are routed in order, each one entering along the previous
    segment's exit direction so the line runs through shared stations
    without a kink.

    Args:
        stations: Ordered stations served by the line
        entry_direction: Heading at the first station (None = unconstrained)
        loop: If True, add a closing segment back to the first station

    Returns:
        List of routed segments (empty for fewer than two stations)
    """
    stops = list(stations)
    if loop and len(stops) > 2:
        stops.append(stops[0])

    segments: List[Segment] = []
    heading = entry_direction
    for from_station, to_station in zip(stops, stops[1:]):
        segment = route_segment(from_station, to_station, heading)
        segments.append(segment)
        heading = segment.exit_direction

    return segments
