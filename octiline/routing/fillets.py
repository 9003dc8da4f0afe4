"""
Corner rounding for routed polylines.

Turns every BEND waypoint into a fillet: two trim points on the adjoining
legs plus either cubic control points or a circular arc joining them.
Fillets are tangent to both legs at the trim points and never reach past
the midpoint of either leg.
"""

from typing import List, Sequence, Union
import logging
import math

from ..core.directions import Direction, angle_difference
from ..core.geometry import Point
from ..core.models import ArcGeometry, CornerStyle, Fillet, Waypoint

logger = logging.getLogger(__name__)

DEFAULT_TIGHTNESS = 0.55

# Extra radius for a 90 degree turn relative to the base radius
TURN_RADIUS_GROWTH = 0.5


def effective_radius(radius: float, turn: float) -> float:
    """Scale the base radius with the size of the turn"""
    return radius * (1 + (abs(turn) / 90) * TURN_RADIUS_GROWTH)


def inside_normal(heading: Direction, turn: float) -> Point:
    """
    Unit normal to heading pointing toward the inside of the turn

    With y pointing down a positive turn is clockwise on screen, so the
    inside lies to the right of the heading.
    """
    ux, uy = heading.unit.x, heading.unit.y
    if turn > 0:
        return Point(-uy, ux)
    return Point(uy, -ux)


def fit_cubic(start: Point, end: Point, incoming: Direction, outgoing: Direction,
              trim: float, tightness: float):
    """Control points keeping the curve tangent to both legs"""
    reach = trim * tightness
    return (start + incoming.unit.scale(reach), end - outgoing.unit.scale(reach))


def fit_arc(start: Point, end: Point, incoming: Direction, turn: float, trim: float) -> ArcGeometry:
    """
    Circular arc tangent to the incoming leg at start and the outgoing leg at end

    The center sits on the inside normal of the incoming leg. For a trim
    distance d at a corner whose legs meet at an interior angle of
    180 - |turn|, the tangent circle has radius d * tan((180 - |turn|) / 2),
    which is exactly d for a right-angle turn.
    """
    interior = math.radians(180 - abs(turn))
    arc_radius = trim * math.tan(interior / 2)
    center = start + inside_normal(incoming, turn).scale(arc_radius)
    start_angle = math.degrees(math.atan2(start.y - center.y, start.x - center.x))

    return ArcGeometry(
        center=center,
        radius=arc_radius,
        start_angle=start_angle,
        sweep=turn
    )


def build_fillet(
    previous: Point,
    knee: Waypoint,
    following: Point,
    radius: float,
    style: CornerStyle = CornerStyle.CUBIC,
    tightness: float = DEFAULT_TIGHTNESS
) -> Fillet:
    """
    Build the fillet for one knee

    Args:
        previous: Waypoint before the knee
        knee: BEND waypoint to round
        following: Waypoint after the knee
        radius: Base corner radius in grid units
        style: Curve representation to emit
        tightness: Fraction of the trim distance used for cubic handles

    Returns:
        Fillet with the trim distance clamped to half of the shorter leg
    """
    incoming = knee.incoming
    outgoing = knee.outgoing
    turn = angle_difference(outgoing.value, incoming.value)

    trim = effective_radius(radius, turn)
    limit = min(previous.distance_to(knee.point), knee.point.distance_to(following)) / 2
    if trim > limit:
        logger.debug(f"Clamping corner at {knee.point} from {trim:.3f} to {limit:.3f}")
        trim = limit

    start = knee.point - incoming.unit.scale(trim)
    end = knee.point + outgoing.unit.scale(trim)

    control_points = None
    arc = None
    if style == CornerStyle.ARC:
        arc = fit_arc(start, end, incoming, turn, trim)
    else:
        control_points = fit_cubic(start, end, incoming, outgoing, trim, tightness)

    return Fillet(
        knee=knee.point,
        incoming=incoming,
        outgoing=outgoing,
        turn=turn,
        trim_distance=trim,
        start=start,
        end=end,
        style=style,
        control_points=control_points,
        arc=arc
    )


def build_corners(
    waypoints: Sequence[Waypoint],
    radius: float,
    style: Union[CornerStyle, str] = CornerStyle.CUBIC,
    tightness: float = DEFAULT_TIGHTNESS
) -> List[Fillet]:
    """
    Build one fillet per BEND waypoint of a polyline

    Args:
        waypoints: Ordered waypoints (stations and bends)
        radius: Base corner radius in grid units
        style: 'cubic' or 'arc'
        tightness: Cubic handle length as a fraction of the trim distance (0-1)

    Returns:
        List of fillets in path order

    Raises:
        ValueError: If radius is negative or tightness is outside [0, 1]
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if not 0 <= tightness <= 1:
        raise ValueError(f"tightness must be between 0 and 1, got {tightness}")
    style = CornerStyle(style)

    fillets: List[Fillet] = []
    for i, waypoint in enumerate(waypoints):
        if not waypoint.is_bend:
            continue
        if i == 0 or i == len(waypoints) - 1:
            logger.debug(f"Skipping bend at path end {waypoint.point}")
            continue
        # model_copy() skips validation, so a bend may still lack a turn here
        if waypoint.incoming is None or waypoint.outgoing is None or waypoint.incoming == waypoint.outgoing:
            logger.debug(f"Skipping bend without a turn at {waypoint.point}")
            continue

        fillets.append(build_fillet(
            waypoints[i - 1].point,
            waypoint,
            waypoints[i + 1].point,
            radius,
            style=style,
            tightness=tightness
        ))

    return fillets


def rounds_bend(fillet: Fillet, waypoint: Waypoint) -> bool:
    """Check if fillet was built for this bend (same knee and same turn)"""
    return (
        fillet.knee.is_close(waypoint.point)
        and fillet.incoming == waypoint.incoming
        and fillet.outgoing == waypoint.outgoing
    )
