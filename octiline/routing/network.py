"""
Whole-network layout: routes every configured line and rounds its corners
"""

from typing import List, Sequence
import logging

from ..core.config import NetworkConfig
from ..core.models import LineRoute, Segment, Waypoint, WaypointRole
from .fillets import build_corners
from .router import route_line

logger = logging.getLogger(__name__)


def line_waypoints(segments: Sequence[Segment]) -> List[Waypoint]:
    """
    Flatten a line's segments into one waypoint sequence

    Consecutive segments share a station; the shared waypoint keeps the
    incoming direction of the earlier segment and the outgoing direction
    of the later one. Such a through station is the only STATION that
    carries both directions.
    """
    waypoints: List[Waypoint] = []
    for segment in segments:
        if not waypoints:
            waypoints.extend(segment.waypoints)
            continue

        joint = waypoints.pop()
        waypoints.append(Waypoint(
            point=joint.point,
            role=WaypointRole.STATION,
            incoming=joint.incoming,
            outgoing=segment.waypoints[0].outgoing
        ))
        waypoints.extend(segment.waypoints[1:])

    return waypoints


def route_network(config: NetworkConfig, smooth: bool = None, style: str = None) -> List[LineRoute]:
    """
    Route all lines of a network

    Args:
        config: Validated network configuration
        smooth: Override config.smooth_corners
        style: Override config.corner_style ('cubic' or 'arc')

    Returns:
        One LineRoute per configured line, in config order
    """
    smooth = config.smooth_corners if smooth is None else smooth
    style = style or config.corner_style

    routes: List[LineRoute] = []
    for line in config.lines:
        stations = config.line_stations(line)
        segments = route_line(stations, entry_direction=line.entry_direction, loop=line.loop)

        corners = []
        if smooth:
            for segment in segments:
                corners.extend(build_corners(
                    segment.waypoints,
                    config.corner_radius,
                    style=style,
                    tightness=config.tightness
                ))

        route = LineRoute(name=line.name, color=line.color, segments=segments, corners=corners)
        logger.info(
            f"Routed line '{line.name}': {len(segments)} segments, "
            f"{route.bend_count} bends, length {route.length:.2f}"
        )
        routes.append(route)

    return routes
