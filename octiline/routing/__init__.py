"""
Octilinear routing engine.

Snaps station-to-station vectors onto the eight compass directions, routes
each pair with the fewest knees, and rounds knees into fillets.
"""

from .snapper import snap, is_aligned, octilinear_legs
from .router import route_segment, route_line, bend_position, knee_count
from .fillets import build_corners, build_fillet, effective_radius
from .network import route_network, line_waypoints

__all__ = [
    'snap',
    'is_aligned',
    'octilinear_legs',
    'route_segment',
    'route_line',
    'bend_position',
    'knee_count',
    'build_corners',
    'build_fillet',
    'effective_radius',
    'route_network',
    'line_waypoints',
]
