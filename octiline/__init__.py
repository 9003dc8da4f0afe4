"""
octiline - Harry Beck style metro line routing
Octilinear station-to-station routing with smooth fillet corners
"""

from importlib.metadata import version, PackageNotFoundError

from .core.config import NetworkConfig
from .core.directions import Direction
from .core.exceptions import DegenerateInputError
from .core.models import Station, Segment, Waypoint, Fillet, LineRoute
from .routing import snap, route_segment, route_line, build_corners, route_network

try:
    __version__ = version("octiline")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "NetworkConfig",
    "Direction",
    "DegenerateInputError",
    "Station",
    "Segment",
    "Waypoint",
    "Fillet",
    "LineRoute",
    "snap",
    "route_segment",
    "route_line",
    "build_corners",
    "route_network",
]
