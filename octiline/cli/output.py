"""
Output formatting and printing utilities for CLI
"""

from typing import List

from ..core.models import LineRoute


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)


def format_route_summary(route: LineRoute) -> str:
    """
    One-line summary of a routed line

    Args:
        route: Routed line

    Returns:
        Formatted string (e.g., "Red: 2 segments, 1 bend, 1 corner, length 24.66")
    """
    bends = route.bend_count
    corners = len(route.corners)
    return (
        f"{route.name}: {len(route.segments)} segment{'s' if len(route.segments) != 1 else ''}, "
        f"{bends} bend{'s' if bends != 1 else ''}, "
        f"{corners} corner{'s' if corners != 1 else ''}, "
        f"length {route.length:.2f}"
    )


def print_routes_summary(routes: List[LineRoute]) -> None:
    """Print a per-line summary table"""
    print_separator()
    print(f"🚇 Routed {len(routes)} line{'s' if len(routes) != 1 else ''}")
    print_separator()
    for route in routes:
        print(f"  {format_route_summary(route)}")
