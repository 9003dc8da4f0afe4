"""
Custom exceptions for the routing engine
"""


class OctilineError(Exception):
    """Base exception for all octiline errors"""
    pass


class RoutingError(OctilineError):
    """Base exception for routing failures"""
    pass


class DegenerateInputError(RoutingError):
    """Raised when a segment is requested between two identical points

    Callers are expected to deduplicate station placement before routing.
    """

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        super().__init__(f"Cannot route between identical points ({x}, {y})")
