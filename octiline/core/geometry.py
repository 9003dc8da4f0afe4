"""
Point primitive for grid-vertex geometry.

Station coordinates are integer grid vertices; knees and fillet trim points
computed from them are real-valued.
"""

from typing import Tuple, Union
from dataclasses import dataclass
import math

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """Immutable (x, y) position in grid-vertex units."""
    x: Number
    y: Number

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> 'Point':
        """Multiply both components by a scalar."""
        return Point(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Euclidean length when the point is read as a vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: 'Point') -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def midpoint(self, other: 'Point') -> 'Point':
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def is_close(self, other: 'Point', tolerance: float = 1e-9) -> bool:
        """Check if two points coincide within tolerance."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def as_tuple(self) -> Tuple[Number, Number]:
        return (self.x, self.y)
