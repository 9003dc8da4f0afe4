"""
Value objects produced and consumed by the routing engine
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .directions import Direction
from .geometry import Point


class WaypointRole(str, Enum):
    """Role of a waypoint within a routed segment"""
    STATION = 'STATION'
    BEND = 'BEND'


class CornerStyle(str, Enum):
    """Curve representation emitted for a rounded knee"""
    CUBIC = 'cubic'
    ARC = 'arc'


def _parse_direction(v):
    if v is None:
        return v
    return Direction.parse(v)


class Station(BaseModel):
    """A station placed on a grid vertex"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Station identifier")
    x: int = Field(..., description="Grid vertex column")
    y: int = Field(..., description="Grid vertex row")

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


class Waypoint(BaseModel):
    """A point on a routed path tagged with its role and travel directions

    Attributes:
        point: Position in grid-vertex units
        role: STATION or BEND
        incoming: Direction of travel arriving at this point
        outgoing: Direction of travel leaving this point
    """
    model_config = ConfigDict(frozen=True)

    point: Point
    role: WaypointRole
    incoming: Optional[Direction] = None
    outgoing: Optional[Direction] = None

    @field_validator('incoming', 'outgoing', mode='before')
    @classmethod
    def normalize_direction(cls, v):
        """Accept direction names as well as degree values"""
        return _parse_direction(v)

    @model_validator(mode='after')
    def validate_bend_directions(self):
        """A bend must change direction"""
        if self.role == WaypointRole.BEND:
            if self.incoming is None or self.outgoing is None:
                raise ValueError("BEND waypoint requires both incoming and outgoing directions")
            if self.incoming == self.outgoing:
                raise ValueError(
                    f"BEND waypoint cannot keep the same direction ({self.incoming.name})"
                )
        return self

    @property
    def is_bend(self) -> bool:
        return self.role == WaypointRole.BEND


class Segment(BaseModel):
    """Result of routing one station pair"""
    model_config = ConfigDict(frozen=True)

    from_station: Station
    to_station: Station
    entry_direction: Direction
    exit_direction: Direction
    waypoints: List[Waypoint] = Field(..., min_length=2)

    @field_validator('entry_direction', 'exit_direction', mode='before')
    @classmethod
    def normalize_direction(cls, v):
        return _parse_direction(v)

    @model_validator(mode='after')
    def validate_endpoints(self):
        """Waypoints must run from the first station to the second

        Within a segment a station only has the side facing the segment:
        the first is left, the last is arrived at. Everything in between is
        a bend.
        """
        first, last = self.waypoints[0], self.waypoints[-1]
        if first.role != WaypointRole.STATION or first.point != self.from_station.point:
            raise ValueError("Segment must start at its from_station")
        if last.role != WaypointRole.STATION or last.point != self.to_station.point:
            raise ValueError("Segment must end at its to_station")
        if first.incoming is not None:
            raise ValueError("First station of a segment cannot have an incoming direction")
        if last.outgoing is not None:
            raise ValueError("Last station of a segment cannot have an outgoing direction")
        if any(not wp.is_bend for wp in self.waypoints[1:-1]):
            raise ValueError("Only BEND waypoints may sit between a segment's stations")
        return self

    @property
    def bends(self) -> List[Waypoint]:
        return [wp for wp in self.waypoints if wp.is_bend]


class ArcGeometry(BaseModel):
    """Circular arc connecting the two trim points of a fillet

    Angles are in degrees in the same y-down frame as Direction; a
    positive sweep runs clockwise on screen.
    """
    model_config = ConfigDict(frozen=True)

    center: Point
    radius: float = Field(..., ge=0)
    start_angle: float
    sweep: float


class Fillet(BaseModel):
    """Rounded replacement for one BEND waypoint

    Attributes:
        knee: Original sharp corner, used as the geometric pivot
        incoming: Direction of travel into the knee
        outgoing: Direction of travel out of the knee
        turn: Signed turn in degrees, in (-180, 180]
        trim_distance: Effective radius after clamping
        start: Trim point on the incoming leg
        end: Trim point on the outgoing leg
        style: Which curve representation is populated
        control_points: Cubic control points (cubic style only)
        arc: Arc geometry (arc style only)
    """
    model_config = ConfigDict(frozen=True)

    knee: Point
    incoming: Direction
    outgoing: Direction
    turn: float
    trim_distance: float = Field(..., ge=0)
    start: Point
    end: Point
    style: CornerStyle
    control_points: Optional[Tuple[Point, Point]] = None
    arc: Optional[ArcGeometry] = None


class LineRoute(BaseModel):
    """A fully routed metro line"""
    name: str
    color: str = '#000000'
    segments: List[Segment] = Field(default_factory=list)
    corners: List[Fillet] = Field(default_factory=list)

    @property
    def bend_count(self) -> int:
        return sum(len(segment.bends) for segment in self.segments)

    @property
    def length(self) -> float:
        """Total polyline length in grid units (sharp corners)"""
        total = 0.0
        for segment in self.segments:
            points = [wp.point for wp in segment.waypoints]
            total += sum(a.distance_to(b) for a, b in zip(points, points[1:]))
        return total
