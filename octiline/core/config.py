"""
Network configuration with Pydantic validation
"""

from typing import Any, Dict, List, Literal, Optional, Union
from pathlib import Path
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .directions import Direction
from .models import Station


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class LineConfig(BaseModel):
    """Configuration for a single metro line"""
    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., min_length=1, description="Line name")
    color: str = Field('#e4002b', description="Stroke color used by the SVG exporter")
    stations: List[str] = Field(..., min_length=2, description="Ordered station ids")
    entry_direction: Optional[Direction] = Field(None, description="Heading at the first station")
    loop: bool = Field(False, description="Close the line back to its first station")

    @field_validator('entry_direction', mode='before')
    @classmethod
    def parse_direction(cls, v):
        """Accept 'EAST', 'southeast', 90 ..."""
        if v is None:
            return v
        return Direction.parse(v)

    @field_validator('stations')
    @classmethod
    def no_repeated_stops(cls, v):
        """Consecutive stops must differ"""
        for a, b in zip(v, v[1:]):
            if a == b:
                raise ValueError(f"Station '{a}' is listed twice in a row")
        return v

    @model_validator(mode='after')
    def validate_loop(self):
        """A loop closes on its own and needs a real ring of stations"""
        if not self.loop:
            return self
        if self.stations[0] == self.stations[-1]:
            raise ValueError(f"Line '{self.name}' is a loop; do not repeat the first station at the end")
        if len(self.stations) < 3:
            raise ValueError(f"Line '{self.name}' needs at least three stations to loop")
        return self


class RoutingConfig(BaseModel):
    """Corner smoothing settings"""
    corner_radius: float = Field(0.4, gt=0, description="Base fillet radius in grid units")
    corner_style: Literal['cubic', 'arc'] = Field('cubic', description="Curve representation")
    tightness: float = Field(0.55, ge=0.0, le=1.0, description="Cubic handle length fraction")
    smooth_corners: bool = Field(True, description="Build fillets for bends")


class OutputConfig(BaseModel):
    """Output configuration"""
    directory: str = Field('route_results', description="Output directory path")
    formats: List[Literal['json', 'csv', 'svg']] = Field(
        default_factory=lambda: ['json', 'svg'],
        min_length=1,
        description="Export formats"
    )
    file_prefix: str = Field('network', min_length=1, description="File prefix for outputs")
    scale: float = Field(40.0, gt=0, description="Pixels per grid unit in SVG output")
    stroke_width: float = Field(6.0, gt=0, description="Line stroke width in pixels")


class NetworkConfigModel(BaseModel):
    """Pydantic model for network configuration validation"""
    model_config = ConfigDict(extra='ignore')

    # Metadata (optional)
    version: Optional[Union[int, float, str]] = None
    project: Optional[str] = None
    description: Optional[str] = None

    stations: List[Station] = Field(..., min_length=2)
    lines: List[LineConfig] = Field(default_factory=list)

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator('stations', mode='before')
    @classmethod
    def normalize_stations(cls, v):
        """Allow stations as a mapping of id -> [x, y]"""
        if isinstance(v, dict):
            normalized = []
            for station_id, coords in v.items():
                if isinstance(coords, dict):
                    normalized.append({'id': station_id, **coords})
                elif isinstance(coords, (list, tuple)) and len(coords) == 2:
                    normalized.append({'id': station_id, 'x': coords[0], 'y': coords[1]})
                else:
                    raise ValueError(f"Station '{station_id}' must be [x, y] or {{x, y}}, got {coords!r}")
            return normalized
        return v

    @model_validator(mode='after')
    def validate_network(self):
        """Station ids and positions must be unique; lines must reference known stations"""
        seen_ids = set()
        seen_positions = {}
        for station in self.stations:
            if station.id in seen_ids:
                raise ValueError(f"Duplicate station id: {station.id}")
            seen_ids.add(station.id)

            position = (station.x, station.y)
            if position in seen_positions:
                raise ValueError(
                    f"Stations '{seen_positions[position]}' and '{station.id}' share vertex {position}"
                )
            seen_positions[position] = station.id

        seen_lines = set()
        for line in self.lines:
            if line.name in seen_lines:
                raise ValueError(f"Duplicate line name: {line.name}")
            seen_lines.add(line.name)

            unknown = [s for s in line.stations if s not in seen_ids]
            if unknown:
                raise ValueError(f"Line '{line.name}' references unknown stations: {', '.join(unknown)}")

        return self


# ============================================================================
# NetworkConfig Class (wrapper around Pydantic model)
# ============================================================================

class NetworkConfig:
    """Configuration class for a station network with validation"""

    def __init__(self, config_dict: Dict):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        try:
            self._model = NetworkConfigModel.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {str(e)}") from e

        # Metadata
        self.version = self._model.version
        self.project = self._model.project
        self.description = self._model.description

        # Network
        self.stations = list(self._model.stations)
        self.stations_by_id = {station.id: station for station in self.stations}
        self.lines = list(self._model.lines)

        # Routing
        self.corner_radius = self._model.routing.corner_radius
        self.corner_style = self._model.routing.corner_style
        self.tightness = self._model.routing.tightness
        self.smooth_corners = self._model.routing.smooth_corners

        # Output
        self.output_dir = Path(self._model.output.directory)
        self.export_formats = self._model.output.formats
        self.file_prefix = self._model.output.file_prefix
        self.scale = self._model.output.scale
        self.stroke_width = self._model.output.stroke_width

    def line_stations(self, line: LineConfig) -> List[Station]:
        """Resolve a line's station ids to Station objects"""
        return [self.stations_by_id[station_id] for station_id in line.stations]

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'NetworkConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        return cls(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config back to dictionary"""
        return self._model.model_dump(mode='json', exclude_none=True)
