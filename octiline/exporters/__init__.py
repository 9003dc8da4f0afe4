"""
Export functionality for routed networks

- JSON: full routed network (segments, waypoints, fillets) for saving state
- DataFrame: Polars tables of waypoints and corners, written as CSV by the CLI
- SVG: path data and a rendered map document
"""

from .dataframe_export import export_to_dataframe, export_corners_to_dataframe
from .json_export import export_to_json
from .svg_export import build_svg_path, render_svg, export_to_svg

from .exceptions import (
    ExporterError,
    InvalidResultsError,
    FileExportError,
    PathValidationError
)

__all__ = [
    "export_to_dataframe",
    "export_corners_to_dataframe",
    "export_to_json",
    "build_svg_path",
    "render_svg",
    "export_to_svg",
    "ExporterError",
    "InvalidResultsError",
    "FileExportError",
    "PathValidationError",
]
