"""
Export routed lines to SVG.

Path data is built from the routed waypoints, replacing each knee that has
a fillet with a line to the trim point followed by a cubic curve or an
elliptical arc command. The document itself is rendered from a Jinja2
template with autoescaping.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.geometry import Point
from ..core.models import CornerStyle, Fillet, LineRoute, Station, Waypoint
from ..routing.fillets import rounds_bend
from ..routing.network import line_waypoints
from .exceptions import FileExportError, InvalidResultsError
from .utils import DEFAULT_SVG_FILENAME, fmt, validate_file_path, validate_routes

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "network.svg"
PADDING = 40.0


def _xy(point: Point, scale: float) -> str:
    return f"{fmt(point.x * scale)},{fmt(point.y * scale)}"


def _corner_command(fillet: Fillet, scale: float) -> str:
    if fillet.style == CornerStyle.ARC and fillet.arc is not None:
        r = fmt(fillet.arc.radius * scale)
        sweep_flag = 1 if fillet.arc.sweep > 0 else 0
        return f"A {r},{r} 0 0 {sweep_flag} {_xy(fillet.end, scale)}"

    c1, c2 = fillet.control_points
    return f"C {_xy(c1, scale)} {_xy(c2, scale)} {_xy(fillet.end, scale)}"


def build_svg_path(
    waypoints: Sequence[Waypoint],
    fillets: Sequence[Fillet] = (),
    scale: float = 1.0
) -> str:
    """
    Generate SVG path data for a routed polyline

    Args:
        waypoints: Ordered waypoints
        fillets: Fillets for some or all of the bends, in path order as
            build_corners returns them; bends without a fillet are drawn
            as sharp corners
        scale: Multiplier from grid units to SVG user units

    Returns:
        SVG path data string ('' for fewer than two waypoints)
    """
    if len(waypoints) < 2:
        return ""

    commands = [f"M {_xy(waypoints[0].point, scale)}"]

    # Fillets are consumed in order; a line may pass the same knee point twice
    pending = list(fillets)
    cursor = 0
    for i in range(1, len(waypoints)):
        waypoint = waypoints[i]
        fillet = None
        if waypoint.is_bend and i < len(waypoints) - 1:
            if cursor < len(pending) and rounds_bend(pending[cursor], waypoint):
                fillet = pending[cursor]
                cursor += 1

        if fillet is not None and fillet.trim_distance > 0:
            commands.append(f"L {_xy(fillet.start, scale)}")
            commands.append(_corner_command(fillet, scale))
        else:
            commands.append(f"L {_xy(waypoint.point, scale)}")

    return " ".join(commands)


def _bounds(stations: Sequence[Station], routes: Sequence[LineRoute]) -> Dict[str, float]:
    xs = [s.x for s in stations]
    ys = [s.y for s in stations]
    for route in routes:
        for segment in route.segments:
            xs.extend(wp.point.x for wp in segment.waypoints)
            ys.extend(wp.point.y for wp in segment.waypoints)
    if not xs:
        raise InvalidResultsError("Nothing to draw: no stations and no routes")
    return {'min_x': min(xs), 'min_y': min(ys), 'max_x': max(xs), 'max_y': max(ys)}


def render_svg(
    routes: List[LineRoute],
    stations: Sequence[Station] = (),
    scale: float = 40.0,
    stroke_width: float = 6.0,
    title: Optional[str] = None,
    template_name: Optional[str] = None
) -> str:
    """
    Render a complete SVG document for a routed network

    Args:
        routes: Routed lines
        stations: Stations to mark (defaults to the stations the lines serve)
        scale: Pixels per grid unit
        stroke_width: Line stroke width in pixels
        title: Optional document title
        template_name: Optional custom template name

    Returns:
        SVG document as a string

    Raises:
        InvalidResultsError: If routes are invalid or there is nothing to draw
        FileExportError: If the template cannot be loaded or rendered
    """
    validated_routes = validate_routes(routes)

    if not stations:
        seen = {}
        for route in validated_routes:
            for segment in route.segments:
                seen.setdefault(segment.from_station.id, segment.from_station)
                seen.setdefault(segment.to_station.id, segment.to_station)
        stations = list(seen.values())

    bounds = _bounds(stations, validated_routes)

    lines = []
    for route in validated_routes:
        path = build_svg_path(line_waypoints(route.segments), route.corners, scale)
        lines.append({'name': route.name, 'color': route.color, 'path': path})

    station_marks = [
        {'id': s.id, 'cx': fmt(s.x * scale), 'cy': fmt(s.y * scale)}
        for s in stations
    ]

    try:
        env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(['html', 'xml', 'svg']),
            trim_blocks=True,
            lstrip_blocks=True
        )
        template = env.get_template(template_name or DEFAULT_TEMPLATE)
    except Exception as e:
        logger.error(f"Failed to load SVG template: {e}")
        raise FileExportError(f"Failed to load template: {e}") from e

    context = {
        'title': title or 'Metro network',
        'width': fmt((bounds['max_x'] - bounds['min_x']) * scale + 2 * PADDING),
        'height': fmt((bounds['max_y'] - bounds['min_y']) * scale + 2 * PADDING),
        'offset_x': fmt(PADDING - bounds['min_x'] * scale),
        'offset_y': fmt(PADDING - bounds['min_y'] * scale),
        'stroke_width': fmt(stroke_width),
        'station_radius': fmt(stroke_width * 0.9),
        'lines': lines,
        'stations': station_marks,
    }

    try:
        return template.render(**context)
    except Exception as e:
        logger.error(f"Template rendering failed: {e}")
        raise FileExportError(f"Failed to render template: {e}") from e


def export_to_svg(
    routes: List[LineRoute],
    file_path: str = DEFAULT_SVG_FILENAME,
    stations: Sequence[Station] = (),
    scale: float = 40.0,
    stroke_width: float = 6.0,
    title: Optional[str] = None
) -> str:
    """
    Render a routed network to an SVG file

    Returns:
        Absolute path to saved SVG file

    Raises:
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If rendering or the file write fails
    """
    validated_path = validate_file_path(file_path, suffix='.svg')
    svg_content = render_svg(routes, stations, scale=scale, stroke_width=stroke_width, title=title)

    try:
        validated_path.write_text(svg_content, encoding='utf-8')
        logger.info(f"SVG map exported to: {validated_path}")
    except (OSError, IOError) as e:
        logger.error(f"Failed to write SVG file: {e}")
        raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return str(validated_path.resolve())
