"""
Export routed lines to Polars DataFrames
"""

import logging
from typing import Any, Dict, List

import polars as pl

from ..core.models import LineRoute
from .exceptions import ExporterError
from .utils import validate_routes

logger = logging.getLogger(__name__)

WAYPOINT_SCHEMA = {
    'line_name': pl.Utf8,
    'segment_index': pl.Int64,
    'from_station': pl.Utf8,
    'to_station': pl.Utf8,
    'waypoint_index': pl.Int64,
    'role': pl.Utf8,
    'x': pl.Float64,
    'y': pl.Float64,
    'incoming': pl.Utf8,
    'outgoing': pl.Utf8,
}

CORNER_SCHEMA = {
    'line_name': pl.Utf8,
    'corner_index': pl.Int64,
    'knee_x': pl.Float64,
    'knee_y': pl.Float64,
    'incoming': pl.Utf8,
    'outgoing': pl.Utf8,
    'turn': pl.Float64,
    'trim_distance': pl.Float64,
    'start_x': pl.Float64,
    'start_y': pl.Float64,
    'end_x': pl.Float64,
    'end_y': pl.Float64,
    'style': pl.Utf8,
}


def _direction_name(direction) -> str:
    return direction.name if direction is not None else ''


def export_to_dataframe(routes: List[LineRoute]) -> pl.DataFrame:
    """
    Export routed lines to a Polars DataFrame, one row per waypoint

    Stations shared by two consecutive segments appear once per segment.
    If there are no waypoints, returns an empty DataFrame with the correct
    schema.

    Args:
        routes: Routed lines

    Returns:
        Polars DataFrame with the columns of WAYPOINT_SCHEMA

    Raises:
        InvalidResultsError: If routes are not LineRoute objects
        ExporterError: If the DataFrame cannot be built
    """
    validated_routes = validate_routes(routes)

    rows: List[Dict[str, Any]] = []
    for route in validated_routes:
        for segment_index, segment in enumerate(route.segments):
            for waypoint_index, waypoint in enumerate(segment.waypoints):
                rows.append({
                    'line_name': route.name,
                    'segment_index': segment_index,
                    'from_station': segment.from_station.id,
                    'to_station': segment.to_station.id,
                    'waypoint_index': waypoint_index,
                    'role': waypoint.role.value,
                    'x': float(waypoint.point.x),
                    'y': float(waypoint.point.y),
                    'incoming': _direction_name(waypoint.incoming),
                    'outgoing': _direction_name(waypoint.outgoing),
                })

    try:
        df = pl.DataFrame(rows, schema=WAYPOINT_SCHEMA)
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create DataFrame: {e}") from e

    logger.info(f"Created DataFrame with {len(df)} waypoint rows")
    return df


def export_corners_to_dataframe(routes: List[LineRoute]) -> pl.DataFrame:
    """
    Export fillets to a Polars DataFrame, one row per rounded corner

    Args:
        routes: Routed lines

    Returns:
        Polars DataFrame with the columns of CORNER_SCHEMA
    """
    validated_routes = validate_routes(routes)

    rows: List[Dict[str, Any]] = []
    for route in validated_routes:
        for corner_index, fillet in enumerate(route.corners):
            rows.append({
                'line_name': route.name,
                'corner_index': corner_index,
                'knee_x': float(fillet.knee.x),
                'knee_y': float(fillet.knee.y),
                'incoming': fillet.incoming.name,
                'outgoing': fillet.outgoing.name,
                'turn': float(fillet.turn),
                'trim_distance': fillet.trim_distance,
                'start_x': float(fillet.start.x),
                'start_y': float(fillet.start.y),
                'end_x': float(fillet.end.x),
                'end_y': float(fillet.end.y),
                'style': fillet.style.value,
            })

    if not rows:
        logger.info("No corners found, returning empty DataFrame")

    try:
        return pl.DataFrame(rows, schema=CORNER_SCHEMA)
    except Exception as e:
        logger.error(f"Failed to create Polars DataFrame: {e}")
        raise ExporterError(f"Failed to create DataFrame: {e}") from e
