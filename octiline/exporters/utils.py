"""
Shared checks and formatting for exporters
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .exceptions import PathValidationError, InvalidResultsError
from ..core.models import LineRoute

MAX_FILENAME_LENGTH = 255
DEFAULT_JSON_FILENAME = "network.json"
DEFAULT_SVG_FILENAME = "network.svg"

# Decimal places kept in SVG coordinates
COORDINATE_PRECISION = 3


def validate_file_path(file_path: Union[str, Path], suffix: Optional[str] = None) -> Path:
    """
    Resolve an output path and check it can be written

    Args:
        file_path: Target file
        suffix: Required extension (e.g. '.svg'), or None to accept any

    Returns:
        Absolute Path

    Raises:
        PathValidationError: If the path is empty, names a directory, has the
            wrong extension or its parent is not a directory
    """
    if not file_path or not isinstance(file_path, (str, Path)):
        raise PathValidationError(f"File path must be a non-empty string or Path, got: {type(file_path)}")

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}") from e

    if len(path.name) > MAX_FILENAME_LENGTH:
        raise PathValidationError(f"Filename too long ({len(path.name)} chars)")
    if path.is_dir():
        raise PathValidationError(f"Path is a directory: {path}")
    if suffix and path.suffix.lower() != suffix:
        raise PathValidationError(f"Expected a '{suffix}' file, got: {path.name}")
    if path.parent.exists() and not path.parent.is_dir():
        raise PathValidationError(f"Parent path is not a directory: {path.parent}")

    return path


def validate_routes(routes: Any) -> List[LineRoute]:
    """
    Validate that exporter input is a list of routed lines

    A single LineRoute is accepted and wrapped in a list.

    Raises:
        InvalidResultsError: If routes is not a sequence of LineRoute, or two
            lines share a name
    """
    if isinstance(routes, LineRoute):
        return [routes]
    if not isinstance(routes, (list, tuple)):
        raise InvalidResultsError(f"Routes must be a list of LineRoute, got: {type(routes)}")

    for i, route in enumerate(routes):
        if not isinstance(route, LineRoute):
            raise InvalidResultsError(f"Item {i} must be a LineRoute, got: {type(route)}")

    names = [route.name for route in routes]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise InvalidResultsError(f"Duplicate line names: {', '.join(duplicates)}")

    return list(routes)


def fmt(value: float) -> str:
    """Format a coordinate compactly (no trailing zeros)"""
    text = f"{value:.{COORDINATE_PRECISION}f}".rstrip('0').rstrip('.')
    return '0' if text in ('-0', '') else text
