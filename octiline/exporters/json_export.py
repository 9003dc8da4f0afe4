"""
Save routed networks as JSON
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.models import LineRoute
from .exceptions import FileExportError
from .utils import validate_file_path, validate_routes

logger = logging.getLogger(__name__)


def export_to_json(
    routes: List[LineRoute],
    file_path: Optional[Union[str, Path]] = None,
    indent: int = 2
) -> str:
    """
    Serialize routed lines to a JSON document

    Each line is dumped with its segments (waypoints with directions in
    degrees) and its corner fillets, so a saved network can be redrawn
    without re-routing. The document validates back through
    ``LineRoute.model_validate``.

    Args:
        routes: Routed lines (or a single LineRoute)
        file_path: Where to write the document; None only returns it
        indent: Indentation width

    Returns:
        The JSON document

    Raises:
        InvalidResultsError: If routes are not LineRoute objects
        PathValidationError: If file_path is not a writable .json path
        FileExportError: If the file cannot be written
    """
    lines = validate_routes(routes)
    document = {'lines': [route.model_dump(mode='json') for route in lines]}
    json_str = json.dumps(document, indent=indent, ensure_ascii=False)

    if file_path is None:
        return json_str

    target = validate_file_path(file_path, suffix='.json')
    try:
        target.write_text(json_str, encoding='utf-8')
    except OSError as e:
        logger.error(f"Failed to write JSON file {target}: {e}")
        raise FileExportError(f"Failed to write file '{target}': {e}") from e

    logger.info(f"JSON network exported to: {target}")
    return json_str
