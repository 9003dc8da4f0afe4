"""
Locate the network file to route
"""

from pathlib import Path
from typing import List, Optional

from platformdirs import user_config_dir

DEFAULT_CONFIG_NAME = 'network.yaml'
APP_NAME = 'octiline'


def candidate_paths() -> List[Path]:
    """Implicit locations, most specific first"""
    return [
        Path(DEFAULT_CONFIG_NAME),
        Path(user_config_dir(APP_NAME, appauthor=False)) / DEFAULT_CONFIG_NAME,
    ]


def discover_config(explicit_path: Optional[str] = None) -> str:
    """
    Find the network file

    An explicit path always wins and must exist. Otherwise ./network.yaml
    is used, then network.yaml in the per-user config directory
    (~/.config/octiline on Linux).

    Returns:
        Absolute path to the network file

    Raises:
        FileNotFoundError: If the explicit path is missing or no implicit
            location holds a network file
    """
    if explicit_path:
        path = Path(explicit_path).resolve()
        if not path.is_file():
            raise FileNotFoundError(f"Network file not found: {explicit_path}")
        return str(path)

    for candidate in candidate_paths():
        if candidate.is_file():
            return str(candidate.resolve())

    searched = ', '.join(str(p) for p in candidate_paths())
    raise FileNotFoundError(
        f"No network file found (looked in: {searched}).\n"
        f"Run '{APP_NAME} init' to create one, or pass a network file path."
    )
