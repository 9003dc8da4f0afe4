"""
CLI utilities for the octiline command
"""

from .argument_parser import setup_argument_parser
from .output import print_routes_summary, format_route_summary
from .init_command import run_init_command
from .config_discovery import discover_config
from .main import main, run_route_command

__all__ = [
    'setup_argument_parser',
    'print_routes_summary',
    'format_route_summary',
    'run_init_command',
    'discover_config',
    'main',
    'run_route_command',
]
