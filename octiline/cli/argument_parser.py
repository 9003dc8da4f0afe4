"""
Command-line argument parser with subcommands
"""

import argparse

EPILOG = """
Examples:
  octiline init                          # Create ./network.yaml
  octiline init --path ./maps/city.yaml  # Create in a custom location
  octiline route                         # Auto-discover network file and route
  octiline route city.yaml --style arc   # Emit arcs instead of cubic corners
  octiline route --no-smooth             # Keep sharp corners
  octiline route --format svg -o maps/   # Only write the SVG map, into maps/
  octiline route --log-level DEBUG       # Show routing fallbacks
"""


def _add_init_parser(subparsers) -> None:
    init_parser = subparsers.add_parser(
        'init',
        help='Create a starter network file'
    )
    init_parser.add_argument('--force', '-f', action='store_true',
                             help='Replace an existing network file')
    init_parser.add_argument('--path', '-p', type=str,
                             help='Where to write the file (default: ./network.yaml)')


def _add_route_parser(subparsers) -> None:
    route_parser = subparsers.add_parser(
        'route',
        help='Route every line of a network and export the results'
    )
    route_parser.add_argument('config_file', nargs='?',
                              help='YAML network file (default: auto-discover)')
    route_parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                              default='INFO',
                              help='Console log level (default: INFO); DEBUG shows geometric fallbacks')
    route_parser.add_argument('--style', choices=['cubic', 'arc'], default=None,
                              help='Corner curve style (overrides routing.corner_style)')
    route_parser.add_argument('--no-smooth', action='store_true',
                              help='Keep sharp corners')
    route_parser.add_argument('--format', dest='formats', action='append',
                              choices=['json', 'csv', 'svg'], default=None,
                              help='Export format, repeatable (overrides output.formats)')
    route_parser.add_argument('--output-dir', '-o', default=None,
                              help='Output directory (overrides output.directory)')


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Build the parser for the init and route subcommands

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='octiline',
        description='Octilinear metro line routing with smooth corners',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG
    )
    subparsers = parser.add_subparsers(dest='command', required=True, help='Command to execute')

    _add_init_parser(subparsers)
    _add_route_parser(subparsers)

    return parser
