"""
Command-line entry point
Usage: octiline route [network_file] [--style cubic|arc] [--no-smooth]
"""

import sys
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..core.config import NetworkConfig
from ..core.models import LineRoute
from ..exporters import (
    export_to_json,
    export_to_dataframe,
    export_corners_to_dataframe,
    export_to_svg,
)
from ..routing.network import route_network
from .argument_parser import setup_argument_parser
from .config_discovery import discover_config
from .init_command import run_init_command
from .output import print_routes_summary


def setup_logging(log_file: Path, log_level: str = 'INFO') -> None:
    """
    Configure logging to output to both console and file

    Args:
        log_file: Path to log file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def initialize_run_directory(config: NetworkConfig, timestamp: str) -> Path:
    """
    Create and return the routing run directory

    Args:
        config: Network configuration
        timestamp: Timestamp string for directory name

    Returns:
        Path to the run directory
    """
    run_dir = config.output_dir / f"{config.file_prefix}_run_{timestamp}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def export_routes(
    routes: List[LineRoute],
    config: NetworkConfig,
    run_dir: Path,
    logger: logging.Logger
) -> List[Path]:
    """
    Write the routed network in every configured format

    Args:
        routes: Routed lines
        config: Network configuration
        run_dir: Run directory path
        logger: Logger instance

    Returns:
        List of written files
    """
    written = []
    prefix = config.file_prefix

    if 'json' in config.export_formats:
        output_file = run_dir / f'{prefix}.json'
        export_to_json(routes, str(output_file))
        written.append(output_file)

    if 'csv' in config.export_formats:
        waypoints_file = run_dir / f'{prefix}_waypoints.csv'
        export_to_dataframe(routes).write_csv(str(waypoints_file))
        written.append(waypoints_file)

        corners_file = run_dir / f'{prefix}_corners.csv'
        export_corners_to_dataframe(routes).write_csv(str(corners_file))
        written.append(corners_file)

    if 'svg' in config.export_formats:
        output_file = run_dir / f'{prefix}.svg'
        export_to_svg(
            routes,
            str(output_file),
            stations=config.stations,
            scale=config.scale,
            stroke_width=config.stroke_width,
            title=config.project
        )
        written.append(output_file)

    for path in written:
        logger.info(f"Wrote {path}")
        print(f"📄 Saved: {path}")

    return written


def run_route_command(
    config_file: Optional[str] = None,
    log_level: str = 'INFO',
    style: Optional[str] = None,
    no_smooth: bool = False,
    formats: Optional[List[str]] = None,
    output_dir: Optional[str] = None
) -> int:
    """
    Route every line of a network file and export the results

    formats and output_dir replace the network file's output settings
    for this run.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    try:
        config_path = discover_config(config_file)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    print(f"📋 Loading network from: {config_path}")
    try:
        config = NetworkConfig.from_yaml(config_path)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    if formats:
        config.export_formats = list(dict.fromkeys(formats))
    if output_dir:
        config.output_dir = Path(output_dir)

    run_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = initialize_run_directory(config, run_timestamp)

    log_file = run_dir / "route.log"
    setup_logging(log_file, log_level=log_level)
    logger = logging.getLogger(__name__)

    print(f"📁 Run directory: {run_dir}")
    print(f"📝 Logs will be saved to: {log_file}")

    routes = route_network(config, smooth=False if no_smooth else None, style=style)
    print_routes_summary(routes)

    if routes:
        export_routes(routes, config, run_dir, logger)
    else:
        print("No lines configured, nothing to export")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the octiline CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    return run_route_command(
        config_file=args.config_file,
        log_level=args.log_level,
        style=args.style,
        no_smooth=args.no_smooth,
        formats=args.formats,
        output_dir=args.output_dir
    )


if __name__ == '__main__':
    sys.exit(main())
