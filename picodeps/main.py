"""Main CLI entry point for picodeps.

Provides commands: imports, scan, catalog, clean
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from picodeps.cli.catalog import catalog_command
from picodeps.cli.clean import clean_command
from picodeps.cli.imports import imports_command
from picodeps.cli.scan import scan_command

logger = logging.getLogger("picodeps.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picodeps",
        description="Picodeps - Pico SDK library detection and CMake glue generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional project layout configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, the default "
            "csource/build/nimcache -> csource/imports.cmake layout is used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    imports_parser = subparsers.add_parser(
        "imports",
        help="Detect required SDK libraries and regenerate imports.cmake",
    )
    imports_parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Project root (default: current directory)",
    )

    scan_parser = subparsers.add_parser(
        "scan",
        help="Report the SDK libraries each generated source needs, without writing",
    )
    scan_parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Project root (default: current directory)",
    )

    subparsers.add_parser(
        "catalog",
        help="List the known SDK libraries and the names that resolve to them",
    )

    clean_parser = subparsers.add_parser(
        "clean",
        help="Remove generated C sources from a previous translation",
    )
    clean_parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Project root (default: current directory)",
    )

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)
    logger.debug("Command: %s", args.command)

    if args.command == "imports":
        return imports_command(args)
    elif args.command == "scan":
        return scan_command(args)
    elif args.command == "catalog":
        return catalog_command(args)
    elif args.command == "clean":
        return clean_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
