"""Imports command implementation."""

import logging
from pathlib import Path

from rich.console import Console

from picodeps.cli.common import COMMAND_ERRORS, load_config
from picodeps.runtime.pipeline import generate_imports

logger = logging.getLogger("picodeps.cli.imports")


def imports_command(args) -> int:
    """Execute imports command.

    Args:
        args: Parsed command-line arguments containing:
            - project: Project root
            - config: Optional layout configuration

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    project = Path(getattr(args, "project", "."))
    logger.debug("=== Picodeps Imports ===")
    logger.debug("Project: %s", project)

    try:
        config = load_config(args)
        result = generate_imports(project, config)
    except COMMAND_ERRORS as e:
        logger.error("Failed to generate CMake glue for %s: %s", project, e)
        return 1

    console = Console(highlight=False, soft_wrap=True)
    libs = result.link_libraries
    if libs:
        console.print(f"Linking {len(libs)} libraries: {' '.join(libs)}")
    else:
        console.print("No SDK libraries detected")
    console.print(f"Wrote {result.output_path}")
    return 0
