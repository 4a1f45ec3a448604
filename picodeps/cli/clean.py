"""Clean command implementation."""

import logging
from pathlib import Path

from rich.console import Console

from picodeps.cli.common import COMMAND_ERRORS, load_config
from picodeps.runtime.pipeline import clean_project

logger = logging.getLogger("picodeps.cli.clean")


def clean_command(args) -> int:
    """Remove generated sources so the next translation starts fresh.

    Returns:
        int: Exit code.
    """
    project = Path(getattr(args, "project", "."))

    try:
        removed = clean_project(project, load_config(args))
    except COMMAND_ERRORS as e:
        logger.error("Failed to clean generated sources for %s: %s", project, e)
        return 1

    Console(highlight=False, soft_wrap=True).print(f"Removed {removed} generated sources")
    return 0
