"""Scan command implementation."""

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from picodeps.cli.common import COMMAND_ERRORS, load_config
from picodeps.parsers import collect_libraries_by_file
from picodeps.sdk import link_libraries, ordered

logger = logging.getLogger("picodeps.cli.scan")


def scan_command(args) -> int:
    """Execute scan command.

    Reports the libraries of each generated source. Nothing is written.

    Returns:
        int: Exit code.
    """
    project = Path(getattr(args, "project", "."))

    try:
        config = load_config(args)
        generated_dir = config.resolve_generated_dir(project)
        per_file = collect_libraries_by_file(generated_dir, config.source_suffix)
    except COMMAND_ERRORS as e:
        logger.error("Failed to scan generated sources for %s: %s", project, e)
        return 1

    table = Table(title=f"Generated sources in {generated_dir}")
    table.add_column("File")
    table.add_column("Libraries")
    table.add_column("Links")

    union = set()
    for path, libraries in per_file.items():
        union |= libraries
        table.add_row(
            path.name,
            ", ".join(str(member) for member in ordered(libraries)) or "-",
            " ".join(link_libraries(libraries)) or "-",
        )

    console = Console(highlight=False)
    console.print(table)
    console.print(
        f"{len(per_file)} files, links: {' '.join(link_libraries(union)) or '(none)'}",
        soft_wrap=True,
    )
    return 0
