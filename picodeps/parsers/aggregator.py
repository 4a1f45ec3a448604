"""Aggregate library requirements over a directory of generated sources."""

import logging
import os
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, Set, Union

from picodeps.parsers.include_scanner import scan_file
from picodeps.sdk import LibraryName

logger = logging.getLogger("picodeps.parsers.aggregator")

DEFAULT_SOURCE_SUFFIX = ".c"


def iter_generated_sources(
    directory: Union[str, Path],
    suffix: str = DEFAULT_SOURCE_SUFFIX,
) -> Iterator[Path]:
    """Yield regular files directly inside ``directory`` ending with ``suffix``.

    Subdirectories are not descended into. Entries are sorted by name so
    logs and reports are stable; results never depend on that order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if not entry.name.endswith(suffix):
            continue
        if not entry.is_file():
            continue
        yield Path(entry.path)


def collect_libraries_by_file(
    directory: Union[str, Path],
    suffix: str = DEFAULT_SOURCE_SUFFIX,
) -> Dict[Path, FrozenSet[LibraryName]]:
    """Scan every generated source and keep the result per file."""
    return {path: scan_file(path) for path in iter_generated_sources(directory, suffix)}


def collect_libraries(
    directory: Union[str, Path],
    suffix: str = DEFAULT_SOURCE_SUFFIX,
) -> FrozenSet[LibraryName]:
    """Union the libraries required by all generated sources in ``directory``.

    Args:
        directory: Directory holding the translator output.
        suffix: File name suffix of generated sources.

    Returns:
        FrozenSet[LibraryName]: Deduplicated libraries; empty when no file
        references a known library.

    Raises:
        OSError: If the directory or one of its sources cannot be read.
    """
    libraries: Set[LibraryName] = set()
    file_count = 0
    for path in iter_generated_sources(directory, suffix):
        libraries |= scan_file(path)
        file_count += 1

    logger.info(
        "Collected %d libraries from %d generated sources in %s",
        len(libraries),
        file_count,
        directory,
    )
    return frozenset(libraries)


def clean_generated_sources(
    directory: Union[str, Path],
    suffix: str = DEFAULT_SOURCE_SUFFIX,
) -> int:
    """Remove stale generated sources before a new translation run.

    A missing directory is left alone.

    Returns:
        int: Number of files removed.
    """
    if not Path(directory).is_dir():
        logger.debug("Nothing to clean, %s does not exist", directory)
        return 0

    removed = 0
    for path in iter_generated_sources(directory, suffix):
        path.unlink()
        removed += 1
    logger.info("Removed %d generated sources from %s", removed, directory)
    return removed


__all__ = [
    "DEFAULT_SOURCE_SUFFIX",
    "clean_generated_sources",
    "collect_libraries",
    "collect_libraries_by_file",
    "iter_generated_sources",
]
