"""Include scanner for translator-generated C sources.

Reads a generated ``.c`` file line by line and resolves its ``#include``
directives against the SDK library catalog.

The scan stops at the first line starting with ``typedef``. Generated files
list every include before their first type definition, so nothing after
that line is inspected. This relies on the output shape of the upstream
source-to-C translator and needs revalidating if the translator changes.
"""

import logging
import re
from pathlib import Path
from typing import FrozenSet, Optional, Set, Union

from picodeps.sdk import LibraryName, lookup_library, normalize_include

logger = logging.getLogger("picodeps.parsers.include_scanner")

# Matches both `#include "path"` and `#include <path>` forms
INCLUDE_RE = re.compile(r'^\s*#\s*include\s*(?:"([^"]+)"|<([^>]+)>)')

INCLUDE_REGION_END = "typedef"


def parse_include(line: str) -> Optional[str]:
    """Extract the include path from one source line.

    Args:
        line: Raw source line.

    Returns:
        Optional[str]: Path between the delimiters, or None when the line
        is not an include directive.
    """
    match = INCLUDE_RE.match(line)
    if match is None:
        return None
    return match.group(1) or match.group(2)


def resolve_include(include_path: str) -> Optional[LibraryName]:
    """Normalize an include path and look it up in the catalog."""
    return lookup_library(normalize_include(include_path))


def scan_file(file_path: Union[str, Path]) -> FrozenSet[LibraryName]:
    """Collect the catalog libraries referenced by a generated source file.

    Args:
        file_path: Generated C source to scan.

    Returns:
        FrozenSet[LibraryName]: Libraries referenced before the first
        ``typedef`` line. Empty when nothing is recognised.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    path = Path(file_path)
    found: Set[LibraryName] = set()

    with path.open("r", encoding="utf-8", errors="replace") as handle:
        for line in handle:
            if line.startswith(INCLUDE_REGION_END):
                break

            include_path = parse_include(line)
            if include_path is None:
                continue

            library = resolve_include(include_path)
            if library is None:
                logger.debug("Ignoring unknown include %r in %s", include_path, path.name)
                continue
            found.add(library)

    logger.debug("Scanned %s: %d libraries", path.name, len(found))
    return frozenset(found)


__all__ = ["INCLUDE_RE", "parse_include", "resolve_include", "scan_file"]
