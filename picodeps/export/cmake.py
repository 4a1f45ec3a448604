"""CMake glue export for detected SDK libraries.

Writes ``imports.cmake``, which defines ``link_imported_libs(name)``. The
project's CMakeLists.txt calls that function by name, so the template text
must stay exactly as it is.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Union

from picodeps.sdk import LibraryName, link_libraries

logger = logging.getLogger("picodeps.export.cmake")

GLUE_TEMPLATE = """\
# This is a generated file do not modify it, 'piconim' makes it every run.
function(link_imported_libs name)
  target_link_libraries(${name} $libs)
endFunction()
"""

LIBS_PLACEHOLDER = "$libs"


def render_glue(libraries: Iterable[LibraryName]) -> str:
    """Render the glue fragment for ``libraries``.

    Each distinct SDK library is emitted once, in catalog order, followed by
    a single space. An empty set yields a function linking nothing.
    """
    tokens = "".join(f"{library} " for library in link_libraries(libraries))
    return GLUE_TEMPLATE.replace(LIBS_PLACEHOLDER, tokens)


def remove_glue(output_path: Union[str, Path]) -> bool:
    """Delete a previously generated glue file.

    Returns:
        bool: True if a file was removed, False if none existed.
    """
    try:
        Path(output_path).unlink()
    except FileNotFoundError:
        return False
    return True


def _atomic_write_text(path: Path, payload: str) -> None:
    """Write ``payload`` to ``path`` through a sibling temp file and os.replace.

    The temp file is created with a plain open so the result gets the usual
    umask-derived permissions.
    """
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        with tmp.open("w", encoding="utf-8", newline="\n") as f:
            f.write(payload)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def write_glue_text(payload: str, output_path: Union[str, Path]) -> Path:
    """Replace the glue file at ``output_path`` with an already rendered fragment.

    Any previous file is discarded and the fragment is written from scratch.

    Raises:
        OSError: If the new file cannot be written. No partial file is left.
    """
    path = Path(output_path)
    if remove_glue(path):
        logger.debug("Removed previous glue file %s", path)

    _atomic_write_text(path, payload)

    logger.info("Wrote CMake glue: %s", path)
    return path


def write_glue(
    libraries: Iterable[LibraryName],
    output_path: Union[str, Path],
) -> Path:
    """Regenerate the glue file at ``output_path``.

    Args:
        libraries: Libraries to link.
        output_path: Destination, usually ``<project>/csource/imports.cmake``.

    Returns:
        Path: The written file.

    Raises:
        OSError: If the new file cannot be written. No partial file is left.
    """
    return write_glue_text(render_glue(libraries), output_path)


__all__ = ["GLUE_TEMPLATE", "remove_glue", "render_glue", "write_glue", "write_glue_text"]
