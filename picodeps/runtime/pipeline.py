"""Build-cycle entry points tying the scanner and the CMake export together.

Runs after the source-to-C translation and before the native build:
generated sources are scanned, their libraries unioned, and the glue file
regenerated. File access errors propagate so the caller can halt the build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from picodeps.config import GlueConfig
from picodeps.export.cmake import render_glue, write_glue_text
from picodeps.parsers import clean_generated_sources, collect_libraries
from picodeps.sdk import LibraryName, link_libraries

logger = logging.getLogger("picodeps.runtime.pipeline")


@dataclass(frozen=True)
class GlueResult:
    """Outcome of one glue regeneration."""

    libraries: FrozenSet[LibraryName]
    output_path: Path
    content: str

    @property
    def link_libraries(self) -> List[str]:
        """Distinct SDK libraries written to the glue file."""
        return link_libraries(self.libraries)


def generate_imports(
    project_root: Union[str, Path],
    config: Optional[GlueConfig] = None,
) -> GlueResult:
    """Detect required SDK libraries and regenerate the glue file.

    Args:
        project_root: Root of the generated project.
        config: Project layout; defaults to ``GlueConfig.default()``.

    Returns:
        GlueResult: Detected libraries and the written file.

    Raises:
        OSError: If sources cannot be read or the glue cannot be written.
    """
    cfg = config or GlueConfig.default()
    generated_dir = cfg.resolve_generated_dir(project_root)
    output_path = cfg.resolve_output_path(project_root)

    logger.debug("Generated sources: %s", generated_dir)
    logger.debug("Glue output: %s", output_path)

    libraries = collect_libraries(generated_dir, cfg.source_suffix)
    content = render_glue(libraries)
    write_glue_text(content, output_path)

    return GlueResult(
        libraries=libraries,
        output_path=output_path,
        content=content,
    )


def clean_project(
    project_root: Union[str, Path],
    config: Optional[GlueConfig] = None,
) -> int:
    """Remove generated sources left over from a previous translation."""
    cfg = config or GlueConfig.default()
    return clean_generated_sources(
        cfg.resolve_generated_dir(project_root), cfg.source_suffix
    )


__all__ = ["GlueResult", "clean_project", "generate_imports"]
