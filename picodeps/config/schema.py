"""Configuration schema definitions using Pydantic for validation.

Describes where a project keeps its translator output and where the CMake
glue is written. Paths are relative to the project root unless absolute.
"""

from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, field_validator


class GlueConfig(BaseModel):
    """Layout of a generated project.

    Attributes:
        generated_dir: Directory holding translator-generated C sources.
        output_path: Destination of the generated CMake glue.
        source_suffix: File suffix identifying generated sources.
    """

    generated_dir: str = "csource/build/nimcache"
    output_path: str = "csource/imports.cmake"
    source_suffix: str = ".c"

    model_config = {"extra": "forbid"}

    @field_validator("source_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Validate that the suffix looks like a file extension."""
        if not v or not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Invalid source suffix '{v}', expected e.g. '.c'")
        return v

    @field_validator("generated_dir", "output_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path must not be empty")
        return v

    def resolve_generated_dir(self, project_root: Union[str, Path]) -> Path:
        """Return the generated sources directory for ``project_root``."""
        return Path(project_root) / self.generated_dir

    def resolve_output_path(self, project_root: Union[str, Path]) -> Path:
        """Return the glue file location for ``project_root``."""
        return Path(project_root) / self.output_path

    @classmethod
    def default(cls) -> "GlueConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GlueConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
