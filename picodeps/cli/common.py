"""Helpers shared by the CLI commands."""

from typing import Optional

from pydantic import ValidationError

from picodeps.config import GlueConfig
from picodeps.runtime.config_loader import load_glue_config

# Failures reported to the user instead of surfacing as tracebacks.
COMMAND_ERRORS = (
    OSError,
    TypeError,
    ValueError,
    ValidationError,
)


def load_config(args) -> GlueConfig:
    """Load the layout configuration named by ``--config``, if any."""
    source: Optional[str] = getattr(args, "config", None)
    return load_glue_config(source)
