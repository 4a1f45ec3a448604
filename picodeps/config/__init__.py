"""Configuration schema and validation for picodeps."""

from .schema import GlueConfig

__all__ = ["GlueConfig"]
