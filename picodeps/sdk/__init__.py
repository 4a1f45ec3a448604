"""Pico SDK knowledge: library catalog and include-name normalization."""

from .catalog import (
    CATALOG,
    LibraryName,
    catalog_entries,
    link_libraries,
    lookup_keys,
    lookup_library,
    ordered,
)
from .naming import normalize_include

__all__ = [
    "CATALOG",
    "LibraryName",
    "catalog_entries",
    "link_libraries",
    "lookup_keys",
    "lookup_library",
    "normalize_include",
    "ordered",
]
