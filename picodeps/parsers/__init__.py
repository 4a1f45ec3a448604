"""Parsers package.

Scanners for translator-generated C sources live here.
"""

from picodeps.parsers.aggregator import (
    DEFAULT_SOURCE_SUFFIX,
    clean_generated_sources,
    collect_libraries,
    collect_libraries_by_file,
    iter_generated_sources,
)
from picodeps.parsers.include_scanner import parse_include, resolve_include, scan_file

__all__ = [
    "DEFAULT_SOURCE_SUFFIX",
    "clean_generated_sources",
    "collect_libraries",
    "collect_libraries_by_file",
    "iter_generated_sources",
    "parse_include",
    "resolve_include",
    "scan_file",
]
