"""Catalog command implementation."""

from rich.console import Console
from rich.table import Table

from picodeps.sdk import catalog_entries, lookup_keys


def catalog_command(args) -> int:
    """Print the known SDK libraries and the include names resolving to them."""
    table = Table(title="Pico SDK library catalog")
    table.add_column("Name")
    table.add_column("Library")
    table.add_column("Matched by")

    for member, library in catalog_entries():
        table.add_row(member.value, library, ", ".join(lookup_keys(member)))

    Console().print(table)
    return 0
