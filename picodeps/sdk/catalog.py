"""Catalog of linkable Pico SDK libraries.

Each ``LibraryName`` member is a canonical name recognised in generated
sources and carries the SDK library it links against. Several members may
link the same library (``stdio`` and ``gpio`` both need ``pico_stdlib``).

``CATALOG`` is the flat lookup table derived from ``_SDK_LIBRARIES``:

- every canonical name maps to its member;
- the library string of the first member introducing it maps to that member,
  so ``pico_stdlib`` resolves to ``stdio`` while ``gpio`` still matches on
  its own name.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


class LibraryName(Enum):
    """Canonical names of libraries the generated code can pull in."""

    STDIO = "stdio"
    MULTICORE = "multicore"
    GPIO = "gpio"
    ADC = "adc"
    PIO = "pio"
    DMA = "dma"
    I2C = "i2c"
    RTC = "rtc"
    UART = "uart"
    SPI = "spi"
    CLOCK = "clock"
    RESET = "reset"
    FLASH = "flash"
    PWM = "pwm"
    INTERP = "interp"

    @property
    def library(self) -> str:
        """Underlying SDK library passed to ``target_link_libraries``."""
        return _SDK_LIBRARIES[self]

    @property
    def order(self) -> int:
        """Position of the member in the catalog definition."""
        return _ORDER[self]

    def __str__(self) -> str:
        return self.value


# Definition order matters: it decides primary aliases and render order.
_SDK_LIBRARIES: Dict[LibraryName, str] = {
    LibraryName.STDIO: "pico_stdlib",
    LibraryName.MULTICORE: "pico_multicore",
    LibraryName.GPIO: "pico_stdlib",
    LibraryName.ADC: "hardware_adc",
    LibraryName.PIO: "hardware_pio",
    LibraryName.DMA: "hardware_dma",
    LibraryName.I2C: "hardware_i2c",
    LibraryName.RTC: "hardware_rtc",
    LibraryName.UART: "hardware_uart",
    LibraryName.SPI: "hardware_spi",
    LibraryName.CLOCK: "hardware_clocks",
    LibraryName.RESET: "hardware_resets",
    LibraryName.FLASH: "hardware_flash",
    LibraryName.PWM: "hardware_pwm",
    LibraryName.INTERP: "hardware_interp",
}

_ORDER: Dict[LibraryName, int] = {
    member: index for index, member in enumerate(_SDK_LIBRARIES)
}


def _build_catalog() -> Mapping[str, LibraryName]:
    """Build the immutable name -> LibraryName lookup table."""
    table: Dict[str, LibraryName] = {}
    seen_libraries = set()
    for member, library in _SDK_LIBRARIES.items():
        table[member.value] = member
        if library not in seen_libraries:
            seen_libraries.add(library)
            table.setdefault(library, member)
    return MappingProxyType(table)


CATALOG: Mapping[str, LibraryName] = _build_catalog()


def lookup_library(name: str) -> Optional[LibraryName]:
    """Resolve a normalized include name against the catalog.

    Args:
        name: Candidate produced by ``normalize_include``.

    Returns:
        Optional[LibraryName]: Matching member, or None when unknown.
    """
    return CATALOG.get(name)


def lookup_keys(member: LibraryName) -> List[str]:
    """Return every catalog key that resolves to ``member``."""
    return [key for key, value in CATALOG.items() if value is member]


def ordered(libraries: Iterable[LibraryName]) -> List[LibraryName]:
    """Sort members by catalog definition order."""
    return sorted(set(libraries), key=lambda member: member.order)


def link_libraries(libraries: Iterable[LibraryName]) -> List[str]:
    """Return the distinct SDK libraries for ``libraries`` in catalog order."""
    seen = set()
    result: List[str] = []
    for member in ordered(libraries):
        if member.library in seen:
            continue
        seen.add(member.library)
        result.append(member.library)
    return result


def catalog_entries() -> List[Tuple[LibraryName, str]]:
    """Return ``(member, library)`` pairs in definition order."""
    return list(_SDK_LIBRARIES.items())


__all__ = [
    "CATALOG",
    "LibraryName",
    "catalog_entries",
    "link_libraries",
    "lookup_keys",
    "lookup_library",
    "ordered",
]
