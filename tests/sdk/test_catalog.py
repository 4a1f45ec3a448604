"""Tests for include-name normalization and catalog lookups."""

import pytest

from picodeps.sdk import (
    CATALOG,
    LibraryName,
    link_libraries,
    lookup_keys,
    lookup_library,
    normalize_include,
    ordered,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hardware/adc.h", "hardware_adc"),
        ("pico/stdlib.h", "pico_stdlib"),
        ("pico/multicore.h", "pico_multicore"),
        ("nimbase.h", "nimbase"),
        ("hardware\\i2c.h", "hardware_i2c"),
        ("gpio", "gpio"),
        ("pico/stdlib.h.in", "pico_stdlib"),
        ("hardware/adc", "hardware_adc"),
        ("", ""),
    ],
)
def test_normalize_include(raw: str, expected: str) -> None:
    assert normalize_include(raw) == expected


def test_prefixed_header_resolves_to_primary_alias() -> None:
    assert lookup_library(normalize_include("hardware/adc.h")) is LibraryName.ADC
    assert LibraryName.ADC.library == "hardware_adc"


def test_aliases_share_library_but_match_independently() -> None:
    stdlib = lookup_library("pico_stdlib")
    gpio = lookup_library("gpio")

    assert stdlib is LibraryName.STDIO
    assert gpio is LibraryName.GPIO
    assert stdlib.library == gpio.library == "pico_stdlib"
    assert lookup_library("stdio") is LibraryName.STDIO


def test_every_canonical_name_is_matchable() -> None:
    for member in LibraryName:
        assert lookup_library(member.value) is member


def test_unknown_name_returns_none() -> None:
    assert lookup_library("nonexistent_lib") is None
    assert lookup_library("nimbase") is None
    assert lookup_library("") is None


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG["custom"] = LibraryName.ADC  # type: ignore[index]


def test_lookup_keys_lists_library_only_for_primary_alias() -> None:
    assert lookup_keys(LibraryName.STDIO) == ["stdio", "pico_stdlib"]
    assert lookup_keys(LibraryName.GPIO) == ["gpio"]
    assert lookup_keys(LibraryName.CLOCK) == ["clock", "hardware_clocks"]


def test_link_libraries_deduplicates_in_catalog_order() -> None:
    libs = {LibraryName.PWM, LibraryName.GPIO, LibraryName.STDIO, LibraryName.ADC}

    assert ordered(libs) == [
        LibraryName.STDIO,
        LibraryName.GPIO,
        LibraryName.ADC,
        LibraryName.PWM,
    ]
    assert link_libraries(libs) == ["pico_stdlib", "hardware_adc", "hardware_pwm"]
    assert link_libraries(set()) == []


def test_multi_extension_header_cut_at_first_dot() -> None:
    assert lookup_library(normalize_include("pico/stdlib.h.in")) is LibraryName.STDIO


def test_extensionless_include_is_kept_whole() -> None:
    assert lookup_library(normalize_include("hardware/adc")) is LibraryName.ADC
