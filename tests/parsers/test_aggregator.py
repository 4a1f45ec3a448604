"""Tests for directory-level library aggregation."""

import itertools
from pathlib import Path

import pytest

from picodeps.parsers import aggregator
from picodeps.parsers.aggregator import (
    clean_generated_sources,
    collect_libraries,
    collect_libraries_by_file,
    iter_generated_sources,
)
from picodeps.sdk import LibraryName


@pytest.fixture
def nimcache(tmp_path: Path) -> Path:
    cache = tmp_path / "nimcache"
    cache.mkdir()
    (cache / "a.c").write_text('#include "hardware/i2c.h"\n', encoding="utf-8")
    (cache / "b.c").write_text('#include "pico/multicore.h"\n', encoding="utf-8")
    (cache / "notes.h").write_text('#include "hardware/adc.h"\n', encoding="utf-8")
    (cache / "a.json").write_text("{}", encoding="utf-8")
    nested = cache / "nested.c"
    nested.mkdir()
    (nested / "c.c").write_text('#include "hardware/spi.h"\n', encoding="utf-8")
    return cache


def test_iter_generated_sources_is_flat_and_filtered(nimcache: Path) -> None:
    names = [path.name for path in iter_generated_sources(nimcache)]

    assert names == ["a.c", "b.c"]


def test_collect_libraries_unions_files(nimcache: Path) -> None:
    assert collect_libraries(nimcache) == {LibraryName.I2C, LibraryName.MULTICORE}


def test_collect_libraries_respects_suffix(nimcache: Path) -> None:
    assert collect_libraries(nimcache, suffix=".h") == {LibraryName.ADC}


def test_collect_libraries_by_file(nimcache: Path) -> None:
    per_file = collect_libraries_by_file(nimcache)

    assert {path.name: libs for path, libs in per_file.items()} == {
        "a.c": {LibraryName.I2C},
        "b.c": {LibraryName.MULTICORE},
    }


def test_union_is_independent_of_enumeration_order(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    paths = []
    for index, header in enumerate(["hardware/adc.h", "pico/stdlib.h", "hardware/adc.h"]):
        path = tmp_path / f"f{index}.c"
        path.write_text(f'#include "{header}"\n', encoding="utf-8")
        paths.append(path)

    results = set()
    for permutation in itertools.permutations(paths):
        monkeypatch.setattr(
            aggregator,
            "iter_generated_sources",
            lambda directory, suffix, p=permutation: iter(p),
        )
        results.add(collect_libraries(tmp_path))

    assert results == {frozenset({LibraryName.ADC, LibraryName.STDIO})}


def test_empty_directory_yields_empty_set(tmp_path: Path) -> None:
    assert collect_libraries(tmp_path) == frozenset()


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        collect_libraries(tmp_path / "missing")


def test_clean_removes_only_generated_sources(nimcache: Path) -> None:
    removed = clean_generated_sources(nimcache)

    assert removed == 2
    assert sorted(p.name for p in nimcache.iterdir()) == ["a.json", "nested.c", "notes.h"]


def test_clean_missing_directory_is_noop(tmp_path: Path) -> None:
    assert clean_generated_sources(tmp_path / "missing") == 0
