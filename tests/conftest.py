"""Shared test fixtures for chordkit tests."""

from __future__ import annotations

import pytest

from chordkit.lib.chord_library import (
    ChordTable,
    build_chord_table,
    default_table,
    load_chord_definitions,
)


@pytest.fixture
def definitions() -> dict[str, list]:
    """Provide the packaged chord definitions as loaded from JSON."""
    return load_chord_definitions()


@pytest.fixture
def table() -> ChordTable:
    """Provide the packaged chord table."""
    return default_table()


@pytest.fixture
def small_table() -> ChordTable:
    """Provide a tiny table with one aliased and one alias-free chord."""
    return build_chord_table({
        "maj7": ["1P 3M 5P 7M", ["M7", "Maj7"]],
        "power": ["1P 5P"],
        "m": ["1P 3m 5P", ["min"]],
    })
