"""Chord type definitions — name/alias table built from ``data/chords.json``.

The JSON maps each canonical chord name to ``[intervals, aliases]``::

    "maj7": ["1P 3M 5P 7M", ["Maj7", "M7", "Δ", "^7"]]

:func:`build_chord_table` turns that into a :class:`ChordTable` where
canonical names hold parsed :class:`Intervals` and aliases hold an
:class:`AliasOf` redirect. The packaged table is built once per process by
:func:`default_table` and never mutated afterwards.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Union

from chordkit.model.theory import Interval
from chordkit.parser.interval import parse_intervals

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE: Path = Path(__file__).parent / "data" / "chords.json"

ChordDefinitions = Mapping[str, list]


@dataclass(frozen=True)
class Intervals:
    """Table entry for a canonical chord name."""
    intervals: tuple[Interval, ...]


@dataclass(frozen=True)
class AliasOf:
    """Table entry redirecting an alias to its canonical name."""
    name: str


ChordEntry = Union[Intervals, AliasOf]


class ChordTable(Mapping[str, ChordEntry]):
    """Read-only, insertion-ordered mapping of chord name to entry."""

    def __init__(self, entries: dict[str, ChordEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, name: str) -> ChordEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Mapping[str, ChordEntry]:
        return self._entries

    def intervals(self, name: str) -> tuple[Interval, ...] | None:
        """Return the intervals for *name*, following one alias hop.

        Returns None if *name* is not in the table.
        """
        entry = self._entries.get(name)
        if isinstance(entry, AliasOf):
            entry = self._entries.get(entry.name)
        if isinstance(entry, Intervals):
            return entry.intervals
        return None

    def names(self, aliases: bool = False) -> list[str]:
        """Return canonical names, or every name when *aliases* is true."""
        if aliases:
            return list(self._entries)
        return [
            name for name, entry in self._entries.items()
            if isinstance(entry, Intervals)
        ]


def build_chord_table(definitions: ChordDefinitions) -> ChordTable:
    """Build a :class:`ChordTable` from ``name -> [intervals, aliases?]`` data.

    Canonical entries go in before their aliases. The data is trusted; a
    malformed interval token raises
    :class:`~chordkit.errors.MalformedIntervalError`.
    """
    entries: dict[str, ChordEntry] = {}
    for name, definition in definitions.items():
        entries[name] = Intervals(parse_intervals(definition[0]))
        aliases = definition[1] if len(definition) > 1 else None
        for alias in aliases or ():
            entries[alias] = AliasOf(name)
    return ChordTable(entries)


def load_chord_definitions(path: str | Path | None = None) -> dict[str, list]:
    """Read chord definitions from *path* (default: the packaged JSON)."""
    path = Path(path) if path is not None else DEFAULT_DATA_FILE
    with open(path, encoding="utf-8") as f:
        return json.load(f)


@functools.lru_cache(maxsize=None)
def default_table() -> ChordTable:
    """Return the packaged chord table, building it on first use."""
    table = build_chord_table(load_chord_definitions())
    logger.debug(
        "Built chord table: %d chord types, %d names",
        len(table.names()), len(table),
    )
    return table


def chord_names(aliases: bool = False, table: ChordTable | None = None) -> list[str]:
    """Return the available chord names, optionally including aliases.

    >>> chord_names()[:3]
    ['M', 'm', 'dim']
    """
    table = table if table is not None else default_table()
    return table.names(aliases)


def get_intervals(name: str, table: ChordTable | None = None) -> tuple[Interval, ...] | None:
    """Return the interval tuple for a chord name or alias, or None if unknown."""
    table = table if table is not None else default_table()
    return table.intervals(name)
