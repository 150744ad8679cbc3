"""chordkit — chord lookup by type name, interval list or chord name.

>>> from chordkit import chord, chord_builder, parse_name, chord_names
>>> chord("maj7", "C2")
['C2', 'E2', 'G2', 'B2']
>>> chord_builder("maj7")("C")
['C', 'E', 'G', 'B']
>>> parse_name("CMaj7")
['C', 'E', 'G', 'B']
"""

from chordkit.chord import chord, chord_builder, resolve_intervals
from chordkit.errors import ChordkitError, MalformedIntervalError, ValidationError
from chordkit.lib.chord_library import (
    AliasOf,
    ChordTable,
    Intervals,
    build_chord_table,
    chord_names,
    default_table,
    get_intervals,
    load_chord_definitions,
)
from chordkit.parser.chord import parse_name, split_name

__all__ = [
    "chord",
    "chord_builder",
    "resolve_intervals",
    "parse_name",
    "split_name",
    "chord_names",
    "get_intervals",
    "default_table",
    "build_chord_table",
    "load_chord_definitions",
    "ChordTable",
    "Intervals",
    "AliasOf",
    "ChordkitError",
    "ValidationError",
    "MalformedIntervalError",
]
