"""Chord resolver — turns a chord type or interval list into notes.

Usage::

    from chordkit.chord import chord, chord_builder

    chord("maj7", "C2")          # ['C2', 'E2', 'G2', 'B2']
    chord("maj7", False)         # ['1P', '3M', '5P', '7M']
    chord("1 3 5 m7 m9", "C")    # ['C', 'E', 'G', 'Bb', 'Db']

    maj7 = chord_builder("maj7")
    maj7("C")                    # ['C', 'E', 'G', 'B']
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chordkit.errors import MalformedIntervalError
from chordkit.harmonizer import Tonic, harmonize, interval_between
from chordkit.lib.chord_library import ChordTable, default_table
from chordkit.model.theory import Interval
from chordkit.parser.interval import try_parse_interval
from chordkit.parser.note import try_parse_note

logger = logging.getLogger(__name__)

ChordBuilder = Callable[[Tonic], list[str]]


def resolve_intervals(
    source: str, table: ChordTable | None = None
) -> tuple[Interval, ...] | None:
    """Return the intervals for a chord source, or None if it is unknown.

    *source* is looked up in the chord table first (aliases included). If
    it is not a known name it is read as a space-separated list of interval
    tokens (``"1 3 5 m7"``) or of note names (``"C E G"``, measured from the
    first note).

    Raises
    ------
    MalformedIntervalError
        If some tokens of a raw source are intervals and others are not.
    """
    table = table if table is not None else default_table()
    intervals = table.intervals(source)
    if intervals is not None:
        return intervals
    return _parse_raw_source(source)


def _parse_raw_source(source: str) -> tuple[Interval, ...] | None:
    tokens = source.split()
    if not tokens:
        return None

    intervals = [try_parse_interval(t) for t in tokens]
    if all(i is not None for i in intervals):
        return tuple(intervals)

    # A note list needs at least two notes; a lone note is an unknown chord name
    notes = [try_parse_note(t) for t in tokens]
    if len(notes) > 1 and all(n is not None for n in notes):
        root = notes[0]
        return tuple(interval_between(root, n) for n in notes)

    # No interval tokens at all: an unknown chord name, not a bad token
    if all(i is None for i in intervals):
        logger.debug("Unresolved chord source %r", source)
        return None

    bad = next(t for t, i in zip(tokens, intervals) if i is None)
    raise MalformedIntervalError(bad)


def chord_builder(source: str, table: ChordTable | None = None) -> ChordBuilder:
    """Resolve *source* once and return a function of the tonic.

    The returned function gives the same result as ``chord(source, tonic)``
    and can be reused for any number of tonics. An unknown source gives a
    function that always returns ``[]``.
    """
    intervals = resolve_intervals(source, table)

    def build(tonic: Tonic = None) -> list[str]:
        if intervals is None:
            return []
        return harmonize(intervals, tonic)

    return build


def chord(source: str, tonic: Tonic = None, table: ChordTable | None = None) -> list[str]:
    """Create a chord from a chord type (or interval list) and a tonic.

    Parameters
    ----------
    source : str
        Chord type or alias (``"maj7"``, ``"M7"``), interval tokens
        (``"1 3 5 m7 m9"``) or note names (``"C E G"``).
    tonic : str, False or None
        Tonic note (``"C"``, ``"Eb4"``). ``False`` or ``None`` returns the
        intervals instead of notes.

    Returns
    -------
    list[str]
        Notes (or intervals) in chord order; empty if *source* is unknown
        or *tonic* is not a note name.
    """
    return chord_builder(source, table)(tonic)
