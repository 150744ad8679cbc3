"""Interval arithmetic and harmonization.

Notes are spelled by letter first: moving a note by a third always lands
two letters up, and the accidental absorbs whatever semitone difference is
left. So ``C`` plus a minor ninth is ``Db`` (never ``C#``), and ``C2`` plus
a major seventh is ``B2``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chordkit.model.theory import (
    LETTER_SEMITONES,
    LETTERS,
    Interval,
    Note,
    natural_semitones,
    quality_for,
)
from chordkit.parser.note import try_parse_note

logger = logging.getLogger(__name__)

Tonic = str | Note | bool | None


def transpose(note: Note, interval: Interval) -> Note:
    """Return *note* moved by *interval*, keeping letter-based spelling."""
    index = LETTERS.index(note.letter) + interval.steps * interval.direction
    octave_shift, letter_index = divmod(index, 7)
    letter = LETTERS[letter_index]

    target = LETTER_SEMITONES[note.letter] + note.alteration + interval.semitones
    natural = LETTER_SEMITONES[letter] + 12 * octave_shift

    octave = None if note.octave is None else note.octave + octave_shift
    return Note(letter=letter, alteration=target - natural, octave=octave)


def interval_between(a: Note, b: Note) -> Interval:
    """Return the interval from *a* up (or down) to *b*.

    When either note lacks an octave the result is the ascending simple
    interval between the two pitch classes.
    """
    ia, ib = LETTERS.index(a.letter), LETTERS.index(b.letter)
    sa = LETTER_SEMITONES[a.letter] + a.alteration
    sb = LETTER_SEMITONES[b.letter] + b.alteration
    direction = 1

    if a.octave is not None and b.octave is not None:
        steps = (ib + 7 * b.octave) - (ia + 7 * a.octave)
        semitones = (sb + 12 * b.octave) - (sa + 12 * a.octave)
        if steps < 0:
            direction, steps, semitones = -1, -steps, -semitones
    else:
        steps = (ib - ia) % 7
        semitones = sb - sa + (12 if ib < ia else 0)

    quality = quality_for(steps, semitones - natural_semitones(steps))
    return Interval(number=steps + 1, quality=quality, direction=direction)


def harmonize(intervals: Iterable[Interval], tonic: Tonic = None) -> list[str]:
    """Map *intervals* onto *tonic*.

    A falsy tonic (``None``, ``False``, ``""``) returns the intervals as
    strings (``["1P", "3M", "5P"]``). A note name returns the spelled notes
    in interval order, carrying the octave when the tonic has one. A tonic
    that is not a note yields an empty list.
    """
    if not tonic:
        return [str(i) for i in intervals]

    if isinstance(tonic, Note):
        root = tonic
    elif isinstance(tonic, str):
        root = try_parse_note(tonic)
    else:
        root = None
    if root is None:
        logger.debug("Cannot harmonize on tonic %r", tonic)
        return []

    return [str(transpose(root, i)) for i in intervals]
