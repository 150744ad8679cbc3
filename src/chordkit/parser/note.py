"""Note parser — decomposes note-name strings.

Supported formats
-----------------
- Pitch class: ``C``, ``F#``, ``Bb``, ``Gx`` (``x`` is a double sharp)
- With octave: ``C4``, ``Eb-1``, ``F##2``

The same expression splits combined names such as ``C#4maj7`` into
letter, accidental, octave and the trailing remainder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chordkit.errors import ValidationError
from chordkit.model.theory import Note

# Letter, accidental run (#, b or x), optional octave, remainder
NOTE_RE = re.compile(r"^([a-gA-G])(#+|b+|x+|)(-?\d*)\s*(.*?)\s*$")


@dataclass
class NoteMatch:
    letter: str  # upper-cased
    accidental: str  # as written: "", "#", "bb", "x"
    octave: str  # "" when absent
    remainder: str  # whatever follows the note, stripped


def match_note(s: str) -> NoteMatch | None:
    """Split *s* into its four note-name groups, or None if it is not a note."""
    m = NOTE_RE.match(s)
    if not m:
        return None
    return NoteMatch(
        letter=m.group(1).upper(),
        accidental=m.group(2),
        octave=m.group(3),
        remainder=m.group(4),
    )


def _alteration(accidental: str) -> int:
    if not accidental:
        return 0
    if accidental[0] == "#":
        return len(accidental)
    if accidental[0] == "x":
        return 2 * len(accidental)
    return -len(accidental)


def parse_note(s: str) -> Note:
    """Parse a note name into a :class:`Note` instance.

    Raises
    ------
    ValidationError
        If *s* is not a bare note name (anything trailing it is rejected).
    """
    m = match_note(s)
    if m is None or m.remainder or m.octave == "-":
        raise ValidationError(f"Cannot parse note: {s!r}")
    octave = int(m.octave) if m.octave else None
    return Note(letter=m.letter, alteration=_alteration(m.accidental), octave=octave)


def try_parse_note(s: str) -> Note | None:
    """Like :func:`parse_note` but return None instead of raising."""
    try:
        return parse_note(s)
    except ValidationError:
        return None
