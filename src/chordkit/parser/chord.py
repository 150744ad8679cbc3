"""Chord name parser — splits ``"CMaj7"`` style names into tonic and type.

A bare number after the note letter is read as the chord type rather than
an octave: ``"C7"`` is C dominant seventh and ``"C4"`` the quartal chord on
C. When a chord type follows, the number is the octave (``"C4maj7"``).
"""

from __future__ import annotations

from chordkit.chord import chord
from chordkit.lib.chord_library import ChordTable
from chordkit.parser.note import match_note


def split_name(name: str) -> tuple[str, str] | None:
    """Split a chord name into ``(tonic, chord_type)``.

    Returns None if *name* does not start with a note.

    >>> split_name("C#4maj7")
    ('C#4', 'maj7')
    >>> split_name("Bb7")
    ('Bb', '7')
    """
    m = match_note(name)
    if m is None:
        return None
    if m.remainder:
        return m.letter + m.accidental + m.octave, m.remainder
    # No chord type after the note: the number is the chord type
    return m.letter + m.accidental, m.octave


def parse_name(name: str, table: ChordTable | None = None) -> list[str]:
    """Return the notes of a chord name such as ``"CMaj7"`` or ``"Eb4m7"``.

    Returns an empty list if the name does not start with a note or the
    chord type is unknown.
    """
    parts = split_name(name)
    if parts is None:
        return []
    tonic, chord_type = parts
    return chord(chord_type, tonic, table)
