"""MIDI conversion — chord notes to MIDI numbers and PrettyMIDI instruments.

Usage::

    from chordkit.midi import chord_to_midi, chord_to_instrument

    chord_to_midi("maj7", "C")      # [60, 64, 67, 71]
    inst = chord_to_instrument("m7", "A3", duration=2.0)
    pm = pretty_midi.PrettyMIDI()
    pm.instruments.append(inst)

Tonics without an octave are placed in :data:`DEFAULT_OCTAVE` (middle C
octave) before harmonizing, so upper chord tones climb into the next octave
instead of wrapping.
"""

from __future__ import annotations

import dataclasses

import pretty_midi

from chordkit.chord import chord_builder
from chordkit.errors import ValidationError
from chordkit.lib.chord_library import ChordTable
from chordkit.parser.note import try_parse_note

DEFAULT_OCTAVE: int = 4
DEFAULT_VELOCITY: int = 100


def note_to_midi(note_name: str, octave: int = DEFAULT_OCTAVE) -> int:
    """Convert a note name to a MIDI number (``"C4"`` -> 60).

    Notes without an octave are placed in *octave*.

    Raises:
        ValidationError: If the name is not a note or falls outside 0-127.
    """
    note = try_parse_note(note_name)
    if note is None:
        raise ValidationError(f"Cannot parse note: {note_name!r}")
    if note.octave is None:
        note = dataclasses.replace(note, octave=octave)

    # pretty_midi reads a single accidental; add double sharps/flats here
    natural = pretty_midi.note_name_to_number(f"{note.letter}{note.octave}")
    number = natural + note.alteration
    if not 0 <= number <= 127:
        raise ValidationError(
            f"MIDI number {number} out of range (0-127) for note '{note}'"
        )
    return number


def chord_to_midi(
    source: str,
    tonic: str,
    octave: int = DEFAULT_OCTAVE,
    table: ChordTable | None = None,
) -> list[int]:
    """Return the MIDI numbers of a chord, lowest chord tone first.

    Returns an empty list for an unknown chord or a tonic that is not a
    note name.
    """
    root = try_parse_note(tonic) if isinstance(tonic, str) else None
    if root is None:
        return []
    if root.octave is None:
        root = dataclasses.replace(root, octave=octave)
    return [note_to_midi(n) for n in chord_builder(source, table)(root)]


def chord_to_instrument(
    source: str,
    tonic: str,
    start: float = 0.0,
    duration: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
    program: int = 0,
    name: str | None = None,
    table: ChordTable | None = None,
) -> pretty_midi.Instrument:
    """Build a :class:`pretty_midi.Instrument` holding one block chord.

    All chord tones start at *start* (seconds) and last *duration* seconds.
    Nothing is written to disk; append the instrument to a
    :class:`pretty_midi.PrettyMIDI` to render or save it.
    """
    if not 0 <= velocity <= 127:
        raise ValidationError(f"Velocity out of range (0-127): {velocity}")
    if not 0 <= program <= 127:
        raise ValidationError(f"Program out of range (0-127): {program}")
    if duration <= 0:
        raise ValidationError(f"Duration must be positive, got {duration}")

    instrument = pretty_midi.Instrument(
        program=program,
        name=name if name is not None else f"{tonic} {source}",
    )
    for pitch in chord_to_midi(source, tonic, table=table):
        instrument.notes.append(
            pretty_midi.Note(
                velocity=velocity,
                pitch=pitch,
                start=start,
                end=start + duration,
            )
        )
    return instrument
