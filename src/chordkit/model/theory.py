"""Value types for intervals and notes.

Both are immutable and carry no identity beyond their fields; the string
forms are what the public API returns.
"""

from __future__ import annotations

from dataclasses import dataclass

# Semitones above C for each natural letter
LETTER_SEMITONES: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

LETTERS: str = "CDEFGAB"

# Semitone size of each simple interval number (unison .. seventh), major/perfect
_STEP_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]

# Zero-based steps whose interval takes P (unison, fourth, fifth)
PERFECT_STEPS: frozenset[int] = frozenset({0, 3, 4})


@dataclass(frozen=True)
class Interval:
    number: int  # 1-based, compound allowed: 9 = ninth
    quality: str  # "P", "M", "m", "A".."AAAA", "d".."dddd"
    direction: int = 1  # 1 ascending, -1 descending

    @property
    def steps(self) -> int:
        """Zero-based diatonic steps (unison = 0, ninth = 8)."""
        return self.number - 1

    @property
    def is_perfect(self) -> bool:
        return self.steps % 7 in PERFECT_STEPS

    @property
    def alteration(self) -> int:
        """Semitone offset from the major/perfect form of the interval."""
        q = self.quality
        if q in ("P", "M"):
            return 0
        if q == "m":
            return -1
        if q[0] == "A":
            return len(q)
        # diminished: one semitone further down on majorable numbers
        return -len(q) if self.is_perfect else -len(q) - 1

    @property
    def semitones(self) -> int:
        """Signed size in semitones."""
        return (natural_semitones(self.steps) + self.alteration) * self.direction

    def __str__(self) -> str:
        sign = "-" if self.direction < 0 else ""
        return f"{sign}{self.number}{self.quality}"


@dataclass(frozen=True)
class Note:
    letter: str  # "C", "D", ..., "B"
    alteration: int  # sharps positive, flats negative
    octave: int | None = None  # None for a bare pitch class

    @property
    def accidental(self) -> str:
        if self.alteration >= 0:
            return "#" * self.alteration
        return "b" * -self.alteration

    def __str__(self) -> str:
        octave = "" if self.octave is None else str(self.octave)
        return f"{self.letter}{self.accidental}{octave}"


def quality_for(steps: int, alteration: int) -> str:
    """Return the quality name for a step count and semitone alteration."""
    if steps % 7 in PERFECT_STEPS:
        if alteration == 0:
            return "P"
        return "A" * alteration if alteration > 0 else "d" * -alteration
    if alteration == 0:
        return "M"
    if alteration == -1:
        return "m"
    return "A" * alteration if alteration > 0 else "d" * (-alteration - 1)


def natural_semitones(steps: int) -> int:
    """Semitone size of the major/perfect interval spanning *steps*."""
    octaves, step = divmod(steps, 7)
    return _STEP_SEMITONES[step] + 12 * octaves
