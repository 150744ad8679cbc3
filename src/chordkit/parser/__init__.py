"""Parser package — interval tokens, note names and chord names."""

from chordkit.parser.interval import parse_interval, parse_intervals, try_parse_interval
from chordkit.parser.note import NoteMatch, match_note, parse_note, try_parse_note

__all__ = [
    "parse_interval",
    "parse_intervals",
    "try_parse_interval",
    "parse_note",
    "try_parse_note",
    "match_note",
    "NoteMatch",
]
