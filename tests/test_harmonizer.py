"""Tests for interval arithmetic and harmonization."""

from __future__ import annotations

import logging

from chordkit.harmonizer import harmonize, interval_between, transpose
from chordkit.model.theory import Interval, Note
from chordkit.parser.interval import parse_intervals
from chordkit.parser.note import parse_note


def _t(note: str, interval: str) -> str:
    return str(transpose(parse_note(note), parse_intervals(interval)[0]))


class TestTranspose:
    def test_major_third(self):
        assert _t("C", "3M") == "E"

    def test_spelling_follows_letters(self):
        assert _t("C", "9m") == "Db"
        assert _t("C", "2A") == "D#"

    def test_crosses_octave(self):
        assert _t("B3", "3M") == "D#4"
        assert _t("C4", "8P") == "C5"

    def test_descending(self):
        assert _t("C4", "-3M") == "Ab3"
        assert _t("E", "-5P") == "A"

    def test_double_accidentals(self):
        assert _t("C", "7d") == "Bbb"
        assert _t("D#", "3M") == "F##"

    def test_pitch_class_stays_without_octave(self):
        assert transpose(Note("G", 0), Interval(5, "P")).octave is None


class TestIntervalBetween:
    def test_pitch_classes(self):
        assert str(interval_between(Note("C", 0), Note("B", -1))) == "7m"
        assert str(interval_between(Note("B", 0), Note("C", 0))) == "2m"
        assert str(interval_between(Note("D", 0), Note("F", 1))) == "3M"

    def test_unison(self):
        assert str(interval_between(Note("E", -1), Note("E", -1))) == "1P"

    def test_compound(self):
        assert str(interval_between(parse_note("C4"), parse_note("E5"))) == "10M"

    def test_descending(self):
        assert str(interval_between(parse_note("C4"), parse_note("A3"))) == "-3m"

    def test_augmented_and_diminished(self):
        assert str(interval_between(Note("C", 0), Note("F", 1))) == "4A"
        assert str(interval_between(Note("C", 0), Note("G", -1))) == "5d"

    def test_inverse_of_transpose(self):
        root = parse_note("Eb3")
        for ivl in parse_intervals("1P 3m 5P 7M 9A 11P 13m"):
            assert interval_between(root, transpose(root, ivl)) == ivl


class TestHarmonize:
    def test_falsy_tonic_gives_intervals(self):
        intervals = parse_intervals("1P 3M 5P")
        assert harmonize(intervals) == ["1P", "3M", "5P"]
        assert harmonize(intervals, False) == ["1P", "3M", "5P"]
        assert harmonize(intervals, "") == ["1P", "3M", "5P"]

    def test_note_tonic(self):
        assert harmonize(parse_intervals("1P 3M 5P"), "Eb") == ["Eb", "G", "Bb"]

    def test_note_object_tonic(self):
        assert harmonize(parse_intervals("1P 5P"), Note("A", 0, 2)) == ["A2", "E3"]

    def test_keeps_interval_order(self):
        assert harmonize(parse_intervals("5P 1P 3M"), "C") == ["G", "C", "E"]

    def test_invalid_tonic(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chordkit.harmonizer"):
            assert harmonize(parse_intervals("1P 3M"), "H") == []
        assert "H" in caplog.text

    def test_non_string_tonic(self):
        assert harmonize(parse_intervals("1P 3M"), True) == []

    def test_empty_intervals(self):
        assert harmonize([], "C") == []
