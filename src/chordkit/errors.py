"""Custom exception hierarchy for chordkit."""

from __future__ import annotations


class ChordkitError(Exception):
    """Base exception for all chordkit errors."""


class ValidationError(ChordkitError, ValueError):
    """Invalid user input (note name, velocity, duration, etc.).

    Subclasses both ChordkitError and ValueError so plain
    ``except ValueError`` handlers keep working.
    """


class MalformedIntervalError(ValidationError):
    """An interval token could not be parsed."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        self.token = token
        msg = f"Cannot parse interval: {token!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
