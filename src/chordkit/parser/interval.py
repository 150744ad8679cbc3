"""Interval parser — converts interval tokens to Interval instances.

Supported formats
-----------------
- Number first: ``3M``, ``5P``, ``7m``, ``9m``, ``-3M``, ``11A``
- Quality first: ``M3``, ``m7``, ``P5``, ``d5``, ``AA4``
- Bare number: ``3`` (major), ``5`` (perfect)

Qualities are ``P`` (perfect), ``M`` (major), ``m`` (minor), ``A`` (augmented,
repeatable up to four times) and ``d`` (diminished, likewise).
"""

from __future__ import annotations

import re

from chordkit.errors import MalformedIntervalError
from chordkit.model.theory import PERFECT_STEPS, Interval

_QUALITY = r"(?:P|M|m|A{1,4}|d{1,4})"

# "3M", "-9m", "5" (number, then optional quality)
_NUMBER_FIRST_RE = re.compile(rf"^([-+]?)(\d+)({_QUALITY})?$")

# "M3", "d-5" (quality, then number)
_QUALITY_FIRST_RE = re.compile(rf"^({_QUALITY})([-+]?)(\d+)$")


def parse_interval(token: str) -> Interval:
    """Parse an interval token into an :class:`Interval` instance.

    Parameters
    ----------
    token : str
        One of: ``"3M"``, ``"m7"``, ``"5"``, ``"-5P"``, ``"9A"``

    Returns
    -------
    Interval

    Raises
    ------
    MalformedIntervalError
        If the token is not a valid interval.
    """
    m = _NUMBER_FIRST_RE.match(token)
    if m:
        sign, number, quality = m.group(1), m.group(2), m.group(3)
    else:
        m = _QUALITY_FIRST_RE.match(token)
        if not m:
            raise MalformedIntervalError(token)
        quality, sign, number = m.group(1), m.group(2), m.group(3)

    num = int(number)
    if num < 1:
        raise MalformedIntervalError(token, "interval numbers start at 1")

    perfect = (num - 1) % 7 in PERFECT_STEPS
    if quality is None:
        quality = "P" if perfect else "M"
    elif perfect and quality in ("M", "m"):
        raise MalformedIntervalError(token, f"{num} takes P, not {quality}")
    elif not perfect and quality == "P":
        raise MalformedIntervalError(token, f"{num} cannot be perfect")

    direction = -1 if sign == "-" else 1
    return Interval(number=num, quality=quality, direction=direction)


def try_parse_interval(token: str) -> Interval | None:
    """Like :func:`parse_interval` but return None for malformed tokens."""
    try:
        return parse_interval(token)
    except MalformedIntervalError:
        return None


def parse_intervals(s: str) -> tuple[Interval, ...]:
    """Parse a whitespace-separated list of interval tokens."""
    return tuple(parse_interval(token) for token in s.split())
