"""
Scale-degree ↔ semitone conversion.

A degree is a base step 1-7 followed by a run of one accidental type:
"1", "3b", "4#", "5bb".  The semitone is the pitch-class distance above the
tonic, always folded into 0-11.
"""
import re

from modal_oracle.constants import (
    _STEP_TO_SEMITONE,
    _SEMITONE_TO_DEGREE,
    _SHARP,
    _FLAT,
)

_DEGREE_RE = re.compile(r"^([1-7])(#*|b*)$")


class InvalidDegreeError(ValueError):
    """Raised when a scale-degree token cannot be parsed."""

    def __init__(self, degree):
        self.degree = degree
        super().__init__(f"Invalid scale degree: {degree!r}")


def parse_degree(degree) -> tuple[int, str]:
    """Split a degree token into (base_step, accidental_run)."""
    if not isinstance(degree, str):
        raise InvalidDegreeError(degree)
    m = _DEGREE_RE.match(degree.strip())
    if not m:
        raise InvalidDegreeError(degree)
    return int(m.group(1)), m.group(2)


def base_step(degree: str) -> int:
    """Return the scale-step number with accidentals stripped ("6b" → 6)."""
    return parse_degree(degree)[0]


def accidental_of(degree: str) -> str:
    """Return "#", "b" or "" for a single-accidental degree."""
    run = parse_degree(degree)[1]
    return run[:1]


def degree_to_semitone(degree: str) -> int:
    """Map a scale degree to its semitone offset above the tonic (0-11)."""
    step, accidentals = parse_degree(degree)
    semitone = _STEP_TO_SEMITONE[step]
    semitone += accidentals.count(_SHARP) - accidentals.count(_FLAT)
    return semitone % 12


def semitone_to_degree(semitone: int) -> str:
    """Preferred spelling of a pitch class relative to the tonic."""
    return _SEMITONE_TO_DEGREE[semitone % 12]


def semitones_to_intervals(semitones) -> list[int]:
    """
    Cyclic step sizes between consecutive semitones.

    The last entry wraps back to the first.  A zero step (the same pitch
    class at adjacent positions, or a single note closing on itself) counts
    as a full octave so an ascending set always sums to 12.
    """
    semitones = list(semitones)
    intervals = []
    for i, current in enumerate(semitones):
        nxt = semitones[(i + 1) % len(semitones)]
        interval = (nxt - current) % 12
        if interval == 0:
            interval = 12
        intervals.append(interval)
    return intervals


def degrees_to_intervals(degrees) -> list[int]:
    """
    Interval sequence between consecutive degrees, wrapping last → first.

    Degrees must already be in ascending (or rotation) order; nothing is
    sorted here.
        degrees_to_intervals(["1", "2", "3", "4", "5", "6", "7"])
        → [2, 2, 1, 2, 2, 2, 1]
    """
    if not degrees:
        return []
    return semitones_to_intervals(degree_to_semitone(d) for d in degrees)
