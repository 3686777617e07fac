"""
Rotation enumeration: every member of a selection taken in turn as tonic.

The selection is folded to sorted pitch classes, its cyclic interval
sequence is rotated once per member, and each rotation is re-spelled from a
new tonic (semitone 0) and handed to the mode matcher.
"""
from collections.abc import Mapping
from typing import NamedTuple

from modal_oracle.codec import (
    InvalidDegreeError,
    degree_to_semitone,
    semitone_to_degree,
    semitones_to_intervals,
)
from modal_oracle.matcher import analyze_single_mode
from modal_oracle.notes import note_pitch_class
from modal_oracle.templates import GREEK_MODE_NAMES, MAJOR_SCALE_PCS

# Keys a caller may use for the degree label of one selected note.
_DEGREE_KEYS = ("degree", "degreeLabel", "third_nomenclature")


class AnalysisResult(NamedTuple):
    index: int                   # 1-based rotation number
    degrees: tuple[str, ...]     # degree spelling from the rotation's tonic
    intervals: tuple[int, ...]   # rotated interval sequence
    analysis: str                # matcher label

    @property
    def rotation(self) -> str:
        return " ".join(self.degrees)

    def as_dict(self) -> dict:
        """Caller-facing form: space-joined strings, as the piano UI shows them."""
        return {
            "index": self.index,
            "rotation": self.rotation,
            "intervals": " ".join(str(i) for i in self.intervals),
            "analysis": self.analysis,
        }


def _to_semitone(item) -> int:
    if isinstance(item, Mapping):
        for key in _DEGREE_KEYS:
            if key in item:
                return degree_to_semitone(item[key])
        raise InvalidDegreeError(item)
    if isinstance(item, int) and not isinstance(item, bool):
        return item % 12
    return degree_to_semitone(item)


def _rotation_degrees(rotated) -> tuple[str, ...]:
    """Walk a rotated interval sequence from 0 and spell every position."""
    position = 0
    positions = [position]
    for step in rotated[:-1]:
        position = (position + step) % 12
        positions.append(position)
    return tuple(semitone_to_degree(p) for p in positions)


def analyze_all_rotations(selected) -> list[AnalysisResult]:
    """
    Analyse every rotation of a selection.

    Items may be degree labels ("3b"), semitones (3) or mappings carrying a
    "degree" / "degreeLabel" key.  Duplicated pitch classes collapse.
    Results come back in rotation order 1..n; an empty selection gives [].

    A complete major scale maps straight onto the seven Greek modes,
    Ionian through Locrian.
    """
    semitones = sorted({_to_semitone(s) for s in (selected or [])})
    if not semitones:
        return []

    intervals = semitones_to_intervals(semitones)
    is_major_scale = frozenset(semitones) == MAJOR_SCALE_PCS

    results = []
    for i in range(len(intervals)):
        rotated = tuple(intervals[i:] + intervals[:i])
        degrees = _rotation_degrees(rotated)
        if is_major_scale:
            analysis = GREEK_MODE_NAMES[i]
        else:
            analysis = analyze_single_mode(degrees)
        results.append(AnalysisResult(i + 1, degrees, rotated, analysis))
    return results


def degrees_from_notes(note_names, tonic: str = "C") -> list[str]:
    """
    Degree labels of piano-key names relative to a reference tonic.

        degrees_from_notes(["C", "Eb", "G"])        → ["1", "3b", "5"]
        degrees_from_notes(["A", "C", "E"], "A")    → ["1", "3b", "5"]
    """
    tonic_pc = note_pitch_class(tonic)
    return [semitone_to_degree(note_pitch_class(n) - tonic_pc) for n in note_names]
