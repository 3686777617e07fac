"""Note-name parsing via music21, so "Bb", "A#" and "E-4" all resolve."""
import re

import music21
import music21.pitch

from modal_oracle.codec import InvalidDegreeError
from modal_oracle.constants import _PC_TO_NOTE


def _music21_name(note_name: str) -> str:
    """'Bb' → 'B-', 'Eb4' → 'E-4'; music21 spells flats with '-'."""
    name = note_name.strip()
    return re.sub(r"^([A-Ga-g])(b+)", lambda m: m.group(1) + "-" * len(m.group(2)), name)


def note_pitch_class(note_name: str) -> int:
    """Pitch class (0-11) of a note name such as 'C', 'F#', 'Bb' or 'E-4'."""
    if not isinstance(note_name, str) or not note_name.strip():
        raise InvalidDegreeError(note_name)
    try:
        return music21.pitch.Pitch(_music21_name(note_name)).pitchClass
    except music21.exceptions21.Music21Exception as e:
        raise InvalidDegreeError(note_name) from e


def pitch_class_name(pc: int) -> str:
    """Flat-preferred note name for a pitch class."""
    return _PC_TO_NOTE[pc % 12]
