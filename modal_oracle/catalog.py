"""
Named scale catalog (reference tonic C) and the category matrix built from it.

The matrix has one row per pitch class and one column per catalog scale; a
cell is set when the scale contains that pitch class.  Selecting several
pitch classes and intersecting their rows gives the categories they share.
"""
import numpy as np

from modal_oracle.notes import note_pitch_class, pitch_class_name
from modal_oracle.templates import GREEK_MODES

# Greek modes come straight from the templates; the altered collections are
# fixed note lists.
_ALTERED_SCALES: dict[str, tuple[str, ...]] = {
    "Mixolydian Altered": ("C", "C#", "D", "Eb", "E", "F", "F#", "G", "G#", "A", "Bb"),
    "Altered Dominant":   ("C", "C#", "Eb", "E", "F#", "G#", "Bb"),
    "Major Altered":      ("C", "D", "Eb", "E", "F", "F#", "G", "G#", "A", "B"),
    "Minor Altered":      ("C", "D", "Eb", "F", "F#", "G", "G#", "A", "Bb", "B"),
    "No third":           ("C", "C#", "D", "F", "F#", "G", "G#", "A", "Bb", "B"),
}

SCALE_CATALOG: dict[str, tuple[str, ...]] = {
    t.name: tuple(pitch_class_name(pc) for pc in sorted(t.pattern_pcs))
    for t in GREEK_MODES
}
SCALE_CATALOG.update(_ALTERED_SCALES)

CATEGORY_NAMES: tuple[str, ...] = tuple(SCALE_CATALOG)

# Column letters as printed on the chord table header (A = Ionian ...).
CATEGORY_LETTERS: dict[str, str] = {
    name: chr(ord("A") + i) for i, name in enumerate(CATEGORY_NAMES)
}

_CATALOG_PCS: dict[str, frozenset] = {
    name: frozenset(note_pitch_class(n) for n in notes)
    for name, notes in SCALE_CATALOG.items()
}


def category_matrix() -> np.ndarray:
    """12 × len(CATEGORY_NAMES) boolean membership matrix."""
    matrix = np.zeros((12, len(CATEGORY_NAMES)), dtype=bool)
    for col, name in enumerate(CATEGORY_NAMES):
        matrix[sorted(_CATALOG_PCS[name]), col] = True
    return matrix


_MATRIX = category_matrix()
_MATRIX.flags.writeable = False


def common_categories(semitones) -> list[str]:
    """Categories that contain every selected pitch class, in catalog order."""
    rows = sorted({s % 12 for s in semitones})
    if not rows:
        return []
    shared = np.logical_and.reduce(_MATRIX[rows], axis=0)
    return [name for name, keep in zip(CATEGORY_NAMES, shared) if keep]


def scales_containing(note_names) -> list[str]:
    """
    Catalog scales holding every given note.

        scales_containing(["C", "E", "G"])
        → ["Ionian", "Lydian", "Mixolydian", "Mixolydian Altered", "Major Altered"]

    Enharmonic spellings agree: "D#" and "Eb" select the same scales.
    """
    return common_categories(note_pitch_class(n) for n in note_names)
