"""
Static mode templates.

Every template is described by spelled degrees and turned into 12-element
pitch-class vectors once, at import time:

    pattern_vec    1.0 on each pattern pitch class
    weights        +2 on essential pitch classes, -1 on "avoid" pitch classes
                   (everything outside pattern ∪ alterations)

so scoring a selection against a template is a single dot product with the
selection's multi-hot vector.
"""
import numpy as np

from modal_oracle.codec import degree_to_semitone, degrees_to_intervals

_ESSENTIAL_WEIGHT = 2.0
_AVOID_WEIGHT = -1.0


def _generate_template_vector(indices_or_weights):
    """12-element vector from active indices or (index, weight) tuples."""
    v = np.zeros(12, dtype=np.float32)
    for item in indices_or_weights:
        if isinstance(item, tuple):
            idx, weight = item
            v[idx] = weight
        else:
            v[item] = 1.0
    v.flags.writeable = False
    return v


def pitch_class_vector(semitones):
    """Multi-hot vector for a collection of semitones."""
    return _generate_template_vector(s % 12 for s in semitones)


class ModeTemplate:
    """
    A named degree pattern.

    pattern      ordered degrees of the scale (the tonic first)
    intervals    declared step sequence; must agree with the pattern
    essential    degrees required to claim the name
    omissions    pattern degrees that may be absent ("no5")
    alterations  chromatic degrees that keep the name (shown as suffixes)
    """

    def __init__(self, name, pattern, essential, omissions=(), alterations=(),
                 intervals=None, category="greek"):
        self.name = name
        self.category = category
        self.pattern = tuple(pattern)
        self.intervals = tuple(intervals) if intervals else tuple(degrees_to_intervals(pattern))
        self.essential = tuple(essential)
        self.omissions = tuple(omissions)
        self.alterations = tuple(alterations)

        self.pattern_pcs = frozenset(degree_to_semitone(d) for d in self.pattern)
        self.essential_pcs = frozenset(degree_to_semitone(d) for d in self.essential)
        # Alteration spellings keyed by pitch class; first spelling wins.
        self.alteration_spellings = {}
        for d in self.alterations:
            self.alteration_spellings.setdefault(degree_to_semitone(d), d)
        allowed = self.pattern_pcs | set(self.alteration_spellings)
        self.avoid_pcs = frozenset(range(12)) - allowed

        self.pattern_vec = pitch_class_vector(self.pattern_pcs)
        self.weights = _generate_template_vector(
            [(pc, _ESSENTIAL_WEIGHT) for pc in self.essential_pcs]
            + [(pc, _AVOID_WEIGHT) for pc in self.avoid_pcs]
        )

    @property
    def anchor(self):
        """First essential degree above the tonic ("3", "3b"; "2b" for Phrygian)."""
        for d in self.essential:
            if d != "1":
                return d
        return None

    def spelling_table(self):
        """Spelled degree → semitone for the pattern and its alterations."""
        table = {d: degree_to_semitone(d) for d in self.pattern}
        for d in self.alterations:
            table.setdefault(d, degree_to_semitone(d))
        return table

    def score(self, selection_vec) -> float:
        return float(np.dot(selection_vec, self.weights))

    def __repr__(self):
        return f"ModeTemplate({self.name!r})"


# ── Greek modes (declaration order breaks scoring ties) ───────────────────────

GREEK_MODES: tuple[ModeTemplate, ...] = (
    ModeTemplate(
        "Ionian",
        pattern=["1", "2", "3", "4", "5", "6", "7"],
        intervals=[2, 2, 1, 2, 2, 2, 1],
        essential=["1", "3", "4"],
        omissions=["2", "3", "4", "5", "6", "7"],
        alterations=["2#", "4#", "5#"],
    ),
    ModeTemplate(
        "Dorian",
        pattern=["1", "2", "3b", "4", "5", "6", "7b"],
        intervals=[2, 1, 2, 2, 2, 1, 2],
        essential=["1", "3b", "6"],
        omissions=["2", "3b", "4", "5", "6", "7b"],
        alterations=["4#", "7"],
    ),
    ModeTemplate(
        "Phrygian",
        pattern=["1", "2b", "3b", "4", "5", "6b", "7b"],
        intervals=[1, 2, 2, 2, 1, 2, 2],
        essential=["1", "2b"],
        omissions=["2b", "3b", "4", "5", "6b", "7b"],
        alterations=["2", "3", "6", "7"],
    ),
    ModeTemplate(
        "Lydian",
        pattern=["1", "2", "3", "4#", "5", "6", "7"],
        intervals=[2, 2, 2, 1, 2, 2, 1],
        essential=["1", "3", "4#"],
        omissions=["2", "3", "4#", "5", "6", "7"],
        alterations=["2#", "5#"],
    ),
    ModeTemplate(
        "Mixolydian",
        pattern=["1", "2", "3", "4", "5", "6", "7b"],
        intervals=[2, 2, 1, 2, 2, 1, 2],
        essential=["1", "3", "7b"],
        omissions=["2", "3", "4", "5", "6", "7b"],
        alterations=["2b", "2#", "4#", "5#"],
    ),
    ModeTemplate(
        "Aeolian",
        pattern=["1", "2", "3b", "4", "5", "6b", "7b"],
        intervals=[2, 1, 2, 2, 1, 2, 2],
        essential=["1", "3b", "6b"],
        omissions=["2", "3b", "4", "5", "6b", "7b"],
        alterations=["4#", "7"],
    ),
    ModeTemplate(
        "Locrian",
        pattern=["1", "2b", "3b", "4", "5b", "6b", "7b"],
        intervals=[1, 2, 2, 1, 2, 2, 2],
        essential=["1", "3b", "5b"],
        omissions=["2b", "3b", "4", "5b", "6b", "7b"],
        alterations=["2", "6"],
    ),
)

GREEK_MODE_NAMES: tuple[str, ...] = tuple(t.name for t in GREEK_MODES)
MODES_BY_NAME: dict[str, ModeTemplate] = {t.name: t for t in GREEK_MODES}

# ── Interval-only sonorities (inputs of at most three degrees) ────────────────

INTERVAL_TEMPLATES: tuple[ModeTemplate, ...] = (
    ModeTemplate("Sus2", pattern=["1", "2"], essential=["1", "2"],
                 alterations=["2b", "2#"], category="interval"),
    ModeTemplate("Sus4", pattern=["1", "4"], essential=["1", "4"],
                 alterations=["4#"], category="interval"),
    ModeTemplate("Major 7", pattern=["1", "7"], essential=["1", "7"],
                 alterations=["7b"], category="interval"),
)
MAX_INTERVAL_TEMPLATE_SIZE = 3

# ── Fixed patterns that legitimately spell one step twice ─────────────────────

def _pcs(degrees):
    return frozenset(degree_to_semitone(d) for d in degrees)


MAJOR_SCALE_PCS = MODES_BY_NAME["Ionian"].pattern_pcs

# Exact pitch-class sets → label.  Checked before generic scoring.
FIXED_PATTERNS: dict[frozenset, str] = {
    _pcs(["1", "3b", "3", "4", "5", "7b"]): "Blues scale",
    _pcs(["1", "3b", "3", "5", "7b"]): "Blues scale no4",
    # Half-whole and whole-half diminished collections from the tonic.
    frozenset({0, 1, 3, 4, 6, 7, 9, 10}): "Octatonic scale",
    frozenset({0, 2, 3, 5, 6, 8, 9, 11}): "Octatonic scale",
}

# Full mode plus the natural of one of its flattened degrees.
ADDED_NATURALS: dict[str, str] = {
    "Aeolian": "6",
    "Phrygian": "2",
    "Mixolydian": "7",
}
for _name, _natural in ADDED_NATURALS.items():
    FIXED_PATTERNS[MODES_BY_NAME[_name].pattern_pcs | _pcs([_natural])] = f"{_name} {_natural}"

# 3b next to 3 and 2 reads as a raised second over a major scale.
_SHARP_TWO_CORE = _pcs(["2", "3b", "3"])
_SHARP_TWO_SCOPE = MAJOR_SCALE_PCS | _pcs(["2#"])


def is_ionian_sharp_two(pcs) -> bool:
    """True for Ionian selections where 3b is really a raised 2nd."""
    pcs = frozenset(pcs)
    return _SHARP_TWO_CORE <= pcs <= _SHARP_TWO_SCOPE


def is_sanctioned_pattern(pcs) -> bool:
    """True when the pitch-class set is a known pattern that may repeat a step."""
    pcs = frozenset(pcs)
    return pcs in FIXED_PATTERNS or is_ionian_sharp_two(pcs)
