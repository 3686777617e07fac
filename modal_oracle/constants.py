# ── Scale-degree lookup tables ────────────────────────────────────────────────

# Semitone offset of each unaltered scale step above the tonic.
_STEP_TO_SEMITONE: dict[int, int] = {
    1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11,
}
# Preferred spelling for every pitch class above the tonic.  The tritone is
# spelled 4# here; 5b only survives as a display spelling.
_SEMITONE_TO_DEGREE: list[str] = [
    "1", "2b", "2", "3b", "3", "4", "4#", "5", "6b", "6", "7b", "7"
]
# Reverse of the table above, keyed by spelling.
_DEGREE_TO_SEMITONE: dict[str, int] = {
    d: pc for pc, d in enumerate(_SEMITONE_TO_DEGREE)
}
# Legacy double-accidental spellings the normalizer still accepts.
_LEGACY_SPELLINGS: dict[str, str] = {
    "5bb": "4",
    "5##": "6",
}
# Degrees of the tritone, both spellings and both neighbours.
_TRITONE_FAMILY: frozenset[str] = frozenset({"4", "4#", "5", "5b"})

_SHARP = "#"
_FLAT = "b"

# ── Note names (reference tonic C) ────────────────────────────────────────────

# Flat-preferred spelling for turning a pitch class back into a key name.
_PC_TO_NOTE: list[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]

# ── Result labels ─────────────────────────────────────────────────────────────

NO_NOTES = "No notes selected"
NO_MATCH = "No matching mode found"
CONFLICTING = "No matching mode found - conflicting degrees"
CUSTOM_SCALE = "Custom Scale"
