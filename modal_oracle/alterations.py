"""
Per-rotation alteration editing.

A caller shows one rotation ("1 2 3 4 5 6 7"), lets the user sharpen or
flatten a step, and asks for a fresh analysis of the edited scale.  Degrees
are resolved through the spelling table of the closest standard mode; a
degree that table does not know is logged and resolved with the plain codec
mapping instead.
"""
import logging

from modal_oracle.codec import degree_to_semitone, parse_degree, semitones_to_intervals
from modal_oracle.conflicts import find_conflict
from modal_oracle.constants import NO_NOTES, CUSTOM_SCALE, _SHARP, _FLAT, _TRITONE_FAMILY
from modal_oracle.matcher import analyze_single_mode, best_greek_template, selection_pitch_classes
from modal_oracle.templates import MODES_BY_NAME

logger = logging.getLogger(__name__)

_ALTERATION_SUFFIX: dict[str, str] = {
    "natural": "",
    "sharp": _SHARP,
    "flat": _FLAT,
}


def apply_alteration(degrees, step: int, alteration: str) -> list[str]:
    """
    Respell the degree on `step` as natural, sharp or flat.

        apply_alteration(["1", "2", "3"], 3, "flat") → ["1", "2", "3b"]
    """
    if alteration not in _ALTERATION_SUFFIX:
        raise ValueError(f"Unknown alteration: {alteration!r}")
    degrees = list(degrees)
    for i, d in enumerate(degrees):
        if parse_degree(d)[0] == step:
            degrees[i] = f"{step}{_ALTERATION_SUFFIX[alteration]}"
            return degrees
    raise KeyError(f"Degree {step} not found in {degrees}")


def _resolve_semitone(degree, table, mode_name) -> int:
    if degree in table:
        return table[degree]
    logger.warning("Unknown degree %s in %s context, falling back to standard mapping",
                   degree, mode_name)
    return degree_to_semitone(degree)


def _leaves_pattern(degree, template) -> bool:
    """True when a degree is not one of the mode's own spellings.

    An enharmonic respelling of a pattern tone ("7#" for the tonic) counts as
    altered; only the tritone may be spelled either way.
    """
    if degree_to_semitone(degree) not in template.pattern_pcs:
        return True
    return degree not in template.pattern and degree not in _TRITONE_FAMILY


def analyze_altered_scale(degrees) -> dict:
    """
    Intervals and label for an edited rotation.

    Returns {"intervals": "2 2 1 ...", "analysis": label}.  The label is
      * "Conflict: Cannot select both X and Y" for clashing spellings,
      * "Altered <Mode> + <degrees...>" when degrees leave the mode's pattern,
      * the plain matcher label otherwise,
      * "Custom Scale" when no mode fits.
    """
    degrees = [d.strip() for d in degrees]
    if not degrees:
        return {"intervals": "", "analysis": NO_NOTES}

    conflict = find_conflict(degrees)
    if conflict:
        return {"intervals": "",
                "analysis": f"Conflict: Cannot select both {conflict[0]} and {conflict[1]}"}

    template, _ = best_greek_template(selection_pitch_classes(degrees))
    if template is None:
        semitones = [degree_to_semitone(d) for d in degrees]
    else:
        table = template.spelling_table()
        semitones = [_resolve_semitone(d, table, template.name) for d in degrees]
    intervals = " ".join(str(i) for i in semitones_to_intervals(semitones))

    label = analyze_single_mode(degrees)
    if label.startswith("No matching"):
        return {"intervals": intervals, "analysis": CUSTOM_SCALE}

    base = MODES_BY_NAME.get(label.split(" ")[0])
    if base is None:
        return {"intervals": intervals, "analysis": label}
    altered = [d for d in degrees if _leaves_pattern(d, base)]
    if not altered:
        return {"intervals": intervals, "analysis": label}
    return {"intervals": intervals, "analysis": f"Altered {base.name} + {' '.join(altered)}"}
