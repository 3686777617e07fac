"""
Mode matching: one label for one set of scale degrees.

Decision order (first match wins):
  1. empty selection                       → "No notes selected"
  2. irreconcilable spellings              → "... - conflicting degrees"
  3. fixed patterns (blues, octatonic, mode + added natural, Ionian 2#)
  4. Locrian with either tritone spelling
  5. seven degrees: exact interval comparison against the Greek modes
  6. otherwise: template scoring, +2 per essential, -1 per avoided pitch
     class, ties resolved in declaration order (Ionian first)
  7. at most three degrees: Sus2 / Sus4 / Major 7 with every essential
     degree present, allowed alterations appended
  8. nothing fits                          → "No matching mode found"
"""
import logging

from modal_oracle.codec import (
    base_step,
    degree_to_semitone,
    semitone_to_degree,
    semitones_to_intervals,
)
from modal_oracle.conflicts import has_conflicting_degrees
from modal_oracle.constants import NO_NOTES, NO_MATCH, CONFLICTING, CUSTOM_SCALE
from modal_oracle.enharmonics import display_enharmonic, normalize_degree_set
from modal_oracle.templates import (
    FIXED_PATTERNS,
    GREEK_MODES,
    INTERVAL_TEMPLATES,
    MAX_INTERVAL_TEMPLATE_SIZE,
    MODES_BY_NAME,
    is_ionian_sharp_two,
    pitch_class_vector,
)

logger = logging.getLogger(__name__)

_LOCRIAN_PCS = MODES_BY_NAME["Locrian"].pattern_pcs
_TRITONE_PC = 6


def selection_pitch_classes(degrees) -> frozenset:
    """Normalised pitch-class set of a degree selection."""
    return frozenset(degree_to_semitone(d) for d in normalize_degree_set(degrees))


def _alteration_spelling(template, pc, pcs) -> str:
    if pc == _TRITONE_PC:
        context = [semitone_to_degree(p) for p in pcs]
        return display_enharmonic("4#", context)
    return template.alteration_spellings[pc]


def describe_match(template, pcs) -> str:
    """
    "<Mode> <alterations...> <omissions...>" for a matched template.

    Alterations are selected pitch classes from the template's alteration
    list, spelled the way the template lists them; other chromatic tones only
    lower the score and are not named.  Omissions are absent omittable
    pattern degrees, skipped when an alteration already sits on the same step
    ("Ionian 2#" rather than "Ionian 2# no2").
    """
    alterations = [_alteration_spelling(template, pc, pcs)
                   for pc in sorted(pcs & set(template.alteration_spellings))
                   if pc not in template.pattern_pcs]
    altered_steps = {base_step(a) for a in alterations}
    omissions = [
        f"no{d}" for d in template.pattern
        if d in template.omissions
        and degree_to_semitone(d) not in pcs
        and base_step(d) not in altered_steps
    ]
    return " ".join([template.name] + alterations + omissions)


def _fixed_pattern_label(pcs):
    if pcs in FIXED_PATTERNS:
        return FIXED_PATTERNS[pcs]
    if is_ionian_sharp_two(pcs):
        return describe_match(MODES_BY_NAME["Ionian"], pcs)
    return None


def _exact_mode(pcs):
    """Name of the Greek mode whose interval pattern equals the selection's."""
    if len(pcs) != 7 or 0 not in pcs:
        return None
    intervals = tuple(semitones_to_intervals(sorted(pcs)))
    for template in GREEK_MODES:
        if template.intervals == intervals:
            return template.name
    return None


def best_greek_template(pcs):
    """
    Highest-scoring Greek template and its score, or (None, 0.0).

    Only templates whose anchor degree (their third, or Phrygian's 2b) is
    selected take part, so bare dyads fall through to the interval templates.
    """
    vec = pitch_class_vector(pcs)
    best, best_score = None, 0.0
    for template in GREEK_MODES:
        if degree_to_semitone(template.anchor) not in pcs:
            continue
        score = template.score(vec)
        if score > best_score:
            best, best_score = template, score
    return best, best_score


def _interval_template_label(pcs):
    for template in INTERVAL_TEMPLATES:
        if not template.essential_pcs <= pcs:
            continue
        suffixes = [spelled for pc, spelled in sorted(template.alteration_spellings.items())
                    if pc in pcs]
        return " ".join([template.name] + suffixes)
    return None


def analyze_single_mode(degrees) -> str:
    """
    Label the mode that best explains a set of scale degrees.

        analyze_single_mode(["1", "2", "3", "4", "5", "6", "7"]) → "Ionian"
        analyze_single_mode(["1", "3", "5"])                     → "Ionian no2 no4 no6 no7"
        analyze_single_mode(["1", "3", "3b", "5"])
            → "No matching mode found - conflicting degrees"

    Raises InvalidDegreeError for malformed tokens; every musical outcome,
    including ambiguity, is returned as a label.
    """
    degrees = [d.strip() if isinstance(d, str) else d for d in (degrees or [])]
    if not degrees:
        return NO_NOTES

    if has_conflicting_degrees(degrees):
        return CONFLICTING

    pcs = selection_pitch_classes(degrees)

    label = _fixed_pattern_label(pcs)
    if label:
        return label

    if pcs == _LOCRIAN_PCS:
        return "Locrian"

    name = _exact_mode(pcs)
    if name:
        return name

    template, score = best_greek_template(pcs)
    if template is not None:
        logger.debug("%s → %s (score %.1f)", sorted(pcs), template.name, score)
        return describe_match(template, pcs)

    if len(pcs) <= MAX_INTERVAL_TEMPLATE_SIZE:
        label = _interval_template_label(pcs)
        if label:
            return label

    return NO_MATCH


def classify_label(label: str) -> str:
    """Badge category for a label: "greek", "interval", "pattern" or "none"."""
    if not label or label.startswith(("No ", "Conflict")) or label == CUSTOM_SCALE:
        return "none"
    if any(label.startswith(t.name) for t in INTERVAL_TEMPLATES):
        return "interval"
    if label.startswith(("Blues", "Octatonic")):
        return "pattern"
    return "greek"
