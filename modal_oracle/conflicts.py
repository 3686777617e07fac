"""
Conflict detection between degrees that share a scale step.

Two spellings of one step ("3" and "3b") normally contradict each other.
Two kinds of overlap are musically sanctioned:

  1. the tritone family – any mix of 4, 4#, 5 and 5b;
  2. fixed patterns present in full – blues scales, the octatonic
     collections, "mode + added natural" sets and the Ionian 2# reading.

When several steps are duplicated, one of these rules must cover all of them.
"""
from collections import defaultdict

from modal_oracle.codec import parse_degree, degree_to_semitone
from modal_oracle.constants import _TRITONE_FAMILY
from modal_oracle.templates import is_sanctioned_pattern


def _spellings_by_step(degrees) -> dict[int, list[str]]:
    """Distinct spellings per base step, in encounter order."""
    by_step: defaultdict[int, list[str]] = defaultdict(list)
    for d in degrees:
        step, _ = parse_degree(d)
        d = d.strip()
        if d not in by_step[step]:
            by_step[step].append(d)
    return by_step


def _duplicated_steps(degrees) -> dict[int, list[str]]:
    return {step: spelled for step, spelled in _spellings_by_step(degrees).items()
            if len(spelled) > 1}


def _is_tritone_overlap(duplicated) -> bool:
    return all(
        step in (4, 5) and set(spelled) <= _TRITONE_FAMILY
        for step, spelled in duplicated.items()
    )


def has_conflicting_degrees(degrees) -> bool:
    """
    Return True when the selection spells one scale step in two
    irreconcilable ways.

        has_conflicting_degrees(["1", "3", "5"])          → False
        has_conflicting_degrees(["1", "3", "3b", "5"])    → True
        has_conflicting_degrees(["1", "4", "4#", "5"])    → False  (tritone)
        has_conflicting_degrees(["1", "3b", "3", "4", "5", "7b"]) → False  (blues)
    """
    duplicated = _duplicated_steps(degrees)
    if not duplicated:
        return False
    if _is_tritone_overlap(duplicated):
        return False
    pcs = {degree_to_semitone(d) for d in degrees}
    if is_sanctioned_pattern(pcs):
        return False
    return True


def find_conflict(degrees):
    """
    First pair of clashing spellings, or None.

    Used for user-facing warnings, so it ignores sanctioned overlaps exactly
    like has_conflicting_degrees.
    """
    if not has_conflicting_degrees(degrees):
        return None
    for step, spelled in _duplicated_steps(degrees).items():
        if step in (4, 5) and set(spelled) <= _TRITONE_FAMILY:
            continue
        return spelled[0], spelled[1]
    return None
