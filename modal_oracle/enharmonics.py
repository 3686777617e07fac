"""
Enharmonic normalisation of scale-degree spellings.

Two forms exist:
  * matching form  – one spelling per pitch class (see _SEMITONE_TO_DEGREE);
                     the tritone is always "4#".
  * display form   – the tritone is shown as "5b" when the selection already
                     holds a plain "4", otherwise as "4#".
"""
from modal_oracle.codec import InvalidDegreeError, parse_degree, degree_to_semitone
from modal_oracle.constants import _SEMITONE_TO_DEGREE, _LEGACY_SPELLINGS


def normalize_enharmonics(degree: str) -> str:
    """
    Return the preferred spelling of a degree.

        "5b" → "4#"    "1#" → "2b"    "2#" → "3b"    "7#" → "1"
        "5bb" → "4"    "5##" → "6"    (legacy double accidentals)

    Idempotent: normalize_enharmonics(normalize_enharmonics(d)) is stable.
    """
    if isinstance(degree, str) and degree.strip() in _LEGACY_SPELLINGS:
        return _LEGACY_SPELLINGS[degree.strip()]
    _, accidentals = parse_degree(degree)
    if len(accidentals) > 1:
        raise InvalidDegreeError(degree)
    return _SEMITONE_TO_DEGREE[degree_to_semitone(degree)]


def display_enharmonic(degree: str, context) -> str:
    """Spell a degree for display given the rest of the selection."""
    normalized = normalize_enharmonics(degree)
    if normalized == "4#" and "4" in context:
        return "5b"
    return normalized


def normalize_degree_set(degrees) -> list[str]:
    """Normalise, drop duplicates and sort by pitch class."""
    unique = {normalize_enharmonics(d) for d in degrees}
    return sorted(unique, key=degree_to_semitone)
