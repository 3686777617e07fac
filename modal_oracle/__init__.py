"""Mode inference for sets of scale degrees."""
from modal_oracle.alterations import analyze_altered_scale, apply_alteration
from modal_oracle.catalog import (
    CATEGORY_NAMES,
    SCALE_CATALOG,
    category_matrix,
    common_categories,
    scales_containing,
)
from modal_oracle.codec import (
    InvalidDegreeError,
    degree_to_semitone,
    degrees_to_intervals,
    semitone_to_degree,
)
from modal_oracle.conflicts import find_conflict, has_conflicting_degrees
from modal_oracle.enharmonics import display_enharmonic, normalize_enharmonics
from modal_oracle.matcher import analyze_single_mode, classify_label
from modal_oracle.rotations import AnalysisResult, analyze_all_rotations, degrees_from_notes
from modal_oracle.templates import GREEK_MODES, INTERVAL_TEMPLATES, ModeTemplate

__all__ = [
    "AnalysisResult",
    "CATEGORY_NAMES",
    "GREEK_MODES",
    "INTERVAL_TEMPLATES",
    "InvalidDegreeError",
    "ModeTemplate",
    "SCALE_CATALOG",
    "analyze_all_rotations",
    "analyze_altered_scale",
    "analyze_single_mode",
    "apply_alteration",
    "category_matrix",
    "classify_label",
    "common_categories",
    "degree_to_semitone",
    "degrees_from_notes",
    "degrees_to_intervals",
    "display_enharmonic",
    "find_conflict",
    "has_conflicting_degrees",
    "normalize_enharmonics",
    "scales_containing",
    "semitone_to_degree",
]
