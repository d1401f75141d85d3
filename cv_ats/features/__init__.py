from .contact import extract_contact_details, looks_like_name
from .lexical import (
    compute_readability,
    count_sentences,
    count_words,
    estimate_experience_years,
    estimate_syllables,
    round_half_up,
)
from .sections import SECTION_LABELS, SECTION_MARKERS, SectionMarker, compute_section_coverage

__all__ = [
    "extract_contact_details",
    "looks_like_name",
    "count_words",
    "count_sentences",
    "estimate_syllables",
    "compute_readability",
    "estimate_experience_years",
    "round_half_up",
    "SectionMarker",
    "SECTION_MARKERS",
    "SECTION_LABELS",
    "compute_section_coverage",
]
