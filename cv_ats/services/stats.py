from __future__ import annotations

from cv_ats.features import (
    compute_readability,
    compute_section_coverage,
    count_sentences,
    count_words,
    estimate_experience_years,
    extract_contact_details,
)
from cv_ats.keywords import build_keyword_catalogue, match_keywords
from cv_ats.schemas import CvStats, KeywordContext


def build_stats(text: str, context: KeywordContext | None = None) -> CvStats:
    """Compute the full statistics record for already-normalized text."""
    catalogue = build_keyword_catalogue(context)
    return CvStats(
        word_count=count_words(text),
        sentence_count=count_sentences(text),
        readability=compute_readability(text),
        contact=extract_contact_details(text),
        experience_years=estimate_experience_years(text),
        section_coverage=compute_section_coverage(text),
        keyword_matches=match_keywords(text, catalogue),
    )
