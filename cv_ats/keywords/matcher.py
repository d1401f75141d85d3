from __future__ import annotations

import re
from typing import Iterable

from cv_ats.schemas import KeywordMatch

SPECIFIC_KEYWORD_LENGTH = 12


def keyword_weight(keyword: str) -> int:
    """Multi-word and long keywords are more specific and count double."""
    if " " in keyword or len(keyword) >= SPECIFIC_KEYWORD_LENGTH:
        return 2
    return 1


def compile_keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Keywords come from job descriptions and user input, so they are always
    # escaped. Lookarounds stand in for \b so keywords such as "C++" still
    # have a boundary after their last character.
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)


def match_keywords(text: str, catalogue: Iterable[str]) -> tuple[KeywordMatch, ...]:
    return tuple(
        KeywordMatch(
            keyword=keyword,
            found=bool(compile_keyword_pattern(keyword).search(text)),
            weight=keyword_weight(keyword),
        )
        for keyword in catalogue
    )
