from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

from cv_ats.core.scoring_config import get_scoring_value
from cv_ats.schemas import KeywordContext

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "leadership",
    "project management",
    "strategic planning",
    "communication",
    "stakeholder",
    "collaboration",
    "analytics",
    "data-driven",
    "results",
    "innovation",
    "cross-functional",
    "operational excellence",
    "continuous improvement",
    "coaching",
    "mentoring",
    "customer experience",
    "sales",
    "marketing",
    "growth",
    "risk management",
    "compliance",
    "automation",
    "budgeting",
    "forecasting",
    "agile",
    "kpi",
    "performance",
    "roadmap",
    "product",
    "delivery",
)

JOB_DESCRIPTION_STOP_WORDS: frozenset[str] = frozenset(
    {
        "with",
        "from",
        "that",
        "will",
        "your",
        "this",
        "these",
        "those",
        "have",
        "ability",
        "strong",
        "using",
        "skills",
        "experience",
        "about",
        "other",
        "team",
        "work",
        "across",
        "role",
        "drive",
        "needs",
        "must",
    }
)

_JD_TERM_RE = re.compile(r"\b[a-z]{4,}\b", re.ASCII)


def unique_keywords(keywords: Iterable[str]) -> list[str]:
    """Trim, drop blanks and dedupe case-insensitively, keeping first casing and order."""
    seen: set[str] = set()
    result: list[str] = []
    for keyword in keywords:
        trimmed = keyword.strip()
        if not trimmed:
            continue
        normalized = trimmed.lower()
        if normalized in seen:
            continue
        seen.add(normalized)
        result.append(trimmed)
    return result


def extract_job_description_terms(job_description: str, limit: int | None = None) -> list[str]:
    """Most frequent non-stopword terms of a job description.

    Ties keep the order in which the terms first appear.
    """
    if limit is None:
        limit = int(get_scoring_value("limits.job_description_terms", 25))
    terms = [
        word
        for word in _JD_TERM_RE.findall(job_description.lower())
        if word not in JOB_DESCRIPTION_STOP_WORDS
    ]
    return [word for word, _count in Counter(terms).most_common(limit)]


def build_keyword_catalogue(context: KeywordContext | None = None) -> list[str]:
    catalogue: list[str] = list(DEFAULT_KEYWORDS)
    if context is not None:
        if context.job_target:
            catalogue.extend(context.job_target.split())
        if context.job_description:
            catalogue.extend(extract_job_description_terms(context.job_description))
        if context.custom_keywords:
            catalogue.extend(context.custom_keywords)
    return unique_keywords(catalogue)
