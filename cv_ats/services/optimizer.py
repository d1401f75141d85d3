from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from cv_ats.core.scoring_config import get_scoring_value
from cv_ats.features import round_half_up
from cv_ats.schemas import AtsReport, CvStats, OptimizationResult

BULLET_TIPS: tuple[str, ...] = (
    "Start each bullet with an action verb and end with impact metrics",
    "Group similar accomplishments to reduce repetition",
    "Limit each bullet to 1-2 lines for better ATS parsing",
)
JUNIOR_BULLET_TIP = "Highlight academic projects or internships to demonstrate practical experience"

SUMMARY_TIPS: tuple[str, ...] = (
    "Align your summary with the target role and highlight top skills within 3 sentences",
    "Mention years of experience and industry domain to give quick context",
    "Call out standout achievements using quantifiable impact",
)
PROJECTS_SUMMARY_TIP = "Introduce a projects section to showcase portfolio work that supports the target role"

FORMATTING_TIPS: tuple[str, ...] = (
    "Use a single column layout with consistent heading hierarchy",
    "Align bullet points and dates for easy scanning",
    "Ensure font size is at least 10pt and avoid text boxes or graphics",
)


def keyword_recommendation(keyword: str) -> str:
    return f'Add quantified achievement statements that naturally include "{keyword}"'


def projected_score(score: int, missing_count: int) -> int:
    """Score the report could reach if the suggestions are applied; not a guarantee."""
    raise_by = max(
        int(get_scoring_value("optimization.min_raise", 6)),
        round_half_up(missing_count * float(get_scoring_value("optimization.raise_per_missing_keyword", 0.8))),
    )
    return min(int(get_scoring_value("score.max", 100)), score + raise_by)


def build_optimization_plan(
    stats: CvStats,
    report: AtsReport,
    emphasize_sections: Iterable[str] | None = None,
    custom_keywords: Iterable[str] | None = None,
    *,
    updated_at: datetime | None = None,
) -> OptimizationResult:
    """Turn a report into editing suggestions.

    Custom keywords are part of the request shape but only shape the catalogue
    at analysis time; recommendations come solely from the missing keywords.
    """
    focus_sections = set(emphasize_sections or ())
    limit = int(get_scoring_value("limits.keyword_recommendations", 10))
    missing = tuple(report.missing_keywords[:limit])

    bullet_suggestions = list(BULLET_TIPS)
    if stats.experience_years < get_scoring_value("optimization.junior_experience_years", 2):
        bullet_suggestions.append(JUNIOR_BULLET_TIP)

    summary_suggestions = list(SUMMARY_TIPS)
    if "Projects" in focus_sections and not stats.has_section("Projects"):
        summary_suggestions.append(PROJECTS_SUMMARY_TIP)

    return OptimizationResult(
        summary_suggestions=tuple(summary_suggestions),
        bullet_suggestions=tuple(bullet_suggestions),
        keyword_recommendations=tuple(keyword_recommendation(keyword) for keyword in missing),
        formatting_tips=FORMATTING_TIPS,
        raised_score=projected_score(report.score, len(missing)),
        updated_at=updated_at or datetime.now(timezone.utc),
    )
