from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from cv_ats.core.scoring_config import get_scoring_value
from cv_ats.features import round_half_up
from cv_ats.schemas import AtsReport, CvStats

READABILITY_ACTION = "Balance sentence length to improve readability"
CONTACT_ACTION = "Include complete contact details with LinkedIn and location"
KEYWORD_ACTION = "Incorporate missing target keywords into relevant achievements"
PROJECTS_ACTION = "Add a projects or accomplishments section to highlight impact"


@dataclass(frozen=True)
class ScoreBreakdown:
    keyword_score: float
    section_score: float
    readability_score: int
    contact_score: int
    raw_score: int
    score: int


def _keyword_score(stats: CvStats) -> float:
    total = sum(match.weight for match in stats.keyword_matches) or 1
    matched = sum(match.weight for match in stats.keyword_matches if match.found)
    return matched / total * float(get_scoring_value("weights.keywords", 60))


def _section_score(stats: CvStats) -> float:
    total = sum(section.weight for section in stats.section_coverage) or 1
    present = sum(section.weight for section in stats.section_coverage if section.present)
    return present / total * float(get_scoring_value("weights.sections", 25))


def _readability_score(readability: int) -> int:
    if readability >= get_scoring_value("readability.high_threshold", 60):
        return int(get_scoring_value("readability.high_points", 10))
    if readability >= get_scoring_value("readability.mid_threshold", 45):
        return int(get_scoring_value("readability.mid_points", 7))
    return int(get_scoring_value("readability.low_points", 4))


def _contact_score(stats: CvStats) -> int:
    points = int(get_scoring_value("contact.points_per_field", 2))
    return min(stats.contact.completeness() * points, int(get_scoring_value("contact.max_points", 12)))


def score_breakdown(stats: CvStats) -> ScoreBreakdown:
    """Each weighted component of the ATS score, before and after clamping.

    The clamp floor sits below the smallest reachable raw score; it is kept so
    new scores stay comparable with stored reports.
    """
    keyword_score = _keyword_score(stats)
    section_score = _section_score(stats)
    readability_score = _readability_score(stats.readability)
    contact_score = _contact_score(stats)
    raw_score = round_half_up(
        float(get_scoring_value("score.base", 35))
        + keyword_score
        + section_score
        + readability_score
        + contact_score
    )
    score = max(
        int(get_scoring_value("score.min", 30)),
        min(int(get_scoring_value("score.max", 100)), raw_score),
    )
    return ScoreBreakdown(
        keyword_score=keyword_score,
        section_score=section_score,
        readability_score=readability_score,
        contact_score=contact_score,
        raw_score=raw_score,
        score=score,
    )


def missing_keywords(stats: CvStats) -> tuple[str, ...]:
    limit = int(get_scoring_value("limits.missing_keywords", 12))
    unmatched = [match.keyword for match in stats.keyword_matches if not match.found]
    return tuple(unmatched[:limit])


def recommended_actions(stats: CvStats, missing: tuple[str, ...]) -> tuple[str, ...]:
    actions: list[str] = []
    if stats.readability < get_scoring_value("actions.readability_below", 55):
        actions.append(READABILITY_ACTION)
    if stats.contact.completeness() < get_scoring_value("actions.min_contact_fields", 3):
        actions.append(CONTACT_ACTION)
    if missing:
        actions.append(KEYWORD_ACTION)
    if not stats.has_section("Projects"):
        actions.append(PROJECTS_ACTION)
    return tuple(actions)


def compute_ats_score(stats: CvStats, *, evaluated_at: datetime | None = None) -> AtsReport:
    breakdown = score_breakdown(stats)
    missing = missing_keywords(stats)
    return AtsReport(
        score=breakdown.score,
        keywords_matched=stats.keyword_matches,
        missing_keywords=missing,
        recommended_actions=recommended_actions(stats, missing),
        section_recommendations=stats.section_coverage,
        readability=stats.readability,
        evaluated_at=evaluated_at or datetime.now(timezone.utc),
    )
