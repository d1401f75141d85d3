from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from cv_ats.core.config import settings
from cv_ats.normalize import normalize_text
from cv_ats.schemas import AtsReport, CvStats, KeywordContext, OptimizationResult

from .optimizer import build_optimization_plan
from .scoring import compute_ats_score
from .stats import build_stats

logger = logging.getLogger(__name__)


class AnalysisOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    stats: CvStats
    report: AtsReport


def _keyword_context(
    job_target: str | None,
    job_description: str | None,
    custom_keywords: Iterable[str] | None,
) -> KeywordContext:
    return KeywordContext(
        job_target=job_target,
        job_description=job_description,
        custom_keywords=tuple(custom_keywords) if custom_keywords is not None else None,
    )


def analyze(
    text: str,
    job_target: str | None = None,
    job_description: str | None = None,
    custom_keywords: Iterable[str] | None = None,
    *,
    evaluated_at: datetime | None = None,
) -> AnalysisOutcome:
    """Score raw CV text against the default and job-specific keyword catalogue.

    The text is normalized first, so any decoded upload is accepted. The
    returned stats are the record the caller persists next to the report.
    """
    normalized = normalize_text(text)
    stats = build_stats(normalized, _keyword_context(job_target, job_description, custom_keywords))
    report = compute_ats_score(stats, evaluated_at=evaluated_at)
    if settings.analysis_log_enabled:
        logger.debug(
            "cv_analysis_complete score=%s words=%s keywords=%s missing=%s",
            report.score,
            stats.word_count,
            len(stats.keyword_matches),
            len(report.missing_keywords),
        )
    return AnalysisOutcome(stats=stats, report=report)


def optimize(
    stats: CvStats,
    report: AtsReport,
    emphasize_sections: Iterable[str] | None = None,
    custom_keywords: Iterable[str] | None = None,
    *,
    updated_at: datetime | None = None,
) -> OptimizationResult:
    result = build_optimization_plan(
        stats,
        report,
        emphasize_sections,
        custom_keywords,
        updated_at=updated_at,
    )
    if settings.analysis_log_enabled:
        logger.debug(
            "cv_optimization_complete score=%s raised_score=%s keyword_recommendations=%s",
            report.score,
            result.raised_score,
            len(result.keyword_recommendations),
        )
    return result
