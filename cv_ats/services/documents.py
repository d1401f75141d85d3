from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Iterable

from cv_ats.normalize import normalize_text
from cv_ats.schemas import CvDocument, CvGenerationPayload, KeywordContext

from .engine import analyze, optimize
from .generation import derive_title, generate_cv
from .scoring import compute_ats_score
from .stats import build_stats

logger = logging.getLogger(__name__)


def _new_document_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_document(
    file_name: str,
    text: str,
    *,
    file_size: int | None = None,
    mime_type: str | None = None,
    job_target: str | None = None,
    job_description: str | None = None,
    custom_keywords: Iterable[str] | None = None,
    document_id: str | None = None,
    uploaded_at: datetime | None = None,
) -> CvDocument:
    """Build the record for a freshly uploaded CV.

    Persisting it, and checking upload quota beforehand, is left to the
    document store.
    """
    text_content = normalize_text(text)
    context = KeywordContext(
        job_target=job_target,
        job_description=job_description,
        custom_keywords=tuple(custom_keywords) if custom_keywords is not None else None,
    )
    return CvDocument(
        id=document_id or _new_document_id(),
        title=derive_title(file_name, text_content),
        file_name=file_name,
        file_size=file_size if file_size is not None else len(text.encode("utf-8", errors="replace")),
        mime_type=mime_type or "application/octet-stream",
        uploaded_at=uploaded_at or _now(),
        text_content=text_content,
        stats=build_stats(text_content, context),
        job_target=job_target,
        job_description=job_description,
    )


def reanalyze_document(
    document: CvDocument,
    job_target: str | None = None,
    job_description: str | None = None,
    custom_keywords: Iterable[str] | None = None,
    *,
    evaluated_at: datetime | None = None,
) -> CvDocument:
    """Return a copy of the record with stats and analysis replaced.

    Job target and description fall back to the values stored on the record.
    """
    job_target = job_target if job_target is not None else document.job_target
    job_description = job_description if job_description is not None else document.job_description
    outcome = analyze(
        document.text_content,
        job_target,
        job_description,
        custom_keywords,
        evaluated_at=evaluated_at,
    )
    logger.info("cv_document_analyzed id=%s score=%s", document.id, outcome.report.score)
    return document.model_copy(
        update={
            "stats": outcome.stats,
            "analysis": outcome.report,
            "job_target": job_target,
            "job_description": job_description,
        }
    )


def optimize_document(
    document: CvDocument,
    emphasize_sections: Iterable[str] | None = None,
    custom_keywords: Iterable[str] | None = None,
    *,
    updated_at: datetime | None = None,
) -> CvDocument:
    # Records that were never analyzed are scored from their upload stats.
    analysis = document.analysis or compute_ats_score(document.stats)
    optimization = optimize(
        document.stats,
        analysis,
        emphasize_sections,
        custom_keywords,
        updated_at=updated_at,
    )
    logger.info("cv_document_optimized id=%s raised_score=%s", document.id, optimization.raised_score)
    return document.model_copy(update={"optimization": optimization})


def generated_document(
    payload: CvGenerationPayload,
    *,
    document_id: str | None = None,
    uploaded_at: datetime | None = None,
) -> tuple[CvDocument, str]:
    """Render a CV from structured input and wrap it in a new record."""
    generated = generate_cv(payload)
    uploaded_at = uploaded_at or _now()
    slug = re.sub(r"\s+", "_", payload.full_name).lower()
    document = CvDocument(
        id=document_id or _new_document_id(),
        title=f"{payload.full_name} - {payload.target_role}",
        file_name=f"{slug}_{int(uploaded_at.timestamp() * 1000)}.txt",
        file_size=len(generated.draft.encode("utf-8")),
        mime_type="text/plain",
        uploaded_at=uploaded_at,
        text_content=generated.draft,
        stats=generated.stats,
        job_target=payload.target_role,
        generated=True,
    )
    return document, generated.draft
