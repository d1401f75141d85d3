from __future__ import annotations

import re
from dataclasses import dataclass

from cv_ats.features import looks_like_name
from cv_ats.normalize import non_empty_lines, normalize_text
from cv_ats.schemas import CvGenerationPayload, CvStats, KeywordContext

from .stats import build_stats

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR = " • "


@dataclass(frozen=True)
class GeneratedCv:
    draft: str
    stats: CvStats


def file_stem(file_name: str) -> str:
    return re.sub(r"[_-]", " ", _EXTENSION_RE.sub("", file_name))


def derive_title(file_name: str, text: str) -> str:
    stem = file_stem(file_name)
    probable_name = next((line for line in non_empty_lines(text) if looks_like_name(line)), None)
    if probable_name:
        return f"{probable_name} - {stem}"
    return f"{stem} CV"


def build_cv_draft(payload: CvGenerationPayload) -> str:
    """Render a generation payload as a plain-text CV with upper-case headings."""
    lines: list[str] = [
        payload.full_name,
        payload.target_role,
        "",
        "SUMMARY",
        payload.summary,
        "",
        "CORE SKILLS",
        _SEPARATOR.join(payload.skills),
        "",
    ]

    if payload.experience:
        lines.append("PROFESSIONAL EXPERIENCE")
        for job in payload.experience:
            lines.append(_SEPARATOR.join((job.role, job.company, job.duration)))
            lines.extend(f"- {achievement}" for achievement in job.achievements)
            lines.append("")

    if payload.projects:
        lines.append("PROJECTS")
        for project in payload.projects:
            heading = project.title
            if project.impact:
                heading = f"{heading}{_SEPARATOR}{project.impact}"
            lines.append(heading)
            lines.append(f"- {project.description}")
            lines.append("")

    if payload.certifications:
        lines.append("CERTIFICATIONS")
        lines.extend(f"- {certification}" for certification in payload.certifications)
        lines.append("")

    if payload.education:
        lines.append("EDUCATION")
        lines.extend(
            _SEPARATOR.join((entry.credential, entry.school, entry.year)) for entry in payload.education
        )

    return "\n".join(lines).strip()


def generate_cv(payload: CvGenerationPayload) -> GeneratedCv:
    draft = build_cv_draft(payload)
    context = KeywordContext(job_target=payload.target_role, custom_keywords=payload.skills)
    # Stats come from the normalized draft, the same text any re-analysis sees.
    return GeneratedCv(draft=draft, stats=build_stats(normalize_text(draft), context))
