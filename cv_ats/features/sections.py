from __future__ import annotations

import re
from dataclasses import dataclass

from cv_ats.schemas import SectionCoverage


@dataclass(frozen=True)
class SectionMarker:
    label: str
    aliases: re.Pattern[str]
    weight: float


SECTION_MARKERS: tuple[SectionMarker, ...] = (
    SectionMarker("Summary", re.compile(r"summary|profile|overview|objective", re.IGNORECASE), 0.15),
    SectionMarker(
        "Experience",
        re.compile(r"experience|employment|work history|professional background", re.IGNORECASE),
        0.30,
    ),
    SectionMarker("Education", re.compile(r"education|academics|qualifications", re.IGNORECASE), 0.18),
    SectionMarker("Skills", re.compile(r"skills|competencies|capabilities", re.IGNORECASE), 0.18),
    SectionMarker("Projects", re.compile(r"projects|portfolio|case studies|assignments", re.IGNORECASE), 0.09),
    SectionMarker(
        "Certifications",
        re.compile(r"certifications|licenses|accreditations", re.IGNORECASE),
        0.10,
    ),
)

SECTION_LABELS: tuple[str, ...] = tuple(marker.label for marker in SECTION_MARKERS)


def compute_section_coverage(text: str) -> tuple[SectionCoverage, ...]:
    return tuple(
        SectionCoverage(
            section=marker.label,
            present=bool(marker.aliases.search(text)),
            weight=marker.weight,
        )
        for marker in SECTION_MARKERS
    )
