from .cv import (
    AtsReport,
    ContactDetails,
    CvDocument,
    CvGenerationPayload,
    CvStats,
    EducationEntry,
    ExperienceEntry,
    KeywordContext,
    KeywordMatch,
    OptimizationResult,
    ProjectEntry,
    SectionCoverage,
)

__all__ = [
    "ContactDetails",
    "SectionCoverage",
    "KeywordMatch",
    "CvStats",
    "AtsReport",
    "OptimizationResult",
    "KeywordContext",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "CvGenerationPayload",
    "CvDocument",
]
