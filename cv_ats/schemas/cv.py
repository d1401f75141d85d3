from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CvModel(BaseModel):
    """Immutable record serialized with camelCase keys for the document store."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ContactDetails(CvModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None

    def completeness(self) -> int:
        """Count of the fields that contribute to the contact score."""
        return sum(1 for value in (self.email, self.phone, self.linkedin, self.location) if value)


class SectionCoverage(CvModel):
    section: str
    present: bool
    weight: float


class KeywordMatch(CvModel):
    keyword: str
    found: bool
    weight: int = Field(ge=1, le=2)


class CvStats(CvModel):
    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=1)
    readability: int = Field(ge=0, le=100)
    contact: ContactDetails = Field(default_factory=ContactDetails)
    experience_years: int = Field(ge=0, le=40)
    section_coverage: tuple[SectionCoverage, ...] = ()
    keyword_matches: tuple[KeywordMatch, ...] = ()

    def has_section(self, section: str) -> bool:
        return any(item.section == section and item.present for item in self.section_coverage)


class AtsReport(CvModel):
    score: int = Field(ge=30, le=100)
    keywords_matched: tuple[KeywordMatch, ...] = ()
    missing_keywords: tuple[str, ...] = Field(default=(), max_length=12)
    recommended_actions: tuple[str, ...] = Field(default=(), max_length=4)
    section_recommendations: tuple[SectionCoverage, ...] = ()
    readability: int = Field(ge=0, le=100)
    evaluated_at: datetime


class OptimizationResult(CvModel):
    summary_suggestions: tuple[str, ...] = ()
    bullet_suggestions: tuple[str, ...] = ()
    keyword_recommendations: tuple[str, ...] = Field(default=(), max_length=10)
    formatting_tips: tuple[str, ...] = ()
    raised_score: int | None = Field(default=None, le=100)
    updated_at: datetime


class KeywordContext(CvModel):
    job_target: str | None = None
    job_description: str | None = None
    custom_keywords: tuple[str, ...] | None = None


class ExperienceEntry(CvModel):
    role: str
    company: str
    duration: str
    achievements: tuple[str, ...] = ()


class EducationEntry(CvModel):
    school: str
    credential: str
    year: str


class ProjectEntry(CvModel):
    title: str
    description: str
    impact: str | None = None


class CvGenerationPayload(CvModel):
    full_name: str
    target_role: str
    summary: str
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
    certifications: tuple[str, ...] | None = None
    projects: tuple[ProjectEntry, ...] | None = None


class CvDocument(CvModel):
    id: str
    title: str
    file_name: str
    file_size: int = Field(ge=0)
    mime_type: str = "application/octet-stream"
    uploaded_at: datetime
    text_content: str
    stats: CvStats
    job_target: str | None = None
    job_description: str | None = None
    analysis: AtsReport | None = None
    optimization: OptimizationResult | None = None
    generated: bool = False
