"""Core data models for the résumé matching engine."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SuggestionKind = Literal["missing_keyword", "format_issue", "content_improvement", "strength"]
Severity = Literal["high", "medium", "low"]
InteractionType = Literal["view", "click", "apply", "save"]


class JobDescriptor(BaseModel):
    """Job context used to decide which keywords are relevant.

    ``requirements`` is deliberately loose: it may be a list of phrases, a
    mapping or object exposing an ``items`` list, or anything else (ignored).
    """

    model_config = ConfigDict(frozen=True)

    category: str | None = None
    requirements: Any = None


class Suggestion(BaseModel):
    """A single improvement hint shown to the candidate."""

    model_config = ConfigDict(frozen=True)

    kind: SuggestionKind
    message: str = Field(min_length=1)
    severity: Severity
    section: str | None = None


class SectionFlags(BaseModel):
    """Boolean detections of résumé sections and auxiliary signals."""

    model_config = ConfigDict(frozen=True)

    education: bool = False
    experience: bool = False
    skills: bool = False
    contact: bool = False
    has_years: bool = False
    has_quantified_achievements: bool = False

    @property
    def core_sections_found(self) -> int:
        return sum((self.education, self.experience, self.skills, self.contact))


class AnalysisResult(BaseModel):
    """Outcome of analysing one résumé against one job.

    Frozen: built once per call and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    match_percentage: int = Field(ge=0, le=100, serialization_alias="matchPercentage")
    keyword_matches: list[str] = Field(
        default_factory=list, serialization_alias="keywordMatches"
    )
    missing_keywords: list[str] = Field(
        default_factory=list, max_length=10, serialization_alias="missingKeywords"
    )
    suggestions: list[Suggestion] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)


class StoredAnalysis(BaseModel):
    """An AnalysisResult persisted for a (user, job) pair."""

    id: int
    user_id: str
    job_id: int
    result: AnalysisResult
    created_at: datetime


class JobListing(BaseModel):
    """A job offer as consumed by the recommender."""

    id: str
    title: str
    company: str = ""
    logo: str = ""
    location: str = ""
    salary: str = "No especificado"
    type: str = "Full-time"
    requirements: list[str] = Field(default_factory=list)
    posted: str = "Recently"
    category: str = ""
    score: int = 0
    is_featured: bool = False
    is_remote: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v: Any) -> str:
        return str(v)
