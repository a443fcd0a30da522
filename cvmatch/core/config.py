"""Configuration models and YAML loader for the résumé matching engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator


class AnalysisConfig(BaseModel):
    """Weights and thresholds for résumé scoring."""

    locale: str = "es"
    rules_path: str | None = None
    keyword_weight: float = Field(default=0.4, ge=0.0, le=1.0)
    section_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    auxiliary_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    min_words: int = Field(default=200, ge=0)
    max_words: int = Field(default=1000, ge=1)
    missing_keywords_limit: int = Field(default=10, ge=0, le=10)
    suggested_keywords_limit: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "AnalysisConfig":
        total = self.keyword_weight + self.section_weight + self.auxiliary_weight
        if abs(total - 1.0) > 1e-6:
            msg = (
                "keyword_weight + section_weight + auxiliary_weight must equal 1.0, "
                f"got {total:.2f}"
            )
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def word_range_ordered(self) -> "AnalysisConfig":
        if self.min_words >= self.max_words:
            msg = f"min_words ({self.min_words}) must be lower than max_words ({self.max_words})"
            raise ValueError(msg)
        return self


class RecommendationConfig(BaseModel):
    """Defaults for job recommendations."""

    limit: int = Field(default=6, ge=1)


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = "data/cvmatch.db"


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
