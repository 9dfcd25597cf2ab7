"""Configuration models and YAML loader for the mentor matching engine."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

DisplayPolicy = Literal["fixed", "banded"]

# Related positions that count as a role match even without a substring hit.
DEFAULT_ROLE_GROUPS: list[list[str]] = [
    ["software engineer", "sde", "developer", "full stack"],
    ["frontend", "ui", "react", "web developer"],
    ["backend", "server", "api"],
    ["data scientist", "machine learning", "ml engineer", "ai"],
    ["data analyst", "business analyst", "analytics"],
    ["product manager", "pm", "product owner"],
]


class QualityThresholds(BaseModel):
    """Display-percentage cut-offs for the strong/good/fair labels."""

    strong: int = Field(default=80, ge=0, le=100)
    good: int = Field(default=60, ge=0, le=100)

    @model_validator(mode="after")
    def strong_above_good(self) -> "QualityThresholds":
        if self.strong < self.good:
            msg = "quality.strong must be >= quality.good"
            raise ValueError(msg)
        return self


class ScoringConfig(BaseModel):
    """Weights and display policy for mentor scoring."""

    skill_weight: int = Field(default=2, ge=1)
    role_weight: int = Field(default=3, ge=1)
    company_weight: int = Field(default=5, ge=1)
    # 5 skills x 2 + role 3 + company 5
    max_raw_score: int = Field(default=18, ge=1)
    experience_threshold: int = Field(default=5, ge=1)
    display_policy: DisplayPolicy = "fixed"
    quality: QualityThresholds = Field(default_factory=QualityThresholds)


class DirectoryConfig(BaseModel):
    """Where the mentor directory file lives."""

    path: str = "config/mentors.yaml"


class ResultsConfig(BaseModel):
    """How many ranked mentors to show."""

    limit: int | None = Field(default=None, ge=1)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    results: ResultsConfig = Field(default_factory=ResultsConfig)
    role_groups: list[list[str]] = Field(
        default_factory=lambda: [list(g) for g in DEFAULT_ROLE_GROUPS],
    )

    @field_validator("role_groups")
    @classmethod
    def normalize_role_groups(cls, v: list[list[str]]) -> list[list[str]]:
        groups = []
        for group in v:
            tokens = [t.strip().lower() for t in group if t.strip()]
            if not tokens:
                msg = "role groups must contain at least one non-empty token"
                raise ValueError(msg)
            groups.append(tokens)
        return groups

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
