"""Core data models for the mentor matching engine."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mentormatch.pipeline.normalizer import normalize_tokens, parse_list


def _as_tokens(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return parse_list(value)
    if isinstance(value, (list, tuple, set)):
        return normalize_tokens(str(v) for v in value)
    # Let pydantic report anything else as a validation error.
    return value


class StudentCriteria(BaseModel):
    """A student's search filters, normalized on construction.

    List fields accept either a comma-separated string as typed by the user
    or an already-split list.
    """

    model_config = ConfigDict(frozen=True)

    skills: list[str] = Field(default_factory=list)
    target_role: str = ""
    target_companies: list[str] = Field(default_factory=list)

    @field_validator("skills", "target_companies", mode="before")
    @classmethod
    def normalize_list(cls, v: Any) -> Any:
        return _as_tokens(v)

    @field_validator("target_role", mode="before")
    @classmethod
    def normalize_role(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip().lower()

    @classmethod
    def from_raw(
        cls,
        skills: str | None = "",
        target_role: str | None = "",
        target_companies: str | None = "",
    ) -> "StudentCriteria":
        """Build criteria from three raw form strings."""
        return cls(skills=skills, target_role=target_role, target_companies=target_companies)


class MentorCandidate(BaseModel):
    """Read-only view of a mentor record from the directory.

    Frozen: scores live on MatchResult, never on the candidate.
    """

    model_config = ConfigDict(frozen=True)

    id: str | int
    name: str = ""
    skills: list[str] = Field(default_factory=list)
    title: str | None = None
    role: str | None = None
    company: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)
    availability: bool | None = None
    bio: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, (list, tuple)):
            # Numeric skills ("8051") are kept as text; null entries are dropped.
            return [str(s) for s in v if s is not None]
        return v

    @property
    def position(self) -> str:
        """Effective job title: title, then role, else empty."""
        return self.title or self.role or ""

    @property
    def experience(self) -> int:
        return self.years_of_experience or 0

    @property
    def is_available(self) -> bool:
        # Only an explicit False hides a mentor.
        return self.availability is not False


class MatchResult(BaseModel):
    """Score and explanation for one (criteria, candidate) pair."""

    model_config = ConfigDict(frozen=True)

    candidate: MentorCandidate
    raw_score: int = Field(ge=0)
    display_percentage: int = Field(ge=0, le=100)
    skill_matches: list[str] = Field(default_factory=list)
    role_matched: bool = False
    company_matched: bool = False
    explanation: str = ""
    reasons: list[str] = Field(default_factory=list)
    rank: int = Field(default=0, ge=0)
