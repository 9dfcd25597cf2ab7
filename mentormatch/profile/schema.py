"""StudentProfile model for config/profile.yaml."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from mentormatch.core.schemas import StudentCriteria


class StudentProfile(BaseModel):
    """What a student is looking for in a mentor.

    ``skills`` and ``target_companies`` may be written as YAML lists or as a
    single comma-separated string; entries keep the casing the student typed.
    """

    name: str = ""
    skills: list[str] = Field(default_factory=list)
    target_role: str = ""
    target_companies: list[str] = Field(default_factory=list)

    @field_validator("skills", "target_companies", mode="before")
    @classmethod
    def split_comma_string(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("target_role", mode="before")
    @classmethod
    def strip_role(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    def to_criteria(self) -> StudentCriteria:
        """Normalized search criteria for the ranker."""
        return StudentCriteria(
            skills=self.skills,
            target_role=self.target_role,
            target_companies=self.target_companies,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StudentProfile":
        """Load profile from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Profile file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write profile to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump()
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))
