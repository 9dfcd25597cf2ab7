"""Mentor directory loader.

The directory is a YAML file with a top-level ``mentors`` list::

    mentors:
      - id: 1
        name: Priya Sharma
        title: Software Engineer
        company: Google
        years_of_experience: 5
        skills: [JavaScript, React, Python]
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from mentormatch.core.schemas import MentorCandidate

logger = logging.getLogger(__name__)


class MentorDirectory(BaseModel):
    """Validated contents of a mentor directory file."""

    mentors: list[MentorCandidate] = Field(default_factory=list)

    @field_validator("mentors")
    @classmethod
    def unique_ids(cls, v: list[MentorCandidate]) -> list[MentorCandidate]:
        seen: set[str] = set()
        for mentor in v:
            key = str(mentor.id)
            if key in seen:
                msg = f"duplicate mentor id: {mentor.id}"
                raise ValueError(msg)
            seen.add(key)
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MentorDirectory":
        """Load and validate a directory file."""
        path = Path(path)
        if not path.exists():
            msg = f"Mentor directory not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)


def load_mentors(path: str | Path) -> list[MentorCandidate]:
    """Return every mentor in the directory file, in file order."""
    directory = MentorDirectory.from_yaml(path)
    logger.info("Loaded %d mentors from %s", len(directory.mentors), path)
    return directory.mentors
