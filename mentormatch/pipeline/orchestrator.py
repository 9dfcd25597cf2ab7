"""Orchestrator: wires settings, student profile and mentor list into one run.

Data flow:
  1. Profile → normalized StudentCriteria
  2. Availability filter, counting excluded mentors
  3. Ranker (scorer → sort → optional banding → limit)
  4. Summary logging / JSON export
"""

import json
import logging
from collections.abc import Sequence

from mentormatch.core.config import Settings
from mentormatch.core.schemas import MatchResult, MentorCandidate, StudentCriteria
from mentormatch.pipeline.matcher import default_filters, run_filter_chain
from mentormatch.pipeline.ranker import rank_mentors
from mentormatch.pipeline.scorer import match_quality
from mentormatch.profile.schema import StudentProfile

logger = logging.getLogger(__name__)


class MatchRun:
    """Summary of a single ranking run."""

    def __init__(
        self,
        student_name: str,
        criteria: StudentCriteria,
        candidate_count: int,
        excluded_count: int,
        results: list[MatchResult],
    ) -> None:
        self.student_name = student_name
        self.criteria = criteria
        self.candidate_count = candidate_count
        self.excluded_count = excluded_count
        self.results = results


def run_match(
    settings: Settings,
    profile: StudentProfile,
    candidates: Sequence[MentorCandidate],
    limit: int | None = None,
) -> MatchRun:
    """Rank every candidate for the given student profile."""
    criteria = profile.to_criteria()
    logger.info(
        "Matching %d mentors: %d skills, role=%r, %d target companies",
        len(candidates), len(criteria.skills), criteria.target_role,
        len(criteria.target_companies),
    )

    eligible = run_filter_chain(list(candidates), default_filters())
    effective_limit = limit if limit is not None else settings.results.limit
    results = rank_mentors(
        criteria,
        eligible,
        settings.scoring,
        role_groups=settings.role_groups,
        limit=effective_limit,
        filters=[],
    )

    return MatchRun(
        student_name=profile.name,
        criteria=criteria,
        candidate_count=len(candidates),
        excluded_count=len(candidates) - len(eligible),
        results=results,
    )


def export_results_json(run: MatchRun, settings: Settings | None = None) -> str:
    """Export ranked results as a JSON string."""
    thresholds = (settings or Settings()).scoring.quality
    data = []
    for r in run.results:
        c = r.candidate
        data.append({
            "rank": r.rank,
            "id": c.id,
            "name": c.name,
            "position": c.position,
            "company": c.company or "",
            "years_of_experience": c.years_of_experience,
            "raw_score": r.raw_score,
            "display_percentage": r.display_percentage,
            "quality": match_quality(r.display_percentage, thresholds),
            "skill_matches": r.skill_matches,
            "role_matched": r.role_matched,
            "company_matched": r.company_matched,
            "explanation": r.explanation,
            "reasons": r.reasons,
        })
    return json.dumps(data, indent=2)
