"""Weighted-overlap scoring for mentor candidates.

raw_score = skill_weight * skill matches + role_weight (if role matched)
            + company_weight (if company matched)

Defaults are x2 / x3 / x5. The display percentage uses the fixed linear scale
against max_raw_score (default 18) and is capped at 100.
"""

import logging
import math
from collections.abc import Sequence

from mentormatch.core.config import DEFAULT_ROLE_GROUPS, QualityThresholds, ScoringConfig
from mentormatch.core.schemas import MatchResult, MentorCandidate, StudentCriteria
from mentormatch.pipeline.explainer import explain_match, match_reasons
from mentormatch.pipeline.rules import company_matches, role_matches, skill_overlap

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def fixed_percentage(raw_score: int, max_raw_score: int = 18) -> int:
    """Map a raw score onto 0-100 using a fixed maximum."""
    return min(round_half_up(raw_score / max_raw_score * 100), 100)


def score_mentor(
    criteria: StudentCriteria,
    candidate: MentorCandidate,
    config: ScoringConfig | None = None,
    role_groups: Sequence[Sequence[str]] | None = None,
) -> MatchResult:
    """Score a single mentor against a student's criteria.

    Args:
        criteria: Normalized student filters.
        candidate: The mentor to score.
        config: Weights and thresholds; defaults to ScoringConfig().
        role_groups: Related-role table; defaults to DEFAULT_ROLE_GROUPS.

    Returns:
        MatchResult with raw score, fixed-scale display percentage,
        explanation and detailed reasons.
    """
    config = config or ScoringConfig()
    groups = DEFAULT_ROLE_GROUPS if role_groups is None else role_groups

    overlap = skill_overlap(criteria.skills, candidate.skills)
    skill_score = overlap.count * config.skill_weight

    role_matched = role_matches(criteria.target_role, candidate.position, groups)
    role_score = config.role_weight if role_matched else 0

    company_matched = company_matches(criteria.target_companies, candidate.company or "")
    company_score = config.company_weight if company_matched else 0

    raw_score = skill_score + role_score + company_score

    explanation = explain_match(
        role_matched,
        company_matched,
        overlap.matches,
        candidate.years_of_experience,
        config.experience_threshold,
    )
    reasons = match_reasons(
        overlap.matches,
        role_matched,
        company_matched,
        position=candidate.position,
        company=candidate.company or "",
        years_of_experience=candidate.years_of_experience,
        experience_threshold=config.experience_threshold,
    )

    logger.debug(
        "Scored mentor %s: skills=%d role=%s company=%s raw=%d",
        candidate.id, overlap.count, role_matched, company_matched, raw_score,
    )

    return MatchResult(
        candidate=candidate,
        raw_score=raw_score,
        display_percentage=fixed_percentage(raw_score, config.max_raw_score),
        skill_matches=overlap.matches,
        role_matched=role_matched,
        company_matched=company_matched,
        explanation=explanation,
        reasons=reasons,
    )


def match_quality(percentage: int, thresholds: QualityThresholds | None = None) -> str:
    """Label a display percentage as strong, good or fair."""
    thresholds = thresholds or QualityThresholds()
    if percentage >= thresholds.strong:
        return "strong"
    if percentage >= thresholds.good:
        return "good"
    return "fair"
