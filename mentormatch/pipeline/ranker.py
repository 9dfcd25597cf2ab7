"""Rank mentors for a student: filter, score, sort, rescale.

Sort order: raw score desc, then years of experience desc, then input order.
With the "banded" display policy the percentages are spread by rank after
sorting (legacy display behaviour); the order itself never changes.
"""

import logging
from collections.abc import Sequence

from mentormatch.core.config import DEFAULT_ROLE_GROUPS, ScoringConfig
from mentormatch.core.schemas import MatchResult, MentorCandidate, StudentCriteria
from mentormatch.pipeline.matcher import Filter, default_filters, run_filter_chain
from mentormatch.pipeline.scorer import round_half_up, score_mentor

logger = logging.getLogger(__name__)

BAND_MIN = 15
BAND_MAX = 85
TOP_BAND_MIN = 70
MID_TIER_CAP = 65
LOW_TIER_CAP = 30
RANK_BONUS = 0.15


def rank_mentors(
    criteria: StudentCriteria,
    candidates: Sequence[MentorCandidate],
    config: ScoringConfig | None = None,
    role_groups: Sequence[Sequence[str]] | None = None,
    limit: int | None = None,
    filters: list[Filter] | None = None,
) -> list[MatchResult]:
    """Score and rank every eligible mentor, best match first.

    Args:
        criteria: Normalized student filters.
        candidates: Full mentor list, already loaded.
        config: Weights, thresholds and display policy.
        role_groups: Related-role table; defaults to DEFAULT_ROLE_GROUPS.
        limit: Optional cap on the number of results returned.
        filters: Pre-scoring filter chain; defaults to default_filters().

    Returns:
        Ranked MatchResults with 1-based ``rank`` set.
    """
    config = config or ScoringConfig()
    groups = DEFAULT_ROLE_GROUPS if role_groups is None else role_groups
    chain = default_filters() if filters is None else filters

    eligible = run_filter_chain(list(candidates), chain)
    excluded = len(candidates) - len(eligible)
    if excluded:
        logger.info("Excluded %d of %d mentors before ranking", excluded, len(candidates))

    scored = [score_mentor(criteria, c, config, groups) for c in eligible]
    # list.sort is stable, so equal keys keep input order.
    scored.sort(key=lambda r: (-r.raw_score, -r.candidate.experience))

    if config.display_policy == "banded":
        percentages = banded_percentages([r.display_percentage for r in scored])
    else:
        percentages = [r.display_percentage for r in scored]

    ranked = [
        r.model_copy(update={"display_percentage": pct, "rank": i})
        for i, (r, pct) in enumerate(zip(scored, percentages), start=1)
    ]

    if limit is not None:
        ranked = ranked[:limit]

    logger.info("Ranked %d mentors (policy=%s)", len(ranked), config.display_policy)
    return ranked


def banded_percentages(percentages: list[int]) -> list[int]:
    """Spread sorted fixed-scale percentages into display bands.

    Relative to the batch maximum with a small rank bonus, mapped onto 15-85.
    The top result lands in 70-85, ranks 2-4 are capped at 65 and ranks 7
    onwards at 30. Not comparable across batches.
    """
    if not percentages:
        return []
    max_pct = max(percentages)
    if max_pct == 0:
        return list(percentages)

    total = len(percentages)
    spread = BAND_MAX - BAND_MIN
    banded: list[int] = []
    for index, pct in enumerate(percentages):
        relative = pct / max_pct
        rank_bonus = max(0.0, (total - index) / total) * RANK_BONUS
        value = BAND_MIN + (relative + rank_bonus) * spread

        if index == 0 and pct > 0:
            value = max(TOP_BAND_MIN, min(BAND_MAX, value))
        elif 1 <= index <= 3:
            value = min(value, MID_TIER_CAP)
        elif index > 5:
            value = min(value, LOW_TIER_CAP)

        value = max(BAND_MIN, min(BAND_MAX, value))
        banded.append(round_half_up(value))
    return banded
