"""Filter chain applied to mentor candidates before scoring.

The default chain only removes mentors explicitly marked unavailable;
callers can pass extra filters (e.g. a company allow-list) to the ranker.
"""

import logging
from collections.abc import Callable

from mentormatch.core.schemas import MentorCandidate

logger = logging.getLogger(__name__)

# A filter is a callable that takes candidates and returns a subset.
Filter = Callable[[list[MentorCandidate]], list[MentorCandidate]]


class AvailabilityFilter:
    """Remove candidates whose availability is explicitly False.

    Absent (None) availability counts as available.
    """

    def __call__(self, candidates: list[MentorCandidate]) -> list[MentorCandidate]:
        result = [c for c in candidates if c.is_available]
        excluded = len(candidates) - len(result)
        if excluded:
            logger.debug("AvailabilityFilter: removed %d unavailable mentors", excluded)
        return result


def default_filters() -> list[Filter]:
    return [AvailabilityFilter()]


def run_filter_chain(
    candidates: list[MentorCandidate],
    filters: list[Filter],
) -> list[MentorCandidate]:
    """Apply filters in order, returning the surviving candidates."""
    result = candidates
    for f in filters:
        result = f(result)
    return result
