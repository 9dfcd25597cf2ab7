"""Match rules for skills, role and company.

All comparisons are case-insensitive substring tests in either direction,
so "react" matches "React.js" and "Google" matches "google india".
"""

from collections.abc import Sequence
from typing import NamedTuple

from mentormatch.core.config import DEFAULT_ROLE_GROUPS


class SkillOverlap(NamedTuple):
    count: int
    matches: list[str]


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def skill_overlap(student_skills: Sequence[str], candidate_skills: Sequence[str]) -> SkillOverlap:
    """Find the candidate skills that match any student skill.

    Each student skill takes the first candidate skill that overlaps it
    (first match wins, not best match). Matches keep the candidate's
    casing and are deduplicated in first-seen order.
    """
    lowered = [(s, s.strip().lower()) for s in candidate_skills]
    matches: list[str] = []
    for wanted in student_skills:
        for original, skill in lowered:
            if skill and _overlaps(skill, wanted):
                if original not in matches:
                    matches.append(original)
                break
    return SkillOverlap(count=len(matches), matches=matches)


def role_matches(
    target_role: str,
    candidate_role: str,
    role_groups: Sequence[Sequence[str]] | None = None,
) -> bool:
    """Direct substring match first, then same-group membership."""
    target = target_role.strip().lower()
    role = candidate_role.strip().lower()
    if not target or not role:
        return False

    if _overlaps(target, role):
        return True

    groups = DEFAULT_ROLE_GROUPS if role_groups is None else role_groups
    for group in groups:
        target_in_group = any(token.lower() in target for token in group if token)
        role_in_group = any(token.lower() in role for token in group if token)
        if target_in_group and role_in_group:
            return True

    return False


def company_matches(target_companies: Sequence[str], candidate_company: str) -> bool:
    """No alias table: "meta" does not match "Facebook"."""
    company = candidate_company.strip().lower()
    if not company:
        return False
    return any(_overlaps(company, target) for target in target_companies if target)
