"""Human-readable match explanations."""

from collections.abc import Sequence

GENERAL_RELEVANCE = "Matched based on general profile relevance"
STRONG_MATCH = "Strong match across skills, role, and company"


def explain_match(
    role_matched: bool,
    company_matched: bool,
    skill_matches: Sequence[str],
    years_of_experience: int | None = None,
    experience_threshold: int = 5,
) -> str:
    """Summarise why a mentor matched in one sentence.

    Factors are listed in priority order: company, role, skills. Mentors at
    or above the experience threshold get an experience clause appended.
    """
    factors: list[str] = []
    if company_matched:
        factors.append("target company")
    if role_matched:
        factors.append("role alignment")
    if skill_matches:
        factors.append("skill overlap")

    if not factors:
        sentence = GENERAL_RELEVANCE
    elif len(factors) == 1:
        sentence = f"Matched due to {factors[0]}"
    elif len(factors) == 2:
        sentence = f"Matched based on {factors[0]} and {factors[1]}"
    else:
        sentence = STRONG_MATCH

    years = years_of_experience or 0
    if years >= experience_threshold:
        sentence += f", with {years}+ years of experience"
    return sentence


def match_reasons(
    skill_matches: Sequence[str],
    role_matched: bool,
    company_matched: bool,
    position: str = "",
    company: str = "",
    years_of_experience: int | None = None,
    experience_threshold: int = 5,
) -> list[str]:
    """Detailed reasons, one per matching factor."""
    reasons: list[str] = []
    if skill_matches:
        count = len(skill_matches)
        plural = "s" if count > 1 else ""
        reasons.append(f"{count} common skill{plural}: {', '.join(skill_matches)}")
    if role_matched:
        reasons.append(f"Same target role: {position}")
    if company_matched:
        reasons.append(f"Works at target company: {company}")
    years = years_of_experience or 0
    if years >= experience_threshold:
        reasons.append(f"{years}+ years of experience")
    return reasons
