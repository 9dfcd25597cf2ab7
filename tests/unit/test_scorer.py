"""Tests for weighted mentor scoring."""

from mentormatch.core.config import QualityThresholds, ScoringConfig
from mentormatch.core.schemas import MentorCandidate, StudentCriteria
from mentormatch.pipeline.scorer import (
    fixed_percentage,
    match_quality,
    round_half_up,
    score_mentor,
)


def _candidate(
    *,
    mentor_id: str = "m1",
    skills: list[str] | None = None,
    title: str | None = "Software Engineer",
    role: str | None = None,
    company: str | None = "Google",
    years_of_experience: int | None = 5,
) -> MentorCandidate:
    return MentorCandidate(
        id=mentor_id,
        skills=["Java", "Python", "System Design"] if skills is None else skills,
        title=title,
        role=role,
        company=company,
        years_of_experience=years_of_experience,
    )


def _criteria(
    skills: str = "java, sql",
    role: str = "Software Engineer",
    companies: str = "google",
) -> StudentCriteria:
    return StudentCriteria.from_raw(skills, role, companies)


# ---------------------------------------------------------------------------
# Percentage helpers
# ---------------------------------------------------------------------------


class TestRoundHalfUp:
    def test_half_rounds_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(2.49) == 2


class TestFixedPercentage:
    def test_zero(self) -> None:
        assert fixed_percentage(0) == 0

    def test_max_is_100(self) -> None:
        assert fixed_percentage(18) == 100

    def test_capped_at_100(self) -> None:
        assert fixed_percentage(24) == 100

    def test_rounded(self) -> None:
        assert fixed_percentage(10) == 56
        assert fixed_percentage(9) == 50
        assert fixed_percentage(1) == 6

    def test_custom_max(self) -> None:
        assert fixed_percentage(5, max_raw_score=10) == 50

    def test_order_preserving(self) -> None:
        values = [fixed_percentage(raw) for raw in range(0, 25)]
        assert values == sorted(values)


# ---------------------------------------------------------------------------
# score_mentor
# ---------------------------------------------------------------------------


class TestScoreMentor:
    def test_full_match(self) -> None:
        result = score_mentor(_criteria(), _candidate())
        assert result.skill_matches == ["Java"]
        assert result.role_matched is True
        assert result.company_matched is True
        assert result.raw_score == 2 * 1 + 3 + 5
        assert result.display_percentage == 56
        assert result.explanation == (
            "Strong match across skills, role, and company, with 5+ years of experience"
        )

    def test_empty_criteria_scores_zero(self) -> None:
        result = score_mentor(StudentCriteria.from_raw("", "", ""), _candidate())
        assert result.raw_score == 0
        assert result.display_percentage == 0
        assert result.explanation.startswith("Matched based on general profile relevance")

    def test_empty_criteria_no_experience_clause(self) -> None:
        result = score_mentor(
            StudentCriteria.from_raw("", "", ""), _candidate(years_of_experience=2),
        )
        assert result.explanation == "Matched based on general profile relevance"

    def test_absent_candidate_fields(self) -> None:
        candidate = MentorCandidate(id="bare")
        result = score_mentor(_criteria(), candidate)
        assert result.raw_score == 0
        assert result.skill_matches == []
        assert result.role_matched is False
        assert result.company_matched is False

    def test_title_preferred_over_role(self) -> None:
        candidate = _candidate(title="Data Scientist", role="mentor", company=None)
        result = score_mentor(_criteria(role="data scientist", companies=""), candidate)
        assert result.role_matched is True

    def test_role_used_when_title_missing(self) -> None:
        candidate = _candidate(title=None, role="Software Engineer", company=None)
        result = score_mentor(_criteria(companies=""), candidate)
        assert result.role_matched is True

    def test_raw_score_invariant(self) -> None:
        result = score_mentor(
            _criteria(skills="java, python, design", companies="meta"),
            _candidate(),
        )
        expected = (
            2 * len(result.skill_matches)
            + (3 if result.role_matched else 0)
            + (5 if result.company_matched else 0)
        )
        assert result.raw_score == expected

    def test_raw_score_within_bounds(self) -> None:
        criteria = _criteria(skills="java, python, design, sql")
        result = score_mentor(criteria, _candidate())
        assert 0 <= result.raw_score <= 2 * len(criteria.skills) + 3 + 5

    def test_custom_weights(self) -> None:
        config = ScoringConfig(skill_weight=1, role_weight=1, company_weight=1)
        result = score_mentor(_criteria(), _candidate(), config)
        assert result.raw_score == 3

    def test_reasons(self) -> None:
        result = score_mentor(_criteria(), _candidate())
        assert result.reasons == [
            "1 common skill: Java",
            "Same target role: Software Engineer",
            "Works at target company: Google",
            "5+ years of experience",
        ]

    def test_deterministic(self) -> None:
        first = score_mentor(_criteria(), _candidate())
        second = score_mentor(_criteria(), _candidate())
        assert first == second

    def test_rank_unset_before_ranking(self) -> None:
        assert score_mentor(_criteria(), _candidate()).rank == 0


class TestMatchQuality:
    def test_default_bands(self) -> None:
        assert match_quality(80) == "strong"
        assert match_quality(79) == "good"
        assert match_quality(60) == "good"
        assert match_quality(59) == "fair"
        assert match_quality(0) == "fair"

    def test_custom_thresholds(self) -> None:
        thresholds = QualityThresholds(strong=90, good=50)
        assert match_quality(85, thresholds) == "good"
        assert match_quality(90, thresholds) == "strong"
