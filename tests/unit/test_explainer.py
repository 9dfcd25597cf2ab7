"""Tests for match explanations and detailed reasons."""

from mentormatch.pipeline.explainer import explain_match, match_reasons


class TestExplainMatch:
    def test_no_factors(self) -> None:
        assert explain_match(False, False, []) == "Matched based on general profile relevance"

    def test_company_only(self) -> None:
        assert explain_match(False, True, []) == "Matched due to target company"

    def test_role_only(self) -> None:
        assert explain_match(True, False, []) == "Matched due to role alignment"

    def test_skills_only(self) -> None:
        assert explain_match(False, False, ["Java"]) == "Matched due to skill overlap"

    def test_two_factors_in_priority_order(self) -> None:
        assert (
            explain_match(True, False, ["Java"])
            == "Matched based on role alignment and skill overlap"
        )
        assert (
            explain_match(False, True, ["Java"])
            == "Matched based on target company and skill overlap"
        )
        assert (
            explain_match(True, True, [])
            == "Matched based on target company and role alignment"
        )

    def test_all_factors(self) -> None:
        assert explain_match(True, True, ["Java"]) == "Strong match across skills, role, and company"

    def test_experience_clause_at_threshold(self) -> None:
        sentence = explain_match(True, True, ["Java"], years_of_experience=5)
        assert sentence == (
            "Strong match across skills, role, and company, with 5+ years of experience"
        )

    def test_experience_clause_independent_of_factors(self) -> None:
        sentence = explain_match(False, False, [], years_of_experience=7)
        assert sentence.startswith("Matched based on general profile relevance")
        assert sentence.endswith("7+ years of experience")

    def test_no_clause_below_threshold(self) -> None:
        assert explain_match(False, True, [], years_of_experience=4) == "Matched due to target company"

    def test_no_clause_when_years_absent(self) -> None:
        assert explain_match(True, False, [], years_of_experience=None) == "Matched due to role alignment"

    def test_custom_threshold(self) -> None:
        assert "3+ years" in explain_match(True, False, [], 3, experience_threshold=3)

    def test_deterministic(self) -> None:
        assert explain_match(True, False, ["SQL"], 6) == explain_match(True, False, ["SQL"], 6)


class TestMatchReasons:
    def test_all_reasons(self) -> None:
        reasons = match_reasons(
            ["Java", "Python"], True, True,
            position="Software Engineer", company="Google", years_of_experience=6,
        )
        assert reasons == [
            "2 common skills: Java, Python",
            "Same target role: Software Engineer",
            "Works at target company: Google",
            "6+ years of experience",
        ]

    def test_single_skill_not_pluralised(self) -> None:
        assert match_reasons(["Java"], False, False) == ["1 common skill: Java"]

    def test_no_reasons(self) -> None:
        assert match_reasons([], False, False, years_of_experience=2) == []
