"""End-to-end tests for the readiness pipeline over the built-in configuration.

Tests cover:
- Reference scenarios (empty answers, one maxed dimension, neutral
  activities, unknown industry)
- Determinism, monotonicity, and benchmark sensitivity
- Recommendation cap and ordering
- Answer validation at the engine boundary
"""

import pytest

from marketing_ai_readiness.core.engine import ReadinessEngine
from marketing_ai_readiness.core.errors import InvalidAnswerError
from marketing_ai_readiness.core.models import AssessmentInput, OverallResult
from marketing_ai_readiness.core.policy import PRIORITY_ORDER
from marketing_ai_readiness.core.questions import QUESTION_BANK


def _core_answers(value: int, dimension: str | None = None) -> dict[str, int]:
    """Build answers with one value for every core question (or one dimension's)."""
    return {
        q.question_id: value
        for q in QUESTION_BANK
        if q.activity is None
        and q.industry is None
        and (dimension is None or q.dimension == dimension)
    }


def _activity_answers(activity: str, value: int) -> dict[str, int]:
    return {q.question_id: value for q in QUESTION_BANK if q.activity == activity}


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------


class TestEmptyAssessment:
    """No answers, industry b2b_saas, no activities."""

    @pytest.fixture()
    def result(self, engine: ReadinessEngine) -> OverallResult:
        return engine.assess(AssessmentInput(industry="b2b_saas"))

    def test_all_dimensions_zero(self, result: OverallResult) -> None:
        """Every dimension is 0 with no answered questions."""
        assert set(result.dimension_scores) == {
            "people_skills",
            "process_infrastructure",
            "strategy_leadership",
        }
        for score in result.dimension_scores.values():
            assert score.value == 0.0
            assert score.answered_questions == 0

    def test_overall_and_category(self, result: OverallResult) -> None:
        """raw 15 against benchmark 75 -> 60.0, 'Developing'."""
        assert result.overall_score == 60.0
        assert result.readiness_category == "Developing"
        assert result.percentile_estimate == 35
        assert result.industry == "b2b_saas"
        assert result.company_size == "small"
        assert result.degraded is False

    def test_recommendations_are_high_priority_foundations(
        self, result: OverallResult
    ) -> None:
        """All six slots go to HIGH low-band dimension templates in catalog order."""
        assert [r.template_id for r in result.recommendations] == [
            "PS_LOW_TRAINING",
            "PS_LOW_CHAMPIONS",
            "PI_LOW_CENTRALIZE_DATA",
            "PI_LOW_GOVERNANCE",
            "SL_LOW_STRATEGY",
            "SL_LOW_EXECUTIVE_BUY_IN",
        ]
        assert all(r.relevance_score == 95.0 for r in result.recommendations)

    def test_impact_estimate(self, result: OverallResult) -> None:
        """Overall 60 realises 60% of the default 2x multiplier for a small team."""
        impact = result.impact_estimate
        assert impact is not None
        assert impact.efficiency_multiplier == 1.6
        assert impact.annual_labor_savings == 73125.0
        assert impact.annual_revenue_impact == 219375.0
        assert impact.confidence_level == "Medium"

    def test_industry_comparison(self, result: OverallResult) -> None:
        """60 against 75 / 90 is 'Below Average'."""
        comparison = result.industry_comparison
        assert comparison is not None
        assert comparison.gap_to_average == -15.0
        assert comparison.gap_to_top_quartile == -30.0
        assert comparison.comparison == "Below Average"

    def test_insights_and_risks(self, result: OverallResult) -> None:
        """Every dimension is a gap and carries a risk."""
        assert len(result.insights) == 4
        assert result.insights[-1] == (
            "Below industry average - significant improvement opportunity"
        )
        assert len(result.risk_factors) == 3

    def test_action_plan_band(self, result: OverallResult) -> None:
        """Overall 60 falls in the acceleration band."""
        assert [phase.band for phase in result.action_plan] == ["acceleration"]


class TestReferenceScenarios:
    """Further fixed scenarios over the built-in configuration."""

    def test_people_skills_maxed(self, engine: ReadinessEngine) -> None:
        """People skills at 100 with weight 0.3: raw 36 -> 74.0 for b2b_saas."""
        result = engine.assess(
            AssessmentInput(answers=_core_answers(5, "people_skills"), industry="b2b_saas")
        )
        assert result.dimension_scores["people_skills"].value == 100.0
        assert result.dimension_scores["process_infrastructure"].value == 0.0
        assert result.overall_score == 74.0
        assert result.readiness_category == "Developing"

    def test_activity_without_questions_is_neutral(self, engine: ReadinessEngine) -> None:
        """pr_communications has no questions: 50, 'moderate', default profile 62.5."""
        result = engine.assess(AssessmentInput(selected_activities=("pr_communications",)))
        score = result.activity_scores["pr_communications"]
        assert score.value == 50.0
        assert score.readiness_tier == "moderate"
        assert result.industry == "default"
        assert result.overall_score == 62.5
        assert result.readiness_category == "Ready"

    def test_unknown_industry_uses_default(self, engine: ReadinessEngine) -> None:
        """An unknown industry scores against the equal-weight default profile."""
        result = engine.assess(AssessmentInput(industry="space_mining"))
        assert result.industry == "default"
        assert result.overall_score == 62.5

    def test_selected_activity_scored_from_its_questions(self, engine: ReadinessEngine) -> None:
        """Content marketing answered at the top option is 'advanced'."""
        result = engine.assess(
            AssessmentInput(
                answers=_activity_answers("content_marketing", 5),
                selected_activities=("content_marketing",),
            )
        )
        score = result.activity_scores["content_marketing"]
        assert score.value == 100.0
        assert score.readiness_tier == "advanced"
        assert score.ai_impact == "Very High"
        assert "AI-ready activities: Content Marketing" in result.insights

    def test_activity_answers_count_toward_their_dimension(
        self, engine: ReadinessEngine
    ) -> None:
        """Analytics questions also feed process and strategy scores."""
        result = engine.assess(
            AssessmentInput(
                answers=_activity_answers("analytics_data", 5),
                selected_activities=("analytics_data",),
            )
        )
        process = result.dimension_scores["process_infrastructure"]
        strategy = result.dimension_scores["strategy_leadership"]
        assert (process.value, process.answered_questions) == (100.0, 2)
        assert (strategy.value, strategy.answered_questions) == (100.0, 1)
        assert result.dimension_scores["people_skills"].answered_questions == 0

    def test_unselected_activity_answers_do_not_move_dimensions(
        self, engine: ReadinessEngine
    ) -> None:
        """Answers for an activity that was not selected are validated but not scored."""
        result = engine.assess(AssessmentInput(answers={"ACT_CONTENT_01": 5}))
        assert result.dimension_scores["process_infrastructure"].answered_questions == 0
        assert "content_marketing" not in result.activity_scores

    def test_industry_question_counts_only_for_its_industry(
        self, engine: ReadinessEngine
    ) -> None:
        """IND_SAAS_01 feeds strategy only when the industry is b2b_saas."""
        saas = engine.assess(AssessmentInput(answers={"IND_SAAS_01": 5}, industry="b2b_saas"))
        other = engine.assess(AssessmentInput(answers={"IND_SAAS_01": 5}, industry="manufacturing"))
        assert saas.dimension_scores["strategy_leadership"].value == 100.0
        assert other.dimension_scores["strategy_leadership"].answered_questions == 0

    def test_not_applicable_practice_is_excluded(self, engine: ReadinessEngine) -> None:
        """ACT_SEO_02 answered 'not applicable' leaves the other SEO answers in charge."""
        result = engine.assess(
            AssessmentInput(
                answers={"ACT_SEO_01": 5, "ACT_SEO_02": 0, "ACT_SEO_03": 5},
                selected_activities=("seo_sem",),
            )
        )
        assert result.activity_scores["seo_sem"].value == 100.0
        assert result.activity_scores["seo_sem"].answered_questions == 2

    def test_company_size_is_echoed(self, engine: ReadinessEngine) -> None:
        """The resolved company size is reported; unknown falls back to small."""
        assert engine.assess(AssessmentInput(company_size="large")).company_size == "large"
        assert engine.assess(AssessmentInput(company_size="mega")).company_size == "small"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestPipelineProperties:
    """Determinism, bounds, monotonicity, and benchmark sensitivity."""

    def test_idempotent(self, engine: ReadinessEngine) -> None:
        """The same input always yields an identical result."""
        assessment = AssessmentInput(
            answers=_core_answers(3),
            selected_activities=("seo_sem", "email_marketing"),
            industry="manufacturing",
            company_size="medium",
        )
        assert engine.assess(assessment) == engine.assess(assessment)

    @pytest.mark.parametrize("value", [0, 3, 5])
    def test_scores_bounded(self, engine: ReadinessEngine, value: int) -> None:
        """Every score stays within 0-100."""
        answers = {"PS_01": value}
        answers.update(_activity_answers("email_marketing", value))
        result = engine.assess(
            AssessmentInput(answers=answers, selected_activities=("email_marketing",))
        )
        assert 0.0 <= result.overall_score <= 100.0
        for score in result.dimension_scores.values():
            assert 0.0 <= score.value <= 100.0
        for activity in result.activity_scores.values():
            assert 0.0 <= activity.value <= 100.0

    def test_monotonic_in_answers(self, engine: ReadinessEngine) -> None:
        """Raising one answer never lowers the overall score."""
        base = _core_answers(3)
        improved = dict(base, PI_01=5)
        before = engine.assess(AssessmentInput(answers=base, industry="b2b_saas"))
        after = engine.assess(AssessmentInput(answers=improved, industry="b2b_saas"))
        assert after.overall_score >= before.overall_score

    def test_higher_benchmark_never_scores_higher(self, engine: ReadinessEngine) -> None:
        """Same weights, higher benchmark average -> lower or equal overall score."""
        answers = _core_answers(3)
        healthcare = engine.assess(AssessmentInput(answers=answers, industry="healthcare"))
        finance = engine.assess(AssessmentInput(answers=answers, industry="financial_services"))
        saas = engine.assess(AssessmentInput(answers=answers, industry="b2b_saas"))
        assert healthcare.overall_score >= finance.overall_score >= saas.overall_score


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


class TestRecommendationOutput:
    """Recommendation cap and ordering through the engine."""

    def test_default_cap(self, engine: ReadinessEngine) -> None:
        """At most six recommendations by default."""
        assert len(engine.assess(AssessmentInput(industry="b2b_saas")).recommendations) == 6

    def test_explicit_cap(self, engine: ReadinessEngine) -> None:
        """max_results overrides the engine's cap."""
        result = engine.assess(AssessmentInput(industry="b2b_saas"), max_results=2)
        assert len(result.recommendations) == 2

    def test_full_candidate_list_is_ordered(self, engine: ReadinessEngine) -> None:
        """All ten candidates come back ordered by priority then relevance."""
        result = engine.assess(AssessmentInput(industry="b2b_saas"), max_results=50)
        assert len(result.recommendations) == 10
        assert result.recommendations[-1].template_id == "IND_SAAS_MID_CUSTOMER_SUCCESS"
        keys = [
            (PRIORITY_ORDER[r.priority], -r.relevance_score) for r in result.recommendations
        ]
        assert keys == sorted(keys)

    def test_no_duplicate_templates(self, engine: ReadinessEngine) -> None:
        """Each template appears at most once."""
        result = engine.assess(
            AssessmentInput(
                selected_activities=tuple(engine.config.activities),
                industry="healthcare",
            ),
            max_results=50,
        )
        ids = [r.template_id for r in result.recommendations]
        assert len(ids) == len(set(ids))


# ---------------------------------------------------------------------------
# Answer validation
# ---------------------------------------------------------------------------


class TestAnswerValidation:
    """Validation of raw answers at the engine boundary."""

    def test_option_not_offered(self, engine: ReadinessEngine) -> None:
        """PS_01 does not offer option 1."""
        with pytest.raises(InvalidAnswerError):
            engine.assess(AssessmentInput(answers={"PS_01": 1}))

    def test_out_of_scale_value(self, engine: ReadinessEngine) -> None:
        """A value outside 0-5 is rejected."""
        with pytest.raises(InvalidAnswerError):
            engine.assess(AssessmentInput(answers={"PI_01": 9}))

    def test_invalid_answer_for_unselected_activity(self, engine: ReadinessEngine) -> None:
        """Known questions are validated even when their activity is not selected."""
        with pytest.raises(InvalidAnswerError):
            engine.assess(AssessmentInput(answers={"ACT_EMAIL_01": 7}))

    def test_unknown_question_ids_are_ignored(self, engine: ReadinessEngine) -> None:
        """Answers to unknown questions do not change the result."""
        baseline = engine.assess(AssessmentInput(industry="b2b_saas"))
        noisy = engine.assess(AssessmentInput(answers={"LEGACY_99": 4}, industry="b2b_saas"))
        assert noisy == baseline
