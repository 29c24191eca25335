"""Unit tests for recommendation selection and ranking.

Tests cover:
- Relevance scoring around the healthy threshold
- Band matching for dimension, activity, and industry templates
- Ordering by priority, relevance, then declaration order
- Deduplication by template id and truncation
"""

import pytest

from marketing_ai_readiness.core.models import (
    ActivityScore,
    DimensionScore,
    RecommendationTemplate,
    ScoreBand,
)
from marketing_ai_readiness.core.recommendations import RecommendationSelector, relevance_score

_LOW = ScoreBand(name="low", min=0.0, max=40.0)
_MID = ScoreBand(name="mid", min=40.0, max=70.0)
_HIGH = ScoreBand(name="high", min=70.0, max=100.0)


def _template(
    template_id: str,
    priority: str = "MEDIUM",
    band: ScoreBand = _LOW,
    dimension: str | None = None,
    activity: str | None = None,
    industry: str | None = None,
    horizon: str = "immediate",
) -> RecommendationTemplate:
    return RecommendationTemplate(
        template_id=template_id,
        priority=priority,
        title=template_id.title(),
        body="Do the thing.",
        score_band=band,
        dimension=dimension,
        activity=activity,
        industry=industry,
        horizon=horizon,
    )


def _dimensions(**values: float) -> dict[str, DimensionScore]:
    return {key: DimensionScore(dimension=key, value=value) for key, value in values.items()}


@pytest.fixture()
def selector() -> RecommendationSelector:
    """Provide a fresh RecommendationSelector instance."""
    return RecommendationSelector()


class TestRelevanceScore:
    """Verify the relevance formula."""

    def test_healthy_score_keeps_base(self) -> None:
        """At the healthy threshold relevance equals the priority base."""
        assert relevance_score("HIGH", 70.0) == 80.0
        assert relevance_score("MEDIUM", 70.0) == 60.0
        assert relevance_score("LOW", 70.0) == 40.0

    def test_low_score_boosts_by_full_adjustment(self) -> None:
        """A score of 0 adds the full 15 points."""
        assert relevance_score("HIGH", 0.0) == 95.0

    def test_high_score_lowers_relevance(self) -> None:
        """A score of 100 subtracts 30/70 of 15 points."""
        assert relevance_score("LOW", 100.0) == 33.57


class TestRecommendationSelector:
    """Verify RecommendationSelector.select."""

    def test_band_matching(self, selector: RecommendationSelector) -> None:
        """Only templates whose band contains the score are selected."""
        catalog = [
            _template("LOW_ONE", band=_LOW, dimension="people_skills"),
            _template("MID_ONE", band=_MID, dimension="people_skills"),
            _template("HIGH_ONE", band=_HIGH, dimension="people_skills"),
        ]
        result = selector.select(_dimensions(people_skills=55.0), {}, 50.0, None, catalog)
        assert [r.template_id for r in result] == ["MID_ONE"]
        assert result[0].source == "dimension"
        assert result[0].source_key == "people_skills"
        assert result[0].source_score == 55.0

    def test_score_of_100_matches_top_band(self, selector: RecommendationSelector) -> None:
        """The band ending at 100 includes 100."""
        catalog = [_template("HIGH_ONE", band=_HIGH, dimension="people_skills")]
        result = selector.select(_dimensions(people_skills=100.0), {}, 50.0, None, catalog)
        assert len(result) == 1

    def test_band_boundary_is_half_open(self, selector: RecommendationSelector) -> None:
        """A score of exactly 40 belongs to 'mid', not 'low'."""
        catalog = [
            _template("LOW_ONE", band=_LOW, dimension="people_skills"),
            _template("MID_ONE", band=_MID, dimension="people_skills"),
        ]
        result = selector.select(_dimensions(people_skills=40.0), {}, 50.0, None, catalog)
        assert [r.template_id for r in result] == ["MID_ONE"]

    def test_activity_templates_need_selected_activity(
        self, selector: RecommendationSelector
    ) -> None:
        """Activity templates are only considered for scored activities."""
        catalog = [
            _template("ACT_SEO", activity="seo_sem"),
            _template("ACT_EMAIL", activity="email_marketing"),
        ]
        activity_scores = {
            "seo_sem": ActivityScore(
                activity="seo_sem", value=10.0, readiness_tier="beginner", impact_weight=0.12
            )
        }
        result = selector.select({}, activity_scores, 50.0, None, catalog)
        assert [r.template_id for r in result] == ["ACT_SEO"]
        assert result[0].source == "activity"

    def test_industry_templates_use_overall_and_immediate_horizon(
        self, selector: RecommendationSelector
    ) -> None:
        """Industry templates match the overall score for the selected industry only."""
        catalog = [
            _template("SAAS_NOW", industry="b2b_saas", band=_MID),
            _template("SAAS_LATER", industry="b2b_saas", band=_MID, horizon="short_term"),
            _template("MFG_NOW", industry="manufacturing", band=_MID),
        ]
        result = selector.select({}, {}, 60.0, "b2b_saas", catalog)
        assert [r.template_id for r in result] == ["SAAS_NOW"]
        assert result[0].source == "industry"
        assert result[0].source_score == 60.0

    def test_ordering(self, selector: RecommendationSelector) -> None:
        """HIGH before MEDIUM before LOW, then relevance, then declaration order."""
        catalog = [
            _template("LOW_A", priority="LOW", dimension="people_skills"),
            _template("MED_PS", priority="MEDIUM", dimension="people_skills"),
            _template("MED_SL", priority="MEDIUM", dimension="strategy_leadership"),
            _template("HIGH_A", priority="HIGH", dimension="people_skills"),
            _template("HIGH_B", priority="HIGH", dimension="people_skills"),
        ]
        result = selector.select(
            _dimensions(people_skills=30.0, strategy_leadership=10.0), {}, 50.0, None, catalog
        )
        assert [r.template_id for r in result] == [
            "HIGH_A",
            "HIGH_B",
            "MED_SL",
            "MED_PS",
            "LOW_A",
        ]

    def test_duplicate_template_ids_keep_highest_relevance(
        self, selector: RecommendationSelector
    ) -> None:
        """A template id matched twice is kept once, with its higher relevance."""
        catalog = [
            _template("SHARED", dimension="people_skills"),
            _template("SHARED", dimension="strategy_leadership"),
        ]
        result = selector.select(
            _dimensions(people_skills=30.0, strategy_leadership=5.0), {}, 50.0, None, catalog
        )
        assert len(result) == 1
        assert result[0].source_key == "strategy_leadership"

    def test_truncates_to_max_results(self, selector: RecommendationSelector) -> None:
        """At most max_results recommendations are returned."""
        catalog = [_template(f"T{i}", dimension="people_skills") for i in range(10)]
        result = selector.select(_dimensions(people_skills=10.0), {}, 50.0, None, catalog, 3)
        assert [r.template_id for r in result] == ["T0", "T1", "T2"]

    def test_zero_max_results_returns_nothing(self, selector: RecommendationSelector) -> None:
        """max_results of 0 yields an empty tuple."""
        catalog = [_template("T0", dimension="people_skills")]
        assert selector.select(_dimensions(people_skills=10.0), {}, 50.0, None, catalog, 0) == ()

    def test_no_matches_is_empty(self, selector: RecommendationSelector) -> None:
        """Nothing in band yields no recommendations rather than an error."""
        catalog = [_template("LOW_ONE", band=_LOW, dimension="people_skills")]
        assert selector.select(_dimensions(people_skills=90.0), {}, 50.0, None, catalog) == ()
