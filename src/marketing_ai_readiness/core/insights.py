"""Narrative extras derived from the computed scores.

Builds the industry comparison, secondary readiness metrics, short insight
statements, risk factors, and the phased action plan. Nothing here affects
the overall score or recommendation selection.
"""

from collections.abc import Iterable, Mapping

from marketing_ai_readiness.core.classifier import benchmark_thresholds
from marketing_ai_readiness.core.models import (
    ActionPlanPhase,
    ActivityDefinition,
    ActivityScore,
    DimensionDefinition,
    DimensionScore,
    IndustryComparison,
    IndustryProfile,
    ReadinessMetrics,
)
from marketing_ai_readiness.core.policy import (
    ACTION_PLAN_BANDS,
    AI_READY_ACTIVITY_THRESHOLD,
    CAPABILITY_RISK_ACTIVITY_COUNT,
    CRITICAL_ACTIVITY_THRESHOLD,
    DEVELOPING_THRESHOLD,
    EFFICIENCY_ACTIVITY_WEIGHT,
    EFFICIENCY_DIMENSION_WEIGHTS,
    GAP_THRESHOLD,
    HIGH_IMPACT_ACTIVITY_WEIGHT,
    INNOVATION_DIMENSION_WEIGHTS,
    NEUTRAL_ACTIVITY_BLEND,
    STRENGTH_THRESHOLD,
    WEAK_ACTIVITY_THRESHOLD,
    band_for,
    clamp_score,
)

CAPABILITY_RISK_MESSAGE = "Capability Risk: Multiple weak activity areas need attention"


class InsightBuilder:
    """Produces comparison, metrics, insights, risks, and the action plan.

    Args:
        dimensions: Dimension definitions carrying insight and risk texts.
        activities: Activity key -> definition, used for display names.
        action_plan: Action plan phases keyed by overall-score band.
    """

    def __init__(
        self,
        dimensions: Iterable[DimensionDefinition],
        activities: Mapping[str, ActivityDefinition],
        action_plan: Iterable[ActionPlanPhase] = (),
    ) -> None:
        self._dimensions = tuple(dimensions)
        self._activities = activities
        self._action_plan = tuple(action_plan)

    def _activity_label(self, activity: str) -> str:
        definition = self._activities.get(activity)
        return definition.label if definition is not None else activity

    def industry_comparison(
        self,
        overall_score: float,
        industry_profile: IndustryProfile,
    ) -> IndustryComparison:
        """Compare the overall score with the industry benchmark.

        Args:
            overall_score: Overall score in range 0-100.
            industry_profile: Profile supplying the benchmark.

        Returns:
            IndustryComparison with gaps and a comparison label.
        """
        average, top_quartile = benchmark_thresholds(industry_profile)
        if overall_score >= top_quartile:
            comparison = "Top Performer"
        elif overall_score >= average:
            comparison = "Above Average"
        elif overall_score >= DEVELOPING_THRESHOLD:
            comparison = "Below Average"
        else:
            comparison = "Significant Gap"

        return IndustryComparison(
            industry=industry_profile.key,
            industry_average=average,
            top_quartile=top_quartile,
            gap_to_average=round(overall_score - average, 2),
            gap_to_top_quartile=round(overall_score - top_quartile, 2),
            comparison=comparison,
        )

    def readiness_metrics(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
    ) -> ReadinessMetrics:
        """Compute weakest-link, strongest, and composite readiness indicators.

        Args:
            dimension_scores: Dimension key -> DimensionScore.
            activity_scores: Activity key -> ActivityScore.

        Returns:
            ReadinessMetrics for the assessment.
        """
        weakest = min(dimension_scores.values(), key=lambda s: s.value, default=None)
        strongest = max(dimension_scores.values(), key=lambda s: s.value, default=None)

        high_impact = [
            score.value
            for score in activity_scores.values()
            if score.impact_weight >= HIGH_IMPACT_ACTIVITY_WEIGHT
        ]
        high_impact_average = (
            sum(high_impact) / len(high_impact) if high_impact else NEUTRAL_ACTIVITY_BLEND
        )

        def _dimension_mix(weights: Mapping[str, float]) -> float:
            total = 0.0
            for dimension, weight in weights.items():
                score = dimension_scores.get(dimension)
                total += (score.value if score is not None else 0.0) * weight
            return total

        efficiency = _dimension_mix(EFFICIENCY_DIMENSION_WEIGHTS) + (
            high_impact_average * EFFICIENCY_ACTIVITY_WEIGHT
        )
        innovation = _dimension_mix(INNOVATION_DIMENSION_WEIGHTS)

        return ReadinessMetrics(
            weakest_dimension=weakest.dimension if weakest is not None else None,
            weakest_score=weakest.value if weakest is not None else 0.0,
            strongest_dimension=strongest.dimension if strongest is not None else None,
            strongest_score=strongest.value if strongest is not None else 0.0,
            high_impact_activity_average=round(clamp_score(high_impact_average), 2),
            efficiency_potential=round(clamp_score(efficiency), 2),
            innovation_capability=round(clamp_score(innovation), 2),
        )

    def insights(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
        overall_score: float,
        industry_profile: IndustryProfile,
    ) -> tuple[str, ...]:
        """Return short insight statements about strengths, gaps, and position."""
        statements: list[str] = []

        for definition in self._dimensions:
            score = dimension_scores.get(definition.key)
            if score is None:
                continue
            if score.value >= STRENGTH_THRESHOLD and definition.strength_insight:
                statements.append(definition.strength_insight)
            elif score.value < GAP_THRESHOLD and definition.gap_insight:
                statements.append(definition.gap_insight)

        ready = [
            self._activity_label(key)
            for key, score in activity_scores.items()
            if score.value >= AI_READY_ACTIVITY_THRESHOLD
        ]
        weak = [
            self._activity_label(key)
            for key, score in activity_scores.items()
            if score.value < WEAK_ACTIVITY_THRESHOLD
        ]
        if ready:
            statements.append(f"AI-ready activities: {', '.join(ready)}")
        if weak:
            statements.append(f"Priority development areas: {', '.join(weak)}")

        average, top_quartile = benchmark_thresholds(industry_profile)
        if overall_score >= top_quartile:
            statements.append(f"Top-quartile performance in {industry_profile.label} sector")
        elif overall_score < average:
            statements.append("Below industry average - significant improvement opportunity")

        return tuple(statements)

    def risk_factors(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
    ) -> tuple[str, ...]:
        """Return risk statements for weak dimensions and weak activity coverage."""
        risks = [
            definition.risk_message
            for definition in self._dimensions
            if definition.risk_message
            and definition.key in dimension_scores
            and dimension_scores[definition.key].value < GAP_THRESHOLD
        ]
        critical = sum(
            1 for score in activity_scores.values() if score.value < CRITICAL_ACTIVITY_THRESHOLD
        )
        if critical >= CAPABILITY_RISK_ACTIVITY_COUNT:
            risks.append(CAPABILITY_RISK_MESSAGE)
        return tuple(risks)

    def action_plan(self, overall_score: float) -> tuple[ActionPlanPhase, ...]:
        """Return the action plan phases for the overall-score band."""
        band = band_for(overall_score, ACTION_PLAN_BANDS)
        return tuple(phase for phase in self._action_plan if phase.band == band)
