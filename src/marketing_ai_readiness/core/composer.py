"""Overall score composition.

The overall score is built in two stages. Dimension scores are blended with
the industry's dimension weights and activity scores with their impact
weights; the two blends are mixed 70/30 into a raw composite. The raw
composite is then rescaled against the industry benchmark average as
``raw / average * 50 + 50`` and clamped, so a zero raw score lands at 50.
"""

from collections.abc import Mapping

from marketing_ai_readiness.core.models import ActivityScore, DimensionScore, IndustryProfile
from marketing_ai_readiness.core.policy import (
    ACTIVITY_BLEND_WEIGHT,
    BENCHMARK_MIDPOINT,
    DIMENSION_BLEND_WEIGHT,
    NEUTRAL_ACTIVITY_BLEND,
    clamp_score,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


class OverallScoreComposer:
    """Combines dimension and activity scores into one 0-100 overall score."""

    def blend_dimensions(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        industry_profile: IndustryProfile,
    ) -> float:
        """Weighted sum of dimension scores using the industry weights.

        A weighted dimension with no score counts as 0.

        Args:
            dimension_scores: Dimension key -> DimensionScore.
            industry_profile: Profile supplying the dimension weights.

        Returns:
            Dimension blend in range 0-100.
        """
        blend = 0.0
        for dimension, weight in industry_profile.dimension_weights.items():
            score = dimension_scores.get(dimension)
            blend += (score.value if score is not None else 0.0) * weight
        return clamp_score(blend)

    def blend_activities(self, activity_scores: Mapping[str, ActivityScore]) -> float:
        """Impact-weighted average of activity scores.

        Args:
            activity_scores: Activity key -> ActivityScore.

        Returns:
            Activity blend in range 0-100; 50 when there are no activities
            or their impact weights sum to 0.
        """
        weighted_sum = 0.0
        weight_total = 0.0
        for score in activity_scores.values():
            weighted_sum += score.value * score.impact_weight
            weight_total += score.impact_weight
        if weight_total <= 0.0:
            return NEUTRAL_ACTIVITY_BLEND
        return clamp_score(weighted_sum / weight_total)

    def compose(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
        industry_profile: IndustryProfile,
    ) -> float:
        """Compute the benchmark-normalised overall score.

        Args:
            dimension_scores: Dimension key -> DimensionScore.
            activity_scores: Activity key -> ActivityScore.
            industry_profile: Profile supplying weights and benchmark.

        Returns:
            Overall score in range 0-100, rounded to 2 decimals.
        """
        dimension_blend = self.blend_dimensions(dimension_scores, industry_profile)
        activity_blend = self.blend_activities(activity_scores)
        raw = clamp_score(
            dimension_blend * DIMENSION_BLEND_WEIGHT + activity_blend * ACTIVITY_BLEND_WEIGHT
        )

        benchmark = industry_profile.benchmark_average
        if benchmark:
            overall = clamp_score(raw / benchmark * BENCHMARK_MIDPOINT + BENCHMARK_MIDPOINT)
        else:
            overall = raw

        logger.debug(
            "Overall score composed",
            industry=industry_profile.key,
            dimension_blend=round(dimension_blend, 2),
            activity_blend=round(activity_blend, 2),
            raw=round(raw, 2),
            overall=round(overall, 2),
        )
        return round(overall, 2)
