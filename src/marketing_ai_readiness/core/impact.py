"""Illustrative productivity and cost projections.

Every figure produced here is a projection derived from typical team sizes,
typical costs, and published AI productivity ranges. Results always carry
``IMPACT_DISCLAIMER`` and must be presented as estimates, not guarantees.
"""

from collections.abc import Mapping

from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.models import ActivityScore, CompanySizeProfile, ImpactEstimate
from marketing_ai_readiness.core.policy import (
    DEFAULT_ACTIVITY_ROI_MULTIPLIER,
    DEFAULT_COMPANY_SIZE,
    IMPACT_CONFIDENCE_THRESHOLDS,
    IMPACT_DISCLAIMER,
    NO_ACTIVITY_ROI_MULTIPLIER,
    REVENUE_IMPACT_RATIO,
    SCORE_MAX,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


def confidence_level(overall_score: float) -> str:
    """Return 'High', 'Medium', or 'Low' confidence for an overall score."""
    for threshold, label in IMPACT_CONFIDENCE_THRESHOLDS:
        if overall_score >= threshold:
            return label
    return IMPACT_CONFIDENCE_THRESHOLDS[-1][1]


class ImpactEstimator:
    """Derives labour savings and revenue impact from readiness scores.

    Args:
        company_sizes: Company size key -> profile. Must contain 'small',
            which is used for absent or unknown keys.

    Raises:
        ConfigurationError: If the default company size is missing.
    """

    def __init__(self, company_sizes: Mapping[str, CompanySizeProfile]) -> None:
        if DEFAULT_COMPANY_SIZE not in company_sizes:
            raise ConfigurationError(
                f"Company size table must include {DEFAULT_COMPANY_SIZE!r}"
            )
        self._company_sizes = company_sizes

    def average_multiplier(
        self,
        activity_scores: Mapping[str, ActivityScore],
        activity_roi_multipliers: Mapping[str, float],
    ) -> float:
        """Impact-weighted average ROI multiplier of the selected activities.

        Args:
            activity_scores: Activity key -> ActivityScore.
            activity_roi_multipliers: Activity key -> ROI multiplier.

        Returns:
            The weighted multiplier; 2.0 when no activities are selected.
        """
        weighted_sum = 0.0
        weight_total = 0.0
        for activity, score in activity_scores.items():
            multiplier = activity_roi_multipliers.get(activity, DEFAULT_ACTIVITY_ROI_MULTIPLIER)
            weighted_sum += multiplier * score.impact_weight
            weight_total += score.impact_weight
        if weight_total <= 0.0:
            return NO_ACTIVITY_ROI_MULTIPLIER
        return weighted_sum / weight_total

    def estimate(
        self,
        overall_score: float,
        activity_scores: Mapping[str, ActivityScore],
        company_size_key: str | None,
        activity_roi_multipliers: Mapping[str, float],
    ) -> ImpactEstimate:
        """Project annual labour savings and revenue impact.

        The average multiplier is scaled toward 1.0 by ``overall_score / 100``
        so that less ready teams realise less of the theoretical gain.

        Args:
            overall_score: Overall readiness score in range 0-100.
            activity_scores: Activity key -> ActivityScore.
            company_size_key: Company size key; absent or unknown means 'small'.
            activity_roi_multipliers: Activity key -> ROI multiplier.

        Returns:
            ImpactEstimate with the illustrative-projection disclaimer.
        """
        profile = self._company_sizes.get(company_size_key or DEFAULT_COMPANY_SIZE)
        if profile is None:
            profile = self._company_sizes[DEFAULT_COMPANY_SIZE]

        average = self.average_multiplier(activity_scores, activity_roi_multipliers)
        realisation = min(1.0, max(0.0, overall_score / SCORE_MAX))
        adjusted = 1.0 + (average - 1.0) * realisation

        baseline = profile.labor_cost_baseline
        labor_savings = baseline * (adjusted - 1.0) / adjusted if adjusted > 0 else 0.0
        revenue_impact = labor_savings * REVENUE_IMPACT_RATIO

        estimate = ImpactEstimate(
            company_size=profile.key,
            team_size=profile.team_size,
            labor_cost_baseline=round(baseline, 2),
            efficiency_multiplier=round(adjusted, 2),
            efficiency_gain_percent=round((adjusted - 1.0) * 100.0, 1),
            annual_labor_savings=round(labor_savings, 2),
            annual_revenue_impact=round(revenue_impact, 2),
            confidence_level=confidence_level(overall_score),
            disclaimer=IMPACT_DISCLAIMER,
        )

        logger.debug(
            "Impact estimated",
            company_size=profile.key,
            average_multiplier=round(average, 3),
            adjusted_multiplier=estimate.efficiency_multiplier,
        )
        return estimate
