"""Readiness category and coarse percentile from the overall score."""

from marketing_ai_readiness.core.models import IndustryProfile, ReadinessClassification
from marketing_ai_readiness.core.policy import (
    CATEGORY_PERCENTILES,
    DEVELOPING_CATEGORY,
    DEVELOPING_THRESHOLD,
    FALLBACK_BENCHMARK_AVERAGE,
    FALLBACK_BENCHMARK_TOP_QUARTILE,
    FOUNDATIONAL_CATEGORY,
    LEADER_CATEGORY,
    READY_CATEGORY,
)


def benchmark_thresholds(industry_profile: IndustryProfile) -> tuple[float, float]:
    """Return (average, top_quartile) for a profile, with fallbacks.

    Profiles without benchmark data use 60/80.
    """
    if not industry_profile.has_benchmark:
        return FALLBACK_BENCHMARK_AVERAGE, FALLBACK_BENCHMARK_TOP_QUARTILE
    average = float(industry_profile.benchmark_average or FALLBACK_BENCHMARK_AVERAGE)
    top_quartile = industry_profile.benchmark_top_quartile
    if top_quartile is None:
        top_quartile = FALLBACK_BENCHMARK_TOP_QUARTILE
    return average, float(top_quartile)


class ReadinessClassifier:
    """Maps an overall score onto Leader / Ready / Developing / Foundational."""

    def classify(
        self,
        overall_score: float,
        industry_profile: IndustryProfile,
    ) -> ReadinessClassification:
        """Classify an overall score against the industry benchmark.

        First match wins: at or above the top quartile is 'Leader', at or
        above the average is 'Ready', at or above 40 is 'Developing', and
        anything lower is 'Foundational'.

        Args:
            overall_score: Overall score in range 0-100.
            industry_profile: Profile supplying the benchmark thresholds.

        Returns:
            ReadinessClassification with category and percentile estimate.
        """
        average, top_quartile = benchmark_thresholds(industry_profile)

        if overall_score >= top_quartile:
            category = LEADER_CATEGORY
        elif overall_score >= average:
            category = READY_CATEGORY
        elif overall_score >= DEVELOPING_THRESHOLD:
            category = DEVELOPING_CATEGORY
        else:
            category = FOUNDATIONAL_CATEGORY

        return ReadinessClassification(
            category=category,
            percentile_estimate=CATEGORY_PERCENTILES[category],
        )
