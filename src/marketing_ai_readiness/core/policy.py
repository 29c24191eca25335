"""Scoring policy constants shared by every stage of the readiness engine.

Every weight split, band boundary, default, and cap used by the pipeline is
defined here once. Components import these names instead of repeating
literals so that the dimension, activity, industry, and recommendation
stages always agree on their cut points.
"""

import math

# ---------------------------------------------------------------------------
# Score range
# ---------------------------------------------------------------------------

SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

# Default Likert option map: raw answer 0-5 scores its own value in points.
DEFAULT_OPTION_SCORES: dict[int, float | None] = {value: float(value) for value in range(6)}

# ---------------------------------------------------------------------------
# Configuration validation
# ---------------------------------------------------------------------------

# Industry dimension weights must sum to 1.0 within this tolerance.
WEIGHT_SUM_TOLERANCE: float = 0.01

# ---------------------------------------------------------------------------
# Activity scoring
# ---------------------------------------------------------------------------

# Score and tier given to a selected activity that has no configured questions.
NEUTRAL_ACTIVITY_SCORE: float = 50.0
NEUTRAL_ACTIVITY_TIER: str = "moderate"

# Impact weight used for a selected activity missing from the impact table.
DEFAULT_ACTIVITY_IMPACT_WEIGHT: float = 0.05

# Activity readiness tiers (inclusive lower bound, label), first match wins.
ACTIVITY_TIER_THRESHOLDS: list[tuple[float, str]] = [
    (80.0, "advanced"),
    (60.0, "proficient"),
    (40.0, "basic"),
    (0.0, "beginner"),
]

# ---------------------------------------------------------------------------
# Overall score composition
# ---------------------------------------------------------------------------

DIMENSION_BLEND_WEIGHT: float = 0.7
ACTIVITY_BLEND_WEIGHT: float = 0.3

# Activity blend used when no activities are selected.
NEUTRAL_ACTIVITY_BLEND: float = 50.0

# Offset and scale of the benchmark-relative rescale: raw / average * 50 + 50.
BENCHMARK_MIDPOINT: float = 50.0

# ---------------------------------------------------------------------------
# Readiness classification
# ---------------------------------------------------------------------------

LEADER_CATEGORY: str = "Leader"
READY_CATEGORY: str = "Ready"
DEVELOPING_CATEGORY: str = "Developing"
FOUNDATIONAL_CATEGORY: str = "Foundational"
UNAVAILABLE_CATEGORY: str = "Unavailable"

# Absolute floor for the "Developing" category, independent of industry.
DEVELOPING_THRESHOLD: float = 40.0

# Benchmark thresholds used when an industry profile has no benchmark data.
FALLBACK_BENCHMARK_AVERAGE: float = 60.0
FALLBACK_BENCHMARK_TOP_QUARTILE: float = 80.0

# Coarse percentile step per category.
CATEGORY_PERCENTILES: dict[str, int] = {
    LEADER_CATEGORY: 90,
    READY_CATEGORY: 65,
    DEVELOPING_CATEGORY: 35,
    FOUNDATIONAL_CATEGORY: 15,
}

# ---------------------------------------------------------------------------
# Recommendation selection
# ---------------------------------------------------------------------------

# Score bands as (name, inclusive lower bound, exclusive upper bound).
# The band ending at SCORE_MAX also includes SCORE_MAX itself.
DIMENSION_BANDS: list[tuple[str, float, float]] = [
    ("low", 0.0, 40.0),
    ("mid", 40.0, 70.0),
    ("high", 70.0, 100.0),
]

ACTIVITY_BANDS: list[tuple[str, float, float]] = [
    ("low", 0.0, 50.0),
    ("mid", 50.0, 70.0),
    ("high", 70.0, 100.0),
]

INDUSTRY_BANDS: list[tuple[str, float, float]] = [
    ("low", 0.0, 40.0),
    ("mid", 40.0, 70.0),
    ("high", 70.0, 85.0),
    ("top", 85.0, 100.0),
]

RECOMMENDATION_HORIZONS: tuple[str, ...] = ("immediate", "short_term", "long_term")

# Only industry templates on this horizon are selected.
INDUSTRY_TEMPLATE_HORIZON: str = "immediate"

PRIORITY_ORDER: dict[str, int] = {"HIGH": 0, "MEDIUM": 1, "LOW": 2}

PRIORITY_BASE_RELEVANCE: dict[str, float] = {
    "HIGH": 80.0,
    "MEDIUM": 60.0,
    "LOW": 40.0,
}

# A score at or above this level needs no relevance boost.
HEALTHY_SCORE_THRESHOLD: float = 70.0
MAX_RELEVANCE_ADJUSTMENT: float = 15.0

DEFAULT_MAX_RECOMMENDATIONS: int = 6

# ---------------------------------------------------------------------------
# Impact / ROI estimation
# ---------------------------------------------------------------------------

DEFAULT_COMPANY_SIZE: str = "small"
DEFAULT_ACTIVITY_ROI_MULTIPLIER: float = 1.5
NO_ACTIVITY_ROI_MULTIPLIER: float = 2.0
REVENUE_IMPACT_RATIO: float = 3.0

# Confidence label thresholds on the overall score (inclusive lower bound).
IMPACT_CONFIDENCE_THRESHOLDS: list[tuple[float, str]] = [
    (70.0, "High"),
    (50.0, "Medium"),
    (0.0, "Low"),
]

IMPACT_DISCLAIMER: str = (
    "Illustrative projection based on typical team sizes, costs, and published "
    "AI productivity ranges. These figures are estimates, not guarantees."
)

# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------

STRENGTH_THRESHOLD: float = 75.0
GAP_THRESHOLD: float = 40.0
AI_READY_ACTIVITY_THRESHOLD: float = 70.0
WEAK_ACTIVITY_THRESHOLD: float = 40.0
CRITICAL_ACTIVITY_THRESHOLD: float = 30.0
CAPABILITY_RISK_ACTIVITY_COUNT: int = 3
HIGH_IMPACT_ACTIVITY_WEIGHT: float = 0.10

# Composite readiness indicators. Efficiency mixes process maturity with the
# high-impact activity average; innovation mixes people and strategy.
EFFICIENCY_DIMENSION_WEIGHTS: dict[str, float] = {"process_infrastructure": 0.6}
EFFICIENCY_ACTIVITY_WEIGHT: float = 0.4
INNOVATION_DIMENSION_WEIGHTS: dict[str, float] = {
    "people_skills": 0.6,
    "strategy_leadership": 0.4,
}

# Action plan bands on the overall score.
ACTION_PLAN_BANDS: list[tuple[str, float, float]] = [
    ("foundation", 0.0, 40.0),
    ("acceleration", 40.0, 70.0),
    ("innovation", 70.0, 100.0),
]


def clamp_score(value: float) -> float:
    """Clamp a score into the [SCORE_MIN, SCORE_MAX] range.

    Non-finite values collapse to SCORE_MIN so that no NaN or infinity can
    leave an aggregation step.

    Args:
        value: Raw computed score.

    Returns:
        The score limited to 0.0-100.0.
    """
    if not math.isfinite(value):
        return SCORE_MIN
    return max(SCORE_MIN, min(SCORE_MAX, value))


def band_for(score: float, bands: list[tuple[str, float, float]]) -> str:
    """Return the name of the band containing the given score.

    Args:
        score: Score in range 0-100.
        bands: Ordered band definitions from this module.

    Returns:
        Band name, e.g. 'low', 'mid', or 'high'.
    """
    for name, lower, upper in bands:
        if lower <= score < upper:
            return name
    return bands[-1][0] if score >= bands[-1][2] else bands[0][0]
