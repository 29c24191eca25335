"""Domain records for the readiness engine.

Configuration records (questions, profiles, templates) are immutable and
loaded once. Result records are rebuilt on every assessment and never hold
a reference back to the raw answers or to engine internals.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from marketing_ai_readiness.core.errors import InvalidAnswerError
from marketing_ai_readiness.core.policy import (
    DEFAULT_ACTIVITY_ROI_MULTIPLIER,
    DEFAULT_OPTION_SCORES,
    SCORE_MAX,
    UNAVAILABLE_CATEGORY,
    clamp_score,
)


# ---------------------------------------------------------------------------
# Configuration records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Question:
    """A single Likert-scale question in the catalog.

    Attributes:
        question_id: Unique identifier (e.g., 'PS_01').
        dimension: Dimension this question is scored under.
        text: Question text presented to respondents.
        weight: Scoring weight within its dimension or activity (> 0).
        activity: Activity key for activity-specific questions.
        industry: Industry key for industry-specific questions.
        option_scores: Raw option value -> points. ``None`` points mark a
            "not applicable" option that is excluded from aggregation.
    """

    question_id: str
    dimension: str
    text: str
    weight: float = 1.0
    activity: str | None = None
    industry: str | None = None
    option_scores: Mapping[int, float | None] = field(
        default_factory=lambda: dict(DEFAULT_OPTION_SCORES)
    )

    @property
    def max_points(self) -> float:
        """Highest point value among the applicable options (0.0 if none)."""
        points = [value for value in self.option_scores.values() if value is not None]
        return max(points) if points else 0.0

    def normalize(self, raw_value: int) -> float | None:
        """Convert a raw answer to a 0-100 score.

        Args:
            raw_value: The option value selected by the respondent.

        Returns:
            Normalised score, or None when the option is "not applicable".

        Raises:
            InvalidAnswerError: If raw_value is not one of the question's options.
        """
        if raw_value not in self.option_scores:
            raise InvalidAnswerError(self.question_id, raw_value)
        points = self.option_scores[raw_value]
        if points is None:
            return None
        max_points = self.max_points
        if max_points <= 0.0:
            return 0.0
        return clamp_score(points / max_points * SCORE_MAX)


@dataclass(frozen=True)
class DimensionDefinition:
    """A capability dimension and the texts used when describing it."""

    key: str
    label: str
    strength_insight: str = ""
    gap_insight: str = ""
    risk_message: str = ""


@dataclass(frozen=True)
class ActivityDefinition:
    """A marketing activity a respondent can opt into.

    Attributes:
        key: Activity identifier (e.g., 'content_marketing').
        label: Display name.
        impact_weight: Relative AI impact used for blending (> 0).
        roi_multiplier: Theoretical productivity multiplier (>= 1.0).
        ai_impact: Qualitative AI impact label.
    """

    key: str
    label: str
    impact_weight: float
    roi_multiplier: float = DEFAULT_ACTIVITY_ROI_MULTIPLIER
    ai_impact: str = "Moderate"


@dataclass(frozen=True)
class IndustryProfile:
    """Per-industry dimension weighting and maturity benchmark.

    Attributes:
        key: Industry identifier.
        label: Display name.
        dimension_weights: Dimension -> weight, summing to 1.0.
        benchmark_average: Average readiness of the industry (0-100) or None.
        benchmark_top_quartile: Top-quartile readiness (0-100) or None.
    """

    key: str
    label: str
    dimension_weights: Mapping[str, float]
    benchmark_average: float | None = None
    benchmark_top_quartile: float | None = None

    @property
    def has_benchmark(self) -> bool:
        """True when a usable (non-zero) benchmark average is configured."""
        return bool(self.benchmark_average)


@dataclass(frozen=True)
class CompanySizeProfile:
    """Typical marketing team shape for a company size bracket."""

    key: str
    label: str
    team_size: int
    cost_per_person: float

    @property
    def labor_cost_baseline(self) -> float:
        """Annual labour cost of the whole marketing team."""
        return self.team_size * self.cost_per_person


@dataclass(frozen=True)
class ScoreBand:
    """A named half-open score range [min, max).

    A band whose upper bound is 100 also contains 100.
    """

    name: str
    min: float
    max: float

    def contains(self, score: float) -> bool:
        """Return True if the score falls inside this band."""
        if self.min <= score < self.max:
            return True
        return self.max >= SCORE_MAX and score == self.max


@dataclass(frozen=True)
class RecommendationTemplate:
    """A static improvement suggestion keyed to one dimension, activity, or industry.

    Exactly one of ``dimension``, ``activity``, or ``industry`` is set.
    """

    template_id: str
    priority: str
    title: str
    body: str
    score_band: ScoreBand
    dimension: str | None = None
    activity: str | None = None
    industry: str | None = None
    horizon: str = "immediate"
    investment_hint: str | None = None
    timeline_hint: str | None = None

    @property
    def applies_to(self) -> tuple[str, str | None]:
        """Return (source kind, key) for the entity this template targets."""
        if self.dimension is not None:
            return "dimension", self.dimension
        if self.activity is not None:
            return "activity", self.activity
        return "industry", self.industry


@dataclass(frozen=True)
class ActionPlanPhase:
    """One phase of the suggested implementation plan."""

    band: str
    phase: str
    title: str
    description: str
    key_actions: tuple[str, ...]
    expected_outcome: str


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AssessmentInput:
    """Everything a caller supplies for one assessment.

    Every field is optional. Absent values fall back to documented defaults:
    no answers, no activities, the equal-weight industry profile, and the
    'small' company size.
    """

    answers: Mapping[str, int] = field(default_factory=dict)
    selected_activities: tuple[str, ...] = ()
    industry: str | None = None
    company_size: str | None = None


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DimensionScore:
    """Score for one dimension.

    ``answered_questions == 0`` means the value 0.0 reflects missing data
    rather than measured low maturity.
    """

    dimension: str
    value: float
    answered_questions: int = 0


@dataclass(frozen=True)
class ActivityScore:
    """Score and readiness tier for one selected activity."""

    activity: str
    value: float
    readiness_tier: str
    impact_weight: float
    answered_questions: int = 0
    ai_impact: str = "Moderate"


@dataclass(frozen=True)
class ReadinessClassification:
    """Readiness category and coarse percentile estimate."""

    category: str
    percentile_estimate: int


@dataclass(frozen=True)
class Recommendation:
    """A selected and ranked recommendation."""

    template_id: str
    title: str
    body: str
    priority: str
    source: str
    source_key: str
    source_score: float
    relevance_score: float
    horizon: str
    investment_hint: str | None = None
    timeline_hint: str | None = None


@dataclass(frozen=True)
class ImpactEstimate:
    """Illustrative productivity and cost projection.

    All figures are projections, not guarantees; ``disclaimer`` carries the
    wording that must accompany them wherever they are shown.
    """

    company_size: str
    team_size: int
    labor_cost_baseline: float
    efficiency_multiplier: float
    efficiency_gain_percent: float
    annual_labor_savings: float
    annual_revenue_impact: float
    confidence_level: str
    disclaimer: str


@dataclass(frozen=True)
class IndustryComparison:
    """Position of the overall score relative to the industry benchmark."""

    industry: str
    industry_average: float
    top_quartile: float
    gap_to_average: float
    gap_to_top_quartile: float
    comparison: str


@dataclass(frozen=True)
class ReadinessMetrics:
    """Secondary readiness indicators derived from the component scores."""

    weakest_dimension: str | None
    weakest_score: float
    strongest_dimension: str | None
    strongest_score: float
    high_impact_activity_average: float
    efficiency_potential: float
    innovation_capability: float


@dataclass(frozen=True)
class OverallResult:
    """The complete, self-contained outcome of one assessment.

    ``degraded`` is True only for the fallback produced when the engine
    could not run; its neutral values must not be read as a real score.
    """

    overall_score: float
    dimension_scores: dict[str, DimensionScore]
    activity_scores: dict[str, ActivityScore]
    readiness_category: str
    percentile_estimate: int | None
    recommendations: tuple[Recommendation, ...]
    impact_estimate: ImpactEstimate | None
    industry: str
    company_size: str
    industry_comparison: IndustryComparison | None = None
    readiness_metrics: ReadinessMetrics | None = None
    insights: tuple[str, ...] = ()
    risk_factors: tuple[str, ...] = ()
    action_plan: tuple[ActionPlanPhase, ...] = ()
    degraded: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable dict copy of this result."""
        return dataclasses.asdict(self)

    @classmethod
    def unavailable(
        cls,
        dimensions: list[str],
        industry: str = "",
        company_size: str = "",
    ) -> "OverallResult":
        """Build the neutral fallback returned when scoring is unavailable.

        Args:
            dimensions: Dimension keys to report at the neutral value.
            industry: Industry key from the request, echoed back.
            company_size: Company size key from the request, echoed back.

        Returns:
            An OverallResult flagged ``degraded=True`` with category
            'Unavailable', all dimensions at 50, and no recommendations.
        """
        neutral = SCORE_MAX / 2
        return cls(
            overall_score=neutral,
            dimension_scores={
                dimension: DimensionScore(dimension=dimension, value=neutral)
                for dimension in dimensions
            },
            activity_scores={},
            readiness_category=UNAVAILABLE_CATEGORY,
            percentile_estimate=None,
            recommendations=(),
            impact_estimate=None,
            industry=industry,
            company_size=company_size,
            degraded=True,
        )
