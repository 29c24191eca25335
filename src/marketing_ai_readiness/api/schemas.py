"""Pydantic request/response schemas for the readiness scoring API.

All API inputs and outputs are strictly typed Pydantic v2 models.
No raw dicts are returned from any endpoint.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Score request
# ---------------------------------------------------------------------------


class ScoreRequest(BaseModel):
    """A complete answer set plus the respondent's selections.

    Attributes:
        answers: Question id -> selected option value.
        selected_activities: Marketing activity keys the team works on.
        industry: Industry key; unknown or absent uses the default profile.
        company_size: Company size key; unknown or absent uses 'small'.
        max_results: Optional cap on returned recommendations.
    """

    answers: dict[str, int] = Field(default_factory=dict)
    selected_activities: list[str] = Field(default_factory=list, max_length=20)
    industry: str | None = Field(default=None, max_length=100)
    company_size: str | None = Field(default=None, max_length=100)
    max_results: int | None = Field(default=None, ge=0, le=50)


# ---------------------------------------------------------------------------
# Score response
# ---------------------------------------------------------------------------


class DimensionScoreSchema(BaseModel):
    """Score for one dimension; ``answered_questions == 0`` means no data."""

    dimension: str
    value: float
    answered_questions: int


class ActivityScoreSchema(BaseModel):
    """Score and readiness tier for one selected activity."""

    activity: str
    value: float
    readiness_tier: str
    impact_weight: float
    answered_questions: int
    ai_impact: str


class RecommendationSchema(BaseModel):
    """A ranked improvement recommendation."""

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


class ImpactEstimateSchema(BaseModel):
    """Illustrative projection; always shown with its disclaimer."""

    company_size: str
    team_size: int
    labor_cost_baseline: float
    efficiency_multiplier: float
    efficiency_gain_percent: float
    annual_labor_savings: float
    annual_revenue_impact: float
    confidence_level: str
    disclaimer: str


class IndustryComparisonSchema(BaseModel):
    """Overall score position against the industry benchmark."""

    industry: str
    industry_average: float
    top_quartile: float
    gap_to_average: float
    gap_to_top_quartile: float
    comparison: str


class ReadinessMetricsSchema(BaseModel):
    """Secondary readiness indicators."""

    weakest_dimension: str | None
    weakest_score: float
    strongest_dimension: str | None
    strongest_score: float
    high_impact_activity_average: float
    efficiency_potential: float
    innovation_capability: float


class ActionPlanPhaseSchema(BaseModel):
    """One phase of the suggested implementation plan."""

    band: str
    phase: str
    title: str
    description: str
    key_actions: list[str]
    expected_outcome: str


class ScoreResponse(BaseModel):
    """Full readiness assessment result.

    ``degraded`` is True when scoring was unavailable; in that case the
    neutral values must not be presented as a real score.
    """

    overall_score: float
    dimension_scores: dict[str, DimensionScoreSchema]
    activity_scores: dict[str, ActivityScoreSchema]
    readiness_category: str
    percentile_estimate: int | None
    recommendations: list[RecommendationSchema]
    impact_estimate: ImpactEstimateSchema | None
    industry: str
    company_size: str
    industry_comparison: IndustryComparisonSchema | None = None
    readiness_metrics: ReadinessMetricsSchema | None = None
    insights: list[str] = Field(default_factory=list)
    risk_factors: list[str] = Field(default_factory=list)
    action_plan: list[ActionPlanPhaseSchema] = Field(default_factory=list)
    degraded: bool = False


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------


class IndustrySchema(BaseModel):
    """An industry profile."""

    key: str
    label: str
    dimension_weights: dict[str, float]
    benchmark_average: float | None
    benchmark_top_quartile: float | None


class IndustryListResponse(BaseModel):
    """Configured industries."""

    industries: list[IndustrySchema]
    total: int


class ActivitySchema(BaseModel):
    """A marketing activity."""

    key: str
    label: str
    impact_weight: float
    roi_multiplier: float
    ai_impact: str


class ActivityListResponse(BaseModel):
    """Configured activities."""

    activities: list[ActivitySchema]
    total: int


class CompanySizeSchema(BaseModel):
    """A company size bracket."""

    key: str
    label: str
    team_size: int
    cost_per_person: float


class CompanySizeListResponse(BaseModel):
    """Configured company sizes."""

    company_sizes: list[CompanySizeSchema]
    total: int


class QuestionSchema(BaseModel):
    """A question with the option values it accepts."""

    question_id: str
    dimension: str
    text: str
    weight: float
    activity: str | None = None
    industry: str | None = None
    options: list[int]


class QuestionListResponse(BaseModel):
    """Questions for the requested selections."""

    questions: list[QuestionSchema]
    total: int
