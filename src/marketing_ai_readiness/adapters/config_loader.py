"""JSON configuration loader for the readiness engine.

Reads the same tables as the built-in catalog modules from a JSON document.
The document shape is checked by Pydantic; the catalog semantics (weight
sums, references, bands) are checked by ``build_engine_config``. Both kinds
of failure surface as ``ConfigurationError``.

Example document (abridged):

    {
      "dimensions": [{"key": "people_skills", "label": "People & Skills"}],
      "questions": [{"question_id": "PS_01", "dimension": "people_skills",
                     "text": "...", "weight": 4.0,
                     "option_scores": {"0": 0, "2": 2, "5": 5}}],
      "activities": [...], "industries": [...], "company_sizes": [...],
      "recommendations": [...], "action_plan": [...]
    }
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from marketing_ai_readiness.core.config import (
    EngineConfig,
    build_default_config,
    build_engine_config,
)
from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.models import (
    ActionPlanPhase,
    ActivityDefinition,
    CompanySizeProfile,
    DimensionDefinition,
    IndustryProfile,
    Question,
    RecommendationTemplate,
    ScoreBand,
)
from marketing_ai_readiness.core.policy import (
    DEFAULT_ACTIVITY_ROI_MULTIPLIER,
    DEFAULT_OPTION_SCORES,
    WEIGHT_SUM_TOLERANCE,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Document models
# ---------------------------------------------------------------------------


class DimensionDocument(BaseModel):
    """A dimension entry."""

    key: str = Field(..., min_length=1)
    label: str
    strength_insight: str = ""
    gap_insight: str = ""
    risk_message: str = ""

    def to_model(self) -> DimensionDefinition:
        return DimensionDefinition(**self.model_dump())


class QuestionDocument(BaseModel):
    """A question entry. Omitted ``option_scores`` means the 0-5 default map."""

    question_id: str = Field(..., min_length=1)
    dimension: str
    text: str
    weight: float = 1.0
    activity: str | None = None
    industry: str | None = None
    option_scores: dict[int, float | None] | None = None

    def to_model(self) -> Question:
        return Question(
            question_id=self.question_id,
            dimension=self.dimension,
            text=self.text,
            weight=self.weight,
            activity=self.activity,
            industry=self.industry,
            option_scores=(
                dict(self.option_scores)
                if self.option_scores is not None
                else dict(DEFAULT_OPTION_SCORES)
            ),
        )


class ActivityDocument(BaseModel):
    """An activity impact entry."""

    key: str = Field(..., min_length=1)
    label: str
    impact_weight: float
    roi_multiplier: float = DEFAULT_ACTIVITY_ROI_MULTIPLIER
    ai_impact: str = "Moderate"

    def to_model(self) -> ActivityDefinition:
        return ActivityDefinition(**self.model_dump())


class IndustryDocument(BaseModel):
    """An industry weighting and benchmark entry."""

    key: str = Field(..., min_length=1)
    label: str
    dimension_weights: dict[str, float]
    benchmark_average: float | None = None
    benchmark_top_quartile: float | None = None

    def to_model(self) -> IndustryProfile:
        return IndustryProfile(
            key=self.key,
            label=self.label,
            dimension_weights=dict(self.dimension_weights),
            benchmark_average=self.benchmark_average,
            benchmark_top_quartile=self.benchmark_top_quartile,
        )


class CompanySizeDocument(BaseModel):
    """A company size entry."""

    key: str = Field(..., min_length=1)
    label: str
    team_size: int
    cost_per_person: float

    def to_model(self) -> CompanySizeProfile:
        return CompanySizeProfile(**self.model_dump())


class ScoreBandDocument(BaseModel):
    """A half-open score band."""

    name: str
    min: float
    max: float


class RecommendationDocument(BaseModel):
    """A recommendation template entry."""

    template_id: str = Field(..., min_length=1)
    priority: str
    title: str
    body: str
    score_band: ScoreBandDocument
    dimension: str | None = None
    activity: str | None = None
    industry: str | None = None
    horizon: str = "immediate"
    investment_hint: str | None = None
    timeline_hint: str | None = None

    def to_model(self) -> RecommendationTemplate:
        data = self.model_dump(exclude={"score_band"})
        return RecommendationTemplate(
            score_band=ScoreBand(**self.score_band.model_dump()),
            **data,
        )


class ActionPlanDocument(BaseModel):
    """An action plan phase entry."""

    band: str
    phase: str
    title: str
    description: str
    key_actions: list[str] = Field(default_factory=list)
    expected_outcome: str

    def to_model(self) -> ActionPlanPhase:
        return ActionPlanPhase(
            band=self.band,
            phase=self.phase,
            title=self.title,
            description=self.description,
            key_actions=tuple(self.key_actions),
            expected_outcome=self.expected_outcome,
        )


class ConfigDocument(BaseModel):
    """Top-level configuration document."""

    dimensions: list[DimensionDocument]
    questions: list[QuestionDocument]
    activities: list[ActivityDocument] = Field(default_factory=list)
    industries: list[IndustryDocument] = Field(default_factory=list)
    company_sizes: list[CompanySizeDocument]
    recommendations: list[RecommendationDocument] = Field(default_factory=list)
    action_plan: list[ActionPlanDocument] = Field(default_factory=list)

    def to_engine_config(self, weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE) -> EngineConfig:
        """Validate the document's tables and build an EngineConfig.

        Raises:
            ConfigurationError: If the tables are semantically invalid.
        """
        return build_engine_config(
            dimensions=[d.to_model() for d in self.dimensions],
            questions=[q.to_model() for q in self.questions],
            activities=[a.to_model() for a in self.activities],
            industries=[i.to_model() for i in self.industries],
            company_sizes=[s.to_model() for s in self.company_sizes],
            recommendations=[r.to_model() for r in self.recommendations],
            action_plan=[p.to_model() for p in self.action_plan],
            weight_sum_tolerance=weight_sum_tolerance,
        )

    @classmethod
    def from_engine_config(cls, config: EngineConfig) -> "ConfigDocument":
        """Export an EngineConfig as a document, e.g. to seed a JSON override."""
        return cls(
            dimensions=[DimensionDocument(**vars(d)) for d in config.dimensions],
            questions=[
                QuestionDocument(
                    question_id=q.question_id,
                    dimension=q.dimension,
                    text=q.text,
                    weight=q.weight,
                    activity=q.activity,
                    industry=q.industry,
                    option_scores=dict(q.option_scores),
                )
                for q in config.questions
            ],
            activities=[ActivityDocument(**vars(a)) for a in config.activities.values()],
            industries=[
                IndustryDocument(
                    key=i.key,
                    label=i.label,
                    dimension_weights=dict(i.dimension_weights),
                    benchmark_average=i.benchmark_average,
                    benchmark_top_quartile=i.benchmark_top_quartile,
                )
                for i in config.industries.values()
            ],
            company_sizes=[CompanySizeDocument(**vars(s)) for s in config.company_sizes.values()],
            recommendations=[
                RecommendationDocument(
                    template_id=t.template_id,
                    priority=t.priority,
                    title=t.title,
                    body=t.body,
                    score_band=ScoreBandDocument(**vars(t.score_band)),
                    dimension=t.dimension,
                    activity=t.activity,
                    industry=t.industry,
                    horizon=t.horizon,
                    investment_hint=t.investment_hint,
                    timeline_hint=t.timeline_hint,
                )
                for t in config.recommendations
            ],
            action_plan=[
                ActionPlanDocument(
                    band=p.band,
                    phase=p.phase,
                    title=p.title,
                    description=p.description,
                    key_actions=list(p.key_actions),
                    expected_outcome=p.expected_outcome,
                )
                for p in config.action_plan
            ],
        )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def parse_config_document(raw: str | bytes) -> ConfigDocument:
    """Parse JSON text into a ConfigDocument.

    Args:
        raw: JSON document text.

    Returns:
        The parsed ConfigDocument.

    Raises:
        ConfigurationError: If the JSON is malformed or has the wrong shape.
    """
    try:
        return ConfigDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration document: {exc}") from exc


def load_config_file(
    path: str | Path,
    weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE,
) -> EngineConfig:
    """Load and validate an EngineConfig from a JSON file.

    Args:
        path: Path to the JSON document.
        weight_sum_tolerance: Allowed deviation of industry weight sums from 1.0.

    Returns:
        A validated EngineConfig.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read configuration file {str(config_path)!r}: {exc}"
        ) from exc

    config = parse_config_document(raw).to_engine_config(weight_sum_tolerance)
    logger.info("Configuration loaded from file", path=str(config_path))
    return config


def load_engine_config(
    config_path: str = "",
    weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE,
) -> EngineConfig:
    """Load the engine configuration from a JSON file or the built-in catalogs.

    Args:
        config_path: JSON document path; empty means the built-in catalogs.
        weight_sum_tolerance: Allowed deviation of industry weight sums from 1.0.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    if config_path:
        return load_config_file(config_path, weight_sum_tolerance)
    return build_default_config(weight_sum_tolerance)
