"""Validated, immutable engine configuration.

``build_engine_config`` is the single entry point for turning catalog tables
into an ``EngineConfig``. Every structural problem (weight sums, duplicate
ids, dangling references, bad bands) is reported here as a
``ConfigurationError`` so that scoring never runs against a broken catalog.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from marketing_ai_readiness.core.activity_config import ACTIVITIES, COMPANY_SIZES
from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.industry_config import (
    INDUSTRY_PROFILES,
    default_industry_profile,
)
from marketing_ai_readiness.core.models import (
    ActionPlanPhase,
    ActivityDefinition,
    CompanySizeProfile,
    DimensionDefinition,
    IndustryProfile,
    Question,
    RecommendationTemplate,
)
from marketing_ai_readiness.core.policy import (
    ACTION_PLAN_BANDS,
    ACTIVITY_BANDS,
    DEFAULT_COMPANY_SIZE,
    DIMENSION_BANDS,
    INDUSTRY_BANDS,
    PRIORITY_ORDER,
    RECOMMENDATION_HORIZONS,
    SCORE_MAX,
    SCORE_MIN,
    WEIGHT_SUM_TOLERANCE,
)
from marketing_ai_readiness.core.questions import DIMENSION_DEFINITIONS, QUESTION_BANK
from marketing_ai_readiness.core.recommendation_config import (
    ACTION_PLAN_PHASES,
    RECOMMENDATION_CATALOG,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)

# Templates may only use the shared band cut points for their kind.
_TEMPLATE_BANDS: dict[str, list[tuple[str, float, float]]] = {
    "dimension": DIMENSION_BANDS,
    "activity": ACTIVITY_BANDS,
    "industry": INDUSTRY_BANDS,
}


@dataclass(frozen=True)
class EngineConfig:
    """Read-only tables consumed by the scoring pipeline.

    Instances are produced by ``build_engine_config`` and are safe to share
    between concurrent assessments.
    """

    dimensions: tuple[DimensionDefinition, ...]
    questions: tuple[Question, ...]
    activities: dict[str, ActivityDefinition]
    industries: dict[str, IndustryProfile]
    default_industry: IndustryProfile
    company_sizes: dict[str, CompanySizeProfile]
    recommendations: tuple[RecommendationTemplate, ...]
    action_plan: tuple[ActionPlanPhase, ...]
    questions_by_id: dict[str, Question]
    questions_by_dimension: dict[str, tuple[Question, ...]]
    questions_by_activity: dict[str, tuple[Question, ...]]

    @property
    def dimension_keys(self) -> list[str]:
        """Dimension keys in declaration order."""
        return [definition.key for definition in self.dimensions]

    @property
    def activity_impact_weights(self) -> dict[str, float]:
        """Activity key -> static impact weight."""
        return {key: activity.impact_weight for key, activity in self.activities.items()}

    @property
    def activity_roi_multipliers(self) -> dict[str, float]:
        """Activity key -> theoretical ROI multiplier."""
        return {key: activity.roi_multiplier for key, activity in self.activities.items()}

    def industry_profile(self, industry_key: str | None) -> IndustryProfile:
        """Return the profile for an industry, or the equal-weight default.

        Args:
            industry_key: Industry identifier; None or unknown keys fall back.

        Returns:
            The matching IndustryProfile or the default profile.
        """
        if industry_key is None:
            return self.default_industry
        return self.industries.get(industry_key, self.default_industry)

    def company_size(self, company_size_key: str | None) -> CompanySizeProfile:
        """Return the company size profile, falling back to 'small'."""
        if company_size_key is not None and company_size_key in self.company_sizes:
            return self.company_sizes[company_size_key]
        return self.company_sizes[DEFAULT_COMPANY_SIZE]

    def questions_for(
        self,
        activities: Iterable[str] = (),
        industry_key: str | None = None,
    ) -> list[Question]:
        """Return the questions a respondent would be asked.

        Core questions are always included; activity questions only for the
        given activities and industry questions only for the given industry.

        Args:
            activities: Selected activity keys.
            industry_key: Selected industry key.

        Returns:
            Questions in catalog order.
        """
        selected = set(activities)
        result: list[Question] = []
        for question in self.questions:
            if question.activity is not None and question.activity not in selected:
                continue
            if question.industry is not None and question.industry != industry_key:
                continue
            result.append(question)
        return result

    def dimension_questions_for(
        self,
        activities: Iterable[str] = (),
        industry_key: str | None = None,
    ) -> dict[str, tuple[Question, ...]]:
        """Group the asked questions by the dimension they declare.

        Activity and industry questions count toward their dimension only
        when the respondent was asked them.
        """
        grouped: dict[str, list[Question]] = {key: [] for key in self.dimension_keys}
        for question in self.questions_for(activities, industry_key):
            grouped[question.dimension].append(question)
        return {key: tuple(questions) for key, questions in grouped.items()}


def _check_unique(keys: Iterable[str], kind: str) -> None:
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise ConfigurationError(f"Duplicate {kind} {key!r}")
        seen.add(key)


def _check_score_range(value: float, label: str) -> None:
    if not math.isfinite(value) or not SCORE_MIN <= value <= SCORE_MAX:
        raise ConfigurationError(f"{label} must be within 0-100, got {value!r}")


def _validate_question(
    question: Question,
    dimension_keys: set[str],
    activity_keys: set[str],
    industry_keys: set[str],
) -> None:
    qid = question.question_id
    if question.dimension not in dimension_keys:
        raise ConfigurationError(
            f"Question {qid!r} references unknown dimension {question.dimension!r}"
        )
    if question.activity is not None and question.industry is not None:
        raise ConfigurationError(
            f"Question {qid!r} cannot belong to both an activity and an industry"
        )
    if question.activity is not None and question.activity not in activity_keys:
        raise ConfigurationError(
            f"Question {qid!r} references unknown activity {question.activity!r}"
        )
    if question.industry is not None and question.industry not in industry_keys:
        raise ConfigurationError(
            f"Question {qid!r} references unknown industry {question.industry!r}"
        )
    if not math.isfinite(question.weight) or question.weight <= 0:
        raise ConfigurationError(f"Question {qid!r} weight must be > 0")
    if not question.option_scores:
        raise ConfigurationError(f"Question {qid!r} has no answer options")
    applicable = [points for points in question.option_scores.values() if points is not None]
    if not applicable:
        raise ConfigurationError(f"Question {qid!r} has no applicable answer options")
    for points in applicable:
        if not math.isfinite(points) or points < 0:
            raise ConfigurationError(f"Question {qid!r} has invalid option points {points!r}")


def _validate_industry(
    profile: IndustryProfile,
    dimension_keys: set[str],
    tolerance: float,
) -> None:
    unknown = set(profile.dimension_weights) - dimension_keys
    if unknown:
        raise ConfigurationError(
            f"Industry {profile.key!r} weights unknown dimensions {sorted(unknown)}"
        )
    for dimension, weight in profile.dimension_weights.items():
        if not math.isfinite(weight) or weight < 0:
            raise ConfigurationError(
                f"Industry {profile.key!r} has invalid weight {weight!r} for {dimension!r}"
            )
    total = sum(profile.dimension_weights.values())
    if abs(total - 1.0) > tolerance:
        raise ConfigurationError(
            f"Industry {profile.key!r} dimension weights sum to {total:.4f}, expected 1.0"
        )

    average = profile.benchmark_average
    top_quartile = profile.benchmark_top_quartile
    if (average is None) != (top_quartile is None):
        raise ConfigurationError(
            f"Industry {profile.key!r} must set both benchmark values or neither"
        )
    if average is not None and top_quartile is not None:
        _check_score_range(average, f"Industry {profile.key!r} benchmark average")
        _check_score_range(top_quartile, f"Industry {profile.key!r} top quartile")
        if top_quartile < average:
            raise ConfigurationError(
                f"Industry {profile.key!r} top quartile {top_quartile} is below "
                f"average {average}"
            )


def _validate_template(
    template: RecommendationTemplate,
    dimension_keys: set[str],
    activity_keys: set[str],
    industry_keys: set[str],
) -> None:
    tid = template.template_id
    targets = [
        key
        for key in (template.dimension, template.activity, template.industry)
        if key is not None
    ]
    if len(targets) != 1:
        raise ConfigurationError(
            f"Template {tid!r} must apply to exactly one dimension, activity, or industry"
        )
    kind, key = template.applies_to
    known = {
        "dimension": dimension_keys,
        "activity": activity_keys,
        "industry": industry_keys,
    }[kind]
    if key not in known:
        raise ConfigurationError(f"Template {tid!r} references unknown {kind} {key!r}")
    if template.priority not in PRIORITY_ORDER:
        raise ConfigurationError(f"Template {tid!r} has unknown priority {template.priority!r}")
    if template.horizon not in RECOMMENDATION_HORIZONS:
        raise ConfigurationError(f"Template {tid!r} has unknown horizon {template.horizon!r}")
    band = template.score_band
    _check_score_range(band.min, f"Template {tid!r} band minimum")
    _check_score_range(band.max, f"Template {tid!r} band maximum")
    if band.min >= band.max:
        raise ConfigurationError(f"Template {tid!r} has an empty score band {band.name!r}")
    if (band.name, band.min, band.max) not in _TEMPLATE_BANDS[kind]:
        raise ConfigurationError(
            f"Template {tid!r} band {band.name!r} [{band.min}, {band.max}) is not a "
            f"configured {kind} band"
        )


def build_engine_config(
    dimensions: Iterable[DimensionDefinition],
    questions: Iterable[Question],
    activities: Iterable[ActivityDefinition],
    industries: Iterable[IndustryProfile],
    company_sizes: Iterable[CompanySizeProfile],
    recommendations: Iterable[RecommendationTemplate],
    action_plan: Iterable[ActionPlanPhase] = (),
    weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE,
) -> EngineConfig:
    """Validate catalog tables and assemble an EngineConfig.

    Args:
        dimensions: Dimension definitions.
        questions: Question catalog.
        activities: Activity impact table.
        industries: Industry weighting and benchmark table.
        company_sizes: Company size table; must contain 'small'.
        recommendations: Recommendation template catalog.
        action_plan: Action plan phases keyed by overall-score band.
        weight_sum_tolerance: Allowed deviation of industry weight sums from 1.0.

    Returns:
        An immutable EngineConfig ready for scoring.

    Raises:
        ConfigurationError: If any table is malformed.
    """
    dimension_list = tuple(dimensions)
    question_list = tuple(questions)
    activity_list = list(activities)
    industry_list = list(industries)
    size_list = list(company_sizes)
    template_list = tuple(recommendations)
    phase_list = tuple(action_plan)

    if not dimension_list:
        raise ConfigurationError("At least one dimension must be configured")
    _check_unique((d.key for d in dimension_list), "dimension")
    _check_unique((a.key for a in activity_list), "activity")
    _check_unique((i.key for i in industry_list), "industry")
    _check_unique((s.key for s in size_list), "company size")
    _check_unique((q.question_id for q in question_list), "question id")
    _check_unique((t.template_id for t in template_list), "template id")

    dimension_keys = {d.key for d in dimension_list}
    activity_keys = {a.key for a in activity_list}
    industry_keys = {i.key for i in industry_list}

    for activity in activity_list:
        if not math.isfinite(activity.impact_weight) or activity.impact_weight <= 0:
            raise ConfigurationError(f"Activity {activity.key!r} impact weight must be > 0")
        if not math.isfinite(activity.roi_multiplier) or activity.roi_multiplier < 1.0:
            raise ConfigurationError(f"Activity {activity.key!r} ROI multiplier must be >= 1.0")

    for size in size_list:
        if size.team_size <= 0 or size.cost_per_person <= 0:
            raise ConfigurationError(
                f"Company size {size.key!r} needs a positive team size and cost per person"
            )
    if DEFAULT_COMPANY_SIZE not in {s.key for s in size_list}:
        raise ConfigurationError(f"Company size table must include {DEFAULT_COMPANY_SIZE!r}")

    for profile in industry_list:
        _validate_industry(profile, dimension_keys, weight_sum_tolerance)

    for question in question_list:
        _validate_question(question, dimension_keys, activity_keys, industry_keys)

    for template in template_list:
        _validate_template(template, dimension_keys, activity_keys, industry_keys)

    plan_bands = {name for name, _, _ in ACTION_PLAN_BANDS}
    for phase in phase_list:
        if phase.band not in plan_bands:
            raise ConfigurationError(
                f"Action plan phase {phase.phase!r} has unknown band {phase.band!r}"
            )

    dimension_order = [d.key for d in dimension_list]
    by_dimension: dict[str, list[Question]] = {key: [] for key in dimension_order}
    by_activity: dict[str, list[Question]] = {}
    for question in question_list:
        by_dimension[question.dimension].append(question)
        if question.activity is not None:
            by_activity.setdefault(question.activity, []).append(question)

    config = EngineConfig(
        dimensions=dimension_list,
        questions=question_list,
        activities={a.key: a for a in activity_list},
        industries={i.key: i for i in industry_list},
        default_industry=default_industry_profile(dimension_order),
        company_sizes={s.key: s for s in size_list},
        recommendations=template_list,
        action_plan=phase_list,
        questions_by_id={q.question_id: q for q in question_list},
        questions_by_dimension={key: tuple(qs) for key, qs in by_dimension.items()},
        questions_by_activity={key: tuple(qs) for key, qs in by_activity.items()},
    )

    logger.info(
        "Engine configuration built",
        dimensions=len(dimension_list),
        questions=len(question_list),
        activities=len(activity_list),
        industries=len(industry_list),
        templates=len(template_list),
    )
    return config


def build_default_config(weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE) -> EngineConfig:
    """Build an EngineConfig from the built-in catalog modules.

    Raises:
        ConfigurationError: If a built-in table is invalid.
    """
    return build_engine_config(
        dimensions=DIMENSION_DEFINITIONS,
        questions=QUESTION_BANK,
        activities=ACTIVITIES,
        industries=INDUSTRY_PROFILES,
        company_sizes=COMPANY_SIZES,
        recommendations=RECOMMENDATION_CATALOG,
        action_plan=ACTION_PLAN_PHASES,
        weight_sum_tolerance=weight_sum_tolerance,
    )


@lru_cache(maxsize=1)
def get_default_config() -> EngineConfig:
    """Return the process-wide EngineConfig built from the built-in catalogs."""
    return build_default_config()

