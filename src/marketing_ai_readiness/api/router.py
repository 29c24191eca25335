"""FastAPI router for the marketing AI readiness assessment.

All routes are thin: they parse inputs, build dependencies, delegate to
ReadinessAssessmentService, and serialise responses. No business logic
lives here.

API prefix: /api/v1/assessments
Auth: None. Every request carries a complete answer set; nothing is stored.
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, status

from marketing_ai_readiness.adapters.config_loader import load_engine_config
from marketing_ai_readiness.api.schemas import (
    ActivityListResponse,
    ActivitySchema,
    CompanySizeListResponse,
    CompanySizeSchema,
    IndustryListResponse,
    IndustrySchema,
    QuestionListResponse,
    QuestionSchema,
    ScoreRequest,
    ScoreResponse,
)
from marketing_ai_readiness.core.config import EngineConfig
from marketing_ai_readiness.core.errors import ConfigurationError, InvalidAnswerError
from marketing_ai_readiness.core.models import AssessmentInput
from marketing_ai_readiness.core.services import ReadinessAssessmentService
from marketing_ai_readiness.observability import get_logger
from marketing_ai_readiness.settings import Settings

logger = get_logger(__name__)

router = APIRouter(prefix="/assessments", tags=["Marketing AI Readiness"])

_UNAVAILABLE_DETAIL = "Assessment configuration is unavailable."


# ---------------------------------------------------------------------------
# Dependency factories
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings()


@lru_cache(maxsize=1)
def get_engine_config() -> EngineConfig:
    """Load and validate the engine configuration once per process.

    Raises:
        ConfigurationError: If the configuration is invalid. Failures are not
            cached, so a corrected file is picked up on the next call.
    """
    settings = get_settings()
    return load_engine_config(settings.config_path, settings.weight_sum_tolerance)


def get_assessment_service() -> ReadinessAssessmentService:
    """Build ReadinessAssessmentService backed by the cached configuration.

    Returns:
        Configured ReadinessAssessmentService instance.
    """
    return ReadinessAssessmentService(
        config_provider=get_engine_config,
        max_recommendations=get_settings().recommendation_max_results,
    )


def _unavailable(exc: ConfigurationError) -> HTTPException:
    logger.error("Catalog unavailable: invalid configuration", error=str(exc))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=_UNAVAILABLE_DETAIL,
    )


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


@router.post(
    "/score",
    response_model=ScoreResponse,
    status_code=status.HTTP_200_OK,
    summary="Score a complete answer set",
)
async def score_assessment(
    body: ScoreRequest,
    service: ReadinessAssessmentService = Depends(get_assessment_service),
) -> ScoreResponse:
    """Score a marketing AI readiness assessment.

    Returns dimension and activity scores, the benchmark-normalised overall
    score, readiness category, ranked recommendations, and an illustrative
    impact estimate. When the configuration is invalid the response is the
    neutral fallback with ``degraded: true``.
    """
    assessment = AssessmentInput(
        answers=dict(body.answers),
        selected_activities=tuple(body.selected_activities),
        industry=body.industry,
        company_size=body.company_size,
    )
    try:
        result = service.score(assessment, max_results=body.max_results)
    except InvalidAnswerError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc

    return ScoreResponse.model_validate(result.to_dict())


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------


@router.get(
    "/industries",
    response_model=IndustryListResponse,
    summary="List supported industries",
)
async def list_industries(
    service: ReadinessAssessmentService = Depends(get_assessment_service),
) -> IndustryListResponse:
    """Return industry profiles with their dimension weights and benchmarks."""
    try:
        industries = service.list_industries()
    except ConfigurationError as exc:
        raise _unavailable(exc) from exc

    items = [
        IndustrySchema(
            key=profile.key,
            label=profile.label,
            dimension_weights=dict(profile.dimension_weights),
            benchmark_average=profile.benchmark_average,
            benchmark_top_quartile=profile.benchmark_top_quartile,
        )
        for profile in industries
    ]
    return IndustryListResponse(industries=items, total=len(items))


@router.get(
    "/activities",
    response_model=ActivityListResponse,
    summary="List marketing activities",
)
async def list_activities(
    service: ReadinessAssessmentService = Depends(get_assessment_service),
) -> ActivityListResponse:
    """Return marketing activities with impact weights and ROI multipliers."""
    try:
        activities = service.list_activities()
    except ConfigurationError as exc:
        raise _unavailable(exc) from exc

    items = [
        ActivitySchema(
            key=activity.key,
            label=activity.label,
            impact_weight=activity.impact_weight,
            roi_multiplier=activity.roi_multiplier,
            ai_impact=activity.ai_impact,
        )
        for activity in activities
    ]
    return ActivityListResponse(activities=items, total=len(items))


@router.get(
    "/company-sizes",
    response_model=CompanySizeListResponse,
    summary="List company size brackets",
)
async def list_company_sizes(
    service: ReadinessAssessmentService = Depends(get_assessment_service),
) -> CompanySizeListResponse:
    """Return company size brackets used for impact estimates."""
    try:
        sizes = service.list_company_sizes()
    except ConfigurationError as exc:
        raise _unavailable(exc) from exc

    items = [
        CompanySizeSchema(
            key=size.key,
            label=size.label,
            team_size=size.team_size,
            cost_per_person=size.cost_per_person,
        )
        for size in sizes
    ]
    return CompanySizeListResponse(company_sizes=items, total=len(items))


@router.get(
    "/questions",
    response_model=QuestionListResponse,
    summary="List questions for the selected activities and industry",
)
async def list_questions(
    activities: list[str] = Query(default=[], description="Selected activity keys"),
    industry: str | None = Query(default=None, description="Selected industry key"),
    service: ReadinessAssessmentService = Depends(get_assessment_service),
) -> QuestionListResponse:
    """Return core questions plus activity and industry questions for the selection."""
    try:
        questions = service.list_questions(activities=activities, industry=industry)
    except ConfigurationError as exc:
        raise _unavailable(exc) from exc

    items = [
        QuestionSchema(
            question_id=question.question_id,
            dimension=question.dimension,
            text=question.text,
            weight=question.weight,
            activity=question.activity,
            industry=question.industry,
            options=sorted(question.option_scores),
        )
        for question in questions
    ]
    return QuestionListResponse(questions=items, total=len(items))
