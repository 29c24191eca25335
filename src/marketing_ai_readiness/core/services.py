"""Service layer between the HTTP boundary and the readiness engine.

Implements the stateless assessment flow:
    1. score() - scores one complete answer set
    2. list_industries() - industry catalog
    3. list_activities() - activity catalog
    4. list_company_sizes() - company size catalog
    5. list_questions() - question catalog filtered by selections

Configuration is obtained from an injected provider, normally a cached
loader. If the configuration is invalid, ``score`` returns the degraded
``OverallResult.unavailable`` result instead of a fabricated score, while
the catalog operations let ``ConfigurationError`` propagate.
No FastAPI imports belong here.
"""

from collections.abc import Callable, Iterable

from marketing_ai_readiness.core.config import EngineConfig
from marketing_ai_readiness.core.engine import ReadinessEngine
from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.models import (
    ActivityDefinition,
    AssessmentInput,
    CompanySizeProfile,
    IndustryProfile,
    OverallResult,
    Question,
)
from marketing_ai_readiness.core.policy import (
    DEFAULT_COMPANY_SIZE,
    DEFAULT_MAX_RECOMMENDATIONS,
)
from marketing_ai_readiness.core.questions import ALL_DIMENSIONS
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


class ReadinessAssessmentService:
    """Orchestrates scoring and catalog lookups for the readiness assessment.

    Args:
        config_provider: Zero-argument callable returning the EngineConfig.
            May raise ConfigurationError.
        max_recommendations: Default cap on returned recommendations.
    """

    def __init__(
        self,
        config_provider: Callable[[], EngineConfig],
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
    ) -> None:
        self._config_provider = config_provider
        self._max_recommendations = max_recommendations

    def score(
        self,
        assessment: AssessmentInput,
        max_results: int | None = None,
    ) -> OverallResult:
        """Score one assessment.

        Args:
            assessment: Answers and selections for the assessment.
            max_results: Optional recommendation cap for this request.

        Returns:
            The OverallResult, or the degraded fallback flagged
            ``degraded=True`` when the configuration is invalid.

        Raises:
            InvalidAnswerError: If an answer is not a valid option.
        """
        try:
            config = self._config_provider()
        except ConfigurationError as exc:
            logger.error(
                "Assessment unavailable: invalid configuration",
                error=str(exc),
                industry=assessment.industry,
            )
            return OverallResult.unavailable(
                list(ALL_DIMENSIONS),
                industry=assessment.industry or "",
                company_size=assessment.company_size or DEFAULT_COMPANY_SIZE,
            )

        engine = ReadinessEngine(config, max_recommendations=self._max_recommendations)
        return engine.assess(assessment, max_results=max_results)

    def list_industries(self) -> list[IndustryProfile]:
        """Return the configured industry profiles.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        return list(self._config_provider().industries.values())

    def list_activities(self) -> list[ActivityDefinition]:
        """Return the configured marketing activities.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        return list(self._config_provider().activities.values())

    def list_company_sizes(self) -> list[CompanySizeProfile]:
        """Return the configured company sizes.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        return list(self._config_provider().company_sizes.values())

    def list_questions(
        self,
        activities: Iterable[str] = (),
        industry: str | None = None,
    ) -> list[Question]:
        """Return core questions plus those for the given activities and industry.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        return self._config_provider().questions_for(activities, industry)
