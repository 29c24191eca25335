"""Readiness assessment pipeline.

Wires the scoring stages together in a single synchronous pass. Dimension
and activity scores are computed independently, composed into the overall
score, and then fed to classification, recommendation selection, impact
estimation, and the insight builder.

The engine holds only the immutable EngineConfig and stateless components,
so one instance can serve any number of concurrent assessments.
"""

from collections.abc import Mapping

from marketing_ai_readiness.core.activity_scorer import ActivityScorer
from marketing_ai_readiness.core.classifier import ReadinessClassifier
from marketing_ai_readiness.core.composer import OverallScoreComposer
from marketing_ai_readiness.core.config import EngineConfig
from marketing_ai_readiness.core.dimension_scorer import DimensionScorer
from marketing_ai_readiness.core.impact import ImpactEstimator
from marketing_ai_readiness.core.insights import InsightBuilder
from marketing_ai_readiness.core.models import AssessmentInput, OverallResult
from marketing_ai_readiness.core.policy import DEFAULT_MAX_RECOMMENDATIONS
from marketing_ai_readiness.core.recommendations import RecommendationSelector
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


class ReadinessEngine:
    """Scores one answer set against a validated configuration.

    Args:
        config: Validated engine configuration.
        max_recommendations: Default cap on returned recommendations.
    """

    def __init__(
        self,
        config: EngineConfig,
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
    ) -> None:
        self._config = config
        self._max_recommendations = max_recommendations
        self._dimension_scorer = DimensionScorer()
        self._activity_scorer = ActivityScorer()
        self._composer = OverallScoreComposer()
        self._classifier = ReadinessClassifier()
        self._selector = RecommendationSelector()
        self._impact = ImpactEstimator(config.company_sizes)
        self._insights = InsightBuilder(
            dimensions=config.dimensions,
            activities=config.activities,
            action_plan=config.action_plan,
        )

    @property
    def config(self) -> EngineConfig:
        """The configuration this engine scores against."""
        return self._config

    def _checked_answers(self, answers: Mapping[str, int]) -> dict[str, int]:
        """Drop unknown question ids and validate the remaining option values.

        Raises:
            InvalidAnswerError: If a known question receives an unknown option.
        """
        known: dict[str, int] = {}
        unknown: list[str] = []
        for question_id, raw_value in answers.items():
            question = self._config.questions_by_id.get(question_id)
            if question is None:
                unknown.append(question_id)
                continue
            question.normalize(raw_value)
            known[question_id] = raw_value
        if unknown:
            logger.warning("Ignoring answers for unknown questions", question_ids=sorted(unknown))
        return known

    def assess(
        self,
        assessment: AssessmentInput,
        max_results: int | None = None,
    ) -> OverallResult:
        """Run the full pipeline for one assessment.

        Args:
            assessment: Answers plus optional activity, industry, and
                company size selections.
            max_results: Recommendation cap; defaults to the engine's cap.

        Returns:
            A self-contained OverallResult.

        Raises:
            InvalidAnswerError: If an answer is not a valid option.
        """
        config = self._config
        answers = self._checked_answers(assessment.answers)
        profile = config.industry_profile(assessment.industry)
        if assessment.industry is not None and profile.key != assessment.industry:
            logger.info(
                "Unknown industry, using default profile",
                industry=assessment.industry,
            )

        dimension_questions = config.dimension_questions_for(
            assessment.selected_activities, profile.key
        )
        dimension_scores = self._dimension_scorer.score(answers, dimension_questions)
        activity_scores = self._activity_scorer.score(
            answers,
            assessment.selected_activities,
            config.questions_by_activity,
            config.activity_impact_weights,
            {key: activity.ai_impact for key, activity in config.activities.items()},
        )

        overall_score = self._composer.compose(dimension_scores, activity_scores, profile)
        classification = self._classifier.classify(overall_score, profile)

        recommendations = self._selector.select(
            dimension_scores,
            activity_scores,
            overall_score,
            profile.key,
            config.recommendations,
            max_results=self._max_recommendations if max_results is None else max_results,
        )
        impact_estimate = self._impact.estimate(
            overall_score,
            activity_scores,
            assessment.company_size,
            config.activity_roi_multipliers,
        )

        result = OverallResult(
            overall_score=overall_score,
            dimension_scores=dimension_scores,
            activity_scores=activity_scores,
            readiness_category=classification.category,
            percentile_estimate=classification.percentile_estimate,
            recommendations=recommendations,
            impact_estimate=impact_estimate,
            industry=profile.key,
            company_size=impact_estimate.company_size,
            industry_comparison=self._insights.industry_comparison(overall_score, profile),
            readiness_metrics=self._insights.readiness_metrics(dimension_scores, activity_scores),
            insights=self._insights.insights(
                dimension_scores, activity_scores, overall_score, profile
            ),
            risk_factors=self._insights.risk_factors(dimension_scores, activity_scores),
            action_plan=self._insights.action_plan(overall_score),
        )

        logger.info(
            "Assessment scored",
            overall_score=overall_score,
            readiness_category=classification.category,
            industry=profile.key,
            activities=len(activity_scores),
            recommendations=len(recommendations),
        )
        return result
