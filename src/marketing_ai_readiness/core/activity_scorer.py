"""Scoring of the marketing activities a respondent selected."""

from collections.abc import Iterable, Mapping

from marketing_ai_readiness.core.dimension_scorer import weighted_question_average
from marketing_ai_readiness.core.models import ActivityScore, Question
from marketing_ai_readiness.core.policy import (
    ACTIVITY_TIER_THRESHOLDS,
    DEFAULT_ACTIVITY_IMPACT_WEIGHT,
    NEUTRAL_ACTIVITY_SCORE,
    NEUTRAL_ACTIVITY_TIER,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)

_DEFAULT_AI_IMPACT = "Moderate"


def readiness_tier(score: float) -> str:
    """Map an activity score to its readiness tier.

    Args:
        score: Activity score in range 0-100.

    Returns:
        One of 'advanced', 'proficient', 'basic', 'beginner'.
    """
    for threshold, tier in ACTIVITY_TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return ACTIVITY_TIER_THRESHOLDS[-1][1]


class ActivityScorer:
    """Produces one ActivityScore for every selected activity."""

    def score(
        self,
        answers: Mapping[str, int],
        selected_activities: Iterable[str],
        questions_by_activity: Mapping[str, Iterable[Question]],
        activity_impact_weights: Mapping[str, float],
        ai_impact_labels: Mapping[str, str] | None = None,
    ) -> dict[str, ActivityScore]:
        """Score each selected activity.

        An activity with no configured questions gets the neutral score 50
        and tier 'moderate'. Otherwise the activity is scored like a
        dimension over its own questions. Selected activities are
        deduplicated while keeping first-seen order.

        Args:
            answers: Question id -> raw option value.
            selected_activities: Activity keys chosen by the respondent.
            questions_by_activity: Activity key -> its questions.
            activity_impact_weights: Activity key -> static impact weight.
            ai_impact_labels: Activity key -> qualitative AI impact label.

        Returns:
            Activity key -> ActivityScore, in selection order.

        Raises:
            ConfigurationError: On duplicate question ids within an activity.
            InvalidAnswerError: On an answer outside a question's options.
        """
        labels = ai_impact_labels or {}
        scores: dict[str, ActivityScore] = {}

        for activity in dict.fromkeys(selected_activities):
            impact_weight = activity_impact_weights.get(activity, DEFAULT_ACTIVITY_IMPACT_WEIGHT)
            ai_impact = labels.get(activity, _DEFAULT_AI_IMPACT)
            questions = list(questions_by_activity.get(activity, ()))

            if not questions:
                scores[activity] = ActivityScore(
                    activity=activity,
                    value=NEUTRAL_ACTIVITY_SCORE,
                    readiness_tier=NEUTRAL_ACTIVITY_TIER,
                    impact_weight=impact_weight,
                    ai_impact=ai_impact,
                )
                continue

            value, answered = weighted_question_average(answers, questions)
            value = round(value, 2)
            scores[activity] = ActivityScore(
                activity=activity,
                value=value,
                readiness_tier=readiness_tier(value),
                impact_weight=impact_weight,
                answered_questions=answered,
                ai_impact=ai_impact,
            )

        logger.debug(
            "Activity scores computed",
            scores={key: score.value for key, score in scores.items()},
        )
        return scores
