"""Per-dimension weighted scoring of Likert answers.

Each answered question is normalised to 0-100 against its own highest
option, multiplied by the question weight, and averaged over the answered
questions of the dimension. Unanswered and "not applicable" questions add
nothing to either the weighted sum or the weight total.
"""

from collections.abc import Iterable, Mapping

from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.models import DimensionScore, Question
from marketing_ai_readiness.core.policy import SCORE_MIN, clamp_score
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


def weighted_question_average(
    answers: Mapping[str, int],
    questions: Iterable[Question],
) -> tuple[float, int]:
    """Compute the weighted 0-100 average over the answered questions.

    Args:
        answers: Question id -> raw option value.
        questions: Questions in scope for this aggregate.

    Returns:
        Tuple of (score, answered question count). The score is 0.0 when no
        applicable answer is present.

    Raises:
        ConfigurationError: If the same question id appears twice in scope.
        InvalidAnswerError: If an answer is not one of a question's options.
    """
    seen: set[str] = set()
    weighted_sum = 0.0
    weight_total = 0.0
    answered = 0

    for question in questions:
        if question.question_id in seen:
            raise ConfigurationError(f"Duplicate question id {question.question_id!r}")
        seen.add(question.question_id)

        if question.question_id not in answers:
            continue
        normalised = question.normalize(answers[question.question_id])
        if normalised is None:
            continue
        weighted_sum += normalised * question.weight
        weight_total += question.weight
        answered += 1

    if weight_total <= 0.0:
        return SCORE_MIN, 0
    return clamp_score(weighted_sum / weight_total), answered


class DimensionScorer:
    """Aggregates answers into one DimensionScore per configured dimension."""

    def score(
        self,
        answers: Mapping[str, int],
        questions_by_dimension: Mapping[str, Iterable[Question]],
    ) -> dict[str, DimensionScore]:
        """Score every dimension in ``questions_by_dimension``.

        A dimension with no applicable answers scores 0.0 with
        ``answered_questions == 0`` so callers can tell missing data apart
        from measured low maturity.

        Args:
            answers: Question id -> raw option value.
            questions_by_dimension: Dimension key -> its questions.

        Returns:
            Dimension key -> DimensionScore, in the mapping's key order.

        Raises:
            ConfigurationError: On duplicate question ids.
            InvalidAnswerError: On an answer outside a question's options.
        """
        scores: dict[str, DimensionScore] = {}
        seen: set[str] = set()
        for dimension, dimension_questions in questions_by_dimension.items():
            questions = list(dimension_questions)
            for question in questions:
                if question.question_id in seen:
                    raise ConfigurationError(f"Duplicate question id {question.question_id!r}")
                seen.add(question.question_id)

            value, answered = weighted_question_average(answers, questions)
            scores[dimension] = DimensionScore(
                dimension=dimension,
                value=round(value, 2),
                answered_questions=answered,
            )

        logger.debug(
            "Dimension scores computed",
            scores={key: score.value for key, score in scores.items()},
        )
        return scores
