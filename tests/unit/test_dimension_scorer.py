"""Unit tests for per-dimension weighted scoring.

Tests cover:
- Normalisation of a raw option against the question's highest option
- Weighted averaging over answered questions only
- "Not applicable" options excluded from the aggregate
- Missing data reported as 0 with zero answered questions
- Invalid options and duplicate question ids
"""

import pytest

from marketing_ai_readiness.core.dimension_scorer import (
    DimensionScorer,
    weighted_question_average,
)
from marketing_ai_readiness.core.errors import ConfigurationError, InvalidAnswerError
from marketing_ai_readiness.core.models import Question


def _question(
    question_id: str,
    dimension: str = "people_skills",
    weight: float = 1.0,
    option_scores: dict[int, float | None] | None = None,
) -> Question:
    if option_scores is None:
        return Question(question_id=question_id, dimension=dimension, text="?", weight=weight)
    return Question(
        question_id=question_id,
        dimension=dimension,
        text="?",
        weight=weight,
        option_scores=option_scores,
    )


@pytest.fixture()
def scorer() -> DimensionScorer:
    """Provide a fresh DimensionScorer instance."""
    return DimensionScorer()


class TestQuestionNormalize:
    """Verify raw option -> 0-100 conversion."""

    def test_top_option_scores_100(self) -> None:
        """The highest option maps to 100."""
        assert _question("Q1").normalize(5) == 100.0

    def test_normalises_against_highest_option(self) -> None:
        """Points are divided by the question's own maximum, not a fixed scale."""
        question = _question("Q1", option_scores={0: 0.0, 2: 2.0, 4: 4.0})
        assert question.normalize(2) == 50.0

    def test_not_applicable_returns_none(self) -> None:
        """An option with None points is 'not applicable'."""
        question = _question("Q1", option_scores={0: None, 1: 1.0, 5: 5.0})
        assert question.normalize(0) is None

    def test_unknown_option_raises(self) -> None:
        """A value that is not an offered option raises InvalidAnswerError."""
        question = _question("Q1", option_scores={0: 0.0, 2: 2.0, 5: 5.0})
        with pytest.raises(InvalidAnswerError) as exc_info:
            question.normalize(1)
        assert exc_info.value.question_id == "Q1"
        assert exc_info.value.raw_value == 1


class TestWeightedQuestionAverage:
    """Verify the shared weighted-average helper."""

    def test_weighted_average(self) -> None:
        """(100 * 1 + 0 * 3) / 4 == 25."""
        questions = [_question("Q1", weight=1.0), _question("Q2", weight=3.0)]
        score, answered = weighted_question_average({"Q1": 5, "Q2": 0}, questions)
        assert score == pytest.approx(25.0)
        assert answered == 2

    def test_unanswered_questions_do_not_dilute(self) -> None:
        """Only answered questions contribute to the weight total."""
        questions = [_question("Q1", weight=1.0), _question("Q2", weight=3.0)]
        score, answered = weighted_question_average({"Q1": 5}, questions)
        assert score == pytest.approx(100.0)
        assert answered == 1

    def test_no_answers_scores_zero(self) -> None:
        """No applicable answers yields (0.0, 0)."""
        score, answered = weighted_question_average({}, [_question("Q1")])
        assert score == 0.0
        assert answered == 0

    def test_not_applicable_answers_are_excluded(self) -> None:
        """'Not applicable' contributes to neither the sum nor the weight."""
        questions = [
            _question("Q1", option_scores={0: None, 1: 1.0, 5: 5.0}, weight=10.0),
            _question("Q2"),
        ]
        score, answered = weighted_question_average({"Q1": 0, "Q2": 4}, questions)
        assert score == pytest.approx(80.0)
        assert answered == 1

    def test_duplicate_question_id_raises(self) -> None:
        """The same question id twice in one scope is a configuration error."""
        with pytest.raises(ConfigurationError):
            weighted_question_average({}, [_question("Q1"), _question("Q1")])


class TestDimensionScorer:
    """Verify DimensionScorer over multiple dimensions."""

    def test_scores_every_dimension(self, scorer: DimensionScorer) -> None:
        """Every dimension in the mapping appears in the result, in order."""
        scores = scorer.score(
            {"A1": 5, "B1": 0},
            {
                "alpha": [_question("A1", dimension="alpha")],
                "beta": [_question("B1", dimension="beta")],
                "gamma": [_question("C1", dimension="gamma")],
            },
        )
        assert list(scores) == ["alpha", "beta", "gamma"]
        assert scores["alpha"].value == 100.0
        assert scores["beta"].value == 0.0
        assert scores["beta"].answered_questions == 1

    def test_missing_data_is_distinguishable(self, scorer: DimensionScorer) -> None:
        """An unanswered dimension scores 0.0 with answered_questions == 0."""
        scores = scorer.score({}, {"alpha": [_question("A1", dimension="alpha")]})
        assert scores["alpha"].value == 0.0
        assert scores["alpha"].answered_questions == 0

    def test_values_rounded_to_two_decimals(self, scorer: DimensionScorer) -> None:
        """1/3 of 100 is reported as 33.33."""
        questions = [_question("A1"), _question("A2"), _question("A3")]
        scores = scorer.score({"A1": 5, "A2": 0, "A3": 0}, {"people_skills": questions})
        assert scores["people_skills"].value == 33.33

    def test_duplicate_across_dimensions_raises(self, scorer: DimensionScorer) -> None:
        """A question id shared by two dimensions is rejected."""
        with pytest.raises(ConfigurationError):
            scorer.score(
                {},
                {
                    "alpha": [_question("Q1", dimension="alpha")],
                    "beta": [_question("Q1", dimension="beta")],
                },
            )

    def test_scores_stay_in_range(self, scorer: DimensionScorer) -> None:
        """Every dimension score lies in [0, 100]."""
        questions = [_question(f"Q{i}", weight=float(i + 1)) for i in range(5)]
        for value in range(6):
            answers = {question.question_id: value for question in questions}
            scores = scorer.score(answers, {"people_skills": questions})
            assert 0.0 <= scores["people_skills"].value <= 100.0
