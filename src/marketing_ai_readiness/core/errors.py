"""Exception types raised by the readiness engine."""


class ConfigurationError(Exception):
    """Raised when the configuration tables are invalid.

    Raised at load time only. The engine refuses to score with an invalid
    configuration rather than degrading silently.
    """


class InvalidAnswerError(ValueError):
    """Raised when a raw answer value is not an allowed option for its question."""

    def __init__(self, question_id: str, raw_value: object) -> None:
        super().__init__(
            f"Answer {raw_value!r} is not a valid option for question {question_id!r}"
        )
        self.question_id = question_id
        self.raw_value = raw_value
