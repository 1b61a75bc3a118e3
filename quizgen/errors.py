"""Exceptions raised by quiz and study guide generation."""

from __future__ import annotations

QUIZ_GENERATION_FAILED = "Failed to generate valid quiz data. Please try again."


class QuizGenError(Exception):
    """Base class for quizgen errors."""
    pass


class EmptyResponseError(QuizGenError):
    """Raised when the model returns no text for a quiz request."""

    def __init__(self, message: str = "No response from AI"):
        super().__init__(message)


class QuizFormatError(QuizGenError, ValueError):
    """Raised when the model's JSON payload is not a list of questions."""
    pass


class QuizGenerationError(QuizGenError):
    """
    User-facing failure for unusable quiz output.

    The message is always the generic retry text. The underlying parse
    error, when there is one, is available as ``__cause__``.
    """

    def __init__(self, message: str = QUIZ_GENERATION_FAILED):
        super().__init__(message)
