"""quizgen: quiz and study guide generation on top of Gemini.

Usage:
    from quizgen import GeminiClient, QuizConfig, QuizGenerator, QuizType

    client = GeminiClient()
    config = QuizConfig(
        topic="Photosynthesis",
        quiz_type=QuizType.MULTIPLE_CHOICE,
        question_count=3,
        difficulty="easy",
        content=notes,
    )
    questions = await QuizGenerator(client).generate(config)
"""

from .client import GeminiClient, get_default_client
from .errors import EmptyResponseError, QuizFormatError, QuizGenError, QuizGenerationError
from .grading import QuizResult, grade_answers
from .models import QuizConfig, QuizQuestion, QuizType, UserAnswer
from .quiz_generator import QuizGenerator, generate_quiz
from .study_guide import StudyGuideGenerator, generate_study_guide

__all__ = [
    # Client
    "GeminiClient",
    "get_default_client",
    # Models
    "QuizConfig",
    "QuizQuestion",
    "QuizType",
    "UserAnswer",
    # Generation
    "QuizGenerator",
    "generate_quiz",
    "StudyGuideGenerator",
    "generate_study_guide",
    # Grading
    "QuizResult",
    "grade_answers",
    # Errors
    "QuizGenError",
    "EmptyResponseError",
    "QuizFormatError",
    "QuizGenerationError",
]
