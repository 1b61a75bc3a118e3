"""
Quiz Generator.

Builds a quiz prompt from a QuizConfig, asks Gemini for a schema-constrained
JSON array, and normalizes the result:
- ids are reassigned by position (1..N), whatever the model returned
- unusable payloads surface as a generic QuizGenerationError

Single request, no retries.
"""

from __future__ import annotations

import json

from loguru import logger

from .client import GeminiClient, get_default_client
from .config import get_settings
from .errors import EmptyResponseError, QuizFormatError, QuizGenerationError
from .models import QuizConfig, QuizQuestion
from .prompts import build_quiz_prompt
from .schemas import get_quiz_generation_config


def parse_quiz_response(text: str) -> list[QuizQuestion]:
    """
    Parse the model's JSON payload into questions numbered from 1.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON
        QuizFormatError: If the top-level value is not an array
        AttributeError: If an element is not an object
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise QuizFormatError("Format error: Not an array")

    return [QuizQuestion.from_dict(item, id=index) for index, item in enumerate(data, start=1)]


class QuizGenerator:
    """Generates quiz questions from source material."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        content_char_limit: int | None = None,
    ):
        self.client = client or get_default_client()
        self.content_char_limit = content_char_limit or get_settings().content_char_limit

    async def generate(self, config: QuizConfig) -> list[QuizQuestion]:
        """
        Generate a quiz.

        Args:
            config: Topic, type, question count, difficulty and source text

        Returns:
            Questions with ids 1..N in response order

        Raises:
            EmptyResponseError: The model returned no text
            QuizGenerationError: The text was not a JSON array of questions
        """
        prompt = build_quiz_prompt(config, max_chars=self.content_char_limit)
        logger.debug(
            f"Requesting {config.question_count} {config.quiz_type.value} questions "
            f"on '{config.topic}' ({len(prompt)} prompt chars)"
        )

        text = await self.client.generate_json(prompt, get_quiz_generation_config())
        if not text:
            raise EmptyResponseError()

        try:
            questions = parse_quiz_response(text)
        except (ValueError, TypeError, AttributeError, RecursionError) as e:
            logger.error(f"Failed to parse AI response: {e!r}")
            raise QuizGenerationError() from e

        expected = config.quiz_type.option_count
        for question in questions:
            if len(question.options) != expected:
                logger.warning(
                    f"Question {question.id} has {len(question.options)} options, "
                    f"expected {expected} for {config.quiz_type.value}"
                )

        logger.debug(f"Parsed {len(questions)} questions")
        return questions


async def generate_quiz(
    config: QuizConfig,
    client: GeminiClient | None = None,
) -> list[QuizQuestion]:
    """Generate a quiz with a one-off QuizGenerator."""
    return await QuizGenerator(client=client).generate(config)
