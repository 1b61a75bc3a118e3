"""
Remediation Study Guide Generator.

Turns the questions a learner got wrong into a short Markdown study guide.
Free-text request, no schema; an empty reply falls back to a fixed message.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from .client import GeminiClient, get_default_client
from .models import UserAnswer
from .prompts import build_study_guide_prompt

NO_MISTAKES_MESSAGE = "Great job! You got everything right. No study guide needed."
FALLBACK_MESSAGE = "Unable to generate study guide."


class StudyGuideGenerator:
    """Generates study guides for missed quiz questions."""

    def __init__(self, client: GeminiClient | None = None):
        self.client = client or get_default_client()

    async def generate(self, topic: str, incorrect_answers: Sequence[UserAnswer]) -> str:
        """
        Generate a study guide.

        Returns the congratulation message without calling the model when
        there are no mistakes. Transport errors from the SDK propagate.
        """
        if not incorrect_answers:
            return NO_MISTAKES_MESSAGE

        prompt = build_study_guide_prompt(topic, incorrect_answers)
        logger.debug(f"Requesting study guide for {len(incorrect_answers)} missed questions on '{topic}'")

        text = await self.client.generate_text(prompt)
        if not text:
            logger.warning("Empty study guide response, using fallback")
            return FALLBACK_MESSAGE
        return text


async def generate_study_guide(
    topic: str,
    incorrect_answers: Sequence[UserAnswer],
    client: GeminiClient | None = None,
) -> str:
    """Generate a study guide with a one-off StudyGuideGenerator."""
    if not incorrect_answers:
        return NO_MISTAKES_MESSAGE
    return await StudyGuideGenerator(client=client).generate(topic, incorrect_answers)
