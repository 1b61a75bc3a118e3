"""
LLM Prompts for Quiz and Study Guide Generation.

Contains prompts for:
- Quiz generation (structured JSON, schema-constrained)
- Study guide generation (free-text Markdown)
"""
from __future__ import annotations

from collections.abc import Iterable

from .models import QuizConfig, UserAnswer

MAX_CONTENT_CHARS = 20000

# =============================================================================
# Quiz Prompt
# =============================================================================

QUIZ_PROMPT = '''
Generate a {quiz_type} quiz about "{topic}" with exactly {question_count} questions.
Difficulty Level: {difficulty}.

Source Material:
"""
{content}
"""

Instructions:
1. Create unique, challenging questions based on the provided source material or topic.
2. Ensure "options" array always contains 4 options for MCQ, or 2 for True/False.
3. The "correctAnswer" must match exactly one of the strings in "options".
4. Provide a helpful "explanation" for why the answer is correct.
5. Return ONLY a JSON array.
'''

# =============================================================================
# Study Guide Prompt
# =============================================================================

STUDY_GUIDE_PROMPT = '''
The user took a quiz on "{topic}" and got the following questions wrong:

{mistakes}

Please provide a concise, encouraging, and structured study guide (in Markdown) to help them understand these specific concepts better.

Format Requirements:
- Use H3 headers (###) for main concepts.
- Use bullet points for key details.
- Use **bold** for important terms.
- Do NOT use excessive formatting or asterisks like ****.
- Keep it under 300 words.
'''

MISTAKE_TEMPLATE = (
    '- Question: "{question}"\n'
    '  User Answered: "{selected}"\n'
    '  Correct Answer: "{correct}"'
)


def build_quiz_prompt(config: QuizConfig, max_chars: int = MAX_CONTENT_CHARS) -> str:
    """Build the quiz prompt, cutting source material to ``max_chars``."""
    return QUIZ_PROMPT.format(
        quiz_type=config.quiz_type.value,
        topic=config.topic,
        question_count=config.question_count,
        difficulty=config.difficulty,
        content=config.content[:max_chars],
    )


def format_mistakes(incorrect_answers: Iterable[UserAnswer]) -> str:
    return "\n".join(
        MISTAKE_TEMPLATE.format(
            question=answer.question_text,
            selected=answer.selected_option,
            correct=answer.correct_answer,
        )
        for answer in incorrect_answers
    )


def build_study_guide_prompt(topic: str, incorrect_answers: Iterable[UserAnswer]) -> str:
    return STUDY_GUIDE_PROMPT.format(
        topic=topic,
        mistakes=format_mistakes(incorrect_answers),
    )
