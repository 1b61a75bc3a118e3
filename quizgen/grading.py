"""
Scoring of answered quizzes.

Produces the list of UserAnswer records the study guide generator consumes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .models import QuizQuestion, UserAnswer


@dataclass
class QuizResult:
    """Result of grading a quiz."""

    score: int
    total: int
    incorrect_answers: list[UserAnswer] = field(default_factory=list)

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return round(100.0 * self.score / self.total, 1)

    @property
    def is_perfect(self) -> bool:
        return self.score == self.total


def grade_answers(
    questions: Sequence[QuizQuestion],
    selections: Mapping[int, str],
) -> QuizResult:
    """
    Grade selections against a quiz.

    Args:
        questions: The quiz, as returned by QuizGenerator
        selections: Question id -> selected option text

    Returns:
        QuizResult; unanswered questions count as wrong with an empty selection
    """
    score = 0
    incorrect: list[UserAnswer] = []

    for question in questions:
        selected = selections.get(question.id, "")
        if question.is_correct(selected):
            score += 1
        else:
            incorrect.append(
                UserAnswer(
                    question_text=question.question,
                    selected_option=selected,
                    correct_answer=question.correct_answer,
                )
            )

    return QuizResult(score=score, total=len(questions), incorrect_answers=incorrect)
