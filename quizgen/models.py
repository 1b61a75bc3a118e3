"""
Quiz domain models.

Wire payloads (model output, CLI JSON files) use camelCase keys;
the dataclasses expose snake_case attributes and convert at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class QuizType(str, Enum):
    """Question formats the model can be asked for."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"

    @property
    def option_count(self) -> int:
        """Number of options each question should carry."""
        return 2 if self is QuizType.TRUE_FALSE else 4

    @property
    def label(self) -> str:
        return "True/False" if self is QuizType.TRUE_FALSE else "Multiple Choice"


@dataclass(frozen=True)
class QuizConfig:
    """Caller-owned request for a quiz."""

    topic: str
    quiz_type: QuizType
    question_count: int
    difficulty: str
    content: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.quiz_type, QuizType):
            object.__setattr__(self, "quiz_type", QuizType(self.quiz_type))


@dataclass
class QuizQuestion:
    """A single generated question."""

    id: int
    question: str
    options: list[str] = field(default_factory=list)
    correct_answer: str = ""
    explanation: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any], id: int | None = None) -> QuizQuestion:
        """
        Parse a question from model output.

        Args:
            data: One element of the model's JSON array
            id: Position-based id that replaces whatever the model supplied

        Raises:
            AttributeError: If ``data`` is not a mapping
        """
        return cls(
            id=id if id is not None else int(data.get("id", 0)),
            question=data.get("question", ""),
            options=list(data.get("options") or []),
            correct_answer=data.get("correctAnswer", ""),
            explanation=data.get("explanation", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire format."""
        return {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
        }

    def is_correct(self, selected_option: str) -> bool:
        return selected_option == self.correct_answer


@dataclass(frozen=True)
class UserAnswer:
    """A question the learner answered, with their pick and the right one."""

    question_text: str
    selected_option: str
    correct_answer: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserAnswer:
        return cls(
            question_text=data.get("questionText", ""),
            selected_option=data.get("selectedOption", ""),
            correct_answer=data.get("correctAnswer", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionText": self.question_text,
            "selectedOption": self.selected_option,
            "correctAnswer": self.correct_answer,
        }
