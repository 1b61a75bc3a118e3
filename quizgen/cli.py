"""
quizgen CLI - quizzes and study guides from the terminal.

Usage:
    quizgen quiz notes.txt --topic Photosynthesis          # Generate and print a quiz
    quizgen quiz notes.txt -t Cells --type true-false --json
    quizgen study-guide missed.json --topic Photosynthesis  # Guide for missed questions
    quizgen take notes.txt --topic Photosynthesis           # Answer, grade, then review
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt

from .client import get_default_client
from .config import get_settings
from .errors import QuizGenError
from .grading import grade_answers
from .models import QuizConfig, QuizQuestion, QuizType, UserAnswer
from .quiz_generator import QuizGenerator
from .study_guide import StudyGuideGenerator

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quizgen",
    help="Generate quizzes and study guides from source material with Gemini",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read {path}: {escape(str(e))}[/]")
        raise typer.Exit(code=1)


def _warn_if_unconfigured() -> None:
    if not get_settings().has_ai_configured():
        logger.warning("No Gemini API key configured (set GEMINI_API_KEY); requests will fail")


def _render_question(question: QuizQuestion, reveal: bool = True) -> Panel:
    lines = [f"[bold]{escape(question.question)}[/]", ""]
    for number, option in enumerate(question.options, start=1):
        lines.append(f"  {number}. {escape(option)}")
    if reveal:
        lines.append("")
        lines.append(f"[green]Answer:[/] {escape(question.correct_answer)}")
        lines.append(f"[dim]{escape(question.explanation)}[/]")
    return Panel("\n".join(lines), title=f"Q{question.id}", border_style="cyan")


def _generate(config: QuizConfig, quiet: bool = False) -> list[QuizQuestion]:
    _warn_if_unconfigured()
    generator = QuizGenerator(client=get_default_client())
    try:
        if quiet:
            return asyncio.run(generator.generate(config))
        with console.status("Generating quiz..."):
            return asyncio.run(generator.generate(config))
    except QuizGenError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)


def _study_guide(topic: str, incorrect_answers: list[UserAnswer]) -> str:
    generator = StudyGuideGenerator(client=get_default_client())
    with console.status("Writing study guide..."):
        return asyncio.run(generator.generate(topic, incorrect_answers))


# =============================================================================
# Commands
# =============================================================================


@app.command()
def quiz(
    source: Annotated[Path, typer.Argument(help="Text file with the source material")],
    topic: Annotated[str, typer.Option("--topic", "-t", help="Quiz topic")],
    quiz_type: Annotated[
        QuizType, typer.Option("--type", help="Question format")
    ] = QuizType.MULTIPLE_CHOICE,
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of questions")] = 5,
    difficulty: Annotated[str, typer.Option("--difficulty", "-d", help="Difficulty level")] = "medium",
    as_json: Annotated[bool, typer.Option("--json", help="Print the quiz as JSON")] = False,
) -> None:
    """
    Generate a quiz from a source file.

    Examples:
        quizgen quiz notes.txt -t Photosynthesis
        quizgen quiz notes.txt -t Cells --type true-false -n 10 --json
    """
    config = QuizConfig(
        topic=topic,
        quiz_type=quiz_type,
        question_count=count,
        difficulty=difficulty,
        content=_read_source(source),
    )
    questions = _generate(config, quiet=as_json)

    if as_json:
        typer.echo(json.dumps([q.to_dict() for q in questions], indent=2))
        return

    console.print(f"[bold cyan]{topic}[/] - {quiz_type.label}, {difficulty}")
    for question in questions:
        console.print(_render_question(question))


@app.command("study-guide")
def study_guide(
    answers: Annotated[Path, typer.Argument(help="JSON array of missed answers")],
    topic: Annotated[str, typer.Option("--topic", "-t", help="Quiz topic")],
) -> None:
    """
    Write a study guide for missed questions.

    The file holds objects with questionText, selectedOption and correctAnswer.
    """
    try:
        payload = json.loads(_read_source(answers))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {answers}: {escape(str(e))}[/]")
        raise typer.Exit(code=1)
    if not isinstance(payload, list):
        console.print(f"[red]{answers} must contain a JSON array[/]")
        raise typer.Exit(code=1)
    if not all(isinstance(item, dict) for item in payload):
        console.print(f"[red]Answers must contain objects: {answers}[/]")
        raise typer.Exit(code=1)

    incorrect = [UserAnswer.from_dict(item) for item in payload]
    if incorrect:
        _warn_if_unconfigured()
    console.print(Markdown(_study_guide(topic, incorrect)))


@app.command()
def take(
    source: Annotated[Path, typer.Argument(help="Text file with the source material")],
    topic: Annotated[str, typer.Option("--topic", "-t", help="Quiz topic")],
    quiz_type: Annotated[
        QuizType, typer.Option("--type", help="Question format")
    ] = QuizType.MULTIPLE_CHOICE,
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of questions")] = 5,
    difficulty: Annotated[str, typer.Option("--difficulty", "-d", help="Difficulty level")] = "medium",
) -> None:
    """
    Take a generated quiz, then review a study guide for the misses.
    """
    config = QuizConfig(
        topic=topic,
        quiz_type=quiz_type,
        question_count=count,
        difficulty=difficulty,
        content=_read_source(source),
    )
    questions = _generate(config)

    selections: dict[int, str] = {}
    for question in questions:
        console.print(_render_question(question, reveal=False))
        if not question.options:
            continue
        choices = [str(n) for n in range(1, len(question.options) + 1)]
        picked = IntPrompt.ask("Your answer", choices=choices, console=console)
        selections[question.id] = question.options[picked - 1]

    result = grade_answers(questions, selections)
    color = "green" if result.is_perfect else "yellow"
    console.print(f"\n[bold {color}]Score: {result.score}/{result.total} ({result.percentage}%)[/]\n")

    console.print(Markdown(_study_guide(topic, result.incorrect_answers)))


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
