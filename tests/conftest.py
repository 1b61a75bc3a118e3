"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizgen.models import QuizConfig, QuizType, UserAnswer  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FakeGeminiClient:
    """Stands in for GeminiClient; records prompts and returns canned text."""

    def __init__(self, json_text=None, text=None, error=None):
        self.json_text = json_text
        self.text = text
        self.error = error
        self.json_calls = []
        self.text_calls = []

    async def generate_json(self, prompt, config):
        self.json_calls.append((prompt, config))
        if self.error:
            raise self.error
        return self.json_text

    async def generate_text(self, prompt):
        self.text_calls.append(prompt)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def fake_client():
    """Factory for fake Gemini clients."""
    return FakeGeminiClient


@pytest.fixture
def photosynthesis_config():
    """Provide a sample quiz config for testing."""
    return QuizConfig(
        topic="Photosynthesis",
        quiz_type=QuizType.MULTIPLE_CHOICE,
        question_count=3,
        difficulty="easy",
        content="Plants convert light energy into chemical energy stored in glucose.",
    )


@pytest.fixture
def sample_quiz_payload():
    """Three well-formed questions with out-of-order model ids."""
    return [
        {
            "id": 7,
            "question": "Which pigment absorbs light during photosynthesis?",
            "options": ["Chlorophyll", "Hemoglobin", "Melanin", "Keratin"],
            "correctAnswer": "Chlorophyll",
            "explanation": "Chlorophyll captures light energy in the chloroplast.",
        },
        {
            "id": 2,
            "question": "Which gas do plants take in for photosynthesis?",
            "options": ["Oxygen", "Carbon dioxide", "Nitrogen", "Helium"],
            "correctAnswer": "Carbon dioxide",
            "explanation": "CO2 is fixed into sugars in the Calvin cycle.",
        },
        {
            "id": 9,
            "question": "Where do the light reactions take place?",
            "options": ["Stroma", "Thylakoid membrane", "Nucleus", "Cell wall"],
            "correctAnswer": "Thylakoid membrane",
            "explanation": "Photosystems sit in the thylakoid membranes.",
        },
    ]


@pytest.fixture
def sample_quiz_json(sample_quiz_payload):
    return json.dumps(sample_quiz_payload)


@pytest.fixture
def sample_incorrect_answers():
    """Provide missed answers for study guide tests."""
    return [
        UserAnswer(
            question_text="Which gas do plants take in for photosynthesis?",
            selected_option="Oxygen",
            correct_answer="Carbon dioxide",
        ),
        UserAnswer(
            question_text="Where do the light reactions take place?",
            selected_option="Stroma",
            correct_answer="Thylakoid membrane",
        ),
    ]
