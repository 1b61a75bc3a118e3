"""
Response Schema for Quiz Generation.

Controlled generation schema for Gemini so the quiz comes back as a
machine-parsable JSON array. The schema is sent with each request; it is
not re-validated locally.
"""

from __future__ import annotations

# =============================================================================
# Quiz Question Schema
# =============================================================================

QUIZ_QUESTION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "INTEGER"},
        "question": {"type": "STRING"},
        "options": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        },
        "correctAnswer": {"type": "STRING"},
        "explanation": {"type": "STRING"},
    },
    "required": ["id", "question", "options", "correctAnswer", "explanation"],
}

QUIZ_RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": QUIZ_QUESTION_SCHEMA,
}


# =============================================================================
# Gemini Generation Config
# =============================================================================


def get_quiz_generation_config() -> dict:
    """
    Get the generation config for a structured quiz request.

    Returns:
        Config dict for the Gemini API (JSON mode + response schema)
    """
    return {
        "response_mime_type": "application/json",
        "response_schema": QUIZ_RESPONSE_SCHEMA,
    }
