"""
Unit tests for StudyGuideGenerator.
"""

import pytest

from quizgen.study_guide import (
    FALLBACK_MESSAGE,
    NO_MISTAKES_MESSAGE,
    StudyGuideGenerator,
    generate_study_guide,
)


class TestStudyGuideGenerator:
    """Tests for StudyGuideGenerator.generate."""

    @pytest.mark.asyncio
    async def test_no_mistakes_skips_remote_call(self, fake_client):
        client = fake_client(text="should not be used")

        guide = await StudyGuideGenerator(client=client).generate("Photosynthesis", [])

        assert guide == "Great job! You got everything right. No study guide needed."
        assert guide == NO_MISTAKES_MESSAGE
        assert client.text_calls == []

    @pytest.mark.asyncio
    async def test_helper_without_client_short_circuits(self):
        """No client is needed when there is nothing to review."""
        assert await generate_study_guide("Photosynthesis", []) == NO_MISTAKES_MESSAGE

    @pytest.mark.asyncio
    async def test_returns_response_verbatim(self, fake_client, sample_incorrect_answers):
        markdown = "### Gas Exchange\n- Plants take in **carbon dioxide**."
        client = fake_client(text=markdown)

        guide = await StudyGuideGenerator(client=client).generate("Photosynthesis", sample_incorrect_answers)

        assert guide == markdown

    @pytest.mark.asyncio
    @pytest.mark.parametrize("empty", ["", None])
    async def test_empty_response_falls_back(self, fake_client, sample_incorrect_answers, empty):
        client = fake_client(text=empty)

        guide = await StudyGuideGenerator(client=client).generate("Photosynthesis", sample_incorrect_answers)

        assert guide == "Unable to generate study guide."
        assert guide == FALLBACK_MESSAGE

    @pytest.mark.asyncio
    async def test_prompt_lists_each_mistake(self, fake_client, sample_incorrect_answers):
        client = fake_client(text="### Review")

        await StudyGuideGenerator(client=client).generate("Photosynthesis", sample_incorrect_answers)

        assert len(client.text_calls) == 1
        prompt = client.text_calls[0]
        assert 'The user took a quiz on "Photosynthesis"' in prompt
        assert (
            '- Question: "Which gas do plants take in for photosynthesis?"\n'
            '  User Answered: "Oxygen"\n'
            '  Correct Answer: "Carbon dioxide"'
        ) in prompt
        assert '  User Answered: "Stroma"' in prompt
        assert "Use H3 headers (###) for main concepts." in prompt
        assert "Keep it under 300 words." in prompt

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, fake_client, sample_incorrect_answers):
        client = fake_client(error=TimeoutError("slow"))

        with pytest.raises(TimeoutError):
            await StudyGuideGenerator(client=client).generate("Photosynthesis", sample_incorrect_answers)

    @pytest.mark.asyncio
    async def test_generate_study_guide_helper(self, fake_client, sample_incorrect_answers):
        client = fake_client(text="### Light Reactions")

        guide = await generate_study_guide("Photosynthesis", sample_incorrect_answers, client=client)

        assert guide == "### Light Reactions"
