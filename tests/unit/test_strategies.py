"""Unit tests for answer strategies."""

import pytest

from tutorlite.llm.base import LLMError
from tutorlite.rag import format_answer
from tutorlite.tutor.strategies import (
    DEFAULT_COURSE_TITLE,
    LLMAnswerStrategy,
    LocalAnswerStrategy,
)


@pytest.mark.unit
class TestLocalAnswerStrategy:
    """Tests for the extractive strategy."""

    @pytest.mark.asyncio
    async def test_generate_formats_excerpt(self) -> None:
        strategy = LocalAnswerStrategy()
        answer = await strategy.generate("Why care?", "Retention  compounds..", "Any title")
        assert answer == format_answer("Why care?", "Retention  compounds..")
        assert answer == "The course explains that: Retention compounds."

    def test_name(self) -> None:
        assert LocalAnswerStrategy.name == "local"


@pytest.mark.unit
class TestLLMAnswerStrategy:
    """Tests for the remote strategy."""

    @pytest.mark.asyncio
    async def test_generate_uses_provider(self, mock_llm_class) -> None:
        provider = mock_llm_class(response="Loops bring new users.")
        strategy = LLMAnswerStrategy(provider, temperature=0.3, max_tokens=120)

        answer = await strategy.generate("What is a loop?", "Users invite users.", "Growth 101")

        assert answer == "Loops bring new users."
        assert provider.call_count == 1
        assert provider.last_kwargs == {"temperature": 0.3, "max_tokens": 120}
        assert '"Growth 101"' in provider.last_system
        assert provider.last_prompt == (
            "Course Content:\nUsers invite users.\n\n"
            "Question: What is a loop?\n\n"
            "Answer based on the course content above:"
        )

    @pytest.mark.asyncio
    async def test_default_generation_parameters(self, mock_llm) -> None:
        strategy = LLMAnswerStrategy(mock_llm)
        await strategy.generate("What is churn?", "Churn is lost customers.")
        assert mock_llm.last_kwargs == {"temperature": 0.7, "max_tokens": 300}

    @pytest.mark.parametrize("title", [None, ""])
    def test_missing_title_uses_default(self, mock_llm, title) -> None:
        strategy = LLMAnswerStrategy(mock_llm)
        system, _ = strategy.build_messages("q", "excerpt", title)
        assert f'"{DEFAULT_COURSE_TITLE}"' in system
        assert DEFAULT_COURSE_TITLE == "this course"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", ["", "   \n"])
    async def test_blank_output_raises(self, mock_llm_class, response: str) -> None:
        strategy = LLMAnswerStrategy(mock_llm_class(response=response))
        with pytest.raises(LLMError):
            await strategy.generate("What is churn?", "Churn is lost customers.")

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self, failing_llm) -> None:
        strategy = LLMAnswerStrategy(failing_llm)
        with pytest.raises(LLMError, match="remote unavailable"):
            await strategy.generate("What is churn?", "Churn is lost customers.")
        assert failing_llm.call_count == 1
