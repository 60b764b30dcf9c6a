# Copyright 2025 TutorLite Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tutor service: picks the answer strategy for each question.

The remote strategy, when configured, is tried once. Any failure falls back
to the local RAG-lite answer, so callers only ever see an answer or an input
error.
"""

from __future__ import annotations

import logging

from tutorlite.core.models import AnswerSource, TutorAnswer
from tutorlite.llm.openai_provider import OpenAIProvider
from tutorlite.rag.context_builder import find_relevant_content
from tutorlite.utils.config import Settings

from .strategies import AnswerStrategy, LLMAnswerStrategy, LocalAnswerStrategy

logger = logging.getLogger(__name__)


class MissingFieldError(ValueError):
    """Raised when the question or the course content is missing or empty."""

    pass


class AnswerService:
    """Answer questions about course content.

    Example:
        >>> service = AnswerService()
        >>> result = await service.answer("What is a viral loop?", course_text)
        >>> result.source
        <AnswerSource.LOCAL: 'local'>
    """

    def __init__(self, remote: AnswerStrategy | None = None):
        """Initialize service.

        Args:
            remote: Strategy consulted before the local pipeline; None means
                local answers only
        """
        self.remote = remote
        self.local = LocalAnswerStrategy()

    @property
    def remote_enabled(self) -> bool:
        """Whether a remote strategy is wired in."""
        return self.remote is not None

    async def answer(self, question: str, content: str, title: str | None = None) -> TutorAnswer:
        """Answer a question from course content.

        Args:
            question: Free-text question
            content: Course reference text
            title: Optional course title for the remote prompt

        Returns:
            TutorAnswer with the answer text and the strategy that produced it

        Raises:
            MissingFieldError: If question or content is missing or empty
        """
        if not question or not content:
            raise MissingFieldError("Question and course content are required")

        excerpt = find_relevant_content(question, content)

        if self.remote is not None:
            try:
                text = await self.remote.generate(question, excerpt, title)
            except Exception as e:
                logger.warning(
                    "Remote answer failed (%s: %s), using local answer", type(e).__name__, e
                )
            else:
                if text and text.strip():
                    return TutorAnswer(answer=text, source=AnswerSource.LLM)
                logger.warning("Remote answer was empty, using local answer")

        text = await self.local.generate(question, excerpt, title)
        return TutorAnswer(answer=text, source=AnswerSource.LOCAL)


def build_answer_service(settings: Settings) -> AnswerService:
    """Build the service from settings.

    The remote strategy is wired only when an API key is configured.
    """
    if not settings.llm_enabled:
        logger.info("No LLM API key configured, answering locally")
        return AnswerService()

    assert settings.openrouter_api_key is not None
    provider = OpenAIProvider(
        api_key=settings.openrouter_api_key,
        model=settings.llm_model,
        base_url=settings.llm_base_url,
        timeout=settings.request_timeout,
        app_url=settings.app_url,
        app_title=settings.app_title,
    )
    logger.info("Remote answers enabled via %s (%s)", settings.llm_base_url, settings.llm_model)
    return AnswerService(
        remote=LLMAnswerStrategy(
            provider,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    )
