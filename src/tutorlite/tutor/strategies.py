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

"""Answer-generation strategies.

A strategy turns a question and a retrieved excerpt into answer text.
The local strategy is deterministic and never fails; the LLM strategy asks
a remote model and may raise.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from tutorlite.llm.base import BaseLLMProvider, LLMError
from tutorlite.llm.prompts import PromptTemplate
from tutorlite.rag.formatter import format_answer

logger = logging.getLogger(__name__)

DEFAULT_COURSE_TITLE = "this course"


class AnswerStrategy(ABC):
    """Interface for answer generation from an excerpt."""

    name: str = "base"

    @abstractmethod
    async def generate(self, question: str, excerpt: str, title: str | None = None) -> str:
        """Generate an answer.

        Args:
            question: Raw question text
            excerpt: Course excerpt selected for the question
            title: Optional course title

        Returns:
            Answer text
        """


class LocalAnswerStrategy(AnswerStrategy):
    """Extractive answer: the excerpt behind a question-aware introduction."""

    name = "local"

    async def generate(self, question: str, excerpt: str, title: str | None = None) -> str:
        return format_answer(question, excerpt)


class LLMAnswerStrategy(AnswerStrategy):
    """Remote answer from a chat-completion model.

    The system instruction restricts the model to the supplied excerpt.
    One request per call, no retries.
    """

    name = "llm"

    def __init__(
        self,
        provider: BaseLLMProvider,
        temperature: float = 0.7,
        max_tokens: int = 300,
    ):
        """Initialize LLM strategy.

        Args:
            provider: Provider used for the completion call
            temperature: Sampling temperature
            max_tokens: Output token budget
        """
        self.provider = provider
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._system_template = PromptTemplate.load("tutor_system")
        self._user_template = PromptTemplate.load("tutor_user")

    def build_messages(self, question: str, excerpt: str, title: str | None) -> tuple[str, str]:
        """Render the system instruction and the user prompt."""
        system = self._system_template.format(course_title=title or DEFAULT_COURSE_TITLE)
        user = self._user_template.format(excerpt=excerpt, question=question)
        return system, user

    async def generate(self, question: str, excerpt: str, title: str | None = None) -> str:
        system, user = self.build_messages(question, excerpt, title)
        text = await self.provider.complete(
            user,
            system=system,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not isinstance(text, str) or not text.strip():
            raise LLMError("LLM produced no answer text")
        return text
