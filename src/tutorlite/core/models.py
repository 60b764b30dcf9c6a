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

"""Core data models for TutorLite.

This module defines the request and answer structures shared by the
tutor service, the HTTP API and the CLI.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AnswerSource(str, Enum):
    """Which strategy produced an answer."""

    LLM = "llm"  # remote chat-completion model
    LOCAL = "local"  # extractive RAG-lite pipeline


class TutorRequest(BaseModel):
    """A question about a piece of course content.

    Fields are optional at the model level so that missing values can be
    reported as a client error instead of a schema error. Accepts the
    camelCase names used by the web client (courseContent, courseTitle).
    """

    question: str | None = Field(default=None, description="Free-text question")
    content: str | None = Field(
        default=None,
        alias="courseContent",
        description="Course reference text to answer from",
    )
    title: str | None = Field(
        default=None,
        alias="courseTitle",
        description="Course title, used only to frame the remote prompt",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "question": "What is a viral loop?",
                "courseContent": "Viral Loops: Design your product so that users ...",
                "courseTitle": "Growth Hacking 101",
            }
        },
    )

    @property
    def is_complete(self) -> bool:
        """True when both question and content are present and non-empty.

        Whitespace-only text counts as present; it is answered from the
        leading paragraphs like any keywordless question.
        """
        return bool(self.question) and bool(self.content)


class TutorAnswer(BaseModel):
    """Answer returned by the tutor service."""

    answer: str = Field(..., description="Final answer text")
    source: AnswerSource = Field(..., description="Strategy that produced the answer")

    model_config = ConfigDict(frozen=True)
