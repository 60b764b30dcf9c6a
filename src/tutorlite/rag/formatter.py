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

"""Conversational formatting of extractive answers."""

from __future__ import annotations

import re
from enum import Enum

from .context_builder import find_relevant_content


class QuestionType(str, Enum):
    """Question category, picked from the leading word."""

    WHAT = "what"
    HOW = "how"
    WHY = "why"
    OTHER = "other"


INTROS: dict[QuestionType, str] = {
    QuestionType.WHAT: "Based on the course content: ",
    QuestionType.HOW: "Here's how it works according to the course: ",
    QuestionType.WHY: "The course explains that: ",
    QuestionType.OTHER: "According to the course content: ",
}

_REPEATED_PERIODS_RE = re.compile(r"\.{2,}")
_WHITESPACE_RE = re.compile(r"\s+")


def classify_question(question: str) -> QuestionType:
    """Classify a question by the word it starts with.

    Prefix match on the lowercased, trimmed question; anything that does
    not start with "what", "how" or "why" is OTHER.
    """
    lowered = question.lower().strip()
    for kind in (QuestionType.WHAT, QuestionType.HOW, QuestionType.WHY):
        if lowered.startswith(kind.value):
            return kind
    return QuestionType.OTHER


def clean_excerpt(text: str) -> str:
    """Collapse repeated periods and whitespace runs, then trim."""
    text = _REPEATED_PERIODS_RE.sub(".", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def format_answer(question: str, excerpt: str) -> str:
    """Wrap an excerpt in a question-aware introduction.

    Args:
        question: Original question
        excerpt: Relevant course excerpt

    Returns:
        Introduction followed directly by the cleaned excerpt
    """
    return INTROS[classify_question(question)] + clean_excerpt(excerpt)


def answer_locally(question: str, content: str) -> str:
    """Answer a question from course content without any remote call."""
    return format_answer(question, find_relevant_content(question, content))
