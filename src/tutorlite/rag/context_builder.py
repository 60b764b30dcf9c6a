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

"""Context builder for course question answering.

Expands the best-scoring sentences with their immediate neighbours and
stitches them back together in document order, so a single matched sentence
is read with the sentence before and after it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .keywords import extract_keywords
from .scorer import ScoredSentence, first_paragraphs, rank_sentences, split_sentences

logger = logging.getLogger(__name__)

# Sentences pulled in on each side of a match
NEIGHBOR_WINDOW = 1


@dataclass(frozen=True)
class Retrieval:
    """Outcome of a single retrieval run.

    Attributes:
        keywords: Keywords extracted from the question
        sentences: All candidate sentences of the content
        ranked: Selected sentences, best first
        excerpt: Text handed to the answer formatter
        used_fallback: True when the leading paragraphs were returned instead
    """

    keywords: frozenset[str]
    excerpt: str
    used_fallback: bool
    sentences: list[str] = field(default_factory=list)
    ranked: list[ScoredSentence] = field(default_factory=list)


def assemble_excerpt(selected: Sequence[ScoredSentence], sentences: Sequence[str]) -> str:
    """Build an excerpt from selected sentences and their neighbours.

    Args:
        selected: Ranked sentences (any order)
        sentences: Full sentence sequence the indices refer to

    Returns:
        Sentences in ascending position order, without repeated texts,
        joined with ". " and closed with a period
    """
    indices: set[int] = set()
    last = len(sentences) - 1
    for item in selected:
        indices.add(item.index)
        if item.index - NEIGHBOR_WINDOW >= 0:
            indices.add(item.index - NEIGHBOR_WINDOW)
        if item.index + NEIGHBOR_WINDOW <= last:
            indices.add(item.index + NEIGHBOR_WINDOW)

    parts: list[str] = []
    seen: set[str] = set()
    for idx in sorted(indices):
        text = sentences[idx]
        if text in seen:
            continue
        seen.add(text)
        parts.append(text)

    return ". ".join(parts) + "."


def retrieve(question: str, content: str) -> Retrieval:
    """Run keyword extraction, scoring and assembly for one question.

    Args:
        question: Free-text question
        content: Course content to search

    Returns:
        Retrieval with the excerpt and the intermediate results
    """
    keywords = extract_keywords(question)
    if not keywords:
        logger.debug("No keywords in question, using leading paragraphs")
        return Retrieval(keywords=keywords, excerpt=first_paragraphs(content), used_fallback=True)

    sentences = split_sentences(content)
    ranked = rank_sentences(sentences, keywords)
    if not ranked:
        logger.debug("No sentence matched %s, using leading paragraphs", sorted(keywords))
        return Retrieval(
            keywords=keywords,
            excerpt=first_paragraphs(content),
            used_fallback=True,
            sentences=sentences,
        )

    logger.debug("Matched %d of %d sentences", len(ranked), len(sentences))
    return Retrieval(
        keywords=keywords,
        excerpt=assemble_excerpt(ranked, sentences),
        used_fallback=False,
        sentences=sentences,
        ranked=ranked,
    )


def find_relevant_content(question: str, content: str) -> str:
    """Find the most relevant excerpt of content for a question."""
    return retrieve(question, content).excerpt
