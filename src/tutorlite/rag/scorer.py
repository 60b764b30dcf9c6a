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

"""Sentence-level relevance scoring for lightweight RAG.

Splits course content into sentences and ranks them by keyword overlap
with the question. No index, no embeddings: every call works on a single
text blob.

Scoring rule per keyword:
    +1.0 if the lowercased sentence contains the keyword as a substring
    +0.5 more if it also appears as a whole word (space-delimited, or at the
         start/end of the sentence)

The sentence splitter is a heuristic. It breaks on ".", "!" or "?" followed
by whitespace, so abbreviations ("e.g. this") and decimals followed by a
space split early.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SENTENCE_SPLIT_RE = re.compile(r"[.!?]\s+")
MIN_SENTENCE_CHARS = 10
PARAGRAPH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class ScoredSentence:
    """Sentence with its relevance score.

    Attributes:
        text: Sentence text as split from the content
        index: Position of the sentence in the split sequence
        score: Keyword relevance score (non-negative)
    """

    text: str
    index: int
    score: float


# Scoring weights
MATCH_POINT = 1.0  # keyword found anywhere in the sentence
WHOLE_WORD_BONUS = 0.5  # keyword found as a standalone word

DEFAULT_TOP_K = 5


def split_sentences(content: str) -> list[str]:
    """Split content into candidate sentences.

    Segments whose trimmed length is 10 characters or less are dropped.
    Kept segments are returned untrimmed.

    Args:
        content: Course content

    Returns:
        Sentences in content order
    """
    return [s for s in SENTENCE_SPLIT_RE.split(content) if len(s.strip()) > MIN_SENTENCE_CHARS]


def score_sentence(sentence: str, keywords: Iterable[str]) -> float:
    """Score a sentence by how many question keywords it contains.

    Args:
        sentence: Sentence text
        keywords: Lowercase query keywords

    Returns:
        Sum of per-keyword points, 0.0 when nothing matches
    """
    lowered = sentence.lower()
    score = 0.0

    for keyword in keywords:
        if keyword not in lowered:
            continue
        score += MATCH_POINT
        if (
            f" {keyword} " in lowered
            or lowered.startswith(f"{keyword} ")
            or lowered.endswith(f" {keyword}")
        ):
            score += WHOLE_WORD_BONUS

    return score


def rank_sentences(
    sentences: Sequence[str],
    keywords: Iterable[str],
    top_k: int = DEFAULT_TOP_K,
) -> list[ScoredSentence]:
    """Rank sentences by relevance.

    Sentences scoring 0 are dropped. Ties keep their original order
    (Python's sort is stable and the key is the score alone).

    Args:
        sentences: Sentences in content order
        keywords: Lowercase query keywords
        top_k: Maximum number of sentences to return

    Returns:
        Highest-scoring sentences, best first
    """
    terms = tuple(keywords)
    scored = [
        ScoredSentence(text=sentence, index=idx, score=score_sentence(sentence, terms))
        for idx, sentence in enumerate(sentences)
    ]
    relevant = [item for item in scored if item.score > 0]
    relevant.sort(key=lambda item: item.score, reverse=True)
    return relevant[:top_k]


def first_paragraphs(content: str, count: int = 2) -> str:
    """Return the leading paragraphs of content.

    Used when the question has no usable keywords or nothing matches.
    """
    return PARAGRAPH_SEPARATOR.join(content.split(PARAGRAPH_SEPARATOR)[:count])
