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

"""Keyword extraction for question analysis.

Turns a free-text question into the set of content words used to score
course sentences.
"""

from __future__ import annotations

import re

# Common English function words that carry little topical signal
STOP_WORDS: frozenset[str] = frozenset(
    {
        "what",
        "how",
        "why",
        "when",
        "where",
        "which",
        "who",
        "is",
        "are",
        "was",
        "were",
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "about",
        "this",
        "that",
        "these",
        "those",
        "can",
        "could",
        "should",
        "would",
    }
)

MIN_KEYWORD_LENGTH = 3

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase text and split it into word tokens.

    Punctuation is replaced by spaces so it never merges adjacent words.

    Args:
        text: Text to tokenize

    Returns:
        List of tokens in their original order (duplicates kept)
    """
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def extract_keywords(question: str) -> frozenset[str]:
    """Extract meaningful keywords from a question.

    Drops stop words and tokens shorter than three characters.

    Args:
        question: Free-text question

    Returns:
        Deduplicated set of lowercase keywords (empty for degenerate questions)

    Example:
        >>> sorted(extract_keywords("What is a viral loop?"))
        ['loop', 'viral']
    """
    return frozenset(
        token
        for token in tokenize(question)
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    )
