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

"""Lightweight RAG ("RAG-lite") over a single body of course text.

Relevance is lexical: keyword overlap per sentence, no embeddings, no index.
Designed to run anywhere without model downloads or network access.

Pipeline:
- extract_keywords: question -> keyword set
- split_sentences / rank_sentences: content -> best sentences
- assemble_excerpt: best sentences + neighbours -> ordered excerpt
- format_answer: excerpt -> conversational answer
"""

from .context_builder import (
    NEIGHBOR_WINDOW,
    Retrieval,
    assemble_excerpt,
    find_relevant_content,
    retrieve,
)
from .formatter import (
    INTROS,
    QuestionType,
    answer_locally,
    classify_question,
    clean_excerpt,
    format_answer,
)
from .keywords import STOP_WORDS, extract_keywords, tokenize
from .scorer import (
    ScoredSentence,
    first_paragraphs,
    rank_sentences,
    score_sentence,
    split_sentences,
)

__all__ = [
    "INTROS",
    "NEIGHBOR_WINDOW",
    "STOP_WORDS",
    "QuestionType",
    "Retrieval",
    "ScoredSentence",
    "answer_locally",
    "assemble_excerpt",
    "classify_question",
    "clean_excerpt",
    "extract_keywords",
    "find_relevant_content",
    "first_paragraphs",
    "format_answer",
    "rank_sentences",
    "retrieve",
    "score_sentence",
    "split_sentences",
    "tokenize",
]
