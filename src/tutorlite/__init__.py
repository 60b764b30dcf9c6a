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

"""
TutorLite - question answering over course content.

A lightweight "RAG-lite" assistant: lexical retrieval of the most relevant
sentences of a course text, with optional LLM polishing of the answer.
"""

__version__ = "0.1.0"

from tutorlite.core.models import AnswerSource, TutorAnswer, TutorRequest
from tutorlite.rag import answer_locally, extract_keywords, find_relevant_content, format_answer
from tutorlite.tutor import AnswerService, build_answer_service

__all__ = [
    "AnswerService",
    "AnswerSource",
    "TutorAnswer",
    "TutorRequest",
    "__version__",
    "answer_locally",
    "build_answer_service",
    "extract_keywords",
    "find_relevant_content",
    "format_answer",
]
