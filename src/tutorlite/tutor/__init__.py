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

"""Answer strategies and the tutor service that selects between them."""

from .service import AnswerService, MissingFieldError, build_answer_service
from .strategies import AnswerStrategy, LLMAnswerStrategy, LocalAnswerStrategy

__all__ = [
    "AnswerService",
    "AnswerStrategy",
    "LLMAnswerStrategy",
    "LocalAnswerStrategy",
    "MissingFieldError",
    "build_answer_service",
]
