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

"""Prompt template management for the tutor.

Templates are stored as .txt files next to this module and use
str.format placeholders.
"""

from pathlib import Path
from typing import Any


class PromptTemplateError(Exception):
    """Raised when there's an error loading or formatting a prompt template."""

    pass


class PromptTemplate:
    """Manages prompt templates for remote answer generation.

    Example:
        >>> template = PromptTemplate.load("tutor_user")
        >>> prompt = template.format(excerpt="...", question="What is churn?")
    """

    def __init__(self, template_text: str):
        """Initialize with template text.

        Args:
            template_text: The raw template text with placeholders
        """
        self.template = template_text

    @classmethod
    def load(cls, name: str) -> "PromptTemplate":
        """Load a bundled prompt template.

        Args:
            name: Template name without extension (e.g., "tutor_system")

        Returns:
            PromptTemplate instance

        Raises:
            PromptTemplateError: If template file doesn't exist or can't be read
        """
        template_file = Path(__file__).parent / f"{name}.txt"

        if not template_file.exists():
            raise PromptTemplateError(f"Template not found: {name} (expected: {template_file})")

        try:
            return cls(template_file.read_text(encoding="utf-8").strip())
        except OSError as e:
            raise PromptTemplateError(f"Error reading template {name}: {e}") from e

    def format(self, **kwargs: Any) -> str:
        """Format the template with provided variables.

        Raises:
            PromptTemplateError: If required variables are missing
        """
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            raise PromptTemplateError(f"Missing required variable: {e}") from e
        except (IndexError, ValueError) as e:
            raise PromptTemplateError(f"Error formatting template: {e}") from e
