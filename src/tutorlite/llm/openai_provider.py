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

"""OpenAI-compatible LLM provider implementation.

Implements the BaseLLMProvider interface on top of the official OpenAI SDK.
Any chat-completions endpoint speaking the OpenAI protocol works; the
default targets OpenRouter.
"""

from typing import Any

import openai

from .base import (
    BaseLLMProvider,
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMTimeoutError,
)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "meta-llama/llama-3.2-3b-instruct"


class OpenAIProvider(BaseLLMProvider):
    """Chat-completion provider using the OpenAI Python SDK (v1.0+).

    Example:
        >>> provider = OpenAIProvider(
        ...     api_key="sk-or-...",
        ...     app_url="https://tutor.example.org",
        ...     app_title="TutorLite",
        ... )
        >>> answer = await provider.complete("Explain viral loops", system="Be brief.")
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = OPENROUTER_BASE_URL,
        timeout: float = 30.0,
        app_url: str | None = None,
        app_title: str | None = None,
    ):
        """Initialize provider.

        Args:
            api_key: API key for the endpoint
            model: Model identifier understood by the endpoint
            base_url: Base URL of the OpenAI-compatible API
            timeout: Request timeout in seconds
            app_url: Sent as HTTP-Referer (used by OpenRouter for attribution)
            app_title: Sent as X-Title
        """
        headers: dict[str, str] = {}
        if app_url:
            headers["HTTP-Referer"] = app_url
        if app_title:
            headers["X-Title"] = app_title

        # Single attempt per call; fallback happens one level up
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers=headers or None,
        )
        self.model = model

    async def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> str:
        """Generate a single chat completion.

        Raises:
            LLMAuthenticationError: If API key is invalid
            LLMRateLimitError: If rate limit is exceeded
            LLMTimeoutError: If request times out
            LLMError: For other API errors and empty or malformed responses
        """
        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,  # type: ignore[arg-type]
                temperature=temperature,
                max_tokens=max_tokens,
                **kwargs,
            )
        except openai.AuthenticationError as e:
            raise LLMAuthenticationError(f"LLM authentication failed: {e}") from e
        except openai.RateLimitError as e:
            raise LLMRateLimitError(f"LLM rate limit exceeded: {e}") from e
        except openai.APITimeoutError as e:
            raise LLMTimeoutError(f"LLM request timed out: {e}") from e
        except openai.APIError as e:
            raise LLMError(f"LLM API error: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise LLMError("LLM returned no choices")

        content = getattr(choices[0].message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise LLMError("LLM returned empty response")

        return content
