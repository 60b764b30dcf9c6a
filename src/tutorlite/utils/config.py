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

"""Configuration management for TutorLite.

Handles the remote LLM credential, model settings and logging using
Pydantic Settings. Supports environment variables and .env files.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tutorlite.llm.openai_provider import DEFAULT_MODEL, OPENROUTER_BASE_URL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with the
    TUTORLITE_ prefix. The API key and app URL also honour the unprefixed
    names used by existing deployments.

    Example .env file:
        TUTORLITE_OPENROUTER_API_KEY=sk-or-...
        TUTORLITE_LLM_MODEL=meta-llama/llama-3.2-3b-instruct
        TUTORLITE_LOG_LEVEL=DEBUG

    Example usage:
        >>> settings = Settings()
        >>> settings.llm_enabled
        False
    """

    # Remote LLM
    openrouter_api_key: str | None = Field(
        default=None,
        description="API key for the chat-completion endpoint; unset means local answers only",
        validation_alias=AliasChoices("TUTORLITE_OPENROUTER_API_KEY", "OPENROUTER_API_KEY"),
    )

    llm_base_url: str = Field(
        default=OPENROUTER_BASE_URL,
        description="Base URL of the OpenAI-compatible API",
    )

    llm_model: str = Field(
        default=DEFAULT_MODEL,
        description="Model identifier",
    )

    llm_temperature: float = Field(
        default=0.7,
        description="Sampling temperature for remote answers",
        gt=0.0,
        le=2.0,
    )

    llm_max_tokens: int = Field(
        default=300,
        description="Output token budget for remote answers",
        gt=0,
    )

    request_timeout: float = Field(
        default=30.0,
        description="Timeout for the remote request (seconds)",
        gt=0,
    )

    # Attribution headers
    app_url: str = Field(
        default="http://localhost:3000",
        description="Public URL of the app, sent as HTTP-Referer",
        validation_alias=AliasChoices("TUTORLITE_APP_URL", "NEXT_PUBLIC_APP_URL"),
    )

    app_title: str = Field(
        default="TutorLite",
        description="Application name, sent as X-Title",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            level = value.strip().upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
            return level
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TUTORLITE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def llm_enabled(self) -> bool:
        """True when a remote API key is configured."""
        return bool(self.openrouter_api_key and self.openrouter_api_key.strip())


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Only entry points (CLI, server) read this; library code receives
    settings explicitly.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
