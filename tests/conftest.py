"""Shared pytest fixtures for TutorLite tests.

Provides mock LLM providers, sample course content, and common utilities.
"""

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from tutorlite.llm.base import BaseLLMProvider, LLMError

COURSE_CONTENT = (
    "Growth hacking combines marketing, product and data. "
    "It focuses on rapid experimentation across the funnel.\n\n"
    "Viral Loops: Design your product so that users naturally invite others. "
    "Each new user should bring in more users over time. "
    "Referral programs reward both the sender and the receiver.\n\n"
    "Retention matters more than acquisition in the long run. "
    "Churn measures the share of customers who stop paying each month."
)

VIRAL_LOOP_SENTENCE = "Viral Loops: Design your product so that users naturally invite others"


# ============================================================================
# Mock LLM Provider Fixtures
# ============================================================================


class MockLLMProvider(BaseLLMProvider):
    """Mock LLM provider for testing without real API calls."""

    def __init__(self, response: str = "A remote answer.", **kwargs: Any):
        """Initialize mock provider.

        Args:
            response: Text to return from every completion
            **kwargs: Additional arguments for customization
        """
        self.response = response
        self.call_count = 0
        self.last_prompt: str | None = None
        self.last_system: str | None = None
        self.last_kwargs: dict[str, Any] = {}

    async def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> str:
        """Record the call and return the canned response."""
        self.call_count += 1
        self.last_prompt = prompt
        self.last_system = system
        self.last_kwargs = {"temperature": temperature, "max_tokens": max_tokens, **kwargs}
        return self.response


class FailingLLMProvider(BaseLLMProvider):
    """Provider whose every call fails."""

    def __init__(self, error: Exception | None = None):
        self.error = error or LLMError("remote unavailable")
        self.call_count = 0

    async def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> str:
        self.call_count += 1
        raise self.error


@pytest.fixture
def mock_llm() -> MockLLMProvider:
    """Provide a mock LLM that answers successfully."""
    return MockLLMProvider()


@pytest.fixture
def mock_llm_class() -> type[MockLLMProvider]:
    """Provide MockLLMProvider class for tests that need custom responses."""
    return MockLLMProvider


@pytest.fixture
def failing_llm() -> FailingLLMProvider:
    """Provide an LLM that always raises."""
    return FailingLLMProvider()


@pytest.fixture
def failing_llm_class() -> type[FailingLLMProvider]:
    """Provide FailingLLMProvider class for tests that need a specific error."""
    return FailingLLMProvider


# ============================================================================
# Test Data Fixtures
# ============================================================================


@pytest.fixture
def course_content() -> str:
    """Provide sample course content with three paragraphs."""
    return COURSE_CONTENT


@pytest.fixture
def content_file(tmp_path: Path) -> Path:
    """Write the sample course content to a temporary file."""
    path = tmp_path / "course.txt"
    path.write_text(COURSE_CONTENT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_llm_env(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real API keys out of tests (E2E tests keep them)."""
    if "e2e" in request.keywords:
        return
    for name in ("TUTORLITE_OPENROUTER_API_KEY", "OPENROUTER_API_KEY"):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Typer CLI test runner."""
    return CliRunner()


# ============================================================================
# Pytest Configuration Hooks
# ============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Modify test collection to auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom command line options."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run E2E tests (requires real API keys)",
    )


def pytest_runtest_setup(item: pytest.Item) -> None:
    """Skip E2E tests unless --run-e2e is specified."""
    if "e2e" in item.keywords and not item.config.getoption("--run-e2e"):
        pytest.skip("E2E tests skipped (use --run-e2e to run)")
