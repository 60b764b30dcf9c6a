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

"""FastAPI server for the AI tutor.

Exposes the tutor service as a single JSON endpoint used by the course
pages, plus a health check.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tutorlite import __version__
from tutorlite.core.models import TutorRequest
from tutorlite.tutor.service import AnswerService, MissingFieldError, build_answer_service
from tutorlite.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Question and course content are required"
GENERATION_FAILED_MESSAGE = "Failed to generate answer"


class AnswerResponse(BaseModel):
    """Response model for a tutor answer."""

    answer: str = Field(description="Answer text")


class ErrorResponse(BaseModel):
    """Response model for client and processing errors."""

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Service health."""

    status: str = Field(default="ok")
    version: str = Field(default=__version__)
    llm_enabled: bool = Field(description="Whether remote answers are configured")


def create_app(service: AnswerService | None = None, settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        service: Pre-built tutor service; built from settings at startup if None
        settings: Settings used to build the service; global settings if None

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if getattr(app.state, "service", None) is None:
            app.state.service = build_answer_service(settings or get_settings())
        logger.info(
            "TutorLite API ready (remote answers %s)",
            "enabled" if app.state.service.remote_enabled else "disabled",
        )
        yield
        logger.info("Shutting down TutorLite API...")

    app = FastAPI(
        title="TutorLite API",
        description="Question answering over course content",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.service = service

    _configure_middleware(app)
    _register_routes(app)

    return app


def _configure_middleware(app: FastAPI) -> None:
    """Configure CORS middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


def _register_routes(app: FastAPI) -> None:
    """Register all API routes."""

    @app.post(
        "/api/ai-tutor",
        response_model=AnswerResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def ai_tutor(request: Request) -> JSONResponse:
        """Answer a question about the supplied course content."""
        return await _handle_question(request)

    @app.get("/api/health", response_model=HealthResponse)
    def health(request: Request) -> HealthResponse:
        """Report service health."""
        service: AnswerService | None = request.app.state.service
        return HealthResponse(llm_enabled=bool(service and service.remote_enabled))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _handle_question(request: Request) -> JSONResponse:
    """Validate the payload, run the tutor service and shape the response."""
    try:
        payload = TutorRequest.model_validate(await request.json())
    except Exception:
        logger.error("Malformed tutor request", exc_info=True)
        return _error(500, GENERATION_FAILED_MESSAGE)

    if not payload.is_complete:
        return _error(400, MISSING_FIELDS_MESSAGE)

    service: AnswerService = request.app.state.service
    try:
        result = await service.answer(
            payload.question or "", payload.content or "", payload.title
        )
    except MissingFieldError:
        return _error(400, MISSING_FIELDS_MESSAGE)
    except Exception:
        logger.error("Answer generation failed", exc_info=True)
        return _error(500, GENERATION_FAILED_MESSAGE)

    logger.debug("Answered with %s strategy", result.source.value)
    return JSONResponse(content=AnswerResponse(answer=result.answer).model_dump())


def run_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server.

    Args:
        host: Host to bind to (default: 127.0.0.1)
        port: Port to listen on
        reload: Enable auto-reload for development
    """
    import uvicorn

    if host == "0.0.0.0":  # nosec B104
        logger.warning(
            "Binding to 0.0.0.0 exposes the server to all network interfaces. "
            "Use 127.0.0.1 for local-only access."
        )

    logger.info("Starting TutorLite API on http://%s:%d", host, port)

    uvicorn.run(
        "tutorlite.api.server:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
