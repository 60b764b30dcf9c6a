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

"""Main CLI application entry point for TutorLite.

Commands:
- ask: answer a question from a course content file
- inspect: show keywords, ranked sentences and the excerpt for a question
- serve: run the HTTP API
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path

import typer
from pydantic import ValidationError

from tutorlite import __version__
from tutorlite.cli.ui import console, print_answer, print_error, print_info, print_retrieval
from tutorlite.rag.context_builder import retrieve
from tutorlite.rag.scorer import rank_sentences
from tutorlite.tutor.service import AnswerService, MissingFieldError, build_answer_service
from tutorlite.utils.config import Settings, get_settings

app = typer.Typer(
    name="tutorlite",
    help="TutorLite - question answering over course content.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"TutorLite version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - Used by Typer callback
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """TutorLite - question answering over course content."""
    pass


def _configure_logging(verbose: bool) -> None:
    log_level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(message)s", force=True)


def _load_settings() -> Settings:
    """Load settings or exit with the validation errors."""
    try:
        return get_settings()
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print_error(f"Invalid setting {field}: {error['msg']}")
        raise typer.Exit(code=1) from None


def _read_content(path: Path) -> str:
    """Read a course content file or exit with an error."""
    if not path.exists():
        print_error(f"Content file not found: {path}")
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        print_error(f"Content file is not valid UTF-8 text: {path}")
        raise typer.Exit(code=1) from None
    except OSError as e:
        print_error(f"Cannot read content file {path}: {e.strerror or e}")
        raise typer.Exit(code=1) from None


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer"),
    content: Path = typer.Option(..., "--content", "-c", help="Course content text file"),
    title: str | None = typer.Option(None, "--title", "-t", help="Course title"),
    local: bool = typer.Option(False, "--local", help="Never call the remote LLM"),
    as_json: bool = typer.Option(False, "--json", help="Print the answer as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    """
    Answer a question from course content.

    Uses the remote LLM when an API key is configured, otherwise (or on any
    remote failure) the local RAG-lite answer.

    Example:
        tutorlite ask "What is a viral loop?" --content growth.txt
    """
    _configure_logging(verbose)
    text = _read_content(content)

    service = AnswerService() if local else build_answer_service(_load_settings())
    if verbose:
        print_info("Remote answers " + ("enabled" if service.remote_enabled else "disabled"))

    try:
        result = asyncio.run(service.answer(question, text, title))
    except MissingFieldError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return

    print_answer(result, title=title)


@app.command()
def inspect(
    question: str = typer.Argument(..., help="Question to analyse"),
    content: Path = typer.Option(..., "--content", "-c", help="Course content text file"),
    top_k: int = typer.Option(5, "--top-k", "-k", min=1, help="Ranked sentences to list"),
) -> None:
    """
    Show how the local retriever handles a question.

    Lists the extracted keywords, the best-scoring sentences and the
    excerpt that would be answered from.
    """
    text = _read_content(content)
    retrieval = retrieve(question, text)
    if retrieval.ranked:
        # Listing only; the excerpt keeps the default top-5 selection
        ranked = rank_sentences(retrieval.sentences, retrieval.keywords, top_k=top_k)
        retrieval = replace(retrieval, ranked=ranked)
    print_retrieval(retrieval)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API server."""
    from tutorlite.api.server import run_server

    settings = _load_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s", force=True)
    run_server(host=host, port=port, reload=reload)


def run() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    run()
