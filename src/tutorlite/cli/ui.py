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

"""Rich UI components for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tutorlite.core.models import AnswerSource, TutorAnswer
from tutorlite.rag.context_builder import Retrieval

# Global console instance shared across commands
console = Console()

__all__ = [
    "console",
    "print_answer",
    "print_error",
    "print_info",
    "print_retrieval",
    "print_warning",
]


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[cyan]ℹ[/cyan] {escape(message)}")


def print_answer(result: TutorAnswer, title: str | None = None) -> None:
    """Print an answer in a panel labelled with its source.

    Args:
        result: Answer to display
        title: Optional course title shown in the panel header
    """
    source = "LLM" if result.source == AnswerSource.LLM else "local RAG-lite"
    header = Text(title or "Answer", style="bold cyan")
    console.print(
        Panel(
            Text(result.answer),
            title=header,
            subtitle=f"[dim]{source}[/dim]",
            border_style="cyan",
        )
    )


def print_retrieval(retrieval: Retrieval) -> None:
    """Print keywords, ranked sentences and the excerpt of a retrieval run."""
    keywords = escape(", ".join(sorted(retrieval.keywords))) or "[dim](none)[/dim]"
    console.print(f"[bold]Keywords:[/bold] {keywords}")
    console.print(f"[bold]Sentences:[/bold] {len(retrieval.sentences)}")

    if retrieval.ranked:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Rank", justify="right", style="dim")
        table.add_column("Pos", justify="right")
        table.add_column("Score", justify="right", style="green")
        table.add_column("Sentence", overflow="fold")
        for rank, item in enumerate(retrieval.ranked, start=1):
            table.add_row(
                str(rank), str(item.index), f"{item.score:.1f}", Text(item.text.strip())
            )
        console.print(table)
    else:
        print_warning("No sentence matched; falling back to the leading paragraphs")

    console.print(Panel(Text(retrieval.excerpt), title="[bold]Excerpt[/bold]", border_style="dim"))
