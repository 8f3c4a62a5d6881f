# chat_tokens/cli.py
"""
CLI entry point for chat-tokens.

Available commands:
  chat-tokens prompt REQUEST.json [--config chat_tokens.yaml] [--breakdown]
  chat-tokens text "some text" [--config chat_tokens.yaml]

REQUEST.json is a chat-completions request body (messages, functions,
tools); other keys such as model or temperature are ignored. Pass "-" to
read it from stdin.

Requires: pip install "chat-tokens[cli]"
"""

from __future__ import annotations

import json
import sys
from typing import Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "CLI dependencies missing. Install with: pip install 'chat-tokens[cli]'"
    ) from exc

from pydantic import ValidationError

from .estimator import TokenEstimator
from .exceptions import ChatTokensError
from .models import PromptRequest, TokenBreakdown

app = typer.Typer(
    name="chat-tokens",
    help="Offline prompt token estimation for chat-completion requests.",
    add_completion=False,
)
console = Console()


def _load_estimator(config_path: Optional[str]) -> TokenEstimator:
    if config_path:
        return TokenEstimator.from_yaml(config_path)
    return TokenEstimator.from_env()


def _read_request(path: str) -> PromptRequest:
    if path == "-":
        raw = sys.stdin.read()
    else:
        with open(path) as f:
            raw = f.read()
    return PromptRequest.model_validate(json.loads(raw))


def _build_table(request: PromptRequest, breakdown: TokenBreakdown) -> Table:
    """Render each contribution of an estimate as a Rich table."""
    table = Table(title="Prompt Token Estimate", show_lines=False)
    table.add_column("Contribution", style="bold cyan", no_wrap=True)
    table.add_column("Tokens", justify="right")

    for i, (message, tokens) in enumerate(zip(request.messages, breakdown.messages)):
        table.add_row(f"message[{i}] {message.role}", str(tokens))
    table.add_row("completion", str(breakdown.completion))
    if breakdown.definitions:
        table.add_row("definitions", str(breakdown.definitions))
    if breakdown.system_offset:
        table.add_row("system/definitions offset", str(breakdown.system_offset))
    table.add_row("[bold]total[/bold]", f"[bold]{breakdown.total}[/bold]")
    return table


@app.command()
def prompt(
    path: str = typer.Argument(..., help="Request JSON file, or '-' for stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to chat_tokens.yaml"),
    breakdown: bool = typer.Option(False, "--breakdown", "-b", help="Show each contribution"),
) -> None:
    """Estimate the prompt tokens of a chat-completions request."""
    estimator = _load_estimator(config)
    try:
        request = _read_request(path)
        result = estimator.breakdown(request)
    except (OSError, json.JSONDecodeError, ValidationError, ChatTokensError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if breakdown:
        console.print(_build_table(request, result))
    else:
        typer.echo(str(result.total))


@app.command()
def text(
    value: str = typer.Argument(..., help="Text to count"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to chat_tokens.yaml"),
) -> None:
    """Count the raw tokens of a string."""
    estimator = _load_estimator(config)
    try:
        tokens = estimator.count_string_tokens(value)
    except ChatTokensError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(str(tokens))
