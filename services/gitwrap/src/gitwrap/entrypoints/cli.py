import asyncio
import json as _json
from pathlib import Path
from typing import TypeVar

import typer

from gitwrap.adapters.command_runner.asyncio_runner import AsyncioCommandRunner
from gitwrap.adapters.errors import AdapterError, CommandFailed, CommandNotFound
from gitwrap.application.config import GitwrapConfig, load_config
from gitwrap.application.git_commit import git_commit
from gitwrap.application.git_status import git_status
from gitwrap.application.result_serialization import command_artifact, serialize_result
from gitwrap.domain.diagnostics import CommandLocation, Diagnostic, Severity
from gitwrap.domain.result import Result
from gitwrap.entrypoints.logging_config import setup_logging
from gitwrap.ports.command_runner import CommandResult

T = TypeVar("T")

app = typer.Typer(add_completion=False)


def _load_settings(config: Path | None, verbose: bool) -> Result[GitwrapConfig]:
    loaded = load_config(config)
    level = "DEBUG" if verbose else (loaded.value.log_level if loaded.value else "WARNING")
    setup_logging(level)
    return loaded


def _execution_diagnostic(code: str, rule: str, error: AdapterError) -> Diagnostic:
    args = (error.details or {}).get("args")
    return Diagnostic(
        code=code,
        rule=rule,
        severity=Severity.ERROR,
        message=str(error),
        location=CommandLocation(args) if isinstance(args, list) else None,
        hint=error.hint,
        details=error.details,
        is_execution=True,
    )


def _emit(result: Result[T], command: str, args: list[str], json: bool, text: str | None) -> None:
    if json:
        typer.echo(_json.dumps(serialize_result(result, command=command, args=args)))
    else:
        if text:
            typer.echo(text, nl=False)
        for diag in result.diagnostics:
            typer.echo(diag.message, err=True, nl=not diag.message.endswith("\n"))
    raise typer.Exit(result.exit_code)


@app.command()
def status(
    json: bool = typer.Option(False, "--json"),
    config: Path | None = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print `git status` for the current directory."""
    settings = _load_settings(config, verbose)
    if settings.value is None:
        _emit(settings, "status", [], json, None)

    result: Result[str] = Result()
    try:
        result.value = asyncio.run(git_status(AsyncioCommandRunner()))
    except CommandNotFound as exc:
        result.diagnostics.append(_execution_diagnostic("GIT_NOT_FOUND", "git.launch", exc))
    except CommandFailed as exc:
        result.diagnostics.append(_execution_diagnostic("GIT_STATUS_FAILED", "git.status", exc))
    if result.value is not None:
        result.artifacts.append({"kind": "status", "stdout": result.value})
    _emit(result, "status", [], json, result.value)


@app.command()
def commit(
    message: str = typer.Argument(...),
    push: bool | None = typer.Option(None, "--push/--no-push"),
    json: bool = typer.Option(False, "--json"),
    config: Path | None = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Stage all changes, commit them with MESSAGE and optionally push."""
    settings = _load_settings(config, verbose)
    if settings.value is None:
        _emit(settings, "commit", [message], json, None)
    commit_settings = settings.value.commit
    should_push = commit_settings.push if push is None else push

    result: Result[list[CommandResult]] = Result()
    steps: list[CommandResult] = []
    try:
        result.value = asyncio.run(
            git_commit(
                message,
                push=should_push,
                runner=AsyncioCommandRunner(),
                max_length=commit_settings.max_message_length,
            )
        )
        steps = result.value
    except CommandNotFound as exc:
        result.diagnostics.append(_execution_diagnostic("GIT_NOT_FOUND", "git.launch", exc))
    except CommandFailed as exc:
        result.diagnostics.append(_execution_diagnostic("GIT_COMMIT_FAILED", "git.commit", exc))
        steps = exc.results
    for step in steps:
        result.artifacts.append(command_artifact(step))
    text = "".join(step.stdout for step in steps)
    _emit(result, "commit", [message], json, text)
