from __future__ import annotations

import logging

from gitwrap.adapters.command_runner.asyncio_runner import AsyncioCommandRunner
from gitwrap.adapters.errors import CommandFailed
from gitwrap.domain.commit_message import DEFAULT_MAX_LENGTH, summarize_commit_message
from gitwrap.ports.command_runner import CommandResult, CommandRunnerPort

logger = logging.getLogger(__name__)


def commit_steps(message: str, push: bool) -> list[list[str]]:
    steps = [
        ["git", "add", "."],
        ["git", "commit", "-m", message],
    ]
    if push:
        steps.append(["git", "push"])
    return steps


def _failure_message(result: CommandResult) -> str:
    return (
        f"Git command failed with code {result.exit_code}\n"
        f"Stdout: {result.stdout}\n"
        f"Stderr: {result.stderr}"
    )


async def git_commit(
    text: str,
    push: bool = False,
    runner: CommandRunnerPort | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[CommandResult]:
    """Stage everything, commit it and optionally push.

    Steps run in order and stop at the first one that exits non-zero.
    """
    runner_impl = runner or AsyncioCommandRunner()
    message = summarize_commit_message(text, max_length)
    results: list[CommandResult] = []
    for args in commit_steps(message, push):
        result = await runner_impl.run(args)
        results.append(result)
        for output in (result.stdout, result.stderr):
            if output:
                logger.info(output)
        if result.exit_code != 0:
            raise CommandFailed(
                _failure_message(result),
                details={
                    "args": result.args,
                    "exit_code": result.exit_code,
                },
                results=results,
            )
    return results
