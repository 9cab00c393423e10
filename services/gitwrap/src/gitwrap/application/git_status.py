from __future__ import annotations

from gitwrap.adapters.command_runner.asyncio_runner import AsyncioCommandRunner
from gitwrap.adapters.errors import CommandFailed
from gitwrap.ports.command_runner import CommandRunnerPort

GIT_STATUS_ARGS = ["git", "status"]


async def git_status(runner: CommandRunnerPort | None = None) -> str:
    """Return the output of ``git status`` in the current directory, verbatim.

    Raises ``CommandFailed`` carrying git's stderr as its message when git exits
    non-zero, and ``CommandNotFound`` when git cannot be launched at all.
    """
    runner_impl = runner or AsyncioCommandRunner()
    result = await runner_impl.run(list(GIT_STATUS_ARGS))
    if result.exit_code != 0:
        raise CommandFailed(
            result.stderr,
            details={
                "args": result.args,
                "exit_code": result.exit_code,
                "stdout": result.stdout,
            },
        )
    return result.stdout
