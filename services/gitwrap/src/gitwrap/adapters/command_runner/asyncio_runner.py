from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from gitwrap.adapters.errors import CommandNotFound
from gitwrap.ports.command_runner import CommandResult

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


async def _drain(stream: asyncio.StreamReader | None, sink: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            break
        sink.extend(chunk)


def _decode(data: bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")


class AsyncioCommandRunner:
    """Runs one child process per call and captures both output streams.

    Both pipes are read concurrently until EOF so that a child filling one
    pipe never blocks on the other. The exit status is awaited last.
    """

    async def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        logger.debug("Running %s", " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (FileNotFoundError, PermissionError) as e:
            raise CommandNotFound(
                f"Could not launch {args[0]}: {e.strerror or e}",
                details={"args": list(args)},
                hint=f"Make sure {args[0]} is installed and on PATH.",
                cause=e,
            ) from e

        stdout = bytearray()
        stderr = bytearray()
        await asyncio.gather(
            _drain(process.stdout, stdout),
            _drain(process.stderr, stderr),
        )
        exit_code = await process.wait()
        logger.debug("%s exited with %d", args[0], exit_code)
        return CommandResult(
            args=list(args),
            exit_code=exit_code,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
