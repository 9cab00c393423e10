from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass
class CommandResult:
    args: list[str]
    exit_code: int
    stdout: str
    stderr: str


class CommandRunnerPort(Protocol):
    async def run(self, args: list[str], cwd: Path | None = None) -> CommandResult: ...
