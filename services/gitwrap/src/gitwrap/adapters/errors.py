from dataclasses import dataclass, field

from gitwrap.domain.json_types import JsonDict
from gitwrap.ports.command_runner import CommandResult


@dataclass
class AdapterError(Exception):
    message: str
    details: JsonDict | None = None
    hint: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class CommandNotFound(AdapterError):
    pass


@dataclass
class CommandFailed(AdapterError):
    # Steps that ran before the failure, the failed one last.
    results: list[CommandResult] = field(default_factory=list)
