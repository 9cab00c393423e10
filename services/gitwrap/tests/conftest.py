from __future__ import annotations

import logging
import os
import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from gitwrap.ports.command_runner import CommandResult


class FakeRunner:
    """In-memory runner returning canned results in call order."""

    def __init__(self, *results: CommandResult) -> None:
        self._results = list(results)
        self.calls: list[list[str]] = []

    async def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        self.calls.append(list(args))
        result = self._results.pop(0)
        return CommandResult(
            args=list(args),
            exit_code=result.exit_code,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def completed(exit_code: int = 0, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(args=[], exit_code=exit_code, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Build a ``FakeRunner`` from ``(exit_code, stdout, stderr)`` tuples."""

    def _make(*results: tuple[int, str, str]) -> FakeRunner:
        return FakeRunner(*(completed(*r) for r in results))

    return _make


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    monkeypatch.setenv("PATH", f"{path}{os.pathsep}{os.environ.get('PATH', '')}")
    return path


@pytest.fixture
def write_executable(bin_dir: Path) -> Callable[[str, str], Path]:
    def _write(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
        script.chmod(0o755)
        return script

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
