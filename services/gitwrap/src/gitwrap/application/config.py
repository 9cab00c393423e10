from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import jsonschema
import yaml

from gitwrap.domain.commit_message import DEFAULT_MAX_LENGTH
from gitwrap.domain.diagnostics import Diagnostic, FileLocation, Severity
from gitwrap.domain.json_types import JsonDict, as_json_dict
from gitwrap.domain.result import Result

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitwrap.yaml"
CONFIG_ENV_VAR = "GITWRAP_CONFIG"
SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "config.schema.v1.json"


@dataclass(frozen=True)
class CommitSettings:
    max_message_length: int = DEFAULT_MAX_LENGTH
    push: bool = False


@dataclass(frozen=True)
class GitwrapConfig:
    log_level: str = "WARNING"
    commit: CommitSettings = field(default_factory=CommitSettings)


def config_path(explicit: Path | None = None) -> Path:
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return Path.cwd() / CONFIG_FILENAME


def load_schema() -> JsonDict:
    return as_json_dict(json.loads(SCHEMA_PATH.read_text(encoding="utf-8")))


def validate_config_schema(raw: JsonDict, path: Path) -> list[Diagnostic]:
    try:
        jsonschema.validate(raw, load_schema())
        return []
    except jsonschema.ValidationError as e:
        field_path = ".".join(str(part) for part in e.absolute_path)
        return [
            Diagnostic(
                code="CONFIG_SCHEMA_INVALID",
                rule="config.schema",
                severity=Severity.ERROR,
                message=e.message,
                location=FileLocation(str(path)),
                details={"field": field_path} if field_path else None,
            )
        ]


def _build_config(raw: JsonDict) -> GitwrapConfig:
    commit = as_json_dict(raw.get("commit"))
    max_length = commit.get("max_message_length", DEFAULT_MAX_LENGTH)
    return GitwrapConfig(
        log_level=str(raw.get("log_level", "WARNING")),
        commit=CommitSettings(
            max_message_length=int(max_length) if isinstance(max_length, int) else DEFAULT_MAX_LENGTH,
            push=bool(commit.get("push", False)),
        ),
    )


def load_config(path: Path | None = None) -> Result[GitwrapConfig]:
    resolved = config_path(path)
    if not resolved.exists():
        logger.debug("No config at %s, using defaults", resolved)
        return Result(value=GitwrapConfig())
    try:
        loaded: object = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_PARSE_FAILED",
                    rule="config.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(resolved)),
                )
            ]
        )
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_SCHEMA_INVALID",
                    rule="config.schema",
                    severity=Severity.ERROR,
                    message=f"{CONFIG_FILENAME} must contain a mapping",
                    location=FileLocation(str(resolved)),
                )
            ]
        )
    raw = as_json_dict(loaded)
    diagnostics = validate_config_schema(raw, resolved)
    if diagnostics:
        return Result(diagnostics=diagnostics)
    logger.debug("Loaded config from %s", resolved)
    return Result(value=_build_config(raw))
