from pathlib import Path

from gitwrap.application.config import (
    CONFIG_ENV_VAR,
    CommitSettings,
    GitwrapConfig,
    config_path,
    load_config,
)


def test_missing_config_yields_defaults(tmp_path):
    result = load_config(tmp_path / ".gitwrap.yaml")
    assert result.diagnostics == []
    assert result.value == GitwrapConfig()
    assert result.value.commit.max_message_length == 150


def test_empty_config_yields_defaults(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("")
    assert load_config(path).value == GitwrapConfig()


def test_config_values_are_loaded(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("log_level: DEBUG\ncommit:\n  max_message_length: 72\n  push: true\n")
    result = load_config(path)
    assert result.value == GitwrapConfig(
        log_level="DEBUG",
        commit=CommitSettings(max_message_length=72, push=True),
    )


def test_unparseable_yaml_is_reported(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("commit: [unclosed\n")
    result = load_config(path)
    assert result.value is None
    assert [d.code for d in result.diagnostics] == ["CONFIG_PARSE_FAILED"]
    assert result.exit_code == 2


def test_schema_violation_is_reported(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("commit:\n  max_message_length: 2\n")
    result = load_config(path)
    assert result.value is None
    assert result.diagnostics[0].code == "CONFIG_SCHEMA_INVALID"
    assert result.diagnostics[0].details == {"field": "commit.max_message_length"}


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("executable: /usr/bin/git\n")
    assert load_config(path).diagnostics[0].code == "CONFIG_SCHEMA_INVALID"


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_text("- a\n- b\n")
    assert load_config(path).diagnostics[0].code == "CONFIG_SCHEMA_INVALID"


def test_config_path_prefers_explicit_then_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert config_path() == tmp_path / ".gitwrap.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, "/etc/gitwrap.yaml")
    assert config_path() == Path("/etc/gitwrap.yaml")
    assert config_path(Path("other.yaml")) == Path("other.yaml")


def test_invalid_utf8_config_is_reported(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.write_bytes(b"log_level: \xff\xfe\n")
    result = load_config(path)
    assert result.value is None
    assert [d.code for d in result.diagnostics] == ["CONFIG_PARSE_FAILED"]
    assert result.exit_code == 2


def test_unreadable_config_is_reported(tmp_path):
    path = tmp_path / ".gitwrap.yaml"
    path.mkdir()
    result = load_config(path)
    assert result.value is None
    assert [d.code for d in result.diagnostics] == ["CONFIG_PARSE_FAILED"]
    assert result.diagnostics[0].location.path == str(path)
