"""
Tests for configuration loading — portable_env.toml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from portable_env.core.config.loader import (
    load_config,
    parse_config,
)
from portable_env.core.errors import (
    ConfigError,
    ConfigMalformedError,
    ConfigNotFoundError,
    ConfigUnreadableError,
    MissingFieldError,
    UnknownCommandError,
    UnknownMutationKindError,
)
from portable_env.core.models import IncludeRecord, MutationKind, MutationRecord


def _write(tmp_path: Path, content: str, name: str = "portable_env.toml") -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_example(self, example_config: Path):
        config = load_config(example_config)
        assert list(config.profiles) == ["ant", "cmake", "jdk17", "openssl32", "maven"]

    def test_entries_typed_and_ordered(self, example_config: Path):
        ant = load_config(example_config).get_profile("ant")
        assert ant is not None
        assert ant.entries[0] == IncludeRecord(env="jdk17")
        assert ant.entries[1] == MutationRecord(
            key="ANT_HOME", value="C:\\portable\\ant-1.9", mode=MutationKind.PATH,
        )
        assert ant.entries[2].mode is MutationKind.PREPEND_PATH
        assert ant.entries[2].value == "%ANT_HOME%\\bin"

    def test_flat_document_without_scripts_table(self, tmp_path: Path):
        path = _write(tmp_path, """\
            git = [{command = 'env', key = 'PATH', value = 'C:\\Git\\cmd', mode = 'PREPEND_PATH'}]
        """)
        config = load_config(path)
        assert list(config.profiles) == ["git"]

    def test_flat_document_with_profile_named_scripts(self, tmp_path: Path):
        path = _write(tmp_path, """\
            scripts = [{command = 'env', key = 'SCRIPTS', value = 'C:\\scripts', mode = 'PATH'}]
            git = [{command = 'source', env = 'scripts'}]
        """)
        config = load_config(path)
        assert list(config.profiles) == ["scripts", "git"]
        assert config.get_profile("scripts").entries[0].key == "SCRIPTS"

    def test_path_like_profile_name_rejected(self, tmp_path: Path):
        path = _write(tmp_path, """\
            [scripts]
            "tools/jdk" = [{command = 'env', key = 'JAVA_HOME', value = 'C:\\jdk', mode = 'PATH'}]
            ant = [{command = 'source', env = 'tools/jdk'}]
        """)
        with pytest.raises(ConfigMalformedError, match="profile 'tools/jdk': name must be a plain file name"):
            load_config(path)

    def test_yaml_config(self, tmp_path: Path):
        path = _write(tmp_path, """\
            scripts:
              putty:
                - command: env
                  key: PATH
                  value: 'C:\\portable\\putty'
                  mode: PREPEND_PATH
              tools:
                - command: source
                  env: putty
        """, name="portable_env.yml")
        config = load_config(path)
        assert list(config.profiles) == ["putty", "tools"]
        assert config.get_profile("tools").includes == ["putty"]

    def test_empty_profile(self, tmp_path: Path):
        path = _write(tmp_path, """\
            [scripts]
            nothing = []
        """)
        assert load_config(path).get_profile("nothing").entries == ()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError, match="not found"):
            load_config(tmp_path / "nonexistent.toml")

    def test_directory_is_not_a_config(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path)

    def test_undecodable_file_raises(self, tmp_path: Path):
        path = tmp_path / "portable_env.toml"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ConfigUnreadableError):
            load_config(path)

    def test_invalid_toml_raises(self, tmp_path: Path):
        path = _write(tmp_path, "[scripts\nant = [")
        with pytest.raises(ConfigMalformedError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = _write(tmp_path, ":: invalid: yaml: [", name="portable_env.yaml")
        with pytest.raises(ConfigMalformedError, match="Invalid YAML"):
            load_config(path)

    def test_all_errors_are_config_errors(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.toml")


class TestParseConfig:
    """Record-level validation in parse_config()."""

    def test_not_a_mapping(self):
        with pytest.raises(ConfigMalformedError, match="Expected a mapping"):
            parse_config(["ant"])

    def test_scripts_string_is_a_flat_profile(self):
        with pytest.raises(ConfigMalformedError, match="profile 'scripts': expected a list"):
            parse_config({"scripts": "ant"})

    @pytest.mark.parametrize("name", ["tools/jdk", "..\\x", "../../escaped", "sub\\ant", "..", "."])
    def test_profile_name_must_be_plain_file_name(self, name):
        with pytest.raises(ConfigMalformedError, match="plain file name"):
            parse_config({"scripts": {name: []}})

    @pytest.mark.parametrize("name", ["jdk17", "openssl-3.2", "my_tools", "..ant"])
    def test_profile_name_accepted(self, name):
        assert list(parse_config({"scripts": {name: []}}).profiles) == [name]

    def test_profile_not_a_list(self):
        with pytest.raises(ConfigMalformedError, match="profile 'ant'"):
            parse_config({"scripts": {"ant": {"command": "env"}}})

    def test_record_not_a_mapping(self):
        with pytest.raises(ConfigMalformedError, match="record 0"):
            parse_config({"scripts": {"ant": ["source jdk17"]}})

    def test_missing_command(self):
        with pytest.raises(MissingFieldError, match="'command'"):
            parse_config({"scripts": {"ant": [{"env": "jdk17"}]}})

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError, match="'unset'") as exc:
            parse_config({"scripts": {"ant": [{"command": "unset", "key": "X"}]}})
        assert exc.value.command == "unset"

    @pytest.mark.parametrize("missing", ["key", "value", "mode"])
    def test_env_missing_field(self, missing):
        record = {"command": "env", "key": "X", "value": "1", "mode": "SET"}
        del record[missing]
        with pytest.raises(MissingFieldError) as exc:
            parse_config({"scripts": {"p": [record]}})
        assert exc.value.field == missing
        assert "profile 'p' record 0" in str(exc.value)

    def test_source_missing_env(self):
        with pytest.raises(MissingFieldError, match="'env'"):
            parse_config({"scripts": {"p": [{"command": "source"}]}})

    def test_unknown_mode(self):
        record = {"command": "env", "key": "X", "value": "1", "mode": "REPLACE"}
        with pytest.raises(UnknownMutationKindError, match="REPLACE") as exc:
            parse_config({"scripts": {"p": [record]}})
        assert exc.value.token == "REPLACE"

    def test_non_string_value(self):
        record = {"command": "env", "key": "X", "value": 1, "mode": "SET"}
        with pytest.raises(ConfigMalformedError, match="'value' must be a string"):
            parse_config({"scripts": {"p": [record]}})

    def test_empty_variable_name(self):
        record = {"command": "env", "key": "", "value": "1", "mode": "SET"}
        with pytest.raises(ConfigMalformedError, match="must not be empty"):
            parse_config({"scripts": {"p": [record]}})

    def test_empty_value_allowed(self):
        record = {"command": "env", "key": "X", "value": "", "mode": "SET"}
        config = parse_config({"scripts": {"p": [record]}})
        assert config.get_profile("p").entries[0].value == ""

    def test_unknown_include_target(self):
        with pytest.raises(ConfigMalformedError, match="unknown profile 'jdk99'"):
            parse_config({"scripts": {"ant": [{"command": "source", "env": "jdk99"}]}})

    def test_extra_fields_ignored(self, caplog):
        record = {"command": "source", "env": "base", "comment": "hi"}
        config = parse_config({"scripts": {"base": [], "p": [record]}})
        assert config.get_profile("p").entries == (IncludeRecord(env="base"),)
        assert "comment" in caplog.text

