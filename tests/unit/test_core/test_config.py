"""Tests for report configuration loading."""

from pathlib import Path

import pytest

from discharge.core.config import DischargeConfig
from discharge.core.exceptions import ConfigError


def test_config_defaults():
    config = DischargeConfig.load()

    assert config.encoding == "utf-8"
    assert config.brief is False
    assert config.pretty is False
    assert config.legacy_sorting is False
    assert config.author_max_length == 50
    assert config.output_format == "text"


def test_config_environment_overrides(monkeypatch):
    monkeypatch.setenv("DISCHARGE_ENCODING", "latin-1")
    monkeypatch.setenv("DISCHARGE_BRIEF", "yes")
    monkeypatch.setenv("DISCHARGE_LEGACY_SORTING", "1")
    monkeypatch.setenv("DISCHARGE_AUTHOR_MAX_LENGTH", "60")
    monkeypatch.setenv("DISCHARGE_OUTPUT_FORMAT", "CSV")

    config = DischargeConfig.load()

    assert config.encoding == "latin-1"
    assert config.brief is True
    assert config.legacy_sorting is True
    assert config.author_max_length == 60
    assert config.output_format == "csv"


def test_config_file_used_and_env_takes_precedence(monkeypatch, tmp_path):
    config_file = tmp_path / "discharge.yaml"
    config_file.write_text(
        (
            "encoding: cp1252\n"
            "pretty: true\n"
            "legacy_sorting: true\n"
            "unknown_key: ignored\n"
        ),
        encoding="utf-8",
    )

    monkeypatch.setenv("DISCHARGE_LEGACY_SORTING", "false")

    config = DischargeConfig.load(config_path=config_file)

    assert config.encoding == "cp1252"
    assert config.pretty is True
    assert config.legacy_sorting is False
    assert not hasattr(config, "unknown_key")


def test_config_loads_user_config_yaml(monkeypatch, tmp_path):
    home = tmp_path / "user"
    config_dir = home / ".config" / "discharge"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("brief: true\n", encoding="utf-8")
    monkeypatch.setenv("HOME", str(home))

    config = DischargeConfig.load()

    assert config.brief is True


def test_config_missing_explicit_file_uses_defaults(tmp_path):
    config = DischargeConfig.load(config_path=Path(tmp_path / "missing.yaml"))

    assert config == DischargeConfig()


def test_config_non_mapping_yaml_ignored(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- brief\n- pretty\n", encoding="utf-8")

    config = DischargeConfig.load(config_path=config_file)

    assert config == DischargeConfig()


@pytest.mark.parametrize(
    ("env_key", "value"),
    [
        ("DISCHARGE_BRIEF", "maybe"),
        ("DISCHARGE_AUTHOR_MAX_LENGTH", "many"),
        ("DISCHARGE_AUTHOR_MAX_LENGTH", "0"),
        ("DISCHARGE_OUTPUT_FORMAT", "xml"),
    ],
)
def test_config_invalid_values(monkeypatch, env_key, value):
    monkeypatch.setenv(env_key, value)

    with pytest.raises(ConfigError):
        DischargeConfig.load()
