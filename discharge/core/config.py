"""Configuration loading for discharge reports."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from discharge.core.exceptions import ConfigError

DEFAULT_AUTHOR_MAX_LENGTH = 50
OUTPUT_FORMATS = ("text", "json", "csv")

_ENV_TO_FIELD = {
    "DISCHARGE_ENCODING": "encoding",
    "DISCHARGE_BRIEF": "brief",
    "DISCHARGE_PRETTY": "pretty",
    "DISCHARGE_LEGACY_SORTING": "legacy_sorting",
    "DISCHARGE_AUTHOR_MAX_LENGTH": "author_max_length",
    "DISCHARGE_OUTPUT_FORMAT": "output_format",
}

_ALLOWED_KEYS = set(_ENV_TO_FIELD.values())
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _as_path(value: str | Path) -> Path:
    return Path(value).expanduser()


def _as_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _as_int(name: str, value: object) -> int:
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise ConfigError(f"Invalid integer for {name}: {value!r}") from error
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


@dataclass
class DischargeConfig:
    """Resolved defaults for report runs."""

    encoding: str = "utf-8"
    brief: bool = False
    pretty: bool = False
    legacy_sorting: bool = False
    author_max_length: int = DEFAULT_AUTHOR_MAX_LENGTH
    output_format: str = "text"

    @classmethod
    def load(cls, config_path: Path | None = None) -> DischargeConfig:
        """Load config with precedence: defaults < YAML < environment."""
        values: dict[str, object] = {}
        values.update(cls._load_yaml_values(config_path))

        for env_key, field_name in _ENV_TO_FIELD.items():
            env_value = os.environ.get(env_key)
            if env_value is None or env_value == "":
                continue
            values[field_name] = env_value

        defaults = cls()
        output_format = str(values.get("output_format", defaults.output_format)).lower()
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output_format '{output_format}'. Available: {list(OUTPUT_FORMATS)}"
            )

        return cls(
            encoding=str(values.get("encoding", defaults.encoding)),
            brief=_as_bool("brief", values.get("brief", defaults.brief)),
            pretty=_as_bool("pretty", values.get("pretty", defaults.pretty)),
            legacy_sorting=_as_bool(
                "legacy_sorting", values.get("legacy_sorting", defaults.legacy_sorting)
            ),
            author_max_length=_as_int(
                "author_max_length",
                values.get("author_max_length", defaults.author_max_length),
            ),
            output_format=output_format,
        )

    @classmethod
    def _load_yaml_values(cls, config_path: Path | None) -> dict[str, object]:
        candidates = (
            [config_path.expanduser()]
            if config_path is not None
            else [_as_path("~/.config/discharge/config.yaml")]
        )

        for candidate in candidates:
            if not candidate.exists():
                continue

            with candidate.open("r", encoding="utf-8") as config_file:
                loaded = yaml.safe_load(config_file) or {}
            if not isinstance(loaded, dict):
                return {}

            return {key: value for key, value in loaded.items() if key in _ALLOWED_KEYS}

        return {}
