"""Settings loader for recall."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from recall.core.errors import ConfigError

CONFIG_FILENAME = ".recall.toml"


@dataclass(frozen=True)
class Settings:
    config_path: Path
    db_path: Path
    editor_command: list[str] | None
    opener_command: list[str] | None


def find_config_file(start: Path | None = None) -> Path | None:
    """Look for the config file in ``start`` and then in each of its parents."""
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_settings(
    config_path: Path | None = None, start: Path | None = None
) -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    if config_path is None and (env_path := os.environ.get("RECALL_CONFIG")):
        config_path = Path(env_path).expanduser()
    if config_path is None:
        config_path = find_config_file(start)
    if config_path is None:
        raise ConfigError(
            f"Could not find config file. Create a file named '{CONFIG_FILENAME}' "
            "in the current directory or one of its ancestors"
        )

    raw = _read_config(config_path)
    db_path_value = os.environ.get("RECALL_DB_PATH") or raw.get("db_path")
    if not isinstance(db_path_value, str) or not db_path_value.strip():
        raise ConfigError(f"Missing 'db_path' in config located at {config_path}")

    return Settings(
        config_path=config_path,
        db_path=_resolve_db_path(db_path_value, config_path),
        editor_command=_parse_command(raw, "editor_command", config_path),
        opener_command=_parse_command(raw, "opener_command", config_path),
    )


def _read_config(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse config located at {path}: {exc}") from exc


def _resolve_db_path(value: str, config_path: Path) -> Path:
    db_path = Path(value).expanduser()
    if not db_path.is_absolute():
        db_path = config_path.resolve().parent / db_path
    return db_path


def _parse_command(raw: dict[str, Any], key: str, path: Path) -> list[str] | None:
    value = raw.get(key)
    if value is None:
        return None
    if (
        not isinstance(value, list)
        or not value
        or not all(isinstance(item, str) for item in value)
    ):
        raise ConfigError(
            f"'{key}' in {path} must be a non-empty list of strings, "
            "starting with the program to run"
        )
    return list(value)
