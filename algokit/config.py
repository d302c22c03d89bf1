"""Application settings read from a YAML file with environment overrides."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

CONFIG_NAMES = ("config.yaml", "config.yml", "config")
"""File names searched for, in order, when a directory is given."""


@dataclass
class ServerConfig:
    """Settings for the HTTP server."""

    port: int = 0


@dataclass
class DatabaseConfig:
    """Settings for the database connection."""

    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    dbname: str = ""
    sslmode: str = ""
    timezone: str = ""


@dataclass
class Config:
    """All application settings."""

    server: ServerConfig = field(default_factory=ServerConfig)
    db: DatabaseConfig = field(default_factory=DatabaseConfig)


def _locate(path: str | os.PathLike[str]) -> Path:
    candidate = Path(path)
    if candidate.is_dir():
        for name in CONFIG_NAMES:
            found = candidate / name
            if found.is_file():
                return found
        raise FileNotFoundError(f"no config file found in {candidate}")
    if not candidate.is_file():
        raise FileNotFoundError(f"config file {candidate} not found")
    return candidate


def _lower_keys(mapping: Mapping[Any, Any], where: str) -> dict[str, Any]:
    if not isinstance(mapping, Mapping):
        raise ValueError(f"{where} must be a mapping")
    return {str(key).lower(): value for key, value in mapping.items()}


def _coerce(value: Any, kind: type, key: str) -> Any:
    try:
        if kind is int:
            if isinstance(value, bool):
                return int(value)
            if isinstance(value, int):
                return value
            if isinstance(value, float) and value.is_integer():
                return int(value)
            if isinstance(value, str):
                return int(value.strip())
            raise TypeError
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (Mapping, list)):
            raise TypeError
        return str(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid value for {key}: {value!r}") from None


def _section(raw: dict[str, Any], name: str, cls: type) -> Any:
    values = raw.get(name)
    values = _lower_keys(values, name) if values is not None else {}
    settings: dict[str, Any] = {}
    for spec in fields(cls):
        key = f"{name}.{spec.name}"
        env_value = os.environ.get(key.upper().replace(".", "_"))
        value = env_value if env_value else values.get(spec.name)
        if value is None:
            continue
        settings[spec.name] = _coerce(value, type(spec.default), key)
    return cls(**settings)


def load_config(path: str | os.PathLike[str] = ".") -> Config:
    """Read settings from ``path``, a YAML file or a directory holding one.

    Environment variables named after a key with dots turned into
    underscores, in upper case (``SERVER_PORT``, ``DB_HOST``), take
    precedence over the file. Raises FileNotFoundError when no file is
    found and ValueError when its content is malformed.
    """
    source = _locate(path)
    try:
        document = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"cannot parse {source}: {exc}") from None
    raw = _lower_keys(document, "config") if document is not None else {}
    return Config(
        server=_section(raw, "server", ServerConfig),
        db=_section(raw, "db", DatabaseConfig),
    )


@functools.lru_cache(maxsize=None)
def get_config() -> Config:
    """Load settings from the working directory once and share them."""
    return load_config(".")