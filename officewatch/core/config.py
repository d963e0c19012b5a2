"""
ⒸAngelaMos | 2026
config.py
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    SettingsConfigDict,
)


DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


def _expand(v: Any) -> Any:
    if isinstance(v, str):
        return Path(os.path.expanduser(os.path.expandvars(v)))
    return v


class RoomRule(BaseModel):
    """
    Keyword set identifying one tracked project
    Rules are checked in order, the first match wins
    """
    name: str
    label: str
    keywords: list[str] = Field(default_factory = list)
    hints: list[str] = Field(default_factory = list)

    @field_validator("keywords", "hints")
    @classmethod
    def lowercase(cls, v: list[str]) -> list[str]:
        return [k.lower() for k in v if k]

    @property
    def status_hints(self) -> list[str]:
        """
        Tokens looked for in git status output, the room name by default
        """
        return self.hints or [self.name.lower()]


def default_rooms() -> list[RoomRule]:
    return [
        RoomRule(
            name = "TEXTEVIDENCE",
            label = "TextEvidence",
            keywords = ["textevidence", "text-evidence"],
        ),
        RoomRule(
            name = "STORMBREAKER",
            label = "Stormbreaker",
            keywords = ["workspace", "vincit", "leadstorm", "stormbreaker"],
        ),
    ]


class OfficeWatchSettings(BaseSettings):
    """
    Main application settings
    Loads from YAML config files with env var overrides
    """
    model_config = SettingsConfigDict(
        env_prefix = "OFFICEWATCH_",
        env_nested_delimiter = "__",
        env_file = ".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

    debug: bool = False
    json_logs: bool | None = None
    config_dir: Path = DEFAULT_CONFIG_DIR
    workspace: Path = Path(".")
    subdirectories: list[str] = Field(
        default_factory = lambda: ["textevidence", "vincit-dashboard"]
    )
    rooms: list[RoomRule] = Field(default_factory = default_rooms)

    idle_threshold_seconds: Annotated[float, Field(gt = 0)] = 300.0
    commit_poll_seconds: Annotated[float, Field(gt = 0)] = 5.0
    idle_check_seconds: Annotated[float, Field(gt = 0)] = 30.0
    git_timeout_seconds: Annotated[float, Field(gt = 0)] = 10.0
    publish_timeout_seconds: Annotated[float, Field(gt = 0)] = 5.0

    ignore_patterns: list[str] = Field(
        default_factory = lambda: [
            "node_modules/",
            ".git/",
            ".next/",
            "dist/",
            "build/",
        ]
    )
    history_file: Path = Field(default_factory = lambda: Path.home() / ".bash_history")

    host: str = "127.0.0.1"
    port: Annotated[int, Field(ge = 1, le = 65535)] = 3001
    static_dir: Path | None = None

    @field_validator(
        "workspace",
        "config_dir",
        "history_file",
        "static_dir",
        mode = "before",
    )
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """
        Expand ~ and environment variables in path
        """
        return _expand(v)


def load_yaml_file(path: Path) -> dict:
    """
    Load a YAML file and return its contents
    Returns empty dict if file does not exist
    """
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def merge_configs(base: dict, override: dict) -> dict:
    """
    Deep merge two config dictionaries
    Override takes precedence
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_from_yaml(config_dir: Path | None = None) -> dict:
    """
    Load config.yaml and the optional rooms.yaml from a config directory
    """
    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR

    config_dir = _expand(str(config_dir))

    config = load_yaml_file(config_dir / "config.yaml")

    rooms_config = load_yaml_file(config_dir / "rooms.yaml")
    if "rooms" in rooms_config:
        config["rooms"] = rooms_config["rooms"]

    return config


def environment_keys() -> set[str]:
    """
    Setting names supplied through OFFICEWATCH_ env vars or the .env file
    """
    keys: set[str] = set()
    for source in (
        EnvSettingsSource(OfficeWatchSettings),
        DotEnvSettingsSource(OfficeWatchSettings),
    ):
        keys.update(source())
    return keys


_settings: OfficeWatchSettings | None = None


def get_settings() -> OfficeWatchSettings:
    """
    Get the current settings instance
    Raises RuntimeError if settings not initialized
    """
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call load_settings() first.")
    return _settings


def load_settings(config_dir: Path | str | None = None, **overrides) -> OfficeWatchSettings:
    """
    Load settings from YAML files and optional overrides

    Priority (highest to lowest):
    1. Explicit overrides passed to this function
    2. Environment variables (OFFICEWATCH_ prefix) and .env
    3. YAML config files
    4. Default values
    """
    global _settings

    if config_dir is not None:
        config_dir = _expand(str(config_dir))

    from_env = environment_keys()
    yaml_config = {
        k: v for k, v in load_config_from_yaml(config_dir).items() if k not in from_env
    }

    merged = merge_configs(
        yaml_config,
        {k: v for k, v in overrides.items() if v is not None},
    )

    if config_dir is not None:
        merged["config_dir"] = config_dir

    _settings = OfficeWatchSettings(**merged)
    return _settings
