"""Configuration loader for workspace checks.

Reads an optional JSON or YAML file and validates it against ``CONFIG_SCHEMA``.
Recognised keys are ``excludeDirs`` (replaces the default exclusion set) and
``latestVersions`` (merged over the built-in reference table).
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from packaging.version import InvalidVersion, Version

from .discovery import EXCLUDES
from .reference import LATEST_VERSIONS, with_overrides

CONFIG_PATH_ENV_VAR = "DEP_UPDATE_CHECKER_CONFIG"

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "excludeDirs": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
        "latestVersions": {
            "type": "object",
            "additionalProperties": {"type": "string", "minLength": 1},
        },
    },
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(frozen=True)
class CheckerConfig:
    """Settings consumed by a workspace scan."""

    exclude_dirs: frozenset[str] = EXCLUDES
    latest_versions: Mapping[str, str] = field(default_factory=lambda: LATEST_VERSIONS)
    source: Path | None = None


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. DEP_UPDATE_CHECKER_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _read_document(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _check_versions(versions: Mapping[str, str]) -> None:
    # YAML allows non-string keys, which the schema cannot reject
    non_string = [repr(name) for name in versions if not isinstance(name, str)]
    if non_string:
        raise ConfigError(
            f"Package names in latestVersions must be strings: {', '.join(sorted(non_string))}"
        )

    bad = []
    for name, version in versions.items():
        try:
            Version(version)
        except InvalidVersion:
            bad.append(f"{name}={version}")
    if bad:
        raise ConfigError(f"Invalid version(s) in latestVersions: {', '.join(sorted(bad))}")


def load_config(path: Path | str | None = None) -> CheckerConfig:
    """Load and validate checker settings.

    Args:
        path: Optional path to the config file. If not provided, uses the
            DEP_UPDATE_CHECKER_CONFIG env var or falls back to defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return CheckerConfig()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    document = _read_document(config_path)

    validator = Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigError("Configuration failed validation:\n" + _format_errors(errors))

    overrides: dict[str, str] = document.get("latestVersions") or {}
    _check_versions(overrides)

    exclude_dirs = document.get("excludeDirs")
    return CheckerConfig(
        exclude_dirs=EXCLUDES if exclude_dirs is None else frozenset(exclude_dirs),
        latest_versions=with_overrides(overrides) if overrides else LATEST_VERSIONS,
        source=config_path,
    )
