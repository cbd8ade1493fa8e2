"""Persisted toggle configuration.

The toggles chosen on a first run are written to a flat YAML mapping
in the invocation directory and read back verbatim on every later run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from insta_component.errors import ConfigError
from insta_component.models.component import ToggleSet

if TYPE_CHECKING:
    from pathlib import Path

    from insta_component.scaffold.filesystem import LocalFilesystem

CONFIG_FILENAME = "insta-component.config.yaml"

# Persisted toggles use the same schema as the in-memory ToggleSet.
PersistedConfig = ToggleSet


def parse_persisted_config(source: str, path: Path | None = None) -> PersistedConfig:
    """Parse and validate persisted config YAML.

    Raises:
        ConfigError: If the YAML is malformed, empty, or does not match
            the toggle schema.
    """
    try:
        raw = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}", path) from e
    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a mapping of toggles", path)
    try:
        return PersistedConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file: {e}", path) from e


def dump_persisted_config(config: PersistedConfig) -> str:
    """Serialize toggles as a flat camelCase key-boolean YAML mapping."""
    return yaml.safe_dump(config.model_dump(by_alias=True), sort_keys=False)


def load_persisted_config(path: Path, fs: LocalFilesystem) -> PersistedConfig:
    """Read and validate the persisted config at path."""
    return parse_persisted_config(fs.read_text(path), path)


def save_persisted_config(config: PersistedConfig, path: Path, fs: LocalFilesystem) -> None:
    """Write the persisted config to path, creating or overwriting it."""
    fs.write_text(path, dump_persisted_config(config))
