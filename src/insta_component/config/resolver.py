"""Configuration resolver.

Determines the active toggle set for a run: an existing persisted config
fully determines behavior; otherwise toggles are prompted for and saved.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from insta_component.models.component import ToggleSet
from insta_component.models.config import (
    CONFIG_FILENAME,
    load_persisted_config,
    save_persisted_config,
)
from insta_component.prompting.collector import PromptCollector
from insta_component.prompting.fields import TOGGLE_FIELDS, parse_toggle
from insta_component.scaffold.filesystem import LocalFilesystem

console = Console()


def resolve_toggles(
    collector: PromptCollector,
    fs: LocalFilesystem,
    config_path: Path | str = CONFIG_FILENAME,
) -> ToggleSet:
    """Resolve the toggle set for this run.

    Args:
        collector: Source of toggle answers when no config exists.
        fs: Filesystem provider.
        config_path: Location of the persisted config, relative to cwd
            unless absolute.

    Returns:
        The resolved ToggleSet.

    Raises:
        InputError: If toggle prompting is aborted. No config is written.
        ConfigError: If an existing config file is invalid.
    """
    config_path = Path(config_path)
    if fs.exists(config_path):
        return load_persisted_config(config_path, fs)

    answers = collector.collect(TOGGLE_FIELDS)
    toggles = ToggleSet.model_validate(
        {field.name: parse_toggle(answers.get(field.name)) for field in TOGGLE_FIELDS}
    )
    save_persisted_config(toggles, config_path, fs)
    console.print(f"  [green]✓[/green] {escape(str(config_path))} [dim](saved toggles)[/dim]")
    return toggles
