"""Interactive component creation command.

Prompts for the component name and filepath, resolves the feature
toggles (persisted config or fresh prompts) and writes the boilerplate.
"""

from __future__ import annotations

from pathlib import Path

import typer

from insta_component import __version__
from insta_component.config.resolver import resolve_toggles
from insta_component.errors import InstaComponentError
from insta_component.models.component import build_component_spec
from insta_component.models.config import CONFIG_FILENAME
from insta_component.prompting.collector import PromptCollector, TyperPromptCollector
from insta_component.prompting.fields import MANDATORY_FIELDS
from insta_component.scaffold.filesystem import LocalFilesystem
from insta_component.scaffold.generator import generate


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"insta-component {__version__}")
        raise typer.Exit()


def run_create(
    collector: PromptCollector,
    fs: LocalFilesystem,
    config_path: Path | str = CONFIG_FILENAME,
) -> list[Path]:
    """Collect inputs, resolve toggles and generate the component.

    Returns:
        Paths created by the generator.
    """
    answers = collector.collect(MANDATORY_FIELDS)
    toggles = resolve_toggles(collector, fs, config_path)
    spec = build_component_spec(answers, toggles)
    return generate(spec, fs)


def create(
    config: Path = typer.Option(
        Path(CONFIG_FILENAME),
        "--config",
        envvar="INSTA_COMPONENT_CONFIG",
        help="Persisted toggle config file.",
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new React component skeleton interactively.

    Asks for a component name and a target filepath. Feature toggles are
    read from the persisted config, or prompted for and saved on first run.
    """
    try:
        run_create(TyperPromptCollector(), LocalFilesystem(), config)
    except InstaComponentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
