"""Boilerplate generator for a new component.

Writes the component directory, the component file, and (per toggle)
a styles file, a Storybook file and a snapshot test. Steps run in a
fixed order; the first failure aborts the rest and nothing already
written is removed.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from insta_component.models.component import ComponentSpec
from insta_component.scaffold.filesystem import LocalFilesystem
from insta_component.scaffold.templates import (
    component_template,
    snapshot_test_template,
    story_template,
    styles_template,
)

console = Console()

TESTS_DIRNAME = "__tests__"


def _extension(typescript: bool) -> str:
    return "tsx" if typescript else "jsx"


def _component_dir(component_name: str, filepath: str) -> Path:
    # Prefix and name are joined verbatim, so "./out" + "Widget" is "./outWidget".
    return Path(f"{filepath}{component_name}")


def create_component_directory(
    component_name: str, filepath: str, fs: LocalFilesystem
) -> Path:
    """Create ``{filepath}{component_name}``.

    Raises:
        FilesystemConflict: If the directory already exists.
        FilesystemError: If the parent path is missing or not writable.
    """
    directory = _component_dir(component_name, filepath)
    fs.create_directory(directory)
    return directory


def create_component_file(
    component_name: str,
    filepath: str,
    native: bool,
    typescript: bool,
    styled_components: bool,
    fs: LocalFilesystem,
) -> Path:
    """Write ``{name}.{ext}`` into the component directory."""
    target = _component_dir(component_name, filepath) / (
        f"{component_name}.{_extension(typescript)}"
    )
    fs.write_text(
        target,
        component_template(
            component_name,
            native=native,
            typescript=typescript,
            styled_components=styled_components,
        ),
    )
    return target


def create_styles_file(
    component_name: str,
    filepath: str,
    typescript: bool,
    native: bool,
    fs: LocalFilesystem,
) -> Path:
    """Write ``{name}Styled.{ext}`` into the component directory."""
    target = _component_dir(component_name, filepath) / (
        f"{component_name}Styled.{_extension(typescript)}"
    )
    fs.write_text(target, styles_template(native=native))
    return target


def create_storybook_file(
    component_name: str,
    filepath: str,
    native: bool,
    typescript: bool,
    fs: LocalFilesystem,
) -> Path:
    """Write ``{name}.stories.{ext}`` into the component directory."""
    target = _component_dir(component_name, filepath) / (
        f"{component_name}.stories.{_extension(typescript)}"
    )
    fs.write_text(
        target, story_template(component_name, native=native, typescript=typescript)
    )
    return target


def create_tests_file(
    component_name: str,
    filepath: str,
    typescript: bool,
    fs: LocalFilesystem,
) -> Path:
    """Create ``__tests__/`` and write ``{name}.test.{ext}`` inside it."""
    tests_dir = _component_dir(component_name, filepath) / TESTS_DIRNAME
    fs.create_directory(tests_dir)
    target = tests_dir / f"{component_name}.test.{_extension(typescript)}"
    fs.write_text(target, snapshot_test_template(component_name))
    return target


def generate(spec: ComponentSpec, fs: LocalFilesystem) -> list[Path]:
    """Generate the full file set for spec.

    Args:
        spec: Fully resolved component parameters.
        fs: Filesystem provider.

    Returns:
        Created paths in creation order, starting with the directory.

    Raises:
        FilesystemConflict: If the component directory already exists.
        FilesystemError: If any write fails. Earlier files stay on disk.
    """
    name, filepath = spec.component_name, spec.filepath

    created = [create_component_directory(name, filepath, fs)]
    created.append(
        create_component_file(
            name, filepath, spec.native, spec.typescript, spec.styled_components, fs
        )
    )
    if spec.styled_components:
        created.append(create_styles_file(name, filepath, spec.typescript, spec.native, fs))
    if spec.storybook:
        created.append(
            create_storybook_file(name, filepath, spec.native, spec.typescript, fs)
        )
    if spec.tests:
        created.append(create_tests_file(name, filepath, spec.typescript, fs))

    console.print(f"[green][bold]Component {escape(name)} created![/bold][/green]")
    for path in created:
        console.print(f"  [green]✓[/green] {escape(str(path))}")

    return created
