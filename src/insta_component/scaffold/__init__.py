"""Component boilerplate generation."""

from insta_component.scaffold.filesystem import LocalFilesystem
from insta_component.scaffold.generator import (
    create_component_directory,
    create_component_file,
    create_storybook_file,
    create_styles_file,
    create_tests_file,
    generate,
)

__all__ = [
    "LocalFilesystem",
    "create_component_directory",
    "create_component_file",
    "create_storybook_file",
    "create_styles_file",
    "create_tests_file",
    "generate",
]
