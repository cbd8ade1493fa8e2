"""insta-component data models - re-exports all public model classes."""

from insta_component.models.component import ComponentSpec, ToggleSet, build_component_spec
from insta_component.models.config import CONFIG_FILENAME, PersistedConfig

__all__ = [
    "CONFIG_FILENAME",
    "ComponentSpec",
    "PersistedConfig",
    "ToggleSet",
    "build_component_spec",
]
