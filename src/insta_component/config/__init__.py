"""Toggle configuration resolution."""

from insta_component.config.resolver import resolve_toggles

__all__ = ["resolve_toggles"]
