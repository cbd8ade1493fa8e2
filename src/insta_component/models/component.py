"""Component data models.

ToggleSet holds the five feature flags; ComponentSpec is the complete,
immutable input to one generation run.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field

DEFAULT_COMPONENT_NAME = "Component"
DEFAULT_FILEPATH = "./"


class ToggleSet(BaseModel):
    """Feature toggles controlling which files and idioms are generated.

    Serialized with camelCase aliases (``styledComponents``) so the
    persisted config keeps the names developers see in the prompts.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    native: bool = False
    typescript: bool = False
    storybook: bool = False
    styled_components: bool = Field(default=False, alias="styledComponents")
    tests: bool = False


class ComponentSpec(ToggleSet):
    """Fully resolved parameter set for one generation run."""

    component_name: str = Field(default=DEFAULT_COMPONENT_NAME, alias="componentName")
    filepath: str = DEFAULT_FILEPATH


def build_component_spec(answers: Mapping[str, Any], toggles: ToggleSet) -> ComponentSpec:
    """Merge mandatory prompt answers with resolved toggles.

    Blank or missing ``componentName``/``filepath`` answers fall back to
    ``"Component"`` and ``"./"``.

    Args:
        answers: Mapping of prompt field name to the collected value.
        toggles: Toggle set from the persisted config or fresh prompts.

    Returns:
        Frozen ComponentSpec.
    """
    name = str(answers.get("componentName") or "").strip() or DEFAULT_COMPONENT_NAME
    filepath = str(answers.get("filepath") or "").strip() or DEFAULT_FILEPATH
    return ComponentSpec(
        component_name=name,
        filepath=filepath,
        **toggles.model_dump(),
    )
