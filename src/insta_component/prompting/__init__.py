"""Prompt field descriptors and collectors."""

from insta_component.prompting.collector import PromptCollector, TyperPromptCollector
from insta_component.prompting.fields import (
    MANDATORY_FIELDS,
    TOGGLE_FIELDS,
    FieldDescriptor,
    parse_toggle,
)

__all__ = [
    "FieldDescriptor",
    "MANDATORY_FIELDS",
    "PromptCollector",
    "TOGGLE_FIELDS",
    "TyperPromptCollector",
    "parse_toggle",
]
