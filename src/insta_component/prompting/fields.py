"""Prompt field descriptors.

Fields are immutable records passed explicitly to a PromptCollector;
nothing here is mutated between prompts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """Description of a single prompt field.

    Attributes:
        name: Key the collected answer is stored under.
        message: Prompt text shown to the user.
        pattern: Optional regex the whole answer must match.
        error: Message shown before re-prompting on a pattern mismatch.
        default: Value used when the answer is left blank.
    """

    name: str
    message: str
    pattern: str | None = None
    error: str | None = None
    default: str | None = None

    def matches(self, value: str) -> bool:
        """Return True if value satisfies this field's pattern."""
        if self.pattern is None:
            return True
        return re.fullmatch(self.pattern, value) is not None


COMPONENT_NAME_PATTERN = r"[a-zA-Z\s]+"

MANDATORY_FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor(
        name="componentName",
        message="Enter new Component name",
        pattern=COMPONENT_NAME_PATTERN,
        error="Component name must only be letters",
    ),
    FieldDescriptor(
        name="filepath",
        message="Enter filepath to provision (default './')",
        default="./",
    ),
)


def _toggle(name: str, message: str) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        message=f"{message} (true/false)",
        default="false",
    )


TOGGLE_FIELDS: tuple[FieldDescriptor, ...] = (
    _toggle("native", "Use React Native"),
    _toggle("typescript", "Use TypeScript"),
    _toggle("storybook", "Generate a Storybook story"),
    _toggle("styledComponents", "Use styled-components"),
    _toggle("tests", "Generate a snapshot test"),
)


def parse_toggle(value: str | bool | None) -> bool:
    """Normalize a boolean-like answer.

    Case-insensitive first-character match: anything starting with
    ``t`` is True, everything else (including blank) is False.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return value.strip()[:1].lower() == "t"
