"""Interactive prompt collection.

The collector turns an ordered list of FieldDescriptors into a mapping
of field name to answer. Pattern mismatches are re-prompted; an aborted
prompt (Ctrl-C, EOF) raises InputError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import typer

from insta_component.errors import InputError
from insta_component.prompting.fields import FieldDescriptor


class PromptCollector(ABC):
    """Abstract source of answers for a sequence of prompt fields."""

    @abstractmethod
    def collect(self, fields: Sequence[FieldDescriptor]) -> dict[str, str]:
        """Collect one answer per field, in order.

        Raises:
            InputError: If input is aborted before all fields are answered.
        """
        ...


class TyperPromptCollector(PromptCollector):
    """Collects answers interactively via ``typer.prompt``."""

    def collect(self, fields: Sequence[FieldDescriptor]) -> dict[str, str]:
        answers: dict[str, str] = {}
        for field in fields:
            answers[field.name] = self._ask(field)
        return answers

    def _ask(self, field: FieldDescriptor) -> str:
        while True:
            try:
                value = typer.prompt(
                    field.message,
                    default=field.default,
                    show_default=False,
                )
            except typer.Abort as e:
                raise InputError(f"Input aborted while prompting for '{field.name}'") from e
            value = str(value)
            if field.matches(value):
                return value
            typer.echo(field.error or f"Invalid value for '{field.name}'", err=True)
