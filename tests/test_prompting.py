"""Tests for prompt field descriptors and the Typer prompt collector."""

import pytest
import typer

from insta_component.errors import InputError
from insta_component.prompting.collector import TyperPromptCollector
from insta_component.prompting.fields import (
    MANDATORY_FIELDS,
    TOGGLE_FIELDS,
    FieldDescriptor,
    parse_toggle,
)


class TestParseToggle:
    """Test parse_toggle normalization."""

    @pytest.mark.parametrize("value", ["t", "T", "true", "True", "TRUE", " true", "tomato"])
    def test_values_starting_with_t_are_true(self, value):
        assert parse_toggle(value) is True

    @pytest.mark.parametrize("value", ["f", "false", "FALSE", "", "yes", "1", "no"])
    def test_other_values_are_false(self, value):
        assert parse_toggle(value) is False

    def test_bool_and_none_pass_through(self):
        assert parse_toggle(True) is True
        assert parse_toggle(False) is False
        assert parse_toggle(None) is False


class TestFieldDescriptors:
    """Test the shipped field descriptor tables."""

    def test_mandatory_fields_order(self):
        """Component name is asked before filepath."""
        assert [f.name for f in MANDATORY_FIELDS] == ["componentName", "filepath"]

    def test_toggle_fields_order(self):
        """All five toggles are asked in a fixed order."""
        assert [f.name for f in TOGGLE_FIELDS] == [
            "native",
            "typescript",
            "storybook",
            "styledComponents",
            "tests",
        ]

    def test_component_name_pattern(self):
        """Component name accepts letters and whitespace only."""
        field = MANDATORY_FIELDS[0]
        assert field.matches("Widget")
        assert field.matches("My Widget")
        assert not field.matches("Widget2")
        assert not field.matches("my-widget")
        assert not field.matches("")

    def test_descriptor_is_immutable(self):
        """FieldDescriptor is frozen."""
        field = FieldDescriptor(name="x", message="X")
        with pytest.raises(AttributeError):
            field.name = "y"


class TestTyperPromptCollector:
    """Test TyperPromptCollector with a scripted typer.prompt."""

    def _script(self, monkeypatch, replies):
        calls = []
        replies = iter(replies)

        def fake_prompt(text, default=None, show_default=True):
            calls.append(text)
            reply = next(replies)
            if isinstance(reply, BaseException):
                raise reply
            return reply if reply != "" else default

        monkeypatch.setattr(typer, "prompt", fake_prompt)
        return calls

    def test_collects_answers_in_order(self, monkeypatch):
        """Answers are keyed by field name."""
        self._script(monkeypatch, ["Widget", "./out/"])
        answers = TyperPromptCollector().collect(MANDATORY_FIELDS)
        assert answers == {"componentName": "Widget", "filepath": "./out/"}

    def test_blank_filepath_uses_default(self, monkeypatch):
        """Blank filepath falls back to ./."""
        self._script(monkeypatch, ["Widget", ""])
        answers = TyperPromptCollector().collect(MANDATORY_FIELDS)
        assert answers["filepath"] == "./"

    def test_reprompts_on_pattern_mismatch(self, monkeypatch, capsys):
        """Invalid component names are reported and re-prompted."""
        calls = self._script(monkeypatch, ["Widget9", "Widget", "./"])
        answers = TyperPromptCollector().collect(MANDATORY_FIELDS)
        assert answers["componentName"] == "Widget"
        assert len(calls) == 3
        assert "Component name must only be letters" in capsys.readouterr().err

    def test_abort_raises_input_error(self, monkeypatch):
        """An aborted prompt raises InputError."""
        self._script(monkeypatch, ["Widget", typer.Abort()])
        with pytest.raises(InputError, match="filepath"):
            TyperPromptCollector().collect(MANDATORY_FIELDS)
