"""Tests for positional format templates.

Python 3.13+.
"""

import dataclasses

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localizemessages import FormatTemplate, fmt
from localizemessages.formatting import (
    FORMAT_ERRORS,
    collect_arguments,
    format_positional,
    joined_format_string,
    render_templates,
)


class TestFormatTemplate:
    """Test FormatTemplate construction and rendering."""

    def test_fmt_shorthand(self) -> None:
        """fmt() collects its positional arguments."""
        template = fmt("Order {0} for {1}", 42, "Ann")
        assert template == FormatTemplate("Order {0} for {1}", (42, "Ann"))

    def test_render(self) -> None:
        """render() applies the template's own arguments."""
        assert fmt("{0:>4}|{1}", 7, "x").render() == "   7|x"

    def test_str_is_render(self) -> None:
        """str() renders the template."""
        assert str(fmt("Hello {0}", "Bob")) == "Hello Bob"

    def test_list_args_frozen(self) -> None:
        """Arguments are stored as a tuple."""
        template = FormatTemplate("{0}", [1])  # type: ignore[arg-type]
        assert template.args == (1,)

    def test_non_string_format_rejected(self) -> None:
        """The format string must be a str."""
        with pytest.raises(TypeError, match="format_string must be str"):
            FormatTemplate(None)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Templates are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            fmt("x").format_string = "y"  # type: ignore[misc]


class TestMultipleTemplates:
    """Test rendering and argument collection over several templates."""

    def test_render_concatenates(self) -> None:
        """Each template renders with its own indices."""
        parts = (fmt("Order {0} ", 42), fmt("ships on {0}.", "Monday"))
        assert render_templates(parts) == "Order 42 ships on Monday."

    def test_collect_arguments_in_order(self) -> None:
        """Arguments are concatenated in encounter order."""
        parts = (fmt("{0}{1}", "a", "b"), fmt("{0}", "c"))
        assert collect_arguments(parts) == ("a", "b", "c")

    def test_joined_format_string(self) -> None:
        """Raw format strings are concatenated."""
        assert joined_format_string((fmt("A {0} "), fmt("B {0}"))) == "A {0} B {0}"

    def test_none_templates_rejected(self) -> None:
        """None is not a sequence of templates."""
        with pytest.raises(TypeError):
            render_templates(None)  # type: ignore[arg-type]

    def test_plain_string_rejected(self) -> None:
        """Only FormatTemplate items are accepted."""
        with pytest.raises(TypeError, match="Expected FormatTemplate"):
            render_templates(("Hello",))  # type: ignore[arg-type]

    @given(st.lists(st.integers(), max_size=5))
    def test_single_template_round_trip(self, values: list[int]) -> None:
        """Property: the localized string sees the same arguments as the inline one."""
        event(f"arg_count={len(values)}")
        format_string = " ".join(f"{{{index}}}" for index in range(len(values)))
        template = FormatTemplate(format_string, tuple(values))
        assert format_positional(format_string, collect_arguments((template,))) == template.render()


class TestFormatPositional:
    """Test format_positional error behavior."""

    def test_applies_arguments(self) -> None:
        """Positional placeholders are substituted."""
        assert format_positional("{1} {0}", ("a", "b")) == "b a"

    @pytest.mark.parametrize(
        ("template", "expected_error"),
        [
            ("{2}", IndexError),
            ("{name}", KeyError),
            ("{0", ValueError),
            ("{0:%}", ValueError),
        ],
    )
    def test_format_errors(self, template: str, expected_error: type[Exception]) -> None:
        """Mismatched templates raise one of FORMAT_ERRORS."""
        with pytest.raises(expected_error):
            format_positional(template, ("a",))
        assert expected_error in FORMAT_ERRORS
