"""Positional format templates for inline messages.

A FormatTemplate keeps the literal format string and its argument values
apart, so the same arguments can be applied to a localized resource string:

    >>> parts = (fmt("Order {0} ", 42), fmt("ships on {0}.", "Monday"))
    >>> render_templates(parts)
    'Order 42 ships on Monday.'
    >>> collect_arguments(parts)
    (42, 'Monday')

A message may be split over several templates. Each template renders with
its own argument indices, while the resource string sees the arguments of all
templates concatenated in encounter order:

    >>> format_positional("Commande {0} expédiée le {1}.", collect_arguments(parts))
    'Commande 42 expédiée le Monday.'

Substitution uses Python positional str.format semantics ({0}, {1:>5}, ...).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "FORMAT_ERRORS",
    "FormatTemplate",
    "collect_arguments",
    "fmt",
    "format_positional",
    "joined_format_string",
    "render_templates",
]

# Errors str.format raises when placeholders and arguments do not line up:
# IndexError for a missing positional argument, KeyError for a named
# placeholder, ValueError for unbalanced braces or a bad format spec,
# AttributeError and TypeError for field access such as {0.name} or {0[0]}.
FORMAT_ERRORS: tuple[type[Exception], ...] = (
    IndexError,
    KeyError,
    ValueError,
    AttributeError,
    TypeError,
)


@dataclass(frozen=True, slots=True)
class FormatTemplate:
    """Literal format string plus positional argument values.

    Attributes:
        format_string: Format string with positional placeholders
        args: Values substituted into the placeholders
    """

    format_string: str
    args: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate the template and freeze the arguments.

        Raises:
            TypeError: If format_string is not a string
        """
        if not isinstance(self.format_string, str):
            msg = f"format_string must be str, got {type(self.format_string).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "args", tuple(self.args))

    def render(self) -> str:
        """Render the template with its own arguments."""
        return self.format_string.format(*self.args)

    def __str__(self) -> str:
        return self.render()


def fmt(format_string: str, *args: object) -> FormatTemplate:
    """Shorthand for FormatTemplate(format_string, args)."""
    return FormatTemplate(format_string, args)


def _check_templates(templates: Sequence[FormatTemplate]) -> None:
    if templates is None:
        msg = "templates cannot be None"
        raise TypeError(msg)
    for template in templates:
        if not isinstance(template, FormatTemplate):
            msg = f"Expected FormatTemplate, got {type(template).__name__}"
            raise TypeError(msg)


def render_templates(templates: Sequence[FormatTemplate]) -> str:
    """Render each template with its own arguments and concatenate the results.

    Raises:
        TypeError: If templates is None or holds something other than FormatTemplate
    """
    _check_templates(templates)
    return "".join(template.render() for template in templates)


def collect_arguments(templates: Sequence[FormatTemplate]) -> tuple[object, ...]:
    """Concatenate the arguments of all templates in encounter order."""
    _check_templates(templates)
    return tuple(arg for template in templates for arg in template.args)


def joined_format_string(templates: Iterable[FormatTemplate]) -> str:
    """Concatenate the raw format strings, for diagnostics and SimpleLocalizer keys."""
    return "".join(template.format_string for template in templates)


def format_positional(template: str, args: Sequence[object]) -> str:
    """Apply positional arguments to a (localized) format string.

    Raises:
        IndexError, KeyError, ValueError: If placeholders and arguments do not match
    """
    return template.format(*args)
