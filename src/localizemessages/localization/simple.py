"""Localizer for short, standalone strings such as button labels.

SimpleLocalizer builds the localize key from the message itself, so callers
only pass the message. Keys have the form "SimpleLocalizer(Save)", or just
"Save" when the key prefix is turned off. All messages share the one
resource chosen in SimpleLocalizerOptions.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localizemessages.formatting import FormatTemplate
from localizemessages.keys import just_this_localize_key
from localizemessages.options import SimpleLocalizerOptions

if TYPE_CHECKING:
    from localizemessages.localization.default import MessageLocalizer

__all__ = ["SimpleLocalizer"]


class SimpleLocalizer:
    """Localizes messages using the message as the localize key.

    Example:
        >>> simple = SimpleLocalizer(default_localizer)
        >>> simple.localize_string("Save", ToolbarView, culture="fr-FR")
        'Enregistrer'
    """

    __slots__ = ("_localizer", "_options")

    def __init__(
        self, default_localizer: MessageLocalizer, options: SimpleLocalizerOptions | None = None
    ) -> None:
        """Initialize the localizer.

        Args:
            default_localizer: Localizer over the resource holding the messages
            options: Key prefix and resource settings; defaults to SimpleLocalizerOptions()

        Raises:
            TypeError: If default_localizer is None
        """
        if default_localizer is None:
            msg = "default_localizer cannot be None"
            raise TypeError(msg)
        self._localizer = default_localizer
        self._options = options if options is not None else SimpleLocalizerOptions()

    @property
    def options(self) -> SimpleLocalizerOptions:
        """Key prefix and resource settings (read-only)."""
        return self._options

    def make_key(self, message: str) -> str:
        """Return the localize key used for message."""
        prefix = self._options.prefix_key_string
        if prefix is None:
            return message
        return f"{prefix}({message})"

    def localize_string(
        self,
        message: str,
        calling_class: object,
        *,
        culture: str,
        method_name: str = "",
        source_line_number: int = 0,
    ) -> str:
        """Localize message, using it as the localize key.

        Raises:
            TypeError: If message or culture is None
        """
        if message is None:
            msg = "message cannot be None"
            raise TypeError(msg)
        key = just_this_localize_key(
            self.make_key(message),
            calling_class,
            method_name,
            source_line_number=source_line_number,
        )
        return self._localizer.localize_string_message(key, message, culture=culture)

    def localize_formatted(
        self,
        template: FormatTemplate,
        calling_class: object,
        *,
        culture: str,
        method_name: str = "",
        source_line_number: int = 0,
    ) -> str:
        """Localize a formatted message, using its raw format string as the key.

        Raises:
            TypeError: If template is not a FormatTemplate, or culture is None
        """
        if not isinstance(template, FormatTemplate):
            msg = f"Expected FormatTemplate, got {type(template).__name__}"
            raise TypeError(msg)
        key = just_this_localize_key(
            self.make_key(template.format_string),
            calling_class,
            method_name,
            source_line_number=source_line_number,
        )
        return self._localizer.localize_formatted_message(key, template, culture=culture)
