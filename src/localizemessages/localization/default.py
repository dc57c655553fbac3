"""Default-message localizer.

Lets code carry readable messages in the default culture, e.g.
"The order was placed.", while still supporting other cultures through a
resource lookup.

Decision order for every localize call:
1. The localize key is None (message already localized): inline message.
2. The active culture matches the default culture, or is outside the
   supported-culture allow-list: inline message.
3. No StringLocalizer configured (localization not set up): inline message.
4. Otherwise look the key up. A found entry is returned (formatted messages
   get the inline arguments applied); a missing entry logs a warning and a
   malformed entry logs an error, and both return the inline message.

Only programming errors (None arguments) raise. End users always see a
message.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from localizemessages.constants import FORMAT_ERROR_LOG, MISSING_RESOURCE_LOG
from localizemessages.formatting import (
    FORMAT_ERRORS,
    FormatTemplate,
    collect_arguments,
    format_positional,
    joined_format_string,
    render_templates,
)
from localizemessages.localization.capture import LocalizedLog
from localizemessages.resources.types import resource_name

if TYPE_CHECKING:
    from localizemessages.keys import LocalizeKeyData
    from localizemessages.localization.capture import LocalizationRecorder
    from localizemessages.options import DefaultLocalizerOptions
    from localizemessages.resources.types import LocalizedString, ResourceType, StringLocalizer

__all__ = ["DefaultLocalizer", "MessageLocalizer"]


class MessageLocalizer(Protocol):
    """Anything offering the two localize operations.

    Implemented by DefaultLocalizer and the stubs in localizemessages.testing;
    StatusGenericLocalizer and SimpleLocalizer depend only on this protocol.
    """

    def localize_string_message(
        self, localize_key: LocalizeKeyData, message: str, *, culture: str
    ) -> str:
        """Localize a plain message."""
        ...

    def localize_formatted_message(
        self, localize_key: LocalizeKeyData, *templates: FormatTemplate, culture: str
    ) -> str:
        """Localize a message built from one or more format templates."""
        ...


def _require(value: object, name: str) -> None:
    if value is None:
        msg = f"{name} cannot be None"
        raise TypeError(msg)


class DefaultLocalizer:
    """Localization adapter with inline default-culture messages.

    Example:
        >>> options = DefaultLocalizerOptions("en")
        >>> resources = DictStringLocalizer({"Orders_Placed": "Commande passée."})
        >>> localizer = DefaultLocalizer(options, resources, resource_type="Orders")
        >>> key = just_this_localize_key("Orders_Placed", OrderService)
        >>> localizer.localize_string_message(key, "Order placed.", culture="en-GB")
        'Order placed.'
        >>> localizer.localize_string_message(key, "Order placed.", culture="fr-FR")
        'Commande passée.'

    Attributes:
        options: Default culture configuration
        resource_type: Resource the localize keys belong to
    """

    __slots__ = ("_logger", "_options", "_recorder", "_resource_type", "_string_localizer")

    def __init__(
        self,
        options: DefaultLocalizerOptions,
        string_localizer: StringLocalizer | None = None,
        *,
        resource_type: ResourceType | None = None,
        logger: logging.Logger | None = None,
        recorder: LocalizationRecorder | None = None,
    ) -> None:
        """Initialize the localizer.

        Args:
            options: Default culture configuration (validated at construction)
            string_localizer: Resource lookup; None means localization is not
                set up and every call returns the inline message
            resource_type: Resource the localize keys belong to (diagnostics)
            logger: Logger for missing resources and format errors; defaults
                to this module's logger
            recorder: Optional collaborator receiving a LocalizedLog per call

        Raises:
            TypeError: If options is None
        """
        _require(options, "options")
        self._options = options
        self._string_localizer = string_localizer
        self._resource_type = resource_type
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._recorder = recorder

    def __repr__(self) -> str:
        return (
            f"DefaultLocalizer(resource={resource_name(self._resource_type)!r}, "
            f"default_culture={self._options.default_culture!r})"
        )

    @property
    def options(self) -> DefaultLocalizerOptions:
        """Default culture configuration (read-only)."""
        return self._options

    @property
    def resource_type(self) -> ResourceType | None:
        """Resource the localize keys belong to (read-only)."""
        return self._resource_type

    def _use_inline_message(self, localize_key: LocalizeKeyData, culture: str) -> bool:
        return (
            localize_key.localize_key is None
            or self._options.culture_matches(culture)
            # Unsupported cultures degrade to the inline message without a warning
            or not self._options.is_supported(culture)
            or self._string_localizer is None
        )

    def _record(
        self,
        localize_key: LocalizeKeyData,
        culture: str,
        actual_message: str,
        message_format: str | None,
    ) -> None:
        if self._recorder is None or localize_key.localize_key is None:
            return
        self._recorder.record(
            LocalizedLog(
                resource_class_name=resource_name(self._resource_type),
                localize_key=localize_key.localize_key,
                culture=culture,
                actual_message=actual_message,
                message_format=message_format,
                calling_class_name=localize_key.calling_class_name,
                calling_method_name=localize_key.method_name,
                source_line_number=localize_key.source_line_number,
            )
        )

    def _log_missing_resource(
        self, localize_key: LocalizeKeyData, culture: str, found: LocalizedString
    ) -> None:
        self._logger.warning(
            MISSING_RESOURCE_LOG,
            localize_key.localize_key,
            culture,
            found.searched_location or resource_name(self._resource_type),
            localize_key.calling_location,
        )

    def localize_string_message(
        self, localize_key: LocalizeKeyData, message: str, *, culture: str
    ) -> str:
        """Localize a plain message.

        Args:
            localize_key: Key of the message in the resources
            message: Inline message in the default culture
            culture: Active culture of the current request/operation

        Returns:
            The localized message, or message when localization is not needed
            or not possible

        Raises:
            TypeError: If localize_key, message or culture is None
        """
        _require(localize_key, "localize_key")
        _require(message, "message")
        _require(culture, "culture")

        result = self._localize_string(localize_key, message, culture)
        self._record(localize_key, culture, result, None)
        return result

    def _localize_string(self, localize_key: LocalizeKeyData, message: str, culture: str) -> str:
        if self._use_inline_message(localize_key, culture):
            return message

        assert self._string_localizer is not None  # noqa: S101 - checked above
        assert localize_key.localize_key is not None  # noqa: S101 - checked above
        found = self._string_localizer.lookup(localize_key.localize_key, culture)
        if not found.resource_not_found:
            return found.value

        self._log_missing_resource(localize_key, culture, found)
        return message

    def localize_formatted_message(
        self, localize_key: LocalizeKeyData, *templates: FormatTemplate, culture: str
    ) -> str:
        """Localize a message built from one or more format templates.

        The inline rendering concatenates every template rendered with its
        own arguments. A localized resource string receives the arguments of
        all templates, in order, as positional arguments {0}, {1}, ...

        Args:
            localize_key: Key of the message in the resources
            *templates: Inline message parts in the default culture
            culture: Active culture of the current request/operation

        Returns:
            The localized, formatted message, or the inline rendering when
            localization is not needed, not possible, or the resource string
            does not fit the arguments

        Raises:
            TypeError: If localize_key or culture is None, or a template is
                not a FormatTemplate
        """
        _require(localize_key, "localize_key")
        _require(culture, "culture")

        default_message = render_templates(templates)
        result = self._localize_formatted(localize_key, templates, default_message, culture)
        self._record(localize_key, culture, result, joined_format_string(templates))
        return result

    def _localize_formatted(
        self,
        localize_key: LocalizeKeyData,
        templates: tuple[FormatTemplate, ...],
        default_message: str,
        culture: str,
    ) -> str:
        if self._use_inline_message(localize_key, culture):
            return default_message

        assert self._string_localizer is not None  # noqa: S101 - checked above
        assert localize_key.localize_key is not None  # noqa: S101 - checked above
        found = self._string_localizer.lookup(localize_key.localize_key, culture)
        if found.resource_not_found:
            self._log_missing_resource(localize_key, culture, found)
            return default_message

        try:
            return format_positional(found.value, collect_arguments(templates))
        except FORMAT_ERRORS as e:
            self._logger.error(FORMAT_ERROR_LOG, found.value, e, localize_key.calling_location)
            return default_message
