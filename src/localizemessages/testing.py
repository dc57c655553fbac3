"""Test doubles for code that localizes messages.

Components:
    StubDefaultLocalizer - Returns the inline message and remembers the last key
    StubDefaultLocalizerFactory - Hands out one StubDefaultLocalizer
    CapturingDefaultLocalizer - Returns the inline message and records every call

The stubs need no options and no resources, so services that take a
MessageLocalizer can be unit tested without setting localization up.
DefaultLocalizerFactory also returns a StubDefaultLocalizer when there is
no resource type or no StringLocalizerFactory.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localizemessages.formatting import joined_format_string, render_templates
from localizemessages.localization.capture import InMemoryLocalizationRecorder, LocalizedLog
from localizemessages.resources.types import resource_name

if TYPE_CHECKING:
    from localizemessages.formatting import FormatTemplate
    from localizemessages.keys import LocalizeKeyData
    from localizemessages.localization.capture import LocalizationRecorder
    from localizemessages.resources.types import ResourceType

__all__ = [
    "CapturingDefaultLocalizer",
    "StubDefaultLocalizer",
    "StubDefaultLocalizerFactory",
]


class StubDefaultLocalizer:
    """MessageLocalizer that always returns the inline message.

    Attributes:
        last_key_data: Key data of the most recent call, None before any call
    """

    __slots__ = ("last_key_data",)

    def __init__(self) -> None:
        self.last_key_data: LocalizeKeyData | None = None

    def localize_string_message(
        self,
        localize_key: LocalizeKeyData,
        message: str,
        *,
        culture: str,  # noqa: ARG002 - protocol signature
    ) -> str:
        """Remember localize_key and return message."""
        self.last_key_data = localize_key
        return message

    def localize_formatted_message(
        self,
        localize_key: LocalizeKeyData,
        *templates: FormatTemplate,
        culture: str,  # noqa: ARG002 - protocol signature
    ) -> str:
        """Remember localize_key and return the rendered templates."""
        self.last_key_data = localize_key
        return render_templates(templates)


class StubDefaultLocalizerFactory:
    """Localizer factory returning the same StubDefaultLocalizer for every resource."""

    __slots__ = ("stub_localizer",)

    def __init__(self, stub_localizer: StubDefaultLocalizer | None = None) -> None:
        if stub_localizer is None:
            stub_localizer = StubDefaultLocalizer()
        self.stub_localizer = stub_localizer

    def create(self, resource_type: ResourceType | None) -> StubDefaultLocalizer:  # noqa: ARG002
        """Return the shared stub localizer."""
        return self.stub_localizer


class CapturingDefaultLocalizer:
    """MessageLocalizer that returns the inline message and records each call.

    Run a service's unit tests through this localizer to list every localize
    key the service uses, and to catch a key used for two different messages.

    Example:
        >>> localizer = CapturingDefaultLocalizer("Orders")
        >>> service = OrderService(localizer)
        >>> service.place(order)
        >>> localizer.possible_error is None
        True
    """

    __slots__ = ("_recorder", "_resource_type", "last_key_data")

    def __init__(
        self,
        resource_type: ResourceType | None = None,
        *,
        recorder: LocalizationRecorder | None = None,
    ) -> None:
        """Initialize the localizer.

        Args:
            resource_type: Resource the recorded keys belong to
            recorder: Where entries go; defaults to a new InMemoryLocalizationRecorder
        """
        self._resource_type = resource_type
        self._recorder = recorder if recorder is not None else InMemoryLocalizationRecorder()
        self.last_key_data: LocalizeKeyData | None = None

    @property
    def recorder(self) -> LocalizationRecorder:
        """Collaborator receiving the recorded entries."""
        return self._recorder

    @property
    def possible_error(self) -> str | None:
        """Most recent key-reuse problem found by an in-memory recorder."""
        if isinstance(self._recorder, InMemoryLocalizationRecorder):
            return self._recorder.possible_error
        return None

    def _record(
        self,
        localize_key: LocalizeKeyData,
        culture: str,
        message: str,
        message_format: str | None,
    ) -> None:
        self.last_key_data = localize_key
        if localize_key.localize_key is None:
            return
        self._recorder.record(
            LocalizedLog(
                resource_class_name=resource_name(self._resource_type),
                localize_key=localize_key.localize_key,
                culture=culture,
                actual_message=message,
                message_format=message_format,
                calling_class_name=localize_key.calling_class_name,
                calling_method_name=localize_key.method_name,
                source_line_number=localize_key.source_line_number,
            )
        )

    def localize_string_message(
        self, localize_key: LocalizeKeyData, message: str, *, culture: str
    ) -> str:
        """Record the call and return message."""
        self._record(localize_key, culture, message, None)
        return message

    def localize_formatted_message(
        self, localize_key: LocalizeKeyData, *templates: FormatTemplate, culture: str
    ) -> str:
        """Record the call and return the rendered templates."""
        message = render_templates(templates)
        self._record(localize_key, culture, message, joined_format_string(templates))
        return message
