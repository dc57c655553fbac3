"""Status whose messages are localized as they are added.

StatusGenericLocalizer is a StatusGeneric whose error and success messages
pass through a MessageLocalizer with a localize key. The "Failed with N
errors" summary is localized too, using two well-known keys that every
resource holding status messages should define:

    StatusGenericLocalizer_MessageHasOneError    -> "Failed with 1 error"
    StatusGenericLocalizer_MessageHasManyErrors  -> "Failed with {0} errors"

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, Self, TypeVar

from localizemessages.constants import (
    MANY_ERRORS_FORMAT,
    MANY_ERRORS_LOCALIZE_KEY,
    ONE_ERROR_LOCALIZE_KEY,
    ONE_ERROR_MESSAGE,
)
from localizemessages.formatting import FormatTemplate, fmt
from localizemessages.keys import just_this_localize_key
from localizemessages.status.generic import StatusGeneric

if TYPE_CHECKING:
    from localizemessages.keys import LocalizeKeyData
    from localizemessages.localization.default import MessageLocalizer

__all__ = ["StatusGenericLocalizer", "StatusGenericLocalizerResult"]


class StatusGenericLocalizer(StatusGeneric):
    """StatusGeneric with localized error and success messages.

    The message property cannot be assigned; use set_message_string() or
    set_message_formatted() so the success message is localized as well.

    Example:
        >>> status = StatusGenericLocalizer(localizer, culture="fr-FR")
        >>> status.add_error_string(
        ...     class_method_localize_key("NoStock", self, "place_order"),
        ...     "The item is out of stock.",
        ...     "item_id",
        ... )
        >>> status.message
        'Échec avec 1 erreur'
    """

    __slots__ = ("_culture", "_localizer", "many_errors_localize_key", "one_error_localize_key")

    def __init__(self, localizer: MessageLocalizer, *, culture: str, header: str = "") -> None:
        """Initialize a valid status.

        Args:
            localizer: Localizer for every message of this status
            culture: Active culture of the operation
            header: Header given to every error this status adds

        Raises:
            TypeError: If localizer or culture is None
        """
        if localizer is None:
            msg = "localizer cannot be None"
            raise TypeError(msg)
        if culture is None:
            msg = "culture cannot be None"
            raise TypeError(msg)
        super().__init__(header)
        self._localizer = localizer
        self._culture = culture
        self.one_error_localize_key = ONE_ERROR_LOCALIZE_KEY
        self.many_errors_localize_key = MANY_ERRORS_LOCALIZE_KEY

    @property
    def culture(self) -> str:
        """Culture the messages are localized for (read-only)."""
        return self._culture

    @property
    def message(self) -> str:
        """Success message while valid, otherwise the localized error-count summary."""
        if self.is_valid:
            return self._success_message
        count = len(self._errors)
        if count == 1:
            return self._localizer.localize_string_message(
                just_this_localize_key(self.one_error_localize_key, self),
                ONE_ERROR_MESSAGE,
                culture=self._culture,
            )
        return self._localizer.localize_formatted_message(
            just_this_localize_key(self.many_errors_localize_key, self),
            fmt(MANY_ERRORS_FORMAT, count),
            culture=self._culture,
        )

    @message.setter
    def message(self, value: str) -> None:
        msg = (
            "The message of a StatusGenericLocalizer cannot be set directly; "
            "use set_message_string() or set_message_formatted()"
        )
        raise AttributeError(msg)

    def add_error_string(
        self, localize_key: LocalizeKeyData, message: str, *member_names: str
    ) -> Self:
        """Localize message and add it as an error."""
        localized = self._localizer.localize_string_message(
            localize_key, message, culture=self._culture
        )
        self._append_error(localized, member_names)
        return self

    def add_error_formatted(
        self, localize_key: LocalizeKeyData, *templates: FormatTemplate
    ) -> Self:
        """Localize a formatted message and add it as an error."""
        localized = self._localizer.localize_formatted_message(
            localize_key, *templates, culture=self._culture
        )
        self._append_error(localized, ())
        return self

    def add_error_formatted_with_params(
        self,
        localize_key: LocalizeKeyData,
        templates: FormatTemplate | Sequence[FormatTemplate],
        *member_names: str,
    ) -> Self:
        """Localize a formatted message and add it as an error on the named members.

        Args:
            localize_key: Key of the message in the resources
            templates: One FormatTemplate, or a sequence of them
            *member_names: Members (e.g., form fields) the error applies to
        """
        parts = (templates,) if isinstance(templates, FormatTemplate) else tuple(templates)
        localized = self._localizer.localize_formatted_message(
            localize_key, *parts, culture=self._culture
        )
        self._append_error(localized, member_names)
        return self

    def set_message_string(self, localize_key: LocalizeKeyData, message: str) -> Self:
        """Localize message and make it the success message."""
        self._success_message = self._localizer.localize_string_message(
            localize_key, message, culture=self._culture
        )
        return self

    def set_message_formatted(
        self, localize_key: LocalizeKeyData, *templates: FormatTemplate
    ) -> Self:
        """Localize a formatted message and make it the success message."""
        self._success_message = self._localizer.localize_formatted_message(
            localize_key, *templates, culture=self._culture
        )
        return self


T = TypeVar("T")


class StatusGenericLocalizerResult(StatusGenericLocalizer, Generic[T]):
    """StatusGenericLocalizer that also returns a value from the operation.

    The result is None while the status has errors.
    """

    __slots__ = ("_result",)

    def __init__(self, localizer: MessageLocalizer, *, culture: str, header: str = "") -> None:
        super().__init__(localizer, culture=culture, header=header)
        self._result: T | None = None

    @property
    def result(self) -> T | None:
        """The operation's value while valid, otherwise None."""
        return self._result if self.is_valid else None

    def set_result(self, result: T) -> Self:
        """Store the operation's value."""
        self._result = result
        return self
