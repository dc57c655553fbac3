"""Configuration objects for the localizers.

Provides frozen dataclasses that carry localizer settings. Values are
validated at construction time so configuration mistakes fail fast, before
the first message is localized.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from localizemessages.constants import SIMPLE_LOCALIZER_PREFIX
from localizemessages.culture import CultureDescriptor, culture_matches, is_supported_culture
from localizemessages.diagnostics.errors import LocalizerConfigurationError
from localizemessages.enums import CultureMatchMode

__all__ = ["DefaultLocalizerOptions", "SimpleLocalizerOptions"]


@dataclass(frozen=True, slots=True)
class DefaultLocalizerOptions:
    """Immutable configuration for DefaultLocalizer.

    Attributes:
        default_culture: Culture of the inline messages (e.g., "en", "en-GB")
        exact_culture_match: Only use inline messages when the active culture
            equals default_culture. Ignored for two-letter default cultures.
        supported_cultures: Optional allow-list of cultures the application
            has resources for. Active cultures outside it get the inline
            message without a resource lookup and without a warning.

    Example:
        >>> options = DefaultLocalizerOptions("en-GB", exact_culture_match=True)
        >>> options.culture_matches("en-GB")
        True
        >>> options.culture_matches("en-US")
        False
    """

    default_culture: str
    exact_culture_match: bool = False
    supported_cultures: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            LocalizerConfigurationError: If default_culture is None, empty or
                whitespace, or supported_cultures is a bare string.
        """
        # Builds and validates the descriptor; raises on a blank culture
        _ = self.descriptor
        if self.supported_cultures is not None:
            if isinstance(self.supported_cultures, str):
                msg = "supported_cultures must be an iterable of culture tags, not a string"
                raise LocalizerConfigurationError(msg)
            object.__setattr__(self, "supported_cultures", tuple(self.supported_cultures))

    @property
    def descriptor(self) -> CultureDescriptor:
        """Culture descriptor used by the culture matcher."""
        mode = CultureMatchMode.EXACT if self.exact_culture_match else CultureMatchMode.PREFIX
        return CultureDescriptor(self.default_culture, mode)

    def culture_matches(self, active_culture: str) -> bool:
        """Check whether the active culture matches the default culture."""
        return culture_matches(active_culture, self.descriptor)

    def is_supported(self, active_culture: str) -> bool:
        """Check whether the active culture is in the supported allow-list."""
        return is_supported_culture(active_culture, self.supported_cultures)

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> DefaultLocalizerOptions:
        """Build options from a settings mapping (e.g., a parsed JSON/TOML section).

        Recognized keys: ``default_culture`` (required), ``exact_culture_match``
        and ``supported_cultures``.

        Raises:
            LocalizerConfigurationError: If default_culture is missing or invalid
        """
        if "default_culture" not in settings:
            msg = "Settings must contain 'default_culture'"
            raise LocalizerConfigurationError(msg)
        supported: Iterable[str] | None = settings.get("supported_cultures")
        return cls(
            default_culture=settings["default_culture"],
            exact_culture_match=bool(settings.get("exact_culture_match", False)),
            supported_cultures=tuple(supported) if supported is not None else None,
        )


@dataclass(frozen=True, slots=True)
class SimpleLocalizerOptions:
    """Immutable configuration for SimpleLocalizer.

    Attributes:
        resource_type: Resource type (class or name) whose resources hold the
            translations. None means localization is not set up.
        prefix_key_string: Prefix of the localize key, giving keys of the form
            "{prefix}({message})". None uses the message itself as the key.
    """

    resource_type: type | str | None = None
    prefix_key_string: str | None = SIMPLE_LOCALIZER_PREFIX
