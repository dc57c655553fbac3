"""Resource lookup protocols and result type.

The core never reads resource files itself. It asks a StringLocalizer for a
localize key in the active culture and receives a LocalizedString that says
whether the entry was found and where it was searched for.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias

__all__ = [
    "LocalizedString",
    "StringLocalizer",
    "StringLocalizerFactory",
    "resource_name",
]

ResourceType: TypeAlias = type | str
"""Resource identity: a resource class or its name."""


def resource_name(resource_type: ResourceType | None) -> str:
    """Return the display name of a resource type ("" for None).

    Example:
        >>> resource_name("errors")
        'errors'
        >>> class Messages: ...
        >>> resource_name(Messages)
        'Messages'
    """
    match resource_type:
        case None:
            return ""
        case str():
            return resource_type
        case _:
            return resource_type.__name__


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """Result of looking up a localize key.

    Attributes:
        name: The localize key that was looked up
        value: The localized value; "" when not found
        resource_not_found: True if there was no entry for the key
        searched_location: Where the lookup searched, for diagnostics
    """

    name: str
    value: str
    resource_not_found: bool = False
    searched_location: str | None = None

    def __str__(self) -> str:
        return self.value


class StringLocalizer(Protocol):
    """Protocol for key-to-localized-string stores.

    Implementations must be safe for concurrent reads; localizers are cached
    per resource type and shared between threads.
    """

    def lookup(self, name: str, culture: str) -> LocalizedString:
        """Look up a localize key for a culture.

        Args:
            name: Localize key
            culture: Active culture tag (e.g., "fr-FR")

        Returns:
            LocalizedString, with resource_not_found set when missing
        """
        ...


class StringLocalizerFactory(Protocol):
    """Protocol for creating a StringLocalizer per resource type."""

    def create(self, resource_type: ResourceType) -> StringLocalizer:
        """Create (or return a cached) StringLocalizer for resource_type."""
        ...
