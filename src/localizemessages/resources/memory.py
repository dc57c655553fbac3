"""In-memory StringLocalizer backed by a dictionary.

Mimics resource files with a plain mapping of localize key to value. It
only uses the key, not the culture, to look up a value, which makes it the
usual collaborator in unit tests.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from localizemessages.diagnostics.errors import ResourceNotFoundError
from localizemessages.formatting import format_positional
from localizemessages.resources.types import LocalizedString, ResourceType

__all__ = ["DictStringLocalizer", "DictStringLocalizerFactory"]


class DictStringLocalizer:
    """StringLocalizer over a dictionary of localize key to value.

    Example:
        >>> localizer = DictStringLocalizer({"Greeting": "Bonjour"}, raise_on_missing=False)
        >>> localizer.lookup("Greeting", "fr").value
        'Bonjour'
        >>> localizer.lookup("Missing", "fr").resource_not_found
        True

    Attributes:
        resource: The key/value entries (mutable, so tests can add entries)
        raise_on_missing: Raise ResourceNotFoundError for unknown keys
        last_localize_key: The key of the most recent lookup
    """

    __slots__ = ("_resource_name", "last_localize_key", "raise_on_missing", "resource")

    def __init__(
        self,
        resource: Mapping[str, str] | None = None,
        *,
        raise_on_missing: bool = True,
        resource_name: str = "",
    ) -> None:
        """Initialize the localizer.

        Args:
            resource: Localize key to value entries; None for an empty store
            raise_on_missing: If True (default), unknown keys raise
                ResourceNotFoundError instead of returning a not-found result
            resource_name: Name reported as the searched location
        """
        self.resource: dict[str, str] = dict(resource) if resource is not None else {}
        self.raise_on_missing = raise_on_missing
        self.last_localize_key: str | None = None
        self._resource_name = resource_name

    def __repr__(self) -> str:
        return (
            f"DictStringLocalizer(entries={len(self.resource)}, "
            f"resource={self._resource_name!r})"
        )

    def lookup(self, name: str, culture: str) -> LocalizedString:  # noqa: ARG002 - culture unused
        """Look up name, ignoring the culture.

        Raises:
            ResourceNotFoundError: If name is unknown and raise_on_missing is True
        """
        self.last_localize_key = name
        if name in self.resource:
            return LocalizedString(name, self.resource[name], False, self._resource_name)
        if self.raise_on_missing:
            raise ResourceNotFoundError(name)
        return LocalizedString(name, "", True, self._resource_name)

    def format(self, name: str, culture: str, *args: object) -> LocalizedString:
        """Look up name and apply positional arguments to the value.

        Raises:
            ResourceNotFoundError: If name is unknown and raise_on_missing is True
            IndexError, KeyError, ValueError: If the value does not fit the arguments
        """
        found = self.lookup(name, culture)
        if found.resource_not_found:
            return found
        return LocalizedString(
            name, format_positional(found.value, args), False, found.searched_location
        )

    def get_all_strings(self) -> tuple[LocalizedString, ...]:
        """Return every entry as a LocalizedString."""
        return tuple(
            LocalizedString(key, value, False, self._resource_name)
            for key, value in self.resource.items()
        )


class DictStringLocalizerFactory:
    """StringLocalizerFactory that hands out one shared DictStringLocalizer.

    Every resource type gets the same localizer, so a single dictionary can
    stand in for all the resource files of an application under test.
    """

    __slots__ = ("string_localizer",)

    def __init__(
        self, resource: Mapping[str, str] | None = None, *, raise_on_missing: bool = True
    ) -> None:
        self.string_localizer = DictStringLocalizer(resource, raise_on_missing=raise_on_missing)

    def create(self, resource_type: ResourceType) -> DictStringLocalizer:  # noqa: ARG002
        """Return the shared localizer, whatever the resource type."""
        return self.string_localizer
