"""Localizer factories for resources chosen at runtime.

DefaultLocalizerFactory creates one DefaultLocalizer per resource type and
caches it, so libraries can localize against a resource the application
names only at startup. SimpleLocalizerFactory does the same for
SimpleLocalizer.

A custom localizer class can be registered per resource type; unregistered
resource types get a plain DefaultLocalizer.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from localizemessages.constants import SIMPLE_LOCALIZER_PREFIX
from localizemessages.diagnostics.errors import LocalizerConfigurationError
from localizemessages.localization.default import DefaultLocalizer
from localizemessages.localization.simple import SimpleLocalizer
from localizemessages.options import SimpleLocalizerOptions
from localizemessages.resources.types import resource_name
from localizemessages.testing import StubDefaultLocalizer

if TYPE_CHECKING:
    from localizemessages.localization.capture import LocalizationRecorder
    from localizemessages.localization.default import MessageLocalizer
    from localizemessages.options import DefaultLocalizerOptions
    from localizemessages.resources.types import (
        ResourceType,
        StringLocalizer,
        StringLocalizerFactory,
    )

__all__ = ["DefaultLocalizerFactory", "LocalizerConstructor", "SimpleLocalizerFactory"]

logger = logging.getLogger(__name__)

LocalizerConstructor: TypeAlias = (
    "Callable[[DefaultLocalizerOptions, StringLocalizer, logging.Logger], MessageLocalizer]"
)
"""Builds the localizer of one resource type from options, lookup and logger."""


class DefaultLocalizerFactory:
    """Creates and caches a localizer per resource type.

    Thread-safe: the cache is protected by an internal lock, and a resource
    type's localizer is created exactly once per factory.

    Example:
        >>> factory = DefaultLocalizerFactory(
        ...     DefaultLocalizerOptions("en"),
        ...     CatalogStringLocalizerFactory(PathCatalogLoader("locales/{locale}")),
        ... )
        >>> localizer = factory.create("Errors")
        >>> factory.create("Errors") is localizer
        True
    """

    __slots__ = (
        "_cache",
        "_constructors",
        "_lock",
        "_options",
        "_recorder",
        "_string_localizer_factory",
    )

    def __init__(
        self,
        options: DefaultLocalizerOptions | None,
        string_localizer_factory: StringLocalizerFactory | None = None,
        *,
        recorder: LocalizationRecorder | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            options: Default culture configuration shared by all localizers.
                Checked on the first create() that needs it.
            string_localizer_factory: Creates the resource lookup of each
                resource type; None means localization is not set up
            recorder: Optional recorder given to every created DefaultLocalizer
        """
        self._options = options
        self._string_localizer_factory = string_localizer_factory
        self._recorder = recorder
        self._cache: dict[ResourceType, MessageLocalizer] = {}
        self._constructors: dict[ResourceType, LocalizerConstructor] = {}
        self._lock = threading.Lock()

    def register(self, resource_type: ResourceType, constructor: LocalizerConstructor) -> None:
        """Install a custom localizer constructor for resource_type.

        Must be called before the first create() for that resource type.

        Raises:
            TypeError: If resource_type or constructor is None
        """
        if resource_type is None or constructor is None:
            msg = "resource_type and constructor cannot be None"
            raise TypeError(msg)
        with self._lock:
            self._constructors[resource_type] = constructor

    def create(self, resource_type: ResourceType | None) -> MessageLocalizer:
        """Return the localizer for resource_type, creating it on first use.

        Returns:
            A StubDefaultLocalizer when resource_type is None or no
            StringLocalizerFactory is configured, otherwise the cached
            localizer of resource_type

        Raises:
            LocalizerConfigurationError: If localization is set up but the
                factory has no options
        """
        if resource_type is None or self._string_localizer_factory is None:
            return StubDefaultLocalizer()

        if self._options is None:
            msg = (
                "DefaultLocalizerFactory has no DefaultLocalizerOptions; "
                "pass options before creating localizers"
            )
            raise LocalizerConfigurationError(msg)

        with self._lock:
            localizer = self._cache.get(resource_type)
            if localizer is None:
                localizer = self._build(
                    resource_type, self._options, self._string_localizer_factory
                )
                self._cache[resource_type] = localizer
            return localizer

    def _build(
        self,
        resource_type: ResourceType,
        options: DefaultLocalizerOptions,
        string_localizer_factory: StringLocalizerFactory,
    ) -> MessageLocalizer:
        name = resource_name(resource_type)
        string_localizer = string_localizer_factory.create(resource_type)
        # One logger per resource, under the default localizer's logger
        resource_logger = logging.getLogger(f"{DefaultLocalizer.__module__}.{name}")

        constructor = self._constructors.get(resource_type)
        if constructor is not None:
            logger.debug("Creating registered localizer for resource %s", name)
            return constructor(options, string_localizer, resource_logger)

        logger.debug("Creating DefaultLocalizer for resource %s", name)
        return DefaultLocalizer(
            options,
            string_localizer,
            resource_type=resource_type,
            logger=resource_logger,
            recorder=self._recorder,
        )


class SimpleLocalizerFactory:
    """Creates a SimpleLocalizer for a resource type chosen at runtime.

    Resource type None, or a DefaultLocalizerFactory without resources,
    gives a SimpleLocalizer that always returns the inline message.
    """

    __slots__ = ("_localizer_factory", "_prefix_key_string")

    def __init__(
        self,
        localizer_factory: DefaultLocalizerFactory,
        *,
        prefix_key_string: str | None = SIMPLE_LOCALIZER_PREFIX,
    ) -> None:
        self._localizer_factory = localizer_factory
        self._prefix_key_string = prefix_key_string

    def create(self, resource_type: ResourceType | None) -> SimpleLocalizer:
        """Return a SimpleLocalizer over the resources of resource_type."""
        options = SimpleLocalizerOptions(resource_type, self._prefix_key_string)
        return SimpleLocalizer(self._localizer_factory.create(resource_type), options)
