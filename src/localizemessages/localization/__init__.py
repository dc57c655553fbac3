"""Localizers that return inline default-culture messages or resource strings.

Submodules:
    capture - LocalizedLog and recorders for diagnosing localize keys
    default - DefaultLocalizer and the MessageLocalizer protocol
    simple  - SimpleLocalizer (message is the localize key)
    factory - Per-resource-type DefaultLocalizer and SimpleLocalizer factories

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localizemessages.localization.capture import (
    InMemoryLocalizationRecorder,
    LocalizationRecorder,
    LocalizedLog,
)
from localizemessages.localization.default import DefaultLocalizer, MessageLocalizer
from localizemessages.localization.simple import SimpleLocalizer
from localizemessages.localization.factory import (
    DefaultLocalizerFactory,
    LocalizerConstructor,
    SimpleLocalizerFactory,
)

__all__ = [
    # Localizers
    "MessageLocalizer",
    "DefaultLocalizer",
    "SimpleLocalizer",
    # Factories
    "DefaultLocalizerFactory",
    "SimpleLocalizerFactory",
    "LocalizerConstructor",
    # Capture
    "LocalizedLog",
    "LocalizationRecorder",
    "InMemoryLocalizationRecorder",
]
