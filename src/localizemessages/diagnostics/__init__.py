"""Error types for localizemessages.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    LocalizeError,
    LocalizeKeyError,
    LocalizerConfigurationError,
    ResourceNotFoundError,
)

__all__ = [
    "LocalizeError",
    "LocalizeKeyError",
    "LocalizerConfigurationError",
    "ResourceNotFoundError",
]
