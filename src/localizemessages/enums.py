"""Enumerations for localizemessages type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class KeyScope(StrEnum):
    """Which caller parts are prepended to the local key.

    StrEnum provides automatic string conversion: str(KeyScope.JUST_KEY) == "just_key"
    """

    JUST_KEY = "just_key"
    """Key is the local key alone: {LocalKey}"""

    METHOD_ONLY = "method_only"
    """Key is prefixed by the calling method: {Method}_{LocalKey}"""

    CLASS_ONLY = "class_only"
    """Key is prefixed by the calling class: {Class}_{LocalKey}"""

    CLASS_AND_METHOD = "class_and_method"
    """Key is prefixed by class and method: {Class}_{Method}_{LocalKey}"""


class CultureMatchMode(StrEnum):
    """How the active culture is compared with the default culture.

    StrEnum provides automatic string conversion: str(CultureMatchMode.PREFIX) == "prefix"
    """

    PREFIX = "prefix"
    """Active culture starts with the default culture: "en" matches "en-GB" """

    EXACT = "exact"
    """Active culture equals the default culture: "en-GB" matches only "en-GB" """


class LoadStatus(StrEnum):
    """Status of a catalog load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog loaded successfully"""

    NOT_FOUND = "not_found"
    """Catalog file not found (expected for untranslated locales)"""

    ERROR = "error"
    """Catalog load failed with error"""


__all__ = [
    "CultureMatchMode",
    "KeyScope",
    "LoadStatus",
]
