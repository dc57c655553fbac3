"""Operation statuses with (optionally localized) errors and messages.

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localizemessages.status.generic import (
    ErrorGeneric,
    StatusGeneric,
    StatusGenericResult,
    ValidationResult,
)
from localizemessages.status.localized import StatusGenericLocalizer, StatusGenericLocalizerResult

__all__ = [
    # Errors
    "ValidationResult",
    "ErrorGeneric",
    # Statuses
    "StatusGeneric",
    "StatusGenericResult",
    # Localized statuses
    "StatusGenericLocalizer",
    "StatusGenericLocalizerResult",
]
