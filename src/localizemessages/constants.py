"""Shared constants for localizemessages.

Centralizes localize-key separators, the well-known resource keys used by
StatusGenericLocalizer, and the default (non-localized) status strings.
Placing them here avoids circular imports between the status and
localization packages.

Constants are grouped by domain:
- Key composition: Separators and prefixes used to build localize keys
- Status strings: Default messages for StatusGeneric and its localizer
- Logging templates: Messages emitted when localization degrades

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Key composition
    "LOCALIZE_KEY_SEPARATOR",
    "SIMPLE_LOCALIZER_PREFIX",
    # Status strings
    "DEFAULT_SUCCESS_MESSAGE",
    "NO_ERRORS_MESSAGE",
    "HEADER_SEPARATOR",
    "ONE_ERROR_LOCALIZE_KEY",
    "MANY_ERRORS_LOCALIZE_KEY",
    "ONE_ERROR_MESSAGE",
    "MANY_ERRORS_FORMAT",
    # Logging templates
    "MISSING_RESOURCE_LOG",
    "FORMAT_ERROR_LOG",
]

# ============================================================================
# KEY COMPOSITION
# ============================================================================

# Joins the class, method and local-key parts: {Class}_{Method}_{LocalKey}
LOCALIZE_KEY_SEPARATOR: str = "_"

# SimpleLocalizer keys take the form "SimpleLocalizer(message)".
SIMPLE_LOCALIZER_PREFIX: str = "SimpleLocalizer"

# ============================================================================
# STATUS STRINGS
# ============================================================================

# Success message of a fresh status. Never localized; CombineStatuses uses it
# to detect whether a child status set its own message.
DEFAULT_SUCCESS_MESSAGE: str = "Success"

# Returned by get_all_errors() when there are no errors.
NO_ERRORS_MESSAGE: str = "No errors"

# Joins a parent header to a child error's header: "Parent>Child: message"
HEADER_SEPARATOR: str = ">"

# Resource keys shared by every StatusGenericLocalizer, whatever its resource.
ONE_ERROR_LOCALIZE_KEY: str = "StatusGenericLocalizer_MessageHasOneError"
MANY_ERRORS_LOCALIZE_KEY: str = "StatusGenericLocalizer_MessageHasManyErrors"

# Inline (default culture) versions of the failure messages.
ONE_ERROR_MESSAGE: str = "Failed with 1 error"
MANY_ERRORS_FORMAT: str = "Failed with {0} errors"

# ============================================================================
# LOGGING TEMPLATES
# ============================================================================

# Arguments: localize key, culture, searched location, calling location
MISSING_RESOURCE_LOG: str = (
    "The message with the localize key '%s' and culture '%s' was not found "
    "in the '%s' resource. The message came from %s."
)

# Arguments: resource value, error text, calling location
FORMAT_ERROR_LOG: str = (
    "The resourced string '%s' had the following format error: %s. "
    "The message came from %s."
)
