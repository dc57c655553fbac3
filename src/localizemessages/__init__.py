"""localizemessages - Localize messages and errors with inline default-culture text.

Code keeps readable messages in its default culture, e.g. "The order was
placed.", and a localize key naming the message in the resources. When the
active culture is the default culture the inline message is used as-is;
otherwise the message is looked up (Babel gettext catalogs, or any
StringLocalizer), falling back to the inline message when the resource is
missing or malformed.

Public API:
    DefaultLocalizer - Localize a message by key, with an inline fallback
    DefaultLocalizerOptions - Default culture and culture-matching settings
    StatusGenericLocalizer - Operation status with localized errors/messages
    SimpleLocalizer - Localize short strings using the message as key
    FormatTemplate, fmt - Positional format strings with their arguments
    Key builders - class_localize_key, class_method_localize_key,
                   method_localize_key, just_this_localize_key, already_localized

Submodules:
    localizemessages.keys - Localize key composition and name overrides
    localizemessages.localization - Localizers, factories and capture
    localizemessages.resources - StringLocalizer protocol, dict and Babel stores
    localizemessages.status - StatusGeneric and its localized variants
    localizemessages.testing - Stub localizers for unit tests
    localizemessages.diagnostics - Exception types
"""

import logging

from .diagnostics import (
    LocalizeError,
    LocalizeKeyError,
    LocalizerConfigurationError,
    ResourceNotFoundError,
)
from .enums import CultureMatchMode, KeyScope
from .formatting import FormatTemplate, fmt
from .keys import (
    LocalizeKeyData,
    NameRegistry,
    already_localized,
    build_localize_key,
    class_localize_key,
    class_method_localize_key,
    just_this_localize_key,
    localize_set_class_name,
    localize_set_method_name,
    method_localize_key,
)
from .localization import (
    DefaultLocalizer,
    DefaultLocalizerFactory,
    InMemoryLocalizationRecorder,
    LocalizedLog,
    MessageLocalizer,
    SimpleLocalizer,
    SimpleLocalizerFactory,
)
from .naming import camel_to_pascal
from .options import DefaultLocalizerOptions, SimpleLocalizerOptions
from .resources import (
    CatalogStringLocalizer,
    CatalogStringLocalizerFactory,
    DictStringLocalizer,
    LocalizedString,
    PathCatalogLoader,
    StringLocalizer,
)
from .status import (
    ErrorGeneric,
    StatusGeneric,
    StatusGenericLocalizer,
    StatusGenericLocalizerResult,
    StatusGenericResult,
    ValidationResult,
)

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localizemessages")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogStringLocalizer",
    "CatalogStringLocalizerFactory",
    "CultureMatchMode",
    "DefaultLocalizer",
    "DefaultLocalizerFactory",
    "DefaultLocalizerOptions",
    "DictStringLocalizer",
    "ErrorGeneric",
    "FormatTemplate",
    "InMemoryLocalizationRecorder",
    "KeyScope",
    "LocalizeError",
    "LocalizeKeyData",
    "LocalizeKeyError",
    "LocalizedLog",
    "LocalizedString",
    "LocalizerConfigurationError",
    "MessageLocalizer",
    "NameRegistry",
    "PathCatalogLoader",
    "ResourceNotFoundError",
    "SimpleLocalizer",
    "SimpleLocalizerFactory",
    "SimpleLocalizerOptions",
    "StatusGeneric",
    "StatusGenericLocalizer",
    "StatusGenericLocalizerResult",
    "StatusGenericResult",
    "StringLocalizer",
    "ValidationResult",
    "__version__",
    "already_localized",
    "build_localize_key",
    "camel_to_pascal",
    "class_localize_key",
    "class_method_localize_key",
    "fmt",
    "just_this_localize_key",
    "localize_set_class_name",
    "localize_set_method_name",
    "method_localize_key",
]
