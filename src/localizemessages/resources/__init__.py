"""Resource lookup collaborators.

Submodules:
    types   - LocalizedString, StringLocalizer and StringLocalizerFactory protocols
    memory  - DictStringLocalizer (dictionary-backed, for tests and small apps)
    catalog - CatalogStringLocalizer (Babel .po/.mo catalogs) and PathCatalogLoader

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localizemessages.resources.catalog import (
    CatalogLoadResult,
    CatalogStringLocalizer,
    CatalogStringLocalizerFactory,
    PathCatalogLoader,
)
from localizemessages.resources.memory import DictStringLocalizer, DictStringLocalizerFactory
from localizemessages.resources.types import (
    LocalizedString,
    StringLocalizer,
    StringLocalizerFactory,
    resource_name,
)

__all__ = [
    # Protocols and result type
    "LocalizedString",
    "StringLocalizer",
    "StringLocalizerFactory",
    "resource_name",
    # In-memory
    "DictStringLocalizer",
    "DictStringLocalizerFactory",
    # Babel catalogs
    "CatalogLoadResult",
    "CatalogStringLocalizer",
    "CatalogStringLocalizerFactory",
    "PathCatalogLoader",
]
