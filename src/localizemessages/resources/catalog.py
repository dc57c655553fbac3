"""Babel gettext-catalog resource lookup.

Provides a StringLocalizer backed by Babel message catalogs (.po/.mo), the
resource-file format of the Python ecosystem. The localize key is the msgid
and the translation is the msgstr.

Components:
    PathCatalogLoader - Loads {base_path}/{domain}.po per locale with
                        path-traversal protection
    CatalogLoadResult - Immutable result of a single catalog load attempt
    CatalogStringLocalizer - StringLocalizer over per-locale catalogs
    CatalogStringLocalizerFactory - One CatalogStringLocalizer per resource type

Lookups try the active culture and then its parents, so "fr-CA" is served
from the fr_CA catalog when it has the key and from the fr catalog otherwise.
Fuzzy and untranslated entries count as missing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from babel.messages.catalog import Catalog
from babel.messages.mofile import read_mo
from babel.messages.pofile import read_po

from localizemessages.diagnostics.errors import LocalizerConfigurationError
from localizemessages.enums import LoadStatus
from localizemessages.locale_utils import normalize_locale, parent_cultures
from localizemessages.resources.types import LocalizedString, ResourceType, resource_name

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Loader
    "PathCatalogLoader",
    "CatalogLoadResult",
    # Localizers
    "CatalogStringLocalizer",
    "CatalogStringLocalizerFactory",
]

logger = logging.getLogger(__name__)

_CATALOG_SUFFIXES = (".po", ".mo")


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader using path templates.

    Uses a {locale} placeholder in the path template for locale substitution.
    The locale is substituted in POSIX form (fr_CA), matching the gettext
    directory layout. The catalog file is {domain}.po, or {domain}.mo when
    no .po file exists.

    Security:
        Locale codes and domains containing path separators or ".." are
        rejected, and resolved paths are validated against a fixed root.

    Example:
        >>> loader = PathCatalogLoader("locales/{locale}/LC_MESSAGES")
        >>> catalog = loader.load("fr", "messages")
        # Loads from: locales/fr/LC_MESSAGES/messages.po

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            LocalizerConfigurationError: If base_path has no {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise LocalizerConfigurationError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_segment(kind: str, value: str) -> None:
        if not value:
            msg = f"{kind} cannot be empty"
            raise ValueError(msg)
        if ".." in value:
            msg = f"Path traversal sequences not allowed in {kind}: '{value}'"
            raise ValueError(msg)
        if "/" in value or "\\" in value:
            msg = f"Path separators not allowed in {kind}: '{value}'"
            raise ValueError(msg)

    def _directory(self, locale: str) -> Path:
        return Path(self.base_path.replace("{locale}", normalize_locale(locale)))

    def describe_path(self, locale: str, domain: str) -> str:
        """Return human-readable path of the .po catalog for diagnostics."""
        return (self._directory(locale) / f"{domain}.po").as_posix()

    def load(self, locale: str, domain: str) -> Catalog:
        """Load the catalog for a locale and domain from disk.

        Returns:
            Parsed Babel Catalog

        Raises:
            ValueError: If locale or domain contains path traversal sequences
            FileNotFoundError: If neither {domain}.po nor {domain}.mo exists
            OSError: If the file cannot be read
        """
        self._validate_segment("locale", locale)
        self._validate_segment("domain", domain)

        base_dir = self._directory(locale).resolve()
        for suffix in _CATALOG_SUFFIXES:
            full_path = (base_dir / f"{domain}{suffix}").resolve()
            try:
                full_path.relative_to(self._resolved_root)
            except ValueError:
                msg = (
                    f"Path traversal detected: resolved path escapes root directory. "
                    f"locale='{locale}', domain='{domain}'"
                )
                raise ValueError(msg) from None
            if not full_path.is_file():
                continue
            with full_path.open("rb") as fileobj:
                if suffix == ".mo":
                    return read_mo(fileobj)
                return read_po(fileobj, domain=domain)

        msg = f"No catalog found at {self.describe_path(locale, domain)}"
        raise FileNotFoundError(msg)


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading a single catalog.

    Attributes:
        locale: POSIX locale code of the catalog
        domain: Catalog domain (resource name)
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the catalog
    """

    locale: str
    domain: str
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if the catalog loaded successfully."""
        return self.status == LoadStatus.SUCCESS


class CatalogStringLocalizer:
    """StringLocalizer over Babel catalogs, one per locale.

    Catalogs come from an in-memory mapping, from a PathCatalogLoader, or
    both (in-memory catalogs take precedence). Loaded catalogs are cached;
    a locale without a catalog file is remembered as missing.

    Thread-safe: catalog loading is serialized by an internal lock and
    lookups only read immutable cache entries.

    Example:
        >>> catalog = Catalog(locale="fr")
        >>> catalog.add("Greeting", "Bonjour")
        >>> localizer = CatalogStringLocalizer("messages", catalogs={"fr": catalog})
        >>> localizer.lookup("Greeting", "fr-CA").value
        'Bonjour'
    """

    __slots__ = ("_cache", "_domain", "_load_results", "_loader", "_lock")

    def __init__(
        self,
        domain: str,
        *,
        catalogs: Mapping[str, Catalog] | None = None,
        loader: PathCatalogLoader | None = None,
    ) -> None:
        """Initialize the localizer.

        Args:
            domain: Catalog domain, usually the resource name
            catalogs: Preloaded catalogs keyed by culture tag
            loader: Loader for catalogs not given in catalogs
        """
        self._domain = domain
        self._loader = loader
        self._cache: dict[str, Catalog | None] = {
            normalize_locale(locale): catalog for locale, catalog in (catalogs or {}).items()
        }
        self._load_results: list[CatalogLoadResult] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"CatalogStringLocalizer(domain={self._domain!r}, catalogs={len(self._cache)})"

    @property
    def domain(self) -> str:
        """Catalog domain used for lookups."""
        return self._domain

    @property
    def load_results(self) -> tuple[CatalogLoadResult, ...]:
        """Results of every catalog load attempted so far."""
        return tuple(self._load_results)

    def _describe(self, locale: str) -> str:
        if self._loader is not None:
            return self._loader.describe_path(locale, self._domain)
        return f"{self._domain}[{locale}]"

    def _get_catalog(self, locale: str) -> Catalog | None:
        if locale in self._cache:
            return self._cache[locale]
        if self._loader is None:
            return None

        with self._lock:
            # Another thread may have loaded it while we waited
            if locale in self._cache:
                return self._cache[locale]
            self._cache[locale] = self._load(locale)
            return self._cache[locale]

    def _load(self, locale: str) -> Catalog | None:
        if self._loader is None:
            return None

        source_path = self._loader.describe_path(locale, self._domain)
        try:
            catalog = self._loader.load(locale, self._domain)
        except FileNotFoundError:
            logger.debug("No catalog for %s at %s", locale, source_path)
            self._load_results.append(
                CatalogLoadResult(
                    locale, self._domain, LoadStatus.NOT_FOUND, source_path=source_path
                )
            )
            return None
        except (OSError, ValueError) as e:
            logger.error("Failed to load catalog %s: %s", source_path, e)
            self._load_results.append(
                CatalogLoadResult(locale, self._domain, LoadStatus.ERROR, e, source_path)
            )
            return None

        logger.debug("Loaded catalog %s (%d messages)", source_path, len(catalog))
        self._load_results.append(
            CatalogLoadResult(locale, self._domain, LoadStatus.SUCCESS, source_path=source_path)
        )
        return catalog

    def lookup(self, name: str, culture: str) -> LocalizedString:
        """Look up name in the culture's catalog, then in its parents' catalogs."""
        candidates = parent_cultures(culture)
        for locale in candidates:
            catalog = self._get_catalog(locale)
            if catalog is None:
                continue
            message = catalog.get(name)
            if message is None or message.fuzzy:
                continue
            value = message.string
            # Plural entries hold a tuple of forms; the singular form is the message
            if isinstance(value, tuple):
                value = value[0] if value else ""
            if not value:
                continue
            return LocalizedString(name, value, False, self._describe(locale))

        searched = ", ".join(self._describe(locale) for locale in candidates)
        return LocalizedString(name, "", True, searched or self._domain)


class CatalogStringLocalizerFactory:
    """Creates one CatalogStringLocalizer per resource type.

    The catalog domain is the resource name, so a resource class named
    ``Errors`` reads ``Errors.po`` from each locale directory.
    """

    __slots__ = ("_loader", "_localizers", "_lock")

    def __init__(self, loader: PathCatalogLoader) -> None:
        self._loader = loader
        self._localizers: dict[str, CatalogStringLocalizer] = {}
        self._lock = threading.Lock()

    def create(self, resource_type: ResourceType) -> CatalogStringLocalizer:
        """Return the cached localizer for resource_type, creating it on first use."""
        domain = resource_name(resource_type)
        with self._lock:
            localizer = self._localizers.get(domain)
            if localizer is None:
                localizer = CatalogStringLocalizer(domain, loader=self._loader)
                self._localizers[domain] = localizer
            return localizer
