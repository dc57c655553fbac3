"""Locale utilities for culture tags.

Centralizes culture-tag handling used throughout the codebase: BCP-47 to
POSIX conversion for Babel, language-part extraction for the supported
culture allow-list, and parent-culture chains for catalog lookups.

Culture tags are compared ordinally elsewhere (see culture.py); these helpers
never change the tag a caller passes to the culture matcher.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "language_part",
    "normalize_locale",
    "parent_cultures",
]

_TAG_SEPARATORS = ("-", "_")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 culture tag to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 culture tag (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def language_part(culture: str) -> str:
    """Return the language part of a culture tag.

    The language part is everything before the first hyphen or underscore,
    or the whole tag when it has no separator.

    Example:
        >>> language_part("en-GB")
        'en'
        >>> language_part("zh_Hans_CN")
        'zh'
        >>> language_part("fr")
        'fr'
    """
    for index, char in enumerate(culture):
        if char in _TAG_SEPARATORS:
            return culture[:index]
    return culture


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Culture tag (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def parent_cultures(culture: str) -> tuple[str, ...]:
    """Return the POSIX lookup chain for a culture, most specific first.

    Uses Babel to split the tag into language, script and territory. Tags
    Babel does not recognize fall back to splitting on separators, so
    lookups still work for private or custom cultures.

    Args:
        culture: Culture tag (e.g., "fr-CA", "zh-Hans-CN")

    Returns:
        Tuple of POSIX locale codes, e.g. ("fr_CA", "fr")

    Example:
        >>> parent_cultures("zh-Hans-CN")
        ('zh_Hans_CN', 'zh_Hans', 'zh')
        >>> parent_cultures("en")
        ('en',)
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not culture:
        return ()

    try:
        locale = get_babel_locale(culture)
    except (UnknownLocaleError, ValueError, TypeError):
        parts = normalize_locale(culture).split("_")
        chain = ["_".join(parts[:size]) for size in range(len(parts), 0, -1)]
        return tuple(dict.fromkeys(chain))

    chain = [str(locale)]
    if locale.script and locale.territory:
        chain.append(f"{locale.language}_{locale.script}")
    chain.append(locale.language)
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(chain))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system culture from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    The result is returned as a BCP-47 tag (hyphen separated) so it can be
    passed straight to the localize operations as the active culture.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected culture tag, e.g. "de-DE"

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return system_locale.split(".")[0].replace("_", "-")
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return value.split(".")[0].replace("_", "-")

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en-US"
