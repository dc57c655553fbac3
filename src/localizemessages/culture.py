"""Culture matching for inline default messages.

Decides whether the active culture can use the inline (default culture)
message or must defer to the resource lookup.

Matching rules:
- PREFIX: the active culture starts with the default culture, using an
  ordinal, case-sensitive comparison ("en" matches "en-US" and "en-GB").
- EXACT: the active culture equals the default culture.
- A two-letter default culture is a language-only tag and always uses
  PREFIX, whatever match mode was requested.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from localizemessages.diagnostics.errors import LocalizerConfigurationError
from localizemessages.enums import CultureMatchMode
from localizemessages.locale_utils import language_part

__all__ = [
    "CultureDescriptor",
    "culture_matches",
    "is_supported_culture",
]

_LANGUAGE_ONLY_TAG_LENGTH = 2


@dataclass(frozen=True, slots=True)
class CultureDescriptor:
    """Default culture of the inline messages plus the requested match mode.

    Attributes:
        culture: Culture tag of the inline messages (e.g., "en", "en-GB")
        match_mode: Requested match mode; see effective_mode for the mode used

    Example:
        >>> CultureDescriptor("en", CultureMatchMode.EXACT).effective_mode
        <CultureMatchMode.PREFIX: 'prefix'>
        >>> CultureDescriptor("en-GB", CultureMatchMode.EXACT).effective_mode
        <CultureMatchMode.EXACT: 'exact'>
    """

    culture: str
    match_mode: CultureMatchMode = CultureMatchMode.PREFIX

    def __post_init__(self) -> None:
        """Validate the culture tag.

        Raises:
            LocalizerConfigurationError: If culture is None, empty or whitespace
        """
        if not isinstance(self.culture, str) or not self.culture.strip():
            msg = f"Default culture cannot be None, empty or whitespace, got: {self.culture!r}"
            raise LocalizerConfigurationError(msg)

    @property
    def effective_mode(self) -> CultureMatchMode:
        """Match mode actually applied; two-letter tags always use PREFIX."""
        if len(self.culture) == _LANGUAGE_ONLY_TAG_LENGTH:
            return CultureMatchMode.PREFIX
        return self.match_mode

    @property
    def exact_culture_match(self) -> bool:
        """True only when EXACT matching is in force."""
        return self.effective_mode == CultureMatchMode.EXACT


def culture_matches(active_culture: str, descriptor: CultureDescriptor) -> bool:
    """Check whether the active culture already matches the default culture.

    Args:
        active_culture: Culture of the current request/operation
        descriptor: Default culture and match mode

    Returns:
        True if the inline message is already in the active culture

    Example:
        >>> culture_matches("en-US", CultureDescriptor("en"))
        True
        >>> culture_matches("fr-FR", CultureDescriptor("en"))
        False
    """
    match descriptor.effective_mode:
        case CultureMatchMode.EXACT:
            return active_culture == descriptor.culture
        case _:
            return active_culture.startswith(descriptor.culture)


def is_supported_culture(active_culture: str, supported_cultures: Iterable[str] | None) -> bool:
    """Check the active culture's language against a supported-culture allow-list.

    Compares the language part of the active culture with the language part
    of each supported culture, so "fr-CA" is supported when the allow-list
    holds "fr" or "fr-FR".

    Args:
        active_culture: Culture of the current request/operation
        supported_cultures: Allow-list, or None when every culture is supported

    Returns:
        True if there is no allow-list or the language is in it
    """
    if supported_cultures is None:
        return True
    language = language_part(active_culture)
    return any(language == language_part(supported) for supported in supported_cultures)
