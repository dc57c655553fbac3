"""Pytest configuration for the localizemessages test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from localizemessages import DefaultLocalizerOptions, DictStringLocalizer, NameRegistry
from localizemessages.keys import default_registry
from localizemessages.locale_utils import clear_locale_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Iterator[None]:
    """Keep default name registrations and the Babel locale cache per test."""
    yield
    default_registry.clear()
    clear_locale_cache()


@pytest.fixture
def registry() -> NameRegistry:
    """Fresh name registry, independent of the default one."""
    return NameRegistry()


@pytest.fixture
def english_options() -> DefaultLocalizerOptions:
    """Options for messages written in English."""
    return DefaultLocalizerOptions("en")


@pytest.fixture
def french_resources() -> DictStringLocalizer:
    """In-memory resource that reports missing keys instead of raising."""
    return DictStringLocalizer(
        {
            "Greeting": "Bonjour",
            "OrderPlaced": "Commande {0} passée pour {1}.",
            "StatusGenericLocalizer_MessageHasOneError": "Échec avec 1 erreur",
            "StatusGenericLocalizer_MessageHasManyErrors": "Échec avec {0} erreurs",
        },
        raise_on_missing=False,
        resource_name="Messages",
    )
