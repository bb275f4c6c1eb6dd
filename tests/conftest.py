"""Pytest configuration for translatablecolumns test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared state:
The shared config and shared locale provider are process-wide. The autouse
fixture below restores them around every test so declarations made with the
defaults cannot leak between tests.
"""

from collections.abc import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from translatablecolumns import (
    ContextLocaleProvider,
    TranslatableConfig,
    get_locale_provider,
    reset_config,
)
from translatablecolumns.locale_utils import clear_locale_cache

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


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED STATE
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_shared_state() -> Generator[None]:
    """Reset the shared config, shared locale provider and Babel cache."""
    reset_config()
    get_locale_provider().reset()
    yield
    reset_config()
    get_locale_provider().reset()
    clear_locale_cache()


@pytest.fixture
def config() -> TranslatableConfig:
    """Fresh default configuration (full_locale=False, use_default=True)."""
    return TranslatableConfig()


@pytest.fixture
def locales() -> ContextLocaleProvider:
    """Provider with current locale nl-NL and default locale en-US."""
    provider = ContextLocaleProvider(default_locale="en-US")
    provider.set_locale("nl-NL")
    return provider
