"""Configuration for translated column resolution.

TranslatableConfig is mutable: hosts flip ``full_locale`` or
``use_default`` at runtime and every resolution call must observe the
change. Registries hold a reference to the config object and read its
attributes on each call; they never copy the values.

A shared process-wide instance is available through get_config(). Hosts
that need isolation (tests, multi-tenant services) pass their own
TranslatableConfig to ``configure()`` instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TranslatableConfig", "get_config", "reset_config"]


@dataclass(slots=True)
class TranslatableConfig:
    """Settings consulted on every column resolution.

    Attributes:
        full_locale: When True, column suffixes use the full locale
            (``title_en_us``). When False (default), only the language
            subtag is used (``title_en``).
        use_default: Default getter policy for fields declared without an
            explicit ``use_default`` option. When True (default), getters
            fall back to the default-locale column and then to any available
            translation when the current-locale column is blank.

    Example:
        >>> config = TranslatableConfig()
        >>> config.full_locale = True
        >>> config.set_defaults()
        >>> config.full_locale
        False
    """

    full_locale: bool = False
    use_default: bool = True

    def set_defaults(self) -> None:
        """Restore every option to its default value, in place."""
        self.full_locale = False
        self.use_default = True


_shared_config = TranslatableConfig()


def get_config() -> TranslatableConfig:
    """Get the shared process-wide configuration.

    Always returns the same instance, so changes made through it are seen by
    every registry that was configured with the shared config.
    """
    return _shared_config


def reset_config() -> None:
    """Restore the shared configuration to its defaults (useful for testing)."""
    _shared_config.set_defaults()
