"""
Internationalization (i18n) for the Outlook add-in.

Each session owns an I18n instance; there is no global active locale.

Public API:
    I18n.detect_locale(hints)   — Pick the active locale at startup.
    I18n.set_locale(tag)        — Switch locale; False if unsupported.
    I18n.t(key, params)         — Translate a key with interpolation.
    I18n.get_all()              — Copy of the active locale's dictionary.

Usage:
    from outlook_talk.i18n import create_i18n

    i18n = create_i18n(app_config)
    print(i18n.t("meeting.joinInstructions"))
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .registry import LocaleRegistry
from .resolver import EnvironmentHints, LocaleResolver, normalize_posix_locale
from .translator import Translator, interpolate

if TYPE_CHECKING:
    from ..config.schema import AppConfig

__all__ = [
    "I18n",
    "create_i18n",
    "EnvironmentHints",
    "LocaleRegistry",
    "LocaleResolver",
    "Translator",
    "interpolate",
    "normalize_posix_locale",
]


class I18n:
    """Locale state and translation lookup for one session.

    Wires a LocaleRegistry, a LocaleResolver and a Translator together.
    Independent instances never share their active locale.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        default_locale: str,
        hints: EnvironmentHints | None = None,
    ) -> None:
        """Build the session.

        Args:
            registry: Supported locales and their dictionaries.
            default_locale: Fallback used when no hint matches.
            hints: If given, detection runs immediately with them.
        """
        self.registry = registry
        self.resolver = LocaleResolver(registry, default_locale)
        self.translator = Translator(registry, self.resolver)
        if hints is not None:
            self.resolver.detect_locale(hints)

    @property
    def locale(self) -> str:
        """Current active locale tag."""
        return self.resolver.active_locale

    @property
    def available_locales(self) -> list[str]:
        """Sorted supported locale tags."""
        return self.registry.available_locales

    def detect_locale(self, hints: EnvironmentHints | None = None) -> str:
        """Detect and store the active locale (reads the environment if no hints)."""
        if hints is None:
            hints = EnvironmentHints.from_environ()
        return self.resolver.detect_locale(hints)

    def set_locale(self, tag: str) -> bool:
        """Switch the active locale. Returns False and keeps state if unsupported."""
        return self.resolver.set_locale(tag)

    def t(self, key: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """Translate a key for the active locale."""
        return self.translator.t(key, params, **kwargs)

    def get_all(self) -> dict[str, str]:
        """Copy of the active locale's full dictionary."""
        return self.translator.get_all()


def create_i18n(config: "AppConfig", hints: EnvironmentHints | None = None) -> I18n:
    """Build an I18n session from the application configuration.

    Args:
        config: Application config (locale.default_locale, supported_locales).
        hints: Environment hints; read from os.environ when None.

    Returns:
        I18n with the locale already detected.
    """
    registry = LocaleRegistry.builtin(config.locale.supported_locales)
    if hints is None:
        hints = EnvironmentHints.from_environ()
    return I18n(registry, config.locale.default_locale, hints=hints)
