"""
Locale Registry — read-only store of translation dictionaries.

Holds one dictionary per supported locale tag. The set of locales is fixed
when the registry is built; only the active locale (owned by the resolver)
changes at runtime.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog

logger = structlog.get_logger()


class LocaleRegistry:
    """Immutable mapping of locale tag → translation dictionary.

    Tags are compared by exact, case-sensitive string equality. Dictionaries
    are copied on construction and exposed as read-only views, so neither
    the input packs nor callers can mutate the registry afterwards.

    Usage:
        registry = LocaleRegistry.builtin()
        "sv-SE" in registry          # True
        registry.dictionary("en-US")["auth.login"]   # "Log in"
    """

    def __init__(self, packs: Mapping[str, Mapping[str, str]]) -> None:
        """Build the registry from locale packs.

        Args:
            packs: Mapping of locale tag to {key: template} dictionaries.

        Raises:
            ValueError: If a pack has no entries.
        """
        locales: dict[str, Mapping[str, str]] = {}
        for tag, strings in packs.items():
            if not strings:
                raise ValueError(f"Locale pack '{tag}' is empty")
            locales[tag] = MappingProxyType(dict(strings))
        self._locales = MappingProxyType(locales)

    @classmethod
    def builtin(cls, supported: Iterable[str] | None = None) -> "LocaleRegistry":
        """Create a registry from the built-in language packs (sv-SE, en-US).

        Args:
            supported: Locale tags to keep. None keeps every built-in pack.
                Tags without a built-in pack are skipped with a warning.

        Returns:
            New LocaleRegistry.
        """
        from . import en_us, sv_se

        available = {
            "sv-SE": sv_se.STRINGS,
            "en-US": en_us.STRINGS,
        }
        if supported is None:
            return cls(available)

        packs: dict[str, Mapping[str, str]] = {}
        for tag in supported:
            if tag in available:
                packs[tag] = available[tag]
            else:
                logger.warning(
                    "i18n.pack_unavailable",
                    locale=tag,
                    available=sorted(available),
                )
        return cls(packs)

    @property
    def locales(self) -> frozenset[str]:
        """Set of supported locale tags."""
        return frozenset(self._locales)

    @property
    def available_locales(self) -> list[str]:
        """Sorted list of supported locale tags."""
        return sorted(self._locales)

    def dictionary(self, tag: str) -> Mapping[str, str] | None:
        """Return the read-only dictionary for a locale, or None if unknown."""
        return self._locales.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleRegistry(locales={self.available_locales})"
