"""
Locale Resolver — detection and switching of the active locale.

Detection walks a strict priority chain:
host display language → user agent language → configured default.
"""

import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from .registry import LocaleRegistry

logger = structlog.get_logger()

# Env var used by the hosting environment to expose its display language
DISPLAY_LANGUAGE_ENV = "OUTLOOK_TALK_DISPLAY_LANGUAGE"

# POSIX locale variables, in lookup order
_POSIX_LOCALE_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_posix_locale(value: str | None) -> str | None:
    """Convert a POSIX locale value to tag form ("sv_SE.UTF-8" → "sv-SE").

    Returns None for empty values and for the "C" / "POSIX" locales.
    """
    if not value:
        return None
    tag = value.split(".", 1)[0].split("@", 1)[0]
    if not tag or tag in ("C", "POSIX"):
        return None
    return tag.replace("_", "-")


@dataclass(frozen=True)
class EnvironmentHints:
    """Locale hints exposed by the runtime.

    Attributes:
        display_language: Display language reported by the hosting
            environment (Office), or None when it exposes none.
        user_agent_language: Language preference of the user agent.
    """

    display_language: str | None = None
    user_agent_language: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "EnvironmentHints":
        """Read hints from process environment variables.

        The host hint comes from OUTLOOK_TALK_DISPLAY_LANGUAGE. The user agent
        language is the first of LC_ALL, LC_MESSAGES and LANG that is set,
        normalized to tag form.
        """
        env = os.environ if environ is None else environ

        ua_language = None
        for var in _POSIX_LOCALE_VARS:
            if env.get(var):
                ua_language = normalize_posix_locale(env[var])
                break

        return cls(
            display_language=env.get(DISPLAY_LANGUAGE_ENV) or None,
            user_agent_language=ua_language,
        )


class LocaleResolver:
    """Owns the active locale of one session.

    The active locale starts as the configured default and is replaced by
    detect_locale() at startup. After that it only changes through
    set_locale(), which accepts registry tags and rejects everything else
    without touching the state.

    Reads and writes of the active locale go through a lock so concurrent
    callers never observe a half-applied change.
    """

    def __init__(self, registry: LocaleRegistry, default_locale: str) -> None:
        self._registry = registry
        self._default = default_locale
        self._active = default_locale
        self._lock = threading.Lock()
        self.log = logger.bind(component="locale_resolver")

    @property
    def default_locale(self) -> str:
        """Configured fallback locale."""
        return self._default

    @property
    def active_locale(self) -> str:
        """Currently active locale tag."""
        with self._lock:
            return self._active

    def detect_locale(self, hints: EnvironmentHints) -> str:
        """Select and store the active locale from environment hints.

        Priority:
            1. hints.display_language, if it is a registry tag
            2. hints.user_agent_language, if it is a registry tag
            3. the configured default (trusted, not validated)

        Args:
            hints: Host and user agent language hints.

        Returns:
            The selected locale tag.
        """
        if self._supports(hints.display_language):
            locale, source = hints.display_language, "host"
        elif self._supports(hints.user_agent_language):
            locale, source = hints.user_agent_language, "user_agent"
        else:
            locale, source = self._default, "default"

        with self._lock:
            self._active = locale

        self.log.debug(
            "i18n.locale_detected",
            locale=locale,
            source=source,
            display_language=hints.display_language,
            user_agent_language=hints.user_agent_language,
        )
        if locale not in self._registry:
            self.log.warning("i18n.default_locale_unknown", locale=locale)
        return locale

    def set_locale(self, tag: str) -> bool:
        """Switch the active locale if the tag is supported.

        Args:
            tag: Candidate locale tag.

        Returns:
            True if the locale was applied, False if it is not supported
            (the active locale is left unchanged).
        """
        if not self._supports(tag):
            self.log.info(
                "i18n.locale_rejected",
                locale=tag,
                available=self._registry.available_locales,
            )
            return False

        with self._lock:
            previous, self._active = self._active, tag

        self.log.debug("i18n.locale_changed", previous=previous, locale=tag)
        return True

    def _supports(self, tag: object) -> bool:
        return isinstance(tag, str) and tag in self._registry
