"""
Translation Lookup — key resolution and template interpolation.

Fallback chain: active locale → raw key. Placeholders are "{identifier}"
(ASCII letters, digits, underscore). In dictionary templates "{{" and "}}"
render as literal braces; a raw key fallback keeps its braces as written.
"""

import re
from collections.abc import Mapping
from typing import Any

from .registry import LocaleRegistry
from .resolver import LocaleResolver

# One token per match: an escaped brace or a placeholder
_TOKEN_RE = re.compile(r"\{\{|\}\}|\{([A-Za-z0-9_]+)\}")
# Placeholders only, braces otherwise left as written
_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z0-9_]+)\}")


def interpolate(template: str, params: Mapping[str, Any], escapes: bool = True) -> str:
    """Substitute {identifier} placeholders in a single left-to-right pass.

    Placeholders without a value in params are kept verbatim. Substituted
    text is not re-scanned.

    Args:
        template: Template string.
        params: Placeholder name → value. Values are converted with str().
        escapes: If True, "{{" and "}}" render as single braces. If False,
            only placeholders are touched.

    Returns:
        Rendered string.

    Example:
        >>> interpolate("Hello {name}", {"name": "Ada"})
        'Hello Ada'
        >>> interpolate("Hello {name}", {})
        'Hello {name}'
        >>> interpolate("{{name}}", {"name": "Ada"})
        '{name}'
        >>> interpolate("a}}b {name}", {"name": "Ada"}, escapes=False)
        'a}}b Ada'
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name is None:
            # Escaped brace: "{{" → "{", "}}" → "}"
            return match.group(0)[0]
        if name in params:
            return str(params[name])
        return match.group(0)

    pattern = _TOKEN_RE if escapes else _PLACEHOLDER_RE
    return pattern.sub(_replace, template)


class Translator:
    """Resolves translation keys against the resolver's active locale.

    Never raises: unknown keys render as the key itself and missing
    parameters leave their placeholder in the output, so incomplete
    translations stay visible instead of breaking the UI.
    """

    def __init__(self, registry: LocaleRegistry, resolver: LocaleResolver) -> None:
        self._registry = registry
        self._resolver = resolver

    def _active_dictionary(self) -> Mapping[str, str]:
        # Single snapshot of the active locale per call
        return self._registry.dictionary(self._resolver.active_locale) or {}

    def t(self, key: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """Translate a key with optional interpolation.

        Args:
            key: Translation key (e.g. "auth.login").
            params: Placeholder values.
            **kwargs: Additional placeholder values; override params.

        Returns:
            Rendered string.
        """
        template = self._active_dictionary().get(key)
        found = template is not None
        if not found:
            # Unknown key: rendered as written, placeholders aside
            template = key

        values: dict[str, Any] = dict(params) if params else {}
        values.update(kwargs)
        if not values and (not found or ("{" not in template and "}" not in template)):
            return template
        return interpolate(template, values, escapes=found)

    def get_all(self) -> dict[str, str]:
        """Return a copy of the active locale's dictionary."""
        return dict(self._active_dictionary())
