#!/usr/bin/env python3
"""
Demo script for the add-in localization core.

Shows locale detection for a few host / user agent combinations, locale
switching and interpolation.

Run:
    python scripts/demo_i18n.py
"""

import sys
from pathlib import Path

# Add src to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from outlook_talk.config.schema import AppConfig
from outlook_talk.i18n import EnvironmentHints, create_i18n, interpolate
from outlook_talk.logging import configure_logging


def main() -> None:
    config = AppConfig()
    config.logging.verbose = 2
    configure_logging(config.logging)

    print("=" * 70)
    print("LOCALE DETECTION")
    print("=" * 70)

    scenarios = [
        ("Outlook in English", EnvironmentHints("en-US", "sv-SE")),
        ("Outlook in German, browser in English", EnvironmentHints("de-DE", "en-US")),
        ("No host, browser in French", EnvironmentHints(None, "fr-FR")),
    ]
    for label, hints in scenarios:
        i18n = create_i18n(config, hints=hints)
        print(f"  {label:<40} → {i18n.locale:<6} {i18n.t('app.title')}")

    print()
    print("=" * 70)
    print("SWITCHING AND INTERPOLATION")
    print("=" * 70)

    i18n = create_i18n(config, hints=EnvironmentHints())
    print(f"  {i18n.locale}: {i18n.t('meeting.create')}")
    print(f"  set_locale('xx-XX') → {i18n.set_locale('xx-XX')} (still {i18n.locale})")
    print(f"  set_locale('en-US') → {i18n.set_locale('en-US')}")
    print(f"  {i18n.locale}: {i18n.t('meeting.create')}")
    print(f"  missing key: {i18n.t('meeting.unknown')}")
    print(f"  interpolate: {interpolate('{count} participants, {pending} pending', {'count': 3})}")
    print(f"  key fallback with params: {i18n.t('meeting.{count}.unknown', count=3)}")
    print(f"  all keys:    {len(i18n.get_all())}")


if __name__ == "__main__":
    main()
