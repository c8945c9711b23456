"""
Main CLI for the Outlook add-in localization using Click.

Every command loads the configuration, detects the session locale from
the environment (or from --display-language / --ua-language) and works
against its own I18n instance.
"""

import dataclasses
import json
import sys
from pathlib import Path
from typing import Any, Callable

import click
import yaml
from pydantic import ValidationError

from .config.loader import load_config
from .config.schema import AppConfig
from .i18n import EnvironmentHints, I18n, create_i18n
from .logging import configure_logging

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3

# Current version
_VERSION = "1.0.0"


def _config_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, path_type=Path),
        help="Path to the YAML configuration file",
    )(f)


def _runtime_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Options that override the loaded configuration and logging."""
    f = click.option(
        "--quiet",
        is_flag=True,
        help="No log output on the console",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Also write JSON logs to this file",
    )(f)
    f = click.option(
        "--default-locale",
        help="Fallback locale when no hint is supported (overrides config)",
    )(f)
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Verbosity (-v info, -vv debug)",
    )(f)
    return f


def _hint_options(f: Callable[..., Any]) -> Callable[..., Any]:
    f = click.option(
        "--ua-language",
        help="User agent language (default: LC_ALL / LC_MESSAGES / LANG)",
    )(f)
    f = click.option(
        "--display-language",
        help="Host display language (default: $OUTLOOK_TALK_DISPLAY_LANGUAGE)",
    )(f)
    return f


def _load_app_config(config: Path | None, runtime: dict[str, Any]) -> AppConfig:
    """Load the configuration and set up logging, exiting on config errors.

    Args:
        config: YAML file from -c/--config, if any.
        runtime: Values of the runtime options (verbose, default_locale,
            log_file, quiet).
    """
    cli_args = {
        "verbose": runtime.get("verbose"),
        "default_locale": runtime.get("default_locale"),
        "log_file": runtime.get("log_file"),
    }
    try:
        app_config = load_config(config_path=config, cli_args=cli_args)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (ValidationError, yaml.YAMLError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    configure_logging(app_config.logging, quiet=bool(runtime.get("quiet")))
    return app_config


def _build_session(
    app_config: AppConfig,
    display_language: str | None,
    ua_language: str | None,
) -> I18n:
    """Create the session I18n, with CLI hints overriding the environment."""
    hints = EnvironmentHints.from_environ()
    if display_language:
        hints = dataclasses.replace(hints, display_language=display_language)
    if ua_language:
        hints = dataclasses.replace(hints, user_agent_language=ua_language)
    return create_i18n(app_config, hints=hints)


def _apply_locale(i18n: I18n, locale: str | None) -> None:
    """Apply an explicit --locale, exiting if it is not supported."""
    if locale and not i18n.set_locale(locale):
        click.echo(
            f"Unsupported locale: {locale}. "
            f"Available: {', '.join(i18n.available_locales)}",
            err=True,
        )
        sys.exit(EXIT_FAILED)


def _parse_params(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated "name=value" options into a dict."""
    params: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"'{item}' is not in name=value form", param_hint="--param"
            )
        params[name] = value
    return params


@click.group()
@click.version_option(version=_VERSION, prog_name="outlook-talk")
def main() -> None:
    """outlook-talk — localization for the Nextcloud Talk Outlook add-in."""


@main.command()
@click.argument("key")
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    help="Placeholder value as name=value (repeatable)",
)
@click.option("-l", "--locale", help="Switch to this locale before translating")
@_hint_options
@_config_option
@_runtime_options
def translate(
    key: str,
    params: tuple[str, ...],
    locale: str | None,
    display_language: str | None,
    ua_language: str | None,
    config: Path | None,
    **runtime: Any,
) -> None:
    """Translate KEY for the detected (or given) locale."""
    parsed = _parse_params(params)
    app_config = _load_app_config(config, runtime)
    i18n = _build_session(app_config, display_language, ua_language)
    _apply_locale(i18n, locale)
    click.echo(i18n.t(key, parsed))


@main.command()
@click.option("-l", "--locale", help="Locale to dump instead of the detected one")
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON object")
@_hint_options
@_config_option
@_runtime_options
def dump(
    locale: str | None,
    as_json: bool,
    display_language: str | None,
    ua_language: str | None,
    config: Path | None,
    **runtime: Any,
) -> None:
    """Print every key and template of the active locale."""
    app_config = _load_app_config(config, runtime)
    i18n = _build_session(app_config, display_language, ua_language)
    _apply_locale(i18n, locale)

    strings = i18n.get_all()
    if as_json:
        click.echo(json.dumps(strings, ensure_ascii=False, indent=2, sort_keys=True))
        return

    click.echo(f"Locale: {i18n.locale} ({len(strings)} keys)\n")
    width = max((len(k) for k in strings), default=0)
    for key in sorted(strings):
        click.echo(f"  {key:<{width}}  {strings[key]}")


@main.command()
@_hint_options
@_config_option
@_runtime_options
def locales(
    display_language: str | None,
    ua_language: str | None,
    config: Path | None,
    **runtime: Any,
) -> None:
    """List supported locales, the default and the detected one."""
    app_config = _load_app_config(config, runtime)
    i18n = _build_session(app_config, display_language, ua_language)

    click.echo("Supported locales:\n")
    for tag in i18n.available_locales:
        markers = []
        if tag == app_config.locale.default_locale:
            markers.append("default")
        if tag == i18n.locale:
            markers.append("active")
        suffix = f"  ({', '.join(markers)})" if markers else ""
        keys = len(i18n.registry.dictionary(tag) or {})
        click.echo(f"  {tag:<8} {keys} keys{suffix}")

    if i18n.locale not in i18n.registry:
        click.echo(f"\n  Active locale {i18n.locale} has no language pack", err=True)


@main.command("validate-config")
@_config_option
def validate_config(config: Path | None) -> None:
    """Validate a YAML configuration file."""
    try:
        app_config = load_config(config_path=config)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (ValidationError, yaml.YAMLError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    server = app_config.nextcloud.url
    click.echo("Valid configuration")
    click.echo(f"  Nextcloud: {server}")
    click.echo(f"  OAuth client: {app_config.oauth.client_id}")
    click.echo(f"  Default locale: {app_config.locale.default_locale}")
    click.echo(f"  Supported locales: {', '.join(app_config.locale.supported_locales)}")
    click.echo("  API endpoints:")
    for name in app_config.api.endpoints.model_dump():
        click.echo(f"    {name:<15} {app_config.api.url_for(name, server)}")


if __name__ == "__main__":
    main()
