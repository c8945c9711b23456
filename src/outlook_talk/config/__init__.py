"""
Configuration module for the Outlook add-in.

Exports the main components for convenient imports.
"""

from .loader import load_config
from .schema import (
    ApiConfig,
    AppConfig,
    LocaleConfig,
    LoggingConfig,
    NextcloudConfig,
    OAuthConfig,
    TokenConfig,
    UIConfig,
)

__all__ = [
    "load_config",
    "AppConfig",
    "ApiConfig",
    "LocaleConfig",
    "LoggingConfig",
    "NextcloudConfig",
    "OAuthConfig",
    "TokenConfig",
    "UIConfig",
]
