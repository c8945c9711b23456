"""
Pydantic models for the Outlook add-in configuration.

Defines all configuration schemas using Pydantic v2 for validation,
defaults, and serialization.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class NextcloudConfig(BaseModel):
    """Nextcloud server configuration."""

    url: str = "https://demo.hubs.se"

    model_config = {"extra": "forbid"}


class OAuthConfig(BaseModel):
    """OAuth2 settings for the Nextcloud login flow.

    Nextcloud OAuth2 does not use scopes; a token grants full access.
    """

    client_id: str = "outlook-integrator"
    redirect_path: str = "/outlook-addin/src/auth/auth-callback.html"
    authorize_endpoint: str = "/apps/oauth2/authorize"
    token_endpoint: str = "/apps/oauth2/api/v1/token"
    scopes: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class ApiEndpointsConfig(BaseModel):
    """Paths of the integrator API, relative to ApiConfig.base_path."""

    create_meeting: str = "/meeting"
    get_status: str = "/status"
    verify_auth: str = "/auth/verify"

    model_config = {"extra": "forbid"}


class ApiConfig(BaseModel):
    """Integrator API configuration."""

    base_path: str = "/apps/outlook_integrator/api/v1"
    endpoints: ApiEndpointsConfig = Field(default_factory=ApiEndpointsConfig)

    model_config = {"extra": "forbid"}

    def url_for(self, name: str, server: str) -> str:
        """Build the absolute URL of an endpoint.

        Args:
            name: Endpoint field name (e.g. "create_meeting").
            server: Nextcloud server URL.

        Raises:
            KeyError: If the endpoint is not defined.
        """
        endpoints = self.endpoints.model_dump()
        if name not in endpoints:
            raise KeyError(f"Unknown API endpoint: {name}")
        return server.rstrip("/") + self.base_path + endpoints[name]


class LocaleConfig(BaseModel):
    """Localization configuration."""

    default_locale: str = "sv-SE"
    supported_locales: list[str] = Field(
        default_factory=lambda: ["sv-SE", "en-US"],
        description="Locale tags offered to the user. Must include default_locale.",
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _default_is_supported(self) -> "LocaleConfig":
        if not self.supported_locales:
            raise ValueError("supported_locales must not be empty")
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default_locale '{self.default_locale}' is not in "
                f"supported_locales {self.supported_locales}"
            )
        return self


class TokenConfig(BaseModel):
    """OAuth token storage settings."""

    storage_key: str = "nextcloud_tokens"
    refresh_threshold: int = Field(
        default=300,
        ge=0,
        description="Seconds before expiry at which the token is refreshed",
    )

    model_config = {"extra": "forbid"}


class UIConfig(BaseModel):
    """Dialog and task pane dimensions."""

    dialog_width: int = Field(default=30, ge=1, le=100, description="Percent of screen width")
    dialog_height: int = Field(default=60, ge=1, le=100, description="Percent of screen height")
    taskpane_height: int = Field(default=450, ge=1, description="Pixels")

    model_config = {"extra": "forbid"}


class LoggingConfig(BaseModel):
    """Logging system configuration."""

    level: Literal["debug", "info", "warn", "error"] = "warn"
    file: Path | None = None
    verbose: int = 0

    model_config = {"extra": "forbid"}


class AppConfig(BaseModel):
    """Complete application configuration.

    This is the root of the configuration tree. It combines all sections
    and is the entry point for validation.
    """

    nextcloud: NextcloudConfig = Field(default_factory=NextcloudConfig)
    oauth: OAuthConfig = Field(default_factory=OAuthConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    token: TokenConfig = Field(default_factory=TokenConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
