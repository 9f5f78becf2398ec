from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forge_ui import __version__
from forge_ui.logging_config import get_logger

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # forge-ui/

DEFAULT_REACTIONS = ["+1", "-1", "laugh", "hooray", "confused", "heart", "rocket", "eyes"]


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the presentation layer can boot without a
    ``.env`` file. Values exposed to templates are read through the helper
    registry, never directly from this object.
    """

    # Server
    app_name: str = Field(default="Forge", min_length=1, description="Site title shown in pages and mails")
    app_url: str = Field(default="http://localhost:3000/", description="Public root URL")
    app_sub_url: str = Field(default="", description="Sub-path when served below the domain root")
    static_url_prefix: str = Field(default="", description="Prefix for static assets (defaults to app_sub_url)")
    app_ver: str = Field(default=__version__, description="Version string shown in the footer")
    app_built_with: str = Field(default="", description="Build tags shown in the footer")
    domain: str = Field(default="localhost", min_length=1, description="Domain used for clone URLs")
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Bind host")
    api_port: int = Field(default=3000, ge=1, le=65535, description="Bind port")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path | None = Field(default=None, description="Directory for the JSON log file")

    # Data
    seed_file: Path | None = Field(default=None, description="JSON file with repositories and organizations to serve")

    # Security
    trusted_hosts: str = Field(default="localhost,127.0.0.1", description="Comma separated hosts")
    cors_origins: str = Field(default="http://localhost:3000", description="Comma separated origins")
    reverse_proxy_auth_header: str = Field(default="X-WEBAUTH-USER", description="Header carrying the viewer name")
    site_admins: list[str] = Field(default_factory=list, description="Viewer names with site admin capability")
    rate_limit: str = Field(default="60/minute", description="Per client request limit (slowapi syntax)")

    # UI
    disable_gravatar: bool = False
    default_show_full_name: bool = False
    show_footer_template_load_time: bool = True
    use_service_worker: bool = True
    reactions: list[str] = Field(default_factory=lambda: list(DEFAULT_REACTIONS))
    theme_color_meta_tag: str = "#6cc644"
    meta_author: str = "Forge - Git with a cup of tea"
    meta_description: str = "Forge is a self-hosted Git service"
    meta_keywords: str = "go,git,self-hosted,forge"
    default_theme: str = "auto"
    default_locale: str = Field(default="en-US", pattern=r"^[a-z]{2}-[A-Z]{2}$")

    # Feature switches
    disable_git_hooks: bool = True
    disable_webhooks: bool = False
    import_local_paths: bool = False
    ssh_disabled: bool = False
    oauth2_enabled: bool = True
    disable_2fa: bool = False
    force_private: bool = False

    # Notification polling (milliseconds)
    notification_min_timeout_ms: int = Field(default=10_000, ge=0)
    notification_timeout_step_ms: int = Field(default=10_000, ge=0)
    notification_max_timeout_ms: int = Field(default=60_000, ge=0)
    notification_event_source_update_ms: int = Field(default=10_000, ge=0)

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("app_url", mode="after")
    @classmethod
    def validate_app_url(cls, v: str) -> str:
        """Ensure app_url is an http(s) URL ending in a slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("app_url must be a valid http:// or https:// URL")
        if not v.endswith("/"):
            v += "/"
        return v

    @field_validator("app_sub_url", "static_url_prefix", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Sub paths are joined with a leading slash, so drop the trailing one."""
        return v.strip().rstrip("/")

    @model_validator(mode="after")
    def default_static_prefix(self) -> "Settings":
        """Serve static assets below the sub path unless told otherwise."""
        if not self.static_url_prefix:
            self.static_url_prefix = self.app_sub_url
        return self

    @property
    def use_https(self) -> bool:
        return self.app_url.startswith("https")

    @property
    def notification_settings(self) -> dict[str, int]:
        """Polling intervals handed to the frontend notification widget."""
        return {
            "MinTimeout": self.notification_min_timeout_ms,
            "TimeoutStep": self.notification_timeout_step_ms,
            "MaxTimeout": self.notification_max_timeout_ms,
            "EventSourceUpdateTime": self.notification_event_source_update_ms,
        }


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"name": settings.app_name}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
