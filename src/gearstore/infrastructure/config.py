"""Configuration settings loaded from environment variables and ``.env``.

Credentials are optional at load time; components that need them raise
ConfigurationError when they are built, so the CLI's offline JSON mode
works without any Airtable or Resend setup.
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gearstore.domain.exceptions import ConfigurationError

load_dotenv()

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Record store
    store_backend: str = Field(default="airtable", alias="STORE_BACKEND")
    data_dir: Path = Field(default=_PROJECT_ROOT / "data", alias="DATA_DIR")
    airtable_pat: str = Field(default="", alias="AIRTABLE_PAT")
    airtable_base_id: str = Field(default="", alias="AIRTABLE_BASE_ID")
    airtable_api_url: str = Field(default="https://api.airtable.com/v0", alias="AIRTABLE_API_URL")
    airtable_products_table: str = Field(default="Products", alias="AIRTABLE_PRODUCTS_TABLE")
    airtable_holds_table: str = Field(default="Holds", alias="AIRTABLE_HOLDS_TABLE")
    airtable_sales_table: str = Field(default="Sales", alias="AIRTABLE_SALES_TABLE")
    # Email
    resend_api_key: str = Field(default="", alias="RESEND_API_KEY")
    resend_from_email: str = Field(default="", alias="RESEND_FROM_EMAIL")
    resend_api_url: str = Field(default="https://api.resend.com", alias="RESEND_API_URL")
    admin_email: str = Field(default="", alias="ADMIN_EMAIL")
    # Admin auth
    admin_password: str = Field(default="", alias="ADMIN_PASSWORD")
    jwt_secret: str = Field(default="", alias="JWT_SECRET")
    jwt_expiry_hours: int = Field(default=24, alias="JWT_EXPIRY_HOURS")
    # Hold policy
    hold_duration_hours: int = Field(default=48, gt=0, alias="HOLD_DURATION_HOURS")
    hold_extension_hours: int = Field(default=24, gt=0, alias="HOLD_EXTENSION_HOURS")
    display_timezone: str = Field(default="UTC", alias="DISPLAY_TIMEZONE")
    # HTTP client timeout in seconds
    http_timeout: float = Field(default=30.0, alias="HTTP_TIMEOUT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def display_tz(self) -> tzinfo:
        if self.display_timezone.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(
                f"Unknown DISPLAY_TIMEZONE {self.display_timezone!r}"
            ) from exc

    def require(self, *names: str) -> None:
        """Raise ConfigurationError naming every unset setting."""
        missing = [
            type(self).model_fields[name].alias or name.upper()
            for name in names
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings()
