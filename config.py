"""Application settings for the Content Store service.

Values are read from environment variables (or a local .env file) so the
same code runs unchanged in tests, development and deployment.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the store and its HTTP surface."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CONTENT_STORE_", extra="ignore"
    )

    app_name: str = Field(default="Content Store")
    app_version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO")

    # Identity is asserted by an upstream authentication proxy
    identity_header: str = Field(default="X-Identity")
    anonymous_identity: str = Field(default="2vxsx-fae")
    admin_identities: str = Field(
        default="", description="Comma separated identities granted the admin role at startup"
    )

    default_page_size: int = Field(default=20, ge=0)
    max_page_size: int = Field(default=100, ge=1)

    trending_posts_limit: int = Field(default=20, ge=1)
    viral_engagement_threshold: float = Field(default=5.0, ge=0)
    default_effect_intensity: int = Field(default=50, ge=0, le=100)

    @property
    def admin_identity_list(self) -> list[str]:
        """Return admin identities as a list with blanks removed."""
        return [item.strip() for item in self.admin_identities.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
