"""Configuration management for the BundlBe client."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="BUNDLBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )
    
    # Backend Configuration
    api_base_url: str = Field(
        default="https://earhvvozazevfifnvwke.supabase.co/functions/v1",
        description="Base URL of the activation backend"
    )
    request_timeout_seconds: float = Field(default=5.0, description="HTTP request timeout in seconds")
    
    # Activation Cache Configuration
    verification_ttl_hours: int = Field(default=24, description="Hours a successful activation is trusted without a new /login call")
    last_verified_key: str = Field(default="BundlBe_LastVerified", description="Store key for the last verification timestamp")
    paywall_suppress_key: str = Field(default="BundlBe_PaywallSuppress", description="Store key for the paywall suppression flag")
    
    # Local Store Configuration
    store_backend: str = Field(default="MEMORY", description="Key-value store backend (MEMORY or JSON_FILE)")
    store_path: Optional[str] = Field(default=None, description="File path for the JSON_FILE store backend")
    
    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render log lines as JSON")
    
    @property
    def api_base_url_normalized(self) -> str:
        """Get the base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")


# Global settings instance
settings = Settings()
