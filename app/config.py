"""Configuration management for the StackIt API."""
import os
from urllib.parse import urlparse
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    app_name: str = Field(default="StackIt API", env="APP_NAME")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Database Configuration (Heroku compatible)
    database_url: str = Field(default="", env="DATABASE_URL")
    db_name: str = Field(default="", env="DB_NAME")
    db_user: str = Field(default="", env="DB_USER")
    db_password: str = Field(default="", env="DB_PASSWORD")
    db_host: str = Field(default="localhost", env="DB_HOST")
    db_port: int = Field(default=5432, env="DB_PORT")
    db_pool_min: int = Field(default=2, env="DB_POOL_MIN")
    db_pool_max: int = Field(default=20, env="DB_POOL_MAX")

    # Authentication Configuration
    secret_key: str = Field(
        default="your-secret-key-change-this-in-production-use-openssl-rand-hex-32",
        env="SECRET_KEY"
    )
    access_token_expire_minutes: int = Field(default=60 * 24 * 7, env="ACCESS_TOKEN_EXPIRE_MINUTES")
    auth_cookie_name: str = Field(default="stackit_auth", env="AUTH_COOKIE_NAME")
    auth_cookie_domain: str = Field(default="", env="AUTH_COOKIE_DOMAIN")
    auth_cookie_secure: bool = Field(default=False, env="AUTH_COOKIE_SECURE")
    auth_cookie_samesite: str = Field(default="lax", env="AUTH_COOKIE_SAMESITE")
    auth_cookie_max_age: int = Field(default=60 * 60 * 24 * 7, env="AUTH_COOKIE_MAX_AGE")

    # Notifications
    notifications_enabled: bool = Field(default=True, env="NOTIFICATIONS_ENABLED")

    # CORS Configuration
    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from environment variable or use defaults."""
        allowed_origins_str = os.getenv(
            "ALLOWED_ORIGINS",
            "http://localhost:3000,http://localhost:5173"
        )
        origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]
        return sorted(set(origins))

    @property
    def db_config(self) -> dict:
        """Get database configuration, preferring DATABASE_URL for Heroku."""
        if self.database_url and self.database_url.strip():
            parsed = urlparse(self.database_url)
            return {
                'dbname': parsed.path[1:],  # Remove leading slash
                'user': parsed.username,
                'password': parsed.password,
                'host': parsed.hostname,
                'port': parsed.port or 5432
            }
        elif self.db_name.strip() and self.db_user.strip():
            return {
                'dbname': self.db_name,
                'user': self.db_user,
                'password': self.db_password,
                'host': self.db_host,
                'port': self.db_port
            }
        else:
            # Fallback configuration for development
            return {
                'dbname': 'stackit',
                'user': 'postgres',
                'password': 'postgres',
                'host': 'localhost',
                'port': 5432
            }

    model_config = SettingsConfigDict(
        env_file=None,  # Don't load from .env file
        case_sensitive=False,
        extra="ignore"
    )

def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
