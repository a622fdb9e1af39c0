"""
Configuration management for the Employee Self-Service backend
"""
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_ENVS = ("local", "staging", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings read from the environment (or a local .env file)"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DATABASE_URL: str = Field(
        default="sqlite:///./self_service.db",
        description="SQLAlchemy database URL; SQLite tables are created on startup"
    )

    # Signing key for access tokens; must be replaced outside local
    JWT_SECRET_KEY: str = Field(default="change-me-local-only")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRE_MINUTES: int = Field(default=120, description="Access token lifetime")

    APP_ENV: str = Field(default="local", description="local, staging or prod")
    LOG_LEVEL: str = Field(default="INFO")

    # Comma-separated; "*" is only accepted outside prod
    ALLOWED_ORIGINS: str = Field(default="*")

    VERSION: Optional[str] = Field(default=None, description="Build version (git SHA or semver)")

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        if v not in APP_ENVS:
            raise ValueError(f"APP_ENV must be one of {list(APP_ENVS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")
        return level

    def validate_production(self) -> None:
        """
        Refuse unsafe settings when APP_ENV is prod.

        Raises:
            ValueError: If the JWT secret is shorter than 32 characters or
                CORS origins are not listed explicitly
        """
        if self.APP_ENV != "prod":
            return

        if len(self.JWT_SECRET_KEY) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters in production environment")

        if not self.ALLOWED_ORIGINS or self.ALLOWED_ORIGINS == "*":
            raise ValueError("ALLOWED_ORIGINS must be explicitly set (not '*') in production environment")

    def get_allowed_origins_list(self) -> List[str]:
        """Allowed CORS origins as a list (['*'] when unrestricted)"""
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

if settings.APP_ENV == "prod":
    settings.validate_production()
