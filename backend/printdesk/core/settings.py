"""
PrintDesk - Configuration Management with pydantic-settings

Provides validated, type-safe configuration from environment variables.
All settings can be overridden via environment variables or .env file.
"""
from functools import lru_cache
from typing import Annotated, Optional, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_COLOR_OPTIONS = ["black", "blue", "lavender", "pink", "green", "yellow"]


class Settings(BaseSettings):
    """
    Application settings with validation.

    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ===================
    # Application Settings
    # ===================
    PROJECT_NAME: str = "PrintDesk"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    ENVIRONMENT: str = Field(default="development", description="deployment environment")

    # ===================
    # Database Settings
    # ===================
    DATABASE_URL: str = Field(
        default="sqlite:///./printdesk.db",
        description="SQLAlchemy database URL"
    )
    DB_ECHO: bool = Field(default=False, description="Log every SQL statement")

    # ===================
    # CORS Settings
    # ===================
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Allowed CORS origins"
    )

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated string to list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # ===================
    # Catalog Settings
    # ===================
    COLOR_OPTIONS: Annotated[List[str], NoDecode] = Field(
        default=DEFAULT_COLOR_OPTIONS,
        description="Enumerated colour set offered for orders and stock charts"
    )

    @field_validator("COLOR_OPTIONS", mode="before")
    @classmethod
    def parse_color_options(cls, v):
        """Parse comma-separated string to list."""
        if isinstance(v, str):
            return [color.strip() for color in v.split(",") if color.strip()]
        return v

    # ===================
    # Remote Data Gateway
    # ===================
    API_URL: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the order/colour/filament REST service"
    )
    API_TIMEOUT_SECONDS: float = Field(default=10.0, description="Per-request timeout for the gateway")

    # ===================
    # Logging Settings
    # ===================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format: json or text")
    LOG_FILE: Optional[str] = Field(default=None, description="Log file path (optional)")
    AUDIT_LOG_FILE: Optional[str] = Field(default="./logs/audit.log", description="Audit log file path")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once per process.
    """
    return Settings()


# Convenience alias
settings = get_settings()
