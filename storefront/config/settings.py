from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Values are loaded from environment variables and the .env file.
    """

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Storefront API"
    PROJECT_DESCRIPTION: str = "Product catalog, user accounts and checkout"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    CORS_ORIGINS: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # Database Settings
    DATABASE_URL: str | None = Field(None, description="Full async SQLAlchemy URL, overrides the DB_* parts")
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("storefront", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables at startup instead of using Alembic")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(10, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(20, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections after N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Checkout transaction retries
    CHECKOUT_MAX_ATTEMPTS: int = Field(3, description="Attempts for a checkout hitting a transient conflict")
    CHECKOUT_RETRY_BACKOFF: float = Field(0.05, description="Linear backoff between checkout attempts, in seconds")

    # Catalog
    PRODUCTS_PAGE_SIZE: int = Field(12, description="Default page size for product listings")

    # JWT Settings
    JWT_SECRET_KEY: str = Field(..., description="Secret key used to sign access tokens")
    JWT_ALGORITHM: str = Field("HS256", description="JWT signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, description="Access token lifetime in minutes")
    BCRYPT_ROUNDS: int = Field(12, description="bcrypt cost factor")

    # Bootstrap administrator
    ADMIN_EMAIL: str | None = Field(None, description="Email of the administrator created at startup")
    ADMIN_PASSWORD: str | None = Field(None, description="Password of the administrator created at startup")
    ADMIN_NAME: str = Field("Administrator", description="Display name of the bootstrap administrator")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        if isinstance(value, str) and not value.strip().startswith("["):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("CHECKOUT_MAX_ATTEMPTS")
    @classmethod
    def validate_checkout_attempts(cls, v):
        if v < 1:
            raise ValueError("CHECKOUT_MAX_ATTEMPTS must be at least 1")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy connection URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment."""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local", "test"]


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.
    Environment variables are only read once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
