"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PostgresSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    host: str = "localhost"
    port: int = 5432
    user: str = "bubba"
    password: SecretStr = SecretStr("bubba_dev_password")
    db: str = "bubba"

    @property
    def async_url(self) -> str:
        """Generate async SQLAlchemy connection URL."""
        pwd = self.password.get_secret_value()
        return f"postgresql+asyncpg://{self.user}:{pwd}@{self.host}:{self.port}/{self.db}"


class RedisSettings(BaseSettings):
    """Redis cache configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    host: str = "localhost"
    port: int = 6379
    password: SecretStr = SecretStr("")
    db: int = 0

    @property
    def url(self) -> str:
        """Generate Redis connection URL."""
        pwd = self.password.get_secret_value()
        auth = f":{pwd}@" if pwd else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"


class CacheSettings(BaseSettings):
    """Query cache configuration."""

    model_config = SettingsConfigDict(env_prefix="CACHE_")

    enabled: bool = True
    ttl_seconds: int = 3600


class HTTPSettings(BaseSettings):
    """Outbound HTTP configuration shared by integration clients."""

    model_config = SettingsConfigDict(env_prefix="HTTP_")

    connect_timeout: float = 5.0
    read_timeout: float = 15.0
    max_retries: int = 3
    retry_backoff_seconds: float = 1.0


class ResendSettings(BaseSettings):
    """Resend email/audience API configuration."""

    model_config = SettingsConfigDict(env_prefix="RESEND_")

    api_key: SecretStr = SecretStr("")
    audience_id: str = ""
    api_url: str = "https://api.resend.com"
    from_address: str = "Bubba <hello@bubba.ai>"


class TriggerSettings(BaseSettings):
    """Trigger.dev task queue configuration."""

    model_config = SettingsConfigDict(env_prefix="TRIGGER_")

    secret_key: SecretStr = SecretStr("")
    api_url: str = "https://api.trigger.dev"


class DiscordSettings(BaseSettings):
    """Discord signup notification webhook."""

    model_config = SettingsConfigDict(env_prefix="DISCORD_")

    webhook_url: str | None = None


class AnalyticsSettings(BaseSettings):
    """OpenPanel server-side analytics configuration."""

    model_config = SettingsConfigDict(env_prefix="OPENPANEL_")

    client_id: str = ""
    client_secret: SecretStr = SecretStr("")
    api_url: str = "https://api.openpanel.dev"

    @property
    def enabled(self) -> bool:
        """Analytics is only sent when both credentials are present."""
        return bool(self.client_id and self.client_secret.get_secret_value())


class JWTSettings(BaseSettings):
    """JWT session configuration."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    secret_key: SecretStr = SecretStr("your-jwt-secret-key-min-32-chars-long")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(env_prefix="CORS_")

    origins: str = "http://localhost:3000,http://localhost:3001"
    allow_credentials: bool = True

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into list."""
        return [o.strip() for o in self.origins.split(",") if o.strip()]


class ServicePorts(BaseSettings):
    """Service port configuration."""

    dashboard: int = Field(default=8010, alias="DASHBOARD_PORT")
    marketing: int = Field(default=8011, alias="MARKETING_PORT")
    jobs: int = Field(default=8012, alias="JOBS_PORT")


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables with sensible defaults.
    Use the global `settings` singleton or call `get_settings()`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: LogLevel = LogLevel.INFO

    # Project paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    # Service ports
    ports: ServicePorts = Field(default_factory=ServicePorts)

    # Storage
    postgres: PostgresSettings = Field(default_factory=PostgresSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    # Integrations
    http: HTTPSettings = Field(default_factory=HTTPSettings)
    resend: ResendSettings = Field(default_factory=ResendSettings)
    trigger: TriggerSettings = Field(default_factory=TriggerSettings)
    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)

    # Authentication
    jwt: JWTSettings = Field(default_factory=JWTSettings)

    # Security
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
