"""Application configuration loaded from environment variables."""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./partners.db"
    DATABASE_ECHO: bool = False
    # Local SQLite deployments have no migration step, so tables are created on boot
    CREATE_TABLES_ON_STARTUP: bool = True

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def ensure_async_driver(cls, v: str) -> str:
        """Rewrite plain postgresql:// and sqlite:// URLs to their async drivers."""
        if v.startswith("postgresql://"):
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif v.startswith("sqlite://"):
            v = v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        # asyncpg uses 'ssl' parameter, not 'sslmode' (psycopg2/libpq specific)
        if "sslmode=" in v:
            v = v.replace("sslmode=", "ssl=")
        return v

    # CORS - can be "*" for all origins or comma-separated list
    CORS_ORIGINS: str = "*"

    # Public links rendered into the dashboard, embed snippet and tx rows
    PUBLIC_URL: str = "https://partners.pbtc21.dev"
    EXPLORER_TX_URL: str = "https://explorer.hiro.so/txid/"

    # Page sizes
    LEADERBOARD_LIMIT: int = 50
    DASHBOARD_EARNINGS_LIMIT: int = 50
    ADMIN_RECENT_EARNINGS_LIMIT: int = 20
    LANDING_PROSPECT_LIMIT: int = 12

    # Demo earnings simulation (microSTX, inclusive range).
    # Simulated volume models gross flow, earnings model the fee share.
    SIMULATED_EARNING_MIN_USTX: int = 1000
    SIMULATED_EARNING_MAX_USTX: int = 100999
    SIMULATED_VOLUME_MULTIPLIER: int = 10

    # slowapi limit string for the bulk demo endpoints
    BULK_RATE_LIMIT: str = "30/minute"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    class Config:
        env_file = (".env", "../.env")
        case_sensitive = True
        extra = "allow"


settings = Settings()
