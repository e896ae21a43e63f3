"""
Application configuration settings.

Central configuration module using Pydantic BaseSettings with environment variable support.
Loads from .env file and environment variables.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists (python-dotenv)
env_path = Path(".env")
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # App settings
    APP_NAME: str = "Splitr"
    APP_ENV: str = Field(default="local")
    DEBUG: bool = Field(default=False)

    # Local data directory (database, logs)
    SPLITR_DATA_DIR: str = Field(
        default=str(Path.home() / ".splitr"),
        description="Directory holding the SQLite database and log files",
    )

    # Explicit connection string wins over the data directory default
    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="SQLAlchemy database URL; defaults to SQLite inside SPLITR_DATA_DIR",
    )

    @property
    def sqlalchemy_database_uri(self) -> str:
        """
        Build SQLAlchemy database URI with priority:
        1. DATABASE_URL (explicit connection string)
        2. SQLite file inside SPLITR_DATA_DIR
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        data_dir = Path(self.SPLITR_DATA_DIR).expanduser()
        return f"sqlite:///{data_dir / 'splitr.db'}"

    # CORS settings (the desktop frontend talks to the API over localhost)
    CORS_ORIGINS: Union[str, List[str]] = Field(
        default='["http://localhost:34115", "wails://wails"]',
    )

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # OS command execution
    COMMAND_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Seconds before an OS network command is killed (None waits forever)",
    )

    # Batch storage limits (bound parameter ceiling of the backing store)
    ADD_BATCH_CHUNK_SIZE: int = Field(default=10000, gt=0)
    DELETE_BATCH_CHUNK_SIZE: int = Field(default=50000, gt=0)

    # networksetup only takes IPv4 destinations; when off, hosts must be IPv4 literals
    RESOLVE_HOSTNAMES: bool = Field(
        default=False,
        description="Resolve host names to IPv4 addresses before applying routes",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_DIR: Optional[str] = Field(
        default=None,
        description="Directory for rotating log files; defaults to SPLITR_DATA_DIR/logs",
    )

    @property
    def log_dir(self) -> Path:
        if self.LOG_DIR:
            return Path(self.LOG_DIR).expanduser()
        return Path(self.SPLITR_DATA_DIR).expanduser() / "logs"


# Create global settings instance
@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

# Module-level settings instance
settings = get_settings()
