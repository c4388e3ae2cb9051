"""Configuration and environment loading for the Supabase MCP server."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from supabase_mcp import __version__
from supabase_mcp.exceptions import ConfigurationError

DEFAULT_SUPABASE_URL = "https://uwfbirjpzzberwrhkson.supabase.co"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Supabase
    supabase_url: str = DEFAULT_SUPABASE_URL
    supabase_api_key: str = Field(min_length=1)

    # Logging
    log_level: str = "INFO"

    # Server identity reported by initialize
    server_name: str = "supabase-mcp-server"
    server_version: str = __version__
    protocol_version: str = "2024-11-05"

    # Tool defaults
    tables_schema: str = "public"
    sql_function: str = "execute_sql"  # Remote procedure that runs raw SQL


def load_settings() -> Settings:
    """Build settings from the environment.

    Raises:
        ConfigurationError: If a required value is missing or invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]).upper() if err["loc"] else "configuration"
        if err["type"] == "missing":
            raise ConfigurationError(f"{field} environment variable is required") from e
        raise ConfigurationError(f"Invalid {field}: {err['msg']}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
