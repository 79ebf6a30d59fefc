from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class Settings(BaseSettings):
    """
    Central configuration for the Dane County Elections MCP server.

    All values are loaded from environment variables with `DANE_ELECTIONS_` prefix.
    You can also use a `.env` file in the working directory during development.
    """

    model_config = SettingsConfigDict(
        env_prefix="DANE_ELECTIONS_",
        env_file=".env",
        extra="ignore",
    )

    # General
    log_level: str = "INFO"
    server_port: int = 8000
    server_host: str = "0.0.0.0"
    transport: str = "stdio"  # "stdio" or "http"

    # Upstream API
    base_url: str = "https://api.danecounty.gov"
    user_agent: str = f"dane-county-elections-mcp/{__version__}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from environment."""
    return Settings()
