# movieshelf/core/config.py

from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="movieshelf", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_allow_origins: List[str] = Field(default_factory=list, description="CORS allowed origins")

    # JWT auth
    secret_key: str = Field(default="secret-jwt-key", description="JWT signing key")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(default=60 * 24, description="JWT lifetime (minutes)")

    # Database
    database_url: str = Field(default="sqlite:///./movieshelf.db", description="SQLAlchemy URL")
    sql_echo: bool = Field(default=False, description="Echo SQL statements")

    # TMDB API
    tmdb_access_token: Optional[str] = Field(default=None, description="TMDB read access token")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDB API URL")
    tmdb_language: str = Field(default="en-US", description="TMDB response language")
    tmdb_timeout: float = Field(default=10.0, description="Request timeout")

    @property
    def tmdb_headers(self) -> dict[str, str]:
        """TMDB API request headers"""
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.tmdb_access_token}"
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
