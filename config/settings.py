"""
Configuration settings for the Code Analysis API.
"""

from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="0.0.0.0", description="Host to bind")
    port: int = Field(default=3000, description="Port to bind")
    workers: int = Field(default=1, description="Number of uvicorn workers")

    # Provider Settings
    gemini_api_key: Optional[str] = Field(default=None, description="Gemini API key")
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    gemini_timeout: Optional[float] = Field(default=120.0, description="Provider timeout in seconds")
    gemini_temperature: Optional[float] = Field(default=None, ge=0, le=2)
    gemini_top_p: Optional[float] = Field(default=None, ge=0, le=1)
    gemini_max_output_tokens: Optional[int] = Field(default=None, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    log_file: Optional[str] = Field(default=None)

    # CORS
    cors_origins: str = Field(default="*")

    # Mode
    mock_mode: bool = Field(default=False, description="Use the offline mock runner")

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
