"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PAGECRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # DSL
    max_source_length: int = Field(
        default=256 * 1024, gt=0, description="Max DSL source length (characters)"
    )

    # Landmarks
    nav_block_type: str = Field(default="navbar", min_length=1, description="Leading landmark type")
    footer_block_type: str = Field(default="footer", min_length=1, description="Trailing landmark type")

    # Output defaults
    default_title: str = Field(default="My Project", description="Page title when settings omit one")
    default_description: str = Field(
        default="Built with pagecraft", description="Meta description when settings omit one"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
