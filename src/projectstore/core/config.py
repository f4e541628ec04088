"""Configuration management for ProjectStore."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """ProjectStore configuration settings."""

    # General settings
    app_name: str = "ProjectStore"
    debug: bool = False
    log_level: str = "INFO"

    # Storage settings
    backend: Literal["memory", "file"] = "file"
    data_dir: Path = Field(default=Path("data"))
    file_extension: str = ".txt"

    # API settings
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    model_config = {
        "env_prefix": "PROJECTSTORE_",
        "env_file": ".env",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
