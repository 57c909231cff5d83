from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database
    database_url: str = "sqlite:///./shortlinks.db"
    
    # Short link specific
    base_url: str = "http://127.0.0.1:8000"
    short_code_length: int = Field(8, ge=3, le=10)  # Same bounds as custom codes
    max_code_attempts: int = 3  # Generated-code collisions tolerated before giving up
    custom_code_min_length: int = 3
    custom_code_max_length: int = 10
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # Logs to stdout only when unset
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
