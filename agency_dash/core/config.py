"""
Application Configuration Module

This module defines all configuration settings for the FastAPI application.
Settings are loaded from environment variables (via .env file) using Pydantic.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application-wide configuration settings.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.
    """
    # === Application Metadata ===
    PROJECT_NAME: str = "Agency Dash API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"  # API version prefix for all routes

    # === Server ===
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    # In production, list the actual frontend origins (JSON array in the environment)
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # === Store ===
    # Populate a fresh store with a handful of illustrative records on startup
    SEED_SAMPLE_DATA: bool = True

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    LOG_FILE: Optional[str] = None  # e.g. "logs/agency_dash.log"; console only when unset

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",        # Load environment variables from .env file
        case_sensitive=True,    # Environment variable names must match case
        extra="ignore"          # Ignore extra environment variables not defined here
    )

# Create a single global settings instance
# This is imported throughout the application for configuration access
settings = Settings()
