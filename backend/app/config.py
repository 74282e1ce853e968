"""
Products API — Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the middleware and the error route.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Products API", description="OpenAPI title")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pipeline ──────────────────────────────────────────────────────────
    # What: Redirect plain-HTTP requests to HTTPS (307)
    # Set HTTPS_REDIRECT=false when TLS is terminated by a proxy that
    # does not forward the original scheme.
    https_redirect: bool = Field(default=True)

    # What: Path of the generic error route served for unhandled exceptions
    error_path: str = Field(default="/error")

    @field_validator("error_path")
    @classmethod
    def validate_error_path(cls, v: str) -> str:
        """Route paths must be absolute."""
        if not v.startswith("/"):
            raise ValueError(f"Invalid error_path '{v}'. Must start with '/'")
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # LOG_LEVEL and log_level both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
