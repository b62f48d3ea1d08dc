"""
MyNotes Backend — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default that runs the service locally against a
    SQLite file. Production deployments point DATABASE_URL at PostgreSQL.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///./file.db or postgresql+asyncpg://user:pw@host:port/db
    database_url: str = Field(
        default="sqlite+aiosqlite:///./mynotes.db",
        description="Async SQLAlchemy connection URL"
    )

    # Pool sizing only applies to server databases; SQLite ignores it
    db_pool_size: int = Field(default=20, ge=5, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # Create missing tables at startup. Alembic owns the schema in production.
    db_create_tables: bool = Field(default=True)

    # ── Note Store ────────────────────────────────────────────────────────
    # Which NoteStore adapter backs the API: "sql" (database) or "memory"
    note_store: str = Field(default="sql")

    @field_validator("note_store")
    @classmethod
    def validate_note_store(cls, v: str) -> str:
        """Ensures the store backend is one we ship an adapter for."""
        valid_stores = {"sql", "memory"}
        lower = v.lower()
        if lower not in valid_stores:
            raise ValueError(f"Invalid note_store '{v}'. Must be one of: {valid_stores}")
        return lower

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (parsed by the property below)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
