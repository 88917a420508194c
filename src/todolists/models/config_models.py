"""Configuration models for todolists.

The persistence mode decides which store backs every command: the
in-memory store kept in the session file, or the SQLite database.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class AppConfig(BaseModel):
    """Main application configuration."""

    persistence: Literal["memory", "sqlite"] = Field(
        default="memory", description="Storage backend for todo lists"
    )
    database_path: str | None = Field(
        default=None, description="SQLite database file (sqlite persistence only)"
    )
    title_max_length: int = Field(
        default=100, description="Maximum length of list and todo titles"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum level written to the log file"
    )

    @field_validator("title_max_length")
    @classmethod
    def validate_title_max_length(cls, v: int) -> int:
        """Titles must allow at least one character."""
        if v < 1:
            raise ValueError("title_max_length must be at least 1")
        return v

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: str | None) -> str | None:
        """Treat blank paths as unset."""
        if v is not None and not v.strip():
            return None
        return v
