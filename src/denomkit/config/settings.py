# src/denomkit/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (and an optional .env file) with
validation.

Files that USE this module:
- denomkit.application.engine (optimal_max_units bound, default_strategy)
- denomkit.adapters.catalog.loader (catalog_file default path)
- denomkit.shared.logging_conf (setup_logging_from_settings reads the log_* fields)

Files that this module USES:
- denomkit.shared.validators (validation functions for settings)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from denomkit.shared.validators import (
    validate_log_level,  # Validate logging level names
    validate_strategy_name,  # Validate decomposition strategy names
)


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Engine ---
    # Upper bound on the scaled amount (in grid units) for optimal decomposition;
    # the DP table holds one entry per unit.
    optimal_max_units: int = Field(default=1_000_000, alias="DENOMKIT_OPTIMAL_MAX_UNITS", ge=1)
    default_strategy: str = Field(default="greedy", alias="DENOMKIT_DEFAULT_STRATEGY")
    
    # --- Denomination catalog ---
    catalog_file: Optional[Path] = Field(default=None, alias="DENOMKIT_CATALOG_FILE")
    
    # --- Logging ---
    log_level: str = Field(default="INFO", alias="DENOMKIT_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="DENOMKIT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)
    
    @field_validator("default_strategy")
    @classmethod
    def validate_default_strategy(cls, v: str) -> str:
        """Validate and normalize the default strategy name."""
        if not validate_strategy_name(v):
            raise ValueError("DENOMKIT_DEFAULT_STRATEGY must be 'greedy' or 'optimal'")
        return v.strip().lower()
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        if not validate_log_level(v):
            raise ValueError(f"Invalid DENOMKIT_LOG_LEVEL: {v!r}")
        return v.strip().upper()


# Global settings instance
settings = Settings()
