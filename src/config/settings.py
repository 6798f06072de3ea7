# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings and the default
export options used when a caller does not pass its own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ncexport.core.models import ExportOptions


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === GraphML export defaults ===
    use_directed_edges: bool = False
    use_screen_layout_coordinates: bool = True
    screen_layout_width: float = 1920
    screen_layout_height: float = 1080
    unify_networks: bool = False
    graphml_batch_size: int = 100

    # === Output storage ===
    output_writer: str = "local"
    output_dir: Path = Path("./output")

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("graphml_batch_size")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("graphml_batch_size must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.screen_layout_width <= 0 or self.screen_layout_height <= 0:
            errors.append("SCREEN_LAYOUT_WIDTH and SCREEN_LAYOUT_HEIGHT must be positive")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def export_options(self, **overrides: object) -> ExportOptions:
        """Build ExportOptions from settings, with per-export overrides."""
        values: dict[str, object] = {
            "use_directed_edges": self.use_directed_edges,
            "use_screen_layout_coordinates": self.use_screen_layout_coordinates,
            "screen_layout_width": self.screen_layout_width,
            "screen_layout_height": self.screen_layout_height,
            "unify_networks": self.unify_networks,
        }
        values.update(overrides)
        return ExportOptions(**values)  # type: ignore[arg-type]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-export config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
