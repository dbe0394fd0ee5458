"""Configuration management for Markdown Toggle."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Presentation attributes used by the style registry
    font_family: str = Field(
        default="Helvetica",
        alias="MARKDOWN_TOGGLE_FONT_FAMILY",
    )
    code_font_family: str = Field(
        default="Menlo",
        alias="MARKDOWN_TOGGLE_CODE_FONT_FAMILY",
    )
    font_size: float = Field(
        default=16.0,
        gt=0,
        alias="MARKDOWN_TOGGLE_FONT_SIZE",
    )
    header1_size: float = Field(
        default=24.0,
        gt=0,
        alias="MARKDOWN_TOGGLE_HEADER1_SIZE",
    )
    header2_size: float = Field(
        default=22.0,
        gt=0,
        alias="MARKDOWN_TOGGLE_HEADER2_SIZE",
    )
    header3_size: float = Field(
        default=20.0,
        gt=0,
        alias="MARKDOWN_TOGGLE_HEADER3_SIZE",
    )
    text_color: str = Field(
        default="#000000",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        alias="MARKDOWN_TOGGLE_TEXT_COLOR",
    )

    # Conversion settings
    default_output_format: str = Field(
        default=".md",
        alias="MARKDOWN_TOGGLE_OUTPUT_FORMAT",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
