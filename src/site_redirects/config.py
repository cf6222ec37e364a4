"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content layout
    content_root: Path = Field(
        default=Path("posts"), description="Directory holding one folder per post"
    )
    metadata_filename: str = Field(
        default="index.qmd", description="Metadata file inside each post folder"
    )
    category_key: str = Field(
        default="categories", description="Metadata key holding the category list"
    )

    # Output
    redirects_file: Path = Field(
        default=Path("_site/_redirects"), description="Redirect file read by the host"
    )
    posts_prefix: str = Field(
        default="/posts", description="Route under which posts are published"
    )

    log_file: Path | None = Field(default=None, description="Optional debug log file")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
