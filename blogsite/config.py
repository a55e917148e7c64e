"""
Tooling configuration for the blog source tree.

This module uses pydantic-settings to manage the settings of the content
tooling (the checker and the command line), not the site itself:
- Content locations
- Logging

Site metadata and menus are compiled-in literals and live in
``blogsite.consts``. Settings are loaded from ``BLOG_``-prefixed environment
variables or a .env file.
"""
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogsite import (
    DEFAULT_AUTHORS_DIR,
    DEFAULT_CONTENT_DIR,
    DEFAULT_PUBLIC_DIR,
    __version__,
)


class LogLevel(str, Enum):
    """Log levels supported by the application."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Environment(str, Enum):
    """Where the tooling is running."""
    DEVELOPMENT = "development"
    CI = "ci"
    PRODUCTION = "production"


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    log_level: LogLevel = LogLevel.INFO
    structured_logging: bool = False


class Settings(BaseSettings):
    """Main settings class for the blog tooling."""
    # Application metadata
    app_name: str = "strfox-blog"
    version: str = __version__
    environment: Environment = Environment.DEVELOPMENT

    # Base paths
    base_dir: Path = Field(default_factory=lambda: Path.cwd())
    content_dir: Optional[Path] = None
    authors_dir: Optional[Path] = None
    public_dir: Optional[Path] = None

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="BLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    @model_validator(mode='after')
    def resolve_directories(self) -> 'Settings':
        """Fill content locations relative to base_dir when not given."""
        if self.content_dir is None:
            self.content_dir = self.base_dir / DEFAULT_CONTENT_DIR
        if self.authors_dir is None:
            self.authors_dir = self.base_dir / DEFAULT_AUTHORS_DIR
        if self.public_dir is None:
            self.public_dir = self.base_dir / DEFAULT_PUBLIC_DIR
        return self


def load_settings() -> Settings:
    """Load settings from environment variables and .env file."""
    return Settings()
