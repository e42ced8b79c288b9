"""
Configuration management for the timesheet grouping tools.
"""

from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GroupingConfig(BaseSettings):
    """Configuration settings read from the environment and ``.env``."""

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Grouping behaviour
    strict_representatives: bool = Field(
        default=False, alias="STRICT_REPRESENTATIVES"
    )

    # Output
    html_output_dir: Path = Field(default=Path("."), alias="HTML_OUTPUT_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    def resolve_output_path(self, path: str) -> Path:
        """Place relative output paths under ``html_output_dir``."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.html_output_dir / candidate


def load_config(env_file: Optional[str] = None) -> GroupingConfig:
    """Load configuration from environment variables and .env file.

    Without ``env_file`` the .env of the working directory is used, the same
    file GroupingConfig reads.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    return GroupingConfig()


# Global configuration instance
_config: Optional[GroupingConfig] = None


def get_config() -> GroupingConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> GroupingConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
