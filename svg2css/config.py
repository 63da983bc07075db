"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2css_log_level: str = "info"
    svg2css_log_format: str = "%(asctime)s %(name)s %(levelname)s %(message)s"

    # Defaults for CLI flags
    svg2css_prefix: str = ""
    svg2css_write_dimensions: bool = False

    # Output file encoding
    svg2css_encoding: str = "utf-8"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


def get_settings() -> Settings:
    """Fresh settings read from the environment and .env."""
    return Settings()
