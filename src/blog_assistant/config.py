"""Application configuration via environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Console configuration loaded from environment variables."""

    model_config = {"env_prefix": ""}

    blog_api_base_url: str = Field(
        description="Blog API entry point, e.g. https://example.com/blog/index.php"
    )
    bot_name: str = Field(default="BlogBot", description="Name the assistant greets with")
    log_level: str = Field(default="warning", description="Log level")

    @field_validator("blog_api_base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("BLOG_API_BASE_URL must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"LOG_LEVEL is not a valid level name: {v!r}")
        return v.lower()
