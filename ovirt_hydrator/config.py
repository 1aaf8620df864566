"""
Library configuration using Pydantic Settings.

Supports environment variables (prefixed ``OVIRT_``) and .env files.
"""

from functools import lru_cache
import json

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Keys consumed by collection building; never surfaced as plain properties
RESERVED_KEYS: frozenset[str] = frozenset({"link", "action", "special_objects"})

DEFAULT_ATTRIBUTE_KEY = "@attributes"
DEFAULT_TEXT_KEY = "#text"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Engine connection
    api_url: str = "https://localhost/ovirt-engine"
    username: str = "admin@internal"
    password: str | None = None
    verify_ssl: bool = True
    timeout: float = Field(default=30.0, gt=0)
    debug: bool = False

    # XML-to-hash conventions
    attribute_key: str = DEFAULT_ATTRIBUTE_KEY
    text_key: str = DEFAULT_TEXT_KEY
    force_list_tags: list[str] = ["link", "action", "special_objects"]

    # Hydration
    max_depth: int = Field(default=64, ge=1)

    @field_validator("force_list_tags", mode="before")
    @classmethod
    def parse_force_list_tags(cls, v):
        if isinstance(v, str):
            value = v.strip()
            if value.startswith("["):
                try:
                    parsed = json.loads(value)
                    if isinstance(parsed, list):
                        return [str(tag).strip() for tag in parsed if str(tag).strip()]
                except json.JSONDecodeError:
                    pass
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    @field_validator("api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    model_config = {
        "env_prefix": "OVIRT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
