from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = Field(default="sizefill")
    app_env: Literal["dev", "prod"] = Field(default="dev")
    app_version: str = Field(default="0.1.0")

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # Size resolution
    default_deviation: float = Field(default=0.0, ge=0.0, lt=1.0)
    # Largest byte count a magnitude may resolve to (unsigned 64-bit)
    max_size: int = Field(default=2**64 - 1, gt=0)

    # Generation
    buffer_size: int = Field(default=1024, gt=0)

    # Ignore extra/unknown keys from environment/.env
    model_config = SettingsConfigDict(
        env_prefix="SIZEFILL_", env_file=".env", case_sensitive=False, extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
