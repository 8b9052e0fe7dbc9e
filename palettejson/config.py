"""Engine configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from PALETTEJSON_* environment variables."""

    # Schema
    SCHEMA_VERSION: str = "0.1"
    STRUCTURAL_BACKEND: Literal["builtin", "jsonschema"] = "builtin"

    # Semantic pass
    SEMANTIC_ON_STRUCTURAL_FAILURE: bool = True

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = False

    model_config = {"env_prefix": "PALETTEJSON_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
