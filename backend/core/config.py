from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from declension.rules import default_gender_path, default_rules_path


class Settings(BaseSettings):
    """Environment (or .env) configuration."""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Rule and gender tables, JSON or YAML by file suffix. Bundled tables by default.
    RULES_PATH: Path = default_rules_path()
    GENDER_PATH: Path = default_gender_path()

    # Server
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
