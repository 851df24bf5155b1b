# deinflector/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "deinflector"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # 'json' or 'console'

    # --- Languages ---
    # JSON list in the environment, e.g. ENABLED_LANGUAGES='["en","ko"]'
    ENABLED_LANGUAGES: List[str] = ["en", "ja", "es", "ko"]
    # Build every descriptor at startup; when False, build on first lookup.
    EAGER_LOAD: bool = True

    # --- Static Tables ---
    # Directory holding <name>.json tables that replace the packaged ones.
    TABLES_DIR: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
