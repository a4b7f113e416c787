from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "happiness_tracker.db")


class Settings(BaseSettings):
    database_url: str = Field(f"sqlite:///{DEFAULT_DB_PATH}", alias="TRACKER_DATABASE_URL")
    store_namespace: str = Field("happiness-vibe-tracker", alias="TRACKER_STORE_NAMESPACE")
    seed_sample_data: bool = Field(False, alias="TRACKER_SEED_SAMPLE_DATA")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
