from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PATIENTS_TABLE: str
    IS_OFFLINE: bool = False
    OFFLINE_ENDPOINT: str = "http://localhost:8000"
    OFFLINE_REGION: str = "localhost"
    AWS_REGION: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
